from slidecore.engine.search.astar import a_star
from slidecore.engine.search.idastar import ida_star
from slidecore.engine.search.state import Phase, SearchResult, SearchState

__all__ = ["Phase", "SearchResult", "SearchState", "a_star", "ida_star"]
