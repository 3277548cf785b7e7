from slideapp.web.app import create_app
from slideapp.web.handler import SUPPORTED_SIZES, handle_solve, parse_request

__all__ = ["SUPPORTED_SIZES", "create_app", "handle_solve", "parse_request"]
