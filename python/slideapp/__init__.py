"""HTTP service and terminal front end for the sliding puzzle solver."""
