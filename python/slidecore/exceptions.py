"""Exception hierarchy shared by the solver core and the service layer."""


class SlideError(Exception):
    """Base exception for sliding-puzzle errors."""


class InvalidBoardError(SlideError, ValueError):
    """Raised when a tile list cannot describe a board of the given size."""


class IllegalMoveError(SlideError):
    """Raised when a replayed move would push the blank off the board."""


class SearchStateError(SlideError):
    """Raised on a phase transition the search state machine does not allow."""


class ConfigError(SlideError):
    """Raised when an environment setting cannot be parsed."""


class RequestError(SlideError):
    """Raised by the request handler; the message is shown to the client."""

    def __init__(self, message: str, status: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
