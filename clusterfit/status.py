from enum import Enum


class StatusCode(Enum):
    """Closed set of outcomes returned by every fit operation"""
    SUCCESS = "success"
    INVALID_PARAMETER = "invalid_parameter"
    NOT_INITIALIZED = "not_initialized"
    OUT_OF_RANGE = "out_of_range"
    FAILURE = "failure"


class StatusCodeError(Exception):
    """
    Raised inside the package to unwind to the nearest fit operation,
        which converts it back into its StatusCode
    """

    def __init__(self, status_code: StatusCode, message: str = ""):
        self.status_code = status_code
        super().__init__(message or status_code.value)
