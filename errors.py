class ApiError(Exception):
    """Error that maps directly onto an HTTP error response."""

    status_code = 500
    error_code = "SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error_code": self.error_code, "message": self.message}


class ValidationError(ApiError):
    status_code = 400
    error_code = "VALIDATION_ERROR"


class RidesNotFoundError(ApiError):
    status_code = 404
    error_code = "RIDES_NOT_FOUND_ERROR"

    def __init__(self, message: str = "Could not find any rides"):
        super().__init__(message)


class ServerError(ApiError):
    # message stays generic, details go to the log only
    def __init__(self, message: str = "Unknown error"):
        super().__init__(message)
