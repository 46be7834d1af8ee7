class ApiError(Exception):
    """Error response from the API, carrying the server's message."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class Unauthorized(ApiError):
    """Missing, rejected or expired token. The session has already been cleared."""

    def __init__(self, message: str = "Not authorized") -> None:
        super().__init__(401, message)


class ServiceUnavailable(ApiError):
    """The API could not be reached or did not answer in time."""

    def __init__(self, message: str) -> None:
        super().__init__(0, message)
