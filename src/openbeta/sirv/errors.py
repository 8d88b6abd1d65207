"""Errors raised by the Sirv media client."""


class SirvError(Exception):
    """Base class for Sirv client failures."""


class SirvApiError(SirvError):
    """Raised when the Sirv API answers a request with an unexpected status."""

    def __init__(self, operation: str, status_text: str) -> None:
        super().__init__(f"Sirv API.{operation}() error: {status_text}")
        self.operation = operation
        self.status_text = status_text


class SirvTokenUnavailableError(SirvError):
    """Raised when no bearer token could be obtained for an operation."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Sirv API.{operation}(): unable to get a token")
        self.operation = operation
