class RosterError(Exception):
    """Base class for failures talking to the roster backend."""


class AuthenticationError(RosterError):
    """The backend answered 401: the session token is missing or expired."""


class ApiError(RosterError):
    def __init__(self, status_code: int, text: str) -> None:
        super().__init__(f"HTTP {status_code}: {text}")
        self.status_code = status_code
        self.text = text


class TransportError(RosterError):
    """Network failure, or a response body that could not be decoded."""
