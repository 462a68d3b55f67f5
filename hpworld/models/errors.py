class SignupError(Exception):
    """Base class for signup workflow failures."""


class ValidationError(SignupError):
    """User-correctable input problem. Answered with HTTP 400 by the relay."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.message = message
        self.field = field


class RelayError(SignupError):
    """The relay rejected the submission or failed internally."""


class DownstreamError(SignupError):
    """A coupon call failed or came back without a coupon code."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkError(SignupError):
    """An outbound call raised before a response could be read."""


class InternalError(SignupError):
    """Unexpected fault inside the relay. Answered with HTTP 500."""
