"""Failures raised by the API test helpers."""


class HelperError(Exception):
    """Base class for helper failures."""


class ContractViolation(HelperError, AssertionError):
    """A response broke the contract the calling test relies on.

    Subclasses ``AssertionError`` so pytest reports it as a test failure
    rather than an error in the harness.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: object | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SessionCookieError(HelperError, RuntimeError):
    """The login response did not set a session cookie."""
