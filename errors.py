"""Errors raised by the profile submission flow.

All of them are recoverable: the form controller turns each one into a
user-facing notice and the page keeps running.
"""


class HackHubError(Exception):
    """Base class for application errors."""


class AuthRequired(HackHubError):
    """A gated action was attempted without a signed-in user."""


class ValidationFailed(HackHubError):
    """Required form fields are missing."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


class SubmissionFailed(HackHubError):
    """The profile endpoint rejected the request or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class TokenAcquisitionFailed(SubmissionFailed):
    """The identity provider could not issue a bearer token."""
