"""Error taxonomy for rewrite and contact flows.

Clients and validators raise these; the orchestrating boundaries catch
them and show ``user_message`` to the caller.
"""

from __future__ import annotations


class SayBetterError(Exception):
    """Base class for every error surfaced to the user."""

    default_message = "Something went wrong."

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_message
        super().__init__(self.detail)

    @property
    def user_message(self) -> str:
        return self.detail


class ConfigurationError(SayBetterError):
    """A required credential or setting is missing. Not retryable."""

    default_message = "required configuration is missing."

    @property
    def user_message(self) -> str:
        return f"Server error: {self.detail}"


class UpstreamAuthError(SayBetterError):
    """The provider rejected the API key."""

    default_message = (
        "ERROR: Invalid API key. Please check your .env file and make sure "
        "the API key is correct."
    )


class UpstreamPermissionError(SayBetterError):
    """The API key is valid but lacks permission for the request."""

    default_message = (
        "ERROR: API key does not have permission. Check your provider "
        "project settings."
    )


class UpstreamGenericError(SayBetterError):
    """Any other error reported by the provider."""

    def __init__(self, code: int | str | None, message: str | None = None):
        self.code = code
        self.message = message or "Unknown error"
        super().__init__(f"API error ({code}): {self.message}")


class UnexpectedFormatError(SayBetterError):
    """The provider answered with a payload of unknown shape."""

    default_message = "Error: unexpected response format. Check server logs for details."


class TransportError(SayBetterError):
    """The call to the provider itself failed (network, timeout)."""

    @property
    def user_message(self) -> str:
        return "Internal server error calling the text-generation API."


class ContactValidationError(SayBetterError):
    """A contact form submission is missing required fields or has a malformed header field."""

    default_message = "Missing required fields"
