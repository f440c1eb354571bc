"""Exception hierarchy for MCP Jira Tempo."""

from typing import Any


class MCPJiraTempoError(Exception):
    """Base class for all errors raised by this package."""


class ParseError(MCPJiraTempoError, ValueError):
    """Raised when a duration, date or time literal cannot be parsed."""


class NotFoundError(MCPJiraTempoError, LookupError):
    """Raised when an issue, user or worker cannot be resolved."""


class UpstreamError(MCPJiraTempoError):
    """Raised when Jira or Tempo answers with a non-2xx status."""

    def __init__(self, service: str, status_code: int | None, body: str = "") -> None:
        self.service = service
        self.status_code = status_code
        self.body = body
        status = status_code if status_code is not None else "?"
        super().__init__(f"{service} API error {status}: {body}")

    @classmethod
    def from_http_error(cls, service: str, error: Any) -> "UpstreamError":
        """Build an UpstreamError (or a subclass) from a requests HTTPError.

        Args:
            service: Name of the remote service ("Jira" or "Tempo")
            error: The ``requests.exceptions.HTTPError`` that was raised

        Returns:
            An UpstreamError, or MCPJiraTempoAuthenticationError for 401/403
        """
        response = getattr(error, "response", None)
        status_code = getattr(response, "status_code", None)
        body = ""
        if response is not None:
            try:
                body = response.text
            except Exception:  # noqa: BLE001 - body is informational only
                body = "(could not decode response content)"
        if not body:
            body = str(error)
        if status_code in (401, 403):
            return MCPJiraTempoAuthenticationError(service, status_code, body)
        return cls(service, status_code, body)


class MCPJiraTempoAuthenticationError(UpstreamError):
    """Raised when Jira or Tempo rejects the configured credentials."""
