"""Jira API exception hierarchy.

Every error carries the HTTP status that caused it so callers (and the retry
decorator) can tell transient failures from permanent ones.
"""


class JiraAPIError(Exception):
    """Base exception for Jira API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class JiraValidationError(JiraAPIError):
    """Raised when Jira rejects the payload (400), e.g. a malformed ADF body."""

    def __init__(self, message: str = "Validation error."):
        super().__init__(message, status_code=400)


class JiraAuthenticationError(JiraAPIError):
    """Raised when authentication fails (401)."""

    def __init__(self, message: str = "Authentication failed. Check JIRA_EMAIL and JIRA_API_TOKEN."):
        super().__init__(message, status_code=401)


class JiraPermissionError(JiraAPIError):
    """Raised when the user lacks permissions (403) or read-only mode blocks writes."""

    def __init__(self, message: str = "Permission denied."):
        super().__init__(message, status_code=403)


class JiraNotFoundError(JiraAPIError):
    """Raised when an issue, comment or project does not exist (404)."""

    def __init__(self, message: str = "Resource not found."):
        super().__init__(message, status_code=404)


class JiraRateLimitError(JiraAPIError):
    """Raised when Jira or the local limiter throttles a call (429)."""

    def __init__(self, message: str = "Rate limit exceeded."):
        super().__init__(message, status_code=429)
