"""Search error taxonomy.

Only ConfigurationError and RetryBudgetExhausted ever reach a caller. The
per-endpoint errors are attached to FetchOutcome objects and drive rotation.
"""


class SearchError(Exception):
    pass


class ConfigurationError(SearchError, ValueError):
    """No usable SearXNG endpoints are configured."""


class TransportError(SearchError):
    """Network failure or non-2xx status from one endpoint."""

    def __init__(self, endpoint: str, message: str, status_code: int | None = None):
        super().__init__(f"{endpoint}: {message}")
        self.endpoint = endpoint
        self.status_code = status_code


class BotRedirectError(SearchError):
    """Endpoint kept serving its landing page instead of search results."""

    def __init__(self, endpoint: str):
        super().__init__(f"{endpoint}: redirected to home page")
        self.endpoint = endpoint


class RetryBudgetExhausted(SearchError):
    def __init__(self, query: str, attempts: int, last_error: Exception | None = None):
        message = f'No results page obtained for "{query}" after {attempts} attempts'
        if last_error is not None:
            message += f" (last error: {last_error})"
        super().__init__(message)
        self.query = query
        self.attempts = attempts
        self.last_error = last_error
