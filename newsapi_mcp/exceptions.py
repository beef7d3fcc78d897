class AuthenticationError(Exception):
    """Raised when the News API key is rejected."""


class IntegrationError(Exception):
    """Raised when a News API call fails or returns an unusable body."""


class RateLimitError(Exception):
    """Raised when the News API rate limit is hit."""
