import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from newsapi_mcp.exceptions import AuthenticationError, IntegrationError, RateLimitError
from newsapi_mcp.formatting import format_error

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchOutcome(Generic[T]):
    """Either the parsed response or the error that replaced it."""

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RemoteFetchTool(Generic[T]):
    """One remote call rendered as text: fetch, then render the result or the error.

    `action` completes the error line, e.g. "searching articles" gives
    "Error searching articles: <message>". `render` receives the fetched value
    and the keyword arguments the tool was called with.
    """

    name: str
    action: str
    fetch: Callable[..., T]
    render: Callable[[T, dict[str, Any]], str]

    def perform(self, **kwargs) -> FetchOutcome[T]:
        try:
            return FetchOutcome(value=self.fetch(**kwargs))
        except (AuthenticationError, IntegrationError, RateLimitError) as e:
            logger.warning("%s failed: %s", self.name, e)
            return FetchOutcome(error=e)

    def render_outcome(self, outcome: FetchOutcome[T], kwargs: dict[str, Any]) -> str:
        if not outcome.ok:
            return format_error(self.action, outcome.error)
        return self.render(outcome.value, kwargs)

    def __call__(self, **kwargs) -> str:
        return self.render_outcome(self.perform(**kwargs), kwargs)
