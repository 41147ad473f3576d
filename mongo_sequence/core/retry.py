# mongo_sequence/core/retry.py
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from mongo_sequence.core.exceptions import CounterNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_creation_race(exc: BaseException) -> bool:
    """True when the upsert created the counter and returned no prior document."""
    return isinstance(exc, CounterNotFoundError)


class RetryPolicy:
    """Re-runs an async attempt when its error matches ``retry_on``.

    ``max_retries`` counts retries after the first attempt, so the default
    policy runs the command at most twice. Errors that do not match the
    predicate, and the error of the final attempt, propagate unchanged.
    """

    def __init__(
        self,
        max_retries: int = 1,
        retry_on: Callable[[BaseException], bool] = is_creation_race,
    ):
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self.max_retries = max_retries
        self.retry_on = retry_on

    async def run(self, attempt: Callable[[], Awaitable[T]], label: Optional[str] = None) -> T:
        retries = 0
        while True:
            try:
                return await attempt()
            except Exception as e:
                if retries >= self.max_retries or not self.retry_on(e):
                    raise
                retries += 1
                logger.info(f"Retrying {label or 'operation'} ({retries}/{self.max_retries}) after: {e}")

    def __repr__(self) -> str:
        return f"RetryPolicy(max_retries={self.max_retries}, retry_on={getattr(self.retry_on, '__name__', self.retry_on)!r})"


NO_RETRY = RetryPolicy(max_retries=0)
