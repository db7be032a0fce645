import time
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


@dataclass
class RetryResult:
    """Outcome of a retried operation."""
    ok: bool
    value: Any = None
    error: Optional[Exception] = None
    attempts: int = 0

    @property
    def error_message(self):
        if self.error is None:
            return None
        return str(self.error) or type(self.error).__name__


def retry_with_backoff(operation: Callable[[], Any], attempts: int = 3, delay: float = 1.0,
                       backoff: str = 'fixed', sleep: Callable[[float], None] = time.sleep,
                       retry_on=(Exception,), label: str = 'operation') -> RetryResult:
    """
    Call ``operation`` until it returns without raising, at most ``attempts`` times.

    Between attempts waits ``delay`` seconds ('fixed') or ``delay * attempt``
    seconds ('linear'). No wait follows the last attempt. Exceptions outside
    ``retry_on`` propagate immediately.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")
    if backoff not in ('fixed', 'linear'):
        raise ValueError(f"Unknown backoff strategy: {backoff}")

    last_error = None
    for attempt in range(1, attempts + 1):
        try:
            value = operation()
            return RetryResult(ok=True, value=value, attempts=attempt)
        except retry_on as e:
            last_error = e
            if attempt == attempts:
                break
            logger.warning(f"{label} failed, retrying ({attempt}/{attempts})... Error: {e}")
            wait = delay * attempt if backoff == 'linear' else delay
            if wait > 0:
                sleep(wait)

    logger.error(f"{label} failed after {attempts} attempts: {last_error}")
    return RetryResult(ok=False, error=last_error, attempts=attempts)
