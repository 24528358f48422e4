"""Retry logic with exponential backoff for data source fetches"""

import time
from typing import Callable, Any
from fairlens.utils.logging import get_logger
from fairlens.utils.errors import DataUnavailable

logger = get_logger(__name__)


def retry_with_exponential_backoff(
    func: Callable,
    max_retries: int = 3,
    base_delay: float = 1,
    max_delay: float = 8,
    *args,
    **kwargs
) -> Any:
    """
    Retry a fetch that raises DataUnavailable

    Args:
        func: Function to retry
        max_retries: Maximum attempts
        base_delay: Base delay in seconds
        max_delay: Max delay cap in seconds
        *args, **kwargs: Arguments to pass to func

    Returns:
        Function result

    Raises:
        DataUnavailable: If all attempts fail
    """
    attempts = max(1, max_retries)
    for attempt in range(attempts):
        try:
            return func(*args, **kwargs)

        except DataUnavailable as e:
            if attempt == attempts - 1:
                logger.error(f"All {attempts} fetch attempts exhausted")
                raise DataUnavailable(f"Failed after {attempts} attempts: {e}") from e

            delay = min(base_delay * (2 ** attempt), max_delay)
            logger.warning(f"Attempt {attempt + 1} failed, retrying in {delay}s: {e}")
            time.sleep(delay)
