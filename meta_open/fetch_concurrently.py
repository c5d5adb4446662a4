"""Fan-out of independent lookups joined before continuing."""

from collections.abc import Callable
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Any


def fetch_concurrently(*calls: Callable[[], Any]) -> tuple[Any, ...]:
    """Run the calls in parallel and return their results in call order.

    The first failure is re-raised as soon as it is seen; calls that have not
    started yet are cancelled and no partial result is returned.
    """
    if not calls:
        return ()

    executor = ThreadPoolExecutor(max_workers=len(calls))
    try:
        futures = [executor.submit(call) for call in calls]
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)
        for future in futures:
            if future in done and future.exception() is not None:
                raise future.exception()  # type: ignore[misc]
        return tuple(future.result() for future in futures)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
