# pasteup_deploy/utils/async_utils.py
"""Asynchronous operation utilities"""

import asyncio
from typing import Any, Awaitable, Callable, Coroutine, Iterable, List, Optional, TypeVar

T = TypeVar('T')


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run async coroutine in sync context

    Args:
        coro: Coroutine to run

    Returns:
        Coroutine result
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No running loop
        return asyncio.run(coro)

    # Already in async context, run on a fresh loop in another thread
    import threading

    result = None
    exception = None

    def run_in_thread():
        nonlocal result, exception
        try:
            result = asyncio.run(coro)
        except BaseException as e:
            exception = e

    thread = threading.Thread(target=run_in_thread)
    thread.start()
    thread.join()

    if exception:
        raise exception
    return result


async def join_all(aws: Iterable[Awaitable[T]],
                   callback: Optional[Callable[[int, int], None]] = None) -> List[T]:
    """
    Start every awaitable at once and wait for all of them

    If one raises, the others are cancelled, awaited, and the first
    exception is re-raised.

    Args:
        aws: Awaitables to run concurrently
        callback: Progress callback(completed, total)

    Returns:
        Results in submission order
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    total = len(tasks)
    completed = 0

    def on_done(_task):
        nonlocal completed
        completed += 1
        if callback:
            callback(completed, total)

    for task in tasks:
        task.add_done_callback(on_done)

    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
