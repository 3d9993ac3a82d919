"""Drive non-suspending coroutines from synchronous code."""

from __future__ import annotations

import typing

_T = typing.TypeVar("_T")


def iter_coroutine(coro: typing.Coroutine[None, None, _T]) -> _T:
    """
    Run a coroutine to completion without an event loop.

    The blocking client reuses the async call path (middleware chain,
    dispatcher, BlockingTransport). None of those steps suspend, so a single
    ``send(None)`` finishes the whole call.

    Raises:
        RuntimeError: If the coroutine suspends, e.g. because an async-only
            transport was handed to the blocking client.
    """
    try:
        coro.send(None)
    except StopIteration as ex:
        return ex.value  # type: ignore [no-any-return]
    else:
        raise RuntimeError(f"coroutine {coro!r} did not stop after one iteration!")
    finally:
        coro.close()


__all__ = ["iter_coroutine"]
