"""Per-thread error detail slot.

Each thread owns one detail string. A failing operation overwrites it with
``put_errdetail``; the caller reads it once with ``get_errdetail``, which
clears it. Threads never see each other's detail.
"""

import threading

__all__ = ['DETAIL_SIZE', 'put_errdetail', 'get_errdetail']

# Buffer size including the terminator, so 511 usable characters
DETAIL_SIZE = 512

_local = threading.local()


def put_errdetail(text: str) -> None:
    """Overwrite this thread's detail, silently truncating to 511 characters."""
    _local.detail = str(text)[:DETAIL_SIZE - 1]


def get_errdetail() -> str:
    """Return this thread's detail and clear it.

    A second call without an intervening ``put_errdetail`` returns ``""``.
    """
    detail = getattr(_local, "detail", "")
    _local.detail = ""
    return detail
