"""Status codes and the exceptions that carry them.

Status values are part of the caller-visible interface: callers branch on
the exact integer, so existing members must never be renumbered. New codes
are appended.
"""

import logging
from enum import IntEnum
from typing import Optional

from pixcore.errdetail import get_errdetail

__all__ = [
    'Status',
    'StatusError',
    'IllegalDTypeError',
    'status_to_message',
    'check_status',
]

logger = logging.getLogger(__name__)

MESSAGE_SIZE = 60


class Status(IntEnum):
    """Outcome of an operation."""
    RETURN_OK = 0
    MEMORY_ALLOC_ERROR = 1
    PIXSTACK_FULL = 2
    ILLEGAL_DTYPE = 3
    ILLEGAL_SUBPIX = 4
    NON_ELLIPSE_PARAMS = 5
    ILLEGAL_APER_PARAMS = 6
    DEBLEND_OVERFLOW = 7
    LINE_NOT_IN_BUF = 8
    RELTHRESH_NO_NOISE = 9
    UNKNOWN_NOISE_TYPE = 10


_MESSAGES = {
    Status.RETURN_OK: "OK - no error",
    Status.MEMORY_ALLOC_ERROR: "memory allocation",
    Status.PIXSTACK_FULL: "internal pixel buffer full",
    Status.DEBLEND_OVERFLOW: "object deblending overflow",
    Status.ILLEGAL_DTYPE: "dtype not recognized/unsupported",
    Status.ILLEGAL_SUBPIX: "subpix value must be nonnegative",
    Status.NON_ELLIPSE_PARAMS: "parameters do not describe ellipse",
    Status.ILLEGAL_APER_PARAMS: "invalid aperture parameters",
    Status.LINE_NOT_IN_BUF: "array line out of buffer",
    Status.RELTHRESH_NO_NOISE: "relative threshold but image has noise_type of NONE",
    Status.UNKNOWN_NOISE_TYPE: "image has unknown noise_type",
}

UNKNOWN_MESSAGE = "unknown error status"


def status_to_message(status) -> str:
    """Return the short fixed message for a status code.

    Never fails: any value outside the enumeration, including non-integers,
    maps to ``"unknown error status"``. Messages are at most 60 characters.
    """
    try:
        return _MESSAGES.get(Status(status), UNKNOWN_MESSAGE)
    except (ValueError, TypeError):
        return UNKNOWN_MESSAGE


class StatusError(RuntimeError):
    """A non-OK status raised as an exception.

    Attributes
    ----------
    status : int
        The status code (a ``Status`` member when recognized).
    detail : str
        Free-text elaboration, empty if none was recorded.
    """

    default_status = None

    def __init__(self, status: Optional[int] = None, detail: str = ""):
        if status is None:
            status = self.default_status
        self.status = status
        self.detail = detail
        message = status_to_message(status)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class IllegalDTypeError(StatusError, TypeError):
    """Raised when a type tag or dtype is unsupported by an operation."""
    default_status = Status.ILLEGAL_DTYPE


_STATUS_ERRORS = {
    Status.ILLEGAL_DTYPE: IllegalDTypeError,
}


def check_status(status) -> None:
    """Raise the matching StatusError if ``status`` is not OK.

    The calling thread's error detail, if any, is consumed and attached
    to the exception.
    """
    if status == Status.RETURN_OK:
        return
    detail = get_errdetail()
    try:
        code = Status(status)
    except ValueError:
        code = status
    exc_class = _STATUS_ERRORS.get(code, StatusError)
    logger.debug("Status %s raised as %s", status, exc_class.__name__)
    raise exc_class(code, detail)
