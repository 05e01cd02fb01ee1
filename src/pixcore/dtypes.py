"""Type tag registry.

The closed set of raw element representations that pixel buffers may use.
Every dispatch table in ``pixcore.convert`` is keyed by these tags, and the
tag values are the FITS-style codes callers already branch on, so they must
never be renumbered.
"""

import logging
from enum import IntEnum
from typing import Optional

import numpy as np

from pixcore.status import IllegalDTypeError

__all__ = ['PIXTYPE', 'TypeTag', 'tag_for_dtype']

logger = logging.getLogger(__name__)

# Canonical pixel representation used by all algorithmic code
PIXTYPE = np.float32


class TypeTag(IntEnum):
    """Raw element representation of a pixel buffer."""
    BYTE = 11
    INT = 31
    FLOAT = 42
    DOUBLE = 82

    @property
    def dtype(self) -> np.dtype:
        """Native numpy dtype of one raw element."""
        return _TAG_DTYPES[self]

    @property
    def itemsize(self) -> int:
        """Byte width of one raw element."""
        return _TAG_DTYPES[self].itemsize


# Native C widths: unsigned char, int, float, double
_TAG_DTYPES = {
    TypeTag.BYTE: np.dtype(np.uint8),
    TypeTag.INT: np.dtype(np.intc),
    TypeTag.FLOAT: np.dtype(np.float32),
    TypeTag.DOUBLE: np.dtype(np.float64),
}


def coerce_tag(tag) -> Optional[TypeTag]:
    """Return ``tag`` as a TypeTag, or None if it is not one of the closed set.

    Only integers are tags; ``11.0`` and ``True`` are rejected.
    """
    if isinstance(tag, bool) or not isinstance(tag, (int, np.integer)):
        return None
    try:
        return TypeTag(tag)
    except (ValueError, TypeError):
        return None


def tag_for_dtype(dtype) -> TypeTag:
    """Map a numpy dtype to the tag that describes it.

    Only native byte order is accepted; a big-endian ``>f4`` on a
    little-endian host is not a FLOAT buffer as far as dispatch is concerned.

    Parameters
    ----------
    dtype : numpy dtype or dtype-like
        Element type of an existing buffer, e.g. ``arr.dtype``.

    Returns
    -------
    TypeTag

    Raises
    ------
    IllegalDTypeError
        If the dtype has no tag.

    Examples
    --------
    >>> tag_for_dtype(np.float32)
    <TypeTag.FLOAT: 42>
    >>> tag_for_dtype(np.zeros(3, dtype=np.uint8).dtype)
    <TypeTag.BYTE: 11>
    """
    dt = np.dtype(dtype)
    for tag, native in _TAG_DTYPES.items():
        if dt == native and dt.isnative:
            return tag
    logger.debug("No type tag for dtype %s", dt)
    raise IllegalDTypeError()
