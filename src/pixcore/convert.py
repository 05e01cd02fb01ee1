"""Runtime type dispatch for raw pixel buffers.

Algorithms compute on ``PIXTYPE`` (float32) only. These functions move data
between caller-owned raw buffers of any tagged representation and canonical
float32 arrays, so each algorithm is written once.

Raw buffers are any buffer-protocol object (``bytearray``, contiguous
``numpy.ndarray``, ``memoryview``). Its bytes are reinterpreted as the
tag's native element type; ``offset`` counts elements, not bytes. No bounds
checking is done beyond what numpy itself enforces.

Dispatch tables
---------------
==========  ======  =====  =====  ======
operation   BYTE    INT    FLOAT  DOUBLE
==========  ======  =====  =====  ======
scalar      yes     yes    yes    yes
array       yes     yes    yes    yes
writer      -       yes    -      yes
subtractor  -       yes    yes    yes
==========  ======  =====  =====  ======
"""

import logging
from typing import Callable, NamedTuple

import numpy as np

from pixcore.dtypes import PIXTYPE, TypeTag, coerce_tag
from pixcore.errdetail import put_errdetail
from pixcore.status import IllegalDTypeError

__all__ = [
    'Dispatch',
    'resolve_scalar_converter',
    'resolve_array_converter',
    'resolve_array_writer',
    'resolve_array_subtractor',
]

logger = logging.getLogger(__name__)


class Dispatch(NamedTuple):
    """A resolved operation and the byte width of one raw element."""
    fn: Callable
    size: int


def _raw_view(buffer, tag: TypeTag, count: int, offset: int = 0) -> np.ndarray:
    """View ``count`` raw elements of ``buffer`` as the tag's native dtype."""
    dtype = tag.dtype
    return np.frombuffer(buffer, dtype=dtype, count=count, offset=offset * dtype.itemsize)


def _canonical(values, count: int) -> np.ndarray:
    return np.asarray(values, dtype=PIXTYPE)[:count]


def _round_to_int(values: np.ndarray) -> np.ndarray:
    """Add one half in double precision, then narrow to int toward zero.

    This is not round-half-even, and for negative input it is not floor:
    -1.5 becomes -1 and -1.7 becomes -1.
    """
    return (values.astype(np.float64) + 0.5).astype(np.intc)


# ============================================================================
# SCALAR CONVERTERS
# ============================================================================

def _make_scalar_converter(tag: TypeTag) -> Callable:
    def convert(buffer, offset: int = 0):
        return PIXTYPE(_raw_view(buffer, tag, 1, offset)[0])
    convert.__name__ = f"convert_{tag.name.lower()}"
    convert.__doc__ = f"Read one {tag.name} element from ``buffer`` as a pixel value."
    return convert


_SCALAR_CONVERTERS = {tag: _make_scalar_converter(tag) for tag in TypeTag}


# ============================================================================
# ARRAY CONVERTERS
# ============================================================================

def _make_array_converter(tag: TypeTag) -> Callable:
    def convert_array(buffer, count: int, target, offset: int = 0) -> None:
        if count <= 0:
            return
        target[:count] = _raw_view(buffer, tag, count, offset).astype(PIXTYPE)
    convert_array.__name__ = f"convert_array_{tag.name.lower()}"
    convert_array.__doc__ = (
        f"Read ``count`` {tag.name} elements from ``buffer`` into ``target[:count]``."
    )
    return convert_array


_ARRAY_CONVERTERS = {tag: _make_array_converter(tag) for tag in TypeTag}


# ============================================================================
# ARRAY WRITERS
# ============================================================================

def write_array_int(values, count: int, buffer, offset: int = 0) -> None:
    """Write ``count`` pixel values into an INT buffer, rounding by +0.5 truncation."""
    if count <= 0:
        return
    _raw_view(buffer, TypeTag.INT, count, offset)[:] = _round_to_int(_canonical(values, count))


def write_array_dbl(values, count: int, buffer, offset: int = 0) -> None:
    """Write ``count`` pixel values into a DOUBLE buffer (exact widening)."""
    if count <= 0:
        return
    _raw_view(buffer, TypeTag.DOUBLE, count, offset)[:] = _canonical(values, count).astype(np.float64)


_ARRAY_WRITERS = {
    TypeTag.INT: write_array_int,
    TypeTag.DOUBLE: write_array_dbl,
}


# ============================================================================
# ARRAY SUBTRACTORS
# ============================================================================

def subtract_array_flt(values, count: int, buffer, offset: int = 0) -> None:
    """Subtract ``count`` pixel values from a FLOAT buffer in place."""
    if count <= 0:
        return
    raw = _raw_view(buffer, TypeTag.FLOAT, count, offset)
    raw -= _canonical(values, count)


def subtract_array_int(values, count: int, buffer, offset: int = 0) -> None:
    """Subtract rounded pixel values from an INT buffer in place."""
    if count <= 0:
        return
    raw = _raw_view(buffer, TypeTag.INT, count, offset)
    raw -= _round_to_int(_canonical(values, count))


def subtract_array_dbl(values, count: int, buffer, offset: int = 0) -> None:
    """Subtract ``count`` pixel values from a DOUBLE buffer in place."""
    if count <= 0:
        return
    raw = _raw_view(buffer, TypeTag.DOUBLE, count, offset)
    raw -= _canonical(values, count).astype(np.float64)


_ARRAY_SUBTRACTORS = {
    TypeTag.FLOAT: subtract_array_flt,
    TypeTag.INT: subtract_array_int,
    TypeTag.DOUBLE: subtract_array_dbl,
}


# ============================================================================
# RESOLVERS
# ============================================================================

def _resolve(table: dict, tag, operation: str) -> Dispatch:
    resolved = coerce_tag(tag)
    fn = table.get(resolved) if resolved is not None else None
    if fn is None:
        logger.debug("%s: unsupported type tag %r", operation, tag)
        raise IllegalDTypeError()
    return Dispatch(fn, resolved.itemsize)


def resolve_scalar_converter(tag) -> Dispatch:
    """Return the scalar converter and element size for ``tag``.

    Raises
    ------
    IllegalDTypeError
        If ``tag`` is not a TypeTag. The error detail is left unset.

    Examples
    --------
    >>> convert, size = resolve_scalar_converter(TypeTag.DOUBLE)
    >>> size
    8
    >>> float(convert(np.array([2.5])))
    2.5
    """
    return _resolve(_SCALAR_CONVERTERS, tag, "resolve_scalar_converter")


def resolve_array_converter(tag) -> Dispatch:
    """Return the array converter and element size for ``tag``.

    The converter is called as ``fn(buffer, count, target, offset=0)`` and
    fills ``target[:count]`` in index order. The source is never modified.

    Raises
    ------
    IllegalDTypeError
        If ``tag`` is not a TypeTag. The error detail is left unset.
    """
    return _resolve(_ARRAY_CONVERTERS, tag, "resolve_array_converter")


def resolve_array_writer(tag) -> Dispatch:
    """Return the array writer for an INT or DOUBLE destination.

    Raises
    ------
    IllegalDTypeError
        For BYTE, FLOAT or an unknown tag. The error detail is left unset.
    """
    return _resolve(_ARRAY_WRITERS, tag, "resolve_array_writer")


def resolve_array_subtractor(tag) -> Dispatch:
    """Return the in-place subtractor for a FLOAT, INT or DOUBLE buffer.

    Unlike the other resolvers, a failure here also records an error detail
    naming the rejected tag, readable once via ``get_errdetail()``.

    Raises
    ------
    IllegalDTypeError
        For BYTE or an unknown tag.
    """
    try:
        return _resolve(_ARRAY_SUBTRACTORS, tag, "resolve_array_subtractor")
    except IllegalDTypeError:
        put_errdetail(f"in get_array_subtractor(): {int(tag) if _is_integral(tag) else tag!r}")
        raise


def _is_integral(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)
