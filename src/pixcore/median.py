"""Median of a pixel array.

WARNING: ``median`` sorts its input in place. Callers that need their data
in the original order use ``median_copy``.

Non-finite values
-----------------
NaN sorts after every other value (numpy's ordering, also applied to plain
Python sequences), so it only reaches the result when at least half the
values are NaN. ``nan_policy="raise"`` rejects NaN input instead.
"""

import logging
import math
from typing import Literal, Optional

import numpy as np

from pixcore.contracts import require

__all__ = ['median', 'median_copy']

logger = logging.getLogger(__name__)

NanPolicy = Literal["last", "raise"]


def _nan_last(value):
    return (math.isnan(value), value)


def _sort_in_place(values, n: int) -> None:
    if isinstance(values, np.ndarray):
        values[:n].sort()
    else:
        values[:n] = sorted(values[:n], key=_nan_last)


def _has_nan(values, n: int) -> bool:
    if isinstance(values, np.ndarray):
        return values.dtype.kind in "fc" and bool(np.isnan(values[:n]).any())
    return any(math.isnan(v) for v in values[:n])


def median(values, n: Optional[int] = None, nan_policy: NanPolicy = "last"):
    """Compute the median of the first ``n`` values, reordering them.

    WARNING: ``values[:n]`` is sorted ascending in place.

    Parameters
    ----------
    values : 1-D numpy array or mutable sequence
        Data to reduce. Modified.
    n : int, optional
        Number of leading elements to use; defaults to ``len(values)``.
    nan_policy : {"last", "raise"}
        ``"last"`` sorts NaN after all other values; ``"raise"`` raises
        ValueError if any NaN is present.

    Returns
    -------
    scalar
        The middle element for odd ``n``, the mean of the two central
        elements for even ``n``. For ``n < 2`` the first element is returned
        without sorting.

    Raises
    ------
    ValueError
        If ``n`` is zero, or NaN is present under ``nan_policy="raise"``.
    ContractViolation
        If ``n`` exceeds the data length or the array is not 1-D.

    Examples
    --------
    >>> data = [3.0, 1.0, 2.0]
    >>> median(data)
    2.0
    >>> data
    [1.0, 2.0, 3.0]
    >>> median([4, 1, 3, 2])
    2.5
    """
    if n is None:
        n = len(values)
    require(0 <= n <= len(values), f"median count {n} outside 0..{len(values)}")
    if isinstance(values, np.ndarray):
        require(values.ndim == 1, f"median requires a 1-D array, got {values.ndim} dims")
    if n == 0:
        raise ValueError("median of empty data")
    if nan_policy == "raise" and _has_nan(values, n):
        raise ValueError("median input contains NaN")
    if n < 2:
        return values[0]

    _sort_in_place(values, n)
    half = n // 2
    if n % 2:
        return values[half]
    # Widen before adding so integer data cannot wrap
    return (float(values[half - 1]) + float(values[half])) / 2.0


def median_copy(values, n: Optional[int] = None, nan_policy: NanPolicy = "last"):
    """Non-destructive ``median``: works on a copy, ``values`` is untouched."""
    if n is None:
        n = len(values)
    data = np.array(values[:n]) if isinstance(values, np.ndarray) else list(values[:n])
    logger.debug("median_copy over %d values", n)
    return median(data, n, nan_policy=nan_policy)
