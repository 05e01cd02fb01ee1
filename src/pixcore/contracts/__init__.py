"""Contracts - fail-fast enforcement of caller obligations.

A contract violation means the calling code is wrong (a 2-D array handed to
``median``, a count larger than the data), not that the data is bad.

Key principle:
- Pydantic validates config correctness
- Contracts validate caller correctness
- Status codes report recoverable operation outcomes
"""

from pixcore.contracts.failure import ContractViolation
from pixcore.contracts.base import require
from pixcore.contracts.invariants import DISPATCH_SUPPORT

__all__ = [
    "ContractViolation",
    "require",
    "DISPATCH_SUPPORT",
]
