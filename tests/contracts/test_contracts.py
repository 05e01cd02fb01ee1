"""Tests for contracts and the documented dispatch invariants.

The invariant tables are the reviewer anchor; these tests keep the live
dispatch tables in agreement with them.
"""

import pytest

from pixcore import (
    TypeTag,
    IllegalDTypeError,
    get_errdetail,
    resolve_scalar_converter,
    resolve_array_converter,
    resolve_array_writer,
    resolve_array_subtractor,
)
from pixcore.contracts import ContractViolation, require, DISPATCH_SUPPORT
from pixcore.contracts.invariants import ELEMENT_SIZES, SETS_ERROR_DETAIL

pytestmark = pytest.mark.unit

RESOLVERS = {
    "scalar_converter": resolve_scalar_converter,
    "array_converter": resolve_array_converter,
    "array_writer": resolve_array_writer,
    "array_subtractor": resolve_array_subtractor,
}


class TestRequire:
    """Test the require() enforcement helper."""

    def test_passes_when_true(self):
        """A true condition does nothing."""
        require(True, "never raised")

    def test_raises_with_message(self):
        """A false condition raises ContractViolation with the message."""
        with pytest.raises(ContractViolation, match="broken"):
            require(False, "broken")

    def test_is_runtime_error(self):
        """ContractViolation is a RuntimeError."""
        assert issubclass(ContractViolation, RuntimeError)


class TestDispatchInvariants:
    """Test that live dispatch tables match the documented invariants."""

    def test_every_resolver_documented(self):
        """Every resolver has support and detail entries."""
        assert set(DISPATCH_SUPPORT) == set(RESOLVERS) == set(SETS_ERROR_DETAIL)

    @pytest.mark.parametrize("operation", sorted(RESOLVERS))
    def test_resolver_matches_support_table(self, operation):
        """Resolvers accept exactly the documented tags and set detail only where documented."""
        resolver = RESOLVERS[operation]
        for tag in TypeTag:
            if tag.name in DISPATCH_SUPPORT[operation]:
                _, size = resolver(tag)
                assert size == ELEMENT_SIZES[tag.name]
                assert get_errdetail() == ""
            else:
                with pytest.raises(IllegalDTypeError):
                    resolver(tag)
                assert bool(get_errdetail()) is SETS_ERROR_DETAIL[operation]
