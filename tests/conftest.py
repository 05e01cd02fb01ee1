"""Root-level pytest fixtures for the pixcore test suite."""

import numpy as np
import pytest

from pixcore import TypeTag, get_errdetail
from pixcore.schemas import resolve_config


@pytest.fixture(autouse=True)
def clear_errdetail():
    """Start and finish every test with an empty error detail slot."""
    get_errdetail()
    yield
    get_errdetail()


@pytest.fixture
def default_config():
    """Fully resolved configuration with no overrides."""
    return resolve_config()


@pytest.fixture
def make_buffer():
    """Factory fixture for raw buffers of a given tag.

    Returns a callable ``(tag, values) -> bytearray`` holding ``values``
    encoded in the tag's native element type.

    Examples
    --------
    >>> def test_int(make_buffer):
    ...     buf = make_buffer(TypeTag.INT, [1, 2, 3])
    """
    def _make(tag: TypeTag, values):
        return bytearray(np.asarray(values, dtype=tag.dtype).tobytes())

    return _make


@pytest.fixture
def read_buffer():
    """Decode a raw buffer back into a numpy array of the tag's dtype."""
    def _read(tag: TypeTag, buffer):
        return np.frombuffer(bytes(buffer), dtype=tag.dtype)

    return _read
