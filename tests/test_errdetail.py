"""Tests for the per-thread error detail slot."""

import threading

import pytest

from pixcore import put_errdetail, get_errdetail
from pixcore.errdetail import DETAIL_SIZE

pytestmark = pytest.mark.unit


def test_read_once():
    """The first read returns the detail, the second returns empty."""
    put_errdetail("x")
    assert get_errdetail() == "x"
    assert get_errdetail() == ""


def test_empty_before_any_write():
    """A fresh slot reads as empty."""
    assert get_errdetail() == ""


def test_write_overwrites_instead_of_appending():
    """A second write replaces the first."""
    put_errdetail("first")
    put_errdetail("second")
    assert get_errdetail() == "second"


def test_truncates_to_capacity():
    """Long text is cut to 511 characters."""
    put_errdetail("a" * 2000)
    detail = get_errdetail()
    assert len(detail) == DETAIL_SIZE - 1 == 511


def test_threads_are_isolated():
    """Threads neither see nor clear each other's detail."""
    put_errdetail("main")
    seen = {}
    barrier = threading.Barrier(2)

    def worker(name):
        seen[name + "_before"] = get_errdetail()
        put_errdetail(name)
        barrier.wait()
        seen[name] = get_errdetail()
        seen[name + "_again"] = get_errdetail()

    threads = [threading.Thread(target=worker, args=(n,)) for n in ("t1", "t2")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert seen["t1_before"] == "" and seen["t2_before"] == ""
    assert seen["t1"] == "t1" and seen["t2"] == "t2"
    assert seen["t1_again"] == "" and seen["t2_again"] == ""
    assert get_errdetail() == "main"
