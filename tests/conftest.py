"""Pytest configuration and shared fixtures for seqarrays tests."""

import matplotlib
import pytest

matplotlib.use("Agg")

from seqarrays.benchmarks.adapters import ListAdapter
from seqarrays.config import reload_defaults
from seqarrays.core.buffer import BlockGrowthBuffer, DoublingBuffer, IncrementOneBuffer
from seqarrays.structures.blocked import BlockedSequence
from seqarrays.structures.priority_queue import BucketedPriorityQueue
from seqarrays.structures.sparse import SparseSequence


# Fixtures for buffers


@pytest.fixture
def doubling_buffer():
    """Empty doubling buffer."""
    return DoublingBuffer()


@pytest.fixture
def increment_one_buffer():
    """Empty increment-by-one buffer."""
    return IncrementOneBuffer()


@pytest.fixture
def block_buffer():
    """Empty increment-by-block buffer with block=10."""
    return BlockGrowthBuffer(block=10)


@pytest.fixture(params=["doubling", "increment_one", "increment_block"])
def any_buffer(request):
    """Each growth policy in turn."""
    factories = {
        "doubling": DoublingBuffer,
        "increment_one": IncrementOneBuffer,
        "increment_block": lambda: BlockGrowthBuffer(block=3),
    }
    return factories[request.param]()


# Fixtures for compound structures


@pytest.fixture
def blocked_sequence():
    """Empty blocked sequence with blocks of 3."""
    return BlockedSequence(block_capacity=3)


@pytest.fixture
def sparse_sequence():
    """Empty sparse sequence with default 0."""
    return SparseSequence(default_value=0)


@pytest.fixture
def priority_queue():
    """Empty bucketed priority queue."""
    return BucketedPriorityQueue()


# Every implementation of the sequence contract


@pytest.fixture(
    params=[
        "list",
        "doubling",
        "increment_one",
        "increment_block",
        "blocked_1",
        "blocked_4",
        "sparse",
    ]
)
def any_sequence(request):
    """Each implementation of the sequence contract in turn."""
    factories = {
        "list": ListAdapter,
        "doubling": DoublingBuffer,
        "increment_one": IncrementOneBuffer,
        "increment_block": lambda: BlockGrowthBuffer(block=4),
        "blocked_1": lambda: BlockedSequence(block_capacity=1),
        "blocked_4": lambda: BlockedSequence(block_capacity=4),
        "sparse": lambda: SparseSequence(default_value=0),
    }
    return factories[request.param]()


@pytest.fixture
def sample_values():
    """Distinct non-default values."""
    return [17, -3, 42, 8, 99, 5, -250, 61, 7, 1024, 33, 12, -9]


@pytest.fixture(autouse=True)
def _fresh_defaults(monkeypatch):
    """Reload packaged defaults around every test."""
    monkeypatch.delenv("SEQARRAYS_DEFAULTS_PATH", raising=False)
    reload_defaults()
    yield
    monkeypatch.delenv("SEQARRAYS_DEFAULTS_PATH", raising=False)
    reload_defaults()
