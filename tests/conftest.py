"""
pytest configuration and shared fixtures.
"""

import io
from pathlib import Path

import numpy as np
import pytest

from pysms.codec import SMSReader
from pysms.sparse import SparseStore


FIXTURES = Path(__file__).parent / "fixtures"


def _sms_stream(text: str) -> io.BytesIO:
    return io.BytesIO(text.encode('ascii'))


def _parse_sms(text: str) -> SparseStore:
    reader = SMSReader(_sms_stream(text))
    header = reader.open()
    return SparseStore.from_entries(header, reader)


@pytest.fixture
def sms():
    """Factory: SMS text -> binary input stream."""
    return _sms_stream


@pytest.fixture
def parse():
    """Factory: SMS text -> SparseStore."""
    return _parse_sms


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def fixtures_dir():
    return FIXTURES


@pytest.fixture
def regression_3x3():
    """Fixed 3x3 matrix (1,3,1),(2,1,1),(2,2,1),(3,2,1)."""
    return _parse_sms(
        "3 3 M\n"
        "1 3 1\n"
        "2 1 1\n"
        "2 2 1\n"
        "3 2 1\n"
        "0 0 0\n"
    )


@pytest.fixture
def random_store(rng):
    """40 x 30 random sparse matrix, about 10% dense, small integer values."""
    nrows, ncols = 40, 30
    store = SparseStore(nrows, ncols)
    mask = rng.random((nrows, ncols)) < 0.1
    values = rng.integers(1, 10, size=(nrows, ncols))
    for i, j in zip(*np.nonzero(mask)):
        store.set(int(i) + 1, int(j) + 1, int(values[i, j]))
    return store
