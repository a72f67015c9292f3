import matplotlib

matplotlib.use("Agg")

import pytest

from hex_adjacency import build_adjacency


@pytest.fixture(scope="session")
def adjacency():
    """Cached adjacency matrices keyed by board size."""
    cache = {}

    def get(n):
        if n not in cache:
            cache[n] = build_adjacency(n)
        return cache[n]

    return get


@pytest.fixture
def feeder():
    """Stand-in for input(): returns the given answers in order."""

    def make(answers):
        it = iter(answers)

        def read(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        return read

    return make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("HEX_SIZE", "HEX_MC_REPEATS", "HEX_WORKERS", "HEX_SEED"):
        monkeypatch.delenv(key, raising=False)
