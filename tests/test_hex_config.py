import pytest

from hex_config import DEFAULT_REPEATS, DEFAULT_SIZE, GameConfig


def test_defaults():
    cfg = GameConfig.from_env({})
    assert cfg == GameConfig(size=DEFAULT_SIZE, repeats=DEFAULT_REPEATS, workers=1, seed=None)
    assert DEFAULT_REPEATS == 1000


def test_environment_overrides():
    cfg = GameConfig.from_env({"HEX_SIZE": "4", "HEX_MC_REPEATS": "300", "HEX_WORKERS": "2", "HEX_SEED": "9"})
    assert (cfg.size, cfg.repeats, cfg.workers, cfg.seed) == (4, 300, 2, 9)


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("HEX_MC_REPEATS", "42")
    assert GameConfig.from_env().repeats == 42


@pytest.mark.parametrize("env", [
    {"HEX_MC_REPEATS": "lots"},
    {"HEX_MC_REPEATS": "0"},
    {"HEX_SIZE": "-3"},
    {"HEX_WORKERS": "0"},
])
def test_invalid_values(env):
    with pytest.raises(ValueError):
        GameConfig.from_env(env)
