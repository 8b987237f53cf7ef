# tests/test_config.py
import pytest

from algoviz.core.config import Settings, load_settings
from algoviz.core.errors import ConfigError
from algoviz.core.registry import Algorithm


def test_defaults():
    s = load_settings(argv=[], environ={})
    assert s == Settings()
    assert s.algorithm is Algorithm.BUBBLE
    assert (s.grid_rows, s.grid_cols) == (27, 49)
    assert s.seed is None


def test_env_then_argv():
    env = {"ALGOVIZ_SPEED": "2", "ALGOVIZ_ALGORITHM": "dfs"}
    s = load_settings(argv=[], environ=env)
    assert s.speed == 2.0
    assert s.algorithm is Algorithm.DFS

    s = load_settings(argv=["--speed=3.5"], environ=env)
    assert s.speed == 3.5
    assert s.algorithm is Algorithm.DFS


def test_argv_forms():
    s = load_settings(argv=["--algorithm=astar", "--diagonal", "--array-size=20",
                            "--log-level=debug", "--seed=7", "positional"], environ={})
    assert s.algorithm is Algorithm.ASTAR
    assert s.diagonal is True
    assert s.array_size == 20
    assert s.log_level == "DEBUG"
    assert s.seed == 7

    assert load_settings(argv=["--diagonal=off"], environ={}).diagonal is False
    assert load_settings(argv=["--seed=none"], environ={"ALGOVIZ_SEED": "4"}).seed is None


@pytest.mark.parametrize("argv", [
    ["--speed=9"],
    ["--speed=fast"],
    ["--array_size=5"],
    ["--array_size=101"],
    ["--min-value=500"],
    ["--cell-size=5000"],
    ["--diagonal=maybe"],
    ["--log-level=loud"],
    ["--algorithm=bogosort"],
    ["--colour=red"],
])
def test_bad_values_raise(argv):
    with pytest.raises(ConfigError):
        load_settings(argv=argv, environ={})


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        load_settings(argv=["--fps=0"], environ={})
