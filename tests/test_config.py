# tests/test_config.py
from nexus.config import DIM, Config, _coerce


def test_roundtrip_keys():
    data = Config.to_dict()
    assert data["core.TOLERANCE"] == 1e-3
    assert data["projection.WICK_SCALE"] == 0.4
    assert data["projection.EDGE_THRESHOLD"] == 0.05


def test_from_dict_converts_types():
    Config.from_dict({"projection.WICK_SCALE": "0.25", "core.DEBUG": "yes"}, apply_env_overrides=False)
    assert Config.projection.WICK_SCALE == 0.25
    assert Config.core.DEBUG is True


def test_from_dict_ignores_unknown_keys():
    before = Config.to_dict()
    Config.from_dict({"bogus.KEY": 1, "core.NOPE": 2, "flat": 3})
    assert Config.to_dict() == before


def test_env_override_wins(monkeypatch):
    monkeypatch.setenv("NEXUS_PORT", "9999")
    Config.from_dict({"server.PORT": 1234})
    assert Config.server.PORT != 1234


def test_diff():
    current = Config.to_dict()
    other = dict(current)
    other["core.SEED"] = 99
    assert Config.diff(other) == {"core.SEED": (current["core.SEED"], 99)}


def test_restored_between_tests():
    # conftest restores the snapshot taken before each test
    assert Config.projection.WICK_SCALE == 0.4


def test_items_cover_every_section():
    keys = [key for key, _, _ in Config.items()]
    assert keys == list(Config.to_dict())
    assert {key.split(".")[0] for key in keys} == {"core", "projection", "server", "sweep"}
    assert "core.DIM" not in keys


def test_coerce_follows_current_type():
    assert _coerce(False, "TRUE") is True
    assert _coerce(True, "0") is False
    assert _coerce(8000, "9000") == 9000
    assert _coerce(0.4, "1") == 1.0
    assert _coerce("E8", "G2") == "G2"


def test_dim_is_fixed():
    assert DIM == 8
    Config.from_dict({"core.DIM": 4}, apply_env_overrides=False)
    assert DIM == 8
