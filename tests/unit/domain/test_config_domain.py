from __future__ import annotations

"""
Unit tests for configuration persistence.

All tests run against a temporary user data directory.
"""

import json

from treeforge.domain.config import (
    CURRENT_CONFIG_VERSION,
    get_config_path,
    get_default_config,
    load_config,
    save_config,
)


def test_missing_file_yields_defaults(user_data_dir) -> None:
    assert load_config() == get_default_config()


def test_save_then_load(user_data_dir) -> None:
    conf = get_default_config()
    conf["platform"] = "windows"
    conf["output_base_dir"] = "/tmp/out"

    assert save_config(conf)
    assert load_config() == conf

    with open(get_config_path(), "r", encoding="utf-8") as f:
        data = json.load(f)
    assert data["version"] == CURRENT_CONFIG_VERSION
    assert data["last_session"]["platform"] == "windows"


def test_unknown_keys_are_not_persisted(user_data_dir) -> None:
    conf = get_default_config()
    conf["theme"] = "dark"
    save_config(conf)

    with open(get_config_path(), "r", encoding="utf-8") as f:
        data = json.load(f)
    assert "theme" not in data["last_session"]


def test_corrupted_file_yields_defaults(user_data_dir) -> None:
    (user_data_dir / "config.json").write_text("{not json", encoding="utf-8")
    assert load_config() == get_default_config()

    (user_data_dir / "config.json").write_text("[1, 2]", encoding="utf-8")
    assert load_config() == get_default_config()


def test_partial_session_is_merged(user_data_dir) -> None:
    payload = {"version": "1.0.0", "last_session": {"debug": True, "stale": 1}}
    (user_data_dir / "config.json").write_text(json.dumps(payload), encoding="utf-8")

    conf = load_config()
    assert conf["debug"] is True
    assert conf["platform"] == "auto"
    assert "stale" not in conf
