import json

import pytest

from sdk_probe.config import (
    DEFAULT_CONFIG,
    deep_merge,
    load_config,
    resolve_output_path,
    write_default_config,
)


def test_missing_optional_config_uses_defaults(tmp_path):
    config = load_config(tmp_path / "sdk_probe_config.json")

    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_missing_required_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json", required=True)


def test_user_config_is_merged_and_expanded(tmp_path, monkeypatch):
    monkeypatch.setenv("SDK_BASE", "/opt")
    config_path = tmp_path / "sdk_probe_config.json"
    config_path.write_text(
        json.dumps({"sdk": {"root": "${SDK_BASE}/android"}, "checks": {"temp_write": False}}),
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config["sdk"]["root"] == "/opt/android"
    assert config["sdk"]["layout"] == DEFAULT_CONFIG["sdk"]["layout"]
    assert config["checks"]["temp_write"] is False


def test_non_object_config_is_rejected(tmp_path):
    config_path = tmp_path / "bad.json"
    config_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(config_path)


def test_deep_merge_replaces_lists():
    merged = deep_merge({"a": {"b": [1, 2], "c": 1}}, {"a": {"b": [3]}})

    assert merged == {"a": {"b": [3], "c": 1}}


def test_init_config_roundtrip(tmp_path):
    target = tmp_path / "conf" / "sdk_probe_config.json"
    write_default_config(target)

    assert load_config(target, required=True) == DEFAULT_CONFIG


def test_output_path_resolution(tmp_path):
    assert resolve_output_path("") is None
    assert resolve_output_path(str(tmp_path)) == tmp_path / "sdk_probe_report.json"
    assert resolve_output_path(str(tmp_path / "reports")) == tmp_path / "reports" / "sdk_probe_report.json"
    assert resolve_output_path(str(tmp_path / "out.json")) == tmp_path / "out.json"
