# tests/test_general_utils.py
"""End-to-end tests for general utils (load_config, log) with env-driven data dirs and topics."""

from __future__ import annotations

import io
import json
import os
from importlib import import_module

import pytest

# the package re-exports a `load_config` function, so fetch the modules themselves
LC = import_module("dutch_vocab_analyzer.analysis.general.utils.load_config")
LOG = import_module("dutch_vocab_analyzer.analysis.general.utils.log")

DataDirNotFound = LC.DataDirNotFound
ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point the loader at it via DUTCH_VOCAB_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("DUTCH_VOCAB_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv("DUTCH_VOCAB_DEBUG_TOPICS", raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    clear_config_cache()


# ---------- load_config tests ----------
def test_load_config_raw_is_cached_until_cleared(tmp_data_dir):
    (tmp_data_dir / "known_words.json").write_text(json.dumps(["hond", "kat"]), encoding="utf-8")

    out1 = load_config("known_words")
    assert out1 == ["hond", "kat"]
    assert load_config("known_words.json") is out1  # served from cache

    clear_config_cache()
    out2 = load_config("known_words")
    assert out2 == out1 and out2 is not out1


def test_load_config_raw_reloads_after_edit(tmp_data_dir):
    p = tmp_data_dir / "cfg.json"
    p.write_text(json.dumps({"v": 1}), encoding="utf-8")
    assert load_config("cfg") == {"v": 1}

    p.write_text(json.dumps({"v": 2}), encoding="utf-8")
    st = p.stat()
    os.utime(p, (st.st_atime, st.st_mtime + 10))
    assert load_config("cfg") == {"v": 2}


def test_load_config_validated_dict_and_errors(tmp_data_dir):
    conf = tmp_data_dir / "settings.json"
    conf.write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["beta"] = "ok"
        return d

    out = load_config("settings", mode="validated_dict", validator=validator)
    assert out == {"alpha": 1, "beta": "ok"}
    assert load_config("settings", mode="validated_dict") == {"alpha": 1}

    def failing(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError):
        load_config("settings", mode="validated_dict", validator=failing)

    (tmp_data_dir / "words.json").write_text(json.dumps(["a"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("words", mode="validated_dict")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")

    with pytest.raises(ValueError):
        load_config("settings", mode="set")  # type: ignore[arg-type]


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_load_config_explicit_base_dir(tmp_path):
    other = tmp_path / "elsewhere"
    other.mkdir()
    (other / "cfg.json").write_text(json.dumps({"k": "v"}), encoding="utf-8")
    assert load_config("cfg", base_dir=other) == {"k": "v"}


def test_load_config_falls_back_to_second_env_var(tmp_path, monkeypatch):
    monkeypatch.delenv("DUTCH_VOCAB_DATA_DIR", raising=False)
    data = tmp_path / "data"
    data.mkdir()
    (data / "cfg.json").write_text(json.dumps([1, 2]), encoding="utf-8")
    monkeypatch.setenv("DATA_DIR", str(data))
    assert load_config("cfg") == [1, 2]


def test_default_data_dir_raises_when_missing(tmp_path, monkeypatch):
    monkeypatch.setattr(LC, "_candidate_data_dirs", lambda start=None: [tmp_path / "nope" / "data"])
    with pytest.raises(DataDirNotFound):
        LC._default_data_dir()
    monkeypatch.delenv("DUTCH_VOCAB_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    with pytest.raises(DataDirNotFound):
        load_config("anything")


# ---------- log.debug tests ----------
def test_log_debug_silent_without_topics():
    buf = io.StringIO()
    LOG.debug("nothing", topic="analysis", stream=buf)
    assert buf.getvalue() == ""


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("DUTCH_VOCAB_DEBUG_TOPICS", "orchestrator")
    LOG.reload_topics()

    LOG.debug("hello on orchestrator", topic="orchestrator")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on orchestrator" in captured.err
    assert "[orchestrator][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch):
    monkeypatch.setenv("DUTCH_VOCAB_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    buf = io.StringIO()
    LOG.debug("m1", topic="foo", stream=buf)
    LOG.debug("m2", topic="Bar", level="info", stream=buf)

    out = buf.getvalue()
    assert "m1" in out and "m2" in out
    assert "[bar][INFO]" in out
