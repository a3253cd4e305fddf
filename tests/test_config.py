import pytest

from vidcheck.config import RunConfig, apply_env, load_run_config
from vidcheck.errors import ConfigError


def test_defaults(monkeypatch):
    for name in ("VIDCHECK_MAX_CONCURRENT", "VIDCHECK_TIMEOUT", "VIDCHECK_LOG_LEVEL", "VIDCHECK_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    cfg = load_run_config()
    assert cfg.max_concurrent == 10
    assert cfg.timeout_per_request is None
    assert cfg.prompt is True


def test_load_yaml(tmp_path, monkeypatch, caplog):
    monkeypatch.delenv("VIDCHECK_MAX_CONCURRENT", raising=False)
    monkeypatch.delenv("VIDCHECK_TIMEOUT", raising=False)
    yaml_text = """
max_concurrent: 4
timeout_per_request: 2.5
prompt: false
label: nightly
"""
    cfg_path = tmp_path / "run.yaml"
    cfg_path.write_text(yaml_text)
    cfg = load_run_config(cfg_path)
    assert cfg.max_concurrent == 4
    assert cfg.timeout_per_request == 2.5
    assert cfg.prompt is False
    assert not hasattr(cfg, "extra")
    assert "Ignoring unknown keys" in caplog.text
    assert "label" in caplog.text


def test_env_overrides_file():
    cfg = apply_env(RunConfig(max_concurrent=4), {"VIDCHECK_MAX_CONCURRENT": "8", "VIDCHECK_LOG_LEVEL": "DEBUG"})
    assert cfg.max_concurrent == 8
    assert cfg.log_level == "DEBUG"


def test_invalid_env_value():
    with pytest.raises(ConfigError):
        apply_env(RunConfig(), {"VIDCHECK_TIMEOUT": "soon"})


def test_non_mapping_yaml(tmp_path):
    cfg_path = tmp_path / "run.yaml"
    cfg_path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_run_config(cfg_path)
