from __future__ import annotations

from clusterfit.set_config import DEFAULT_CONFIG, config, load_config, merge_config


def test_packaged_config_matches_defaults():
    assert config["fit"]["resolution_divisor"] == 3.46
    assert config["fit"]["parallel_cos_threshold"] == 0.99
    assert config["fit"]["min_fit_points"] == 2


def test_load_config_toml(tmp_path):
    cfg_file = tmp_path / "custom.toml"
    cfg_file.write_text("[fit]\nresolution_divisor = 2.0\n")
    assert load_config(str(cfg_file)) == {"fit": {"resolution_divisor": 2.0}}


def test_load_config_yaml(tmp_path):
    cfg_file = tmp_path / "custom.yml"
    cfg_file.write_text("logging:\n  level: DEBUG\n")
    assert load_config(str(cfg_file)) == {"logging": {"level": "DEBUG"}}


def test_load_config_missing_file(tmp_path):
    assert load_config(str(tmp_path / "missing.toml")) == {}


def test_merge_config_keeps_unset_defaults():
    merged = merge_config(DEFAULT_CONFIG, {"fit": {"resolution_divisor": 2.0}})

    assert merged["fit"]["resolution_divisor"] == 2.0
    assert merged["fit"]["parallel_cos_threshold"] == 0.99
    assert merged["logging"]["level"] == "INFO"
    # defaults untouched
    assert DEFAULT_CONFIG["fit"]["resolution_divisor"] == 3.46
