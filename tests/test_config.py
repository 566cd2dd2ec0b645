"""
Unit tests for `feedback.yaml` loading.
"""

import pytest

from feedback_analysis.config import (
    CONFIG_ENV_VAR,
    AnalysisOptions,
    ConfigError,
    find_config_path,
    load_config,
    parse_analysis_options,
)


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_load_config_resolves_paths(tmp_path):
    """Test that paths are resolved relative to the config file."""
    config_path = _write(
        tmp_path / "feedback.yaml",
        "include: feedback/*.txt\n"
        "exclude: [feedback/private/*]\n"
        "workdir: ./work\n"
        "outfile: out/report.ods\n"
        "taxonomy: custom.yaml\n",
    )

    config = load_config(config_path)

    assert config.base_dir == tmp_path.resolve()
    assert config.include == ["feedback/*.txt"]
    assert config.exclude == ["feedback/private/*"]
    assert config.workdir == (tmp_path / "work").resolve()
    assert config.outfile == (tmp_path / "out" / "report.ods").resolve()
    assert config.taxonomy_path == (tmp_path / "custom.yaml").resolve()
    assert config.analysis == AnalysisOptions()


def test_missing_required_keys(tmp_path):
    """Test the error for an incomplete config."""
    config_path = _write(tmp_path / "feedback.yaml", "include: '*.txt'\n")

    with pytest.raises(ConfigError, match="workdir, outfile"):
        load_config(config_path)


def test_missing_config_file(tmp_path):
    """Test the hint to the template command."""
    with pytest.raises(ConfigError, match="template"):
        load_config(tmp_path / "feedback.yaml")


def test_invalid_yaml(tmp_path):
    """Test that YAML syntax errors become ConfigErrors."""
    config_path = _write(tmp_path / "feedback.yaml", "include: [unclosed\n")

    with pytest.raises(ConfigError):
        load_config(config_path)


def test_analysis_options():
    """Test parsing of the optional analysis section."""
    options = parse_analysis_options({"cluster_threshold": 0.5})

    assert options.cluster_threshold == 0.5
    assert options.fallback_threshold == 0.25


@pytest.mark.parametrize(
    "value",
    [
        {"cluster_threshold": 1.5},
        {"fallback_threshold": -0.1},
        {"cluster_threshold": "high"},
        {"cluster_threshold": True},
        ["cluster_threshold"],
    ],
)
def test_invalid_analysis_options(value):
    """Test rejection of out-of-range and mistyped thresholds."""
    with pytest.raises(ConfigError):
        parse_analysis_options(value)


def test_find_config_path_precedence(tmp_path, monkeypatch):
    """Test CLI argument > environment variable > current directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert find_config_path(None).resolve() == (tmp_path / "feedback.yaml").resolve()

    monkeypatch.setenv(CONFIG_ENV_VAR, "env.yaml")
    assert str(find_config_path(None)) == "env.yaml"
    assert str(find_config_path("cli.yaml")) == "cli.yaml"
