"""
Unit tests for configuration loading and output path resolution.
"""

import pytest
import typer

from prisma_graphql.config.manager import ConfigManager
from prisma_graphql.core.exceptions import ConfigError
from prisma_graphql.utils.config import Settings
from prisma_graphql.utils.utils import expand_env_vars, load_config


def test_expand_env_vars(monkeypatch):
    monkeypatch.setenv("SCHEMA_DIR", "apps/web")

    assert expand_env_vars("output: ${SCHEMA_DIR}/x.graphql") == (
        "output: apps/web/x.graphql"
    )


def test_expand_env_vars_missing_variable(monkeypatch):
    monkeypatch.delenv("NOT_A_REAL_VAR", raising=False)

    with pytest.raises(ConfigError, match="NOT_A_REAL_VAR"):
        expand_env_vars("output: ${NOT_A_REAL_VAR}")


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert load_config(str(path)) == {}


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_config(str(path))


def test_output_path_precedence(tmp_path, mocker):
    mocker.patch(
        "prisma_graphql.config.manager.settings"
    ).default_output_path = "from/env.graphql"
    path = tmp_path / "config.yaml"
    path.write_text("output: from/config.graphql\n")

    manager = ConfigManager(str(path))

    assert manager.get_output_path("from/cli.graphql") == "from/cli.graphql"
    assert manager.get_output_path(None) == "from/config.graphql"
    assert ConfigManager().get_output_path(None) == "from/env.graphql"


def test_missing_config_file_exits(tmp_path):
    with pytest.raises(typer.Exit) as exc_info:
        ConfigManager(str(tmp_path / "missing.yaml"))

    assert exc_info.value.exit_code == 1


def test_invalid_yaml_exits(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("output: [unclosed\n")

    with pytest.raises(typer.Exit):
        ConfigManager(str(path))


@pytest.mark.parametrize(
    "raw, expected", [("debug", "DEBUG"), ("verbose", "WARNING"), ("", "WARNING")]
)
def test_settings_log_level_fallback(monkeypatch, raw, expected):
    monkeypatch.setenv("PRISMA_GRAPHQL_LOG_LEVEL", raw)

    assert Settings().log_level == expected
