"""
This module provides the `ConfigManager` class, responsible for loading the
optional YAML config file and resolving conversion settings from it.
"""

import typer
import yaml
from typing import Dict, Any, Optional

from prisma_graphql.core.exceptions import ConfigError
from prisma_graphql.utils.config import settings
from prisma_graphql.utils.utils import load_config
from prisma_graphql.utils.logger import get_logger

logger = get_logger(__name__)


class ConfigManager:
    """
    Resolves conversion settings from CLI values, an optional config file and
    the environment, in that order of precedence.

    A config file is a YAML mapping; the only recognised key is `output`:

        output: ${SCHEMA_DIR}/models.graphql
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        if not config_path:
            return

        try:
            logger.info(f"Loading configuration from '{config_path}'...")
            self.config = load_config(config_path)
            logger.info("Configuration loaded successfully.")
        except FileNotFoundError:
            typer.echo(
                f"❌ Configuration file not found: {config_path}", err=True
            )
            raise typer.Exit(code=1)
        except (yaml.YAMLError, ConfigError) as e:
            typer.echo(f"❌ Invalid configuration file: {e}", err=True)
            raise typer.Exit(code=1)

    def get_output_path(self, cli_output: Optional[str]) -> str:
        """Determines the destination file for the generated schema."""
        if cli_output:
            return cli_output

        configured = self.config.get("output")
        if configured:
            logger.info(f"Using output path from {self.config_path}.")
            return str(configured)

        return settings.default_output_path
