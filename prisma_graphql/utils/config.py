"""
This module manages the application's configuration settings by loading them
from environment variables.

Design Rationale:
- **`python-dotenv`**: Variables in a `.env` file next to the project are
  picked up automatically, so a monorepo can pin its output location once.
- **Singleton `Settings` object**: Settings are read once at import time and
  shared by the CLI, the config manager and the logger.
"""

import logging
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_OUTPUT_PATH = "apps/mobile/src/schema/models.graphql"


class Settings:
    """
    A centralized class for managing application settings from environment variables.
    """

    def __init__(self):
        """
        Initializes the Settings object by loading values from the environment.
        """
        # Destination used when neither the CLI nor a config file names one.
        self.default_output_path: str = os.getenv(
            "PRISMA_GRAPHQL_OUTPUT", DEFAULT_OUTPUT_PATH
        )

        # Unknown level names fall back to WARNING.
        log_level = os.getenv("PRISMA_GRAPHQL_LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = "WARNING"
        self.log_level: str = log_level


settings = Settings()
