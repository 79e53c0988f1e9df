"""Configuration for git invocations."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field


class GitConfig(BaseModel):
    """Session-scoped settings shared by every invocation."""

    model_config = ConfigDict(validate_assignment=True)

    binary: str = Field(default="git")
    working_directory: Path = Field(default=Path("."))
    timeout: int = Field(default=7200, ge=1)

    # Variables layered over the inherited environment for each child process
    env: dict[str, str] = Field(default_factory=dict)

    # Rendered as global `-c key=value` flags ahead of the subcommand
    config_overrides: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "GitConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        if "GITWRAP_BINARY" in os.environ:
            config_dict["binary"] = os.environ["GITWRAP_BINARY"]
        if "GITWRAP_WORKING_DIR" in os.environ:
            config_dict["working_directory"] = Path(os.environ["GITWRAP_WORKING_DIR"])
        if "GITWRAP_TIMEOUT" in os.environ:
            try:
                config_dict["timeout"] = int(os.environ["GITWRAP_TIMEOUT"])
            except ValueError:
                pass  # Keep default if invalid

        return cls(**config_dict)
