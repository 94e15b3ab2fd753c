import logging
import os
import sys
from typing import Optional, TextIO

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from trending_repos.domain.exceptions import TrendingReposException
from trending_repos.infrastructure.github_client import DEFAULT_API_URL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class ConfigurationError(TrendingReposException):
    """Raised when an environment variable holds an unusable value."""
    pass


CLIENT_ENV = {
    "github_api_url": "GITHUB_API_URL",
    "log_level": "LOG_LEVEL",
}
SERVER_ENV = {
    **CLIENT_ENV,
    "port": "PORT",
    "host": "HOST",
}


class ClientSettings(BaseModel):
    """Settings every entry point needs to reach GitHub."""
    model_config = ConfigDict(frozen=True)

    github_api_url: str = Field(DEFAULT_API_URL, description="Base URL of the GitHub REST API")
    log_level: Optional[str] = Field(None, description="Root logging level; each entry point picks its own default")


class Settings(ClientSettings):
    """Settings for the HTTP server. PORT and HOST are only validated here."""
    port: int = Field(3000, ge=1, le=65535, description="HTTP listen port")
    host: str = Field("0.0.0.0", description="HTTP listen address")
    log_level: str = Field("INFO", description="Root logging level")


def _read_env(model, env_names, env_file: Optional[str]):
    load_dotenv(env_file)

    # Unset or empty variables fall back to the model defaults
    values = {}
    for field, env_name in env_names.items():
        value = os.getenv(env_name)
        if value:
            values[field] = value

    try:
        return model(**values)
    except ValidationError as e:
        fields = ", ".join(env_names[str(err["loc"][0])] for err in e.errors())
        raise ConfigurationError(f"Invalid configuration value for: {fields}") from e


def load_client_settings(env_file: Optional[str] = None) -> ClientSettings:
    """
    Reads only the variables the CLI uses, after loading a .env file if one exists.
    Server-only variables such as PORT are ignored, so a bad value there cannot break the CLI.
    """
    return _read_env(ClientSettings, CLIENT_ENV, env_file)


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Reads server settings from the process environment, after loading a .env file if one exists.
    Variables already set in the environment win over the .env file.
    """
    return _read_env(Settings, SERVER_ENV, env_file)


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(stream or sys.stdout)
        ],
        force=True,
    )
