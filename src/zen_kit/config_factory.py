"""Factory helpers for building ZenConfig from different sources."""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError
from .models.config import RetryConfig, ZenConfig

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_PATHS: tuple[str, ...] = (".env", "~/.config/zen/.env")


class ConfigFactory:
    """Build validated ZenConfig instances.

    Every constructor wraps pydantic validation errors in
    ConfigurationError so callers only deal with zen-kit exceptions.
    """

    @staticmethod
    def create(**kwargs: Any) -> ZenConfig:
        """Create a config from keyword arguments.

        Example:
            >>> config = ConfigFactory.create(base_url="http://localhost:8080")
        """
        retry = kwargs.get("retry")
        if isinstance(retry, dict):
            kwargs["retry"] = ConfigFactory._build_retry(retry)

        try:
            return ZenConfig(**kwargs)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def from_dict(data: dict[str, Any]) -> ZenConfig:
        """Create a config from a plain dictionary (e.g. parsed YAML/TOML)."""
        return ConfigFactory.create(**dict(data))

    @staticmethod
    def from_environment_only() -> ZenConfig:
        """Load configuration from ``ZEN_*`` environment variables only."""
        try:
            return ZenConfig()  # type: ignore[call-arg]
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def from_env_file(env_file: str | Path, *, required: bool = False) -> ZenConfig:
        """Load configuration from a ``.env`` file, falling back to the environment.

        Args:
            env_file: Path to the .env file
            required: Raise if the file does not exist

        Raises:
            ConfigurationError: If the file is required but missing, or values are invalid
        """
        path = Path(env_file).expanduser()
        if not path.is_file():
            if required:
                raise ConfigurationError(f".env file not found: {path}")
            logger.debug(f"No .env file at {path}, using environment variables")
            return ConfigFactory.from_environment_only()

        try:
            retry = RetryConfig(_env_file=path)  # type: ignore[call-arg]
            config = ZenConfig(_env_file=path, retry=retry)  # type: ignore[call-arg]
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        logger.info(f"Loaded configuration from {path}")
        return config

    @staticmethod
    def from_env(
        search_paths: list[str] | None = None,
        *,
        required: bool = False,
    ) -> ZenConfig:
        """Load configuration from the first ``.env`` file found.

        Args:
            search_paths: Candidate .env paths, checked in order
            required: Raise if none of the paths exist
        """
        paths = search_paths if search_paths is not None else list(DEFAULT_SEARCH_PATHS)

        for candidate in paths:
            path = Path(candidate).expanduser()
            if path.is_file():
                return ConfigFactory.from_env_file(path, required=True)

        if required:
            raise ConfigurationError(f"No .env file found in: {', '.join(paths)}")

        return ConfigFactory.from_environment_only()

    @staticmethod
    def _build_retry(data: dict[str, Any]) -> RetryConfig:
        try:
            return RetryConfig(**data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(env_file: str | Path | None = None, *, required: bool = False) -> ZenConfig:
    """Load configuration from a specific .env file or the default search paths."""
    if env_file is not None:
        return ConfigFactory.from_env_file(env_file, required=required)
    return ConfigFactory.from_env(required=required)


def create_config(base_url: str, api_token: str | None = None, **kwargs: Any) -> ZenConfig:
    """Shortcut for ConfigFactory.create."""
    return ConfigFactory.create(base_url=base_url, api_token=api_token, **kwargs)
