"""Application configuration loaded from a JSON file."""

from pathlib import Path
from typing import Literal, TypeVar

from pydantic import BaseModel

from hubhealth.models.exceptions import DataLoadingError
from hubhealth.utils.logging import LogConfig, get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = Path("config.json")

ModelT = TypeVar("ModelT", bound=BaseModel)


class Config(BaseModel):
    """Top-level application configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Path | None = Path("hubhealth.log")
    user_prefs_file_path: Path = Path("preferences.json")

    def log_config(self) -> LogConfig:
        """Build the logging configuration for this config."""
        return LogConfig(level=self.log_level, log_file=self.log_file)


def read_json_model(path: Path, model_class: type[ModelT]) -> ModelT | None:
    """Read a pydantic model from a JSON file.

    Args:
        path: File to read
        model_class: Model to validate the file contents against

    Returns:
        The parsed model, or None if the file does not exist

    Raises:
        DataLoadingError: If the file cannot be read or does not validate
    """
    if not path.exists():
        logger.info(f"{path} not found")
        return None

    try:
        return model_class.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"Error reading from {path}: {e}")
        raise DataLoadingError(f"Could not load {path}: {e}") from e


def save_json_model(path: Path, model: BaseModel) -> None:
    """Write a pydantic model to a JSON file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(model.model_dump_json(indent=2, by_alias=True) + "\n", encoding="utf-8")


def load_config(path: Path | None = None) -> Config:
    """Load the config file, falling back to defaults.

    A missing or unreadable file yields the default config. The result is
    written back so that new fields appear in the user's file.
    """
    config_path = path or DEFAULT_CONFIG_FILE
    logger.info(f"Using config file: {config_path}")

    try:
        config = read_json_model(config_path, Config) or Config()
    except DataLoadingError:
        logger.warning(f"Config file at {config_path} is not in the correct format. Using default config properties.")
        config = Config()

    try:
        save_json_model(config_path, config)
    except OSError as e:
        logger.warning(f"Failed to save config file: {e}")

    return config
