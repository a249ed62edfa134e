"""Configuration management for lgrep."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from lgrep.config.paths import default_config_path
from lgrep.platform.logging import logger


DEFAULT_FILE_PATTERN = "*.txt"
# utf-8-sig reads plain UTF-8 too and drops a leading byte order mark
DEFAULT_ENCODING = "utf-8-sig"
DEFAULT_ENCODING_ERRORS = "replace"
DEFAULT_CANCEL_KEY = "c"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; file logging stays off when unset
    log_file: Path | None = _path_field()

    # Glob used when no pattern is given on the command line or at the prompt
    default_file_pattern: str = DEFAULT_FILE_PATTERN

    # Scanner pool size; None lets the executor choose
    max_workers: int | None = None

    # Text decoding applied to every scanned file
    encoding: str = DEFAULT_ENCODING
    encoding_errors: str = DEFAULT_ENCODING_ERRORS

    # Key that cancels a running search
    cancel_key: str = DEFAULT_CANCEL_KEY

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)
            elif value is not None and not isinstance(value, Path):
                logger.warning("Ignoring invalid %s=%r; expected a path", f.name, value)
                setattr(self, f.name, None)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit TOML file to read. Defaults to the portable
                location resolved by ``default_config_path``.

        Returns:
            Config: Loaded configuration object. Defaults are used when the
            file does not exist.

        Raises:
            tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        target = config_file if config_file is not None else default_config_path()

        if not target.exists():
            logger.debug("No configuration file at %s; using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, target)
                del config_dict[key]

            logger.debug("Configuration loaded from %s", target)
            instance = cls(**config_dict)

        cls._instance = instance
        cls._loaded_from = target
        return instance


__all__ = [
    "Config",
    "DEFAULT_CANCEL_KEY",
    "DEFAULT_ENCODING",
    "DEFAULT_ENCODING_ERRORS",
    "DEFAULT_FILE_PATTERN",
]
