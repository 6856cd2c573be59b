"""Configuration management for shapewrap."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from shapewrap.config.file_ops import write_text_file
from shapewrap.config.paths import default_config_path
from shapewrap.platform.logging import logger

# Circle 2.0, square 1.5, and a circle 4.2 drawn through the outline strategy.
DEFAULT_SCENE: Final[tuple[str, ...]] = ("circle=2.0", "square=1.5", "circle=4.2@outline")


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

    # Log file path
    log_file: Path | None = _path_field()

    # Shape tokens used when a command is given none
    default_scene: list[str] = field(default_factory=lambda: list(DEFAULT_SCENE))

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and check the scene list."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if not isinstance(self.default_scene, list) or not all(
            isinstance(token, str) for token in self.default_scene
        ):
            raise ValueError("default_scene must be a list of shape tokens")

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# shapewrap Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Where to store the application logs")
        lines.append('# Example: log_file = "/path/to/logs/shapewrap.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Shapes used when a command is run without tokens")
        lines.append("# Token format: KIND=SIZE or KIND=SIZE@STRATEGY")
        lines.append(f"default_scene = {self._format_toml_value(config['default_scene'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, writing the defaults when none exists.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
            ValueError: If a value has the wrong shape.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                _ = config_dict.setdefault("log_file", None)
                _ = config_dict.setdefault("default_scene", list(DEFAULT_SCENE))

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                    config_dict = {k: v for k, v in config_dict.items() if k in known}

                instance = cls(**config_dict)
                logger.info("Configuration loaded from %s", config_file)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "DEFAULT_SCENE"]
