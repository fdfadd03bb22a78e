"""Configuration management for mediastream."""

from typing import Optional, Dict, Any
from pathlib import Path
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings
import yaml
import logging
import os

# Suppress python-dotenv warnings for YAML configuration files
os.environ.setdefault("DOTENV_PROPAGATE_WARNINGS", "false")

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Line reader configuration."""

    encoding: str = "utf-8"  # Used when the stream yields bytes
    decode_errors: str = "strict"  # strict, replace, ignore


class OutputConfig(BaseModel):
    """CLI output configuration."""

    limit: Optional[int] = None  # Max rows in the entries table
    json_indent: int = 2


class MediastreamConfig(BaseSettings):
    """Main mediastream configuration."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    class Config:
        """Pydantic settings config."""

        # Don't use env_file - we load YAML manually via from_file()
        env_prefix = "MEDIASTREAM_"
        env_nested_delimiter = "__"
        env_ignore_empty = True

    @classmethod
    def from_file(cls, config_path: str | Path = "mediastream.yaml") -> "MediastreamConfig":
        """Load configuration from YAML file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            config_dict = yaml.safe_load(f) or {}

        parser_config = config_dict.get("parser", {})
        output_config = config_dict.get("output", {})

        return cls(
            parser=ParserConfig(**parser_config) if parser_config else ParserConfig(),
            output=OutputConfig(**output_config) if output_config else OutputConfig(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "parser": self.parser.model_dump(),
            "output": self.output.model_dump(),
        }

    def to_yaml(self) -> str:
        """Convert configuration to YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False)

    def save(self, path: str | Path = "mediastream.yaml") -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            f.write(self.to_yaml())

        logger.info(f"Configuration saved to {path}")


def get_config_value(config: MediastreamConfig, path: str, default: Any = None) -> Any:
    """Get a nested config value using dot notation."""
    keys = path.split(".")
    current = config.model_dump()

    for key in keys:
        if isinstance(current, dict) and key in current:
            current = current[key]
        else:
            return default

    return current
