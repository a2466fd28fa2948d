"""
Configuration for kcgraph.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class NodeConfig(BaseModel):
    """Node identity, digest and link naming configuration."""

    id_prefix: str = "kentico-cloud"
    type_prefix: str = "KenticoCloud"
    digest_algorithm: str = "md5"
    linked_suffix: str = "Linked"
    rich_text_links_key: str = "linkedItems"
    cycle_path_separator: str = " -> "


class Config(BaseModel):
    """Main configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    nodes: NodeConfig = Field(default_factory=NodeConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in working directory)

        Returns:
            Config instance

        Environment variables:
            KCGRAPH_ID_PREFIX: Prefix of readable node IDs
            KCGRAPH_TYPE_PREFIX: Prefix of internal.type labels
            KCGRAPH_DIGEST_ALGORITHM: hashlib algorithm for content digests
            KCGRAPH_LINKED_SUFFIX: Suffix of embedded reference link fields
            KCGRAPH_RICH_TEXT_LINKS_KEY: Key of rich text link lists
            KCGRAPH_CYCLE_PATH_SEPARATOR: Separator used in cycle diagnostics
            KCGRAPH_LOG_LEVEL: Log level
            KCGRAPH_LOG_TO_FILE: Enable rotating file log
            KCGRAPH_LOG_DIR: Directory of the file log
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None or value == "":
                return default
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            return value

        return cls(
            nodes=NodeConfig(
                id_prefix=get_env("KCGRAPH_ID_PREFIX", "kentico-cloud"),
                type_prefix=get_env("KCGRAPH_TYPE_PREFIX", "KenticoCloud"),
                digest_algorithm=get_env("KCGRAPH_DIGEST_ALGORITHM", "md5"),
                linked_suffix=get_env("KCGRAPH_LINKED_SUFFIX", "Linked"),
                rich_text_links_key=get_env("KCGRAPH_RICH_TEXT_LINKS_KEY", "linkedItems"),
                cycle_path_separator=get_env("KCGRAPH_CYCLE_PATH_SEPARATOR", " -> "),
            ),
            logging=LoggingConfig(
                level=get_env("KCGRAPH_LOG_LEVEL", "INFO"),
                log_to_file=get_env("KCGRAPH_LOG_TO_FILE", False),
                log_dir=get_env("KCGRAPH_LOG_DIR", "logs"),
                file_rotation=get_env("KCGRAPH_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("KCGRAPH_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("KCGRAPH_LOG_COMPRESSION", "zip"),
                serialize=get_env("KCGRAPH_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        # Only sections that differ from the defaults count as env overrides
        final_dict = {**config_dict}
        default = cls()
        if env_config.nodes != default.nodes:
            final_dict["nodes"] = env_config.nodes.model_dump()
        if env_config.logging != default.logging:
            final_dict["logging"] = env_config.logging.model_dump()

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
