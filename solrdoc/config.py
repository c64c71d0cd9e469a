import logging
import os
import sys
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


# =============================================================================
# Mapper Configuration
# =============================================================================


class RecordBackend(StrEnum):
    """How records expose identity and associations."""

    SQLALCHEMY = "sqlalchemy"  # SQLAlchemy mapped classes
    ATTRIBUTE = "attribute"  # Plain objects with a fixed identity attribute


class MapperConfig(BaseModel):
    """Document mapper settings, read once at startup."""

    default_boost: float = Field(default=1.0, gt=0)
    type_field: str = "type_t"  # Field holding the record type name
    primary_key_field: str = "pk_s"  # Field holding the primary key value
    accessor_suffix: str = "_for_index"  # title -> record.title_for_index()
    backend: RecordBackend = RecordBackend.SQLALCHEMY
    identity_attribute: str = "id"  # Used by the attribute backend


class IndexingConfig(BaseModel):
    """Global indexing switch, threaded explicitly into IndexingService."""

    enabled: bool = True


# =============================================================================
# Solr Configuration
# =============================================================================


class SolrConfig(BaseModel):
    url: str = "http://localhost:8983/solr/default"
    timeout: float = 10.0  # Seconds, per request
    index_time_boosts: bool = True  # Solr 7+ rejects field boosts; set False there


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by SOLRDOC_CONFIG_FILE env var."""

    def get_field_value(
        self, field: Any, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load config from YAML file if specified."""
        config_file = os.environ.get("SOLRDOC_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from SOLRDOC_LOG_FILE env var."""
        return os.environ.get("SOLRDOC_LOG_FILE")


class Config(BaseSettings):
    mapper: MapperConfig = MapperConfig()
    indexing: IndexingConfig = IndexingConfig()
    solr: SolrConfig = SolrConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = {
        "env_prefix": "SOLRDOC_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows SOLRDOC_SOLR__URL override
        "extra": "ignore",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - SOLRDOC_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called early in application startup so that all module
    loggers pick up the configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("pysolr").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
