"""
Configuration service using Pydantic for type-safe config management.

The archiver reads one YAML file whose "semd" section holds the run
settings. Keys may be nested under "semd" or written flat with a "semd."
prefix, so a legacy properties file converts line by line:

    semd.month: 5
    semd.with-structure: CategoryA, CategoryB
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.archiver.errors import InvalidDateConfig, MissingConfig
from src.archiver.models.options import DateAttribute, Disposition, ErrorPolicy

logger = logging.getLogger(__name__)

SECTION = "semd"
ENV_OVERRIDES = {
    "SEMD_MONTH": "month",
    "SEMD_YEAR": "year",
}
DATE_FIELDS = {"month", "year"}


class ArchiveSettings(BaseModel):
    """Settings of the "semd" section."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    month: Optional[int] = None
    year: Optional[int] = None
    with_structure: Optional[List[str]] = Field(default=None, alias="with-structure")
    without_structure: List[str] = Field(default_factory=list, alias="without-structure")
    folders: Optional[List[str]] = None
    cutoff_inclusive: bool = Field(default=True, alias="cutoff-inclusive")
    disposition: Disposition = Disposition.MOVE
    holding_dir: str = Field(default="deleted", alias="holding-dir")
    skip_archives: bool = Field(default=True, alias="skip-archives")
    on_archive_error: ErrorPolicy = Field(default=ErrorPolicy.ABORT, alias="on-archive-error")
    date_attribute: DateAttribute = Field(default=DateAttribute.CREATED, alias="date-attribute")
    reserved_names: List[str] = Field(default_factory=list, alias="reserved-names")

    @field_validator(
        "with_structure", "without_structure", "folders", "reserved_names",
        mode="before"
    )
    @classmethod
    def _split_names(cls, value):
        # Comma separated strings are the properties-file spelling of a list
        if value is None:
            return value
        if isinstance(value, str):
            return [name.strip() for name in value.split(",") if name.strip()]
        return [str(name).strip() for name in value]

    @property
    def structured_folders(self) -> Optional[List[str]]:
        """Structured category names; None means every non-flat category."""
        if self.with_structure is not None:
            return self.with_structure
        return self.folders


class AppConfig(BaseModel):
    """Main application configuration."""
    semd: ArchiveSettings = Field(default_factory=ArchiveSettings)


def normalize_raw_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fold "semd.<key>" top-level keys into the "semd" section.

    Raises:
        MissingConfig: If the "semd" section is present but not a mapping
    """
    section = raw.get(SECTION) or {}
    if not isinstance(section, dict):
        raise MissingConfig(f"Section {SECTION} is not a mapping: {section!r}")
    section = dict(section)
    normalized = {}
    prefix = f"{SECTION}."
    for key, value in raw.items():
        if key == SECTION:
            continue
        if isinstance(key, str) and key.startswith(prefix):
            section[key[len(prefix):]] = value
        else:
            normalized[key] = value
    normalized[SECTION] = section
    return normalized


class ConfigService:
    """Service for loading and managing configuration."""

    def __init__(self, config_path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None):
        """
        Load configuration.

        Args:
            config_path: YAML file (default: config.yaml)
            environ: Environment used for SEMD_* overrides (default: os.environ)

        Raises:
            MissingConfig: If the file is absent, unreadable or invalid
            InvalidDateConfig: If month or year is not an integer
        """
        self.config_path = Path(config_path) if config_path else Path("config.yaml")
        self.environ = os.environ if environ is None else environ
        self._config: Optional[AppConfig] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            raise MissingConfig(f"Configuration file not found: {self.config_path}")

        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise MissingConfig(f"Cannot read configuration {self.config_path}: {e}") from e

        if not isinstance(raw_config, dict):
            raise MissingConfig(f"Configuration {self.config_path} is not a mapping")

        raw_config = normalize_raw_config(raw_config)
        for env_name, key in ENV_OVERRIDES.items():
            if self.environ.get(env_name):
                logger.info(f"Overriding {SECTION}.{key} from {env_name}")
                raw_config[SECTION][key] = self.environ[env_name]

        self._config = self._validate(raw_config)
        logger.info(f"Configuration loaded from {self.config_path}")

    @staticmethod
    def _validate(raw_config: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig(**raw_config)
        except ValidationError as e:
            fields = {str(err["loc"][-1]) for err in e.errors() if err.get("loc")}
            if fields & DATE_FIELDS:
                raise InvalidDateConfig(f"Invalid date configuration: {e}") from e
            raise MissingConfig(f"Config validation error: {e}") from e

    def get_config(self) -> AppConfig:
        """Get current configuration."""
        if self._config is None:
            self._load_config()
        return self._config

    def get_settings(self) -> ArchiveSettings:
        """
        Get the archive settings.

        Raises:
            MissingConfig: If semd.month is not set
        """
        settings = self.get_config().semd
        if settings.month is None:
            raise MissingConfig(f"Required key {SECTION}.month is missing in {self.config_path}")
        return settings

    def update_settings(self, updates: Dict[str, Any]) -> None:
        """Update archive settings (does not persist to file)."""
        current = self.get_config().model_dump()
        current[SECTION].update({k: v for k, v in updates.items() if v is not None})
        self._config = self._validate(current)
