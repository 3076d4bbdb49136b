"""Configuration management for Grocery List Builder."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class DataConfig:
    """Purchase history sources."""

    history_files: list[Path] = field(default_factory=list)


@dataclass
class ImportConfig:
    """CSV import configuration."""

    delimiter: str = "auto"
    skip_header: bool = True


@dataclass
class DefaultsConfig:
    """Default values configuration."""

    category: str = "Fruits"


@dataclass
class RecommendationSettings:
    """Tuning knobs for suggestions and rotation."""

    starting_week: int = 1
    frequent_limit: int = 10
    # Suggested lists shorter than this are padded with frequent items.
    minimum_list_size: int = 5
    due_tolerance: float = 0.5
    time_sensitive_weeks: int = 2
    rotation_weeks: int = 2


@dataclass
class Config:
    """Complete application configuration."""

    data: DataConfig
    import_: ImportConfig
    defaults: DefaultsConfig
    recommendations: RecommendationSettings


class ConfigManager:
    """Manages application configuration from TOML files."""

    def __init__(self, config_path: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional explicit path to config file.
                        If not provided, searches standard locations.
        """
        self.config_path = config_path or self._find_config()
        self._config = self._load_config()

    @property
    def data(self) -> DataConfig:
        """Get data configuration."""
        return self._config.data

    @property
    def import_(self) -> ImportConfig:
        """Get import configuration."""
        return self._config.import_

    @property
    def defaults(self) -> DefaultsConfig:
        """Get defaults configuration."""
        return self._config.defaults

    @property
    def recommendations(self) -> RecommendationSettings:
        """Get recommendation settings."""
        return self._config.recommendations

    def _find_config(self) -> Path:
        """Find config file in standard locations."""
        locations = [
            Path.cwd() / "config.toml",
            Path.home() / ".config" / "grocery-list-builder" / "config.toml",
            Path.home() / ".grocery-list-builder" / "config.toml",
        ]

        for loc in locations:
            if loc.exists():
                return loc

        # Return default location if none found
        return Path.home() / ".config" / "grocery-list-builder" / "config.toml"

    def _load_config(self) -> Config:
        """Load configuration from TOML file."""
        if not self.config_path.exists():
            return self._default_config()

        with open(self.config_path, "rb") as f:
            data = tomllib.load(f)

        data_section = data.get("data", {})
        import_section = data.get("import", {})
        rec_section = data.get("recommendations", {})
        rec_defaults = RecommendationSettings()

        return Config(
            data=DataConfig(
                history_files=[
                    Path(p).expanduser() for p in data_section.get("history_files", [])
                ],
            ),
            import_=ImportConfig(
                delimiter=import_section.get("delimiter", "auto"),
                skip_header=import_section.get("skip_header", True),
            ),
            defaults=DefaultsConfig(
                category=data.get("defaults", {}).get("category", "Fruits"),
            ),
            recommendations=RecommendationSettings(
                starting_week=rec_section.get("starting_week", rec_defaults.starting_week),
                frequent_limit=rec_section.get("frequent_limit", rec_defaults.frequent_limit),
                minimum_list_size=rec_section.get(
                    "minimum_list_size", rec_defaults.minimum_list_size
                ),
                due_tolerance=rec_section.get("due_tolerance", rec_defaults.due_tolerance),
                time_sensitive_weeks=rec_section.get(
                    "time_sensitive_weeks", rec_defaults.time_sensitive_weeks
                ),
                rotation_weeks=rec_section.get("rotation_weeks", rec_defaults.rotation_weeks),
            ),
        )

    def _default_config(self) -> Config:
        """Return default configuration."""
        return Config(
            data=DataConfig(),
            import_=ImportConfig(),
            defaults=DefaultsConfig(),
            recommendations=RecommendationSettings(),
        )

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get config value by dot-notation path.

        Args:
            key_path: Dot-separated path like 'recommendations.minimum_list_size'.
                The TOML section name 'import' is accepted for the import config.
            default: Default value if path not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split(".")
        value: Any = self._config

        for key in keys:
            if key == "import":
                key = "import_"
            if hasattr(value, key):
                value = getattr(value, key)
            elif isinstance(value, dict):
                value = value.get(key)
                if value is None:
                    return default
            else:
                return default

        return value if value is not None else default
