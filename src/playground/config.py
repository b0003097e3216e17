"""Configuration management for Playground."""

import os
from pathlib import Path

import yaml

from . import log
from .model import Mix

logger = log.get_logger("config")

DEFAULT_LOCATIONS = ["Portland", "Seattle", "Austin"]
DEFAULT_BUILDING_TYPES = ["Lab", "Administration", "Housing"]
DEFAULT_FOOD = ["Chicken", "Bread", "Limes", "Carrots"]
DEFAULT_MIX_NAME = "Rum and coke"
DEFAULT_MIX_INGREDIENTS = ["Rum", "Coke", "Ice"]

USER_CONFIG_PATH = Path.home() / ".playground" / "config.yml"

DEFAULT_CONFIG = """# Main window
window_title: "SwiftUI"
window_width: 420
window_height: 640

# Log level: DEBUG, INFO, WARNING or ERROR
log_level: INFO

# Form view pickers
locations: [Portland, Seattle, Austin]
building_types: [Lab, Administration, Housing]

# List view rows
food: [Chicken, Bread, Limes, Carrots]

# Drink loaded by the "Load" button of the data binding view
sample_mix:
  name: "Rum and coke"
  ingredients: [Rum, Coke, Ice]
"""


class Config:
    """Application configuration."""

    KEYS = (
        "window_title",
        "window_width",
        "window_height",
        "log_level",
        "locations",
        "building_types",
        "food",
        "sample_mix",
    )

    def __init__(
        self,
        window_title: str = "SwiftUI",
        window_width: int = 420,
        window_height: int = 640,
        log_level: str = "INFO",
        locations: list[str] | None = None,
        building_types: list[str] | None = None,
        food: list[str] | None = None,
        sample_mix_name: str = DEFAULT_MIX_NAME,
        sample_mix_ingredients: list[str] | None = None,
    ):
        self.window_title = window_title
        self.window_width = window_width
        self.window_height = window_height
        self.log_level = log_level
        self.locations = list(locations) if locations is not None else list(DEFAULT_LOCATIONS)
        self.building_types = (
            list(building_types) if building_types is not None else list(DEFAULT_BUILDING_TYPES)
        )
        self.food = list(food) if food is not None else list(DEFAULT_FOOD)
        self.sample_mix_name = sample_mix_name
        self.sample_mix_ingredients = (
            list(sample_mix_ingredients) if sample_mix_ingredients is not None else list(DEFAULT_MIX_INGREDIENTS)
        )
        self.path: Path | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build a config from parsed YAML, falling back to defaults per key."""
        for key in data:
            if key not in cls.KEYS:
                logger.warning("config key ignored", key=key)

        mix = data.get("sample_mix")
        if mix is not None and not isinstance(mix, dict):
            logger.warning("sample_mix is not a mapping, using default", value=mix)
        if not isinstance(mix, dict):
            mix = {}
        return cls(
            window_title=str(data.get("window_title", "SwiftUI")),
            window_width=int(data.get("window_width", 420)),
            window_height=int(data.get("window_height", 640)),
            log_level=str(data.get("log_level", "INFO")).upper(),
            locations=_str_list(data.get("locations"), DEFAULT_LOCATIONS),
            building_types=_str_list(data.get("building_types"), DEFAULT_BUILDING_TYPES),
            food=_str_list(data.get("food"), DEFAULT_FOOD),
            sample_mix_name=str(mix.get("name", DEFAULT_MIX_NAME)),
            sample_mix_ingredients=_str_list(mix.get("ingredients"), DEFAULT_MIX_INGREDIENTS),
        )

    @classmethod
    def load(cls, config_path: str | None = None) -> "Config":
        """Load configuration from YAML file.

        Args:
            config_path: Path to config file. If None, looks for config.yml
                        in common locations.

        Returns:
            Config instance with loaded values.
        """
        if config_path is None:
            search_paths = [
                Path("config.yml"),
                Path(__file__).parent.parent / "config.yml",
                USER_CONFIG_PATH,
            ]
            for path in search_paths:
                if path.exists():
                    config_path = str(path)
                    break

        if config_path and os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            config = cls.from_dict(data)
            config.path = Path(config_path)
            logger.debug("config loaded", path=config_path)
            return config

        # No config file found - create default in home directory
        config = cls()
        config.path = config._create_default_config()
        return config

    def _create_default_config(self) -> Path:
        """Create a default config file in the user's home directory."""
        config_path = USER_CONFIG_PATH

        # Don't overwrite if it already exists
        if config_path.exists():
            return config_path

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG)

        logger.info("created default config", path=str(config_path))
        return config_path

    def to_dict(self) -> dict:
        return {
            "window_title": self.window_title,
            "window_width": self.window_width,
            "window_height": self.window_height,
            "log_level": self.log_level,
            "locations": list(self.locations),
            "building_types": list(self.building_types),
            "food": list(self.food),
            "sample_mix": {
                "name": self.sample_mix_name,
                "ingredients": list(self.sample_mix_ingredients),
            },
        }

    def save(self, config_path: str | None = None) -> None:
        """Write the current values to config_path, or back to where they came from."""
        path = Path(config_path) if config_path else self.path or USER_CONFIG_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False, allow_unicode=True)
        self.path = path
        logger.debug("config saved", path=str(path))

    def sample_mix(self) -> Mix:
        """A new Mix holding the configured sample drink."""
        return Mix(name=self.sample_mix_name, ingredients=list(self.sample_mix_ingredients))


def _str_list(value, default: list[str]) -> list[str]:
    if value is None:
        return list(default)
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value]
