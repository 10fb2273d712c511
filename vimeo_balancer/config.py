"""Configuration management for the video selector."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import List, Optional

from .logging_utils import get_logger
from .models import Framework
from .selector import VideoSelector

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "vimeo-balancer" / "config.json"


class ConfigError(ValueError):
    pass


def _is_id(value) -> bool:
    # bool is an int subclass
    return isinstance(value, (str, int)) and not isinstance(value, bool)


@dataclass
class AppConfig:
    videos: List[str] = field(default_factory=list)
    autoplay: bool = True
    generator: str = "0"
    ratio: Optional[str] = None  # None -> 16:9 in the framework's notation
    framework: str = Framework.BOOTSTRAP4.value

    def __post_init__(self):
        # JSON configs commonly list numeric Vimeo ids
        self.videos = [str(v) for v in self.videos]
        self.generator = str(self.generator)

    def build_selector(self, **kwargs) -> VideoSelector:
        return VideoSelector(self.videos, autoplay=self.autoplay, **kwargs)

    def save(self, path: Path) -> None:
        """Saves the configuration to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def from_file(cls, path: Path) -> "AppConfig":
        """Loads configuration from a JSON file."""
        if not path.exists():
            return cls()
        with open(path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a JSON object")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            get_logger().warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))
        if "videos" in data:
            videos = data["videos"]
            if not isinstance(videos, list) or not all(_is_id(v) for v in videos):
                raise ConfigError(f"{path}: 'videos' must be a list of ids")
        if "autoplay" in data and not isinstance(data["autoplay"], bool):
            raise ConfigError(f"{path}: 'autoplay' must be true or false")
        if "generator" in data and not _is_id(data["generator"]):
            raise ConfigError(f"{path}: 'generator' must be an index or a name")
        if "ratio" in data and not (data["ratio"] is None or isinstance(data["ratio"], str)):
            raise ConfigError(f"{path}: 'ratio' must be a string such as \"16by9\" or null")
        if "framework" in data and not isinstance(data["framework"], str):
            raise ConfigError(f"{path}: 'framework' must be a string")
        return cls(**{k: v for k, v in data.items() if k in known})


__all__ = ["AppConfig", "ConfigError", "DEFAULT_CONFIG_PATH"]
