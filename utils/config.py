from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import os
import yaml
from utils.logger import LEVELS

CONFIG_ENV = "WIDGETS_CONFIG"
# config.yaml at the project root, independent of the working directory
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"

DEFAULTS: Dict[str, Any] = {
    "families": ["win", "mac"],
    "log_level": "info",
    "log_to_file": False,
    "log_dir": "Logs",
}


class ConfigError(ValueError):
    pass


class AppConfig:
    """
    Settings for the demo harness, read from a YAML file.
    Every key is optional; a missing file means all defaults.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        if path is None:
            path = os.environ.get(CONFIG_ENV, DEFAULT_CONFIG_PATH)
        self.__path = Path(path)
        self.__data = self.__load()

    def path(self) -> Path: return self.__path

    def families(self) -> List[str]: return list(self.__data["families"])

    def log_level(self) -> str: return self.__data["log_level"]

    def log_to_file(self) -> bool: return self.__data["log_to_file"]

    def log_dir(self) -> str: return self.__data["log_dir"]

    def __load(self) -> Dict[str, Any]:
        data = dict(DEFAULTS)
        if not self.__path.exists():
            return data

        with self.__path.open(encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
        if cfg is None:
            return data
        if not isinstance(cfg, dict):
            raise ConfigError(f"{self.__path}: expected a mapping at top level")

        families = cfg.get("families", data["families"])
        if not isinstance(families, list) or not all(isinstance(f, str) for f in families):
            raise ConfigError(f"{self.__path}: 'families' must be a list of names")
        if not families:
            raise ConfigError(f"{self.__path}: 'families' must not be empty")

        level = str(cfg.get("log_level", data["log_level"])).lower()
        if level not in LEVELS:
            raise ConfigError(f"{self.__path}: unknown log_level {level!r}")

        to_file = cfg.get("log_to_file", data["log_to_file"])
        if not isinstance(to_file, bool):
            raise ConfigError(f"{self.__path}: 'log_to_file' must be true or false, got {to_file!r}")

        log_dir = cfg.get("log_dir", data["log_dir"])
        if not isinstance(log_dir, str) or not log_dir.strip():
            raise ConfigError(f"{self.__path}: 'log_dir' must be a non-empty path, got {log_dir!r}")

        data.update(
            families=families,
            log_level=level,
            log_to_file=to_file,
            log_dir=log_dir,
        )
        return data
