import yaml
from pathlib import Path
import copy
import os
from typing import Any, Dict, Optional
import logging

DEFAULT_CONFIG: Dict[str, Any] = {
    "site": {
        "domain": "https://www.salatomatic.com",
        "index_path": "/sub/United-States/Alabama/Birmingham/AvcK8i3L3C",
    },
    "http": {
        "timeout_seconds": 30,
        "user_agent": "Mozilla/5.0 (compatible; MosqueDirectoryBot/1.0)",
    },
    "scraper": {
        "deduplicate_links": False,
        "max_workers": 1,
    },
    "selectors": {},
    "timezone_offsets": {},
    "text": {
        "collapse_runs_to": "",
    },
    "output": {
        "directory": ".",
        "json_file": "mosques.json",
        "csv_file": "mosques.csv",
    },
    "logging": {
        "level": "INFO",
        "file": None,
    },
}


def _merge(defaults: Dict[str, Any], override: Dict[str, Any], path: str = "") -> Dict[str, Any]:
    """Merge override onto a copy of defaults. A section that is empty or not a mapping keeps its defaults."""
    result = copy.deepcopy(defaults)
    for key, value in override.items():
        current_path = f"{path}.{key}" if path else key
        if isinstance(result.get(key), dict):
            if value is None:
                logging.debug(f"Config section {current_path} is empty, using defaults")
                continue
            if not isinstance(value, dict):
                logging.error(
                    f"Config section {current_path} must be a mapping, got {type(value).__name__}; using defaults"
                )
                continue
            result[key] = _merge(result[key], value, current_path)
        else:
            result[key] = value
    return result


class Config:
    def __init__(self, config_path: Optional[str] = None):
        logging.debug("Initializing Config class")

        self.config_file = Path(config_path).expanduser().resolve() if config_path else None
        logging.debug(f"Using config file: {self.config_file}")

        self._load_config()

    def _read_file(self) -> Dict[str, Any]:
        """Parsed YAML mapping from the config file, or {} when absent or invalid"""
        if self.config_file is None:
            logging.info("No config file given, using default configuration")
            return {}
        if not self.config_file.exists():
            logging.warning(f"Config file not found: {self.config_file}, using default configuration")
            return {}
        try:
            logging.debug(f"Loading config from: {self.config_file}")
            with open(self.config_file) as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError("Invalid config format: root must be a dictionary")
            return loaded
        except (OSError, ValueError, yaml.YAMLError) as e:
            logging.error(f"Error loading config: {e}")
            logging.info("Using default configuration")
            return {}

    def _load_config(self) -> None:
        self.data = _merge(DEFAULT_CONFIG, self._read_file())
        logging.debug(f"Loaded config data: {self.data}")

        # Expand ~ in paths
        log_file = self.data["logging"].get("file")
        if log_file:
            self.data["logging"]["file"] = os.path.expanduser(log_file)
        self.data["output"]["directory"] = os.path.expanduser(
            self.data["output"].get("directory") or "."
        )

    def get_section(self, name: str) -> Dict[str, Any]:
        """Get one top-level section, empty dict if missing"""
        section = self.data.get(name)
        return section if isinstance(section, dict) else {}
