import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from name_formatter.core.exceptions import ConfigurationMissingError
from name_formatter.entities.list_spec import ListFormatSpec
from name_formatter.render.markup import MarkupMode

CONFIG_PATH = Path(__file__).resolve().parent / "data" / "name_formatter.yml"
CONFIG_ENV_VAR = "NAME_FORMATTER_CONFIG"
DEFAULT_ID = "default"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "sep1": " ",
    "sep2": ", ",
    "sep3": "",
    "markup": "none",
}

log = logging.getLogger(__name__)


class NameConfig:
    def __init__(self, data):
        self.formats = data.get("formats") or {}
        self.list_formats = data.get("list_formats") or {}
        self.settings = {**DEFAULT_SETTINGS, **(data.get("settings") or {})}
        self.settings["markup"] = MarkupMode.parse(self.settings["markup"]).value
        self.logging = data.get("logging") or {}
        self.debug = data.get("debug", False)
        self._list_specs: Dict[str, ListFormatSpec] = {}

    def _resolve(self, store: Dict[str, Any], kind: str, requested: str) -> str:
        if not store:
            raise ConfigurationMissingError(f"No {kind}s are configured")
        if requested in store:
            return requested
        if DEFAULT_ID not in store:
            raise ConfigurationMissingError(
                f"Unknown {kind} {requested!r} and no {DEFAULT_ID!r} {kind} to fall back to"
            )
        log.warning("Unknown %s %r; falling back to %r", kind, requested, DEFAULT_ID)
        return DEFAULT_ID

    def pattern_for(self, format_id: str = DEFAULT_ID) -> str:
        """Return the pattern string of a name format, falling back to the default."""
        resolved = self._resolve(self.formats, "name format", format_id)
        entry = self.formats[resolved]
        if isinstance(entry, dict):
            return str(entry.get("pattern") or "")
        return str(entry)

    def list_format_for(self, list_format_id: str = DEFAULT_ID) -> ListFormatSpec:
        """Return the ListFormatSpec of a list format, falling back to the default."""
        resolved = self._resolve(self.list_formats, "list format", list_format_id)
        spec = self._list_specs.get(resolved)
        if spec is None:
            spec = ListFormatSpec.from_mapping(self.list_formats[resolved] or {})
            self._list_specs[resolved] = spec
        return spec

    def label_for(self, store_name: str, entry_id: str) -> str:
        entry = getattr(self, store_name).get(entry_id)
        if isinstance(entry, dict) and entry.get("label"):
            return str(entry["label"])
        return entry_id


def _config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path: Optional[Union[str, Path]] = None) -> 'NameConfig':
    config_path = Path(path) if path else _config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return NameConfig(data)

_config_cache = None

def get_config() -> 'NameConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
