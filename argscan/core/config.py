"""YAML configuration for the argscan command."""

from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass, field
from typing import Dict, Optional

import yaml

from .messages import DEFAULT_BUNDLE, MessageBundle

_LOG = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = pathlib.Path(".argscan.yml")


class ConfigError(ValueError):
    """Raised when a configuration file has an unexpected shape."""


@dataclass
class ScanSettings:
    options: str = ""
    diagnostics: bool = True
    messages: Dict[str, str] = field(default_factory=dict)

    def bundle(self) -> MessageBundle:
        return DEFAULT_BUNDLE.merged(self.messages)


def load_config(path: pathlib.Path) -> ScanSettings:
    if not path.exists():
        _LOG.debug("No config at %s; using defaults", path)
        return ScanSettings()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return ScanSettings()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")

    settings = ScanSettings(
        options=_optional_str(data.get("options"), "options") or "",
        diagnostics=_optional_bool(data.get("diagnostics"), "diagnostics", default=True),
        messages=_messages(data.get("messages")),
    )
    _LOG.debug("Loaded config from %s: options=%r", path, settings.options)
    return settings


def _optional_str(value: object, name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{name}' must be a string")
    return value


def _optional_bool(value: object, name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(f"'{name}' must be true or false")
    return value


def _messages(value: object) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("'messages' must be a mapping")
    messages: Dict[str, str] = {}
    for key, template in value.items():
        if not isinstance(template, str):
            raise ConfigError(f"message '{key}' must be a string")
        messages[str(key)] = template
    return messages
