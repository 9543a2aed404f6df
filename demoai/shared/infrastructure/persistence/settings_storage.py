"""Host storage for the user settings tree."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

import yaml

logger = logging.getLogger(__name__)


class SettingsStorage(Protocol):
    """Best-effort persistence: ``load`` returns {} and ``save`` returns False on failure."""

    def load(self) -> Dict[str, Any]: ...

    def save(self, tree: Dict[str, Any]) -> bool: ...


class InMemorySettingsStorage:
    """Keeps the last saved tree for the lifetime of the process."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self.save_count = 0

    def load(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def save(self, tree: Dict[str, Any]) -> bool:
        self._data = copy.deepcopy(tree)
        self.save_count += 1
        return True


class YamlSettingsStorage:
    """Stores the settings tree as a YAML document."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load settings from {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {self.path}: top level is not a mapping")
            return {}
        return data

    def save(self, tree: Dict[str, Any]) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(tree, f, default_flow_style=False, sort_keys=False, indent=2)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to save settings to {self.path}: {e}")
            return False

        logger.info(f"Settings saved to {self.path}")
        return True
