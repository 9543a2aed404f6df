"""In-memory settings tree with category-scoped partial updates."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ValidationError

from demoai.shared.core.errors import InvalidSettingValue, SettingsError, UnknownCategory, UnknownKey

from .schema import CATEGORIES, SettingsTree

if TYPE_CHECKING:
    from pydantic.fields import FieldInfo

    from demoai.shared.infrastructure.persistence.settings_storage import SettingsStorage

logger = logging.getLogger(__name__)


def _bounds(field: FieldInfo) -> Tuple[Optional[float], Optional[float]]:
    low = high = None
    for constraint in field.metadata:
        if hasattr(constraint, "ge"):
            low = constraint.ge
        if hasattr(constraint, "le"):
            high = constraint.le
    return low, high


def _step(field: FieldInfo) -> Optional[float]:
    extra = field.json_schema_extra
    if isinstance(extra, dict):
        return extra.get("step")
    return None


class SettingsStore:
    """Owns the settings tree and is the only way to change it.

    Numeric fields are clamped to their declared range and snapped to their
    step (slider semantics); every other schema violation is rejected.
    Persistence goes through an optional storage collaborator.
    """

    def __init__(
        self,
        storage: Optional[SettingsStorage] = None,
        tree: Optional[SettingsTree] = None,
    ) -> None:
        self.storage = storage
        self._tree = tree or SettingsTree()

    @property
    def tree(self) -> SettingsTree:
        return self._tree

    # --- Lookup ---

    def _category_model(self, category: str) -> BaseModel:
        if category not in CATEGORIES:
            raise UnknownCategory(category)
        return getattr(self._tree, category)

    def _field_name(self, category: str, key: str) -> str:
        fields = type(self._category_model(category)).model_fields
        if key in fields:
            return key
        for name, info in fields.items():
            if info.alias == key:
                return name
        raise UnknownKey(category, key)

    # --- Reads ---

    def get(self, category: str, key: str) -> Any:
        name = self._field_name(category, key)
        return getattr(self._category_model(category), name)

    def category(self, category: str) -> Dict[str, Any]:
        return self._category_model(category).model_dump()

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        return self._tree.model_dump()

    # --- Writes ---

    def _coerce(self, category: str, name: str, value: Any) -> Any:
        field = type(self._category_model(category)).model_fields[name]
        if field.annotation not in (int, float):
            return value

        # Slider controls report their value as a one-element list
        if isinstance(value, (list, tuple)) and len(value) == 1:
            value = value[0]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidSettingValue(category, name, value, "expected a number")
        if math.isnan(value):
            raise InvalidSettingValue(category, name, value, "expected a finite number")

        low, high = _bounds(field)
        if low is not None and value < low:
            value = low
        if high is not None and value > high:
            value = high

        step = _step(field)
        if step:
            base = low if low is not None else 0
            value = base + round((value - base) / step) * step

        if field.annotation is int:
            return int(round(value))
        return round(float(value), 6)

    def _build_category(self, category: str, updates: Mapping[str, Any]) -> BaseModel:
        current = self._category_model(category)
        values = current.model_dump()
        for key, value in updates.items():
            name = self._field_name(category, key)
            values[name] = self._coerce(category, name, value)

        try:
            return type(current).model_validate(values)
        except ValidationError as e:
            error = e.errors()[0]
            location = error["loc"][0] if error["loc"] else ""
            raise InvalidSettingValue(
                category, str(location), values.get(str(location)), error["msg"]
            ) from e

    def set(self, category: str, key: str, value: Any) -> Any:
        """Update one (category, key) pair and return the value actually stored."""
        name = self._field_name(category, key)
        updated = self._build_category(category, {name: value})
        self._tree = self._tree.model_copy(update={category: updated})

        stored = getattr(updated, name)
        if stored != value:
            logger.debug(f"Setting {category}.{name} adjusted from {value!r} to {stored!r}")
        return stored

    def update_category(self, category: str, values: Mapping[str, Any]) -> Dict[str, Any]:
        """Apply several updates to one category; nothing changes if any fails."""
        updated = self._build_category(category, values)
        self._tree = self._tree.model_copy(update={category: updated})
        return updated.model_dump()

    def reset_to_defaults(self) -> None:
        self._tree = SettingsTree()
        logger.info("Settings reset to defaults")

    # --- Persistence ---

    def load(self) -> bool:
        """Merge persisted values into the tree, skipping anything invalid."""
        if self.storage is None:
            return False

        data = self.storage.load()
        if not data:
            return False

        skipped = 0
        for category, values in data.items():
            if not isinstance(values, dict):
                logger.warning(f"Ignoring persisted settings for '{category}': not a mapping")
                skipped += 1
                continue
            for key, value in values.items():
                try:
                    self.set(category, key, value)
                except SettingsError as e:
                    logger.warning(f"Ignoring persisted setting: {e}")
                    skipped += 1

        logger.info(f"Settings loaded ({skipped} value(s) skipped)")
        return True

    def save(self) -> bool:
        if self.storage is None:
            logger.warning("No settings storage configured; settings not saved")
            return False
        return self.storage.save(self.snapshot())
