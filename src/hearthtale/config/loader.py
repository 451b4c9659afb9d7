from __future__ import annotations

import logging
from importlib.resources import files as resource_files
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from hearthtale.exceptions import ConfigError
from hearthtale.items.models import ItemKind

logger = logging.getLogger(__name__)


class CapacityConfig(BaseModel):
    """Container sizes for one character type. Unset sizes fall back to the type's defaults."""

    arsenal: Optional[int] = Field(default=None, gt=0, description="Weapon slots")
    medical_bag: Optional[int] = Field(default=None, gt=0, description="Potion slots")
    spell_book: Optional[int] = Field(default=None, gt=0, description="Spell slots")

    def by_kind(self) -> Dict[ItemKind, int]:
        """Sizes keyed by the item kind each container holds, skipping unset ones."""
        sizes = {
            ItemKind.WEAPON: self.arsenal,
            ItemKind.POTION: self.medical_bag,
            ItemKind.SPELL: self.spell_book,
        }
        return {kind: size for kind, size in sizes.items() if size is not None}


def _default_capacities() -> Dict[str, CapacityConfig]:
    return {
        "fighter": CapacityConfig(arsenal=3, medical_bag=5),
        "wizard": CapacityConfig(medical_bag=10, spell_book=10),
        "archer": CapacityConfig(arsenal=2, medical_bag=3, spell_book=2),
    }


class EngineConfig(BaseModel):
    """Runtime configuration for the command engine."""

    log_file: str = Field(default="story_log.txt", min_length=1, description="Narration sink path")
    capacities: Dict[str, CapacityConfig] = Field(default_factory=_default_capacities)

    @field_validator("capacities")
    @classmethod
    def fill_missing_types(cls, v: Dict[str, CapacityConfig]) -> Dict[str, CapacityConfig]:
        # A partial file only overrides the types it names
        merged = _default_capacities()
        merged.update({k.lower(): c for k, c in (v or {}).items()})
        return merged

    def capacities_for(self, character_type: str) -> CapacityConfig:
        return self.capacities.get(character_type.lower(), CapacityConfig())


def load_config(path: Optional[str] = None) -> EngineConfig:
    """Load engine configuration from YAML.

    If path is None, loads the embedded default resource at
    hearthtale/config/defaults.yaml.
    """
    try:
        if path is None:
            data = resource_files("hearthtale.config").joinpath("defaults.yaml").read_text(encoding="utf-8")
            logger.debug("Loaded embedded engine config resource")
        else:
            with open(path, "r", encoding="utf-8") as f:
                data = f.read()
            logger.debug("Loaded engine config from path: %s", path)
        raw = yaml.safe_load(data) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read configuration: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Configuration root must be a mapping")
    try:
        config = EngineConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
    logger.info("Engine config: log_file=%s | types=%s", config.log_file, sorted(config.capacities))
    return config
