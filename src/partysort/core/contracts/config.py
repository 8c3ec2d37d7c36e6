"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from partysort.core.contracts.preset import Preset


class PartySortConfig(BaseModel):
    version: int = 1
    provider: Literal["memory", "file"] = "file"
    roster_path: Path | None = None
    strategy: Literal["live", "batch"] = "live"
    settle_delay: float = Field(default=0.05, ge=0)
    presets: list[Preset] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_provider_paths(self) -> PartySortConfig:
        if self.provider == "file" and self.roster_path is None:
            raise ValueError("file provider requires roster_path")
        names = [preset.name for preset in self.presets]
        if len(set(names)) != len(names):
            raise ValueError("preset names must be unique")
        return self
