"""Preset contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Preset(BaseModel):
    name: str
    player_names: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("preset name must not be blank")
        return stripped
