"""Preset bookkeeping on top of an immutable config."""

from __future__ import annotations

from pydantic import ValidationError

from partysort.core.contracts.config import PartySortConfig
from partysort.core.contracts.exceptions import ConfigError, PresetNotFoundError
from partysort.core.contracts.preset import Preset
from partysort.core.engine.editing import move_name


def _build_preset(name: str, player_names: list[str]) -> Preset:
    try:
        return Preset(name=name, player_names=list(player_names))
    except ValidationError as exc:
        raise ConfigError(f"invalid preset: {exc}") from exc


class PresetBook:
    """Read and edit the presets of a config.

    Configs are frozen, so every edit returns a new config; persisting it is
    the caller's job (see :func:`partysort.core.config.save_config`).
    """

    def __init__(self, config: PartySortConfig) -> None:
        self._config = config

    @property
    def presets(self) -> list[Preset]:
        return list(self._config.presets)

    def get(self, name: str) -> Preset:
        for preset in self._config.presets:
            if preset.name == name.strip():
                return preset
        raise PresetNotFoundError(name)

    def add(self, name: str, player_names: list[str]) -> PartySortConfig:
        preset = _build_preset(name, player_names)
        if any(existing.name == preset.name for existing in self._config.presets):
            raise ConfigError(f"A preset named {preset.name!r} already exists.")
        return self._with_presets([*self._config.presets, preset])

    def replace(
        self, name: str, *, new_name: str | None = None, player_names: list[str] | None = None
    ) -> PartySortConfig:
        current = self.get(name)
        updated = _build_preset(
            new_name if new_name is not None else current.name,
            player_names if player_names is not None else current.player_names,
        )
        if updated.name != current.name and any(p.name == updated.name for p in self._config.presets):
            raise ConfigError(f"A preset named {updated.name!r} already exists.")
        return self._with_presets([updated if p.name == current.name else p for p in self._config.presets])

    def move_player(self, name: str, player: str, new_index: int) -> PartySortConfig:
        """Move *player* to *new_index* within the preset's name list."""
        current = self.get(name)
        if player not in current.player_names:
            raise ConfigError(f"{player!r} is not in preset {current.name!r}.")
        if not 0 <= new_index < len(current.player_names):
            raise ConfigError(f"Position {new_index + 1} is outside preset {current.name!r}.")
        return self.replace(current.name, player_names=move_name(current.player_names, player, new_index))

    def delete(self, name: str) -> PartySortConfig:
        current = self.get(name)
        return self._with_presets([p for p in self._config.presets if p.name != current.name])

    def _with_presets(self, presets: list[Preset]) -> PartySortConfig:
        return self._config.model_copy(update={"presets": presets})
