"""Factory for creating party adapters from config."""

from __future__ import annotations

from partysort.core.contracts.config import PartySortConfig
from partysort.core.contracts.exceptions import ConfigError
from partysort.core.contracts.party import Party
from partysort.core.providers.file import JsonFileParty
from partysort.core.providers.memory import InMemoryParty


def create_party(config: PartySortConfig) -> Party:
    if config.provider == "memory":
        return InMemoryParty()
    if config.provider == "file":
        if config.roster_path is None:
            raise ConfigError("file provider requires roster_path")
        return JsonFileParty(config.roster_path)
    raise ConfigError(f"Unknown provider: {config.provider!r}. Available: file, memory")
