"""Core providers-domain exports."""

from partysort.core.providers.factory import create_party
from partysort.core.providers.file import JsonFileParty, RosterFile
from partysort.core.providers.memory import InMemoryParty, PartyOperation

__all__ = ["InMemoryParty", "JsonFileParty", "PartyOperation", "RosterFile", "create_party"]
