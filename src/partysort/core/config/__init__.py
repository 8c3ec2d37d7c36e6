"""Core configuration exports."""

from partysort.core.config.loader import load_config, save_config
from partysort.core.config.presets import PresetBook

__all__ = ["PresetBook", "load_config", "save_config"]
