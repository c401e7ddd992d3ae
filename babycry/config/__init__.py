"""Runtime configuration."""

from .settings import GeminiConfig, Settings, settings

__all__ = ["GeminiConfig", "Settings", "settings"]
