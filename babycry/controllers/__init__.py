"""FastAPI routers acting as controllers in the MVC architecture."""

from . import analysis, chat

__all__ = ["analysis", "chat"]
