"""Reference client models built on the engine."""

from .single_server import SingleServerModel, EventKind, DEFAULT_CONFIG

__all__ = ["SingleServerModel", "EventKind", "DEFAULT_CONFIG"]
