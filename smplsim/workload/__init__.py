"""Random variate generation for client models."""

from .random_streams import RandomStreams

__all__ = ["RandomStreams"]
