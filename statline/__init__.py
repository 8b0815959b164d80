"""Compose a one-line system status from small components and publish it."""

__version__ = "1.0.0"