"""Registry module - Process-wide named logger lookup"""

from logstack.registry.registry import Registry

__all__ = ["Registry"]
