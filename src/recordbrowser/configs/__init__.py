from .credentials import ConnectionDescriptor, resolve

__all__ = ["ConnectionDescriptor", "resolve"]
