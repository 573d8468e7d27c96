"""Object parent for production dependencies."""

from .object_parent import DependencyObjectParent

__all__ = ["DependencyObjectParent"]
