"""Model factory exceptions.

Raised by the registry and the assembly operations.  Callers of the
use cases receive them unchanged.
"""

from __future__ import annotations


class ModelFactoryError(Exception):
    """Base class for registry and assembly failures."""


class InvalidArgument(ModelFactoryError, ValueError):
    """A model-type name or event type failed validation."""


class UnregisteredModel(ModelFactoryError, LookupError):
    """No constructor is registered for the requested model type."""


class UnregisteredModelEvent(ModelFactoryError, LookupError):
    """No constructor is registered for the (event type, model type) pair."""


class InvalidConstructorResult(ModelFactoryError, TypeError):
    """A registered constructor returned something other than a mapping."""
