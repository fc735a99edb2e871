"""Immutable model and event records.

Both records are frozen dataclasses: the derived attributes (id, names,
timestamps) are named fields, and whatever the registered constructor
returned is kept as a read-only ``payload``.  Payload and timestamp keys
are reachable as attributes (``model.total``, ``model.create_time``),
by subscription (``model["total"]``) and through ``to_dict()``.

Records are not ``Mapping`` subclasses: payload keys such as ``items`` or
``keys`` resolve to payload values, not to inherited methods.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping

from shared.domain.events import EventType


def _read_only(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


class _RecordView:
    """Attribute and subscription access over a record's flattened view."""

    def _as_dict(self) -> Dict[str, Any]:
        raise NotImplementedError

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails; fields must never recurse here.
        if name.startswith("_") or name in type(self).__dataclass_fields__:
            raise AttributeError(name)
        try:
            return self._as_dict()[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

    def __getitem__(self, key: str) -> Any:
        return self._as_dict()[key]

    def __contains__(self, key: object) -> bool:
        return key in self._as_dict()

    def __iter__(self) -> Iterator[str]:
        return iter(self._as_dict())

    def __len__(self) -> int:
        return len(self._as_dict())

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __reduce__(self):
        # mappingproxy cannot be pickled; rebuild from plain dicts.
        args = tuple(
            dict(value) if isinstance(value, MappingProxyType) else value
            for value in (getattr(self, f.name) for f in fields(self))
        )
        return (type(self), args)

    def to_dict(self) -> Dict[str, Any]:
        """Plain ``dict`` copy: payload first, derived fields on top."""
        return self._as_dict()


@dataclass(frozen=True, eq=True)
class Model(_RecordView):
    """A factory-built domain object (immutable)."""

    id: str
    model_name: str
    timestamps: Mapping[str, str] = field(default_factory=dict)
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamps", _read_only(self.timestamps))
        object.__setattr__(self, "payload", _read_only(self.payload))

    __hash__ = _RecordView.__hash__

    def get_id(self) -> str:
        return self.id

    def get_model_name(self) -> str:
        return self.model_name

    def _as_dict(self) -> Dict[str, Any]:
        return {
            **self.payload,
            "id": self.id,
            "model_name": self.model_name,
            **self.timestamps,
        }


@dataclass(frozen=True, eq=True)
class Event(_RecordView):
    """A factory-built record describing a change to a model (immutable)."""

    id: str
    event_name: str
    event_type: EventType
    model_name: str
    timestamps: Mapping[str, str] = field(default_factory=dict)
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamps", _read_only(self.timestamps))
        object.__setattr__(self, "payload", _read_only(self.payload))

    __hash__ = _RecordView.__hash__

    def get_id(self) -> str:
        return self.id

    def get_event_name(self) -> str:
        return self.event_name

    def get_model_name(self) -> str:
        return self.model_name

    def _as_dict(self) -> Dict[str, Any]:
        return {
            **self.payload,
            "id": self.id,
            "event_name": self.event_name,
            "event_type": self.event_type.value,
            "model_name": self.model_name,
            **self.timestamps,
        }
