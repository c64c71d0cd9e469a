"""Optional extension data merged into a document: dynamic attributes, tags, location."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from solrdoc.domain.shared.model.value import ValueObject


class DynamicAttribute(ValueObject):
    name: str
    value: Any


class Location(ValueObject):
    latitude: float
    longitude: float


class DocumentExtras(ValueObject):
    """Caller-supplied extension blocks.

    Each block is only emitted when the matching toggle is set on the
    IndexingSpec (`dynamic_attributes`, `taggable`, `spatial`).
    """

    dynamic_attributes: tuple[DynamicAttribute, ...] = ()
    tags: tuple[str, ...] = ()
    location: Location | None = None

    @classmethod
    def from_record(cls, record: Any) -> DocumentExtras:
        """Collect extension data from the capabilities a record exposes.

        - `dynamic_attributes`: mapping, or iterable of objects with `name`/`value`
        - `tags` or `taggings`: iterable of strings, objects with `name`,
          or taggings with a `tag.name`
        - `location`: object with `latitude`/`longitude`
        """
        return cls(
            dynamic_attributes=tuple(_dynamic_attributes(record)),
            tags=tuple(_tags(record)),
            location=_location(record),
        )


def _dynamic_attributes(record: Any) -> list[DynamicAttribute]:
    attrs = getattr(record, "dynamic_attributes", None)
    if not attrs:
        return []
    if isinstance(attrs, Mapping):
        return [DynamicAttribute(name=str(k), value=v) for k, v in attrs.items()]
    return [DynamicAttribute(name=a.name, value=a.value) for a in attrs]


def _tags(record: Any) -> list[str]:
    items = getattr(record, "tags", None) or getattr(record, "taggings", None) or []
    names = []
    for item in items:
        if isinstance(item, str):
            names.append(item)
        elif hasattr(item, "tag"):
            names.append(item.tag.name)
        else:
            names.append(item.name)
    return names


def _location(record: Any) -> Location | None:
    loc = getattr(record, "location", None)
    if loc is None:
        return None
    return Location(latitude=loc.latitude, longitude=loc.longitude)
