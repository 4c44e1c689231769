"""Serialization codecs for :class:`CachedRepository`.

A codec bundles the per-entity decisions a repository needs: how to tell
whether two entities share a primary key, which order the collection is kept
in, and how to turn the whole collection into file content and back again.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
import json
from typing import Any, Generic, Protocol, TypeVar

from pydantic import TypeAdapter


T = TypeVar("T")

KeyFunc = Callable[[T], Hashable]


class RepositoryCodec(Protocol[T]):
    """Primary-key equality plus whole-collection (de)serialization.

    ``arrange`` returns entities in the order ``serialize`` writes them, so
    that ``deserialize(serialize(arrange(x))) == arrange(x)``.
    """

    def is_same_primary_key(self, a: T, b: T) -> bool: ...

    def arrange(self, entities: Sequence[T]) -> list[T]: ...

    def serialize(self, entities: Sequence[T]) -> str: ...

    def deserialize(self, content: str) -> list[T]: ...


class JsonListCodec(Generic[T]):
    """Store the collection as an indented JSON array of records."""

    def __init__(self, entity_type: type[T], key: KeyFunc[T], *, indent: int = 2):
        self.entity_type = entity_type
        self.key = key
        self.indent = indent
        self._adapter: TypeAdapter[list[T]] = TypeAdapter(list[entity_type])  # type: ignore[valid-type]

    def is_same_primary_key(self, a: T, b: T) -> bool:
        return self.key(a) == self.key(b)

    def arrange(self, entities: Sequence[T]) -> list[T]:
        return list(entities)

    def serialize(self, entities: Sequence[T]) -> str:
        return self._adapter.dump_json(list(entities), indent=self.indent, by_alias=True).decode("utf-8")

    def deserialize(self, content: str) -> list[T]:
        return self._adapter.validate_json(content)


class GroupedJsonCodec(Generic[T]):
    """Store entities grouped under the value of one of their attributes.

    File layout::

        {"VR": [{...}, {...}], "RR": [{...}]}

    The group attribute is not repeated inside each record. On load every
    record is annotated with the group key it was listed under and the groups
    are flattened back into a single list in file order. A ``null`` group is
    read as empty.

    ``arrange`` orders entities the same way: groups by first appearance,
    entities within a group in their original order.
    """

    def __init__(self, entity_type: type[T], key: KeyFunc[T], *, group_by: str, indent: int = 2):
        self.entity_type = entity_type
        self.key = key
        self.group_by = group_by
        self.indent = indent
        self._item_adapter: TypeAdapter[T] = TypeAdapter(entity_type)
        self._groups_adapter: TypeAdapter[dict[str, list[dict[str, Any]] | None]] = TypeAdapter(
            dict[str, list[dict[str, Any]] | None]
        )

    def is_same_primary_key(self, a: T, b: T) -> bool:
        return self.key(a) == self.key(b)

    def arrange(self, entities: Sequence[T]) -> list[T]:
        groups: dict[str, list[T]] = {}
        for entity in entities:
            groups.setdefault(self._group_of(entity), []).append(entity)
        return [entity for members in groups.values() for entity in members]

    def serialize(self, entities: Sequence[T]) -> str:
        groups: dict[str, list[dict[str, Any]]] = {}
        for entity in self.arrange(entities):
            group = self._group_of(entity)
            record = self._item_adapter.dump_python(entity, mode="json", by_alias=True, exclude={self.group_by})
            groups.setdefault(group, []).append(record)
        return json.dumps(groups, indent=self.indent, ensure_ascii=False)

    def deserialize(self, content: str) -> list[T]:
        groups = self._groups_adapter.validate_json(content)
        return [
            self._item_adapter.validate_python({**record, self.group_by: group})
            for group, records in groups.items()
            for record in records or ()
        ]

    def _group_of(self, entity: T) -> str:
        return str(getattr(entity, self.group_by))
