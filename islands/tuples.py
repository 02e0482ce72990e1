"""JSON encoding of fixed-arity tagged tuples (`request` / `response`).

Neither codec knows how to encode the tagged variants on its own, so each one
gets the same rule registered: a tuple becomes a JSON array, in order, with
every element encoded recursively.

- stdlib `json`: `TupleJSONEncoder` / `dumps`.
- pydantic-core: the `TupleArray` serializer attached to the annotated field types.
"""
from __future__ import annotations

import json
from dataclasses import fields
from enum import Enum
from functools import lru_cache
from typing import Any, ClassVar, Iterator, Mapping

from pydantic import BaseModel, PlainSerializer, TypeAdapter

from islands.streams import Mailbox


class TaggedTuple:
    """Tuple-like value whose first element is a tag naming its shape.

    Concrete variants are frozen dataclasses; `as_tuple()` yields
    `(tag, *payload)`, or `()` for the empty variants.
    """

    __slots__ = ()

    tag: ClassVar[str] = ""

    def as_tuple(self) -> tuple[Any, ...]:
        return (self.tag, *(getattr(self, f.name) for f in fields(self)))  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return len(self.as_tuple())


def _encode_item(item: Any) -> Any:
    if isinstance(item, (TaggedTuple, tuple)):
        return tuple_to_array(item)
    if isinstance(item, Enum):
        return item.value
    if isinstance(item, BaseModel):
        return item.model_dump(mode="json")
    if isinstance(item, Mailbox):
        return item.key
    return item


def tuple_to_array(value: TaggedTuple | tuple[Any, ...]) -> list[Any]:
    items = value.as_tuple() if isinstance(value, TaggedTuple) else value
    return [_encode_item(item) for item in items]


# pydantic-core registration.
TupleArray = PlainSerializer(tuple_to_array, return_type=list[Any], when_used="always")


class TupleJSONEncoder(json.JSONEncoder):
    """stdlib `json` registration, plus the other values a Game is made of."""

    def default(self, o: Any) -> Any:
        if isinstance(o, TaggedTuple):
            return tuple_to_array(o)
        if isinstance(o, BaseModel):
            # Field values are handed back to the encoder one by one, so nested
            # models and tuples also come through here.
            return {name: getattr(o, name) for name, f in type(o).model_fields.items() if not f.exclude}
        if isinstance(o, Enum):
            return o.value
        if isinstance(o, Mailbox):
            return o.key
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    return json.dumps(obj, cls=TupleJSONEncoder, **kwargs)


@lru_cache(maxsize=None)
def _adapter(variant: type) -> TypeAdapter[Any]:
    return TypeAdapter(variant)


def parse_tagged(
    value: Any,
    *,
    base: type[TaggedTuple],
    variants: Mapping[str, type[TaggedTuple]],
    empty: TaggedTuple,
) -> Any:
    """Turn `[tag, *payload]` (a decoded JSON array or a plain tuple) back into its variant.

    Instances of `base` pass through; anything else that is not a sequence is
    returned untouched so the caller's type check reports it.
    """

    if isinstance(value, base):
        return value
    if not isinstance(value, (list, tuple)):
        return value
    if not value:
        return empty

    tag, *payload = value
    variant = variants.get(tag)
    if variant is None:
        raise ValueError(f"Unknown {base.__name__.lower()} tag: {tag!r}")

    names = [f.name for f in fields(variant)]  # type: ignore[arg-type]
    if len(payload) != len(names):
        raise ValueError(f"'{tag}' carries {len(names)} values, got {len(payload)}")
    return _adapter(variant).validate_python(dict(zip(names, payload)))
