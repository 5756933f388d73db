"""Field enumeration for records.

A record is a dataclass instance or a pydantic model instance. Rule
annotations are read from dataclass field metadata or from a pydantic
field's ``json_schema_extra``::

    @dataclass
    class User:
        name: str = field(metadata={"validate": "min:1"})

    class Account(BaseModel):
        role: str = Field(json_schema_extra={"validate": "in:admin,user"})

Fields whose name starts with an underscore are not introspectable.
"""

import dataclasses
import weakref
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from .constants import DEFAULT_TAG_KEY


@dataclass
class FieldDescriptor:
    """A single field of a record as seen by the validator."""
    name: str
    exported: bool
    tag: Any
    value: Any


def indirect(value: Any) -> Any:
    """Dereference a ``weakref.ref`` once; other values pass through."""
    if isinstance(value, weakref.ReferenceType):
        return value()
    return value


def is_record(value: Any) -> bool:
    """Check whether ``value`` is a record instance (not a record class)."""
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or isinstance(value, BaseModel)


def is_exported(name: str) -> bool:
    return not name.startswith("_")


def _read_tag(source: Any, tag_key: str) -> Any:
    if not isinstance(source, Mapping):
        return None
    tag = source.get(tag_key)
    # an empty annotation counts as absent; non-string values are left to the parser
    if tag is None or tag == "":
        return None
    return tag


def iter_fields(record: Any, tag_key: str = DEFAULT_TAG_KEY) -> Iterator[FieldDescriptor]:
    """Yield the fields of a record in declaration order.

    Raises:
        TypeError: If ``record`` is not a record instance
    """
    if isinstance(record, BaseModel):
        for name, info in type(record).model_fields.items():
            yield FieldDescriptor(
                name=name,
                exported=is_exported(name),
                tag=_read_tag(info.json_schema_extra, tag_key),
                value=getattr(record, name, None),
            )
    elif is_record(record):
        for f in dataclasses.fields(record):
            yield FieldDescriptor(
                name=f.name,
                exported=is_exported(f.name),
                tag=_read_tag(f.metadata, tag_key),
                value=getattr(record, f.name, None),
            )
    else:
        raise TypeError(f"Not a record: {type(record).__name__}")
