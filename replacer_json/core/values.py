
"""
values.py
Defines the value model understood by the serializer: the OMIT marker, Symbol values,
the to_json conversion capability, and helpers that classify Python objects into
null/boolean/number/string, sequence, mapping or opaque values.
Related modules:
- literals.py: Encodes the scalar kinds classified here.
- encoder.py: Walks sequences and mappings listed by `iter_members`.
"""

import dataclasses
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Protocol, Tuple, runtime_checkable

from .literals import MAX_INT_BITS, format_number


class _Omit:
    """
    Marker for "no value". Returned by a transform function to drop a member, and treated
    as an undefined value anywhere else in the graph.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "OMIT"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_Omit, ())


OMIT = _Omit()


@dataclass(frozen=True, eq=False)
class Symbol:
    """
    A unique, non-serializable token. Symbol values are opaque and symbol keys are skipped.
    Fields:
        description (str|None): Label shown in repr only.
    """
    description: Optional[str] = None


@runtime_checkable
class SupportsToJSON(Protocol):
    """Objects that provide their own representable value for serialization."""

    def to_json(self, key: str) -> Any:
        ...


# Value kinds returned by `kind_of`
NULL = "null"
BOOLEAN = "boolean"
NUMBER = "number"
STRING = "string"
SEQUENCE = "sequence"
MAPPING = "mapping"
OPAQUE = "opaque"


def has_to_json(value: Any) -> bool:
    """True if `value` is an instance exposing a callable `to_json` hook."""
    if isinstance(value, type):
        return False
    return isinstance(value, SupportsToJSON) and callable(getattr(value, "to_json", None))


def kind_of(value: Any) -> str:
    """
    Classify a Python object into one of the serializer's value kinds.
    Args:
        value: Any Python object.
    Returns:
        str: One of NULL, BOOLEAN, NUMBER, STRING, SEQUENCE, MAPPING, OPAQUE.
    """
    if value is None:
        return NULL
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, (int, float)):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if value is OMIT or isinstance(value, Symbol) or callable(value):
        return OPAQUE
    if isinstance(value, (list, tuple)):
        return SEQUENCE
    if isinstance(value, Mapping):
        return MAPPING
    if dataclasses.is_dataclass(value):
        return MAPPING
    if hasattr(value, "__dict__"):
        return MAPPING
    return OPAQUE


def key_text(key: Any) -> Optional[str]:
    """
    Convert a mapping key to its JSON member name.
    Returns None for keys that cannot be represented (symbols and other objects).
    """
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int):
        if key.bit_length() > MAX_INT_BITS:
            return "Infinity" if key > 0 else "-Infinity"
        return str(key)
    if isinstance(key, float):
        if math.isfinite(key):
            return format_number(key)
        if math.isnan(key):
            return "NaN"
        return "Infinity" if key > 0 else "-Infinity"
    return None


def iter_members(value: Any) -> Iterator[Tuple[str, Any]]:
    """
    Yield (member name, member value) pairs of a mapping-kind value in insertion order.
    Dataclasses yield their fields in declaration order; plain objects yield public attributes.
    Members whose key cannot be represented are skipped.
    """
    if isinstance(value, Mapping):
        pairs = value.items()
    elif dataclasses.is_dataclass(value):
        pairs = ((f.name, getattr(value, f.name)) for f in dataclasses.fields(value))
    else:
        pairs = ((k, v) for k, v in vars(value).items() if not k.startswith("_"))
    for key, member in pairs:
        name = key_text(key)
        if name is not None:
            yield name, member
