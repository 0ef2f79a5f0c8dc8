
"""
selector.py
Defines the field selector ("replacer") variants that control which members are encoded.
- KeyList: an allow-list of member names, applied to every mapping at every depth.
- TransformFn: a function called for every (key, value, owner) triple that returns the
  replacement value, or OMIT to drop the member.
Related modules:
- encoder.py: Applies the selector while walking the value graph.
- persistence/serializer.py: Builds a selector from the raw `replacer` argument of dumps().
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union

from .literals import format_number


@dataclass(frozen=True)
class KeyList:
    """
    Allow-list of member names. Members are emitted in this order, and only when present.
    Fields:
        keys (tuple[str, ...]): Distinct member names.
    """
    keys: Tuple[str, ...]

    @classmethod
    def from_names(cls, names: Iterable) -> "KeyList":
        """
        Build a KeyList from strings and numbers; numbers use their literal text.
        Duplicates keep their first position and other entry types are ignored.
        """
        keys = []
        for name in names:
            if isinstance(name, bool):
                continue
            if isinstance(name, (int, float)):
                name = format_number(name)
            if isinstance(name, str) and name not in keys:
                keys.append(name)
        return cls(tuple(keys))


@dataclass(frozen=True)
class TransformFn:
    """
    Wraps a function fn(key, value, owner) -> replacement value or OMIT.
    The root is visited first with key "" and owner None.
    """
    fn: Callable[[str, Any, Any], Any]

    def __call__(self, key: str, value: Any, owner: Any) -> Any:
        return self.fn(key, value, owner)


FieldSelector = Union[KeyList, TransformFn]


def make_selector(replacer: Any) -> Optional[FieldSelector]:
    """
    Turn a raw replacer argument into a FieldSelector.
    Args:
        replacer: None, an existing selector, a callable, or an iterable of member names.
    Returns:
        FieldSelector|None: None when the replacer is absent or of an unsupported type.
    """
    if replacer is None or isinstance(replacer, (KeyList, TransformFn)):
        return replacer
    if callable(replacer):
        return TransformFn(replacer)
    if isinstance(replacer, (str, bytes)) or not isinstance(replacer, Iterable):
        return None
    return KeyList.from_names(replacer)
