
"""
serializer.py
Public entry point for turning Python values into JSON text.
Wraps the core Serializer with the familiar (value, replacer, indent) call shape.
Related modules:
- core/encoder.py: Serializer and CircularReferenceError.
- core/selector.py: Interprets the `replacer` argument.
- core/config.py: Interprets the `indent` argument.
"""

from typing import Any, Optional, Union

from ..core.config import RenderOptions
from ..core.encoder import CircularReferenceError, Serializer
from ..core.selector import make_selector

__all__ = ["dumps", "CircularReferenceError"]


def dumps(value: Any, replacer: Any = None, indent: Union[int, str, None] = 0) -> Optional[str]:
    """
    Serialize a Python value (dicts, lists, dataclasses, plain objects, scalars) to a JSON string.
    Args:
        value: Object to serialize.
        replacer: A function fn(key, value, owner) returning the value to encode (or OMIT to
            drop it), or an iterable of member names to keep at every depth.
        indent (int|str): Spaces per level (0..10) or a literal indent unit; 0 is compact.
    Returns:
        str|None: JSON string, or None if `value` itself cannot be represented.
    Raises:
        CircularReferenceError: If `value` contains a reference cycle on an encoded path.
    """
    serializer = Serializer(make_selector(replacer), RenderOptions.from_indent(indent))
    return serializer.serialize(value)
