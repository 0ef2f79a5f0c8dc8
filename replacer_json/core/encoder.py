
"""
encoder.py
Implements the Serializer class, which walks a value graph depth-first and produces JSON text,
applying the configured field selector, to_json hooks and cycle detection.
Related modules:
- values.py: Classifies values and lists mapping members.
- literals.py: Encodes scalars and member names.
- selector.py: KeyList / TransformFn selectors.
- config.py: RenderOptions controls indentation.
"""

from typing import Any, Iterator, List, Optional, Set, Tuple

from ..utils.logging import get_logger
from .config import RenderOptions
from .literals import encode_scalar, quote_string
from .selector import FieldSelector, KeyList, TransformFn
from .values import MAPPING, OPAQUE, SEQUENCE, has_to_json, iter_members, kind_of

logger = get_logger(__name__)


class CircularReferenceError(ValueError):
    """
    Raised when the value being encoded is already open on the current path (a cycle).
    Attributes:
        path (list[str]): Member keys from the root down to the one that closes the circle.
    """
    def __init__(self, path: List[str]):
        self.path = list(path)
        trail = " -> ".join(repr(k) for k in self.path) or "<root>"
        super().__init__(f"Converting circular structure to JSON: {trail} closes the circle")


# Returned by _enter when a container was pushed onto the work stack
_OPENED = object()


class _Frame:
    """An open sequence or mapping on the work stack."""
    __slots__ = ("value", "is_array", "members", "depth", "parts", "key")

    def __init__(self, value: Any, is_array: bool, members: Iterator[Tuple[str, Any]], depth: int):
        self.value = value
        self.is_array = is_array
        self.members = members
        self.depth = depth
        self.parts: List[str] = []
        # key of the member currently being encoded
        self.key: Optional[str] = None


class Serializer:
    """
    Converts Python values into JSON text.
    Interacts with user code through the optional TransformFn selector and to_json hooks.
    A Serializer holds only immutable configuration and may be shared between threads.
    """
    def __init__(self, selector: Optional[FieldSelector] = None, options: Optional[RenderOptions] = None):
        """
        Args:
            selector (KeyList|TransformFn|None): Member filter / transform.
            options (RenderOptions|None): Layout; compact when omitted.
        """
        self.selector = selector
        self.options = options or RenderOptions()

    def serialize(self, root: Any) -> Optional[str]:
        """
        Encode `root` as JSON text.
        Args:
            root: Value graph to encode.
        Returns:
            str|None: JSON text, or None when the root itself has no representation.
        Raises:
            CircularReferenceError: If a container is reached again through its own members.
        """
        visited: Set[int] = set()
        stack: List[_Frame] = []
        text = self._enter("", root, None, stack, visited)
        if text is not _OPENED:
            return text
        while True:
            frame = stack[-1]
            item = next(frame.members, None)
            if item is not None:
                key, child = item
                frame.key = key
                text = self._enter(key, child, frame.value, stack, visited)
                if text is not _OPENED:
                    self._append(frame, key, text)
                continue
            stack.pop()
            visited.discard(id(frame.value))
            text = self._close(frame)
            if not stack:
                return text
            parent = stack[-1]
            self._append(parent, parent.key, text)

    def _enter(self, key: str, value: Any, owner: Any, stack: List[_Frame], visited: Set[int]) -> Any:
        """
        Resolve one member. Returns its encoded text, None when it has no representation,
        or _OPENED after pushing a container frame.
        """
        if isinstance(self.selector, TransformFn):
            value = self.selector(key, value, owner)
        if has_to_json(value):
            value = value.to_json(key)
        kind = kind_of(value)
        if kind == OPAQUE:
            return None
        if kind not in (SEQUENCE, MAPPING):
            return encode_scalar(value)
        if id(value) in visited:
            path = [frame.key for frame in stack]
            logger.debug("Cycle detected at path %s", path)
            raise CircularReferenceError(path)
        visited.add(id(value))
        is_array = kind == SEQUENCE
        stack.append(_Frame(value, is_array, self._members(value, is_array), len(stack) + 1))
        return _OPENED

    def _members(self, value: Any, is_array: bool) -> Iterator[Tuple[str, Any]]:
        if is_array:
            return iter([(str(i), item) for i, item in enumerate(value)])
        members = list(iter_members(value))
        if isinstance(self.selector, KeyList):
            present = dict(members)
            return iter([(k, present[k]) for k in self.selector.keys if k in present])
        return iter(members)

    def _append(self, frame: _Frame, key: str, text: Optional[str]) -> None:
        if frame.is_array:
            # omitted elements keep their slot
            frame.parts.append("null" if text is None else text)
        elif text is not None:
            colon = ":" if self.options.compact else ": "
            frame.parts.append(quote_string(key) + colon + text)

    def _close(self, frame: _Frame) -> str:
        opening, closing = ("[", "]") if frame.is_array else ("{", "}")
        if not frame.parts:
            return opening + closing
        if self.options.compact:
            return opening + ",".join(frame.parts) + closing
        unit = self.options.indent_unit
        inner = "\n" + unit * frame.depth
        outer = "\n" + unit * (frame.depth - 1)
        return opening + inner + ("," + inner).join(frame.parts) + outer + closing
