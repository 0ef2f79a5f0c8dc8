
"""
config.py
Defines the RenderOptions dataclass, which holds the output layout settings for the serializer.
Related modules:
- encoder.py: Uses RenderOptions to lay out members and brackets.
- persistence/serializer.py: Builds RenderOptions from the raw `indent` argument.
"""

from dataclasses import dataclass
from typing import Union

# longest indent unit accepted, as in JSON.stringify
MAX_INDENT = 10


@dataclass(frozen=True)
class RenderOptions:
    """
    Output layout for a serializer call.
    Fields:
        indent_unit (str): Text repeated once per nesting level before each member.
            Empty string means compact output.
    """
    indent_unit: str = ""

    @classmethod
    def from_indent(cls, indent: Union[int, str, None] = 0) -> "RenderOptions":
        """
        Normalise a raw indent argument.
        Args:
            indent (int|str|None): Number of spaces (clamped to 0..10) or a literal unit
                (truncated to 10 characters). Anything else means compact.
        Returns:
            RenderOptions: Normalised options.
        """
        if isinstance(indent, bool):
            return cls()
        if isinstance(indent, (int, float)):
            if indent != indent:
                # NaN
                return cls()
            width = int(max(0, min(MAX_INDENT, indent)))
            return cls(" " * width)
        if isinstance(indent, str):
            return cls(indent[:MAX_INDENT])
        return cls()

    @property
    def compact(self) -> bool:
        return not self.indent_unit
