
"""
literals.py
Encodes scalar values as JSON text: null, booleans, numbers and strings.
Numbers follow the ECMAScript Number-to-String rules so output matches what a JavaScript
engine would print (e.g. 100.0 -> 100, 1e21 -> 1e+21, 0.00001 -> 0.00001).
Related modules:
- values.py: Classifies values before they reach these encoders.
- encoder.py: Calls `encode_scalar` for every non-container value.
"""

import json
import math
import re
from decimal import Decimal
from typing import Any

_SURROGATE = re.compile("[\ud800-\udfff]")

# ints wider than this overflow a double
MAX_INT_BITS = 1024


def quote_string(text: str) -> str:
    """
    Double-quote a string with JSON escapes for quote, backslash and control characters.
    Non-ASCII characters are kept as-is; lone surrogates are written as \\uXXXX escapes.
    """
    quoted = json.dumps(text, ensure_ascii=False)
    return _SURROGATE.sub(lambda m: "\\u%04x" % ord(m.group()), quoted)


def format_number(number: Any) -> str:
    """
    Format an int or float the way JavaScript prints a Number.
    Args:
        number (int|float): Value to format.
    Returns:
        str: Number literal, or "null" when the value is NaN or infinite.
    """
    if isinstance(number, int):
        # past the double range a JavaScript Number is Infinity
        if number.bit_length() > MAX_INT_BITS:
            return "null"
        return str(number)
    if not math.isfinite(number):
        return "null"
    if number == 0:
        # -0 prints as 0
        return "0"
    sign, digit_tuple, exponent = Decimal(repr(number)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    # trailing zeros stripped above move into the exponent
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    n = exponent + k
    prefix = "-" if sign else ""
    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * (-n) + digits
    e = n - 1
    e_text = ("+" if e >= 0 else "-") + str(abs(e))
    if k == 1:
        return prefix + digits + "e" + e_text
    return prefix + digits[0] + "." + digits[1:] + "e" + e_text


def encode_scalar(value: Any) -> str:
    """Encode None, bool, int, float or str as a JSON literal."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return quote_string(value)
    raise TypeError(f"not a scalar value: {type(value).__name__}")
