"""
cli.py
Command line tool: read JSON from a file or stdin and re-serialize it with a key allow-list,
omitted keys and/or indentation.
Usage:
    replacer-json data.json --keys title,participants --indent 2
    cat data.json | replacer-json --omit occupiedBy
"""

import argparse
import codecs
import json
import sys
from typing import List, Optional

from replacer_json.core.values import OMIT
from replacer_json.persistence.serializer import dumps
from replacer_json.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="replacer-json", description="Re-serialize JSON with a replacer and indentation.")
    parser.add_argument('file', nargs='?', default='-', help='Input JSON file ("-" or omitted for stdin)')
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument('--keys', type=str, default=None, help='Comma-separated member names to keep at every depth')
    selection.add_argument('--omit', type=str, nargs='+', default=None, help='Member names to drop wherever they appear')
    layout = parser.add_mutually_exclusive_group()
    layout.add_argument('--indent', type=int, default=0, help='Spaces per nesting level (0-10, 0 is compact)')
    layout.add_argument('--indent-str', type=str, default=None, help='Literal indent unit, e.g. "\\t"')
    parser.add_argument('--log-level', type=str, default=None, help='Logging level (default from REPLACER_JSON_LOG_LEVEL or INFO)')
    return parser


def _read_input(path: str):
    if path == '-':
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _expand_escapes(text: str) -> str:
    """Expand backslash escapes such as \\t while keeping non-ASCII characters intact."""
    return codecs.decode(text.encode("latin-1", "backslashreplace"), "unicode_escape")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        data = _read_input(args.file)
    except (OSError, ValueError) as e:
        logger.error("Could not read JSON from %s: %s", args.file, e)
        return 1

    replacer = None
    if args.keys is not None:
        replacer = [k.strip() for k in args.keys.split(',') if k.strip()]
    elif args.omit:
        omitted = set(args.omit)
        replacer = lambda key, value, owner: OMIT if key in omitted else value

    indent = _expand_escapes(args.indent_str) if args.indent_str is not None else args.indent
    text = dumps(data, replacer, indent)
    print(text if text is not None else "")
    return 0


if __name__ == "__main__":
    sys.exit(main())
