from __future__ import annotations

"""
C# Syntax Tree Provider.

Wraps the tree-sitter runtime and the C# grammar to turn source files into
concrete syntax trees. The grammar is error-tolerant: malformed code still
yields a tree containing ERROR/MISSING nodes. Strict mode turns such trees
into a SourceParseError so the caller can treat the file as failed.
"""

import logging
from typing import Optional

import tree_sitter_c_sharp as tscsharp
from tree_sitter import Language, Node, Parser

from unitycodemap.domain.errors import SourceParseError

logger = logging.getLogger(__name__)

CSHARP_LANGUAGE = Language(tscsharp.language())

_parser: Optional[Parser] = None


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_parser() -> Parser:
    """Return the shared C# parser, creating it on first use."""
    global _parser
    if _parser is None:
        _parser = Parser(CSHARP_LANGUAGE)
    return _parser


def read_source(file_path: str, encoding: str = "utf-8") -> bytes:
    """
    Read a source file and return its content as UTF-8 bytes.

    A leading byte order mark is dropped when the file is UTF-8.

    Args:
        file_path: Absolute path to the source file.
        encoding: Codec of the file on disk.

    Returns:
        bytes: UTF-8 encoded source ready for the parser.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the content is not valid for the codec.
    """
    codec = "utf-8-sig" if encoding.lower().replace("_", "-") in ("utf-8", "utf8") else encoding
    with open(file_path, "rb") as f:
        raw = f.read()
    return raw.decode(codec).encode("utf-8")


def parse_source(source: bytes, file_path: str = "<memory>", strict: bool = False) -> Node:
    """
    Parse C# source into a syntax tree and return its compilation unit.

    Args:
        source: UTF-8 encoded source text.
        file_path: Identifier used in error messages.
        strict: Reject trees containing syntax errors.

    Returns:
        Node: Root node of the tree.

    Raises:
        SourceParseError: In strict mode, if the grammar reported errors.
    """
    tree = get_parser().parse(source)
    root = tree.root_node

    if root.has_error:
        line = _first_error_line(root)
        if strict:
            raise SourceParseError(file_path, "Invalid C# syntax", line)
        logger.debug(f"Syntax errors tolerated in {file_path} (first at line {line})")

    return root


def parse_file(file_path: str, encoding: str = "utf-8", strict: bool = False) -> Node:
    """Read and parse a file in one step."""
    return parse_source(read_source(file_path, encoding), file_path=file_path, strict=strict)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _first_error_line(root: Node) -> int:
    """Locate the first ERROR or MISSING node in document order (1-based line)."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        if node.has_error:
            stack.extend(reversed(node.children))
    return 0
