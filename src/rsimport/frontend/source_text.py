"""
Source Text Preparation

Rewrites a Rust file into the text the item grammar lexes. Every rewrite
replaces characters with spaces, so the prepared text has the same length
and the same line breaks as the input: lark positions index both texts, and
items keep slicing their source from the text as written.

- a leading byte order mark is blanked
- a leading '#!' line is blanked unless it starts an inner attribute ('#![')
- the inside of a nested block comment ('/* a /* b */ c */') is blanked, so
  the grammar's non-nesting comment terminal matches the whole comment.
  An unterminated block comment is blanked to the end of the text and
  fails to parse at its opener

Rust Pattern: rustc_lexer::strip_shebang, syn::parse_file
"""

import re
from typing import List, Optional, Tuple

BYTE_ORDER_MARK = "\ufeff"

_SHEBANG_START = "#!"
# Whitespace and comments rustc skips before deciding '#!' opens an attribute
_SHEBANG_TRIVIA = re.compile(r"(?:\s+|//[^\n]*|/\*[\s\S]*?\*/)*")

_RAW_STRING = re.compile(r'b?r(#*)"[\s\S]*?"\1')
_STRING = re.compile(r'b?"(?:\\[\s\S]|[^"\\])*"')
_CHAR = re.compile(r"b?'(?:\\[\s\S][^'\n]*|[^\\'\n])'")
_WORD = re.compile(r"\w+")


def prepare_source(source: str) -> Tuple[str, Optional[str]]:
    """
    Returns (text to lex, shebang line or None).

    Examples:
        '\\ufefffn f() {}'          -> (' fn f() {}', None)
        '#!/bin/run\\nfn f() {}'   -> ('          \\nfn f() {}', '#!/bin/run')
        '#![allow(dead_code)]'     -> unchanged, it is an inner attribute
    """
    start = 1 if source.startswith(BYTE_ORDER_MARK) else 0
    text = " " * start + source[start:]

    shebang = None
    shebang_end = _shebang_end(text, start)
    if shebang_end is not None:
        shebang = source[start:shebang_end]
        text = text[:start] + " " * (shebang_end - start) + text[shebang_end:]

    spans = _nested_comment_spans(text)
    if spans:
        text = _blank_comment_bodies(text, spans)
    return text, shebang


def _shebang_end(text: str, start: int) -> Optional[int]:
    if not text.startswith(_SHEBANG_START, start):
        return None
    after = _SHEBANG_TRIVIA.match(text, start + len(_SHEBANG_START)).end()
    if text.startswith("[", after):
        return None
    end = text.find("\n", start)
    return len(text) if end < 0 else end


def _nested_comment_spans(text: str) -> List[Tuple[int, int, bool]]:
    """(start, end, closed) of every block comment that nests or is never closed"""
    spans: List[Tuple[int, int, bool]] = []
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if text.startswith("//", pos):
            end = text.find("\n", pos)
            pos = length if end < 0 else end
        elif text.startswith("/*", pos):
            end, nested, closed = _block_comment_end(text, pos)
            if nested or not closed:
                spans.append((pos, end, closed))
            pos = end
        elif char == '"':
            match = _STRING.match(text, pos)
            pos = match.end() if match else length
        elif char == "'":
            # Char literal, otherwise a lifetime or label
            match = _CHAR.match(text, pos)
            pos = match.end() if match else pos + 1
        elif char.isalnum() or char == "_":
            match = (_RAW_STRING.match(text, pos) or _STRING.match(text, pos)
                     or _CHAR.match(text, pos) or _WORD.match(text, pos))
            pos = match.end()
        else:
            pos += 1
    return spans


def _block_comment_end(text: str, start: int) -> Tuple[int, bool, bool]:
    """End offset of the block comment at start, whether it nests and whether it is closed"""
    depth = 0
    nested = False
    pos = start
    while pos < len(text):
        if text.startswith("/*", pos):
            depth += 1
            nested = nested or depth > 1
            pos += 2
        elif text.startswith("*/", pos):
            depth -= 1
            pos += 2
            if depth == 0:
                return pos, nested, True
        else:
            pos += 1
    return len(text), nested, False


def _blank_comment_bodies(text: str, spans: List[Tuple[int, int, bool]]) -> str:
    parts: List[str] = []
    prev = 0
    for start, end, closed in spans:
        body_end = end - 2 if closed else end
        # Doc comments keep their '/**' or '/*!' opener so they still lex as docs
        opener = 3 if _is_doc_comment(text, start) else 2
        body = text[start + opener:body_end]
        parts.append(text[prev:start + opener])
        parts.append(re.sub(r"[^\n]", " ", body))
        prev = body_end
    parts.append(text[prev:])
    return "".join(parts)


def _is_doc_comment(text: str, start: int) -> bool:
    marker = text[start + 2:start + 4]
    return marker[:1] == "!" or (marker[:1] == "*" and marker[1:2] not in ("*", "/"))
