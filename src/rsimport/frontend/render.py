"""
Token Rendering

Turns a token sequence from an item header (a type, a bound list, a
visibility) back into canonical source text. The output only depends on
the tokens, never on how the source was spaced, so 'Vec < T >' and
'Vec<T>' render identically.

render_tokens spaces like rustfmt. render_token_stream spaces like
proc_macro2, which is how quote! output prints.

Rust Pattern: quote::ToTokens
"""

from typing import Iterable, List, Optional

# Operators written with a space on both sides
_SPACED_BOTH = frozenset({"->", "+", "="})
# Separators followed by a space
_SPACED_AFTER = frozenset({",", ";", ":"})
_OPEN_DELIMITERS = frozenset({"(", "["})
_CLOSE_DELIMITERS = frozenset({")", "]"})


def _is_word(token: str) -> bool:
    """Identifiers, keywords, lifetimes, numbers and literals"""
    return bool(token) and (token[0].isalnum() or token[0] in "_'\"")


def render_tokens(tokens: Iterable[str]) -> str:
    """
    Render tokens as source text.

    Examples:
        ['Vec', '<', 'T', '>']                 -> 'Vec<T>'
        ['&', "'a", 'mut', 'T']                -> "&'a mut T"
        ['dyn', 'Fn', '(', 'u8', ')', '->', 'u8'] -> 'dyn Fn(u8) -> u8'
        ['[', 'u8', ';', '4', ']']             -> '[u8; 4]'
    """
    parts: List[str] = []
    prev: Optional[str] = None
    for token in tokens:
        token = str(token)
        if prev is not None and _needs_space(prev, token):
            parts.append(" ")
        parts.append(token)
        prev = token
    return "".join(parts)


def _needs_space(prev: str, token: str) -> bool:
    if token in _SPACED_BOTH or prev in _SPACED_BOTH or prev in _SPACED_AFTER:
        return True
    if _is_word(token):
        # 'for<'a> Fn', 'impl<T> Trait'
        return _is_word(prev) or prev == ">"
    return False


def render_token_stream(tokens: Iterable[str]) -> str:
    """
    Render tokens the way proc_macro2 prints a TokenStream: one space
    between tokens, none just inside '(' ')' '[' ']'.

    Examples:
        ['Wrapper', '<', 'T', '>']             -> 'Wrapper < T >'
        ['&', "'a", 'mut', 'T']                -> "& 'a mut T"
        ['[', 'u8', ';', '4', ']']             -> '[u8 ; 4]'
    """
    parts: List[str] = []
    prev: Optional[str] = None
    for token in tokens:
        token = str(token)
        if prev is not None and prev not in _OPEN_DELIMITERS and token not in _CLOSE_DELIMITERS:
            parts.append(" ")
        parts.append(token)
        prev = token
    return "".join(parts)
