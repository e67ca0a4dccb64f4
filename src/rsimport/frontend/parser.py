"""
Parser

Rust Pattern: syn::parse_file
"""

from dataclasses import replace
from pathlib import Path
from lark import Lark
from lark.exceptions import UnexpectedInput, UnexpectedEOF, VisitError, ParseError as LarkParseError
import logging

from ..shared.nodes import SourceFile
from ..shared.errors import ParseError
from ..shared.source_location import SourceLocation
from ..utils.config import DEFAULT_PARSER_CACHE_FILE, GRAMMAR_START_RULE
from .source_text import prepare_source
from .transformers.base import RustItemTransformer

logger = logging.getLogger(__name__)


class Parser:
    """
    Item-level Rust parser (Rust naming: syn::parse_file).

    - Takes source text, returns a SourceFile of top-level items
    - Preserves source locations and each item's own text
    - Converts every Lark failure into ParseError
    - Uses Lark parser with caching
    """

    def __init__(self, cache_file: str = DEFAULT_PARSER_CACHE_FILE):
        grammar_path = Path(__file__).parent / "grammar.lark"
        self.parser = Lark.open(
            grammar_path,
            start=GRAMMAR_START_RULE,
            parser='lalr',              # Required for caching
            cache=cache_file,
            propagate_positions=True,   # Items slice their own text by position
            maybe_placeholders=False,
        )
        self.transformer = RustItemTransformer()

    def parse(self, source: str, source_file: str = "<string>") -> SourceFile:
        """
        Parse source text into a SourceFile.

        A leading byte order mark and shebang line are skipped, and block
        comments nest. Item text and locations refer to source as given.

        Raises:
            ParseError: the text is not a sequence of Rust items
        """
        text, shebang = prepare_source(source)
        self.transformer.current_file = source_file
        self.transformer.current_source = source
        try:
            tree = self.parser.parse(text)
            source_tree = replace(self.transformer.transform(tree), shebang=shebang)
        except UnexpectedEOF as e:
            raise ParseError("Parse error: unexpected end of file", source_file,
                             self._eof_location(source, source_file)) from e
        except UnexpectedInput as e:
            location = SourceLocation(file=source_file, line=e.line, column=e.column,
                                      start=e.pos_in_stream or 0)
            raise ParseError(f"Parse error: {self._describe(e)}", source_file, location) from e
        except (LarkParseError, VisitError) as e:
            raise ParseError(f"Parse error: {e}", source_file) from e

        logger.debug(f"Parsed {source_file}: {len(source_tree)} items")
        return source_tree

    @staticmethod
    def _describe(error: UnexpectedInput) -> str:
        token = getattr(error, "token", None)
        if token is not None:
            if token.type == "$END":
                return "unexpected end of file"
            return f"unexpected token {str(token)!r}"
        char = getattr(error, "char", None)
        if char is not None:
            return f"unexpected character {char!r}"
        return str(error).splitlines()[0]

    @staticmethod
    def _eof_location(source: str, source_file: str) -> SourceLocation:
        lines = source.split("\n")
        return SourceLocation(file=source_file, line=len(lines), column=len(lines[-1]) + 1,
                              start=len(source), end=len(source))
