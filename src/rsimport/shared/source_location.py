"""
Source Location (Span)

Rust Pattern: proc_macro2::Span (line/column only)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Source location of a parsed item or a parse failure.

    - File, line, column (1-based, as reported by lark)
    - Byte offsets into the source text for slicing items back out
    - Immutable (frozen) for hashability
    """
    file: str
    line: int
    column: int
    start: int = 0
    end: int = 0
    end_line: int = 0
    end_column: int = 0

    def __str__(self) -> str:
        """Format as file:line:column (rustc pattern)"""
        return f"{self.file}:{self.line}:{self.column}"
