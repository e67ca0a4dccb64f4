"""
Error Taxonomy

Each failure mode has its own exception class.

All errors surface synchronously to the immediate caller; nothing is retried
and a failed import never leaves a cache entry behind.
"""

from pathlib import Path
from typing import Optional, Sequence

from .source_location import SourceLocation


class RsImportError(Exception):
    """Base exception for all rsimport errors"""
    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location:
            return f"{self.message}\n --> {self.location}"
        return self.message


class ParseError(RsImportError):
    """Source text is not a valid sequence of Rust items"""
    def __init__(self, message: str, source_file: str, location: Optional[SourceLocation] = None):
        super().__init__(message, location)
        self.source_file = source_file


class ModuleNotFoundError(RsImportError):
    """No search path contains a file for the requested module"""
    def __init__(self, name: str, searched: Sequence[Path] = ()):
        self.name = name
        self.searched = tuple(searched)
        message = f"Module '{name}' not found"
        if self.searched:
            message += f". Searched: {', '.join(str(p) for p in self.searched)}"
        super().__init__(message)


class ModuleReadError(RsImportError):
    """The module file was located but could not be read in full"""
    def __init__(self, name: str, path: Path, cause: BaseException):
        self.name = name
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read module '{name}' from {path}: {cause}")


class ModuleParseError(RsImportError):
    """The module file is not syntactically valid Rust"""
    def __init__(self, name: str, path: Path, cause: BaseException):
        self.name = name
        self.path = path
        self.cause = cause
        location = getattr(cause, "location", None)
        detail = getattr(cause, "message", None) or str(cause)
        super().__init__(f"Failed to parse module '{name}': {detail}", location)


class StrictImportError(RsImportError):
    """
    Raised by the strict helpers (import_module_or_die, from_import).

    A missing module or symbol at a strict call-site is a programmer error,
    not a lookup result.
    """


class SymbolNotFoundError(StrictImportError):
    """A requested symbol is not in the module's symbol table"""
    def __init__(self, module_name: str, symbol_name: str):
        self.module_name = module_name
        self.symbol_name = symbol_name
        super().__init__(f"Symbol '{symbol_name}' not found in module '{module_name}'")
