"""
rsimport: runtime module resolution and symbol lookup for Rust source files.

    loader = ModuleLoader(search_paths=["src"])
    module = loader.import_module("shapes")
    print(module.symbols["Circle"].source)
"""

from .analysis.module_system import (
    ModuleLoader, Module, PathResolver, ImplKeyScheme, SymbolExtractor,
    extract_symbols, impl_symbol_name, import_module_or_die, from_import,
)
from .frontend.parser import Parser
from .shared import (
    RsImportError, ParseError, ModuleNotFoundError, ModuleReadError, ModuleParseError,
    StrictImportError, SymbolNotFoundError, SourceLocation, SourceFile, Item, ItemKind,
)

__version__ = "0.1.0"

__all__ = [
    'ModuleLoader',
    'Module',
    'PathResolver',
    'ImplKeyScheme',
    'SymbolExtractor',
    'extract_symbols',
    'impl_symbol_name',
    'import_module_or_die',
    'from_import',
    'Parser',
    'RsImportError',
    'ParseError',
    'ModuleNotFoundError',
    'ModuleReadError',
    'ModuleParseError',
    'StrictImportError',
    'SymbolNotFoundError',
    'SourceLocation',
    'SourceFile',
    'Item',
    'ItemKind',
]
