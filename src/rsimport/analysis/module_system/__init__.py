"""Module system: path resolution, symbol extraction, module loading."""

from .path_resolver import PathResolver
from .module_info import Module
from .symbol_extractor import ImplKeyScheme, SymbolExtractor, extract_symbols, impl_symbol_name
from .module_loader import ModuleLoader
from .strict import import_module_or_die, from_import

__all__ = [
    'PathResolver',
    'Module',
    'ImplKeyScheme',
    'SymbolExtractor',
    'extract_symbols',
    'impl_symbol_name',
    'ModuleLoader',
    'import_module_or_die',
    'from_import',
]
