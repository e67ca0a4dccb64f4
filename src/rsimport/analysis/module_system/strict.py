"""
Strict Imports

Raising counterparts of ModuleLoader.import_module / get_symbol, for
call-sites where a missing module or symbol is a programmer error.
"""

from typing import Tuple

from .module_loader import ModuleLoader
from .module_info import Module
from ...shared.errors import RsImportError, StrictImportError, SymbolNotFoundError
from ...shared.nodes import Item


def import_module_or_die(loader: ModuleLoader, name: str) -> Module:
    """
    Import a module, turning any failure into StrictImportError.

    The underlying error is kept as __cause__.
    """
    try:
        return loader.import_module(name)
    except RsImportError as e:
        raise StrictImportError(f"Failed to import module '{name}': {e.message}", e.location) from e


def from_import(loader: ModuleLoader, module_name: str, *symbol_names: str) -> Tuple[Item, ...]:
    """
    Fetch several symbols from a module, importing it first if needed.

    Example:
        display, wrapper = from_import(loader, "shapes", "impl_Display", "Wrapper")

    Raises:
        StrictImportError: The module could not be imported
        SymbolNotFoundError: A requested symbol is not in the module
    """
    module = import_module_or_die(loader, module_name)
    items = []
    for symbol_name in symbol_names:
        item = module.symbols.get(symbol_name)
        if item is None:
            raise SymbolNotFoundError(module_name, symbol_name)
        items.append(item)
    return tuple(items)
