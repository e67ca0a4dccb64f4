"""
Module Loader

Resolves, reads, parses and indexes Rust modules, each at most once.

Rust Pattern: rustc_metadata::creader::CrateLoader

This class handles:
- Module resolution through the ordered search paths
- Reading and parsing the module file
- Building the symbol table
- Caching the resulting Module for the loader's lifetime

A failed import leaves the cache untouched, so a later call retries from
scratch. Loaded modules are never reloaded, even if the file changes.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from .path_resolver import PathResolver
from .module_info import Module
from .symbol_extractor import ImplKeyScheme, extract_symbols
from ...shared.errors import ModuleReadError, ModuleParseError, ParseError
from ...shared.nodes import Item
from ...utils.io_utils import read_source_file

logger = logging.getLogger(__name__)

SourceReader = Callable[[Path], str]


class ModuleLoader:
    """
    Module registry: name -> Module, append-only.

    Not thread-safe; share one loader per thread or guard it externally.
    """

    def __init__(
        self,
        search_paths: Optional[Iterable[Union[Path, str]]] = None,
        parser: Optional[Any] = None,
        reader: Optional[SourceReader] = None,
        impl_keys: ImplKeyScheme = ImplKeyScheme.SIMPLE,
    ):
        """
        Args:
            search_paths: Directories searched after '.', in order
            parser: Object with parse(source, source_file) -> SourceFile (auto-created if None)
            reader: Callable returning a file's full text (defaults to read_source_file)
            impl_keys: How impl blocks are named in symbol tables
        """
        self.path_resolver = PathResolver(search_paths)
        self.reader: SourceReader = reader or read_source_file
        self.impl_keys = impl_keys
        self._modules: Dict[str, Module] = {}

        # Support dependency injection or build the default lark parser
        if parser is None:
            from ...frontend.parser import Parser
            self.parser = Parser()
        else:
            self.parser = parser

    @property
    def search_paths(self) -> List[Path]:
        return list(self.path_resolver.search_paths)

    @property
    def loaded_modules(self) -> Mapping[str, Module]:
        """Read-only view of the cache"""
        return MappingProxyType(self._modules)

    def add_search_path(self, directory: Union[Path, str]) -> None:
        """Append a directory to the search order (no validation, no dedup)"""
        self.path_resolver.add_search_path(directory)

    def import_module(self, name: str) -> Module:
        """
        Load a module by name, or return it from the cache.

        Returns:
            The Module registered under name

        Raises:
            ModuleNotFoundError: No search path contains '<name>.rs'
            ModuleReadError: The file exists but could not be read
            ModuleParseError: The file is not valid Rust
        """
        if name in self._modules:
            logger.debug(f"Module '{name}' already loaded")
            return self._modules[name]

        file_path = self.path_resolver.resolve(name)

        try:
            source = self.reader(file_path)
        except (OSError, UnicodeDecodeError) as e:
            raise ModuleReadError(name, file_path, e) from e

        try:
            syntax_tree = self.parser.parse(source, str(file_path))
        except ParseError as e:
            raise ModuleParseError(name, file_path, e) from e

        symbols = extract_symbols(syntax_tree, self.impl_keys)
        module = Module(name=name, path=file_path, syntax_tree=syntax_tree, symbols=symbols)

        self._modules[name] = module
        logger.debug(f"Loaded module {name} from {file_path}: "
                     f"{len(syntax_tree)} items, {len(symbols)} symbols")
        return module

    def get_module(self, name: str) -> Optional[Module]:
        """Cached module or None; never triggers a load"""
        return self._modules.get(name)

    def get_symbol(self, module_name: str, symbol_name: str) -> Optional[Item]:
        """Item named symbol_name in a loaded module, or None if either is missing"""
        module = self._modules.get(module_name)
        if module is None:
            return None
        return module.symbols.get(symbol_name)

    def is_module_loaded(self, name: str) -> bool:
        return name in self._modules
