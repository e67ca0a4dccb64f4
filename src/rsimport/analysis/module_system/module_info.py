"""
Module System Types

Rust Pattern: rustc_resolve::ModuleData
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from ...shared.nodes import Item, SourceFile


@dataclass(frozen=True)
class Module:
    """
    A parsed and indexed Rust module.

    - name: logical name it was requested under (unique key in the loader)
    - path: resolved file path ('<search path>/<name>.rs')
    - syntax_tree: every parsed item, including the ones not indexed
    - symbols: symbol name -> item, read-only
    """
    name: str
    path: Path
    syntax_tree: SourceFile
    symbols: Mapping[str, Item] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.symbols, MappingProxyType):
            object.__setattr__(self, "symbols", MappingProxyType(dict(self.symbols)))

    def get_symbol(self, symbol_name: str):
        return self.symbols.get(symbol_name)

    def __contains__(self, symbol_name: str) -> bool:
        return symbol_name in self.symbols

    def __str__(self) -> str:
        return f"Module({self.name}, {len(self.symbols)} symbols, {self.path})"

    def __repr__(self) -> str:
        return (f"Module(name={self.name!r}, path={self.path}, "
                f"symbols={list(self.symbols.keys())})")
