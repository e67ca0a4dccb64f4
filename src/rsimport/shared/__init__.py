"""
Shared components: item tree, visitor, errors.

Rust Pattern: Shared foundational types and utilities
"""

from .source_location import SourceLocation
from .errors import (
    RsImportError, ParseError, ModuleNotFoundError, ModuleReadError, ModuleParseError,
    StrictImportError, SymbolNotFoundError,
)
from .nodes import (
    ItemKind, Attribute, Item, NamedItem, SourceFile,
    FunctionItem, StructItem, UnionItem, EnumItem, ConstItem, StaticItem,
    TraitItem, ImplItem, TypeAliasItem, UseItem, ModItem, ExternCrateItem,
    ForeignBlockItem, MacroItem,
)
from .ast_visitor import ItemVisitor
