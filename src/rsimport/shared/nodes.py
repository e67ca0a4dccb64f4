"""
Rust Item Tree Definitions

Top-level items of a Rust source file, as produced by the item-level parser.
Item bodies are not parsed: every item keeps the exact text it was written
with (``source``), which is what callers re-emit when they reuse a symbol.

Rust Pattern: syn::File / syn::Item

Visitor Pattern Support:
- All item nodes have accept() methods for polymorphic dispatch
- Visitors live in shared/ast_visitor.py
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, TypeVar, TYPE_CHECKING

from .source_location import SourceLocation

if TYPE_CHECKING:
    from .ast_visitor import ItemVisitor

T = TypeVar('T')


class ItemKind(Enum):
    """Top-level item kinds (mirrors syn::Item variants we distinguish)"""
    FUNCTION = "fn"
    STRUCT = "struct"
    UNION = "union"
    ENUM = "enum"
    CONST = "const"
    STATIC = "static"
    TRAIT = "trait"
    IMPL = "impl"
    TYPE_ALIAS = "type"
    USE = "use"
    MOD = "mod"
    EXTERN_CRATE = "extern_crate"
    FOREIGN_BLOCK = "foreign_block"
    MACRO = "macro"


@dataclass(frozen=True)
class Attribute:
    """Outer (#[...], ///) or inner (#![...], //!) attribute, kept as written"""
    text: str
    is_inner: bool = False

    @property
    def is_doc(self) -> bool:
        return self.text.startswith(("///", "//!", "/**", "/*!"))

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Item:
    """
    Base class for all top-level items.

    Common fields are filled in by the transformer once the whole item
    (attributes and visibility included) has been recognised.
    """
    source: str = ""
    location: Optional[SourceLocation] = None
    attributes: Tuple[Attribute, ...] = ()
    visibility: Optional[str] = None

    kind: ClassVar[ItemKind]

    @property
    def ident(self) -> Optional[str]:
        """The item's own identifier, if it has one"""
        return None

    @property
    def is_public(self) -> bool:
        return self.visibility is not None

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        raise NotImplementedError(f"accept() not implemented for {self.__class__.__name__}")

    def __str__(self) -> str:
        return self.source


@dataclass(frozen=True)
class NamedItem(Item):
    """Item declared with an identifier (fn, struct, enum, ...)"""
    name: str = ""

    @property
    def ident(self) -> Optional[str]:
        return self.name


@dataclass(frozen=True)
class FunctionItem(NamedItem):
    """fn name<generics>(params) -> ret where ... { body }"""
    qualifiers: Tuple[str, ...] = ()
    generics: Optional[str] = None
    return_type: Optional[str] = None
    where_clause: Optional[str] = None
    has_body: bool = True

    kind: ClassVar[ItemKind] = ItemKind.FUNCTION

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_function(self)


@dataclass(frozen=True)
class StructItem(NamedItem):
    """struct with named fields, tuple fields, or no fields"""
    generics: Optional[str] = None
    where_clause: Optional[str] = None
    is_tuple: bool = False
    is_unit: bool = False

    kind: ClassVar[ItemKind] = ItemKind.STRUCT

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_struct(self)


@dataclass(frozen=True)
class UnionItem(NamedItem):
    generics: Optional[str] = None

    kind: ClassVar[ItemKind] = ItemKind.UNION

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_union(self)


@dataclass(frozen=True)
class EnumItem(NamedItem):
    generics: Optional[str] = None

    kind: ClassVar[ItemKind] = ItemKind.ENUM

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_enum(self)


@dataclass(frozen=True)
class ConstItem(NamedItem):
    kind: ClassVar[ItemKind] = ItemKind.CONST

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_const(self)


@dataclass(frozen=True)
class StaticItem(NamedItem):
    is_mutable: bool = False

    kind: ClassVar[ItemKind] = ItemKind.STATIC

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_static(self)


@dataclass(frozen=True)
class TraitItem(NamedItem):
    """trait definition; supertraits kept as rendered bound text"""
    generics: Optional[str] = None
    supertraits: Optional[str] = None
    is_unsafe: bool = False
    is_auto: bool = False

    kind: ClassVar[ItemKind] = ItemKind.TRAIT

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_trait(self)


@dataclass(frozen=True)
class ImplItem(Item):
    """
    impl block, inherent or for a trait.

    An impl has no identifier of its own:
    - trait_path: the implemented trait as written (e.g. 'fmt::Display'), None if inherent
    - trait_name: last segment of trait_path without generic arguments (e.g. 'Display')
    - self_type: the implementing type rendered back to source text (e.g. 'Wrapper<T>')
    - self_type_tokens: the implementing type's tokens (e.g. ('Wrapper', '<', 'T', '>'))
    """
    self_type: str = ""
    self_type_tokens: Tuple[str, ...] = ()
    trait_path: Optional[str] = None
    trait_name: Optional[str] = None
    generics: Optional[str] = None
    where_clause: Optional[str] = None
    is_unsafe: bool = False
    is_negative: bool = False

    kind: ClassVar[ItemKind] = ItemKind.IMPL

    @property
    def is_trait_impl(self) -> bool:
        return self.trait_path is not None

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_impl(self)


@dataclass(frozen=True)
class TypeAliasItem(NamedItem):
    kind: ClassVar[ItemKind] = ItemKind.TYPE_ALIAS

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_type_alias(self)


@dataclass(frozen=True)
class UseItem(Item):
    """use tree as written after 'use' (e.g. 'std::collections::{HashMap, HashSet}')"""
    tree: str = ""

    kind: ClassVar[ItemKind] = ItemKind.USE

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_use(self)


@dataclass(frozen=True)
class ModItem(NamedItem):
    """'mod name;' or inline 'mod name { ... }' (inline contents are not parsed)"""
    is_inline: bool = False

    kind: ClassVar[ItemKind] = ItemKind.MOD

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_mod(self)


@dataclass(frozen=True)
class ExternCrateItem(NamedItem):
    alias: Optional[str] = None

    kind: ClassVar[ItemKind] = ItemKind.EXTERN_CRATE

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_extern_crate(self)


@dataclass(frozen=True)
class ForeignBlockItem(Item):
    """extern "ABI" { ... } block"""
    abi: Optional[str] = None

    kind: ClassVar[ItemKind] = ItemKind.FOREIGN_BLOCK

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_foreign_block(self)


@dataclass(frozen=True)
class MacroItem(Item):
    """
    Item-position macro: 'macro_rules! name { ... }' or 'path!(...);'

    name is only set for macro_rules definitions.
    """
    path: str = ""
    name: Optional[str] = None

    kind: ClassVar[ItemKind] = ItemKind.MACRO

    @property
    def is_macro_rules(self) -> bool:
        return self.path == "macro_rules"

    def accept(self, visitor: 'ItemVisitor[T]') -> 'T':
        return visitor.visit_macro(self)


@dataclass(frozen=True)
class SourceFile:
    """
    Root of a parsed file.

    Rust Pattern: syn::File
    """
    items: Tuple[Item, ...]
    inner_attributes: Tuple[Attribute, ...] = ()
    file: str = "<unknown>"
    shebang: Optional[str] = None

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def items_of_kind(self, kind: ItemKind) -> Tuple[Item, ...]:
        return tuple(item for item in self.items if item.kind is kind)
