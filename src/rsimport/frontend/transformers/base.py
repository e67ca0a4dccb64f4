"""
Rust Item Transformer
Converts the Lark parse tree of grammar.lark into item nodes.

Item headers arrive as tokens and token groups; bodies arrive as token
groups and are dropped (each item keeps its own source text instead).
"""

from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Optional, Tuple, Union

from lark import Transformer, v_args
from lark.lexer import Token
from typing_extensions import TypeAlias

from ...shared import (
    SourceLocation, Attribute, Item, SourceFile,
    FunctionItem, StructItem, UnionItem, EnumItem, ConstItem, StaticItem,
    TraitItem, ImplItem, TypeAliasItem, UseItem, ModItem, ExternCrateItem,
    ForeignBlockItem, MacroItem,
)
from ..render import render_tokens

# Lark Meta object contains location information
LarkMeta: TypeAlias = Any
# A delimited group flattened to its tokens, delimiters included
TokenGroup: TypeAlias = List[Token]

NAME_TOKEN_TYPE = "NAME"


@dataclass
class GenericsInfo:
    """Internal type for generic parameter lists ('<T: Clone>')"""
    text: str


@dataclass
class ReturnTypeInfo:
    """Internal type for '-> T' (text excludes the arrow)"""
    text: str


@dataclass
class WhereClauseInfo:
    """Internal type for 'where ...' (text includes the keyword)"""
    text: str


@dataclass
class SupertraitsInfo:
    """Internal type for a trait's ': A + B' bound list (text excludes the colon)"""
    text: Optional[str]


@dataclass
class VisibilityInfo:
    text: str


@dataclass
class QualifiersInfo:
    """Internal type for function qualifiers ('const', 'async', 'unsafe', 'extern "C"')"""
    qualifiers: Tuple[str, ...]


@dataclass
class ModifierInfo:
    """Internal type for single-keyword markers ('unsafe', 'auto', 'mut', '!')"""
    keyword: str


@dataclass
class BlockInfo:
    """Internal type for a braced body; contents are not kept"""


@dataclass
class ImplTypeInfo:
    """Internal type for one side of an impl header ('fmt::Display', 'Wrapper<T>')"""
    text: str
    last_segment: Optional[str]
    tokens: Tuple[str, ...] = ()


@dataclass
class UseTreeInfo:
    text: str


@dataclass
class MacroPathInfo:
    text: str


HeaderPart: TypeAlias = Union[
    Token, TokenGroup, GenericsInfo, ReturnTypeInfo, WhereClauseInfo, SupertraitsInfo,
    QualifiersInfo, ModifierInfo, BlockInfo, ImplTypeInfo,
]


def flatten_tokens(children: Iterable[Any]) -> TokenGroup:
    """Flatten tokens and nested token groups into one token list"""
    tokens: TokenGroup = []
    for child in children:
        if isinstance(child, list):
            tokens.extend(child)
        elif isinstance(child, Token):
            tokens.append(child)
    return tokens


def last_path_segment(children: Iterable[Any]) -> Optional[str]:
    """
    Last segment of a path, without generic arguments.

    'fmt::Display' -> 'Display', 'From<Vec<u8>>' -> 'From', 'Fn(u8) -> u8' -> 'Fn'
    """
    last: Optional[str] = None
    for child in children:
        if isinstance(child, list):
            if child and child[0] == "<":
                continue
            break
        if child.type == NAME_TOKEN_TYPE:
            last = str(child)
        elif child != "::":
            break
    return last


def _find(parts: Iterable[Any], kind: type) -> Any:
    return next((part for part in parts if isinstance(part, kind)), None)


def _name_of(parts: Iterable[Any]) -> str:
    return next(str(part) for part in parts if isinstance(part, Token) and part.type == NAME_TOKEN_TYPE)


@v_args(inline=True, meta=True)
class RustItemTransformer(Transformer):
    """
    Rust item transformer.

    The parser must set current_file and current_source before transforming:
    items slice their own text out of current_source using Lark positions.
    """

    def __init__(self) -> None:
        super().__init__()
        self.current_file: str = ""
        self.current_source: str = ""

    def _extract_location(self, meta: LarkMeta) -> SourceLocation:
        """Extract location from Lark meta object"""
        if not self.current_file:
            raise RuntimeError(
                "Parser bug: current_file not set. "
                "Parser must set current_file before transforming."
            )
        if meta is None or getattr(meta, "empty", True):
            return SourceLocation(file=self.current_file, line=0, column=0)
        return SourceLocation(
            file=self.current_file,
            line=meta.line,
            column=meta.column,
            start=meta.start_pos,
            end=meta.end_pos,
            end_line=meta.end_line,
            end_column=meta.end_column,
        )

    def _source_text(self, meta: LarkMeta) -> str:
        return self.current_source[meta.start_pos:meta.end_pos]

    # ------------------------------------------------------------------
    # File, attributes, items
    # ------------------------------------------------------------------

    def source_file(self, meta: LarkMeta, *children: Union[Attribute, Item]) -> SourceFile:
        inner = tuple(child for child in children if isinstance(child, Attribute))
        items = tuple(child for child in children if isinstance(child, Item))
        return SourceFile(items=items, inner_attributes=inner, file=self.current_file)

    def inner_attribute(self, meta: LarkMeta, *children: Any) -> Attribute:
        return Attribute(text=self._source_text(meta), is_inner=True)

    def outer_attribute(self, meta: LarkMeta, *children: Any) -> Attribute:
        return Attribute(text=self._source_text(meta))

    def item(self, meta: LarkMeta, *children: Union[Attribute, VisibilityInfo, Item]) -> Item:
        """Attach attributes, visibility and the full item text to the item node"""
        node = children[-1]
        visibility = _find(children, VisibilityInfo)
        return replace(
            node,
            source=self._source_text(meta),
            location=self._extract_location(meta),
            attributes=tuple(child for child in children if isinstance(child, Attribute)),
            visibility=visibility.text if visibility else None,
        )

    def visibility(self, meta: LarkMeta, *children: Any) -> VisibilityInfo:
        return VisibilityInfo(render_tokens(flatten_tokens(children)))

    # ------------------------------------------------------------------
    # Item kinds
    # ------------------------------------------------------------------

    def function(self, meta: LarkMeta, *parts: HeaderPart) -> FunctionItem:
        qualifiers = _find(parts, QualifiersInfo)
        generics = _find(parts, GenericsInfo)
        return_type = _find(parts, ReturnTypeInfo)
        where_clause = _find(parts, WhereClauseInfo)
        return FunctionItem(
            name=_name_of(parts),
            qualifiers=qualifiers.qualifiers if qualifiers else (),
            generics=generics.text if generics else None,
            return_type=return_type.text if return_type else None,
            where_clause=where_clause.text if where_clause else None,
            has_body=_find(parts, BlockInfo) is not None,
        )

    def fn_qualifiers(self, meta: LarkMeta, *qualifiers: str) -> QualifiersInfo:
        return QualifiersInfo(tuple(qualifiers))

    def fn_qualifier(self, meta: LarkMeta, *tokens: Token) -> str:
        return render_tokens(tokens)

    def foreign_block(self, meta: LarkMeta, qualifiers: QualifiersInfo, block: BlockInfo) -> ForeignBlockItem:
        abi = next((q for q in qualifiers.qualifiers if q.startswith("extern")), None)
        return ForeignBlockItem(abi=abi)

    def extern_crate(self, meta: LarkMeta, name: Token, alias: Optional[Token] = None) -> ExternCrateItem:
        return ExternCrateItem(name=str(name), alias=str(alias) if alias is not None else None)

    def struct_item(self, meta: LarkMeta, *parts: HeaderPart) -> StructItem:
        generics = _find(parts, GenericsInfo)
        where_clause = _find(parts, WhereClauseInfo)
        is_tuple = _find(parts, list) is not None
        return StructItem(
            name=_name_of(parts),
            generics=generics.text if generics else None,
            where_clause=where_clause.text if where_clause else None,
            is_tuple=is_tuple,
            is_unit=not is_tuple and _find(parts, BlockInfo) is None,
        )

    def union_item(self, meta: LarkMeta, *parts: HeaderPart) -> UnionItem:
        generics = _find(parts, GenericsInfo)
        return UnionItem(name=_name_of(parts), generics=generics.text if generics else None)

    def enum_item(self, meta: LarkMeta, *parts: HeaderPart) -> EnumItem:
        generics = _find(parts, GenericsInfo)
        return EnumItem(name=_name_of(parts), generics=generics.text if generics else None)

    def const_item(self, meta: LarkMeta, *parts: HeaderPart) -> ConstItem:
        return ConstItem(name=_name_of(parts))

    def static_item(self, meta: LarkMeta, *parts: HeaderPart) -> StaticItem:
        return StaticItem(name=_name_of(parts), is_mutable=_find(parts, ModifierInfo) is not None)

    def mutability(self, meta: LarkMeta) -> ModifierInfo:
        return ModifierInfo("mut")

    def trait_item(self, meta: LarkMeta, *parts: HeaderPart) -> TraitItem:
        modifiers = {part.keyword for part in parts if isinstance(part, ModifierInfo)}
        generics = _find(parts, GenericsInfo)
        supertraits = _find(parts, SupertraitsInfo)
        return TraitItem(
            name=_name_of(parts),
            generics=generics.text if generics else None,
            supertraits=supertraits.text if supertraits else None,
            is_unsafe="unsafe" in modifiers,
            is_auto="auto" in modifiers,
        )

    def supertraits(self, meta: LarkMeta, colon: Token, *children: Any) -> SupertraitsInfo:
        return SupertraitsInfo(render_tokens(flatten_tokens(children)) or None)

    def auto_marker(self, meta: LarkMeta) -> ModifierInfo:
        return ModifierInfo("auto")

    def unsafety(self, meta: LarkMeta) -> ModifierInfo:
        return ModifierInfo("unsafe")

    def negative(self, meta: LarkMeta) -> ModifierInfo:
        return ModifierInfo("!")

    def impl_item(self, meta: LarkMeta, *parts: HeaderPart) -> ImplItem:
        """
        impl header: the first impl_type is the trait when a second one
        (after 'for') follows, otherwise it is the self type.
        """
        modifiers = {part.keyword for part in parts if isinstance(part, ModifierInfo)}
        types = [part for part in parts if isinstance(part, ImplTypeInfo)]
        generics = _find(parts, GenericsInfo)
        where_clause = _find(parts, WhereClauseInfo)
        trait, self_type = (types[0], types[1]) if len(types) == 2 else (None, types[0])
        return ImplItem(
            self_type=self_type.text,
            self_type_tokens=self_type.tokens,
            trait_path=trait.text if trait else None,
            trait_name=trait.last_segment if trait else None,
            generics=generics.text if generics else None,
            where_clause=where_clause.text if where_clause else None,
            is_unsafe="unsafe" in modifiers,
            is_negative="!" in modifiers,
        )

    def impl_type(self, meta: LarkMeta, *children: Any) -> ImplTypeInfo:
        tokens = tuple(str(token) for token in flatten_tokens(children))
        return ImplTypeInfo(
            text=render_tokens(tokens),
            last_segment=last_path_segment(children),
            tokens=tokens,
        )

    self_type = impl_type

    def type_alias(self, meta: LarkMeta, *parts: HeaderPart) -> TypeAliasItem:
        return TypeAliasItem(name=_name_of(parts))

    def use_item(self, meta: LarkMeta, tree: UseTreeInfo) -> UseItem:
        return UseItem(tree=tree.text)

    def use_tree(self, meta: LarkMeta, *children: Any) -> UseTreeInfo:
        return UseTreeInfo(render_tokens(flatten_tokens(children)))

    def mod_item(self, meta: LarkMeta, name: Token, block: Optional[BlockInfo] = None) -> ModItem:
        return ModItem(name=str(name), is_inline=block is not None)

    def macro_item(self, meta: LarkMeta, path: MacroPathInfo, *parts: Any) -> MacroItem:
        name = next((str(part) for part in parts if isinstance(part, Token) and part.type == NAME_TOKEN_TYPE), None)
        return MacroItem(path=path.text, name=name)

    def macro_path(self, meta: LarkMeta, *tokens: Token) -> MacroPathInfo:
        return MacroPathInfo(render_tokens(tokens))

    # ------------------------------------------------------------------
    # Header fragments
    # ------------------------------------------------------------------

    def name(self, meta: LarkMeta, token: Token) -> Token:
        # Contextual keywords ('union', 'auto') arrive as keyword tokens
        return Token.new_borrow_pos(NAME_TOKEN_TYPE, str(token), token)

    def generics(self, meta: LarkMeta, group: TokenGroup) -> GenericsInfo:
        return GenericsInfo(render_tokens(group))

    def return_type(self, meta: LarkMeta, arrow: Token, *children: Any) -> ReturnTypeInfo:
        return ReturnTypeInfo(render_tokens(flatten_tokens(children)))

    def where_clause(self, meta: LarkMeta, *children: Any) -> WhereClauseInfo:
        return WhereClauseInfo(render_tokens(flatten_tokens(children)))

    def block(self, meta: LarkMeta, *children: Any) -> BlockInfo:
        return BlockInfo()

    # ------------------------------------------------------------------
    # Token groups
    # ------------------------------------------------------------------

    def paren_group(self, meta: LarkMeta, *children: Any) -> TokenGroup:
        return flatten_tokens(children)

    def bracket_group(self, meta: LarkMeta, *children: Any) -> TokenGroup:
        return flatten_tokens(children)

    def brace_group(self, meta: LarkMeta, *children: Any) -> TokenGroup:
        return flatten_tokens(children)

    def angle_group(self, meta: LarkMeta, *children: Any) -> TokenGroup:
        return flatten_tokens(children)
