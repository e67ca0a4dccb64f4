"""
Symbol Extraction

Builds a module's symbol table from its top-level items.

Naming:
- fn, struct, union, enum, const, static, trait: the item's own identifier
- trait impl: 'impl_<Trait>' (last path segment of the trait, no generic args)
- inherent impl: 'impl_<SelfType>' (self type rendered as source text)
- use, type alias, mod, extern crate, extern block, macros: not indexed

Items are visited in source order, so a later item silently replaces an
earlier one with the same symbol name. Several impls of one trait therefore
keep only the last, unless ImplKeyScheme.QUALIFIED is used.
"""

import logging
from enum import Enum
from typing import Dict, Optional

from ...frontend.render import render_token_stream
from ...shared.ast_visitor import ItemVisitor
from ...shared.nodes import Item, NamedItem, ImplItem, SourceFile
from ...utils.config import IMPL_SYMBOL_PREFIX, IMPL_QUALIFIED_SEPARATOR

logger = logging.getLogger(__name__)


class ImplKeyScheme(Enum):
    """
    How impl blocks are keyed in the symbol table.

    SIMPLE and QUALIFIED render the self type rustfmt-style ('Wrapper<T>').
    TOKEN_STREAM keys inherent impls with the self type spaced the way
    quote!(#self_ty).to_string() prints it ('Wrapper < T >').
    """
    SIMPLE = "simple"               # impl_Display, impl_Wrapper<T>
    QUALIFIED = "qualified"         # impl_Display_for_Wrapper<T>, impl_Wrapper<T>
    TOKEN_STREAM = "token_stream"   # impl_Display, impl_Wrapper < T >


def impl_symbol_name(node: ImplItem, scheme: ImplKeyScheme = ImplKeyScheme.SIMPLE) -> str:
    """Symbol name of an impl block"""
    if not node.is_trait_impl:
        if scheme is ImplKeyScheme.TOKEN_STREAM and node.self_type_tokens:
            return f"{IMPL_SYMBOL_PREFIX}{render_token_stream(node.self_type_tokens)}"
        return f"{IMPL_SYMBOL_PREFIX}{node.self_type}"
    trait = node.trait_name or node.trait_path
    if scheme is ImplKeyScheme.QUALIFIED:
        return f"{IMPL_SYMBOL_PREFIX}{trait}{IMPL_QUALIFIED_SEPARATOR}{node.self_type}"
    return f"{IMPL_SYMBOL_PREFIX}{trait}"


class SymbolExtractor(ItemVisitor[Optional[str]]):
    """
    Maps each item to its symbol name (None for items that are not indexed).

    Rust Pattern: rustc_resolve::build_reduced_graph (top-level items only)
    """

    def __init__(self, impl_keys: ImplKeyScheme = ImplKeyScheme.SIMPLE):
        self.impl_keys = impl_keys

    def extract(self, source_file: SourceFile) -> Dict[str, Item]:
        symbols: Dict[str, Item] = {}
        for item in source_file.items:
            symbol_name = item.accept(self)
            if symbol_name is None:
                continue
            if symbol_name in symbols:
                logger.debug(f"Symbol '{symbol_name}' redefined, keeping the later {item.kind.value}")
            symbols[symbol_name] = item
        return symbols

    def _named(self, node: NamedItem) -> str:
        return node.name

    visit_function = _named
    visit_struct = _named
    visit_union = _named
    visit_enum = _named
    visit_const = _named
    visit_static = _named
    visit_trait = _named

    def visit_impl(self, node: ImplItem) -> str:
        return impl_symbol_name(node, self.impl_keys)


def extract_symbols(source_file: SourceFile,
                    impl_keys: ImplKeyScheme = ImplKeyScheme.SIMPLE) -> Dict[str, Item]:
    """Symbol table of a parsed file (name -> item, last definition wins)"""
    return SymbolExtractor(impl_keys).extract(source_file)
