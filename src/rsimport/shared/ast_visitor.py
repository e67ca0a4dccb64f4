"""
Item Visitor Pattern

Design:
- Base class with visit_* methods for each item kind
- Every visit_* falls back to visit_item(), so visitors only override
  the kinds they care about
- Standard compiler pattern (LLVM, Rust MIR, Swift SIL)
"""

from typing import Generic, Iterable, List, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .nodes import (
        Item, FunctionItem, StructItem, UnionItem, EnumItem, ConstItem, StaticItem,
        TraitItem, ImplItem, TypeAliasItem, UseItem, ModItem, ExternCrateItem,
        ForeignBlockItem, MacroItem,
    )

T = TypeVar('T')


class ItemVisitor(Generic[T]):
    """
    Base item visitor.

    Usage:
        class NameCollector(ItemVisitor[Optional[str]]):
            def visit_function(self, node) -> Optional[str]:
                return node.name

        names = NameCollector().visit_all(source_file.items)
    """

    def visit_all(self, items: Iterable['Item']) -> List[T]:
        """Visit items in order, collecting results"""
        return [item.accept(self) for item in items]

    def visit_item(self, node: 'Item') -> T:
        """Fallback for every item kind not overridden by a subclass"""
        return None

    def visit_function(self, node: 'FunctionItem') -> T:
        return self.visit_item(node)

    def visit_struct(self, node: 'StructItem') -> T:
        return self.visit_item(node)

    def visit_union(self, node: 'UnionItem') -> T:
        return self.visit_item(node)

    def visit_enum(self, node: 'EnumItem') -> T:
        return self.visit_item(node)

    def visit_const(self, node: 'ConstItem') -> T:
        return self.visit_item(node)

    def visit_static(self, node: 'StaticItem') -> T:
        return self.visit_item(node)

    def visit_trait(self, node: 'TraitItem') -> T:
        return self.visit_item(node)

    def visit_impl(self, node: 'ImplItem') -> T:
        return self.visit_item(node)

    def visit_type_alias(self, node: 'TypeAliasItem') -> T:
        return self.visit_item(node)

    def visit_use(self, node: 'UseItem') -> T:
        return self.visit_item(node)

    def visit_mod(self, node: 'ModItem') -> T:
        return self.visit_item(node)

    def visit_extern_crate(self, node: 'ExternCrateItem') -> T:
        return self.visit_item(node)

    def visit_foreign_block(self, node: 'ForeignBlockItem') -> T:
        return self.visit_item(node)

    def visit_macro(self, node: 'MacroItem') -> T:
        return self.visit_item(node)
