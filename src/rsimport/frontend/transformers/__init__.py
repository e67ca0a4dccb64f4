"""
rsimport Item Transformers
==========================

Lark transformers turning parse trees into item nodes.
"""

from .base import RustItemTransformer

__all__ = [
    'RustItemTransformer',
]
