"""
Core types for tokenization.
"""

from typing import TypeAlias

TokenId: TypeAlias = int
Symbol: TypeAlias = str
MergePair: TypeAlias = tuple[Symbol, Symbol]
