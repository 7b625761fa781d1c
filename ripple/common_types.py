"""
Ripple Common Types - Shared Type Definitions
=============================================

Type variables and callable aliases shared by the observable and reactive
modules. Kept in one place so the protocol module and the concrete classes
can refer to the same names without importing each other.
"""

from typing import Any, Callable, TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")
S = TypeVar("S")  # Narrowed type produced by a filter
V = TypeVar("V")  # Value held by a reactive wrapper
K = TypeVar("K")

# ============================================================================
# CALLABLE ALIASES
# ============================================================================

Callback = Callable[[Any], None]
Predicate = Callable[[Any], bool]
CompareFunction = Callable[[Any, Any], int]
