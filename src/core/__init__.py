"""
Core domain models and conversion primitives.

This module contains the foundational building blocks that are independent
of external systems: pure conversion functions over immutable values.
"""
