"""
Ordered containers for Python. Elements are kept in ascending order
through every insertion, removal, and assignment, while still supporting
random access by index. Written in Python 3, this library also includes
annotations/type-hints to make usage with an IDE easier and abstract base
classes for easily creating custom implementations.
"""
from . import abc
from ._src.list import OrderedList

__all__ = ["OrderedList", "abc"]

__version__ = "1.0.0"
