"""
Abstract base classes and protocols for ordered key containers.
"""

from bstree.interfaces.in_order_iterable import InOrderIterable
from bstree.interfaces.sorted_set import SortedSet

__all__ = ["InOrderIterable", "SortedSet"]
