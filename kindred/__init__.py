"""Kindred package of homogeneous, runtime kind-checked collections."""

from .data_structures.kinds import Kind
from .data_structures.queue import Queue
from .data_structures.set import Set
from .data_structures.stack import Stack

__all__ = ["Kind", "Queue", "Set", "Stack"]
