"""Node types shared by the linked containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class SingleNode:
    """A node holding a value and one link to the next node."""

    value: Any = None
    next: Optional[SingleNode] = field(default=None, repr=False)


@dataclass(eq=False)
class DoubleNode:
    """A node holding a value and two links.

    In lists ``first`` is the previous node and ``second`` the next one;
    in trees they are the left and right children.
    """

    value: Any = None
    first: Optional[DoubleNode] = field(default=None, repr=False)
    second: Optional[DoubleNode] = field(default=None, repr=False)