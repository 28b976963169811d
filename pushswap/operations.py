"""The push-swap board: two stacks and the named moves that act on them."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from pushswap.stack import Stack


class Board:
    """Stacks ``a`` and ``b`` plus a stream that records every move made."""

    def __init__(
        self,
        a: Optional[Stack] = None,
        b: Optional[Stack] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.a = a if a is not None else Stack()
        self.b = b if b is not None else Stack()
        self._out = out
        self.moves: list[str] = []

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _emit(self, name: str) -> None:
        self.moves.append(name)
        print(name, file=self.out)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self.a.swap_top()
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self.b.swap_top()
        self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self.a.swap_top()
        self.b.swap_top()
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens when ``b`` is empty."""
        if not len(self.b):
            return
        self.a.push_front(self.b.pop_front())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens when ``a`` is empty."""
        if not len(self.a):
            return
        self.b.push_front(self.a.pop_front())
        self._emit("pb")

    def ra(self) -> None:
        """Rotate ``a`` so its top goes to the bottom."""
        self.a.rotate()
        self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b`` so its top goes to the bottom."""
        self.b.rotate()
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self.a.rotate()
        self.b.rotate()
        self._emit("rr")

    def rra(self) -> None:
        """Bring the bottom of ``a`` to the top."""
        self.a.reverse_rotate()
        self._emit("rra")

    def rrb(self) -> None:
        """Bring the bottom of ``b`` to the top."""
        self.b.reverse_rotate()
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._emit("rrr")