"""The two stacks of the puzzle and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, TextIO, Union

from pushswap.output import putendl


class Operation(str, Enum):
    """The operations, valued by the names printed for them."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Stacks:
    """Stacks ``a`` and ``b``, top first, writing each operation as it is done.

    Every operation that is announced is also appended to ``operations``.
    With ``echo`` false nothing is written, but operations are still recorded.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        *,
        stream: Optional[TextIO] = None,
        echo: bool = True,
    ) -> None:
        self.a: deque = deque(a)
        self.b: deque = deque(b)
        self.stream = stream
        self.echo = echo
        self.operations: List[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _announce(self, operation: Operation) -> None:
        self.operations.append(operation)
        if self.echo:
            putendl(operation.value, self.stream)

    @staticmethod
    def _swap(stack: deque) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque, step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if self._swap(self.a):
            self._announce(Operation.SA)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        if self._swap(self.b):
            self._announce(Operation.SB)

    def ss(self) -> None:
        """Swap the tops of both stacks; nothing happens unless both hold two elements."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self._swap(self.a)
        self._swap(self.b)
        self._announce(Operation.SS)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            raise IndexError("cannot push from an empty stack b")
        self.a.appendleft(self.b.popleft())
        self._announce(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            raise IndexError("cannot push from an empty stack a")
        self.b.appendleft(self.a.popleft())
        self._announce(Operation.PB)

    def ra(self, silent: bool = False) -> None:
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a, -1) and not silent:
            self._announce(Operation.RA)

    def rb(self, silent: bool = False) -> None:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b, -1) and not silent:
            self._announce(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks up."""
        self.ra(silent=True)
        self.rb(silent=True)
        self._announce(Operation.RR)

    def rra(self, silent: bool = False) -> None:
        """Move the bottom of ``a`` to its top."""
        if self._rotate(self.a, 1) and not silent:
            self._announce(Operation.RRA)

    def rrb(self, silent: bool = False) -> None:
        """Move the bottom of ``b`` to its top."""
        if self._rotate(self.b, 1) and not silent:
            self._announce(Operation.RRB)

    def rrr(self) -> None:
        """Rotate both stacks down."""
        self.rra(silent=True)
        self.rrb(silent=True)
        self._announce(Operation.RRR)

    def apply(self, operation: Union[Operation, str]) -> None:
        """Perform an operation given as an ``Operation`` or by its name."""
        try:
            operation = Operation(operation)
        except ValueError:
            raise ValueError(f"unknown operation {operation!r}") from None
        actions: Dict[Operation, Callable[[], None]] = {
            Operation.SA: self.sa,
            Operation.SB: self.sb,
            Operation.SS: self.ss,
            Operation.PA: self.pa,
            Operation.PB: self.pb,
            Operation.RA: self.ra,
            Operation.RB: self.rb,
            Operation.RR: self.rr,
            Operation.RRA: self.rra,
            Operation.RRB: self.rrb,
            Operation.RRR: self.rrr,
        }
        actions[operation]()