"""Expression tree for the small ``int main() { return EXPR; }`` compiler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_U64_MASK = (1 << 64) - 1


def _wrap(value: int) -> int:
    value &= _U64_MASK
    return value - (1 << 64) if value >= 1 << 63 else value


@dataclass(frozen=True)
class Lit:
    """An integer literal."""

    value: int

    def evaluate(self) -> int:
        """Value of the literal as a signed 64-bit integer."""
        return _wrap(self.value)


@dataclass(frozen=True)
class Add:
    """Sum of two expressions."""

    left: Expr
    right: Expr

    def evaluate(self) -> int:
        """Wrapping 64-bit sum."""
        return _wrap(self.left.evaluate() + self.right.evaluate())


@dataclass(frozen=True)
class Sub:
    """Difference of two expressions."""

    left: Expr
    right: Expr

    def evaluate(self) -> int:
        """Wrapping 64-bit difference."""
        return _wrap(self.left.evaluate() - self.right.evaluate())


@dataclass(frozen=True)
class Mul:
    """Product of two expressions."""

    left: Expr
    right: Expr

    def evaluate(self) -> int:
        """Wrapping 64-bit product."""
        return _wrap(self.left.evaluate() * self.right.evaluate())


@dataclass(frozen=True)
class Neg:
    """Arithmetic negation."""

    operand: Expr

    def evaluate(self) -> int:
        """Wrapping 64-bit negation."""
        return _wrap(-self.operand.evaluate())


Expr = Union[Lit, Add, Sub, Mul, Neg]