"""Parser for the arithmetic in ``int main() { return EXPR; }`` programs."""

from __future__ import annotations

from fluxkit.exprtree import Add, Expr, Lit, Mul, Neg, Sub

_I64_MAX = (1 << 63) - 1
_RETURN = "return"


class ExprError(Exception):
    """The program or its return expression cannot be parsed."""


class _ExprParser:
    """Recursive-descent parser over one expression string.

    Supports integer literals, ``+``, ``-``, ``*``, unary minus and
    parentheses, with the usual precedence and left associativity.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _accept(self, symbol: str) -> bool:
        if self.text.startswith(symbol, self.pos):
            self.pos += len(symbol)
            return True
        return False

    def rest(self) -> str:
        return self.text[self.pos:]

    def add_sub(self) -> Expr:
        left = self.mul()
        while True:
            self._skip_space()
            if self._accept("+"):
                left = Add(left, self.mul())
            elif self._accept("-"):
                left = Sub(left, self.mul())
            else:
                return left

    def mul(self) -> Expr:
        left = self.unary()
        while True:
            self._skip_space()
            if self._accept("*"):
                left = Mul(left, self.unary())
            else:
                return left

    def unary(self) -> Expr:
        self._skip_space()
        if self._accept("-"):
            return Neg(self.unary())
        return self.primary()

    def primary(self) -> Expr:
        self._skip_space()
        if self._accept("("):
            inner = self.add_sub()
            self._skip_space()
            if not self._accept(")"):
                raise ExprError("expected ')'")
            return inner
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in "0123456789":
            self.pos += 1
        digits = self.text[start:self.pos]
        if not digits:
            raise ExprError(f"expected number, got '{self.text[start:]}'")
        value = int(digits)
        if value > _I64_MAX:
            raise ExprError(f"invalid number: '{digits}'")
        return Lit(value)


def parse_expr(text: str) -> Expr:
    """Parse a whole arithmetic expression; trailing text is an error."""
    parser = _ExprParser(text)
    expr = parser.add_sub()
    leftover = parser.rest().strip()
    if leftover:
        raise ExprError(f"unexpected token: '{leftover}'")
    return expr


def parse_simple_main(source: str) -> Expr:
    """Find the first ``return EXPR;`` in ``source`` and parse EXPR."""
    trimmed = source.strip()
    found = trimmed.find(_RETURN)
    if found == -1:
        raise ExprError("expected 'return' statement in main()")
    after_return = trimmed[found + len(_RETURN):].strip()
    semicolon = after_return.find(";")
    if semicolon == -1:
        raise ExprError("expected ';' after return expression")
    return parse_expr(after_return[:semicolon].strip())