from __future__ import annotations

from typing import Optional

from .exceptions import ExpressionError

_OPERATORS = "+-*/"


def _tokenize(text: str) -> list[str]:
    tokens = []
    cache = ""
    for c in text:
        if c.isdigit():
            cache += c
            continue
        if cache:
            tokens.append(cache)
            cache = ""
        if c in _OPERATORS or c in "()":
            tokens.append(c)
        elif not c.isspace():
            raise ExpressionError(f"无效字符: {c!r}")
    if cache:
        tokens.append(cache)
    return tokens


class _Parser:
    """
    递归下降求值, 只处理整数

    expr   := term (('+' | '-') term)*
    term   := unary (('*' | '/') unary)*
    unary  := ('+' | '-') unary | atom
    atom   := number | '(' expr ')'
    """

    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[str]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self) -> str:
        if (token := self.peek()) is None:
            raise ExpressionError("表达式不完整")
        self.pos += 1
        return token

    def expr(self) -> int:
        value = self.term()
        while self.peek() in ("+", "-"):
            if self.take() == "+":
                value += self.term()
            else:
                value -= self.term()
        return value

    def term(self) -> int:
        value = self.unary()
        while self.peek() in ("*", "/"):
            if self.take() == "*":
                value *= self.unary()
                continue
            divisor = self.unary()
            if divisor == 0:
                raise ExpressionError("除数为 0")
            value //= divisor
        return value

    def unary(self) -> int:
        if self.peek() == "+":
            self.take()
            return self.unary()
        if self.peek() == "-":
            self.take()
            return -self.unary()
        return self.atom()

    def atom(self) -> int:
        token = self.take()
        if token == "(":
            value = self.expr()
            if self.take() != ")":
                raise ExpressionError("括号不匹配")
            return value
        if not token.isdigit():
            raise ExpressionError(f"此处需要数字: {token!r}")
        return int(token)


def parse(text: str) -> int:
    """严格求值, 失败时抛出 ExpressionError"""
    tokens = _tokenize(text)
    if not tokens:
        raise ExpressionError("空表达式")
    parser = _Parser(tokens)
    value = parser.expr()
    if parser.peek() is not None:
        raise ExpressionError(f"多余的内容: {''.join(tokens[parser.pos:])!r}")
    return value


def evaluate(text: Optional[str], default: int = 0) -> int:
    """
    修正值求值; 文本为空或无法解析时返回 default
    """
    if not text:
        return default
    try:
        return parse(text)
    except ExpressionError:
        return default
