# encoding: utf-8
from dataclasses import dataclass
from typing import Union

# int() AND str() REFUSE LONG NUMBERS (sys.set_int_max_str_digits, NEVER BELOW 640), SO CONVERT IN CHUNKS
CHUNK_DIGITS = 500
CHUNK = 10 ** CHUNK_DIGITS


@dataclass(frozen=True)
class Program:
    body: "Expression"

    def __str__(self):
        return _render(self.body, infix=False)

    def to_infix(self):
        return _render(self.body, infix=True)


@dataclass(frozen=True)
class BinaryExpression:
    left: "Expression"
    op: str
    right: "Expression"

    def __str__(self):
        return _render(self, infix=False)

    def to_infix(self):
        return _render(self, infix=True)


@dataclass(frozen=True)
class IntegerLiteral:
    value: int

    @classmethod
    def from_digits(cls, text):
        """
        :param text: DECIMAL DIGITS, OF ANY LENGTH, LEADING ZEROS ALLOWED
        """
        value = 0
        for i in range(0, len(text), CHUNK_DIGITS):
            chunk = text[i : i + CHUNK_DIGITS]
            value = value * 10 ** len(chunk) + int(chunk)
        return cls(value)

    def __str__(self):
        return format_integer(self.value)

    def to_infix(self):
        return format_integer(self.value)


@dataclass(frozen=True)
class Identifier:
    name: str

    def __str__(self):
        return self.name

    def to_infix(self):
        return self.name


Expression = Union[BinaryExpression, IntegerLiteral, Identifier]


def format_integer(value):
    if value < 0:
        return "-" + format_integer(-value)
    chunks = []
    while value >= CHUNK:
        value, low = divmod(value, CHUNK)
        chunks.append(str(low).zfill(CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def _render(expression, infix):
    # TREES CAN BE DEEPER THAN THE PYTHON STACK, SO EXPAND WITH AN EXPLICIT ONE
    output = []
    todo = [expression]
    while todo:
        e = todo.pop()
        if isinstance(e, str):
            output.append(e)
        elif isinstance(e, BinaryExpression):
            if infix:
                todo.extend((")", e.right, f" {e.op} ", e.left, "("))
            else:
                todo.extend((")", e.right, " ", e.left, f"({e.op} "))
        else:
            output.append(str(e))
    return "".join(output)
