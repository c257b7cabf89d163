"""Unary and binary operators of SQL expressions."""

from __future__ import annotations

from enum import Enum, unique


@unique
class UnaryOperator(Enum):
    """A unary operator. Its value is the SQL text it renders as."""

    PLUS = "+"
    MINUS = "-"
    NOT = "NOT"
    #: Bitwise not, e.g. ``~9`` (PostgreSQL)
    PG_BITWISE_NOT = "~"
    #: Square root, e.g. ``|/9`` (PostgreSQL)
    PG_SQUARE_ROOT = "|/"
    #: Cube root, e.g. ``||/27`` (PostgreSQL)
    PG_CUBE_ROOT = "||/"
    #: Factorial, e.g. ``9!`` (PostgreSQL)
    PG_POSTFIX_FACTORIAL = "!"
    #: Factorial, e.g. ``!!9`` (PostgreSQL)
    PG_PREFIX_FACTORIAL = "!!"
    #: Absolute value, e.g. ``@ -9`` (PostgreSQL)
    PG_ABS = "@"

    def __str__(self) -> str:
        return self.value


@unique
class BinaryOperator(Enum):
    """A binary operator. Its value is the SQL text it renders as."""

    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    STRING_CONCAT = "||"
    GT = ">"
    LT = "<"
    GT_EQ = ">="
    LT_EQ = "<="
    SPACESHIP = "<=>"
    EQ = "="
    NOT_EQ = "<>"
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"
    ILIKE = "ILIKE"
    NOT_ILIKE = "NOT ILIKE"
    BITWISE_OR = "|"
    BITWISE_AND = "&"
    BITWISE_XOR = "^"
    PG_BITWISE_XOR = "#"
    PG_BITWISE_SHIFT_LEFT = "<<"
    PG_BITWISE_SHIFT_RIGHT = ">>"
    PG_REGEX_MATCH = "~"
    PG_REGEX_IMATCH = "~*"
    PG_REGEX_NOT_MATCH = "!~"
    PG_REGEX_NOT_IMATCH = "!~*"

    def __str__(self) -> str:
        return self.value