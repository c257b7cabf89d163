# sqlast

Operator types for SQL expressions. Each operator is an enum member whose
value, and whose string form, is the operator as it is written in SQL.

## Installation

```
pip install .
```

## Operators

`sqlast.operator` provides two enums:

- `UnaryOperator`: `PLUS` (`+`), `MINUS` (`-`) and `NOT`, together with
  the PostgreSQL bitwise not `PG_BITWISE_NOT` (`~`), square root
  `PG_SQUARE_ROOT` (`|/`), cube root `PG_CUBE_ROOT` (`||/`), postfix
  factorial `PG_POSTFIX_FACTORIAL` (`!`), prefix factorial
  `PG_PREFIX_FACTORIAL` (`!!`) and absolute value `PG_ABS` (`@`).
- `BinaryOperator`: arithmetic (`+ - * / %`), string concatenation
  (`||`), comparison (`> < >= <= <=> = <>`), logical (`AND OR XOR`),
  `LIKE`, `NOT LIKE`, `ILIKE`, `NOT ILIKE`, bitwise (`| & ^`), and the
  PostgreSQL bitwise XOR (`#`), shifts (`<<`, `>>`) and regular-expression
  match operators (`~`, `~*`, `!~`, `!~*`).

`str()` of a member gives its SQL text, and a member can be looked up from
that text:

```python
from sqlast.operator import BinaryOperator, UnaryOperator

str(BinaryOperator.NOT_ILIKE)       # 'NOT ILIKE'
str(BinaryOperator.SPACESHIP)       # '<=>'
str(UnaryOperator.PG_CUBE_ROOT)     # '||/'

BinaryOperator("~*")                # BinaryOperator.PG_REGEX_IMATCH

left, op, right = "a", BinaryOperator.PG_BITWISE_SHIFT_LEFT, "b"
f"{left} {op} {right}"              # 'a << b'
```

Members can be compared and hashed, so they can be used as dictionary
keys and in sets. Every member of an enum has a distinct SQL text.

## What the package does not do

The package holds operator types only. It does not tokenize or parse SQL,
and it has no expression or statement nodes to put the operators in.

## Running the tests

```
pip install .[test]
pytest
```