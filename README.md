# assertkit

Helpers for turning a failed assertion into a readable diagnostic. assertkit works on
C++ expression tokens and type names, and on Python values. It has four modules:

- `assertkit.types` tidies compiler-generated type names with `prettify_type`. For example,
  `std::basic_string<char, ...>` becomes `std::string`, allocator and `default_delete`
  arguments are dropped, and `class`/`struct` keywords are removed. `union_regexes` joins
  patterns into a single alternation.
- `assertkit.lexicon` defines `Token`, `TokenType` and `LiteralFormat`, and provides these
  functions:
  - `get_literal_format` classifies how a literal is written (binary, octal, hex, hex float or
    default).
  - `trim_suffix` strips numeric suffixes.
  - `normalize_op` maps alternative operators such as `and`/`bitand` to their symbols.
  - `normalize_brace` maps digraph braces such as `<:` to their usual form.
  - `precedence_of` returns the precedence of low-precedence binary operators.
  - `is_bitwise` tells whether an operator is bitwise.
- `assertkit.decompose` splits a token sequence such as `foo(n) == bar<n> + n` around its
  top-level operator. Template angle brackets make this ambiguous, so `decompose` returns the
  operand texts only when exactly one split is plausible. Otherwise it returns
  `("left", "right")`. `find_split_candidates` returns every plausible split index. It raises
  `MaxDepthExceeded` when the possible template readings nest too deeply.
- `assertkit.stringify` renders values for diagnostics. `stringify` formats a value, and
  `generate_stringification` adds the type name in front of containers and tuples. Custom
  formatters are added with `register_stringifier`.

## Installation

```
pip install assertkit
```

## Examples

```python
from assertkit.types import prettify_type

prettify_type("class std::vector<int,class std::allocator<int> >")
# 'std::vector<int>'
```

```python
from assertkit.lexicon import get_literal_format, normalize_op, is_bitwise

get_literal_format("0x1F")   # LiteralFormat.INTEGER_HEX
normalize_op("bitand")       # '&'
is_bitwise("xor_eq")         # True
```

`decompose` takes a token sequence and the operator to split on. The tokens must have any
`>>` already broken into two `>` tokens:

```python
from assertkit.decompose import decompose
from assertkit.lexicon import Token, TokenType

tokens = [
    Token(TokenType.IDENTIFIER, "a"),
    Token(TokenType.WHITESPACE, " "),
    Token(TokenType.PUNCTUATION, "=="),
    Token(TokenType.WHITESPACE, " "),
    Token(TokenType.IDENTIFIER, "b"),
]
decompose(tokens, "==")      # ('a', 'b')
```

```python
from assertkit.stringify import stringify, generate_stringification, register_stringifier

stringify([1, 2, 3])                  # '[1, 2, 3]'
stringify("hi\n")                     # '"hi\\n"'
stringify(None)                       # 'nullptr'
generate_stringification([1, 2, 3])   # 'list: [1, 2, 3]'

class Point:
    def __init__(self, x, y):
        self.x, self.y = x, y

register_stringifier(Point, lambda p: f"({p.x}, {p.y})")
stringify(Point(1, 2))                # '(1, 2)'
```

Mappings print as a list of `[key, value]` pairs. Containers print at most 1000 items and
then end with `...`. A value that contains itself prints the inner occurrence as
`<instance of ...>` instead of recursing forever.

## What it does not do

assertkit does not turn expression text into tokens. Callers must build the `Token` sequences
that `decompose` and `find_split_candidates` take. The package does no terminal colouring or
syntax highlighting, and it has no command-line interface.

## Running the tests

```
pip install assertkit[test]
pytest
```