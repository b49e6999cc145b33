# breezelang

Breeze is a small programming language. This package holds a lexer for Breeze
source text and the node types of its syntax tree. It also has a command that
tokenizes a source file.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
breezelang [path] [--debug]
```

- `path` is the source file to read. The default is `main.bl` in the current
  directory.
- `--debug` prints every token on one line, each in the form
  `NAME{id=4(main)} @ main.bl(1:6); `. Tokens that carry no text print only
  their kind, for example `func @ main.bl(1:1); `.

Without `--debug` the command prints an empty line once tokenizing succeeds.
It exits with status 0 on success. If the file cannot be read, it prints a
message to standard error and exits with status 1. A lexical error also exits
with status 1. Its diagnostic goes to standard error and shows the file, line
and column, the header, the offending line, and an underline of `~` with a `^`
under the error column.

## Library use

```python
from breezelang.lexer import Lexer, TokenType, LexError

lexer = Lexer("example.bl", 'using std::io; func main() { print("hi") }')
for token in lexer:
    print(token.type.name, token.text(), token.where.line, token.where.col)
```

`breezelang.lexer` provides the following:

- `Lexer(filename, source)` tokenizes `source`.
  - `next()` returns the next `Token`. At the end of input it returns a token
    of type `TokenType.EOF`.
  - `peek(n=0)` returns the token `n` places ahead and does not consume it.
  - Iterating a `Lexer` yields tokens up to the first `EOF` token and leaves
    that token out.
  - `consume()`, `consume_spaces()` and `peek_char(n=0)` work at the level of
    single characters. `consume()` and `peek_char()` return `None` past the
    end of input.
  - `error(where, header, footer=None)` raises a `LexError`.
- `Token` has a `type`, a `where` (a `Location` with `line`, `col`, `pos` and
  `filename`) and a `value`. `value` holds the text of names, strings,
  numbers and character literals and is `None` otherwise. `text()` returns
  the value, or else the spelling of the token's kind.
- `LexError` is raised for lexical errors. Its string form is the full
  diagnostic. It keeps `where`, `header` and `footer`.
- `format_error(source, where, header, footer=None)` builds the same
  diagnostic text without raising.

### Tokens

- Names: a letter followed by letters and digits.
- Strings in double quotes. A string may not contain a newline or run to the
  end of input.
- Character literals of one character in single quotes.
- Numbers made of digits, with at most one `.`. A number may end in a type
  hint: `f`, `u`, `l`, `lu`, `ll` or `llu`. Any other letter after a number is
  an error.
- The reserved words `func`, `for` and `using`.
- Punctuation: `: < > [ ] { } ( ) . ! ,`
- Compound punctuation: `...` and `::`. Two periods not followed by a third
  are an error.
- `//` starts a comment that runs to the end of the line. Whitespace and `;`
  between tokens are skipped.

Any other character produces a token of type `TokenType.EOF`. Iteration stops
at that token.

### Syntax tree

`breezelang.parser` defines the node classes `Node`, `BinaryNode`,
`IdentifierNode`, `QualifiedName`, `UnaryStmt`, `UsingStmt` and `RootNode`.
Each class carries its tag from `NodeType` as `type`. A node's `parent`
points to the node above it.

- `RootNode` holds top-level nodes in order. `add(child)` appends a node and
  raises `TypeError` for anything that is not a `Node`. `len()` and
  iteration work over its children.
- `Parser(lexer)` keeps the lexer and an empty `RootNode` as `tree`.
- `Parser.new_node(node_class, parent, *args)` creates a node of a `Node`
  subclass under `parent`. It raises `TypeError` for any other class.

## What this package does not do

The package does not parse. `Parser` sets up the tree and creates nodes on
request, but it does not read tokens into statements. There is no compiler
or interpreter for Breeze programs. The command only tokenizes.