# lynix

`lynix` provides front-end tools for the Lynix language in pure Python. It has
no runtime dependencies.

- `lynix.tokenizer` splits source text into tokens and collects error messages.
- `lynix.lyson` holds a JSON-like document tree (`Lyson`) and serializes it in
  compact or indented form.
- `lynix.lyson_parser` is an incremental, event-driven parser (`LysonStream`).
- `lynix.builder` turns parser events into a `Lyson` tree (`TreeBuilder`,
  `parse`).
- `lynix.files` has file helpers: `get_absolute_path`, `get_file_line` and
  `read_file_all`.
- `lynix.location` defines `Position`, `Location`, `AstType`, `AST` and
  `ProgramAST`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Tokenizing source

```python
from lynix.tokenizer import Scanner

scanner = Scanner('let x = 0x1F + 2.5f; // comment\n', "example.ly")
for token in scanner.scan_tokens():
    print(token.type.name, repr(token.value), token.pos.line, token.pos.column)
print(scanner.errors)
```

The token types are `TokenType.EOF`, `STR`, `INT`, `HEX`, `CHAR`, `FLOAT`,
`DOUBLE`, `SYMBOL` and `IDENTIFIER`. A newline gives a `SYMBOL` token with the
value `\n` written as two characters (backslash, `n`). `//` and `/* */`
comments are skipped. A token's `pos` is the position where scanning it
ended.

Scanning errors, such as an unclosed string, character literal or block
comment, or an unknown escape, do not raise. Their messages are added to
`Scanner.errors`, and `Scanner.has_errors` reports whether there are any.

`Scanner.next_token()` returns one token at a time. `scan_tokens()` scans up
to and including the EOF token and returns `Scanner.tokens`.
`Scanner.to_lyson()` builds a document with the file's absolute path, the
token count and one object per token. The path is empty if the file does not
exist. `Scanner.render_tokens(file)` writes that document in indented form to
`file`, or to standard output if no file is given.

## Building and printing documents

```python
from lynix.lyson import Lyson, lyson_to_string

doc = Lyson.create_object()
doc.append_str("name", "lynix")
doc.append_int("count", 3)
items = Lyson.create_array()
items.append_true(None)
items.append_double(None, 1.5)
doc.append_array("items", items)

print(doc.to_string(0))   # {"name":"lynix","count":3,"items":[true,1.5]}
print(doc.to_string(1))   # indented with four spaces per level
print(lyson_to_string(None))  # null
```

Calling an `append_*` method on a node that is not an object or an array
raises `TypeError`. Keys are ignored inside arrays. Iterating over a node
yields its children.

## Parsing text

```python
from lynix.builder import parse

tree = parse('{"name": "lynix", "items": [true]}')
print(tree.to_string(0))   # {"name":"lynix","items":[true]}
```

To parse in pieces, create a `LysonStream` with a handler that takes
`(event, text)`. A `TreeBuilder` instance, or its `handle` method, can serve
as the handler. Call `feed()` for each piece and `finalize()` at the end;
`TreeBuilder.built()` then returns the root. Malformed input raises
`LysonParseError`, whose `result` attribute holds a `LysonResult`.

The parser accepts a narrower grammar than JSON:

- The document must start with `{` or `[`.
- Whitespace is skipped everywhere, including inside strings.
- `\u` escapes are not decoded.
- Inside an object, a member value may only be a string, an object or an
  array. Numbers, `true`, `false` and `null` are accepted only inside arrays.
- A comma after a value always continues as an object member, so an array
  holds at most one element.

The builder also skips empty strings and stores integers as 32-bit values.

## What is not included

`lynix` stops at tokenizing. There is no parser for the Lynix language itself
and no code generation. `lynix.location` defines the syntax tree types, but
nothing in the package builds them. The package also has no command-line
program.