import io
import os

import pytest

from lynix.files import get_absolute_path
from lynix.location import Position
from lynix.lyson import LysonType
from lynix.tokenizer import Scanner, Token, TokenType


def _scan(source):
    scanner = Scanner(source, "test.ly")
    return scanner, scanner.scan_tokens()


def _pairs(tokens):
    return [(t.type, t.value) for t in tokens]


def _member(node, key):
    return next(child for child in node if child.key == key)


def test_identifiers_and_symbols():
    scanner, tokens = _scan("foo = bar_1;")
    assert _pairs(tokens) == [
        (TokenType.IDENTIFIER, "foo"),
        (TokenType.SYMBOL, "="),
        (TokenType.IDENTIFIER, "bar_1"),
        (TokenType.SYMBOL, ";"),
        (TokenType.EOF, ""),
    ]
    assert not scanner.has_errors


@pytest.mark.parametrize(
    "source, kind, value",
    [
        ("42", TokenType.INT, "42"),
        ("0x1F", TokenType.HEX, "0x1F"),
        ("3.14", TokenType.FLOAT, "3.14"),
        ("2.5f", TokenType.FLOAT, "2.5"),
        ("1.5d", TokenType.DOUBLE, "1.5"),
        ("1e10", TokenType.FLOAT, "1e10"),
        ("6E-3", TokenType.FLOAT, "6E-3"),
    ],
)
def test_numbers(source, kind, value):
    scanner, tokens = _scan(source)
    assert _pairs(tokens) == [(kind, value), (TokenType.EOF, "")]
    assert scanner.errors == []


def test_string_with_escapes():
    scanner, tokens = _scan('"a\\nb\\t\\"q\\\\"')
    assert tokens[0] == Token(TokenType.STR, 'a\nb\t"q\\', tokens[0].pos)
    assert scanner.errors == []


def test_empty_string():
    _, tokens = _scan('""')
    assert _pairs(tokens) == [(TokenType.STR, ""), (TokenType.EOF, "")]


def test_unclosed_string_is_reported():
    scanner, tokens = _scan('"abc')
    assert tokens[0].type is TokenType.STR
    assert tokens[0].value == "abc"
    assert scanner.errors == ["Unclosed string literal"]
    assert scanner.has_errors


def test_unknown_escape_keeps_character():
    scanner, tokens = _scan('"\\q"')
    assert tokens[0].value == "q"
    assert scanner.errors == ["Unknown escape sequence in character literal"]


def test_char_literals():
    scanner, tokens = _scan("'x' '\\t'")
    assert _pairs(tokens) == [
        (TokenType.CHAR, "x"),
        (TokenType.CHAR, "\t"),
        (TokenType.EOF, ""),
    ]
    assert scanner.errors == []


def test_unclosed_char_literal():
    scanner, tokens = _scan("'ab")
    assert tokens[0].type is TokenType.CHAR
    assert tokens[0].value == "a"
    assert "Unclosed character literal" in scanner.errors


def test_newline_token_and_line_count():
    _, tokens = _scan("a\nb")
    assert _pairs(tokens) == [
        (TokenType.IDENTIFIER, "a"),
        (TokenType.SYMBOL, "\\n"),
        (TokenType.IDENTIFIER, "b"),
        (TokenType.EOF, ""),
    ]
    assert tokens[2].pos.line == 2


def test_block_comment_is_skipped():
    scanner, tokens = _scan("a /* x\ny */ b")
    assert _pairs(tokens) == [
        (TokenType.IDENTIFIER, "a"),
        (TokenType.IDENTIFIER, "b"),
        (TokenType.EOF, ""),
    ]
    assert tokens[1].pos.line == 2
    assert scanner.errors == []


def test_unclosed_block_comment():
    scanner, tokens = _scan("/* never closed")
    assert _pairs(tokens) == [(TokenType.EOF, "")]
    assert scanner.errors == ["Unclosed block comment"]


def test_token_position_is_where_scanning_ended():
    source = "abc"
    token = Scanner(source, "test.ly").next_token()
    assert token.pos == Position(1, len(source))


def test_eof_repeats_after_end():
    scanner = Scanner("x", "test.ly")
    scanner.scan_tokens()
    assert scanner.eof
    assert scanner.next_token().type is TokenType.EOF
    assert scanner.tokens[-1].type is TokenType.EOF


def test_to_lyson_describes_tokens(tmp_path):
    source_file = tmp_path / "prog.ly"
    source_file.write_text("x 1", encoding="utf-8")
    scanner = Scanner("x 1", source_file)
    scanner.scan_tokens()
    doc = scanner.to_lyson()

    assert _member(doc, "path").value == get_absolute_path(source_file)
    assert _member(doc, "count").value == len(scanner.tokens)
    items = list(_member(doc, "tokens"))
    assert len(items) == len(scanner.tokens)
    assert [_member(item, "type").value for item in items] == [
        "Identifier",
        "Int",
        "EOF",
    ]
    assert [_member(item, "value").value for item in items] == ["x", "1", ""]
    for item, token in zip(items, scanner.tokens):
        position = _member(item, "position")
        assert position.type is LysonType.OBJECT
        assert _member(position, "line").value == token.pos.line
        assert _member(position, "column").value == token.pos.column


def test_to_lyson_missing_file_gives_empty_path(tmp_path):
    scanner = Scanner("y", os.path.join(tmp_path, "absent.ly"))
    scanner.scan_tokens()
    assert _member(scanner.to_lyson(), "path").value == ""


def test_render_tokens_writes_indented_document():
    scanner, _ = _scan("a+b")
    out = io.StringIO()
    scanner.render_tokens(out)
    assert out.getvalue() == scanner.to_lyson().to_string(1)
    assert '"type": "Symbol"' in out.getvalue()


def test_every_token_kind_is_labelled_in_lyson():
    scanner, tokens = _scan("\"s\" 1 0x1 'c' 1.5 2d + id")
    expected = [
        "String",
        "Int",
        "Hex",
        "Char",
        "Float",
        "Double",
        "Symbol",
        "Identifier",
        "EOF",
    ]
    assert [t.type.label for t in tokens] == expected
    items = list(_member(scanner.to_lyson(), "tokens"))
    assert [_member(item, "type").value for item in items] == expected
    assert scanner.errors == []