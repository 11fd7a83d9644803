"""GMML grammar routines building the AST.

document   := block*
block      := '[' IDENT ']' WS* NEWLINE content
content    := statement*            ; ends at '[', a blank line or end of input
statement  := target (NEWLINE | ':' value NEWLINE | '=' value NEWLINE)
target     := key ('->' key)?
key        := IDENT | STRING | NUMBER
value      := struct | STRING | NUMBER | message
struct     := '{' (key ':' value (',' key ':' value)*)? ','? '}'
message    := IDENT ('(' (value (',' value)*)? ','? ')')?

The first mismatch raises and aborts the parse; there is no recovery.
"""

from typing import cast

from gmml.ast import (
    AstBlock,
    AstEdge,
    AstEdgeDef,
    AstField,
    AstKey,
    AstLeafDef,
    AstMessage,
    AstNumber,
    AstStatement,
    AstString,
    AstStruct,
    AstSymbol,
    AstTarget,
    AstValue,
)
from gmml.diagnostics import UnexpectedTargetError
from gmml.lexer import TokenKind
from gmml.parser.parser import Parser


def parse_document(parser: Parser) -> tuple[AstBlock, ...]:
    blocks: list[AstBlock] = []
    while True:
        parser.skip_blank()
        if parser.at_end:
            break
        blocks.append(parse_block(parser))
    return tuple(blocks)


def parse_block(parser: Parser) -> AstBlock:
    parser.expect(TokenKind.LBRACKET)
    name = parser.expect(TokenKind.IDENTIFIER)
    parser.expect(TokenKind.RBRACKET)
    _expect_line_end(parser)
    return AstBlock(name=str(name.value), content=parse_content(parser))


def parse_content(parser: Parser) -> tuple[AstStatement, ...]:
    statements: list[AstStatement] = []
    while True:
        parser.skip_whitespace()
        if parser.at_end or parser.at(TokenKind.LBRACKET):
            break
        # blank line closes the block
        if parser.eat(TokenKind.NEWLINE):
            break
        statements.append(parse_statement(parser))
    return tuple(statements)


def parse_statement(parser: Parser) -> AstStatement:
    target = parse_target(parser)
    parser.skip_whitespace()

    if parser.at(TokenKind.COLON):
        if not isinstance(target, AstEdge):
            raise UnexpectedTargetError("':' must follow an edge target", target, parser.current_range)
        parser.bump()
        edge_def = AstEdgeDef(target=target, stmt=parse_definition(parser))
        _expect_line_end(parser)
        return edge_def

    if parser.at(TokenKind.EQUAL):
        if isinstance(target, AstEdge):
            raise UnexpectedTargetError("'=' must follow a leaf target", target, parser.current_range)
        parser.bump()
        leaf_def = AstLeafDef(target=target, stmt=parse_definition(parser))
        _expect_line_end(parser)
        return leaf_def

    _expect_line_end(parser)
    return target


def parse_target(parser: Parser) -> AstTarget:
    source = parse_key(parser)

    checkpoint = parser.checkpoint()
    parser.skip_whitespace()
    if not parser.eat(TokenKind.ARROW):
        parser.rewind(checkpoint)
        return source

    parser.skip_whitespace()
    return AstEdge(source=source, dest=parse_key(parser))


def parse_key(parser: Parser) -> AstKey:
    token = parser.current
    if token is None:
        raise parser.expected("key")

    match token.kind:
        case TokenKind.IDENTIFIER:
            parser.bump()
            return AstSymbol(str(token.value))
        case TokenKind.STRING:
            parser.bump()
            return AstString(str(token.value))
        case TokenKind.NUMBER:
            parser.bump()
            return AstNumber(cast(float, token.value))
        case _:
            raise parser.expected("key")


def parse_definition(parser: Parser) -> AstValue:
    parser.skip_whitespace()
    return parse_value(parser)


def parse_value(parser: Parser) -> AstValue:
    token = parser.current
    if token is None:
        raise parser.expected("value")

    match token.kind:
        case TokenKind.LBRACE:
            return parse_struct(parser)
        case TokenKind.STRING:
            parser.bump()
            return AstString(str(token.value))
        case TokenKind.NUMBER:
            parser.bump()
            return AstNumber(cast(float, token.value))
        case TokenKind.IDENTIFIER:
            return parse_message(parser)
        case _:
            raise parser.expected("value")


def parse_struct(parser: Parser) -> AstStruct:
    parser.expect(TokenKind.LBRACE)
    entries: list[AstField] = []

    parser.skip_blank()
    while not parser.at(TokenKind.RBRACE):
        key = parse_key(parser)
        parser.skip_blank()
        parser.expect(TokenKind.COLON)
        parser.skip_blank()
        entries.append(AstField(key=key, value=parse_value(parser)))

        parser.skip_blank()
        if not parser.eat(TokenKind.COMMA):
            break
        parser.skip_blank()

    parser.expect(TokenKind.RBRACE)
    return AstStruct(entries=tuple(entries))


def parse_message(parser: Parser) -> AstSymbol | AstMessage:
    name = str(parser.expect(TokenKind.IDENTIFIER).value)
    if not parser.eat(TokenKind.LPAREN):
        return AstSymbol(name)

    args: list[AstValue] = []
    parser.skip_blank()
    while not parser.at(TokenKind.RPAREN):
        args.append(parse_value(parser))

        parser.skip_blank()
        if not parser.eat(TokenKind.COMMA):
            break
        parser.skip_blank()

    parser.expect(TokenKind.RPAREN)
    return AstMessage(name=name, args=tuple(args))


def _expect_line_end(parser: Parser) -> None:
    parser.skip_whitespace()
    if parser.at_end and not parser.options.require_trailing_newline:
        return
    parser.expect(TokenKind.NEWLINE)
