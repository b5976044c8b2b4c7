"""Extract import paths from the leading declarations of Go source files."""

from pathlib import Path
from typing import List, Union

from .errors import LexError, ParseError, SourceAccessError
from .lexer import Scanner, Token, TokenType


# Top-level keywords that end the import section of a file
DECLARATION_KEYWORDS = {"var", "const", "func", "type"}

QUOTE_CHARS = "`\""


def parse_file(file_path: Union[str, Path]) -> List[str]:
    """
    Read a Go source file and return the import paths it declares.

    Args:
        file_path: Path to the ``.go`` file.

    Returns:
        Import paths in declaration order, without quotes.

    Raises:
        SourceAccessError: If the file cannot be opened or read.
        ParseError: If the package or import clauses are malformed.
    """
    try:
        with open(file_path, "rb") as reader:
            return extract_imports(Scanner(reader), source=str(file_path))
    except OSError as e:
        raise SourceAccessError(f"failed to read file {file_path}: {e}", file_path) from e


def extract_imports(scanner: Scanner, source: str = "<input>") -> List[str]:
    """
    Collect import paths from a token stream.

    Only the package clause and import declarations are inspected. The
    first ``var``, ``const``, ``func`` or ``type`` ends the scan, so nothing
    after the import section can affect the result.

    Args:
        scanner: Token source positioned at the start of a file.
        source: Name used in error messages.

    Returns:
        Import paths in declaration order, aliases discarded.
    """
    imports: List[str] = []

    while True:
        token = scanner.next_token()

        if token.type is TokenType.EOF:
            return imports

        if token.type is TokenType.ERROR:
            raise _lex_error(token, source)

        if token.type is not TokenType.WORD:
            raise ParseError(f"line {token.line}: unexpected token {token}", source)

        if token.text == "package":
            name = scanner.next_token()
            if name.type is TokenType.ERROR:
                raise _lex_error(name, source)
            if name.type is not TokenType.WORD:
                raise ParseError(
                    f"line {name.line}: expected a word after 'package', got {name}", source
                )
        elif token.text == "import":
            imports.extend(_parse_import(scanner, source))
        elif token.text in DECLARATION_KEYWORDS:
            return imports


def _parse_import(scanner: Scanner, source: str) -> List[str]:
    """Parse what follows an ``import`` keyword."""
    token = scanner.next_token()

    if token.type is TokenType.EOF:
        raise ParseError("unexpected EOF after 'import'", source)
    if token.type is TokenType.ERROR:
        raise _lex_error(token, source)
    if token.type is TokenType.WORD:
        return [_parse_aliased(scanner, token, source)]
    if token.type is TokenType.STRING:
        return [_unquote(token)]
    if token.type is TokenType.LEFT_PAREN:
        return _parse_import_block(scanner, source)

    raise ParseError(f"line {token.line}: unexpected token after 'import': {token}", source)


def _parse_import_block(scanner: Scanner, source: str) -> List[str]:
    """Parse the entries of ``import ( ... )``. The opening paren is consumed."""
    paths: List[str] = []

    while True:
        token = scanner.next_token()

        if token.type is TokenType.EOF:
            raise ParseError("unexpected EOF after 'import ('", source)
        if token.type is TokenType.ERROR:
            raise _lex_error(token, source)
        if token.type is TokenType.RIGHT_PAREN:
            return paths

        if token.type is TokenType.WORD:
            paths.append(_parse_aliased(scanner, token, source))
        elif token.type is TokenType.STRING:
            paths.append(_unquote(token))
        else:
            raise ParseError(
                f"line {token.line}: unexpected token in 'import (': {token}", source
            )


def _parse_aliased(scanner: Scanner, alias: Token, source: str) -> str:
    """Read the path that follows an import alias."""
    token = scanner.next_token()
    if token.type is TokenType.ERROR:
        raise _lex_error(token, source)
    if token.type is not TokenType.STRING:
        raise ParseError(
            f"line {token.line}: expected string after import alias {alias.text!r}, got {token}",
            source,
        )
    return _unquote(token)


def _unquote(token: Token) -> str:
    return token.text.strip(QUOTE_CHARS)


def _lex_error(token: Token, source: str) -> LexError:
    return LexError(f"line {token.line}: {token.text}", source)
