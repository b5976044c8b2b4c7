"""
Lexical scanner for the package and import clauses of Go source files.

The scanner only knows enough of the language to find the leading
``package`` and ``import`` declarations: words, quoted strings, parentheses
and comments. Anything else is reported as an error token.

Input is pulled from a binary stream one line at a time, so a file is never
read further than the tokens requested from it.
"""

import enum
import io
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Iterator, Optional


QUOTES = {'"', "`"}


class TokenType(enum.Enum):
    """Kinds of tokens produced by the scanner."""

    EOF = "EOF"
    ERROR = "Error"  # text is the error message
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    STRING = "String"  # quoted string, quotes included
    WORD = "Word"


@dataclass(frozen=True)
class Token:
    """A token and the raw text it matched."""

    type: TokenType
    text: str
    line: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if self.type is TokenType.EOF:
            return "EOF"
        if self.type is TokenType.ERROR:
            return f"error: {self.text}"
        if len(self.text) > 10:
            return f"{self.type.value}: {self.text[:10]!r}..."
        return f"{self.type.value}: {self.text!r}"


# A state consumes input and returns the next state, or None once
# the current token has been decided.
StateFn = Optional[Callable[[], "StateFn"]]


def _is_space(char: Optional[str]) -> bool:
    # A byte order mark is allowed before the package clause.
    return char is not None and (char.isspace() or char == "\ufeff")


def _is_word_char(char: Optional[str]) -> bool:
    return char is not None and (char.isalpha() or char.isdecimal() or char == "_")


def _describe(char: Optional[str]) -> str:
    """Format a symbol for an error message, e.g. ``U+0023 '#'``."""
    if char is None:
        return "EOF"
    return f"U+{ord(char):04X} {char!r}"


class Scanner:
    """
    Streaming tokenizer over a line-refilled text buffer.

    ``_start`` marks the beginning of the pending token and ``_pos`` the
    next unread symbol, with ``_start <= _pos <= len(_input)``. ``_last``
    caches the most recently consumed symbol so that exactly one step can
    be undone.
    """

    def __init__(self, reader: BinaryIO):
        self._reader = reader
        self._done = False
        self._token = Token(TokenType.EOF, "EOF")
        self._input = ""
        self._start = 0
        self._pos = 0
        self._line = 1
        self._start_line = 1
        self._last: Optional[str] = None

    @classmethod
    def from_text(cls, text: str) -> "Scanner":
        """Create a scanner over an in-memory string."""
        return cls(io.BytesIO(text.encode("utf-8")))

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._last = None
        self._token = Token(TokenType.EOF, "EOF", self._line)
        state: StateFn = self._lex_any
        while state is not None:
            state = state()
        return self._token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to end of input, stopping after an error token."""
        while True:
            token = self.next_token()
            if token.type is TokenType.EOF:
                return
            yield token
            if token.type is TokenType.ERROR:
                return

    # Input handling

    def _load_line(self) -> None:
        """Read the next line of input into the buffer, dropping carriage returns."""
        raw = self._reader.readline()
        if not raw.endswith(b"\n"):
            self._done = True
        text = raw.replace(b"\r", b"").decode("utf-8", errors="replace")
        if self._start == self._pos:
            # Nothing pending, start a fresh buffer.
            self._input = text
            self._start = 0
            self._pos = 0
        else:
            self._input += text

    def _read(self) -> Optional[str]:
        if not self._done and self._pos == len(self._input):
            self._load_line()
        if self._pos == len(self._input):
            return None
        return self._input[self._pos]

    def _next(self) -> Optional[str]:
        char = self._read()
        self._last = char
        if char is not None:
            self._pos += 1
            if char == "\n":
                self._line += 1
        return char

    def _peek(self) -> Optional[str]:
        return self._read()

    def _backup(self) -> None:
        """Step back one symbol. Valid once per call of ``_next``."""
        if self._last is None:
            return
        if self._pos > self._start:
            self._pos -= 1
            if self._last == "\n":
                self._line -= 1
        self._last = None

    def _ignore(self) -> None:
        """Discard the pending span."""
        self._start = self._pos
        self._start_line = self._line

    def _emit(self, token_type: TokenType) -> StateFn:
        text = self._input[self._start:self._pos]
        self._token = Token(token_type, text, self._start_line)
        self._ignore()
        return None

    def _errorf(self, message: str) -> StateFn:
        """Produce an error token and empty the buffer."""
        self._token = Token(TokenType.ERROR, message, self._start_line)
        self._input = ""
        self._start = 0
        self._pos = 0
        return None

    # States

    def _lex_any(self) -> StateFn:
        char = self._next()
        if char is None:
            return None
        if _is_space(char):
            return self._lex_space
        if char == "/":
            following = self._peek()
            if following == "/":
                self._next()
                return self._lex_line_comment
            if following == "*":
                self._next()
                return self._lex_block_comment
            return self._errorf(f"after '/' unrecognized character {_describe(following)}")
        if char.isalpha() or char == "_":
            return self._lex_word
        if char in QUOTES:
            self._backup()  # _lex_quote reads the opening quote itself
            return self._lex_quote
        if char == "(":
            return self._emit(TokenType.LEFT_PAREN)
        if char == ")":
            return self._emit(TokenType.RIGHT_PAREN)
        return self._errorf(f"unrecognized character {_describe(char)}")

    def _lex_space(self) -> StateFn:
        while _is_space(self._peek()):
            self._next()
        self._ignore()
        return self._lex_any

    def _lex_line_comment(self) -> StateFn:
        while True:
            char = self._next()
            if char is None:
                return None
            if char == "\n":
                break
        self._ignore()
        return self._lex_any

    def _lex_block_comment(self) -> StateFn:
        while True:
            char = self._next()
            if char is None:
                # Unclosed block comments end the input without an error.
                return None
            if char == "*" and self._peek() == "/":
                self._next()
                break
        self._ignore()
        return self._lex_any

    def _lex_word(self) -> StateFn:
        while _is_word_char(self._peek()):
            self._next()
        return self._emit(TokenType.WORD)

    def _lex_quote(self) -> StateFn:
        quote = self._next()
        while True:
            char = self._next()
            if char is None or char == "\n":
                return self._errorf("unterminated quoted string")
            if char == "\\" and quote == '"':
                escaped = self._next()
                if escaped is None or escaped == "\n":
                    return self._errorf("unterminated quoted string")
                continue
            if char == quote:
                return self._emit(TokenType.STRING)
