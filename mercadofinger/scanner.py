"""Whitespace-separated reading of words and numbers from a text stream."""

from __future__ import annotations

import re
from typing import TextIO

_FLOAT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT = re.compile(r"[+-]?\d+")
_FLOAT_CHARS = frozenset("0123456789+-.eE")
_INT_CHARS = frozenset("0123456789+-")


class Scanner:
    """Reads tokens from a text stream the way formatted console input does."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: list[str] = []

    def _next(self) -> str:
        if self._pending:
            return self._pending.pop()
        return self._stream.read(1)

    def _unread(self, texto: str) -> None:
        self._pending.extend(reversed(texto))

    def _skip_whitespace(self) -> None:
        while True:
            ch = self._next()
            if not ch:
                return
            if not ch.isspace():
                self._unread(ch)
                return

    def _read_while(self, permitidos: frozenset[str]) -> str:
        partes = []
        while True:
            ch = self._next()
            if not ch:
                break
            if ch not in permitidos:
                self._unread(ch)
                break
            partes.append(ch)
        return "".join(partes)

    def _read_number(self, permitidos: frozenset[str], patron: re.Pattern[str]) -> str:
        self._skip_whitespace()
        candidato = self._read_while(permitidos)
        for fin in range(len(candidato), 0, -1):
            if patron.fullmatch(candidato[:fin]):
                self._unread(candidato[fin:])
                return candidato[:fin]
        self._unread(candidato)
        if not self._pending:
            raise EOFError("end of input while reading a number")
        raise ValueError("input does not hold a number here")

    def read_word(self) -> str:
        """Skip whitespace and return the next run of non-whitespace characters."""
        self._skip_whitespace()
        partes = []
        while True:
            ch = self._next()
            if not ch:
                break
            if ch.isspace():
                self._unread(ch)
                break
            partes.append(ch)
        if not partes:
            raise EOFError("end of input while reading a word")
        return "".join(partes)

    def read_int(self) -> int:
        """Read a signed decimal integer."""
        return int(self._read_number(_INT_CHARS, _INT))

    def read_nat(self) -> int:
        """Read a non-negative decimal integer."""
        valor = self.read_int()
        if valor < 0:
            raise ValueError("expected a non-negative integer")
        return valor

    def read_double(self) -> float:
        """Read a decimal floating-point number."""
        return float(self._read_number(_FLOAT_CHARS, _FLOAT))

    def read_char(self) -> str:
        """Skip whitespace and return the next character."""
        self._skip_whitespace()
        ch = self._next()
        if not ch:
            raise EOFError("end of input while reading a character")
        return ch

    def read_rest_of_line(self) -> str:
        """Return the rest of the current line without consuming the newline."""
        partes = []
        while True:
            ch = self._next()
            if not ch:
                break
            if ch == "\n":
                self._unread(ch)
                break
            partes.append(ch)
        return "".join(partes)

    def skip_blank(self) -> bool:
        """Consume the next character if it is whitespace; return whether it was."""
        ch = self._next()
        if not ch:
            return False
        if ch.isspace():
            return True
        self._unread(ch)
        return False