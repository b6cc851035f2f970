"""Errors raised by the IMAP client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "Bad",
    "No",
    "Bye",
    "ImapError",
    "IoError",
    "BadResponse",
    "NoResponse",
    "ByeResponse",
    "ConnectionLost",
    "AppendError",
    "UnexpectedResponse",
    "MissingStatusResponse",
    "ParseError",
    "InvalidStatus",
    "AuthenticationParseError",
    "DataNotUtf8",
    "ValidateError",
    "wrap_error",
]


@dataclass(frozen=True)
class Bad:
    """A BAD response from the server, carrying its error message."""

    information: str
    code: Any = None

    def __str__(self) -> str:
        return self.information


@dataclass(frozen=True)
class No:
    """A NO response from the server, reporting an operational error."""

    information: str
    code: Any = None

    def __str__(self) -> str:
        return self.information


@dataclass(frozen=True)
class Bye:
    """A BYE response: the server is about to hang up."""

    information: str
    code: Any = None

    def __str__(self) -> str:
        return self.information


class ImapError(Exception):
    """Base class for every error the IMAP client raises."""

    _description = "IMAP error"

    def description(self) -> str:
        """Return a short, fixed description of the kind of error."""
        return self._description


class IoError(ImapError):
    """An I/O error while reading from or writing to the network stream."""

    def __init__(self, error: OSError) -> None:
        super().__init__(str(error))
        self.error = error
        self.__cause__ = error

    def __str__(self) -> str:
        return str(self.error)

    def description(self) -> str:
        return str(self.error)


class BadResponse(ImapError):
    """The server answered with BAD."""

    _description = "Bad Response"

    def __init__(self, bad: Bad) -> None:
        super().__init__(bad)
        self.bad = bad

    def __str__(self) -> str:
        return f"Bad Response: {self.bad}"


class NoResponse(ImapError):
    """The server answered with NO."""

    _description = "No Response"

    def __init__(self, no: No) -> None:
        super().__init__(no)
        self.no = no

    def __str__(self) -> str:
        return f"No Response: {self.no}"


class ByeResponse(ImapError):
    """The server answered with BYE."""

    _description = "Bye Response"

    def __init__(self, bye: Bye) -> None:
        super().__init__(bye)
        self.bye = bye

    def __str__(self) -> str:
        return f"Bye Response: {self.bye}"


class ConnectionLost(ImapError):
    """The connection was terminated unexpectedly."""

    _description = "Connection lost"

    def __init__(self) -> None:
        super().__init__("Connection Lost")

    def __str__(self) -> str:
        return "Connection Lost"


class AppendError(ImapError):
    """A message could not be appended to a mailbox."""

    _description = "Could not append mail to mailbox"

    def __init__(self) -> None:
        super().__init__(self._description)

    def __str__(self) -> str:
        return self._description


class UnexpectedResponse(ImapError):
    """A response arrived that the client did not expect or could not use."""

    _description = "Unexpected Response"

    def __init__(self, response: Any) -> None:
        super().__init__(response)
        self.response = response

    def __str__(self) -> str:
        return f"Unexpected Response: {self.response!r}"


class MissingStatusResponse(ImapError):
    """The server completed STATUS without sending any STATUS data."""

    _description = "Missing STATUS Response"

    def __init__(self) -> None:
        super().__init__(self._description)

    def __str__(self) -> str:
        return self._description


class ParseError(ImapError):
    """A server response could not be parsed."""

    _description = "Unable to parse server response"

    def __str__(self) -> str:
        return self._description


class InvalidStatus(ParseError):
    """A status response (OK, NO, BAD, ...) could not be parsed."""

    _description = "Unable to parse status response"

    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.data = bytes(data)


class AuthenticationParseError(ParseError):
    """The server's authentication challenge was missing or undecodable."""

    _description = "Unable to parse authentication response"

    def __init__(self, data: str, decode_error: Exception | None = None) -> None:
        super().__init__(data)
        self.data = data
        self.decode_error = decode_error
        self.__cause__ = decode_error


class DataNotUtf8(ParseError):
    """The server sent data that is not valid UTF-8."""

    _description = "Unable to parse data as UTF-8 text"

    def __init__(self, data: bytes, utf8_error: UnicodeDecodeError) -> None:
        super().__init__(data)
        self.data = bytes(data)
        self.utf8_error = utf8_error
        self.__cause__ = utf8_error


_CHAR_ESCAPES = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    "'": "\\'",
}


def _quote_char(char: str) -> str:
    """Quote a character, escaping it so whitespace and controls stay visible."""
    if char in _CHAR_ESCAPES:
        body = _CHAR_ESCAPES[char]
    elif char == " " or char.isprintable():
        body = char
    else:
        body = f"\\u{{{ord(char):x}}}"
    return f"'{body}'"


class ValidateError(ImapError):
    """A command argument contains a character not allowed in an IMAP string."""

    _description = "Invalid character in command argument"

    def __init__(self, command_synopsis: str, argument: str, offending_char: str) -> None:
        if len(offending_char) != 1:
            raise ValueError("offending_char must be a single character")
        super().__init__(command_synopsis, argument, offending_char)
        self.command_synopsis = command_synopsis
        self.argument = argument
        self.offending_char = offending_char

    def __str__(self) -> str:
        return (
            f"Invalid character {_quote_char(self.offending_char)} in argument "
            f"'{self.argument}' of command '{self.command_synopsis}'"
        )


def wrap_error(error: Any) -> ImapError:
    """Convert a low-level error or a stray response into an ImapError.

    Client errors are returned unchanged, ``OSError`` becomes ``IoError`` and
    anything else is treated as an unexpected server response.
    """
    if isinstance(error, ImapError):
        return error
    if isinstance(error, OSError):
        return IoError(error)
    return UnexpectedResponse(error)