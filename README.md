# imapfault

The exceptions an IMAP client raises, in one hierarchy in
`imapfault.errors`. Every error is an `ImapError`. You can catch that base
class, or catch one of its subclasses to handle a particular case.

## Installing

```
pip install imapfault
```

## What it holds

Server response records. These are frozen dataclasses with an `information`
text and an optional response `code`. `str()` of a record gives the
information text.

- `Bad`
- `No`
- `Bye`

Exceptions, all subclasses of `ImapError`:

- `BadResponse(bad)`, `NoResponse(no)` and `ByeResponse(bye)` wrap a record
  and render as `"Bad Response: ..."`, `"No Response: ..."` and
  `"Bye Response: ..."`.
- `IoError(error)` wraps an `OSError` from the network stream. The `OSError`
  becomes its `__cause__`.
- `ConnectionLost()` means the connection was terminated unexpectedly.
- `AppendError()` means a message could not be appended to a mailbox.
- `UnexpectedResponse(response)` holds a response the client did not expect.
  It renders as `"Unexpected Response: <repr>"`.
- `MissingStatusResponse()` means a STATUS command completed without any
  STATUS data.
- `ParseError` is the base for parse failures:
  - `InvalidStatus(data)`: a status response could not be parsed.
  - `AuthenticationParseError(data, decode_error=None)`: the authentication
    challenge was missing or could not be decoded.
  - `DataNotUtf8(data, utf8_error)`: the server sent data that is not UTF-8.
- `ValidateError(command_synopsis, argument, offending_char)` reports a
  character that is not allowed in an IMAP string. The offending character
  is shown escaped, so whitespace stays visible. It raises `ValueError` if
  `offending_char` is not exactly one character.

Each error has a `description()` method that returns a short, fixed summary
of its kind, for example `"Bad Response"` or `"Connection lost"`. For
`IoError` it returns the text of the wrapped `OSError`. Where there is an
underlying exception, it is also set as `__cause__`.

`wrap_error(error)` turns anything into an `ImapError`. An `ImapError` is
returned unchanged. An `OSError` becomes an `IoError`. Anything else becomes
an `UnexpectedResponse`.

```python
from imapfault.errors import ImapError, IoError, ValidateError, wrap_error

err = ValidateError("COMMAND arg1 arg2", "arg2", "\n")
print(err)
# Invalid character '\n' in argument 'arg2' of command 'COMMAND arg1 arg2'
print(err.description())
# Invalid character in command argument

try:
    raise wrap_error(OSError("reset by peer"))
except IoError as exc:
    print(exc, exc.__cause__ is exc.error)
    # reset by peer True
except ImapError:
    raise
```

## What it does not do

This package only defines errors. It does not open connections, send IMAP
commands or parse server responses. The code that raises these errors lives
elsewhere.

## Running the tests

```
pip install -e ".[test]"
pytest
```