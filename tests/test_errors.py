import pytest

from imapfault.errors import (
    AppendError,
    AuthenticationParseError,
    Bad,
    BadResponse,
    Bye,
    ByeResponse,
    ConnectionLost,
    DataNotUtf8,
    ImapError,
    InvalidStatus,
    IoError,
    MissingStatusResponse,
    No,
    NoResponse,
    ParseError,
    UnexpectedResponse,
    ValidateError,
    wrap_error,
)


def test_validate_error_display():
    err = ValidateError("COMMAND arg1 arg2", "arg2", "\n")
    assert str(err) == (
        "Invalid character '\\n' in argument 'arg2' of command 'COMMAND arg1 arg2'"
    )


def test_validate_error_plain_char_and_description():
    err = ValidateError("SELECT mailbox", "mailbox", "x")
    assert "'x'" in str(err)
    assert err.description() == "Invalid character in command argument"
    assert err.argument == "mailbox"


def test_validate_error_requires_single_char():
    with pytest.raises(ValueError):
        ValidateError("COMMAND", "arg", "ab")


def test_response_payloads_display_information():
    assert str(Bad("oops")) == "oops"
    assert str(No("denied", code="X")) == "denied"
    assert str(Bye("bye now")) == "bye now"


def test_bad_no_bye_errors():
    assert str(BadResponse(Bad("syntax"))) == "Bad Response: syntax"
    assert str(NoResponse(No("denied"))) == "No Response: denied"
    assert str(ByeResponse(Bye("closing"))) == "Bye Response: closing"
    assert BadResponse(Bad("a")).description() == "Bad Response"
    assert NoResponse(No("a")).description() == "No Response"
    assert ByeResponse(Bye("a")).description() == "Bye Response"


def test_simple_errors():
    assert str(ConnectionLost()) == "Connection Lost"
    assert ConnectionLost().description() == "Connection lost"
    assert str(AppendError()) == "Could not append mail to mailbox"
    assert str(MissingStatusResponse()) == "Missing STATUS Response"


def test_unexpected_response_uses_repr():
    err = UnexpectedResponse(b"* FOO")
    assert str(err) == "Unexpected Response: " + repr(b"* FOO")
    assert err.description() == "Unexpected Response"


def test_parse_errors_messages_and_causes():
    invalid = InvalidStatus(b"garbage")
    assert str(invalid) == "Unable to parse status response"
    assert invalid.data == b"garbage"
    assert invalid.__cause__ is None

    decode = ValueError("bad base64")
    auth = AuthenticationParseError("+ ???", decode)
    assert str(auth) == "Unable to parse authentication response"
    assert auth.__cause__ is decode

    try:
        b"\xff".decode("utf-8")
    except UnicodeDecodeError as exc:
        utf8_error = exc
    not_utf8 = DataNotUtf8(b"\xff", utf8_error)
    assert str(not_utf8) == "Unable to parse data as UTF-8 text"
    assert not_utf8.__cause__ is utf8_error
    assert isinstance(not_utf8, ParseError) and isinstance(not_utf8, ImapError)


def test_io_error_wraps_os_error():
    os_err = ConnectionResetError("reset by peer")
    err = IoError(os_err)
    assert str(err) == str(os_err)
    assert err.__cause__ is os_err
    with pytest.raises(ImapError):
        raise err


def test_wrap_error_conversions():
    existing = ConnectionLost()
    assert wrap_error(existing) is existing

    os_err = OSError("boom")
    wrapped = wrap_error(os_err)
    assert isinstance(wrapped, IoError)
    assert wrapped.error is os_err

    stray = ("EXISTS", 3)
    unexpected = wrap_error(stray)
    assert isinstance(unexpected, UnexpectedResponse)
    assert unexpected.response == stray