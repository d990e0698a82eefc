import itertools

import pytest

from access_permissions import codec
from access_permissions.errors import (
    InvalidEncodingError,
    InvalidEncodingLength,
    InvalidSymbolError,
    InvalidUnixPermission,
)
from access_permissions.logging import LogAuthor, LogType, Severity
from models.flags import UserClass
from providers import ValueProvider, has_task_dependency

ALL_TRIPLES = list(itertools.product((True, False), repeat=3))


@pytest.mark.parametrize("read,write,execute", ALL_TRIPLES)
def test_numeric_bits_round_trip(read, write, execute):
    digit = codec.encode_numeric(read, write, execute)
    assert digit == 4 * read + 2 * write + execute
    assert (codec.is_read(digit), codec.is_write(digit), codec.is_execute(digit)) == (read, write, execute)


@pytest.mark.parametrize("read,write,execute", ALL_TRIPLES)
def test_symbolic_round_trip(read, write, execute):
    symbolic = codec.encode_symbolic(read, write, execute)
    assert len(symbolic) == 3
    assert (
        codec.is_read_symbolic(symbolic),
        codec.is_write_symbolic(symbolic),
        codec.is_execute_symbolic(symbolic),
    ) == (read, write, execute)


@pytest.mark.parametrize(
    "index,expected",
    [(0, (True, True, True)), (1, (True, False, True)), (2, (True, False, False))],
)
def test_decode_symbolic_slices(index, expected):
    flags = codec.decode_unix("rwxr-xr--", index)
    assert tuple(flag.get() for flag in flags) == expected


@pytest.mark.parametrize(
    "index,expected",
    [(UserClass.OWNER, (True, True, True)), (UserClass.GROUP, (True, False, True)), (UserClass.OTHER, (True, False, False))],
)
def test_decode_numeric_digits(index, expected):
    flags = codec.decode_unix("754", index)
    assert tuple(flag.get() for flag in flags) == expected


def test_decode_of_immediate_encoding_is_eager():
    flags = codec.decode_unix(ValueProvider("640"), 1)
    assert all(isinstance(flag, ValueProvider) for flag in flags)
    assert [flag.get() for flag in flags] == [True, False, False]


@pytest.mark.parametrize("index", [0, 1, 2])
def test_invalid_octal_digit(index):
    encoding = "888"
    with pytest.raises(InvalidUnixPermission) as exc_info:
        codec.decode(encoding, index, codec.is_read, codec.is_read_symbolic)
    assert "octal" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, InvalidEncodingError)


def test_invalid_numeric_message_echoes_encoding():
    with pytest.raises(InvalidUnixPermission) as exc_info:
        codec.decode("7+5", 1, codec.is_read, codec.is_read_symbolic)
    assert exc_info.value.description == "'7+5' isn't a proper Unix permission. Can't be parsed as octal number."


@pytest.mark.parametrize("digit", ["8", "9", "a", "+", " ", "-", "", "07"])
def test_to_unix_numeric_permissions_rejects(digit):
    with pytest.raises(InvalidEncodingError):
        codec.to_unix_numeric_permissions(digit)


def test_to_unix_numeric_permissions_accepts_octal():
    assert [codec.to_unix_numeric_permissions(str(d)) for d in range(8)] == list(range(8))


def test_invalid_symbol_names_character_and_expected():
    with pytest.raises(InvalidSymbolError) as exc_info:
        codec.is_execute_symbolic("rwz")
    error = exc_info.value
    assert error.symbol == "z"
    assert error.expected == ("x", "-")
    assert str(error) == "'z' is not a valid Unix permission EXECUTE flag, must be 'x' or '-'."


@pytest.mark.parametrize(
    "slice_,decoder,symbol,expected",
    [
        ("xw-", codec.is_read_symbolic, "x", "r"),
        ("rr-", codec.is_write_symbolic, "r", "w"),
        ("r-w", codec.is_execute_symbolic, "w", "x"),
    ],
)
def test_invalid_symbol_each_position(slice_, decoder, symbol, expected):
    with pytest.raises(InvalidSymbolError) as exc_info:
        decoder(slice_)
    assert f"'{symbol}'" in str(exc_info.value)
    assert f"'{expected}'" in str(exc_info.value)


def test_invalid_symbol_wrapped_with_full_encoding():
    with pytest.raises(InvalidUnixPermission) as exc_info:
        codec.decode_unix("rwzr-xr--", 0)
    message = str(exc_info.value)
    assert message.startswith("'rwzr-xr--' isn't a proper Unix permission.")
    assert "'z'" in message


def test_symbolic_decode_only_validates_requested_slice():
    flags = codec.decode_unix("rwxr-xr?-", 0)
    assert [flag.get() for flag in flags] == [True, True, True]


@pytest.mark.parametrize("encoding", ["rwx", "rwxr-x", "rwxr-xr--x", "75"])
def test_unexpected_length(encoding):
    # A length of exactly 3 is numeric, so "rwx" fails octal parsing instead
    with pytest.raises(InvalidUnixPermission) as exc_info:
        codec.decode_unix(encoding, 0)
    if len(encoding) == 3:
        assert isinstance(exc_info.value.cause, InvalidEncodingError)
    else:
        assert isinstance(exc_info.value.cause, InvalidEncodingLength)


@pytest.mark.parametrize("index", [-1, 3, True, "0", 1.0])
def test_invalid_class_index(index):
    with pytest.raises(ValueError):
        codec.decode_unix("755", index)


def test_decode_of_deferred_encoding_is_lazy(pending):
    task, encoding = pending("rw-r-----")
    read, write, execute = codec.decode_unix(encoding, 1)

    assert task.calls == 0
    assert all(has_task_dependency(flag) for flag in (read, write, execute))

    task.execute()
    assert (read.get(), write.get(), execute.get()) == (True, False, False)


def test_deferred_invalid_encoding_fails_on_resolution(pending):
    task, encoding = pending("9")
    read = codec.decode(encoding, 0, codec.is_read, codec.is_read_symbolic)
    task.execute()
    with pytest.raises(InvalidUnixPermission):
        read.get()


def test_decode_failure_is_logged(logger, memory_sink):
    with pytest.raises(InvalidUnixPermission):
        codec.decode_unix("7a5", 1, logger=logger)

    entries = memory_sink.entries
    assert len(entries) == 1
    assert entries[0].severity == Severity.ERROR
    assert entries[0].logged_by == LogAuthor.CODEC
    assert entries[0].log_category == LogType.ENCODING
    assert "'7a5' isn't a proper Unix permission." in entries[0].log_details


def test_resolving_deferred_invalid_encoding_does_not_log(pending, logger, memory_sink):
    task, encoding = pending("9z9")
    read = codec.decode(encoding, 0, codec.is_read, codec.is_read_symbolic, logger=logger)
    task.execute()

    for _ in range(2):
        with pytest.raises(InvalidUnixPermission):
            read.get()
    assert memory_sink.entries == []
