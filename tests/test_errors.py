import pytest

from distcalc.errors import (
    ArgsLenFailure,
    CalculatorError,
    DivisionByZero,
    FileOpenFailure,
    InvalidInteger,
    InvalidOperation,
    JoinFailure,
    ListeningFailure,
    LockFailure,
    ReadLineFailure,
    SocketFailure,
    UnexpectedMessage,
    WritingFailure,
)


@pytest.mark.parametrize(
    "error, expected",
    [
        (DivisionByZero(), 'ERROR "division by zero"'),
        (JoinFailure(), 'ERROR "thread join failure"'),
        (LockFailure(), 'ERROR "mutex lock failure"'),
        (WritingFailure(), 'ERROR "writing failure"'),
        (ListeningFailure(), 'ERROR "reading failure"'),
        (SocketFailure(), 'ERROR "socket failure"'),
        (FileOpenFailure(), 'ERROR "file open failure"'),
        (ReadLineFailure(), 'ERROR "line reading failure"'),
        (ArgsLenFailure(), 'ERROR "invalid number of arguments"'),
    ],
)
def test_plain_messages(error, expected):
    assert error.protocol_message() == expected


def test_invalid_operation_message_names_operator():
    assert (
        InvalidOperation("multiplicar").protocol_message()
        == 'ERROR "parsing error: unknown operation: multiplicar"'
    )


def test_invalid_integer_message_names_operand():
    assert (
        InvalidInteger("cinco").protocol_message()
        == 'ERROR "parsing error: invalid integer: cinco"'
    )


def test_unexpected_message_names_keyword():
    assert UnexpectedMessage("OK").protocol_message() == 'ERROR "unexpected message: OK"'


def test_str_is_protocol_message():
    error = InvalidInteger("x")
    assert str(error) == error.protocol_message()


@pytest.mark.parametrize(
    "error, expected",
    [
        (DivisionByZero(), 'ERROR "division by zero"'),
        (InvalidOperation("%"), 'ERROR "parsing error: unknown operation: %"'),
        (SocketFailure(), 'ERROR "socket failure"'),
        (ArgsLenFailure(), 'ERROR "invalid number of arguments"'),
    ],
)
def test_all_errors_caught_as_base(error, expected):
    with pytest.raises(CalculatorError) as info:
        raise error
    assert info.value is error
    assert info.value.protocol_message() == expected


def test_detail_is_kept():
    assert UnexpectedMessage("HELLO").detail == "HELLO"
    assert DivisionByZero().detail is None