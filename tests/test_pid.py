import pytest

from sigtalk.pid import PidError, is_numeric, parse_pid, strict_atoi


@pytest.mark.parametrize("text", ["123", "+42", "0", "007"])
def test_is_numeric_accepts(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", ["", "+", "-1", "-", "12a", " 12", "1 2", "++1", "+-1"])
def test_is_numeric_rejects(text):
    assert is_numeric(text) is False


def test_strict_atoi_parses_numeric():
    assert strict_atoi("42") == 42
    assert strict_atoi("+7") == 7


@pytest.mark.parametrize("text", ["abc", "-5", "", "12x"])
def test_strict_atoi_non_numeric_is_zero(text):
    assert strict_atoi(text) == 0


def test_parse_pid_valid():
    assert parse_pid("4242") == 4242
    assert parse_pid("+1") == 1


@pytest.mark.parametrize("text", ["0", "abc", "-12", "", "+"])
def test_parse_pid_rejects(text):
    with pytest.raises(PidError):
        parse_pid(text)


def test_parse_pid_overflow_rejected():
    with pytest.raises(PidError):
        parse_pid("99999999999999999999")


def test_pid_error_is_value_error_with_message():
    with pytest.raises(ValueError, match="<server_pid>"):
        parse_pid("nope")