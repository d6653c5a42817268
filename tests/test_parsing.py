import pytest

from pushswap.parsing import (
    InputError,
    check_argument,
    count_total_args,
    parse_arguments,
    parse_int,
    split_words,
)


def test_split_words_drops_empty_words():
    assert split_words("  1  2 ", " ") == ["1", "2"]
    assert split_words("", " ") == []
    assert split_words("   ", " ") == []
    assert split_words("a,b,,c", ",") == ["a", "b", "c"]


@pytest.mark.parametrize("text", ["1 -2 +3", "42", "  ", "", "-0"])
def test_check_argument_accepts(text):
    assert check_argument(text) is True


@pytest.mark.parametrize(
    "text", ["1a", "1-2", "-", "- 1", "1\t2", "--1", "+-1", "1.5", "1 +"]
)
def test_check_argument_rejects(text):
    with pytest.raises(InputError):
        check_argument(text)


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648
    with pytest.raises(InputError):
        parse_int("2147483648")
    with pytest.raises(InputError):
        parse_int("-2147483649")


def test_parse_int_length_limit():
    with pytest.raises(InputError):
        parse_int("0000000000001")
    assert parse_int("000000000001") == 1


def test_parse_int_signs_and_zeros():
    assert parse_int("+17") == 17
    assert parse_int("-17") == -17
    assert parse_int("007") == 7


def test_parse_arguments_collects_in_order():
    assert parse_arguments(["3 1", "2"]) == [3, 1, 2]
    assert parse_arguments(["-5", "+8 0"]) == [-5, 8, 0]


def test_parse_arguments_blank_argument_gives_nothing():
    assert parse_arguments(["  "]) == []


def test_count_matches_parsed_length():
    args = ["1 2", " 3 ", "   ", "4"]
    assert count_total_args(args) == len(parse_arguments(args))
    assert count_total_args([]) == 0


@pytest.mark.parametrize(
    "args",
    [
        ["1", ""],
        ["1 2 1"],
        ["+0", "-0"],
        ["1", "x"],
        ["2147483648"],
        ["1", "2", "3 2"],
    ],
)
def test_parse_arguments_rejects(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_input_error_message():
    with pytest.raises(InputError, match="^Error$"):
        parse_arguments(["1 1"])