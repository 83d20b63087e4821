import pytest

from exlibs.formatting import format_as, format_string


def test_documented_example():
    assert format_string("{} {0} {} {2:b}", 10, 20, 1) == "10 10 20 true"


def test_plain_text_passes_through():
    assert format_string("plain text") == "plain text"


def test_sequential_placeholders():
    assert format_string("{}-{}", "a", "b") == "a-b"


def test_indexed_placeholder_does_not_move_cursor():
    assert format_string("{1}{}{}", "x", "y") == "yxy"


def test_multi_digit_index():
    args = [str(n) for n in range(11)]
    assert format_string("{10}", *args) == "10"


def test_missing_argument_writes_nothing():
    assert format_string("a{}b") == "ab"


def test_out_of_range_index_writes_nothing():
    assert format_string("[{5}]", "only") == "[]"


def test_escaped_braces():
    assert format_string("{{}}") == "{}"


def test_open_bracket_followed_by_text():
    assert format_string("{{x") == "{x"


@pytest.mark.parametrize("value", ["Y", "y", "True", "TRUE", "1"])
def test_bool_spec_true_values(value):
    assert format_string("{:b}", value) == "true"


@pytest.mark.parametrize("value", ["yes", "true", "0", ""])
def test_bool_spec_false_values(value):
    assert format_string("{:B}", value) == "false"


def test_bool_spec_with_integer_zero():
    assert format_string("{:b}", 0) == "false"


def test_unknown_spec_consumes_nothing():
    assert format_string("{:x}{}", "a") == "a"


def test_indexed_bool_spec_leaves_type_mode_set():
    assert format_string("{0:b}{}", "1", "z") == "true"


def test_invalid_placeholder_character_raises():
    with pytest.raises(ValueError):
        format_string("{x}", 1)


def test_text_after_nul_is_ignored():
    assert format_string("ab\0cd") == "ab"


def test_format_as_int():
    assert format_as(42) == "42"
    assert format_as(-7) == "-7"


def test_format_as_float_has_six_decimals():
    assert format_as(1.5) == "1.500000"


def test_format_as_str_and_bytes():
    assert format_as("text") == "text"
    assert format_as(b"abc") == "abc"


def test_format_as_unsupported_types():
    assert format_as(object()) == "unknown type"
    assert format_as(True) == "unknown type"
    assert format_as(None) == "unknown type"


def test_unsupported_argument_in_template():
    assert format_string("<{}>", None) == "<unknown type>"