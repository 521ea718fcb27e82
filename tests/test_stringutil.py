import pytest

from imtools.stringutil import (
    camel_case_to_space_separated,
    difference,
    format_string,
    get_func_name,
    get_hash_code,
    get_self_func_name,
    int32_to_string,
    int64_to_string,
    int_to_string,
    interface_array_to_string_array,
    intersect,
    is_alphanumeric,
    is_contain,
    is_duplicate_string_slice,
    is_valid_email,
    lower_first,
    remove_duplicate,
    remove_duplicate_element,
    string_to_int,
    string_to_int32,
    string_to_int64,
    struct_to_json_bytes,
    uint32_to_string,
    upper_first,
    with_message,
)


def test_int_to_string():
    assert int_to_string(123) == "123"


def test_string_to_int():
    assert string_to_int("123") == 123
    assert string_to_int("abc") == 0
    assert string_to_int(" 12") == 0
    assert string_to_int("-7") == -7


def test_string_to_int_clamps():
    assert string_to_int("99999999999999999999") == 9223372036854775807


def test_string_to_int64():
    assert string_to_int64("123") == 123


def test_string_to_int32():
    assert string_to_int32("123") == 123
    assert string_to_int32("4294967297") == 1


def test_int32_to_string():
    assert int32_to_string(123) == "123"


def test_uint32_to_string():
    assert uint32_to_string(123) == "123"


def test_int64_to_string():
    assert int64_to_string(-5) == "-5"


def test_is_contain():
    items = ["apple", "banana", "cherry"]
    assert is_contain("banana", items)
    assert not is_contain("date", items)
    assert is_contain(2, [1, 2, 3])
    assert not is_contain(4, [1, 2, 3])


def test_interface_array_to_string_array():
    assert interface_array_to_string_array(["a", "b"]) == ["a", "b"]
    with pytest.raises(TypeError):
        interface_array_to_string_array(["a", 1])


def test_struct_to_json_bytes():
    assert struct_to_json_bytes({"a": 1}) == b'{"a":1}'
    assert struct_to_json_bytes(object()) == b""


def test_remove_duplicate_element():
    assert remove_duplicate_element(["a", "b", "a", "c", "b"]) == ["a", "b", "c"]


def test_remove_duplicate():
    assert remove_duplicate([3, 1, 3, 2, 1]) == [3, 1, 2]


def test_is_duplicate_string_slice():
    assert not is_duplicate_string_slice(["a", "b", "c"])
    assert is_duplicate_string_slice(["a", "b", "a"])


def test_with_message():
    def failing_step():
        return with_message(ValueError("boom"), "ctx")

    wrapped = with_message(ValueError("boom"), "ctx")
    assert str(wrapped).startswith("==> ")
    assert str(wrapped).endswith("ctx: boom")
    assert "failing_step()@" in str(failing_step())
    assert isinstance(wrapped.__cause__, ValueError)
    assert with_message(None, "ctx") is None


def test_get_self_func_name():
    def helper_name():
        return get_self_func_name()

    assert helper_name() == "helper_name"


def test_get_func_name():
    def inner(skip=None):
        return get_func_name() if skip is None else get_func_name(skip)

    def outer():
        return inner(1)

    assert inner() == "inner"
    assert outer() == "outer"
    assert inner(10_000) == ""


def test_intersect_and_difference():
    assert intersect([1, 2, 3], [3, 4, 3]) == [3, 3]
    assert intersect(["a", "b"], ["b", "c"]) == ["b"]
    assert difference([1, 2, 3], [2, 3, 4]) == [1, 4]
    assert difference(["a", "b"], ["b", "c"]) == ["a", "c"]


def test_get_hash_code():
    assert get_hash_code("123456789") == 0xCBF43926


@pytest.mark.parametrize(
    "text,length,align_left,want",
    [
        ("hello", 10, True, "hello     "),
        ("hello", 10, False, "     hello"),
        ("hello", 5, True, "hello"),
        ("hello world", 5, True, "hello"),
        ("", 5, True, "     "),
        ("", 5, False, "     "),
        ("hello", 0, True, ""),
    ],
)
def test_format_string(text, length, align_left, want):
    assert format_string(text, length, align_left) == want


def test_camel_case_to_space_separated():
    assert camel_case_to_space_separated("HelloWorld,GoGo") == "hello world,go go"
    assert camel_case_to_space_separated("hello world, go go") == "hello world, go go"


def test_upper_and_lower_first():
    assert upper_first("hello") == "Hello"
    assert upper_first("") == ""
    assert lower_first("Hello") == "hello"
    assert lower_first("") == ""


def test_is_alphanumeric():
    assert is_alphanumeric("abc123")
    assert not is_alphanumeric("abc-123")
    assert is_alphanumeric("")


def test_is_valid_email():
    assert is_valid_email("user@example.com")
    assert not is_valid_email("user@example")
    assert not is_valid_email("user@example.com\n")