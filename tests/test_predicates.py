import pytest
from core.predicates import matches, matches_all
from models.api import Filter


def f(name, op, value):
    return Filter(name=name, op=op, value=value)


def test_like_contains_matches_admin_email():
    flt = f("email", "Like", "%admin%")
    assert matches({"email": "root-admin@x.com"}, flt)
    assert not matches({"email": "user@x.com"}, flt)


@pytest.mark.parametrize("text, substr", [
    ("hello world", "lo wo"),
    ("hello world", "hello world"),
    ("hello world", ""),
    ("hello world", "world!"),
    ("abc", "ac"),
])
def test_like_contains_is_substring_test(text, substr):
    assert matches({"title": text}, f("title", "Like", f"%{substr}%")) == (substr in text)


def test_like_prefix_and_suffix():
    record = {"sku": "SHOE-RED-42"}
    assert matches(record, f("sku", "Like", "SHOE%"))
    assert not matches(record, f("sku", "Like", "RED%"))
    assert matches(record, f("sku", "Like", "%-42"))
    assert not matches(record, f("sku", "Like", "%RED"))


def test_like_without_wildcard_is_exact():
    assert matches({"status": "paid"}, f("status", "Like", "paid"))
    assert not matches({"status": "paid"}, f("status", "Like", "pai"))


def test_not_like_negates_for_strings():
    assert matches({"email": "user@x.com"}, f("email", "NotLike", "%admin%"))
    assert not matches({"email": "admin@x.com"}, f("email", "NotLike", "admin%"))


def test_like_type_mismatch_is_false_for_both_operators():
    assert not matches({"price": 25}, f("price", "Like", "%2%"))
    assert not matches({"price": 25}, f("price", "NotLike", "%9%"))
    assert not matches({"name": "x"}, f("name", "Like", 5))


def test_equal_is_loose():
    assert matches({"user_id": "42"}, f("user_id", "Equal", 42))
    assert matches({"stock": 0}, f("stock", "Equal", "0"))
    assert not matches({"user_id": "42"}, f("user_id", "Equal", "43"))


def test_not_equal():
    assert matches({"status": "read"}, f("status", "NotEqual", "unread"))
    assert not matches({"count": 1}, f("count", "NotEqual", "1"))


def test_falsy_values_are_still_present():
    assert matches({"is_read": False}, f("is_read", "Equal", False))
    assert matches({"title": ""}, f("title", "Like", ""))


@pytest.mark.parametrize("op", ["Equal", "NotEqual", "Like", "NotLike"])
def test_missing_or_null_field_never_matches(op):
    assert not matches({}, f("status", op, "x"))
    assert not matches({"status": None}, f("status", op, "x"))
    assert not matches({"status": None}, f("status", op, None))


def test_filters_combine_with_and():
    record = {"user_id": "1", "status": "unread", "title": "Order shipped"}
    assert matches_all(record, [f("user_id", "Equal", "1"), f("title", "Like", "Order%")])
    assert not matches_all(record, [f("user_id", "Equal", "1"), f("status", "Equal", "read")])
    assert matches_all(record, [])
