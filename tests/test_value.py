import pytest

from tabset.core.data.value import Value


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1.0", 1.0), ("2", 2.0), ("-0.5", -0.5), ("3.00", 3.0), ("1e3", 1000.0), (".25", 0.25)],
)
def test_from_text_numeric(raw, expected):
    value = Value.from_text(raw)

    assert value.raw == raw
    assert value.numeric == expected
    assert value.is_numeric is True


@pytest.mark.parametrize("raw", ["test", "", " ", " 2.0 ", "1_000", "inf", "-inf", "nan", "1e999", "n/a", "١٢", "１２", "٣.٥"])
def test_from_text_not_numeric(raw):
    value = Value.from_text(raw)

    assert value.raw == raw
    assert value.numeric == 0.0
    assert value.is_numeric is False


def test_null_equals_empty_text():
    null = Value.null()

    assert null == Value.from_text("")
    assert null.raw == ""
    assert null.numeric == 0.0
    assert null.is_numeric is False


def test_from_number():
    value = Value.from_number(1.5)

    assert value.raw == "1.5"
    assert value.numeric == 1.5
    assert value.is_numeric is True
    assert Value.from_number(2) == Value.from_text("2.0")


@pytest.mark.parametrize(
    ("number", "raw"),
    [(1e20, "100000000000000000000.0"), (1e-07, "0.0000001"), (1.5e-10, "0.00000000015"), (-2.5e16, "-25000000000000000.0")],
)
def test_from_number_renders_positional_decimal(number, raw):
    value = Value.from_number(number)

    assert value.raw == raw
    assert "e" not in value.raw
    assert Value.from_text(value.raw) == value


def test_from_number_rejects_non_finite():
    with pytest.raises(ValueError):
        Value.from_number(float("nan"))


def test_trimmed():
    assert Value.from_text("").trimmed().raw == ""
    assert Value.from_text("  ").trimmed() == Value.null()
    assert Value.from_text(" a ").trimmed().raw == "a"

    value = Value.from_text(" 1.0 ").trimmed()
    assert value.raw == "1.0"
    assert value.numeric == 1.0
    assert value.is_numeric is True


def test_trimmed_returns_new_value():
    original = Value.from_text(" 7 ")
    trimmed = original.trimmed()

    assert original.raw == " 7 "
    assert original.is_numeric is False
    assert trimmed is not original
    assert trimmed.trimmed() == trimmed


def test_equality_uses_all_fields():
    assert Value.from_text("1") != Value.from_text("1.0")
    assert Value.from_text("abc") == Value.from_text("abc")
