# topmark:header:start
#
#   project      : TomlMarshal
#   file         : test_decoder.py
#   file_relpath : tests/test_decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the decoder: reads, error paths and consumption of the held value."""

from __future__ import annotations

import datetime as dt

import pytest

from tests.conftest import parametrize, table
from tomlmarshal.decoder import CONSUMED, Decoder, hyphenate
from tomlmarshal.errors import (
    DecodeError,
    ExpectedField,
    ExpectedMapElement,
    ExpectedMapKey,
    ExpectedType,
    NilTooLong,
    NoEnumVariants,
)
from tomlmarshal.value.model import (
    Array,
    Boolean,
    Datetime,
    Float,
    Integer,
    String,
    Table,
    Value,
)

# --- Scalars ---


def test_scalar_reads_clear_the_slot() -> None:
    d = Decoder(Integer(3))
    assert d.read_int() == 3
    assert d.toml is None


@parametrize(
    "value, reader, expected",
    [
        (Float(1.5), Decoder.read_float, 1.5),
        (Boolean(True), Decoder.read_bool, True),
        (String("s"), Decoder.read_str, "s"),
        (String("c"), Decoder.read_char, "c"),
        (Datetime(dt.time(1, 2)), Decoder.read_datetime, dt.time(1, 2)),
    ],
)
def test_each_scalar_reader(value: Value, reader: object, expected: object) -> None:
    d = Decoder(value)
    assert reader(d) == expected  # type: ignore[operator]
    assert d.toml is None


def test_wrong_type_leaves_the_slot_untouched() -> None:
    d = Decoder(Float(1.0), "bar")
    with pytest.raises(DecodeError) as excinfo:
        d.read_int()
    assert excinfo.value == DecodeError(ExpectedType("integer", "float"), "bar")
    assert d.toml == Float(1.0)


def test_missing_value_is_expected_field() -> None:
    with pytest.raises(DecodeError) as excinfo:
        Decoder(None, "x").read_str()
    assert excinfo.value.kind == ExpectedField("string")


def test_bool_type_name() -> None:
    with pytest.raises(DecodeError) as excinfo:
        Decoder(Integer(1)).read_bool()
    assert excinfo.value.kind == ExpectedType("boolean", "integer")


def test_char_rejects_longer_strings() -> None:
    with pytest.raises(DecodeError) as excinfo:
        Decoder(String("ab"), "c").read_char()
    assert excinfo.value == DecodeError(ExpectedType("string", "string"), "c")


def test_nil_reads_only_the_empty_string() -> None:
    d = Decoder(String(""))
    assert d.read_nil() is None
    assert d.toml is None

    with pytest.raises(DecodeError) as excinfo:
        Decoder(String("x"), "u").read_nil()
    assert excinfo.value == DecodeError(NilTooLong(), "u")


# --- Records ---


def test_record_field_path_and_hyphenation() -> None:
    d = Decoder(table(**{"max-connections": Integer(8)}))
    paths: list[str | None] = []

    def field(sub: Decoder) -> int:
        paths.append(sub.cur_field)
        return sub.read_int()

    assert d.read_record(lambda d: d.read_record_field("max_connections", field)) == 8
    assert paths == ["max_connections"]
    assert d.toml is None


def test_exact_name_wins_over_hyphenated() -> None:
    d = Decoder(table(a_b=Integer(1), **{"a-b": Integer(2)}))
    assert d.read_record(lambda d: d.read_record_field("a_b", Decoder.read_int)) == 1
    assert d.toml == Table({"a-b": Integer(2)})


def test_record_on_non_table() -> None:
    with pytest.raises(DecodeError) as excinfo:
        Decoder(Integer(1), "s").read_record(lambda d: None)
    assert excinfo.value == DecodeError(ExpectedType("table", "integer"), "s")
    assert str(excinfo.value) == (
        "expected a section, but found a value of type `integer` for the key `s`"
    )


def test_nested_error_path() -> None:
    d = Decoder(table(server=table(port=String("80"))))

    def body(d: Decoder) -> int:
        def server(s: Decoder) -> int:
            return s.read_record(lambda r: r.read_record_field("port", Decoder.read_int))

        return d.read_record_field("server", server)

    with pytest.raises(DecodeError) as excinfo:
        d.read_record(body)
    assert excinfo.value.field == "server.port"


def test_unread_residue_is_reinserted_under_the_field_name() -> None:
    d = Decoder(table(**{"a-b": table(x=Integer(1), y=Integer(2))}))

    def body(d: Decoder) -> int:
        return d.read_record_field(
            "a_b", lambda s: s.read_record(lambda s: s.read_record_field("x", Decoder.read_int))
        )

    assert d.read_record(body) == 1
    assert d.toml == table(a_b=table(y=Integer(2)))


# --- Sequences ---


def _read_ints(d: Decoder) -> list[int]:
    return d.read_sequence(
        lambda d, n: [d.read_sequence_element(i, Decoder.read_int) for i in range(n)]
    )


def test_sequence_fully_consumed() -> None:
    d = Decoder(Array([Integer(1), Integer(2)]))
    assert _read_ints(d) == [1, 2]
    assert d.toml is None


def test_zero_elements_are_not_mistaken_for_consumed_slots() -> None:
    """An array of zeros decodes to zeros and is fully consumed."""
    d = Decoder(Array([Integer(0), Integer(0), Integer(1)]))
    assert _read_ints(d) == [0, 0, 1]
    assert d.toml is None


def test_partially_read_sequence_keeps_unread_elements() -> None:
    d = Decoder(Array([Integer(0), Integer(7), Integer(0)]))
    first: int = d.read_sequence(lambda d, n: d.read_sequence_element(0, Decoder.read_int))
    assert first == 0
    assert d.toml == Array([Integer(7), Integer(0)])


def test_consumed_marker_is_not_a_value() -> None:
    assert CONSUMED != Integer(0)
    assert not isinstance(CONSUMED, Integer)


def test_element_error_uses_container_path() -> None:
    d = Decoder(Array([Integer(1), String("x")]), "ports")
    with pytest.raises(DecodeError) as excinfo:
        _read_ints(d)
    assert excinfo.value == DecodeError(ExpectedType("integer", "string"), "ports")


def test_index_past_the_end_reads_as_absent() -> None:
    d = Decoder(Array([Integer(1)]), "t")
    with pytest.raises(DecodeError) as excinfo:
        d.read_tuple(lambda d, n: d.read_tuple_element(3, Decoder.read_int))
    assert excinfo.value == DecodeError(ExpectedField("integer"), "t")


def test_sequence_on_non_array() -> None:
    with pytest.raises(DecodeError) as excinfo:
        _read_ints(Decoder(Table({}), "xs"))
    assert excinfo.value.kind == ExpectedType("array", "table")


# --- Optionals ---


def test_optional_reports_presence_without_consuming() -> None:
    d = Decoder(Integer(1))
    assert d.read_optional(lambda d, present: present) is True
    assert d.toml == Integer(1)
    assert Decoder(None).read_optional(lambda d, present: present) is False


# --- Tagged unions ---


def test_tagged_union_first_success_wins() -> None:
    def body(d: Decoder, index: int) -> object:
        if index == 0:
            return d.read_variant_arg(0, Decoder.read_int)
        return d.read_variant_arg(0, Decoder.read_float)

    d = Decoder(Float(10.2), "a")
    assert d.read_tagged_union(["Bar", "Baz"], body) == 10.2
    assert d.toml is None


def test_failed_trials_leave_no_trace() -> None:
    """A trial that consumed part of the value before failing does not affect the next."""

    def body(d: Decoder, index: int) -> object:
        if index == 0:
            return d.read_record(
                lambda d: (
                    d.read_record_field("x", Decoder.read_int),
                    d.read_record_field("missing", Decoder.read_int),
                )
            )
        return d.read_record(lambda d: d.read_record_field("x", Decoder.read_int))

    d = Decoder(table(x=Integer(1), y=Integer(2)))
    assert d.read_tagged_union(["Pair", "Single"], body) == 1
    assert d.toml == table(y=Integer(2))


def test_tagged_union_reports_first_error() -> None:
    def body(d: Decoder, index: int) -> object:
        return d.read_int() if index == 0 else d.read_float()

    with pytest.raises(DecodeError) as excinfo:
        Decoder(String("s"), "a").read_tagged_union(["Bar", "Baz"], body)
    assert excinfo.value == DecodeError(ExpectedType("integer", "string"), "a")


def test_tagged_union_without_variants() -> None:
    with pytest.raises(DecodeError) as excinfo:
        Decoder(Integer(1), "e").read_tagged_union([], lambda d, i: None)
    assert excinfo.value == DecodeError(NoEnumVariants(), "e")


# --- Dynamic maps ---


def _read_map(d: Decoder) -> dict[str, int]:
    def body(d: Decoder, n: int) -> dict[str, int]:
        out: dict[str, int] = {}
        for i in range(n):
            out[d.read_map_key(i, Decoder.read_str)] = d.read_map_element(i, Decoder.read_int)
        return out

    return d.read_dynamic_map(body)


def test_dynamic_map_reads_in_order_and_clears() -> None:
    d = Decoder(table(foo=Integer(10), bar=Integer(4)))
    assert list(_read_map(d).items()) == [("foo", 10), ("bar", 4)]
    assert d.toml is None


def test_map_element_error_path_is_the_map() -> None:
    d = Decoder(table(foo=String("x")), "m")
    with pytest.raises(DecodeError) as excinfo:
        _read_map(d)
    assert excinfo.value.field == "m"


def test_map_element_reads_a_copy() -> None:
    inner = table(a=Integer(1), b=Integer(2))
    d = Decoder(table(k=inner), "m")

    def read_a(sub: Decoder) -> int:
        return sub.read_record(lambda r: r.read_record_field("a", Decoder.read_int))

    assert d.read_map_element(0, read_a) == 1
    assert d.read_map_element(0, read_a) == 1
    assert inner == table(a=Integer(1), b=Integer(2))


def test_map_index_out_of_range() -> None:
    d = Decoder(table(a=Integer(1)), "m")
    with pytest.raises(DecodeError) as excinfo:
        d.read_map_key(1, Decoder.read_str)
    assert excinfo.value == DecodeError(ExpectedMapKey(1), "m")
    with pytest.raises(DecodeError) as excinfo:
        d.read_map_element(4, Decoder.read_int)
    assert excinfo.value == DecodeError(ExpectedMapElement(4), "m")
    assert str(excinfo.value) == "expected at least 5 elements for the key `m`"


def test_hyphenate() -> None:
    assert hyphenate("a_b_c") == "a-b-c"
    assert hyphenate("plain") == "plain"
