"""Tests for uritpl.types: operator table and binding coercion."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from uritpl import Template
from uritpl.types import OPERATOR_TABLE, AssociativeArray, Operator, coerce_value


class TestOperatorTable:
    """Tests for the fixed operator rules."""

    def test_table_covers_every_operator(self) -> None:
        assert set(OPERATOR_TABLE) == set(Operator)

    @pytest.mark.parametrize(
        "operator,symbol,prefix,separator",
        [
            (Operator.SIMPLE, "", "", ","),
            (Operator.RESERVED, "+", "", ","),
            (Operator.FRAGMENT, "#", "#", ","),
            (Operator.LABEL, ".", ".", "."),
            (Operator.PATH, "/", "/", "/"),
            (Operator.PATH_STYLE, ";", ";", ";"),
            (Operator.QUERY, "?", "?", "&"),
            (Operator.QUERY_CONTINUATION, "&", "&", "&"),
        ],
    )
    def test_prefix_and_separator(
        self, operator: Operator, symbol: str, prefix: str, separator: str
    ) -> None:
        spec = operator.spec
        assert (spec.symbol, spec.prefix, spec.separator) == (symbol, prefix, separator)
        if symbol:
            assert Operator.from_symbol(symbol) is operator

    def test_only_reserved_and_fragment_allow_reserved(self) -> None:
        allowed = {op for op, spec in OPERATOR_TABLE.items() if spec.allow_reserved}
        assert allowed == {Operator.RESERVED, Operator.FRAGMENT}

    def test_unknown_symbol(self) -> None:
        assert Operator.from_symbol("@") is None
        assert Operator.from_symbol("v") is None

    def test_format_variable(self) -> None:
        assert Operator.PATH_STYLE.spec.format_variable("x", "") == "x"
        assert Operator.QUERY.spec.format_variable("x", "") == "x="
        assert Operator.QUERY.spec.format_variable("x", "1") == "x=1"
        assert Operator.LABEL.spec.format_variable("x", "1") == "1"

    def test_join(self) -> None:
        assert Operator.QUERY.spec.join([]) == ""
        assert Operator.QUERY.spec.join(["a=1", "b=2"]) == "?a=1&b=2"


class TestAssociativeArray:
    """Tests for the ordered pairs container."""

    def test_list_input_frozen_to_tuples(self) -> None:
        pairs = AssociativeArray([["a", "1"], ("b", "2")])
        assert pairs.pairs == (("a", "1"), ("b", "2"))
        assert list(pairs) == [("a", "1"), ("b", "2")]
        assert len(pairs) == 2

    def test_duplicates_kept(self) -> None:
        pairs = AssociativeArray([("k", "1"), ("k", "2")])
        assert len(pairs) == 2

    def test_from_mapping_keeps_order(self) -> None:
        pairs = AssociativeArray.from_mapping(OrderedDict([("z", "1"), ("a", "2")]))
        assert pairs.pairs == (("z", "1"), ("a", "2"))

    def test_dict_input_uses_items(self) -> None:
        """A dict passed directly yields its items, not its keys split apart."""
        pairs = AssociativeArray({"ab": "x", "cd": "y"})
        assert pairs.pairs == (("ab", "x"), ("cd", "y"))
        assert Template("{?p*}").expand(p=pairs) == "?ab=x&cd=y"

    @pytest.mark.parametrize(
        "entries", [["ab", "cd"], ["abc"], [("a", "b", "c")], [("a",)], [1]]
    )
    def test_non_pair_entries_rejected(self, entries: list) -> None:
        with pytest.raises(TypeError, match=r"\(key, value\) pairs"):
            AssociativeArray(entries)

    def test_hashable_and_equal(self) -> None:
        assert AssociativeArray([("a", "b")]) == AssociativeArray((("a", "b"),))
        assert hash(AssociativeArray([("a", "b")])) == hash(AssociativeArray([("a", "b")]))


class TestCoerceValue:
    """Tests for normalizing caller bindings."""

    def test_scalars(self) -> None:
        assert coerce_value("x") == "x"
        assert coerce_value(1024) == "1024"
        assert coerce_value(1.5) == "1.5"
        assert coerce_value(True) == "true"
        assert coerce_value(False) == "false"

    def test_sequences(self) -> None:
        assert coerce_value(["a", 1]) == ["a", "1"]
        assert coerce_value(("a", "b")) == ["a", "b"]
        assert coerce_value([]) == []

    def test_mappings(self) -> None:
        assert coerce_value({"a": 1}) == AssociativeArray([("a", "1")])
        assert coerce_value(AssociativeArray([("k", "v")])) == AssociativeArray([("k", "v")])

    @pytest.mark.parametrize("value", [None, object(), [["x"]], {"a": [1]}, {"a", "b"}])
    def test_unsupported(self, value: object) -> None:
        assert coerce_value(value) is None
