"""Tests for inbound parameter normalization."""

from __future__ import annotations

import pytest

from arxiv_relay.search.params import (
    Multiple,
    ParamShapeError,
    Single,
    is_empty,
    joined_value,
    normalize_terms,
    parse_term_param,
)


def test_absent_parameter_is_none():
    assert parse_term_param([("limit", "5")], "keywords") is None


def test_lone_value_is_single():
    assert parse_term_param([("keywords", "quantum")], "keywords") == Single("quantum")


def test_repeated_values_are_multiple_in_order():
    items = [("keywords", "quantum"), ("limit", "3"), ("keywords", "gravity")]
    assert parse_term_param(items, "keywords") == Multiple(("quantum", "gravity"))


def test_empty_bracket_form_is_always_multiple():
    assert parse_term_param([("keywords[]", "quantum")], "keywords") == Multiple(("quantum",))


def test_indexed_form_is_ordered_by_index():
    items = [("keywords[1]", "gravity"), ("keywords[0]", "quantum")]
    assert parse_term_param(items, "keywords") == Multiple(("quantum", "gravity"))


def test_object_form_is_rejected():
    with pytest.raises(ParamShapeError):
        parse_term_param([("keywords[title]", "quantum")], "keywords")


def test_other_names_are_ignored():
    assert parse_term_param([("negatives[]", "x")], "keywords") is None


def test_single_and_one_element_multiple_normalize_alike():
    assert normalize_terms(Single("q")) == normalize_terms(Multiple(("q",))) == ("q",)


def test_normalize_none_is_empty_tuple():
    assert normalize_terms(None) == ()


def test_is_empty():
    assert is_empty(None)
    assert is_empty(Single(""))
    assert is_empty(Multiple(()))
    assert not is_empty(Single("q"))
    assert not is_empty(Multiple(("",)))


def test_joined_value():
    items = [("limit", "10"), ("limit", "20")]
    assert joined_value(items, "limit") == "10,20"
    assert joined_value(items, "start") is None
    assert joined_value([("negative", "")], "negative") == ""


def test_joined_value_accepts_bracketed_forms():
    assert joined_value([("limit[]", "50")], "limit") == "50"
    assert joined_value([("limit[1]", "20"), ("limit[0]", "10")], "limit") == "10,20"
    assert joined_value([("limit[max]", "50")], "limit") is None
