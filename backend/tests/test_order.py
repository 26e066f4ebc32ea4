from types import SimpleNamespace

import pytest

from hotel_cms.domain.exceptions import ValidationError
from hotel_cms.utils.order import apply_order, compact_order, parse_id_list


def _children(*ids):
    return [SimpleNamespace(id=child_id, position=index) for index, child_id in enumerate(ids)]


def _positions(children):
    return {c.id: c.position for c in children}


def test_permutation_sets_positions_to_submitted_order(app):
    children = _children("a", "b", "c", "d")

    ordered = apply_order(children, ["d", "b", "a", "c"])

    assert [c.id for c in ordered] == ["d", "b", "a", "c"]
    assert _positions(children) == {"d": 0, "b": 1, "a": 2, "c": 3}


def test_identity_reorder_is_idempotent(app):
    children = _children("a", "b", "c")

    apply_order(children, ["a", "b", "c"])
    first = _positions(children)
    apply_order(children, ["a", "b", "c"])

    assert _positions(children) == first == {"a": 0, "b": 1, "c": 2}


def test_empty_list_changes_nothing(app):
    children = _children("a", "b")
    children[0].position, children[1].position = 5, 9

    apply_order(children, [])

    assert _positions(children) == {"a": 5, "b": 9}


def test_foreign_ids_are_skipped(app):
    children = _children("a", "b", "c")

    apply_order(children, ["zzz", "c", "other", "a", "b"])

    assert _positions(children) == {"c": 0, "a": 1, "b": 2}


def test_duplicate_id_takes_its_last_occurrence(app):
    children = _children("a", "b", "c")

    apply_order(children, ["a", "b", "c", "a"])

    assert _positions(children) == {"b": 0, "c": 1, "a": 2}


def test_omitted_children_follow_in_previous_order(app):
    children = _children("a", "b", "c", "d")

    apply_order(children, ["d", "b"])

    assert _positions(children) == {"d": 0, "b": 1, "a": 2, "c": 3}


def test_ids_are_compared_as_strings(app):
    children = [SimpleNamespace(id=7, position=0), SimpleNamespace(id=8, position=1)]

    apply_order(children, ["8", 7])

    assert [c.position for c in children] == [1, 0]


def test_compact_order_closes_gaps(app):
    children = [
        SimpleNamespace(id="a", position=0),
        SimpleNamespace(id="c", position=4),
        SimpleNamespace(id="b", position=2),
    ]

    compact_order(children)

    assert _positions(children) == {"a": 0, "b": 1, "c": 2}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('["a", "b"]', ["a", "b"]),
        ("[3, 1]", ["3", "1"]),
        (["x", 2], ["x", "2"]),
        ({"ids": ["q"]}, ["q"]),
        ("", []),
        (None, []),
    ],
)
def test_parse_id_list_accepts_client_shapes(raw, expected):
    assert parse_id_list(raw) == expected


@pytest.mark.parametrize("raw", ["not json", '{"a": 1}', "[[1]]", "[true]", 42])
def test_parse_id_list_rejects_garbage(raw):
    with pytest.raises(ValidationError):
        parse_id_list(raw)
