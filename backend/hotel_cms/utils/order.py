import json
from typing import Any, Callable, Iterable, List

from hotel_cms.extensions import db
from hotel_cms.domain.exceptions import ValidationError


def parse_id_list(raw: Any) -> List[str]:
    """
    Normalize a client-submitted ordering into a list of string ids.

    Accepted shapes:
    - JSON-encoded array string (form field), e.g. '["a", "b"]'
    - a list, e.g. from a JSON body
    - {"ids": [...]} JSON body
    """
    if raw is None:
        return []

    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw or "[]")
        except ValueError as exc:
            raise ValidationError("Invalid ordering payload") from exc

    if isinstance(raw, dict):
        raw = raw.get("ids")

    if not isinstance(raw, list):
        raise ValidationError("Ordering payload must be an array of ids")

    ids = []
    for value in raw:
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ValidationError("Ordering payload must be an array of ids")
        ids.append(str(value))
    return ids


def apply_order(children: Iterable[Any], ordered_ids: List[str], key: Callable[[Any], Any] = lambda c: c.id) -> List[Any]:
    """
    Rewrite `position` on one parent's children from a submitted id sequence.

    The submitted sequence is authoritative, not a patch:
    - ids that are not among `children` are skipped
    - a duplicated id takes the place of its last occurrence
    - children missing from the sequence keep their relative order after the listed ones
    - positions come out dense, 0..n-1

    An empty sequence leaves everything untouched.
    """
    current = sorted(children, key=lambda c: c.position)
    if not ordered_ids:
        return current

    by_key = {str(key(child)): child for child in current}

    last_seen = {}
    for index, raw_id in enumerate(ordered_ids):
        child_key = str(raw_id)
        if child_key in by_key:
            last_seen[child_key] = index

    listed = [by_key[k] for k in sorted(last_seen, key=last_seen.get)]
    omitted = [child for child in current if str(key(child)) not in last_seen]

    ordered = listed + omitted
    for position, child in enumerate(ordered):
        child.position = position

    db.session.flush()
    return ordered


def compact_order(children: Iterable[Any]) -> List[Any]:
    """
    Re-assigns sequential positions (0..N-1), keeping the current relative order.
    """
    items = sorted(children, key=lambda c: c.position)

    for index, item in enumerate(items):
        item.position = index

    db.session.flush()
    return items


def next_position(model, **filters) -> int:
    """Position for a new child appended at the end of its parent's collection."""
    max_position = db.session.query(db.func.max(model.position)).filter_by(**filters).scalar()
    return 0 if max_position is None else max_position + 1
