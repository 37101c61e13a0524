"""Domain Types — TodoId validated construction and the two-state lifecycle."""

import pytest
from bson import ObjectId

from todo_api.core.domain_types import TodoId
from todo_api.core.errors import InvalidIdError


def test_parse_accepts_24_char_hex():
    oid = ObjectId()
    todo_id = TodoId.parse(str(oid))
    assert todo_id.value == oid
    assert str(todo_id) == str(oid)


def test_parse_accepts_uppercase_hex():
    raw = "65A1B2C3D4E5F60718293A4B"
    assert str(TodoId.parse(raw)) == raw.lower()


@pytest.mark.parametrize("raw", [
    "", "abc", "not-an-object-id", "65a1b2c3d4e5f60718293a4", "zza1b2c3d4e5f60718293a4b",
    "65a1b2c3d4e5f60718293a4b0",
])
def test_parse_rejects_malformed_ids(raw):
    with pytest.raises(InvalidIdError) as exc:
        TodoId.parse(raw)
    assert exc.value.http_status == 400
    assert exc.value.to_response() == {"message": "invalied id"}
    assert exc.value.raw_id == raw


def test_ids_compare_by_value():
    raw = str(ObjectId())
    assert TodoId.parse(raw) == TodoId.parse(raw)
    assert len({TodoId.parse(raw), TodoId.parse(raw)}) == 1
