from __future__ import annotations

import pytest
from pydantic import ValidationError

from user_records.domain.models import MAX_AGE, User


def test_user_dumps_fields_in_declared_order():
    user = User(id="1", email="a@x.com", age=30)
    assert user.model_dump_json() == '{"id":"1","email":"a@x.com","age":30}'


def test_missing_fields_fall_back_to_zero_values():
    user = User.model_validate_json('{"email":"a@x.com"}')
    assert user.id == ""
    assert user.age == 0


def test_unknown_fields_are_ignored():
    user = User.model_validate_json('{"id":"1","email":"a@x.com","age":3,"nick":"al"}')
    assert user == User(id="1", email="a@x.com", age=3)


@pytest.mark.parametrize(
    "payload",
    [
        '{"id":1,"email":"a@x.com","age":30}',
        '{"id":"1","email":"a@x.com","age":"30"}',
        '{"id":"1","email":"a@x.com","age":30.5}',
        '{"id":"1","email":"a@x.com","age":-1}',
    ],
)
def test_wrong_types_are_rejected(payload: str):
    with pytest.raises(ValidationError):
        User.model_validate_json(payload)


def test_user_is_frozen():
    user = User(id="1", email="a@x.com", age=30)
    with pytest.raises(ValidationError):
        user.age = 31  # type: ignore[misc]


def test_age_is_bounded_by_unsigned_64_bit_range():
    assert User.model_validate_json(f'{{"age":{MAX_AGE}}}').age == MAX_AGE
    with pytest.raises(ValidationError):
        User.model_validate_json(f'{{"age":{MAX_AGE + 1}}}')


def test_later_spelling_of_a_key_wins():
    user = User.model_validate_json('{"id":"1","Id":"2","ID":null}')
    assert user.id == "2"


def test_null_payload_decodes_to_zero_user():
    assert User.model_validate_json("null") == User()
