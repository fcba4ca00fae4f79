from datetime import datetime, timezone

import pytest
from bson import ObjectId

from hexservice.dto import ExampleDto
from hexservice.entities import Example


def test_from_example_uses_hex_id():
    example = Example(name="a")
    dto = ExampleDto.from_example(example)
    assert dto.id == str(example.id)
    assert dto.name == "a"
    assert dto.created_at == example.created_at


def test_round_trip():
    example = Example(name="round")
    assert ExampleDto.from_example(example).to_example() == example


def test_to_example_truncates_to_milliseconds():
    when = datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)
    dto = ExampleDto(str(ObjectId()), "n", when, when)
    assert dto.to_example().created_at == when.replace(microsecond=123000)


def test_to_dict_whole_seconds():
    when = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    dto = ExampleDto("id", "n", when, when)
    data = dto.to_dict()
    assert data["created_at"] == "2024-01-02T03:04:05Z"
    assert data["updated_at"] == data["created_at"]
    assert data["id"] == "id" and data["name"] == "n"


def test_to_dict_milliseconds():
    when = datetime(2024, 1, 2, 3, 4, 5, 123000, tzinfo=timezone.utc)
    assert ExampleDto("id", "n", when, when).to_dict()["created_at"] == "2024-01-02T03:04:05.123Z"


def test_invalid_id_raises():
    when = datetime(2024, 1, 2, tzinfo=timezone.utc)
    with pytest.raises(ValueError, match="invalid object id"):
        ExampleDto("zzz", "n", when, when).to_example()