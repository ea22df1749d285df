# tests/test_task_models.py

from __future__ import annotations

import uuid

import pytest

from todo.models.task import (
    MalformedTaskIdError,
    TaskStatus,
    format_task_id,
    format_task_status,
    parse_task_id,
    parse_task_status,
)


@pytest.mark.parametrize(
    "value",
    [
        "3f2b9c1e-8d4a-4e5f-9a7b-1c2d3e4f5a6b",
        "00000000-0000-0000-0000-000000000000",
        str(uuid.uuid4()),
    ],
)
def test_task_id_round_trips_canonical_strings(value: str) -> None:
    assert format_task_id(parse_task_id(value)) == value


def test_task_id_is_normalised_to_lowercase() -> None:
    value = "3F2B9C1E-8D4A-4E5F-9A7B-1C2D3E4F5A6B"

    assert format_task_id(parse_task_id(value)) == value.lower()


def test_parsed_task_id_is_a_uuid() -> None:
    parsed = parse_task_id("3f2b9c1e-8d4a-4e5f-9a7b-1c2d3e4f5a6b")

    assert isinstance(parsed, uuid.UUID)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "not-a-uuid",
        "3f2b9c1e8d4a4e5f9a7b1c2d3e4f5a6b",
        "{3f2b9c1e-8d4a-4e5f-9a7b-1c2d3e4f5a6b}",
        "urn:uuid:3f2b9c1e-8d4a-4e5f-9a7b-1c2d3e4f5a6b",
        "3f2b9c1e-8d4a-4e5f-9a7b-1c2d3e4f5a6",
        "3f2b9c1e-8d4a-4e5f-9a7b-1c2d3e4f5a6bz",
        "zf2b9c1e-8d4a-4e5f-9a7b-1c2d3e4f5a6b",
        "3f2b9c1e-8d4a-4e5f-9a7b-1c2d3e4f5a6b\n",
    ],
)
def test_malformed_task_id_is_rejected(value: str) -> None:
    with pytest.raises(MalformedTaskIdError) as excinfo:
        parse_task_id(value)

    assert excinfo.value.value == value
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("active", TaskStatus.ACTIVE),
        ("ACTIVE", TaskStatus.ACTIVE),
        ("Done", TaskStatus.DONE),
        ("done", TaskStatus.DONE),
    ],
)
def test_status_parse_is_case_insensitive(value: str, expected: TaskStatus) -> None:
    assert parse_task_status(value) is expected


@pytest.mark.parametrize("value", [None, "", "bogus", "activ", " active"])
def test_unrecognised_status_parses_to_none(value: str | None) -> None:
    assert parse_task_status(value) is None


def test_status_wire_form_is_lowercase_name() -> None:
    assert format_task_status(TaskStatus.ACTIVE) == "active"
    assert format_task_status(TaskStatus.DONE) == "done"
