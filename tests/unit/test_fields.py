"""Unit tests for field projection."""

import pytest

from cinelog.utils.fields import filter_fields, project

USER = {
    "id": "u1",
    "username": "ana",
    "email": "ana@example.com",
    "password_hash": "$2b$...",
}


def test_keeps_only_allowed_keys():
    assert filter_fields(["id", "username"], USER) == {"id": "u1", "username": "ana"}


def test_original_is_not_modified():
    filter_fields(["id"], USER)

    assert "password_hash" in USER


def test_empty_field_list_returns_object_unchanged():
    assert filter_fields([], USER) is USER


def test_keys_compare_case_insensitively():
    assert filter_fields(["ID", "UserName"], {"Id": 1, "username": "ana", "x": 2}) == {
        "Id": 1,
        "username": "ana",
    }


def test_missing_keys_are_ignored():
    assert filter_fields(["id", "bio"], {"id": 1}) == {"id": 1}


@pytest.mark.parametrize("fields", ["id", None, 3])
def test_rejects_non_sequence_fields(fields):
    with pytest.raises(TypeError):
        filter_fields(fields, USER)


def test_rejects_non_mapping_object():
    with pytest.raises(TypeError):
        filter_fields(["id"], ["id"])


def test_project_applies_to_each_item():
    stage = project(["username"])

    assert stage([USER, {"username": "bo", "email": "bo@example.com"}]) == [
        {"username": "ana"},
        {"username": "bo"},
    ]
