"""Tests for wren.session: explicit boolean session queries."""

import pytest

from wren.session import ANONYMOUS, MappingSession, SessionState


class TestMappingSession:
    def test_user_present(self) -> None:
        assert MappingSession({"user_id": 42}).has_user() is True

    def test_missing_key_is_no_user(self) -> None:
        assert MappingSession({}).has_user() is False

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values_are_no_user(self, value: object) -> None:
        assert MappingSession({"user_id": value}).has_user() is False

    def test_zero_is_a_user(self) -> None:
        assert MappingSession({"user_id": 0}).has_user() is True

    def test_custom_key(self) -> None:
        session = MappingSession({"uid": "abc"}, user_key="uid")
        assert session.has_user() is True
        assert session.user_id == "abc"

    def test_sees_later_changes(self) -> None:
        data: dict[str, object] = {}
        session = MappingSession(data)
        data["user_id"] = 1
        assert session.has_user() is True

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MappingSession({}), SessionState)


class TestAnonymous:
    def test_never_has_user(self) -> None:
        assert ANONYMOUS.has_user() is False
        assert isinstance(ANONYMOUS, SessionState)
