"""
Tests for the URL directory: CRUD, per-owner listing and visit logging.
"""
from datetime import datetime, timedelta, timezone

import pytest

from tinyapp.errors import NotFound, ValidationError
from tinyapp.security.passwords import BcryptPasswordHasher
from tinyapp.state import AppState


class TestCreateAndGet:
    """Test creating and reading short URLs"""

    def test_create_short_url(self, state, alice):
        record = state.urls.create("http://www.lighthouselabs.ca", alice.id)

        assert len(record.code) == state.settings.short_code_length
        assert record.code.isalnum()
        assert record.long_url == "http://www.lighthouselabs.ca"
        assert record.owner_id == alice.id
        assert record.visits == []
        assert record.unique_visitors == []
        assert state.urls.get(record.code) is record

    def test_same_long_url_gets_distinct_codes(self, state, alice):
        url1 = state.urls.create("http://www.google.com", alice.id)
        url2 = state.urls.create("http://www.google.com", alice.id)

        assert url1.code != url2.code

    def test_unknown_owner_rejected(self, state):
        with pytest.raises(ValidationError):
            state.urls.create("http://www.google.com", "ghost")

        assert len(state.urls) == 0

    def test_empty_long_url_rejected(self, state, alice):
        with pytest.raises(ValidationError):
            state.urls.create("", alice.id)

    def test_get_missing_returns_none(self, state):
        assert state.urls.get("zzz") is None

    def test_created_at_uses_clock(self):
        fixed = datetime(2024, 1, 1, tzinfo=timezone.utc)
        state = AppState(hasher=BcryptPasswordHasher(rounds=4), clock=lambda: fixed)
        user = state.users.create("a@b.com", "secret")

        record = state.urls.create("http://x.com", user.id)

        assert record.created_at == fixed


class TestUpdateDelete:
    """Test mutation of existing records"""

    def test_update_replaces_long_url(self, state, alice):
        record = state.urls.create("http://old.com", alice.id)

        updated = state.urls.update(record.code, "http://new.com")

        assert updated is record
        assert state.urls.get(record.code).long_url == "http://new.com"

    def test_update_missing_raises(self, state):
        with pytest.raises(NotFound):
            state.urls.update("zzz", "http://new.com")

    def test_delete_removes_record(self, state, alice):
        record = state.urls.create("http://x.com", alice.id)

        state.urls.delete(record.code)

        assert state.urls.get(record.code) is None
        assert record.code not in state.urls

    def test_delete_missing_raises(self, state):
        with pytest.raises(NotFound):
            state.urls.delete("zzz")


class TestListForOwner:
    """Test per-user filtering"""

    def test_returns_only_owned_urls(self, state, alice, bob):
        a1 = state.urls.create("http://a1.com", alice.id)
        b1 = state.urls.create("http://b1.com", bob.id)
        a2 = state.urls.create("http://a2.com", alice.id)

        assert state.urls.list_for_owner(alice.id) == {a1.code: a1, a2.code: a2}
        assert state.urls.list_for_owner(bob.id) == {b1.code: b1}

    def test_empty_when_none_match(self, state, alice, bob):
        state.urls.create("http://a1.com", alice.id)

        assert state.urls.list_for_owner(bob.id) == {}
        assert state.urls.list_for_owner("nobody") == {}


class TestRecordVisit:
    """Test visit analytics"""

    def test_repeat_visitor_counted_once_as_unique(self, state, alice):
        record = state.urls.create("http://x.com", alice.id)

        state.urls.record_visit(record.code, "v1")
        state.urls.record_visit(record.code, "v1")

        assert len(record.visits) == 2
        assert record.unique_visitors == ["v1"]

    def test_unique_visitors_in_first_seen_order(self, state, alice):
        record = state.urls.create("http://x.com", alice.id)

        for visitor in ["v2", "v1", "v2", "v3"]:
            state.urls.record_visit(record.code, visitor)

        assert record.visit_count == 4
        assert record.unique_visitors == ["v2", "v1", "v3"]
        assert record.unique_visitor_count == 3
        assert [visit.visitor_id for visit in record.visits] == ["v2", "v1", "v2", "v3"]

    def test_visit_timestamps_come_from_clock(self):
        ticks = iter(datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=n) for n in range(10))
        state = AppState(hasher=BcryptPasswordHasher(rounds=4), clock=lambda: next(ticks))
        user = state.users.create("a@b.com", "secret")
        record = state.urls.create("http://x.com", user.id)

        state.urls.record_visit(record.code, "v1")

        assert record.visits[0].timestamp == record.created_at + timedelta(minutes=1)
        assert record.last_visited == record.visits[0].timestamp

    def test_missing_code_is_noop(self, state):
        assert state.urls.record_visit("zzz", "v1") is None
        assert len(state.urls) == 0
