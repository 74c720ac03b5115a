"""
Unit tests for the admin session
"""
import pytest

from dcdirectory_core.admin import LOGIN_ERROR, AdminSession
from dcdirectory_core.errors import (
    NoDraftError,
    NotAuthenticatedError,
    NotFoundError,
    PathError,
    RecordValidationError,
)
from dcdirectory_core.mutation.setters import FORM_FIELDS


@pytest.fixture
def session(engine):
    """Logged-in admin session."""
    admin = AdminSession(engine)
    assert admin.login("admin@datacenter.com", "admin123")
    return admin


class TestLogin:
    """Tests for login and logout"""

    def test_failed_login(self, engine):
        """Bad credentials set the login error"""
        admin = AdminSession(engine)
        assert admin.login("admin@datacenter.com", "nope") is False
        assert admin.last_error == LOGIN_ERROR
        assert not admin.is_authenticated

    def test_login_clears_error(self, engine):
        admin = AdminSession(engine)
        admin.login("x", "y")
        assert admin.login("admin@datacenter.com", "admin123") is True
        assert admin.last_error == ""

    def test_failed_login_closes_open_session(self, session):
        """Bad credentials end a session that was already open"""
        session.begin_edit("dc-1")
        assert session.login("intruder@example.com", "wrong") is False
        assert not session.is_authenticated
        assert session.draft is None
        assert session.last_error == LOGIN_ERROR
        with pytest.raises(NotAuthenticatedError):
            session.list_records()

    def test_operations_require_login(self, engine):
        """Every admin operation is refused before login"""
        admin = AdminSession(engine)
        with pytest.raises(NotAuthenticatedError):
            admin.list_records()
        with pytest.raises(NotAuthenticatedError):
            admin.begin_create()
        with pytest.raises(NotAuthenticatedError):
            admin.delete("dc-1", confirm=lambda: True)
        assert engine.count() == 3

    def test_logout_discards_draft(self, session):
        session.begin_edit("dc-1")
        session.logout()
        assert session.draft is None
        with pytest.raises(NotAuthenticatedError):
            session.begin_edit("dc-1")


class TestCreate:
    """Tests for creating records"""

    def test_create_and_save(self, session, engine):
        """A saved draft is appended to the collection"""
        draft = session.begin_create()
        assert session.is_creating
        assert not engine.exists(draft.id)
        session.edit("name", "Frankfurt One")
        session.edit("capacity.used", "75")
        saved = session.save()
        assert engine.snapshot()[-1] == saved
        assert saved.name == "Frankfurt One"
        assert saved.capacity.used == 75
        assert session.draft is None

    def test_new_draft_has_unique_id(self, session, engine):
        draft = session.begin_create()
        assert draft.id not in engine.store.ids()

    def test_cancel(self, session, engine):
        """A cancelled draft never reaches the store"""
        session.begin_create()
        session.edit("name", "Scratch")
        session.cancel()
        assert engine.count() == 3
        assert session.draft is None


class TestEdit:
    """Tests for editing existing records"""

    def test_edit_and_save(self, session, engine):
        """Saving replaces the record in place"""
        session.begin_edit("dc-2")
        session.edit("realTimeData.uptime", "98.5")
        session.save()
        assert engine.require("dc-2").real_time_data.uptime == 98.5
        assert [r.id for r in engine.snapshot()] == ["dc-1", "dc-2", "dc-3"]

    def test_edits_stay_in_draft(self, session, engine):
        """The store is untouched until save"""
        session.begin_edit("dc-2")
        session.edit("name", "Draft name")
        assert engine.require("dc-2").name == "Ashburn Campus"

    def test_begin_edit_unknown(self, session):
        with pytest.raises(NotFoundError):
            session.begin_edit("dc-9")

    def test_form_values(self, session):
        """The form is pre-filled from the draft"""
        session.begin_edit("dc-1")
        values = session.form_values()
        assert set(values) == set(FORM_FIELDS)
        assert values["name"] == "Equinix LD5"
        assert values["capacity.used"] == 80

    def test_unparseable_edit(self, session):
        session.begin_edit("dc-1")
        with pytest.raises(RecordValidationError):
            session.edit("capacity.used", "high")
        assert session.draft.capacity.used == 80

    def test_unknown_field(self, session):
        session.begin_edit("dc-1")
        with pytest.raises(PathError):
            session.edit("contact.email", "x@example.com")

    def test_rejected_save_keeps_draft(self, session, engine):
        """An out-of-range draft is refused and stays open"""
        session.begin_edit("dc-1")
        session.edit("capacity.used", "150")
        with pytest.raises(RecordValidationError):
            session.save()
        assert session.draft is not None
        assert engine.require("dc-1").capacity.used == 80

    def test_no_draft(self, session):
        with pytest.raises(NoDraftError):
            session.edit("name", "x")
        with pytest.raises(NoDraftError):
            session.save()


class TestDelete:
    """Tests for confirmed deletion"""

    def test_confirmed_delete(self, session, engine):
        assert session.delete("dc-1", confirm=lambda: True) is True
        assert not engine.exists("dc-1")

    def test_declined_delete(self, session, engine):
        """Nothing is removed without confirmation"""
        assert session.delete("dc-1", confirm=lambda: False) is False
        assert engine.exists("dc-1")

    def test_list_records(self, session):
        assert [r.id for r in session.list_records("amsterdam")] == ["dc-3"]
        assert len(session.list_records()) == 3
