"""
Unit tests for SessionManager.

Covers the login / logout / import transitions, startup restore, and the
effect of each transition on the data store and the session marker.
"""

import pytest

from application.exceptions import DuplicateEntityIdError
from application.services import SessionManager, SessionStatus
from domain.models import User
from tests.fakes import (
    FakeSessionMarkerStore,
    create_data_store,
    make_logged_workout,
    make_template,
)

pytestmark = pytest.mark.unit


class TestRestore:
    """Startup restore from the session marker."""

    def test_not_restored_until_restore_called(self, data_store, marker_store):
        manager = SessionManager(data_store=data_store, marker_store=marker_store)
        assert manager.is_restored is False
        assert manager.is_authenticated is False

    def test_restore_without_marker(self, data_store, marker_store):
        manager = SessionManager(data_store=data_store, marker_store=marker_store)

        state = manager.restore()

        assert manager.is_restored is True
        assert state.status is SessionStatus.UNAUTHENTICATED
        assert state.username is None

    def test_restore_with_marker_authenticates_with_empty_store(self, data_store):
        markers = FakeSessionMarkerStore(user=User(username="alice"))
        manager = SessionManager(data_store=data_store, marker_store=markers)

        state = manager.restore()

        assert state.is_authenticated
        assert state.username == "alice"
        assert data_store.templates == ()
        assert data_store.logged_workouts == ()
        assert markers.calls == ["load"]


class TestLogin:
    """login()."""

    def test_login_authenticates_and_writes_marker(self, session_manager, marker_store):
        user = session_manager.login("bob")

        assert user == User(username="bob")
        assert session_manager.current_user == user
        assert session_manager.state.username == "bob"
        assert marker_store.user == user
        assert marker_store.calls[-1] == "save"

    def test_login_trims_username(self, session_manager):
        assert session_manager.login("  bob  ").username == "bob"

    def test_login_clears_both_collections(self, marker_store):
        store = create_data_store(num_templates=2, num_logged_workouts=3)
        manager = SessionManager(data_store=store, marker_store=marker_store)
        manager.restore()

        manager.login("bob")

        assert store.templates == ()
        assert store.logged_workouts == ()

    def test_login_while_authenticated_switches_user_and_clears(self, session_manager, data_store):
        session_manager.login("alice")
        data_store.add_template(make_template("t1"))

        session_manager.login("bob")

        assert session_manager.current_user.username == "bob"
        assert data_store.templates == ()

    def test_blank_username_rejected_without_state_change(self, session_manager, marker_store):
        with pytest.raises(ValueError):
            session_manager.login("   ")

        assert session_manager.is_authenticated is False
        assert "save" not in marker_store.calls


class TestLogout:
    """logout()."""

    def test_logout_clears_session_marker_and_data(self, session_manager, data_store, marker_store):
        session_manager.login("alice")
        data_store.add_template(make_template("t1"))
        data_store.add_logged_workout(make_logged_workout("l1"))

        session_manager.logout()

        assert session_manager.is_authenticated is False
        assert session_manager.state.status is SessionStatus.UNAUTHENTICATED
        assert marker_store.user is None
        assert data_store.templates == ()
        assert data_store.logged_workouts == ()
        assert data_store.get_template_by_id("t1") is None

    def test_logout_is_idempotent(self, session_manager, data_store):
        session_manager.logout()
        session_manager.logout()

        assert session_manager.is_authenticated is False
        assert data_store.templates == ()


class TestImportSucceeded:
    """import_succeeded()."""

    def test_installs_data_without_login_clear(self, session_manager, data_store, marker_store):
        templates = [make_template("t1")]
        logs = [
            make_logged_workout("l1", date="2024-01-05"),
            make_logged_workout("l2", date="2024-02-01"),
        ]

        user = session_manager.import_succeeded("alice", templates, logs)

        assert user.username == "alice"
        assert session_manager.is_authenticated
        assert marker_store.user == user
        assert [t.id for t in data_store.templates] == ["t1"]
        assert [log.id for log in data_store.logged_workouts] == ["l2", "l1"]

    def test_replaces_previous_user_data(self, session_manager, data_store):
        session_manager.login("bob")
        data_store.add_template(make_template("bob-t"))

        session_manager.import_succeeded("alice", [make_template("alice-t")], [])

        assert session_manager.current_user.username == "alice"
        assert [t.id for t in data_store.templates] == ["alice-t"]

    def test_duplicate_ids_leave_session_untouched(self, session_manager, data_store, marker_store):
        session_manager.login("bob")
        data_store.add_template(make_template("bob-t"))
        marker_store.calls.clear()

        with pytest.raises(DuplicateEntityIdError):
            session_manager.import_succeeded(
                "alice", [make_template("t1"), make_template("t1")], []
            )

        assert session_manager.current_user.username == "bob"
        assert [t.id for t in data_store.templates] == ["bob-t"]
        assert marker_store.calls == []


class TestRedirectFor:
    """redirect_for() delegates to the access guard with live state."""

    def test_unauthenticated_redirects_to_auth(self, session_manager):
        assert session_manager.redirect_for("/stats") == "/auth"

    def test_authenticated_auth_redirects_home(self, session_manager):
        session_manager.login("alice")
        assert session_manager.redirect_for("/auth") == "/"
        assert session_manager.redirect_for("/stats") is None

    def test_no_decision_before_restore(self, data_store, marker_store):
        manager = SessionManager(data_store=data_store, marker_store=marker_store)
        assert manager.redirect_for("/stats") is None
