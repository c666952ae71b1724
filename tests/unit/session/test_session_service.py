"""Tests for the in-memory session store."""

from datetime import timedelta

from sessiongate.core.modules.session.models import SessionHandle
from sessiongate.utils import now


class TestCreateAndProbe:
    """Tests for create_session and get_session."""

    def test_created_session_can_be_probed(self, services):
        session = services.session.create_session()
        assert services.session.get_session(session.id) is session

    def test_new_session_is_anonymous(self, services):
        session = services.session.create_session()
        assert session.attributes == {}
        assert session.user is None

    def test_handles_are_unique(self, services):
        handles = {services.session.create_session().id for _ in range(50)}
        assert len(handles) == 50

    def test_probe_never_creates(self, services):
        assert services.session.get_session(SessionHandle("unknown")) is None
        assert services.session.get_session(None) is None
        assert services.session.get_session(SessionHandle("")) is None
        assert services.session.count() == 0

    def test_probe_refreshes_last_access(self, services):
        session = services.session.create_session()
        session.last_accessed_at = now() - timedelta(minutes=5)
        services.session.get_session(session.id)
        assert now() - session.last_accessed_at < timedelta(minutes=1)


class TestExpiry:
    """Sessions expire after session_max_inactive_seconds of inactivity."""

    def test_idle_session_expires_on_probe(self, services, config):
        session = services.session.create_session()
        session.last_accessed_at = now() - timedelta(seconds=config.session_max_inactive_seconds + 1)
        assert services.session.get_session(session.id) is None
        assert services.session.count() == 0

    def test_purge_expired(self, services, config):
        stale = services.session.create_session()
        fresh = services.session.create_session()
        stale.last_accessed_at = now() - timedelta(seconds=config.session_max_inactive_seconds + 1)

        assert services.session.purge_expired() == 1
        assert services.session.get_session(stale.id) is None
        assert services.session.get_session(fresh.id) is fresh

    def test_create_drops_expired_sessions(self, services):
        for _ in range(100):
            services.auth.attempt_login("alice", "1234")
        for session in list(services.session._sessions.values()):
            session.last_accessed_at = now() - timedelta(days=1)

        services.auth.attempt_login("alice", "1234")
        assert services.session.count() == 1

    def test_create_keeps_live_sessions(self, services):
        first = services.session.create_session()
        services.session.create_session()
        assert services.session.count() == 2
        assert services.session.get_session(first.id) is first


class TestInvalidate:
    """Tests for invalidate_session."""

    def test_invalidated_session_is_gone(self, services):
        session = services.session.create_session()
        session.attributes["user"] = "alice"
        services.session.invalidate_session(session.id)
        assert services.session.get_session(session.id) is None
        assert session.attributes == {}

    def test_invalidate_unknown_is_noop(self, services):
        services.session.invalidate_session(SessionHandle("unknown"))
        services.session.invalidate_session(None)
        assert services.session.count() == 0

    def test_invalidate_twice(self, services):
        session = services.session.create_session()
        services.session.invalidate_session(session.id)
        services.session.invalidate_session(session.id)
        assert services.session.count() == 0
