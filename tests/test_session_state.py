"""
Session state: login marker presence, expiry and revalidation hooks.
"""

from src.models.identity import Identity
from webapp.services.session_state import (
    SessionState,
    MemorySessionSource,
    FlaskSessionSource,
    SESSION_KEY,
    STORED_AT_KEY,
)

AVA = Identity(name="Ava", email="ava@x.com")


def test_logged_out_without_marker():
    assert not SessionState(MemorySessionSource()).is_logged_in()


def test_any_marker_means_logged_in():
    state = SessionState(MemorySessionSource({SESSION_KEY: "{not json"}))
    assert state.is_logged_in()
    assert state.read_identity() == "{not json"


def test_store_and_clear():
    source = MemorySessionSource()
    state = SessionState(source, clock=lambda: 1000.0)

    state.store(AVA)
    assert state.is_logged_in()
    assert Identity.from_json(state.read_identity()) == AVA
    assert source.get(STORED_AT_KEY) == 1000.0

    state.clear()
    state.clear()
    assert not state.is_logged_in()
    assert source.get(STORED_AT_KEY) is None


def test_marker_expires_after_max_age():
    now = [1000.0]
    source = MemorySessionSource()
    state = SessionState(source, max_age=60, clock=lambda: now[0])
    state.store(AVA)

    now[0] += 60
    assert state.is_logged_in()

    now[0] += 1
    assert not state.is_logged_in()
    assert source.get(SESSION_KEY) is None


def test_max_age_rejects_marker_without_timestamp():
    state = SessionState(MemorySessionSource({SESSION_KEY: AVA.to_json()}), max_age=60)
    assert not state.is_logged_in()


def test_no_expiry_by_default():
    now = [0.0]
    state = SessionState(MemorySessionSource(), clock=lambda: now[0])
    state.store(AVA)
    now[0] = 10 ** 9
    assert state.is_logged_in()


def test_revalidation_hook_can_retire_marker():
    seen = []

    def revalidate(raw):
        seen.append(raw)
        return False

    source = MemorySessionSource({SESSION_KEY: AVA.to_json()})
    state = SessionState(source, revalidate=revalidate)

    assert not state.is_logged_in()
    assert seen == [AVA.to_json()]
    assert source.get(SESSION_KEY) is None


def test_revalidation_error_retires_marker():
    def revalidate(raw):
        raise ConnectionError("store unreachable")

    state = SessionState(MemorySessionSource({SESSION_KEY: AVA.to_json()}), revalidate=revalidate)
    assert not state.is_logged_in()


def test_flask_session_source(app):
    source = FlaskSessionSource()
    with app.test_request_context('/'):
        assert source.get(SESSION_KEY) is None
        source.set(SESSION_KEY, AVA.to_json())
        assert SessionState(source).is_logged_in()
        source.delete(SESSION_KEY)
        source.delete(SESSION_KEY)
        assert source.get(SESSION_KEY) is None
