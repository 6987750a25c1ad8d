"""Tests for dispatch middleware."""

import logging

import pytest

from slotstore import create_store, get_action_type


def test_runs_in_list_order(noise_level_reducer):
    log = []

    def tag(name):
        def middleware(store, next_dispatch, action):
            log.append((name, store.get_state()))
            return next_dispatch(action)

        return middleware

    store = create_store(noise_level_reducer, middleware=[tag("outer"), tag("inner")])
    store.dispatch({"type": "SCREAM"})

    assert log == [("outer", 0), ("inner", 0)]
    assert store.get_state() == 10


def test_can_rewrite_action(noise_level_reducer):
    def translate(store, next_dispatch, action):
        if get_action_type(action) == "YELL":
            action = {"type": "SCREAM"}
        return next_dispatch(action)

    store = create_store(noise_level_reducer, middleware=[translate])
    result = store.dispatch({"type": "YELL"})

    assert store.get_state() == 10
    assert result == {"type": "SCREAM"}


def test_can_swallow_action(noise_level_reducer):
    calls = []

    def ignore_screams(store, next_dispatch, action):
        if get_action_type(action) == "SCREAM":
            return None
        return next_dispatch(action)

    store = create_store(noise_level_reducer, middleware=[ignore_screams])
    store.subscribe(lambda: calls.append(1))

    assert store.dispatch({"type": "SCREAM"}) is None
    assert store.get_state() == 0
    assert calls == []


def test_can_dispatch_through_store(noise_level_reducer):
    seen = []

    def expand(store, next_dispatch, action):
        seen.append(get_action_type(action))
        if get_action_type(action) == "SHOUT_THEN_HUSH":
            store.dispatch({"type": "SCREAM"})
            return store.dispatch({"type": "SILENCE"})
        return next_dispatch(action)

    store = create_store(noise_level_reducer, middleware=[expand])
    states = []
    store.subscribe(lambda: states.append(store.get_state()))

    store.dispatch({"type": "SHOUT_THEN_HUSH"})

    assert seen == ["SHOUT_THEN_HUSH", "SCREAM", "SILENCE"]
    assert states == [10, 0]


def test_sees_reducer_errors():
    errors = []

    def reducer(state, action):
        raise KeyError(action["type"])

    def record_errors(store, next_dispatch, action):
        try:
            return next_dispatch(action)
        except KeyError as err:
            errors.append(err)
            raise

    store = create_store(reducer, 0, middleware=[record_errors])

    with pytest.raises(KeyError):
        store.dispatch({"type": "BAD"})

    assert len(errors) == 1
    assert store.get_state() == 0


def test_logging_middleware(noise_level_reducer, caplog):
    logger = logging.getLogger("tests.noise")

    def log_actions(store, next_dispatch, action):
        logger.info("%s: %s", get_action_type(action), store.get_state())
        result = next_dispatch(action)
        logger.info("-> %s", store.get_state())
        return result

    store = create_store(noise_level_reducer, middleware=[log_actions])

    with caplog.at_level(logging.INFO, logger="tests.noise"):
        store.dispatch({"type": "MURMUR"})

    assert [r.getMessage() for r in caplog.records] == ["MURMUR: 0", "-> 5"]
