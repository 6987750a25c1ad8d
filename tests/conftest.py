"""Shared fixtures: the reducers from the noise-level and volume walkthroughs."""

import pytest

from slotstore import create_reducer


def _noise_level_reducer(reset_on_unknown):
    return create_reducer(
        0,
        ("SILENCE", lambda state, action: 0),
        ("MURMUR", lambda state, action: 5),
        ("SCREAM", lambda state, action: 10),
        reset_on_unknown=reset_on_unknown
    )


@pytest.fixture
def noise_level_reducer():
    return _noise_level_reducer(reset_on_unknown=False)


@pytest.fixture
def resetting_noise_level_reducer():
    return _noise_level_reducer(reset_on_unknown=True)


@pytest.fixture
def volume_reducer():
    return create_reducer(
        0,
        ("SET_VOLUME", lambda state, action: action.payload)
    )
