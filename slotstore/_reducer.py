from __future__ import annotations

import logging

from typing import Any, Callable, Mapping, Optional, Tuple, TypeVar, Union

from ._action import get_action_type


__all__ = (
    "Handler",
    "Reducer",

    "combine_reducers",
    "create_reducer",
    "on"
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger(__name__)


Reducer = Callable[[Optional[S], A], S]
Handler = Callable[[S, A], S]


def on(action_creator_or_type: Any, handler: Handler) -> dict[str, Handler]:
    action_type = getattr(action_creator_or_type, "type", action_creator_or_type)

    if not isinstance(action_type, str):
        raise TypeError(
            f"Expected an action type or action creator, got {action_creator_or_type!r}"
        )

    return {action_type: handler}


def create_reducer(
    default_state: S,
    *handlers: Union[Tuple[str, Handler], Mapping[str, Handler]],
    reset_on_unknown: bool = False
) -> Reducer:
    """Switch on the action type; unknown types keep state unless ``reset_on_unknown``."""
    table: dict[str, Handler] = {}

    for entry in handlers:
        if isinstance(entry, tuple):
            action_type, handler = entry
            table[action_type] = handler
        else:
            table.update(entry)

    def reducer(state: Optional[S], action: A) -> S:
        if state is None:
            state = default_state

        handler = table.get(get_action_type(action))  # type: ignore[arg-type]

        if handler is None:
            return default_state if reset_on_unknown else state

        return handler(state, action)

    setattr(reducer, "default_state", default_state)
    setattr(reducer, "handlers", dict(table))

    return reducer


def combine_reducers(
    reducers: Optional[Mapping[str, Reducer]] = None,
    **kwargs: Reducer
) -> Reducer:
    slices = dict(reducers or {}, **kwargs)

    if not slices:
        raise ValueError("combine_reducers needs at least one reducer")

    for key, reducer in slices.items():
        if not callable(reducer):
            raise TypeError(f"Reducer for slice {key!r} is not callable")

    def combined(state: Optional[dict[str, Any]], action: A) -> dict[str, Any]:
        previous = state if state is not None else {}
        changed = state is None
        next_state = {}

        for key, reducer in slices.items():
            previous_slice = previous.get(key)
            next_slice = reducer(previous_slice, action)
            next_state[key] = next_slice
            changed = changed or next_slice is not previous_slice

        # Keys the reducers don't own are carried over untouched.
        for key, value in previous.items():
            if key not in next_state:
                next_state[key] = value

        if not changed:
            return previous

        logger.debug(
            "Combined reducer produced a new state for %s",
            get_action_type(action)
        )

        return next_state

    return combined
