from __future__ import annotations

import logging

from collections import deque
from threading import RLock
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from ._action import INIT, get_action_type
from ._reducer import Reducer


__all__ = (
    "Dispatch",
    "Middleware",
    "ReducerInProgressError",
    "StateFactory",
    "Store",
    "StoreError",
    "Subscriber",
    "Unsubscribe",

    "create_store"
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


class ReducerInProgressError(StoreError):
    pass


Dispatch = Callable[[Any], Any]
Subscriber = Callable[[], None]
Unsubscribe = Callable[[], None]
StateFactory = Callable[[], S]


class _Subscription:
    __slots__ = ("listener", "active")

    def __init__(self, listener: Subscriber) -> None:
        self.listener = listener
        self.active = True


class Store(Generic[S, A]):
    """Single state slot, replaced by reducing dispatched actions."""

    _reducer: Reducer
    _state: S

    _subscriptions: list[_Subscription]

    _lock: RLock
    _pending: deque
    _is_dispatching: bool
    _is_reducing: bool

    _dispatch: Dispatch

    def __init__(self, reducer: Reducer, state: S) -> None:
        self._reducer = reducer
        self._state = state

        self._subscriptions = []

        self._lock = RLock()
        self._pending = deque()
        self._is_dispatching = False
        self._is_reducing = False

        self._dispatch = self._dispatch_core

    def _ensure_not_reducing(self, operation: str) -> None:
        if self._is_reducing:
            raise ReducerInProgressError(
                f"Cannot call {operation} while the reducer is executing"
            )

    def _notify(self) -> None:
        for subscription in list(self._subscriptions):
            subscription.listener()

    def _reduce(self, action: A) -> None:
        self._is_reducing = True

        try:
            state = self._reducer(self._state, action)
        except Exception:
            logger.debug(
                "Reducer failed on %r, state left unchanged",
                get_action_type(action)
            )
            raise
        finally:
            self._is_reducing = False

        self._state = state

        logger.debug("Reduced %r", get_action_type(action))

        self._notify()

    def _dispatch_core(self, action: A) -> A:
        with self._lock:
            self._ensure_not_reducing("dispatch()")

            if self._is_dispatching:
                self._pending.append(action)

                logger.debug(
                    "Queued %r behind the running dispatch",
                    get_action_type(action)
                )

                return action

            self._is_dispatching = True

            try:
                self._reduce(action)

                while self._pending:
                    self._reduce(self._pending.popleft())
            finally:
                self._is_dispatching = False

                if self._pending:
                    logger.warning(
                        "Discarding %d queued action(s) after a failed dispatch",
                        len(self._pending)
                    )
                    self._pending.clear()

            return action

    def dispatch(self, action: A) -> Any:
        return self._dispatch(action)

    def get_state(self) -> S:
        with self._lock:
            self._ensure_not_reducing("get_state()")

            return self._state

    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        if not callable(subscriber):
            raise TypeError(f"Expected a callable subscriber, got {subscriber!r}")

        with self._lock:
            self._ensure_not_reducing("subscribe()")

            subscription = _Subscription(subscriber)
            self._subscriptions.append(subscription)

            logger.debug("Subscribed, %d subscriber(s)", len(self._subscriptions))

        def unsubscribe() -> None:
            with self._lock:
                if not subscription.active:
                    return

                self._ensure_not_reducing("unsubscribe()")

                subscription.active = False
                self._subscriptions.remove(subscription)

                logger.debug(
                    "Unsubscribed, %d subscriber(s)",
                    len(self._subscriptions)
                )

        return unsubscribe


Middleware = Callable[[Store[S, A], Dispatch, A], Any]


def _apply_middleware(store: Store[S, A], middleware: Sequence[Middleware]) -> None:
    dispatch: Dispatch = store._dispatch_core

    for callable_ in reversed(middleware):
        dispatch = _bind_middleware(store, callable_, dispatch)

    store._dispatch = dispatch


def _bind_middleware(
    store: Store[S, A],
    middleware: Middleware,
    next_dispatch: Dispatch
) -> Dispatch:
    def dispatch(action: A) -> Any:
        return middleware(store, next_dispatch, action)

    return dispatch


_MISSING: Any = object()


def create_store(
    reducer: Reducer,
    initial_state: Any = _MISSING,
    *,
    initial_state_factory: Optional[StateFactory] = None,
    middleware: Sequence[Middleware] = ()
) -> Store[Any, Any]:
    if not callable(reducer):
        raise TypeError(f"Expected a callable reducer, got {reducer!r}")

    if initial_state is not _MISSING and initial_state_factory is not None:
        raise TypeError(
            "Pass either initial_state or initial_state_factory, not both"
        )

    if initial_state is not _MISSING:
        state = initial_state
        source = "initial_state"
    elif initial_state_factory is not None:
        state = initial_state_factory()
        source = "initial_state_factory"
    else:
        state = reducer(None, INIT)
        source = "reducer default"

    logger.debug("Creating store with state from %s", source)

    store: Store[Any, Any] = Store(reducer, state)

    if middleware:
        _apply_middleware(store, middleware)

    return store
