from ._action import (
    INIT,
    Action,
    ActionCreator,
    create_action,
    get_action_type
)
from ._reducer import (
    Handler,
    Reducer,
    combine_reducers,
    create_reducer,
    on
)
from ._store import (
    Dispatch,
    Middleware,
    ReducerInProgressError,
    StateFactory,
    Store,
    StoreError,
    Subscriber,
    Unsubscribe,
    create_store
)


__all__ = (
    "Action",
    "ActionCreator",
    "Dispatch",
    "Handler",
    "INIT",
    "Middleware",
    "Reducer",
    "ReducerInProgressError",
    "StateFactory",
    "Store",
    "StoreError",
    "Subscriber",
    "Unsubscribe",

    "combine_reducers",
    "create_action",
    "create_reducer",
    "create_store",
    "get_action_type",
    "on"
)
