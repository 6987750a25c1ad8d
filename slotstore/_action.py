from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict


__all__ = (
    "Action",
    "ActionCreator",
    "INIT",

    "create_action",
    "get_action_type"
)


class Action(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    type: str
    payload: Any = None


ActionCreator = Callable[..., Action]


INIT = Action(type="@@slotstore/INIT")


def get_action_type(action: Any) -> Optional[str]:
    """``type`` of an Action, a mapping or any object, else ``None``."""
    if isinstance(action, Mapping):
        return action.get("type")

    return getattr(action, "type", None)


def create_action(
    action_type: str,
    prepare: Optional[Callable[..., Any]] = None
) -> ActionCreator:
    def action_creator(*args: Any, **kwargs: Any) -> Action:
        if prepare is not None:
            return Action(type=action_type, payload=prepare(*args, **kwargs))

        if kwargs or len(args) > 1:
            raise TypeError(
                f"{action_type!r} takes at most one positional payload "
                "unless a prepare function is given"
            )

        if args:
            return Action(type=action_type, payload=args[0])

        return Action(type=action_type)

    setattr(action_creator, "type", action_type)

    return action_creator
