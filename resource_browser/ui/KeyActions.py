"""
KeyActions - key bindings of a view.

A KeyAction pairs a description shown in the hint bar with a handler. Handlers
receive the triggering event and return it when they did not consume it, or
None when they did.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

KEY_Z = "z"
KEY_SPACE = "space"
KEY_ESCAPE = "Escape"

ActionHandler = Callable[[Any], Any]


@dataclass
class KeyAction:
    """
    Attributes:
        description: Label shown in the hint bar
        action: Handler invoked on key press
        visible: Show the action in the hint bar
        dangerous: Action mutates cluster state
    """
    description: str
    action: ActionHandler
    visible: bool = False
    dangerous: bool = False


class KeyActions:
    """Ordered mapping of key name to KeyAction."""

    def __init__(self):
        self._actions: Dict[str, KeyAction] = {}

    def add(self, key: str, action: KeyAction) -> None:
        self._actions[key] = action

    def delete(self, key: str) -> None:
        self._actions.pop(key, None)

    def get(self, key: str) -> Optional[KeyAction]:
        return self._actions.get(key)

    def clear(self) -> None:
        self._actions.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._actions

    def __len__(self) -> int:
        return len(self._actions)

    def hints(self) -> List[Tuple[str, str]]:
        """Returns (key, description) of visible actions, sorted by key."""
        return sorted(
            (key, action.description)
            for key, action in self._actions.items()
            if action.visible
        )

    def dispatch(self, key: str, event: Any = None, read_only: bool = False) -> Any:
        """
        Run the action bound to `key`.

        Dangerous actions never run on a read-only host, even when a view
        registered one.

        Returns:
            The event when no action consumed it, otherwise the handler's result
        """
        action = self._actions.get(key)
        if action is None:
            return event
        if action.dangerous and read_only:
            logger.warning("Refusing dangerous action %r in read-only mode", action.description)
            return None
        logger.debug("Dispatching key %r -> %s", key, action.description)
        return action.action(event)
