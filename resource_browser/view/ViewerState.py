"""
ViewerState - viewer lifecycle state with observer pattern.

Tracks whether a viewer processes input and refreshes its table. Observers are
called with (old_state, new_state) after every transition.

State Machine:
- starting -> running, shutdown
- running -> suspended, shutdown
- suspended -> running, shutdown
- shutdown -> (terminal state)
"""
import threading
from typing import Callable, Dict, List, Set


class ViewerState:
    """
    Manages viewer state with observer pattern.

    Attributes:
        _state: Current state ('starting', 'running', 'suspended', 'shutdown')
        _lock: Thread lock for state mutations
        _observers: Observers receiving (old_state, new_state)
    """

    _VALID_TRANSITIONS: Dict[str, Set[str]] = {
        'starting': {'running', 'shutdown'},
        'running': {'suspended', 'shutdown'},
        'suspended': {'running', 'shutdown'},
        'shutdown': set()
    }

    def __init__(self):
        self._state = 'starting'
        self._lock = threading.Lock()
        self._observers: List[Callable[[str, str], None]] = []

    def get_state(self) -> str:
        with self._lock:
            return self._state

    def is_running(self) -> bool:
        return self.get_state() == 'running'

    def set_state(self, new_state: str) -> None:
        """
        Set new state and notify observers (thread-safe).

        Setting the current state again is a no-op.

        Raises:
            ValueError: on a transition not allowed by the state machine
        """
        with self._lock:
            old_state = self._state
            if new_state == old_state:
                return

            if new_state not in self._VALID_TRANSITIONS[old_state]:
                raise ValueError(
                    f"Invalid state transition: {old_state} -> {new_state}"
                )

            self._state = new_state
            observers = list(self._observers)

        # Notify observers outside the lock to avoid deadlocks
        for observer in observers:
            observer(old_state, new_state)

    def register_observer(self, observer: Callable[[str, str], None]) -> None:
        with self._lock:
            self._observers.append(observer)
