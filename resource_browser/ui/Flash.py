"""
Flash - transient status message shown below the table.

Views report outcomes here; the message is also written to the log so the
history survives after the flash bar clears.
"""
import logging
import threading
from typing import Callable, List

logger = logging.getLogger(__name__)

FlashObserver = Callable[[str, str], None]

LEVEL_INFO = 'info'
LEVEL_WARN = 'warn'
LEVEL_ERROR = 'error'
LEVEL_CLEAR = 'clear'


class Flash:
    """
    Fire-and-forget feedback sink with observer pattern.

    Observers receive (level, message). A cleared flash is reported as
    (LEVEL_CLEAR, "").
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._level = LEVEL_CLEAR
        self._message = ""
        self._observers: List[FlashObserver] = []

    @property
    def level(self) -> str:
        with self._lock:
            return self._level

    @property
    def message(self) -> str:
        with self._lock:
            return self._message

    def register_observer(self, observer: FlashObserver) -> None:
        with self._lock:
            self._observers.append(observer)

    def info(self, fmt: str, *args) -> None:
        msg = fmt % args if args else fmt
        logger.info(msg)
        self._set(LEVEL_INFO, msg)

    def warn(self, fmt: str, *args) -> None:
        msg = fmt % args if args else fmt
        logger.warning(msg)
        self._set(LEVEL_WARN, msg)

    def err(self, error: BaseException) -> None:
        msg = str(error)
        logger.error(msg)
        self._set(LEVEL_ERROR, msg)

    def clear(self) -> None:
        self._set(LEVEL_CLEAR, "")

    def _set(self, level: str, message: str) -> None:
        with self._lock:
            self._level = level
            self._message = message
            observers = list(self._observers)

        # Notify outside the lock, observers may read level/message
        for observer in observers:
            observer(level, message)
