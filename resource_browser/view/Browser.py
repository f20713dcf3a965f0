"""
Browser - table view of one resource kind.

Extenders add behaviour by registering bind-keys functions; they run every
time the key actions are rebuilt, so an extender can decide at that point
whether its action applies (for instance not on a read-only host).
"""
import logging
from typing import Any, Callable, List

from resource_browser.dao import ExecutionContext, Gvr, accessor_for
from resource_browser.errors import BrowserError
from resource_browser.ui.KeyActions import KEY_SPACE, KeyAction, KeyActions
from resource_browser.ui.SelectableTable import SelectableTable
from resource_browser.view.App import App
from resource_browser.view.ViewerState import ViewerState

logger = logging.getLogger(__name__)

BindKeysFn = Callable[[KeyActions], None]


class Browser:
    """
    Resource viewer backed by an accessor.

    Attributes:
        namespace: Listed namespace, "" for all namespaces
        table: Table model shown by the view
        actions: Current key actions
        state: Lifecycle state; input and refresh only happen while running
    """

    def __init__(self, app: App, gvr: Gvr, namespace: str = ""):
        self._app = app
        self._gvr = gvr
        self.namespace = namespace
        self.table = SelectableTable()
        self.actions = KeyActions()
        self.state = ViewerState()
        self._bind_keys_fns: List[BindKeysFn] = [self._bind_default_keys]

    def app(self) -> App:
        return self._app

    def gvr(self) -> Gvr:
        return self._gvr

    def get_table(self) -> SelectableTable:
        return self.table

    def add_bind_keys_fn(self, fn: BindKeysFn) -> None:
        self._bind_keys_fns.append(fn)

    def refresh_actions(self) -> None:
        """Rebuild key actions from all registered bind-keys functions."""
        self.actions.clear()
        for fn in self._bind_keys_fns:
            fn(self.actions)

    def init(self) -> None:
        """Build key actions and start processing input."""
        self.refresh_actions()
        self.start()

    def start(self) -> None:
        """Resume input processing and table refresh."""
        if self.state.get_state() != 'shutdown':
            self.state.set_state('running')

    def stop(self) -> None:
        """Suspend input processing and table refresh."""
        if self.state.is_running():
            self.state.set_state('suspended')

    def shutdown(self) -> None:
        self.state.set_state('shutdown')

    def handle_key(self, key: str, event: Any = None) -> Any:
        """
        Dispatch a key press to the bound action.

        Returns:
            The event when not consumed; keys are ignored while not running
        """
        if not self.state.is_running():
            logger.debug("Ignoring key %r while %s", key, self.state.get_state())
            return event
        return self.actions.dispatch(key, event, read_only=self._app.is_read_only())

    def refresh(self) -> None:
        """Reload table rows from the accessor. Skipped while not running."""
        if not self.state.is_running():
            return
        try:
            accessor = accessor_for(self._app.factory, self._gvr)
            with ExecutionContext.with_timeout(self._app.call_timeout()) as ctx:
                rows = accessor.list(ctx, self.namespace)
        except BrowserError as e:
            logger.error("Listing %s failed: %s", self._gvr, e)
            self._app.flash().err(e)
            return
        self.table.update(accessor.header(), rows)

    def _bind_default_keys(self, aa: KeyActions) -> None:
        aa.add(KEY_SPACE, KeyAction("Mark", self._mark_cmd, visible=True))

    def _mark_cmd(self, event: Any) -> Any:
        self.table.toggle_mark()
        return None
