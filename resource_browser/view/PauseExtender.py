"""
PauseExtender - pause/resume action for views of pausable resources.

Workflow of one invocation:
    selection -> default action -> confirmation dialog -> batch execution -> flash

The dialog shape depends on selection size. A single item gets a fixed action
derived from its PAUSED column; several items get an action drop-down that
defaults to Pause. On OK every selected item is paused or resumed in order
under one shared deadline, stopping at the first failure. Items already
changed stay changed.
"""
import logging
from typing import Any, List, Optional

from resource_browser.Styles import DialogStyles
from resource_browser.dao import ExecutionContext, Pausable, accessor_for
from resource_browser.errors import ActionError, BrowserError, CapabilityError, DaoError, ReadError
from resource_browser.ui.Form import ALIGN_CENTER, Form
from resource_browser.ui.KeyActions import KEY_Z, KeyAction, KeyActions
from resource_browser.ui.ModalForm import ModalForm
from resource_browser.ui.Pages import Pages
from resource_browser.view.Browser import Browser
from resource_browser.view.helpers import singularize

logger = logging.getLogger(__name__)

PAUSE = "Pause"
RESUME = "Resume"
PAUSE_RESUME = "Pause/Resume"

PAUSE_DIALOG_KEY = "pause"
PAUSED_COLUMN = "PAUSED"


class PauseSession:
    """
    State of one open pause dialog.

    Attributes:
        paths: Selected resource paths, in table order
        action: Action OK will apply; the drop-down rewrites it
        modal: Dialog shown for this session
    """

    def __init__(self, pages: Pages, paths: List[str], action: str):
        self._pages = pages
        self.paths = list(paths)
        self.action = action
        self.modal: Optional[ModalForm] = None

    def select_action(self, option: str, index: int) -> None:
        self.action = option

    def show(self, modal: ModalForm) -> None:
        self.modal = modal
        self._pages.add_page(PAUSE_DIALOG_KEY, modal, False, False)
        self._pages.show_page(PAUSE_DIALOG_KEY)

    def dismiss(self) -> None:
        self._pages.remove_page(PAUSE_DIALOG_KEY)


class PauseExtender:
    """
    Adds the pause/resume key action to a Browser.

    Attribute access not defined here is delegated to the wrapped viewer, so
    the extender can stand in wherever the viewer is expected.
    """

    def __init__(self, viewer: Browser):
        self.viewer = viewer
        self.viewer.add_bind_keys_fn(self._bind_keys)

    def __getattr__(self, name: str) -> Any:
        return getattr(self.viewer, name)

    def _bind_keys(self, aa: KeyActions) -> None:
        if self.viewer.app().is_read_only():
            return

        aa.add(KEY_Z, KeyAction(PAUSE_RESUME, self._toggle_pause_cmd, visible=True, dangerous=True))

    def resolve_default_action(self, paths: List[str]) -> str:
        """
        Pick the action the dialog proposes.

        Raises:
            ReadError: single selection whose PAUSED cell cannot be read
        """
        if len(paths) != 1:
            return PAUSE

        if self._value_of(PAUSED_COLUMN, paths[0]) == "true":
            return RESUME
        return PAUSE

    def _toggle_pause_cmd(self, event: Any) -> Any:
        paths = self.viewer.get_table().selected_items()
        if not paths:
            return None

        self.viewer.stop()
        try:
            self._show_dialog(paths)
        finally:
            self.viewer.start()

        return None

    def _show_dialog(self, paths: List[str]) -> None:
        app = self.viewer.app()

        try:
            action = self.resolve_default_action(paths)
        except ReadError as e:
            logger.error("Reading '%s' state failed: %s", PAUSED_COLUMN, e)
            app.flash().err(e)
            return

        styles = app.styles.dialog()
        form = self._make_styled_form(styles)
        session = PauseSession(app.content, paths, action)

        if len(paths) > 1:
            form.add_drop_down("Action:", [PAUSE, RESUME], 0, session.select_action)

        form.add_button("OK", lambda: self._commit(session))
        form.add_button("Cancel", session.dismiss)
        for i in range(2):
            button = form.get_button(i)
            if button is not None:
                button.set_background_color_activated(styles.button_focus_bg_color)
                button.set_label_color_activated(styles.button_focus_fg_color)

        resource = self.viewer.gvr().r()
        confirm = ModalForm(PAUSE_RESUME, form)
        if len(paths) > 1:
            confirm.set_text(f"Pause/Resume [{len(paths)}] {resource}?")
        else:
            confirm.set_text(f"{action} {singularize(resource)} {paths[0]}?")
        confirm.set_done_func(lambda index, label: session.dismiss())

        session.show(confirm)

    def _commit(self, session: PauseSession) -> None:
        """OK handler: run the batch, report, and always dismiss the dialog."""
        app = self.viewer.app()
        try:
            with ExecutionContext.with_timeout(app.call_timeout()) as ctx:
                self._execute(ctx, session.paths, session.action)
        except BrowserError as e:
            app.flash().err(e)
            return
        finally:
            session.dismiss()

        resource = self.viewer.gvr().r()
        if len(session.paths) == 1:
            app.flash().info("[%d] %s paused successfully", len(session.paths), singularize(resource))
        else:
            app.flash().info("%s %s paused successfully", resource, session.paths[0])

    def _execute(self, ctx: ExecutionContext, paths: List[str], action: str) -> None:
        """
        Apply `action` to every path in order, stopping at the first failure.

        Raises:
            AccessorError: the viewed kind has no accessor
            CapabilityError: the accessor cannot pause
            ActionError: unknown action, or a pause/resume call failed
        """
        pauser = self._pauser()
        for path in paths:
            try:
                self._toggle_pause(ctx, pauser, path, action)
            except ActionError as e:
                logger.error("%s %s %s failed: %s", singularize(self.viewer.gvr().r()), path, action, e)
                raise

    def _pauser(self) -> Pausable:
        gvr = self.viewer.gvr()
        accessor = accessor_for(self.viewer.app().factory, gvr)
        if not isinstance(accessor, Pausable):
            raise CapabilityError(f'expecting a pausable resource for "{gvr}"')
        return accessor

    def _toggle_pause(self, ctx: ExecutionContext, pauser: Pausable, path: str, action: str) -> None:
        if action == PAUSE:
            call = pauser.pause
        elif action == RESUME:
            call = pauser.resume
        else:
            raise ActionError(
                f"failed to identify action; must be '{PAUSE}' or '{RESUME}' but is: '{action}'"
            )

        try:
            call(ctx, path)
        except DaoError as e:
            raise ActionError(f"failed to {action}: {e}") from e

    def _value_of(self, column: str, path: str) -> str:
        table = self.viewer.get_table()
        index = table.header_index(column)
        if index is None:
            raise ReadError(f"no column index for {column}")
        value = table.cell(path, index)
        if value is None:
            raise ReadError(f"no row for {path}")
        return value

    @staticmethod
    def _make_styled_form(styles: DialogStyles) -> Form:
        form = Form()
        form.item_padding = 0
        form.buttons_align = ALIGN_CENTER
        form.button_background_color = styles.button_bg_color
        form.button_text_color = styles.button_fg_color
        form.label_color = styles.label_fg_color
        form.field_text_color = styles.field_fg_color
        return form
