"""
ModalForm - modal dialog wrapping a Form.

The dialog is a plain object until mount() renders it into a tk.Toplevel.
Escape and the window close button invoke the done-callback with (-1, "").
"""
import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, List, Optional

from resource_browser.ui.Form import ALIGN_CENTER, ALIGN_LEFT, ALIGN_RIGHT, Form

logger = logging.getLogger(__name__)

DoneFunc = Callable[[int, str], None]

_BUTTON_SIDES = {ALIGN_LEFT: tk.LEFT, ALIGN_CENTER: tk.LEFT, ALIGN_RIGHT: tk.RIGHT}


class ModalForm:
    """
    Attributes:
        title: Window title
        form: Form rendered below the prompt text
        text: Prompt text
    """

    PADDING_X = 16
    PADDING_Y = 12
    FONT_TEXT = ("Arial", 11)
    FONT_LABEL = ("Arial", 10)

    def __init__(self, title: str, form: Form):
        self.title = title
        self.form = form
        self.text = ""
        self._done_func: Optional[DoneFunc] = None
        self._window: Optional[tk.Toplevel] = None
        self._tk_buttons: List[tk.Button] = []

    def set_text(self, text: str) -> 'ModalForm':
        self.text = text
        return self

    def set_done_func(self, done_func: DoneFunc) -> 'ModalForm':
        self._done_func = done_func
        return self

    def done(self, button_index: int = -1, button_label: str = "") -> None:
        """Fire the done-callback, if any."""
        if self._done_func is not None:
            self._done_func(button_index, button_label)

    @property
    def is_mounted(self) -> bool:
        return self._window is not None

    def mount(self, parent: tk.Misc) -> tk.Toplevel:
        """Render the dialog as a modal Toplevel over `parent`."""
        if self._window is not None:
            return self._window

        window = tk.Toplevel(parent)
        window.title(self.title)
        window.transient(parent)
        window.resizable(False, False)
        self._window = window

        frame = tk.Frame(window, padx=self.PADDING_X, pady=self.PADDING_Y)
        frame.pack(fill=tk.BOTH, expand=True)

        tk.Label(frame, text=self.text, font=self.FONT_TEXT, justify=tk.LEFT).pack(
            anchor=tk.W, pady=(0, 8)
        )

        self._build_items(frame)
        self._build_buttons(frame)

        window.bind('<Escape>', lambda event: self.done())
        window.protocol('WM_DELETE_WINDOW', self.done)

        try:
            window.grab_set()
        except tk.TclError as e:
            # Window not viewable yet (e.g. withdrawn parent); dialog still works non-modally
            logger.debug("ModalForm: grab_set failed: %s", e)

        if self.form.buttons:
            window.after_idle(self._focus_first_button)
        return window

    def unmount(self) -> None:
        """Destroy the rendered window. Safe to call when not mounted."""
        if self._window is None:
            return
        window, self._window = self._window, None
        self._tk_buttons = []
        try:
            window.grab_release()
            window.destroy()
        except tk.TclError as e:
            logger.debug("ModalForm: window already destroyed: %s", e)

    def _build_items(self, frame: tk.Frame) -> None:
        for item in self.form.items:
            row = tk.Frame(frame)
            row.pack(fill=tk.X, pady=self.form.item_padding)

            label = tk.Label(row, text=item.label, font=self.FONT_LABEL)
            if self.form.label_color:
                label.config(fg=self.form.label_color)
            label.pack(side=tk.LEFT, padx=(0, 8))

            combo = ttk.Combobox(row, values=item.options, state='readonly', width=12)
            combo.current(item.current)
            combo.bind('<<ComboboxSelected>>', lambda event, dd=item, cb=combo: dd.select(cb.current()))
            combo.pack(side=tk.LEFT)

    def _build_buttons(self, frame: tk.Frame) -> None:
        button_row = tk.Frame(frame)
        if self.form.buttons_align == ALIGN_CENTER:
            button_row.pack(pady=(10, 0))
        else:
            button_row.pack(fill=tk.X, pady=(10, 0))

        side = _BUTTON_SIDES.get(self.form.buttons_align, tk.LEFT)
        for button in self.form.buttons:
            options = {'text': button.label, 'command': button.press, 'width': 8}
            if self.form.button_background_color:
                options['bg'] = self.form.button_background_color
            if self.form.button_text_color:
                options['fg'] = self.form.button_text_color
            if button.background_color_activated:
                options['activebackground'] = button.background_color_activated
            if button.label_color_activated:
                options['activeforeground'] = button.label_color_activated
            tk_button = tk.Button(button_row, **options)
            tk_button.bind('<Return>', lambda event, b=button: b.press())
            tk_button.pack(side=side, padx=4)
            self._tk_buttons.append(tk_button)

    def _focus_first_button(self) -> None:
        if self._window is not None and self._tk_buttons:
            self._tk_buttons[0].focus_set()
