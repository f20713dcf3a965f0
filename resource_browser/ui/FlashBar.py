import tkinter as tk
from typing import Optional

from resource_browser.ui.Flash import LEVEL_CLEAR, LEVEL_ERROR, LEVEL_INFO, LEVEL_WARN, Flash


class FlashBar(tk.Label):
    """
    Status line rendering a Flash model.

    Observes Flash and clears the message after `delay` seconds.

    Attributes:
        flash: Observed Flash model
        delay: Seconds before a message is cleared
    """

    COLORS = {
        LEVEL_INFO: 'navajowhite',
        LEVEL_WARN: 'orange',
        LEVEL_ERROR: 'orangered',
    }

    def __init__(self, parent: tk.Widget, flash: Flash, delay: float = 5.0):
        super().__init__(parent, text="", anchor='w', bg='black', fg=self.COLORS[LEVEL_INFO])
        self.flash = flash
        self.delay = delay
        self._clear_job: Optional[str] = None
        self.flash.register_observer(self._on_flash)

    def _on_flash(self, level: str, message: str) -> None:
        if self._clear_job is not None:
            self.after_cancel(self._clear_job)
            self._clear_job = None

        if level == LEVEL_CLEAR:
            self.config(text="")
            return

        self.config(text=message, fg=self.COLORS.get(level, self.COLORS[LEVEL_INFO]))
        self._clear_job = self.after(int(self.delay * 1000), self.flash.clear)
