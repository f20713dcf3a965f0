import logging
import tkinter as tk
from typing import Optional

from resource_browser.ui.FlashBar import FlashBar
from resource_browser.ui.TableWidget import TableWidget
from resource_browser.view.Browser import Browser

logger = logging.getLogger(__name__)


class AppWindow:
    """Top-level browser window.
    Owns tkinter root, renders the viewer's table, and routes keys to the viewer.
    """

    def __init__(self, viewer: Browser, title: str = "Resource Browser"):
        """Initialize TK root and all GUI components.

        Args:
            viewer: Viewer (possibly wrapped by extenders) shown in the window
            title: Window title
        """
        self.viewer = viewer
        app = viewer.app()

        self.root = tk.Tk()
        self.root.title(title)
        self.root.geometry("1000x600")
        app.content.attach(self.root)

        main_frame = tk.Frame(self.root, padx=10, pady=10)
        main_frame.pack(fill=tk.BOTH, expand=True)

        self.title_label = tk.Label(main_frame, font=("Arial", 14, "bold"), anchor='w')
        self.title_label.pack(fill=tk.X, pady=(0, 6))

        self.hints_label = tk.Label(main_frame, font=("Arial", 10), anchor='w', fg='dodgerblue')
        self.hints_label.pack(fill=tk.X, pady=(0, 6))

        self.table_widget = TableWidget(main_frame, viewer.get_table())
        self.table_widget.pack(fill=tk.BOTH, expand=True)

        self.flash_bar = FlashBar(main_frame, app.flash(), delay=app.flash_delay())
        self.flash_bar.pack(fill=tk.X, pady=(6, 0))

        self.root.bind('<Key>', self._on_key)
        self.viewer.state.register_observer(self._on_state_change)

        self._refresh_job: Optional[str] = None

    def start(self) -> None:
        """Initialize the viewer and start the periodic refresh."""
        self.viewer.init()
        self._update_title()
        self._update_hints()
        self._tick()

    def stop(self) -> None:
        if self._refresh_job is not None:
            self.root.after_cancel(self._refresh_job)
            self._refresh_job = None
        self.viewer.shutdown()

    def get_root(self) -> tk.Tk:
        return self.root

    def _tick(self) -> None:
        try:
            self.viewer.refresh()
        finally:
            # Reschedule even when refresh raises
            delay_ms = int(self.viewer.app().refresh_rate() * 1000)
            self._refresh_job = self.root.after(delay_ms, self._tick)

    def _on_key(self, event: tk.Event) -> None:
        key = event.keysym if event.keysym == 'space' else event.char
        if not key:
            return
        self.viewer.handle_key(key, event)

    def _on_state_change(self, old_state: str, new_state: str) -> None:
        self._update_title()

    def _update_title(self) -> None:
        namespace = self.viewer.namespace or "all"
        text = f"{self.viewer.gvr().r()}({namespace})"
        if self.viewer.state.get_state() == 'suspended':
            text += " [suspended]"
        self.title_label.config(text=text)

    def _update_hints(self) -> None:
        hints = "   ".join(f"<{key}> {description}" for key, description in self.viewer.actions.hints())
        self.hints_label.config(text=hints)
