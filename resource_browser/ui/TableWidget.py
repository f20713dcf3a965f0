"""
TableWidget - ttk.Treeview rendering a SelectableTable.

The widget is a view only: cursor moves and marks go to the model, and the
model notifies the widget to re-render.
"""
import tkinter as tk
from tkinter import ttk

from resource_browser.ui.SelectableTable import SelectableTable

MARK_TAG = 'marked'


class TableWidget(ttk.Frame):
    """
    Attributes:
        table: Rendered table model
        tree: Underlying Treeview
    """

    def __init__(self, parent: tk.Widget, table: SelectableTable):
        super().__init__(parent)
        self.table = table

        self.tree = ttk.Treeview(self, show='headings', selectmode='browse')
        scrollbar = ttk.Scrollbar(self, orient=tk.VERTICAL, command=self.tree.yview)
        self.tree.configure(yscrollcommand=scrollbar.set)
        self.tree.tag_configure(MARK_TAG, background='darkslateblue', foreground='white')

        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)

        self.tree.bind('<<TreeviewSelect>>', self._on_select)
        self._rendering = False

        self.table.register_observer(self.render)
        self.render()

    def render(self) -> None:
        """Rebuild columns and rows from the model."""
        self._rendering = True
        try:
            header = self.table.header
            if list(self.tree['columns']) != header:
                self.tree['columns'] = header
                for name in header:
                    self.tree.heading(name, text=name, anchor='w')
                    self.tree.column(name, anchor='w', width=120, stretch=True)

            self.tree.delete(*self.tree.get_children())
            for path, cells in self.table.rows:
                tags = (MARK_TAG,) if self.table.is_marked(path) else ()
                self.tree.insert('', tk.END, iid=path, values=cells, tags=tags)

            cursor = self.table.cursor
            if cursor is not None and self.tree.exists(cursor):
                self.tree.selection_set(cursor)
                self.tree.see(cursor)
        finally:
            self._rendering = False

    def _on_select(self, event=None) -> None:
        if self._rendering:
            return
        selection = self.tree.selection()
        if selection:
            self.table.select_row(selection[0])
