"""GUI tests for TableWidget and FlashBar."""
import unittest

import pytest

try:
    import tkinter as tk
    TKINTER_AVAILABLE = True
except ImportError:
    TKINTER_AVAILABLE = False

from resource_browser.ui.Flash import Flash
from resource_browser.ui.FlashBar import FlashBar
from resource_browser.ui.SelectableTable import SelectableTable
from resource_browser.ui.TableWidget import MARK_TAG, TableWidget


pytestmark = pytest.mark.gui

HEADER = ["NAMESPACE", "NAME", "PAUSED"]
ROWS = [("ns/a", ["ns", "a", "false"]), ("ns/b", ["ns", "b", "true"])]


@unittest.skipUnless(TKINTER_AVAILABLE, "tkinter not available")
class TestTableWidgetGui(unittest.TestCase):

    def setUp(self):
        try:
            self.root = tk.Tk()
            self.root.withdraw()
        except tk.TclError as e:
            self.skipTest(f"tkinter initialization failed: {e}")
        self.table = SelectableTable()
        self.widget = TableWidget(self.root, self.table)

    def tearDown(self):
        self.root.destroy()

    def test_renders_rows_and_columns(self):
        self.table.update(HEADER, ROWS)

        self.assertEqual(list(self.widget.tree['columns']), HEADER)
        self.assertEqual(list(self.widget.tree.get_children()), ["ns/a", "ns/b"])
        self.assertEqual(self.widget.tree.selection(), ("ns/a",))

    def test_marked_rows_tagged(self):
        self.table.update(HEADER, ROWS)

        self.table.toggle_mark("ns/b")

        self.assertIn(MARK_TAG, self.widget.tree.item("ns/b", 'tags'))

    def test_tree_selection_moves_model_cursor(self):
        self.table.update(HEADER, ROWS)

        self.widget.tree.selection_set("ns/b")
        self.root.update()

        self.assertEqual(self.table.cursor, "ns/b")


@unittest.skipUnless(TKINTER_AVAILABLE, "tkinter not available")
class TestFlashBarGui(unittest.TestCase):

    def setUp(self):
        try:
            self.root = tk.Tk()
            self.root.withdraw()
        except tk.TclError as e:
            self.skipTest(f"tkinter initialization failed: {e}")
        self.flash = Flash()
        self.bar = FlashBar(self.root, self.flash, delay=60)

    def tearDown(self):
        self.root.destroy()

    def test_shows_message(self):
        self.flash.info("[%d] %s paused successfully", 1, "deployment")

        self.assertEqual(self.bar.cget('text'), "[1] deployment paused successfully")

    def test_error_color(self):
        self.flash.err(RuntimeError("failed to Pause: boom"))

        self.assertEqual(self.bar.cget('fg'), FlashBar.COLORS['error'])

    def test_clear_empties_label(self):
        self.flash.info("x")

        self.flash.clear()

        self.assertEqual(self.bar.cget('text'), "")


if __name__ == '__main__':
    unittest.main()
