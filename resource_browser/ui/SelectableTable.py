"""
SelectableTable - table model with a cursor row and marked rows.

Widget-free so views and extenders can be exercised without a display.
TableWidget renders it into a ttk.Treeview.
"""
import threading
from typing import Callable, List, Optional, Sequence, Tuple

Row = Tuple[str, List[str]]
TableObserver = Callable[[], None]


class SelectableTable:
    """
    Rows keyed by resource path.

    Selection semantics: marked rows win, in table order; without marks the
    row under the cursor is the selection; an empty table selects nothing.
    """

    def __init__(self, header: Optional[Sequence[str]] = None):
        self._lock = threading.RLock()
        self._header: List[str] = list(header or [])
        self._rows: List[Row] = []
        self._cursor: Optional[str] = None
        self._marks: set = set()
        self._observers: List[TableObserver] = []

    @property
    def header(self) -> List[str]:
        with self._lock:
            return list(self._header)

    @property
    def rows(self) -> List[Row]:
        with self._lock:
            return list(self._rows)

    @property
    def cursor(self) -> Optional[str]:
        with self._lock:
            return self._cursor

    def register_observer(self, observer: TableObserver) -> None:
        with self._lock:
            self._observers.append(observer)

    def update(self, header: Sequence[str], rows: Sequence[Row]) -> None:
        """
        Replace table content.

        Cursor and marks survive for ids still present; the cursor falls back
        to the first row otherwise.
        """
        with self._lock:
            self._header = list(header)
            self._rows = [(path, list(cells)) for path, cells in rows]
            ids = {path for path, _ in self._rows}
            self._marks &= ids
            if self._cursor not in ids:
                self._cursor = self._rows[0][0] if self._rows else None
        self._notify()

    def select_row(self, path: str) -> None:
        """Move the cursor to `path`. Unknown ids and the current cursor are ignored."""
        with self._lock:
            if path == self._cursor or path not in self._ids():
                return
            self._cursor = path
        self._notify()

    def toggle_mark(self, path: Optional[str] = None) -> None:
        """Toggle the mark of `path`, or of the cursor row when omitted."""
        with self._lock:
            path = path if path is not None else self._cursor
            if path is None or path not in self._ids():
                return
            if path in self._marks:
                self._marks.discard(path)
            else:
                self._marks.add(path)
        self._notify()

    def clear_marks(self) -> None:
        with self._lock:
            self._marks.clear()
        self._notify()

    def is_marked(self, path: str) -> bool:
        with self._lock:
            return path in self._marks

    def selected_items(self) -> List[str]:
        """Returns the selected ids, see class docstring."""
        with self._lock:
            if self._marks:
                return [path for path, _ in self._rows if path in self._marks]
            if self._cursor is None:
                return []
            return [self._cursor]

    def header_index(self, name: str) -> Optional[int]:
        """Returns the index of column `name`, or None when absent."""
        with self._lock:
            try:
                return self._header.index(name)
            except ValueError:
                return None

    def cell(self, path: str, index: int) -> Optional[str]:
        """
        Returns the cell at column `index` of row `path`.

        Returns:
            Cell value, "" when the row is short, None when there is no such row
        """
        with self._lock:
            for row_path, cells in self._rows:
                if row_path == path:
                    return cells[index] if 0 <= index < len(cells) else ""
            return None

    def _ids(self) -> set:
        return {path for path, _ in self._rows}

    def _notify(self) -> None:
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            observer()
