"""
Pages - registry of overlay pages (dialogs) keyed by name.

A page is any object with mount(parent) and unmount(). Pages are rendered
only when the registry is attached to a Tk root, which keeps the registry
usable headless.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class PageEntry:
    key: str
    page: Any
    resize: bool
    visible: bool


class Pages:
    """Keyed overlay pages; adding an existing key replaces the old page."""

    def __init__(self, root=None):
        self._root = root
        self._pages: Dict[str, PageEntry] = {}

    def attach(self, root) -> None:
        """Attach a Tk root; pages shown afterwards are rendered on it."""
        self._root = root

    def add_page(self, key: str, page: Any, resize: bool, visible: bool) -> None:
        if key in self._pages:
            logger.warning("Pages: replacing page %r", key)
            self.remove_page(key)
        self._pages[key] = PageEntry(key, page, resize, visible)
        if visible:
            self.show_page(key)

    def show_page(self, key: str) -> None:
        entry = self._pages.get(key)
        if entry is None:
            logger.warning("Pages: no page %r to show", key)
            return
        entry.visible = True
        if self._root is not None:
            entry.page.mount(self._root)

    def remove_page(self, key: str) -> None:
        """Remove and unmount page `key`. Removing an absent key is a no-op."""
        entry = self._pages.pop(key, None)
        if entry is None:
            return
        entry.page.unmount()

    def has_page(self, key: str) -> bool:
        return key in self._pages

    def get_page(self, key: str) -> Optional[Any]:
        entry = self._pages.get(key)
        return entry.page if entry is not None else None

    def visible_keys(self) -> List[str]:
        return [key for key, entry in self._pages.items() if entry.visible]
