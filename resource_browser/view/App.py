"""
App - shared services of the browser.

Views reach configuration, styles, the flash sink, the overlay page registry
and the API client factory through the App instance.
"""
from typing import Any, Dict, Optional

from resource_browser import BrowserConfig
from resource_browser.Styles import Styles
from resource_browser.dao.KubeClient import KubeClient
from resource_browser.ui.Flash import Flash
from resource_browser.ui.Pages import Pages


class App:
    """
    Attributes:
        config: Application configuration dictionary
        factory: KubeClient used by accessors
        styles: Styles built from config
        content: Overlay page registry (dialogs)
    """

    def __init__(
        self,
        config: Dict[str, Any],
        factory: KubeClient,
        flash: Optional[Flash] = None,
        content: Optional[Pages] = None
    ):
        self.config = config
        self.factory = factory
        self.styles = Styles(config)
        self.content = content if content is not None else Pages()
        self._flash = flash if flash is not None else Flash()

    def flash(self) -> Flash:
        return self._flash

    def is_read_only(self) -> bool:
        return BrowserConfig.is_read_only(self.config)

    def call_timeout(self) -> float:
        return BrowserConfig.call_timeout(self.config)

    def refresh_rate(self) -> float:
        return float(self.config['browser']['refresh_rate'])

    def flash_delay(self) -> float:
        return float(self.config['browser']['flash_delay'])
