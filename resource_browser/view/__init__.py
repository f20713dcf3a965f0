"""View subsystem - resource viewers, extenders and the application window."""
from resource_browser.view.App import App
from resource_browser.view.Browser import Browser
from resource_browser.view.PauseExtender import PauseExtender

__all__ = ['App', 'Browser', 'PauseExtender']
