# resource_browser/__init__.py
from .dao import DeploymentAccessor, KubeClient, Pausable
from .view import App, Browser, PauseExtender

__all__ = [
    'App',
    'Browser',
    'DeploymentAccessor',
    'KubeClient',
    'Pausable',
    'PauseExtender'
]
