"""Data access subsystem - API client, execution context and resource accessors."""
from resource_browser.dao.Accessor import (
    Accessor,
    GenericAccessor,
    Pausable,
    accessor_for,
    register_accessor,
    split_path,
)
from resource_browser.dao.DeploymentAccessor import DeploymentAccessor
from resource_browser.dao.ExecutionContext import ExecutionContext
from resource_browser.dao.Gvr import Gvr
from resource_browser.dao.KubeClient import KubeClient

__all__ = [
    'Accessor',
    'DeploymentAccessor',
    'ExecutionContext',
    'GenericAccessor',
    'Gvr',
    'KubeClient',
    'Pausable',
    'accessor_for',
    'register_accessor',
    'split_path',
]
