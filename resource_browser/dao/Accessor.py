"""
Accessor - resource access layer between views and the API server.

Views never talk HTTP themselves. They look up the accessor registered for the
GVR they display and call its methods. Optional capabilities (pause/resume) are
expressed as Protocols and checked with isinstance() at dispatch time, so a
kind without the capability is a normal branch rather than an exception path.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol, Tuple, Type, runtime_checkable

from resource_browser.dao.ExecutionContext import ExecutionContext
from resource_browser.dao.Gvr import Gvr
from resource_browser.dao.KubeClient import KubeClient
from resource_browser.errors import AccessorError

logger = logging.getLogger(__name__)

# (path, cells) where path is "namespace/name"
Row = Tuple[str, List[str]]


@runtime_checkable
class Pausable(Protocol):
    """Capability of resources that can be paused and resumed."""

    def pause(self, ctx: ExecutionContext, path: str) -> None:
        """Pause the resource at `path`. Raises DaoError on failure."""
        ...

    def resume(self, ctx: ExecutionContext, path: str) -> None:
        """Resume the resource at `path`. Raises DaoError on failure."""
        ...


def split_path(path: str) -> Tuple[str, str]:
    """
    Split "namespace/name" into its parts.

    Returns:
        (namespace, name); namespace is "" when the path has no slash
    """
    if "/" not in path:
        return "", path
    ns, name = path.split("/", 1)
    return ns, name


def format_age(timestamp: Optional[str], now: Optional[datetime] = None) -> str:
    """
    Format an RFC3339 creationTimestamp as a short age such as 5m or 3d.

    Fractional seconds are ignored; an unparsable timestamp renders as "n/a".
    """
    if not timestamp:
        return "n/a"
    seconds_part = timestamp.rstrip("Z").split(".", 1)[0]
    try:
        created = datetime.strptime(seconds_part, "%Y-%m-%dT%H:%M:%S").replace(tzinfo=timezone.utc)
    except ValueError:
        logger.debug("Unparsable creationTimestamp: %r", timestamp)
        return "n/a"
    now = now or datetime.now(timezone.utc)
    seconds = max(0, int((now - created).total_seconds()))
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        return f"{seconds // 60}m"
    if seconds < 86400:
        return f"{seconds // 3600}h"
    return f"{seconds // 86400}d"


class Accessor:
    """
    Base accessor: lists the objects of one namespaced kind.

    Attributes:
        factory: KubeClient used for API calls
        gvr: Kind handled by this accessor
    """

    HEADER = ["NAMESPACE", "NAME", "AGE"]

    def __init__(self):
        self.factory: Optional[KubeClient] = None
        self.gvr: Optional[Gvr] = None

    def init(self, factory: KubeClient, gvr: Gvr) -> None:
        self.factory = factory
        self.gvr = gvr

    def header(self) -> List[str]:
        return list(self.HEADER)

    def collection_path(self, namespace: str = "") -> str:
        """REST path of the collection, all namespaces when `namespace` is empty."""
        prefix = self.gvr.api_prefix()
        if namespace:
            return f"{prefix}/namespaces/{namespace}/{self.gvr.r()}"
        return f"{prefix}/{self.gvr.r()}"

    def object_path(self, path: str) -> str:
        ns, name = split_path(path)
        return f"{self.collection_path(ns or 'default')}/{name}"

    def list(self, ctx: ExecutionContext, namespace: str = "") -> List[Row]:
        """
        List the objects of the kind as table rows.

        Raises:
            DaoError: on API failure
        """
        payload = self.factory.get(ctx, self.collection_path(namespace))
        return [self.render(item) for item in payload.get("items", [])]

    def render(self, item: Dict) -> Row:
        meta = item.get("metadata", {})
        ns, name = meta.get("namespace", ""), meta.get("name", "")
        path = f"{ns}/{name}" if ns else name
        return path, [ns, name, format_age(meta.get("creationTimestamp"))]


class GenericAccessor(Accessor):
    """Read-only accessor for kinds without extra capabilities."""


_REGISTRY: Dict[str, Type[Accessor]] = {}


def register_accessor(gvr: str, accessor_cls: Type[Accessor]) -> None:
    _REGISTRY[str(Gvr.parse(gvr))] = accessor_cls


def accessor_for(factory: KubeClient, gvr: Gvr) -> Accessor:
    """
    Returns an initialized accessor for `gvr`.

    Raises:
        AccessorError: if no accessor is registered for the kind
    """
    accessor_cls = _REGISTRY.get(str(gvr))
    if accessor_cls is None:
        raise AccessorError(f"no accessor registered for {gvr}")
    accessor = accessor_cls()
    accessor.init(factory, gvr)
    return accessor


for _gvr in ("v1/pods", "v1/services", "v1/configmaps", "apps/v1/statefulsets", "apps/v1/daemonsets"):
    register_accessor(_gvr, GenericAccessor)
