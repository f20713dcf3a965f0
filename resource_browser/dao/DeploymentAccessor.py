"""
DeploymentAccessor - deployments listing plus pause/resume.

A deployment is paused by setting spec.paused; the controller then stops
rolling out template changes until it is resumed.
"""
import logging
from typing import Dict

from resource_browser.dao.Accessor import Accessor, Row, format_age, register_accessor
from resource_browser.dao.ExecutionContext import ExecutionContext

logger = logging.getLogger(__name__)


class DeploymentAccessor(Accessor):
    """Deployment accessor. Satisfies the Pausable protocol."""

    HEADER = ["NAMESPACE", "NAME", "READY", "UP-TO-DATE", "AVAILABLE", "PAUSED", "AGE"]

    def render(self, item: Dict) -> Row:
        meta = item.get("metadata", {})
        spec = item.get("spec", {})
        status = item.get("status", {})
        ns, name = meta.get("namespace", ""), meta.get("name", "")
        desired = spec.get("replicas", 0)
        cells = [
            ns,
            name,
            f"{status.get('readyReplicas', 0)}/{desired}",
            str(status.get("updatedReplicas", 0)),
            str(status.get("availableReplicas", 0)),
            "true" if spec.get("paused") else "false",
            format_age(meta.get("creationTimestamp")),
        ]
        return f"{ns}/{name}", cells

    def pause(self, ctx: ExecutionContext, path: str) -> None:
        self._set_paused(ctx, path, True)

    def resume(self, ctx: ExecutionContext, path: str) -> None:
        self._set_paused(ctx, path, False)

    def _set_paused(self, ctx: ExecutionContext, path: str, paused: bool) -> None:
        logger.info("Setting spec.paused=%s on deployment %s", paused, path)
        self.factory.patch(ctx, self.object_path(path), {"spec": {"paused": paused}})


register_accessor("apps/v1/deployments", DeploymentAccessor)
