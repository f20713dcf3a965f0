"""GVR - group/version/resource identifier of a resource kind."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Gvr:
    """
    Immutable resource kind identifier.

    The canonical string form is "group/version/resource", or
    "version/resource" for the core group.
    """
    group: str
    version: str
    resource: str

    @classmethod
    def parse(cls, value: str) -> 'Gvr':
        """
        Parse a GVR string.

        Args:
            value: "apps/v1/deployments" or "v1/pods"

        Returns:
            Parsed Gvr

        Raises:
            ValueError: if the string has neither two nor three segments
        """
        parts = [p for p in value.strip().split("/") if p]
        if len(parts) == 3:
            return cls(group=parts[0], version=parts[1], resource=parts[2])
        if len(parts) == 2:
            return cls(group="", version=parts[0], resource=parts[1])
        raise ValueError(f"invalid GVR: {value!r}")

    def r(self) -> str:
        """Returns the resource name (plural noun)."""
        return self.resource

    def api_prefix(self) -> str:
        """Returns the REST prefix, "/api/v1" or "/apis/<group>/<version>"."""
        if not self.group:
            return f"/api/{self.version}"
        return f"/apis/{self.group}/{self.version}"

    def __str__(self) -> str:
        if not self.group:
            return f"{self.version}/{self.resource}"
        return f"{self.group}/{self.version}/{self.resource}"
