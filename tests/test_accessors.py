"""
Tests for accessors - registry, capability detection and deployment pause/resume.
"""
import pytest
from datetime import datetime, timezone
from unittest.mock import Mock

from resource_browser.dao import (
    DeploymentAccessor,
    ExecutionContext,
    GenericAccessor,
    Gvr,
    KubeClient,
    Pausable,
    accessor_for,
    split_path,
)
from resource_browser.dao.Accessor import format_age
from resource_browser.errors import AccessorError, ApiError

DEPLOYMENTS = Gvr.parse("apps/v1/deployments")


@pytest.fixture
def factory():
    return Mock(spec=KubeClient)


class TestRegistry:

    def test_deployments_are_pausable(self, factory):
        accessor = accessor_for(factory, DEPLOYMENTS)

        assert isinstance(accessor, DeploymentAccessor)
        assert isinstance(accessor, Pausable)
        assert accessor.factory is factory
        assert accessor.gvr == DEPLOYMENTS

    def test_generic_kinds_are_not_pausable(self, factory):
        accessor = accessor_for(factory, Gvr.parse("apps/v1/statefulsets"))

        assert isinstance(accessor, GenericAccessor)
        assert not isinstance(accessor, Pausable)

    def test_unknown_kind_raises(self, factory):
        with pytest.raises(AccessorError, match="batch/v1/jobs"):
            accessor_for(factory, Gvr.parse("batch/v1/jobs"))

    def test_each_lookup_returns_fresh_accessor(self, factory):
        assert accessor_for(factory, DEPLOYMENTS) is not accessor_for(factory, DEPLOYMENTS)


class TestSplitPath:

    def test_namespaced(self):
        assert split_path("default/nginx") == ("default", "nginx")

    def test_without_namespace(self):
        assert split_path("nginx") == ("", "nginx")


class TestFormatAge:

    NOW = datetime(2024, 1, 10, 12, 0, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("timestamp, expected", [
        ("2024-01-10T11:59:30Z", "30s"),
        ("2024-01-10T11:55:00Z", "5m"),
        ("2024-01-10T09:00:00Z", "3h"),
        ("2024-01-07T12:00:00Z", "3d"),
    ])
    def test_units(self, timestamp, expected):
        assert format_age(timestamp, now=self.NOW) == expected

    def test_missing_timestamp(self):
        assert format_age(None) == "n/a"

    def test_fractional_seconds(self):
        assert format_age("2024-01-10T11:55:00.123456Z", now=self.NOW) == "5m"

    def test_unparsable_timestamp(self):
        assert format_age("yesterday", now=self.NOW) == "n/a"


class TestDeploymentAccessor:

    def test_pause_patches_spec_paused(self, factory):
        accessor = accessor_for(factory, DEPLOYMENTS)
        ctx = ExecutionContext.background()

        accessor.pause(ctx, "web/frontend")

        factory.patch.assert_called_once_with(
            ctx, "/apis/apps/v1/namespaces/web/deployments/frontend", {"spec": {"paused": True}}
        )

    def test_resume_clears_spec_paused(self, factory):
        accessor = accessor_for(factory, DEPLOYMENTS)
        ctx = ExecutionContext.background()

        accessor.resume(ctx, "web/frontend")

        factory.patch.assert_called_once_with(
            ctx, "/apis/apps/v1/namespaces/web/deployments/frontend", {"spec": {"paused": False}}
        )

    def test_path_without_namespace_uses_default(self, factory):
        accessor = accessor_for(factory, DEPLOYMENTS)

        accessor.pause(ExecutionContext.background(), "frontend")

        assert factory.patch.call_args[0][1] == "/apis/apps/v1/namespaces/default/deployments/frontend"

    def test_api_error_propagates(self, factory):
        factory.patch.side_effect = ApiError("forbidden", status=403)
        accessor = accessor_for(factory, DEPLOYMENTS)

        with pytest.raises(ApiError):
            accessor.pause(ExecutionContext.background(), "web/frontend")

    def test_list_renders_paused_column(self, factory):
        factory.get.return_value = {"items": [
            {
                "metadata": {"namespace": "web", "name": "frontend"},
                "spec": {"replicas": 3, "paused": True},
                "status": {"readyReplicas": 2, "updatedReplicas": 3, "availableReplicas": 2},
            },
            {
                "metadata": {"namespace": "web", "name": "backend"},
                "spec": {"replicas": 1},
                "status": {},
            },
        ]}
        accessor = accessor_for(factory, DEPLOYMENTS)
        ctx = ExecutionContext.background()

        rows = accessor.list(ctx, "web")

        factory.get.assert_called_once_with(ctx, "/apis/apps/v1/namespaces/web/deployments")
        header = accessor.header()
        paused = header.index("PAUSED")
        assert rows[0][0] == "web/frontend"
        assert rows[0][1][header.index("READY")] == "2/3"
        assert rows[0][1][paused] == "true"
        assert rows[1][1][paused] == "false"

    def test_list_all_namespaces(self, factory):
        factory.get.return_value = {"items": []}
        accessor = accessor_for(factory, Gvr.parse("v1/pods"))

        assert accessor.list(ExecutionContext.background()) == []
        assert factory.get.call_args[0][1] == "/api/v1/pods"
