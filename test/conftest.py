import copy
import os
from unittest.mock import MagicMock, patch

import pytest
from component_operator.errors import AlreadyExistsError, NotFoundError
from component_operator.models import Component, OperatorConfig
from component_operator.models.resource_kind import COMPONENT, GIT_SOURCE, ResourceKind
from component_operator.services.component_reconciliation_service import ComponentReconciliationService

ASSETS_DIR = os.path.join(os.path.dirname(__file__), "assets")

NAMESPACE = "myproject"
NAME = "myapp"


class FakeCluster:
    """In-memory stand-in for ClusterClient that records every call."""

    def __init__(self):
        self.objects: dict[tuple[str, str, str], dict] = {}
        self.calls: list[tuple[str, str, str, str]] = []
        self.failures: dict[tuple[str, str], Exception] = {}
        self._uids: int = 0

    def add(self, kind: ResourceKind, manifest: dict) -> dict:
        stored = copy.deepcopy(manifest)
        stored.setdefault("apiVersion", kind.api_version)
        stored.setdefault("kind", kind.kind)
        self.objects[(kind.kind, stored["metadata"]["namespace"], stored["metadata"]["name"])] = stored
        return stored

    def fail_on(self, method: str, kind: ResourceKind, error: Exception) -> None:
        self.failures[(method, kind.kind)] = error

    def get(self, kind: ResourceKind, namespace: str, name: str) -> dict:
        self.calls.append(("get", kind.kind, namespace, name))
        self._maybe_fail("get", kind)
        key = (kind.kind, namespace, name)
        if key not in self.objects:
            raise NotFoundError(kind.kind, namespace, name)
        return copy.deepcopy(self.objects[key])

    def create(self, kind: ResourceKind, manifest: dict) -> dict:
        namespace = manifest["metadata"]["namespace"]
        name = manifest["metadata"]["name"]
        self.calls.append(("create", kind.kind, namespace, name))
        self._maybe_fail("create", kind)
        if (kind.kind, namespace, name) in self.objects:
            raise AlreadyExistsError(kind.kind, namespace, name)
        self._uids += 1
        stored = copy.deepcopy(manifest)
        stored["metadata"]["uid"] = f"uid-{self._uids}"
        stored["metadata"]["resourceVersion"] = str(self._uids)
        return copy.deepcopy(self.add(kind, stored))

    def patch_status(self, kind: ResourceKind, namespace: str, name: str, status: dict) -> dict:
        self.calls.append(("patch_status", kind.kind, namespace, name))
        self._maybe_fail("patch_status", kind)
        stored = self.objects[(kind.kind, namespace, name)]
        stored.setdefault("status", {}).update(status)
        return copy.deepcopy(stored)

    def find(self, kind: ResourceKind, namespace: str, name: str) -> dict | None:
        return self.objects.get((kind.kind, namespace, name))

    def calls_of(self, method: str) -> list[tuple[str, str, str, str]]:
        return [c for c in self.calls if c[0] == method]

    def derived(self) -> list[tuple[str, str, str]]:
        return sorted(k for k in self.objects if k[0] not in (COMPONENT.kind, GIT_SOURCE.kind))

    def _maybe_fail(self, method: str, kind: ResourceKind) -> None:
        error = self.failures.pop((method, kind.kind), None)
        if error is not None:
            raise error


def component_manifest(**spec) -> dict:
    return {
        "apiVersion": COMPONENT.api_version,
        "kind": COMPONENT.kind,
        "metadata": {
            "name": NAME,
            "namespace": NAMESPACE,
            "uid": "component-uid",
            "resourceVersion": "1001",
            "generation": 1,
            "creationTimestamp": "2025-03-15T12:00:00Z",
        },
        "spec": {"gitSourceRef": "myapp-git", "buildType": "nodejs", **spec},
    }


def git_source_manifest() -> dict:
    return {
        "apiVersion": GIT_SOURCE.api_version,
        "kind": GIT_SOURCE.kind,
        "metadata": {"name": "myapp-git", "namespace": NAMESPACE},
        "spec": {"url": "https://github.com/nodeshift-starters/nodejs-rest-http", "ref": "master"},
    }


@pytest.fixture
def make_component():
    def _make(status: dict | None = None, metadata: dict | None = None, **spec) -> Component:
        manifest = component_manifest(**spec)
        manifest["metadata"].update(metadata or {})
        if status is not None:
            manifest["status"] = status
        return Component.from_manifest(manifest)
    return _make


@pytest.fixture
def cluster():
    fake = FakeCluster()
    fake.add(GIT_SOURCE, git_source_manifest())
    return fake


@pytest.fixture
def add_component(cluster):
    def _add(status: dict | None = None, metadata: dict | None = None, **spec) -> dict:
        manifest = component_manifest(**spec)
        manifest["metadata"].update(metadata or {})
        if status is not None:
            manifest["status"] = status
        return cluster.add(COMPONENT, manifest)
    return _add


@pytest.fixture
def config():
    return OperatorConfig(
        shared_namespace="openshift",
        default_service_port=8080,
        builder_images={"nodejs": "nodeshift/centos7-s2i-nodejs:10.x"},
    )


@pytest.fixture
def config_file():
    return os.path.join(ASSETS_DIR, "operator-config.yaml")


@pytest.fixture
def service(cluster, config_file):
    with patch("component_operator.services.component_reconciliation_service.ClusterClient"):
        svc = ComponentReconciliationService(NAMESPACE, NAME, config_file)
    svc.cluster = cluster
    svc.logger = MagicMock()
    return svc
