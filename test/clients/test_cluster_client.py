from unittest.mock import MagicMock

import pytest
import requests
from component_operator.clients.cluster_client import ClusterClient
from component_operator.errors import AlreadyExistsError, ClusterStoreError, NotFoundError
from component_operator.models.resource_kind import COMPONENT, SERVICE

API_URL = "https://api.cluster.example.com:6443"


class DummyResponse:
    def __init__(self, status_code, body=None):
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.text = str(self.body)

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return self.body


@pytest.fixture(autouse=True)
def kube_env(monkeypatch):
    monkeypatch.setenv("KUBERNETES_API_URL", API_URL + "/")
    monkeypatch.setenv("KUBERNETES_TOKEN", "sha256~token\n")
    monkeypatch.setenv("KUBERNETES_INSECURE", "true")


@pytest.fixture
def client():
    c = ClusterClient()
    c.session = MagicMock()
    return c


def test_session_configuration():
    c = ClusterClient()
    assert c.api_url == API_URL
    assert c.session.headers["Authorization"] == "Bearer sha256~token"
    assert c.session.verify is False


def test_missing_api_server(monkeypatch):
    monkeypatch.delenv("KUBERNETES_API_URL")
    monkeypatch.delenv("KUBERNETES_SERVICE_HOST", raising=False)
    with pytest.raises(EnvironmentError):
        ClusterClient()


def test_in_cluster_address(monkeypatch):
    monkeypatch.delenv("KUBERNETES_API_URL")
    monkeypatch.setenv("KUBERNETES_SERVICE_HOST", "10.0.0.1")
    monkeypatch.setenv("KUBERNETES_SERVICE_PORT", "443")
    assert ClusterClient().api_url == "https://10.0.0.1:443"


def test_get(client):
    client.session.request.return_value = DummyResponse(200, {"metadata": {"name": "myapp"}})

    assert client.get(SERVICE, "myproject", "myapp") == {"metadata": {"name": "myapp"}}
    client.session.request.assert_called_once_with(
        "GET", f"{API_URL}/api/v1/namespaces/myproject/services/myapp", timeout=10
    )


def test_get_not_found(client):
    client.session.request.return_value = DummyResponse(404)
    with pytest.raises(NotFoundError):
        client.get(SERVICE, "myproject", "myapp")


def test_get_server_error(client):
    client.session.request.return_value = DummyResponse(500, {"message": "etcdserver: request timed out"})
    with pytest.raises(ClusterStoreError, match="etcdserver") as excinfo:
        client.get(SERVICE, "myproject", "myapp")
    assert excinfo.value.status_code == 500
    assert not isinstance(excinfo.value, NotFoundError)


def test_transport_error(client):
    client.session.request.side_effect = requests.ConnectionError("connection refused")
    with pytest.raises(ClusterStoreError, match="connection refused"):
        client.get(SERVICE, "myproject", "myapp")


def test_create(client):
    manifest = {"metadata": {"name": "myapp", "namespace": "myproject"}}
    client.session.request.return_value = DummyResponse(201, manifest)

    assert client.create(SERVICE, manifest) == manifest
    client.session.request.assert_called_once_with(
        "POST", f"{API_URL}/api/v1/namespaces/myproject/services", timeout=10, json=manifest, params={}
    )


def test_create_conflict(client):
    client.session.request.return_value = DummyResponse(409)
    with pytest.raises(AlreadyExistsError):
        client.create(SERVICE, {"metadata": {"name": "myapp", "namespace": "myproject"}})


def test_dry_run_writes(client):
    client.dry_run = True
    client.session.request.return_value = DummyResponse(200, {})

    client.patch_status(COMPONENT, "myproject", "myapp", {"revNumber": "2"})

    method, url = client.session.request.call_args[0]
    kwargs = client.session.request.call_args[1]
    assert method == "PATCH"
    assert url == f"{API_URL}/apis/devconsole.openshift.io/v1alpha1/namespaces/myproject/components/myapp/status"
    assert kwargs["json"] == {"status": {"revNumber": "2"}}
    assert kwargs["params"] == {"dryRun": "All"}
    assert kwargs["headers"] == {"Content-Type": "application/merge-patch+json"}
