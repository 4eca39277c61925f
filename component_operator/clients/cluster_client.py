import os
import logging
import requests
from component_operator.errors import AlreadyExistsError, ClusterStoreError, NotFoundError
from component_operator.models.resource_kind import ResourceKind

logger = logging.getLogger(__name__)

SERVICE_ACCOUNT_DIR = "/var/run/secrets/kubernetes.io/serviceaccount"


class ClusterClient:
    """Thin Kubernetes REST client covering the calls the reconciler makes.

    Reads and writes are single attempts; retrying is left to whoever
    redelivers the reconcile request.
    """

    def __init__(self, dry_run: bool = False, timeout: int = 10):
        self.api_url: str = self._resolve_api_url()
        self.dry_run: bool = dry_run
        self.timeout: int = timeout
        self.session: requests.Session = requests.Session()
        self.session.headers["Accept"] = "application/json"
        token = os.getenv("KUBERNETES_TOKEN") or self._read_service_account_file("token")
        if token:
            self.session.headers["Authorization"] = f"Bearer {token.strip()}"
        self.session.verify = self._resolve_verify()

    def get(self, kind: ResourceKind, namespace: str, name: str) -> dict:
        response = self._request("GET", f"{kind.collection_path(namespace)}/{name}")
        if response.status_code == 404:
            raise NotFoundError(kind.kind, namespace, name)
        self._raise_for_status(response, f"get {kind} {namespace}/{name}")
        return response.json()

    def create(self, kind: ResourceKind, manifest: dict) -> dict:
        namespace = manifest["metadata"]["namespace"]
        name = manifest["metadata"]["name"]
        response = self._request("POST", kind.collection_path(namespace), json=manifest, params=self._write_params())
        if response.status_code == 409:
            raise AlreadyExistsError(kind.kind, namespace, name)
        self._raise_for_status(response, f"create {kind} {namespace}/{name}")
        return response.json()

    def patch_status(self, kind: ResourceKind, namespace: str, name: str, status: dict) -> dict:
        response = self._request(
            "PATCH",
            f"{kind.collection_path(namespace)}/{name}/status",
            json={"status": status},
            params=self._write_params(),
            headers={"Content-Type": "application/merge-patch+json"},
        )
        if response.status_code == 404:
            raise NotFoundError(kind.kind, namespace, name)
        self._raise_for_status(response, f"patch status of {kind} {namespace}/{name}")
        return response.json()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.api_url}{path}"
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ClusterStoreError(f"{method} {url} failed: {e}") from e

    def _write_params(self) -> dict[str, str]:
        return {"dryRun": "All"} if self.dry_run else {}

    @staticmethod
    def _raise_for_status(response: requests.Response, action: str) -> None:
        if response.ok:
            return
        try:
            message = response.json().get("message", response.text)
        except ValueError:
            message = response.text
        logger.error(f"Failed to {action}: {response.status_code} {message}")
        raise ClusterStoreError(f"Failed to {action}: {message}", status_code=response.status_code)

    @staticmethod
    def _resolve_api_url() -> str:
        api_url = os.getenv("KUBERNETES_API_URL")
        if api_url:
            return api_url.rstrip("/")
        host = os.getenv("KUBERNETES_SERVICE_HOST")
        port = os.getenv("KUBERNETES_SERVICE_PORT", "443")
        if not host:
            logger.error("KUBERNETES_API_URL or KUBERNETES_SERVICE_HOST env var is mandatory")
            raise EnvironmentError("Missing Kubernetes API server address")
        return f"https://{host}:{port}"

    @staticmethod
    def _resolve_verify() -> bool | str:
        if os.getenv("KUBERNETES_INSECURE", "").lower() in ("1", "true", "yes"):
            return False
        ca_file = os.getenv("KUBERNETES_CA_FILE") or os.path.join(SERVICE_ACCOUNT_DIR, "ca.crt")
        return ca_file if os.path.isfile(ca_file) else True

    @staticmethod
    def _read_service_account_file(name: str) -> str | None:
        path = os.path.join(SERVICE_ACCOUNT_DIR, name)
        if not os.path.isfile(path):
            return None
        with open(path, "r") as f:
            return f.read()
