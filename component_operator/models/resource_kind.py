from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ResourceKind:
    api_version: str
    kind: str
    plural: str

    @property
    def group(self) -> str:
        return self.api_version.rpartition("/")[0]

    def collection_path(self, namespace: str) -> str:
        prefix = f"/apis/{self.api_version}" if self.group else f"/api/{self.api_version}"
        return f"{prefix}/namespaces/{namespace}/{self.plural}"

    def __str__(self) -> str:
        return self.kind


COMPONENT = ResourceKind("devconsole.openshift.io/v1alpha1", "Component", "components")
GIT_SOURCE = ResourceKind("devconsole.openshift.io/v1alpha1", "GitSource", "gitsources")
IMAGE_STREAM = ResourceKind("image.openshift.io/v1", "ImageStream", "imagestreams")
BUILD_CONFIG = ResourceKind("build.openshift.io/v1", "BuildConfig", "buildconfigs")
DEPLOYMENT_CONFIG = ResourceKind("apps.openshift.io/v1", "DeploymentConfig", "deploymentconfigs")
SERVICE = ResourceKind("v1", "Service", "services")
ROUTE = ResourceKind("route.openshift.io/v1", "Route", "routes")
