from dataclasses import field
from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

DEFAULT_SHARED_NAMESPACE = "openshift"
DEFAULT_SERVICE_PORT = 8080
DEFAULT_BUILDER_IMAGES = {"nodejs": "nodeshift/centos7-s2i-nodejs:10.x"}

@dataclass(frozen=True, config=ConfigDict(extra="forbid"))
class OperatorConfig:
    shared_namespace: str = DEFAULT_SHARED_NAMESPACE # holds the pre-existing, cluster-wide builder images
    default_service_port: int = DEFAULT_SERVICE_PORT
    builder_images: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_BUILDER_IMAGES))
