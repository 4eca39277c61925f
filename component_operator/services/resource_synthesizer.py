"""Builders for the resources derived from a Component.

Every function here is pure: it only shapes descriptors, the cluster is
never touched.
"""
from component_operator.errors import ComponentValidationError
from component_operator.models import Component, GitSource, ObjectMeta, Resource
from component_operator.models.operator_config import DEFAULT_SERVICE_PORT
from component_operator.models.resource_kind import (
    BUILD_CONFIG,
    DEPLOYMENT_CONFIG,
    IMAGE_STREAM,
    ROUTE,
    SERVICE,
)

MIN_PORT = 1
MAX_PORT = 65535
LATEST_TAG = "latest"


def component_labels(component: Component) -> dict[str, str]:
    return {"app": component.name, "component": component.name}


def workload_selector(component: Component) -> dict[str, str]:
    return {"deploymentconfig": component.name}


def resolve_port(component: Component, default_port: int = DEFAULT_SERVICE_PORT) -> int:
    port = component.spec.port or default_port
    if not MIN_PORT <= port <= MAX_PORT:
        raise ComponentValidationError(
            f"Port {port} of component {component.namespace}/{component.name} is outside {MIN_PORT}-{MAX_PORT}"
        )
    return port


def port_name(port: int) -> str:
    return f"{port}-tcp"


# one stream per Component so each builder has a single controlling owner
def builder_image_stream_name(component: Component) -> str:
    return f"{component.name}-{component.spec.build_type}"


def _metadata(component: Component, name: str | None = None) -> ObjectMeta:
    return ObjectMeta(
        name=name or component.name,
        namespace=component.namespace,
        labels=component_labels(component),
    )


def output_image_stream(component: Component) -> Resource:
    return Resource(kind=IMAGE_STREAM, metadata=_metadata(component))


def builder_image_stream(component: Component, image: str) -> Resource:
    return Resource(
        kind=IMAGE_STREAM,
        metadata=_metadata(component, name=builder_image_stream_name(component)),
        spec={
            "lookupPolicy": {"local": False},
            "tags": [
                {
                    "name": LATEST_TAG,
                    "from": {"kind": "DockerImage", "name": image},
                    "referencePolicy": {"type": "Source"},
                }
            ],
        },
    )


def build_config(component: Component, builder: Resource, git_source: GitSource) -> Resource:
    git = {"uri": git_source.url}
    if git_source.ref:
        git["ref"] = git_source.ref
    return Resource(
        kind=BUILD_CONFIG,
        metadata=_metadata(component),
        spec={
            "runPolicy": "Serial",
            "source": {"type": "Git", "git": git},
            "strategy": {
                "type": "Source",
                "sourceStrategy": {
                    "from": {
                        "kind": "ImageStreamTag",
                        "name": f"{builder.name}:{LATEST_TAG}",
                        "namespace": builder.namespace,
                    },
                },
            },
            "output": {"to": {"kind": "ImageStreamTag", "name": f"{component.name}:{LATEST_TAG}"}},
            "triggers": [
                {"type": "ConfigChange"},
                {"type": "ImageChange", "imageChange": {}},
            ],
        },
    )


def deployment_config(component: Component, output: Resource, port: int) -> Resource:
    # an unbuilt stream has no repository yet; the image change trigger fills it in
    image = output.status.get("dockerImageRepository") or f"{output.name}:{LATEST_TAG}"
    selector = workload_selector(component)
    return Resource(
        kind=DEPLOYMENT_CONFIG,
        metadata=_metadata(component),
        spec={
            "replicas": 1,
            "selector": selector,
            "strategy": {"type": "Rolling"},
            "template": {
                "metadata": {"labels": {**component_labels(component), **selector}},
                "spec": {
                    "containers": [
                        {
                            "name": component.name,
                            "image": image,
                            "ports": [{"containerPort": port, "protocol": "TCP"}],
                        }
                    ],
                },
            },
            "triggers": [
                {"type": "ConfigChange"},
                {
                    "type": "ImageChange",
                    "imageChangeParams": {
                        "automatic": True,
                        "containerNames": [component.name],
                        "from": {"kind": "ImageStreamTag", "name": f"{output.name}:{LATEST_TAG}"},
                    },
                },
            ],
        },
    )


def service(component: Component, port: int) -> Resource:
    return Resource(
        kind=SERVICE,
        metadata=_metadata(component),
        spec={
            "type": "ClusterIP",
            "selector": workload_selector(component),
            "ports": [
                {"name": port_name(port), "port": port, "protocol": "TCP", "targetPort": port},
            ],
        },
    )


def route(component: Component, port: int) -> Resource:
    return Resource(
        kind=ROUTE,
        metadata=_metadata(component),
        spec={
            "to": {"kind": "Service", "name": component.name},
            "port": {"targetPort": port_name(port)},
        },
    )
