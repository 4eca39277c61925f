import logging

from component_operator.clients.cluster_client import ClusterClient
from component_operator.errors import BuilderImageNotFoundError, NotFoundError
from component_operator.models import Component, OperatorConfig, Resource
from component_operator.models.resource_kind import IMAGE_STREAM
from component_operator.services import resource_synthesizer
from component_operator.services.materializer import Materializer
from component_operator.utils.logging import setup_logger


class BuilderImageResolver:
    def __init__(self, cluster: ClusterClient, materializer: Materializer, config: OperatorConfig):
        self.cluster: ClusterClient = cluster
        self.materializer: Materializer = materializer
        self.config: OperatorConfig = config
        self.logger: logging.Logger = setup_logger("BuilderImageResolver")

    def resolve(self, component: Component) -> Resource:
        """Find the image stream to build ``component`` from.

        A stream named after the build type in the shared namespace wins and is
        returned as-is; it is cluster-wide and never owned by a Component.
        Otherwise one is created in the Component's namespace from the
        configured external image, owned by the Component.
        """
        build_type = component.spec.build_type
        namespace = self.config.shared_namespace
        try:
            data = self.cluster.get(IMAGE_STREAM, namespace, build_type)
            self.logger.info(f"Using shared builder ImageStream {namespace}/{build_type}")
            return Resource.from_manifest(IMAGE_STREAM, data)
        except NotFoundError:
            self.logger.info(f"No builder ImageStream {build_type} in namespace {namespace}, falling back to external image")

        image = self.config.builder_images.get(build_type)
        if not image:
            self.logger.error(f"No external builder image configured for build type {build_type}")
            raise BuilderImageNotFoundError(build_type)

        desired = resource_synthesizer.builder_image_stream(component, image)
        return self.materializer.ensure_exists(desired, owner=component)
