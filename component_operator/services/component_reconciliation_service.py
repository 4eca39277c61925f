import logging
from enum import StrEnum
from typing import override

from component_operator.clients.cluster_client import ClusterClient
from component_operator.errors import ComponentValidationError, DependencyResolutionError, NotFoundError
from component_operator.models import Component, GitSource, OperatorConfig
from component_operator.models.resource_kind import COMPONENT, GIT_SOURCE
from component_operator.repositories import OperatorConfigRepository
from component_operator.services import resource_synthesizer
from component_operator.services.builder_image_resolver import BuilderImageResolver
from component_operator.services.materializer import Materializer
from component_operator.services.revision_gate import is_being_deleted, is_eligible, mark_converged
from component_operator.services.service import Service
from component_operator.utils.logging import setup_logger


class ReconcileOutcome(StrEnum):
    CONVERGED = "converged"
    SKIPPED = "skipped" # revision already converged
    DELETED = "deleted"
    NOT_FOUND = "not-found"


class ComponentReconciliationService(Service):
    """Converges the resources derived from one Component.

    Raising requests a retry from the caller; returning means there is nothing
    left to do for this observation. Every step is get-or-create, so a retry
    after a partial failure picks up where the previous run stopped.
    """

    def __init__(self, namespace: str, name: str, config_file_path: str, dry_run: bool = False):
        self.namespace: str = namespace
        self.name: str = name
        self.cluster: ClusterClient = ClusterClient(dry_run=dry_run)
        self.config: OperatorConfig = OperatorConfigRepository(config_file_path).load()
        self.logger: logging.Logger = setup_logger("ComponentReconciliationService")

    @override
    def run(self) -> ReconcileOutcome:
        self.logger.info(f"Reconciling Component {self.namespace}/{self.name}")
        component = self.fetch_component()
        if component is None:
            # owned objects are garbage collected with it
            self.logger.info(f"Component {self.namespace}/{self.name} not found, nothing to do")
            return ReconcileOutcome.NOT_FOUND

        self.logger.info(
            f"Component {self.namespace}/{self.name}: created {component.metadata.creation_timestamp}, "
            f"resource version {component.metadata.resource_version}, generation {component.metadata.generation}, "
            f"deleted {component.metadata.deletion_timestamp}"
        )

        if is_being_deleted(component):
            self.logger.info(f"Component {self.namespace}/{self.name} is being deleted, skipping")
            return ReconcileOutcome.DELETED

        if not is_eligible(component):
            self.logger.info(f"Revision {component.revision_token} of Component {self.namespace}/{self.name} already converged")
            return ReconcileOutcome.SKIPPED

        self.converge(component)
        self.cluster.patch_status(COMPONENT, component.namespace, component.name, mark_converged(component))
        self.logger.info(f"All resources of Component {self.namespace}/{self.name} have been successfully created")
        return ReconcileOutcome.CONVERGED

    def converge(self, component: Component) -> None:
        port = self.validate(component)
        git_source = self.fetch_git_source(component)

        materializer = Materializer(self.cluster)
        resolver = BuilderImageResolver(self.cluster, materializer, self.config)

        # builder first: an unresolvable build type must fail before anything is created
        builder = resolver.resolve(component)
        output = materializer.ensure_exists(resource_synthesizer.output_image_stream(component), owner=component)
        materializer.ensure_exists(resource_synthesizer.build_config(component, builder, git_source), owner=component)
        materializer.ensure_exists(resource_synthesizer.deployment_config(component, output, port), owner=component)
        materializer.ensure_exists(resource_synthesizer.service(component, port), owner=component)
        if component.spec.exposed:
            materializer.ensure_exists(resource_synthesizer.route(component, port), owner=component)

    def validate(self, component: Component) -> int:
        if not component.spec.git_source_ref:
            raise ComponentValidationError("GitSource reference is not provided")
        if not component.spec.build_type:
            raise ComponentValidationError("Build type is not provided")
        return resource_synthesizer.resolve_port(component, self.config.default_service_port)

    def fetch_component(self) -> Component | None:
        try:
            data = self.cluster.get(COMPONENT, self.namespace, self.name)
        except NotFoundError:
            return None
        return Component.from_manifest(data)

    def fetch_git_source(self, component: Component) -> GitSource:
        ref = component.spec.git_source_ref
        try:
            data = self.cluster.get(GIT_SOURCE, component.namespace, ref)
        except NotFoundError as e:
            self.logger.error(f"GitSource {component.namespace}/{ref} referenced by Component {component.name} not found")
            raise DependencyResolutionError(f"GitSource {component.namespace}/{ref} not found") from e
        except Exception as e:
            self.logger.error(f"Error occurred while getting GitSource {component.namespace}/{ref}: {e}")
            raise
        try:
            return GitSource.from_manifest(data)
        except Exception as e:
            raise DependencyResolutionError(f"Invalid GitSource {component.namespace}/{ref}: {e}") from e
