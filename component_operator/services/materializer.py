import logging

from component_operator.clients.cluster_client import ClusterClient
from component_operator.errors import AlreadyExistsError, NotFoundError
from component_operator.models import Component, Resource
from component_operator.utils.logging import setup_logger
from component_operator.utils.ownership import set_owner


class Materializer:
    def __init__(self, cluster: ClusterClient):
        self.cluster: ClusterClient = cluster
        self.logger: logging.Logger = setup_logger("Materializer")

    def ensure_exists(self, desired: Resource, owner: Component | None = None) -> Resource:
        """Get-or-create ``desired``, returning whatever the cluster holds.

        An existing resource is returned untouched, drift included. Only a
        not-found read leads to a create; any other failure propagates.
        """
        if owner is not None:
            try:
                desired = set_owner(desired, owner)
            except Exception as e:
                self.logger.error(f"Setting owner reference on {desired.kind} {desired.namespace}/{desired.name} failed: {e}")
                raise

        try:
            found = self.fetch(desired)
            self.logger.info(f"Skip creating {desired.kind} {found.namespace}/{found.name}: already exists")
            return found
        except NotFoundError:
            pass

        self.logger.info(f"Creating {desired.kind} {desired.namespace}/{desired.name}")
        try:
            created = self.cluster.create(desired.kind, desired.to_manifest())
        except AlreadyExistsError:
            # lost a race with a concurrent create; the winner's object is the converged one
            self.logger.info(f"{desired.kind} {desired.namespace}/{desired.name} was created concurrently, re-reading")
            return self.fetch(desired)
        except Exception as e:
            self.logger.error(f"{desired.kind} {desired.namespace}/{desired.name} creation failed: {e}")
            raise
        return Resource.from_manifest(desired.kind, created)

    def fetch(self, resource: Resource) -> Resource:
        data = self.cluster.get(resource.kind, resource.namespace, resource.name)
        return Resource.from_manifest(resource.kind, data)
