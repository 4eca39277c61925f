from dataclasses import replace

from component_operator.errors import OwnershipError
from component_operator.models import Component, Resource


def set_owner(resource: Resource, owner: Component) -> Resource:
    """Return a copy of ``resource`` carrying a controller reference to ``owner``.

    The cluster garbage collector follows this edge to delete the resource
    together with its Component; nothing here ever reads it back.
    """
    if not owner.metadata.uid:
        raise OwnershipError(f"Component {owner.namespace}/{owner.name} has no uid, cannot own {resource.kind} {resource.name}")
    # cluster-scoped owners aside, owner and dependent must share a namespace
    if owner.namespace != resource.namespace:
        raise OwnershipError(
            f"Cross-namespace owner reference is not allowed: {resource.kind} {resource.namespace}/{resource.name} "
            f"cannot be owned by Component {owner.namespace}/{owner.name}"
        )

    reference = owner.owner_reference()
    existing = next((o for o in resource.metadata.owner_references if o.controller), None)
    if existing is not None:
        if existing.uid == reference.uid:
            return resource
        raise OwnershipError(
            f"{resource.kind} {resource.namespace}/{resource.name} is already controlled by {existing.kind} {existing.name}"
        )

    metadata = replace(resource.metadata, owner_references=[*resource.metadata.owner_references, reference])
    return replace(resource, metadata=metadata)
