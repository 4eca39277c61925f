from component_operator.models import Component


def is_being_deleted(component: Component) -> bool:
    return component.metadata.deletion_timestamp is not None


def is_eligible(component: Component) -> bool:
    """Whether this observation still has to be converged.

    The stored marker is the generation token of the last revision that fully
    converged; an empty or stale marker means there is work to do.
    """
    marker = component.status.rev_number
    return not marker or marker != component.revision_token


def mark_converged(component: Component) -> dict:
    return {"revNumber": component.revision_token}
