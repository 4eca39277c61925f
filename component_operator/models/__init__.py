from .component import Component, ComponentSpec, ComponentStatus
from .git_source import GitSource
from .object_meta import ObjectMeta
from .operator_config import OperatorConfig
from .owner_reference import OwnerReference
from .resource import Resource
from .resource_kind import ResourceKind

__all__ = [
    "Component",
    "ComponentSpec",
    "ComponentStatus",
    "GitSource",
    "ObjectMeta",
    "OperatorConfig",
    "OwnerReference",
    "Resource",
    "ResourceKind",
]
