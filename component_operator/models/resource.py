from dataclasses import field
from typing import Any
from pydantic.dataclasses import dataclass
from .object_meta import ObjectMeta
from .resource_kind import ResourceKind

@dataclass(frozen=True)
class Resource:
    """A derived resource descriptor in Kubernetes wire shape.

    ``spec`` and ``status`` hold the kind-specific bodies verbatim; only
    ``metadata`` is modelled, since that is all the reconciler reads or writes
    generically (identity and ownership).
    """
    kind: ResourceKind
    metadata: ObjectMeta
    spec: dict[str, Any] = field(default_factory=dict)
    status: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @classmethod
    def from_manifest(cls, kind: ResourceKind, data: dict) -> "Resource":
        return cls(
            kind=kind,
            metadata=ObjectMeta.from_manifest(data["metadata"]),
            spec=data.get("spec") or {},
            status=data.get("status") or {},
        )

    def to_manifest(self) -> dict:
        return {
            "apiVersion": self.kind.api_version,
            "kind": self.kind.kind,
            "metadata": self.metadata.to_manifest(),
            "spec": self.spec,
        }
