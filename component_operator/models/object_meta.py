from dataclasses import field
from pydantic.dataclasses import dataclass
from .owner_reference import OwnerReference

@dataclass(frozen=True)
class ObjectMeta:
    name: str
    namespace: str = ""
    uid: str = ""
    resource_version: str = ""
    generation: int = 0
    labels: dict[str, str] = field(default_factory=dict)
    owner_references: list[OwnerReference] = field(default_factory=list)
    creation_timestamp: str | None = None
    deletion_timestamp: str | None = None

    @classmethod
    def from_manifest(cls, data: dict) -> "ObjectMeta":
        return cls(
            name=data["name"],
            namespace=data.get("namespace", ""),
            uid=data.get("uid", ""),
            resource_version=data.get("resourceVersion", ""),
            generation=data.get("generation", 0),
            labels=data.get("labels") or {},
            owner_references=[OwnerReference.from_manifest(o) for o in data.get("ownerReferences") or []],
            creation_timestamp=data.get("creationTimestamp"),
            deletion_timestamp=data.get("deletionTimestamp"),
        )

    def to_manifest(self) -> dict:
        # server-populated fields are never sent on create
        manifest: dict = {"name": self.name, "namespace": self.namespace}
        if self.labels:
            manifest["labels"] = dict(self.labels)
        if self.owner_references:
            manifest["ownerReferences"] = [o.to_manifest() for o in self.owner_references]
        return manifest
