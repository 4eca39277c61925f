from dataclasses import field
from pydantic.dataclasses import dataclass
from .object_meta import ObjectMeta
from .owner_reference import OwnerReference
from .resource_kind import COMPONENT

@dataclass(frozen=True)
class ComponentSpec:
    git_source_ref: str = ""
    build_type: str = ""
    port: int = 0
    exposed: bool = False


@dataclass(frozen=True)
class ComponentStatus:
    rev_number: str = "" # generation token of the last converged revision


@dataclass(frozen=True)
class Component:
    metadata: ObjectMeta
    spec: ComponentSpec
    status: ComponentStatus = field(default_factory=ComponentStatus)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def revision_token(self) -> str:
        return str(self.metadata.generation)

    @classmethod
    def from_manifest(cls, data: dict) -> "Component":
        spec = data.get("spec") or {}
        status = data.get("status") or {}
        return cls(
            metadata=ObjectMeta.from_manifest(data["metadata"]),
            spec=ComponentSpec(
                git_source_ref=spec.get("gitSourceRef", ""),
                build_type=spec.get("buildType", ""),
                port=spec.get("port") or 0,
                exposed=spec.get("exposed") or False,
            ),
            status=ComponentStatus(rev_number=status.get("revNumber", "")),
        )

    def owner_reference(self) -> OwnerReference:
        return OwnerReference(
            api_version=COMPONENT.api_version,
            kind=COMPONENT.kind,
            name=self.name,
            uid=self.metadata.uid,
        )
