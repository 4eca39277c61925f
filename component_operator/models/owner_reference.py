from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class OwnerReference:
    api_version: str
    kind: str
    name: str
    uid: str
    controller: bool = True
    block_owner_deletion: bool = True

    @classmethod
    def from_manifest(cls, data: dict) -> "OwnerReference":
        return cls(
            api_version=data["apiVersion"],
            kind=data["kind"],
            name=data["name"],
            uid=data["uid"],
            controller=data.get("controller", False),
            block_owner_deletion=data.get("blockOwnerDeletion", False),
        )

    def to_manifest(self) -> dict:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "name": self.name,
            "uid": self.uid,
            "controller": self.controller,
            "blockOwnerDeletion": self.block_owner_deletion,
        }
