from pydantic.dataclasses import dataclass
from .object_meta import ObjectMeta

@dataclass(frozen=True)
class GitSource:
    metadata: ObjectMeta
    url: str
    ref: str | None = None

    @classmethod
    def from_manifest(cls, data: dict) -> "GitSource":
        spec = data.get("spec") or {}
        return cls(
            metadata=ObjectMeta.from_manifest(data["metadata"]),
            url=spec["url"],
            ref=spec.get("ref") or None,
        )
