class ReconcileError(Exception):
    """Base class for every failure raised while converging a Component."""


class ComponentValidationError(ReconcileError):
    pass


class DependencyResolutionError(ReconcileError):
    pass


class BuilderImageNotFoundError(DependencyResolutionError):
    def __init__(self, build_type: str):
        super().__init__(f"builder image for build type '{build_type}' not found")
        self.build_type: str = build_type


class OwnershipError(ReconcileError):
    pass


class ClusterStoreError(ReconcileError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code: int | None = status_code


class NotFoundError(ClusterStoreError):
    def __init__(self, kind: str, namespace: str, name: str):
        super().__init__(f"{kind} {namespace}/{name} not found", status_code=404)
        self.kind: str = kind
        self.namespace: str = namespace
        self.name: str = name


class AlreadyExistsError(ClusterStoreError):
    def __init__(self, kind: str, namespace: str, name: str):
        super().__init__(f"{kind} {namespace}/{name} already exists", status_code=409)
        self.kind: str = kind
        self.namespace: str = namespace
        self.name: str = name
