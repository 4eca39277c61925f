import os
from ruamel.yaml import YAML
from component_operator.models import OperatorConfig
from component_operator.utils.yaml_loader import get_yaml_instance


class OperatorConfigRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def load(self) -> OperatorConfig:
        if not os.path.isfile(self.file_path):
            return OperatorConfig()
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f) or {}
            try:
                return OperatorConfig(**data)
            except Exception as e:
                raise ValueError(f"Invalid operator config: {e}") from e
