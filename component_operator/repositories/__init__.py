from .operator_config_repository import OperatorConfigRepository

__all__ = [
    'OperatorConfigRepository'
]
