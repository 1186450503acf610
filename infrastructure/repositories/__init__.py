# infrastructure/repositories/__init__.py
from infrastructure.repositories.account_repository import AccountRepository
from infrastructure.repositories.collection_repository import CollectionRepository
from infrastructure.repositories.config_repository import ConfigRepository
from infrastructure.repositories.environment_repository import EnvironmentRepository
from infrastructure.repositories.history_repository import HistoryRepository

__all__ = [
    "AccountRepository",
    "CollectionRepository",
    "ConfigRepository",
    "EnvironmentRepository",
    "HistoryRepository",
]
