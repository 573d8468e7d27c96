# src/infrastructure/persistence/repository_factory.py
from typing import Any, Dict, Optional

from src.config.defaults import StorageType
from src.domain.account.repository import AccountRepository
from src.domain.core.exceptions import ConfigurationError
from src.infrastructure.persistence.in_memory_account_repository import InMemoryAccountRepository
from src.infrastructure.persistence.json_account_repository import JSONAccountRepository


class RepositoryFactory:
    """
    Factory for creating account repository instances based on configuration.

    This factory handles:
    - Repository type selection
    - Configuration parsing and validation
    - Repository initialization
    """

    @staticmethod
    def create_repository(
        config: Dict[str, Any],
        repo_type: Optional[str] = None,
        path: Optional[str] = None,
    ) -> AccountRepository:
        """
        Create an account repository from the STORAGE_CONFIG section.

        Args:
            config: Configuration dictionary from ConfigurationManager
            repo_type: Overrides the configured repository type
            path: Overrides the configured JSON storage path

        Returns:
            AccountRepository: Configured repository instance

        Raises:
            ConfigurationError: If configuration is invalid or missing required fields
        """
        storage_config = config.get("STORAGE_CONFIG") or {}
        repo_type = repo_type or storage_config.get("type")
        if not repo_type:
            raise ConfigurationError("Repository type not specified in configuration")

        if repo_type == StorageType.MEMORY.value:
            return InMemoryAccountRepository()
        if repo_type == StorageType.JSON.value:
            storage_path = path or (storage_config.get("json") or {}).get("path")
            if not storage_path:
                raise ConfigurationError(
                    "Missing JSON storage path", missing_fields=["STORAGE_CONFIG.json.path"]
                )
            return JSONAccountRepository(storage_path)
        raise ConfigurationError(f"Unsupported repository type: {repo_type}")
