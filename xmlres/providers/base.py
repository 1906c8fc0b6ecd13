#!/usr/bin/env python3
"""
Base classes for resources providers.

ResourcesProvider is the contract a localization host talks to: it
describes where resources live and moves ResourceRecord collections in and
out of that storage. ProviderRegistry maps provider names to classes.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, Optional

from ..exporter import ResultCallback
from ..models import ResourceRecord, StorageType


class ResourcesProvider(ABC):
    """
    Abstract base class for resources providers.

    The host sets storage_location (entered by the user) and solution_path
    (the project file's directory) before calling import or export.
    """

    def __init__(self, storage_location: Optional[str] = None, solution_path: Optional[str] = None):
        self._storage_location: Optional[str] = None
        self.solution_path = solution_path
        if storage_location is not None:
            self.storage_location = storage_location

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name shown when selecting a provider."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line description shown when selecting a provider."""
        pass

    @property
    @abstractmethod
    def storage_location_user_text(self) -> str:
        """Label for the storage location input."""
        pass

    @property
    @abstractmethod
    def storage_type(self) -> StorageType:
        """
        Kind of storage location.

        DIRECTORY: host shows a directory picker
        FILE: host shows a file picker
        TEXT: free text such as a connection string
        """
        pass

    @property
    def storage_location(self) -> Optional[str]:
        return self._storage_location

    @storage_location.setter
    def storage_location(self, value: str) -> None:
        if value is None or not str(value).strip():
            raise ValueError("Storage location must not be empty")
        self._storage_location = str(value)

    @abstractmethod
    def export_resource_strings(
        self,
        project_name: str,
        records: Iterable[ResourceRecord],
        result_callback: Optional[ResultCallback] = None,
    ) -> None:
        """
        Write records to storage.

        Args:
            project_name: Name of the project whose resources are exported
            records: Records with their translations
            result_callback: Called once per touched file with its status
        """
        pass

    @abstractmethod
    def import_resource_strings(self, project_name: str) -> list[ResourceRecord]:
        """
        Read all records from storage.

        Args:
            project_name: Name of the project being synchronized

        Returns:
            Merged records
        """
        pass

    def resolve_storage_location(self) -> Path:
        """
        Absolute storage location, relative ones rooted at solution_path.

        The path is normalized but symlinks are kept as given.
        """
        if not self._storage_location:
            raise ValueError("Storage location is not set")

        location = Path(self._storage_location).expanduser()
        if location.is_absolute():
            return location

        root = Path(self.solution_path) if self.solution_path else Path.cwd()
        return Path(os.path.normpath((root / location).absolute()))

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "storage_type": self.storage_type.value,
            "storage_location_label": self.storage_location_user_text,
        }


class ProviderRegistry:
    """Registry of available resources providers."""

    _providers: dict[str, type[ResourcesProvider]] = {}

    @staticmethod
    def _normalize(name: str) -> str:
        return name.lower().replace(" ", "-")

    @classmethod
    def register(cls, provider_class: type[ResourcesProvider], alias: Optional[str] = None) -> None:
        """Register a provider class under its name and an optional alias."""
        provider = provider_class()
        cls._providers[cls._normalize(provider.name)] = provider_class
        if alias:
            cls._providers[cls._normalize(alias)] = provider_class

    @classmethod
    def get_provider(cls, name: str, **kwargs: Any) -> ResourcesProvider:
        """Get provider instance by name or alias."""
        key = cls._normalize(name)
        if key not in cls._providers:
            available = ', '.join(sorted(cls._providers))
            raise ValueError(f"Unknown provider: {name}. Available: {available}")
        return cls._providers[key](**kwargs)

    @classmethod
    def list_providers(cls) -> list[dict[str, Any]]:
        """List registered providers with their metadata, once per class."""
        result = []
        seen = set()
        for provider_class in cls._providers.values():
            if provider_class in seen:
                continue
            seen.add(provider_class)
            result.append(provider_class().describe())
        return result
