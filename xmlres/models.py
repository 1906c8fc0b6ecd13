#!/usr/bin/env python3
"""
Data model shared by the importer, the exporter and the provider facade.

ResourceRecord is the universal string entity: one key within one storage
group, carrying its invariant text and every translation. StorageOperationResult
is what the exporter reports for each file it touches.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

# Locale tag of the invariant (default) language
INVARIANT_LOCALE = ""


class ResultStatus(str, Enum):
    """Outcome of writing a single resource file."""
    SUCCESS = "success"
    ERROR = "error"


class StorageType(str, Enum):
    """Kind of storage location a provider expects from the host."""
    FILE = "file"
    DIRECTORY = "directory"
    TEXT = "text"


@dataclass
class ResourceRecord:
    """
    A single localizable string.

    Attributes:
        key: Identifier, unique within its storage group
        storage_group: Relative path + base file name, '/' separated
        translations: Map of locale tag -> text ('' is the invariant language)
        note: Optional comment, one per record
    """
    key: str
    storage_group: str = ""
    translations: dict[str, str] = field(default_factory=dict)
    note: Optional[str] = None

    @property
    def invariant_text(self) -> str:
        """Default-language text, '' when the invariant language is missing."""
        return self.translations.get(INVARIANT_LOCALE, "")

    @invariant_text.setter
    def invariant_text(self, text: str) -> None:
        self.translations[INVARIANT_LOCALE] = text

    def set_locale_text(self, locale: str, text: str) -> None:
        self.translations[locale] = text

    def get_locale_text(self, locale: str) -> str:
        return self.translations.get(locale, "")

    def locales(self) -> list[str]:
        """Locale tags present on this record, in insertion order."""
        return list(self.translations)

    def has_invariant(self) -> bool:
        return INVARIANT_LOCALE in self.translations

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {
            "key": self.key,
            "storage_group": self.storage_group,
            "translations": dict(self.translations),
        }
        if self.note is not None:
            data["note"] = self.note
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ResourceRecord":
        """Create from dictionary."""
        if "key" not in data:
            raise ValueError(f"Record is missing 'key': {data!r}")

        translations = data.get("translations") or {}
        if not isinstance(translations, dict):
            raise ValueError(f"Record '{data['key']}' has invalid translations")

        return cls(
            key=str(data["key"]),
            storage_group=str(data.get("storage_group", "")),
            translations={str(k): str(v) for k, v in translations.items()},
            note=data.get("note"),
        )


@dataclass
class StorageOperationResult:
    """Status of a single file touched by an export."""
    file_path: str
    project_name: str = ""
    locale: str = INVARIANT_LOCALE
    status: ResultStatus = ResultStatus.SUCCESS
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file_path,
            "project": self.project_name,
            "locale": self.locale,
            "status": self.status.value,
            "message": self.message,
        }
