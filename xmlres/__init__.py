"""
xmlres - XML resource file provider for localization projects

Synchronizes localized string tables stored as one XML file per language
(<name>.xml for the invariant language, <name>.<locale>.xml for each
translation) with an in-memory collection of resource records.

Quick start:
    xmlres import --base-dir Resources --output records.json
    # translate records.json
    xmlres export --base-dir Resources --input records.json
"""

__version__ = "1.0.0"

from .codec import RecordEntry, XmlRecordCodec
from .errors import InvalidCharacterError, MalformedRecordError, ResourceSyncError, StorageIOError
from .exporter import ResourceExporter
from .importer import ResourceImporter, drop_orphans
from .models import ResourceRecord, ResultStatus, StorageOperationResult, StorageType
from .providers import ProviderRegistry, ResourcesProvider, XmlResourcesProvider

__all__ = [
    "InvalidCharacterError",
    "MalformedRecordError",
    "ProviderRegistry",
    "RecordEntry",
    "ResourceExporter",
    "ResourceImporter",
    "ResourceRecord",
    "ResourceSyncError",
    "ResourcesProvider",
    "ResultStatus",
    "StorageIOError",
    "StorageOperationResult",
    "StorageType",
    "XmlRecordCodec",
    "XmlResourcesProvider",
    "drop_orphans",
]
