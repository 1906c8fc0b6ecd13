#!/usr/bin/env python3
"""
XML resources provider.

Reads all XML files in the base directory and treats them as string
resource files named <file name>[.<culture code>].xml. The file without a
culture code (e.g. strings.xml) holds the invariant strings; files with one
(e.g. strings.de-DE.xml) hold translations.

Subfolders of the base directory are processed too. The subfolder becomes
part of the storage group, so all translations of an invariant file must
live in the same folder. Comments are supported.
"""

import logging
from typing import Iterable, Optional

from ..exporter import ResourceExporter, ResultCallback
from ..importer import ResourceImporter
from ..models import ResourceRecord, StorageType
from .base import ResourcesProvider

logger = logging.getLogger(__name__)


class XmlResourcesProvider(ResourcesProvider):
    """Provider for one-language-per-file XML string tables."""

    @property
    def name(self) -> str:
        return "XML Resources Provider"

    @property
    def description(self) -> str:
        return "Standard XML Resources Provider. Every XML file contains one language."

    @property
    def storage_location_user_text(self) -> str:
        return "Base Directory where language files are located"

    @property
    def storage_type(self) -> StorageType:
        return StorageType.DIRECTORY

    def export_resource_strings(
        self,
        project_name: str,
        records: Iterable[ResourceRecord],
        result_callback: Optional[ResultCallback] = None,
    ) -> None:
        base_directory = self.resolve_storage_location()
        logger.info(f"Exporting project '{project_name}' to {base_directory}")
        ResourceExporter(base_directory).export(project_name, records, result_callback)

    def import_resource_strings(self, project_name: str) -> list[ResourceRecord]:
        base_directory = self.resolve_storage_location()
        logger.info(f"Importing project '{project_name}' from {base_directory}")
        return ResourceImporter(base_directory).import_records()
