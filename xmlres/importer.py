#!/usr/bin/env python3
"""
Import of resource records from a directory tree of XML files.

Every *.xml file below the base directory is read. Entries sharing the same
storage group and key are folded into one ResourceRecord, each file
contributing the text for its own locale.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .codec import XmlRecordCodec
from .errors import StorageIOError
from .models import ResourceRecord
from .naming import decompose, is_resource_file

logger = logging.getLogger(__name__)


class ResourceImporter:
    """
    Builds the merged record collection for one base directory.

    Any malformed or unreadable file aborts the whole import; there is no
    partial result.
    """

    def __init__(self, base_directory: Union[str, Path], codec: Optional[XmlRecordCodec] = None):
        self.base_directory = Path(base_directory)
        self.codec = codec or XmlRecordCodec()

    def find_files(self) -> list[Path]:
        """All *.xml files below the base directory, any extension case, sorted by path."""
        if not self.base_directory.is_dir():
            raise StorageIOError("Base directory not found", str(self.base_directory))

        try:
            files = [
                p for p in self.base_directory.rglob("*")
                if p.is_file() and is_resource_file(p)
            ]
        except OSError as e:
            raise StorageIOError(f"Cannot list files: {e}", str(self.base_directory)) from e

        return sorted(files)

    def import_records(self) -> list[ResourceRecord]:
        """
        Read the whole tree and merge all entries.

        Returns:
            Records in first-seen order, one per (storage group, key)

        Raises:
            MalformedRecordError: A file is not valid XML or lacks a key
            StorageIOError: The tree or a file cannot be read
        """
        working: dict[tuple[str, str], ResourceRecord] = {}

        files = self.find_files()
        logger.info(f"Importing {len(files)} resource files from {self.base_directory}")

        for file_path in files:
            storage_group, locale = decompose(file_path, self.base_directory)

            for entry in self.codec.read_file(file_path):
                composite_key = (storage_group, entry.key)
                record = working.get(composite_key)
                if record is None:
                    record = ResourceRecord(key=entry.key, storage_group=storage_group)
                    working[composite_key] = record

                record.set_locale_text(locale, entry.text)
                # Last file processed wins the note
                record.note = entry.comment

        logger.info(f"Imported {len(working)} records")
        return list(working.values())


def drop_orphans(records: Iterable[ResourceRecord]) -> list[ResourceRecord]:
    """
    Remove records that have no invariant text.

    Translations whose key is missing from the invariant file are not valid
    strings for a localization project. The importer keeps them; hosts that
    need only valid records apply this filter afterwards.
    """
    kept = []
    for record in records:
        if record.has_invariant():
            kept.append(record)
        else:
            logger.debug(f"Dropping orphan record {record.storage_group}:{record.key}")
    return kept
