#!/usr/bin/env python3
"""
Export of resource records into a directory tree of XML files.

Export runs in two phases:

1. Accumulation: every (record, locale) pair is routed to its target file.
   Each target is loaded once into a per-call cache (existing content is
   kept, so unrelated keys survive) and the record's text is merged in.
2. Flush: every cached file is written once, in full.

A file that cannot be read or written is reported through the result
callback and skipped; the rest of the batch carries on.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from .codec import RecordEntry, XmlRecordCodec
from .errors import ResourceSyncError
from .models import ResourceRecord, ResultStatus, StorageOperationResult
from .naming import compose, locale_of

logger = logging.getLogger(__name__)

ResultCallback = Callable[[StorageOperationResult], None]


def _discard_result(result: StorageOperationResult) -> None:
    pass


class ResourceExporter:
    """Writes records into the resource files below one base directory."""

    def __init__(self, base_directory: Union[str, Path], codec: Optional[XmlRecordCodec] = None):
        self.base_directory = Path(base_directory)
        self.codec = codec or XmlRecordCodec()

    def export(
        self,
        project_name: str,
        records: Iterable[ResourceRecord],
        result_callback: Optional[ResultCallback] = None,
    ) -> None:
        """
        Write all records, reporting one result per touched file.

        Args:
            project_name: Name of the project, copied into each result
            records: Records carrying their translations
            result_callback: Receives a StorageOperationResult per file;
                results are dropped when omitted

        Per-file failures never raise.
        """
        report = result_callback or _discard_result

        # Composed path -> entries of that file, in file order
        file_cache: dict[Path, list[RecordEntry]] = {}
        # Files that failed to load during this call
        poisoned: set[Path] = set()

        for record in records:
            for locale in record.locales():
                file_path = compose(self.base_directory, record.storage_group, locale)

                if file_path in poisoned:
                    continue

                entries = file_cache.get(file_path)
                if entries is None:
                    entries = self._load(file_path, project_name, report)
                    if entries is None:
                        poisoned.add(file_path)
                        continue
                    file_cache[file_path] = entries

                entry = next((e for e in entries if e.key == record.key), None)
                if entry is None:
                    entry = RecordEntry(key=record.key)
                    entries.append(entry)

                entry.text = record.get_locale_text(locale)
                entry.comment = record.note

        for file_path, entries in file_cache.items():
            report(self._flush(file_path, entries, project_name))

        logger.info(
            f"Export of '{project_name}' finished: {len(file_cache)} files written or attempted, "
            f"{len(poisoned)} skipped"
        )

    def _load(
        self,
        file_path: Path,
        project_name: str,
        report: ResultCallback,
    ) -> Optional[list[RecordEntry]]:
        """Seed the cache for a file; None when the existing file is unusable."""
        if not file_path.is_file():
            return []

        try:
            return self.codec.read_file(file_path)
        except ResourceSyncError as e:
            logger.warning(f"Skipping {file_path}: {e.message}")
            report(StorageOperationResult(
                file_path=str(file_path),
                project_name=project_name,
                locale=locale_of(file_path),
                status=ResultStatus.ERROR,
                message=e.message,
            ))
            return None

    def _flush(self, file_path: Path, entries: list[RecordEntry], project_name: str) -> StorageOperationResult:
        result = StorageOperationResult(
            file_path=str(file_path),
            project_name=project_name,
            locale=locale_of(file_path),
        )

        try:
            self.codec.write_file(file_path, entries)
        except ResourceSyncError as e:
            logger.error(f"Error saving file {file_path}: {e.message}")
            result.status = ResultStatus.ERROR
            result.message = e.message

        return result
