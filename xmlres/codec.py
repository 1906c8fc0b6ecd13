#!/usr/bin/env python3
"""
XML record codec.

Reads and writes the flat string table stored in every resource file:

```xml
<?xml version="1.0" encoding="utf-8"?>
<strings>
  <string key="Hello" comment="Greeting on the start page">Hello</string>
  <string key="Bye">Goodbye</string>
</strings>
```

Only the 'key' attribute is required. Entries keep document order on
decode and caller order on encode.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union
from xml.etree import ElementTree as ET

from .errors import InvalidCharacterError, MalformedRecordError, StorageIOError

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


@dataclass
class RecordEntry:
    """One <string> element of a resource file."""
    key: str
    text: str = ""
    comment: Optional[str] = None


class XmlRecordCodec:
    """Parse and serialize the <strings>/<string> file format."""

    ROOT_TAG = "strings"
    ENTRY_TAG = "string"
    KEY_ATTRIBUTE = "key"
    COMMENT_ATTRIBUTE = "comment"

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def decode(self, content: Union[str, bytes], source: Optional[str] = None) -> list[RecordEntry]:
        """
        Parse resource file content into entries.

        Args:
            content: Raw XML, as text or bytes
            source: File name used in error messages

        Returns:
            List of RecordEntry objects in document order

        Raises:
            MalformedRecordError: Invalid XML or a <string> without key
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise MalformedRecordError(f"Invalid XML: {e}", source)

        if root.tag != self.ROOT_TAG:
            logger.debug(f"Root element is '{root.tag}', not '{self.ROOT_TAG}': no entries in {source}")
            return []

        entries = []
        for elem in root.findall(self.ENTRY_TAG):
            key = elem.get(self.KEY_ATTRIBUTE)
            if key is None:
                raise MalformedRecordError(
                    f"Invalid XML file, '{self.KEY_ATTRIBUTE}' attribute not found!", source
                )
            entries.append(RecordEntry(
                key=key,
                text="".join(elem.itertext()),
                comment=elem.get(self.COMMENT_ATTRIBUTE),
            ))

        return entries

    def encode(self, entries: Iterable[RecordEntry]) -> str:
        """
        Serialize entries into a complete resource file.

        The output only depends on the entries, so encoding the same list
        twice gives identical text.

        Raises:
            InvalidCharacterError: A key, comment or text holds a character
                XML 1.0 cannot represent
        """
        root = ET.Element(self.ROOT_TAG)
        for entry in entries:
            self._check_characters(entry)
            elem = ET.SubElement(root, self.ENTRY_TAG)
            elem.set(self.KEY_ATTRIBUTE, entry.key)
            if entry.comment is not None:
                elem.set(self.COMMENT_ATTRIBUTE, entry.comment)
            elem.text = entry.text

        ET.indent(root, space=self.indent)
        body = ET.tostring(root, encoding='unicode')
        # Attributes are already escaped; a raw CR can only come from text and
        # would be read back as LF
        body = body.replace("\r", "&#13;")
        return f"{XML_DECLARATION}\n{body}\n"

    def _check_characters(self, entry: RecordEntry) -> None:
        for name, value in (("key", entry.key), ("comment", entry.comment), ("text", entry.text)):
            if value is None:
                continue
            match = INVALID_XML_CHARS.search(value)
            if match:
                raise InvalidCharacterError(
                    f"Invalid character U+{ord(match.group()):04X} in {name} of '{entry.key}'"
                )

    def read_file(self, path: Union[str, Path]) -> list[RecordEntry]:
        """Read and decode one resource file."""
        try:
            raw = Path(path).read_bytes()
        except OSError as e:
            raise StorageIOError(f"Cannot read file: {e.strerror or e}", str(path)) from e

        entries = self.decode(raw, source=str(path))
        logger.info(f"Read {len(entries)} entries from {path}")
        return entries

    def write_file(self, path: Union[str, Path], entries: Iterable[RecordEntry]) -> None:
        """Encode entries and overwrite the file, creating parent directories."""
        file_path = Path(path)
        content = self.encode(entries)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StorageIOError(f"Cannot write file: {e.strerror or e}", str(path)) from e

        logger.info(f"Saved file: {file_path}")
