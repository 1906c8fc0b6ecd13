"""Shared fixtures for resource tree tests."""

from pathlib import Path

import pytest


def write_resource(base: Path, relative: str, body: str) -> Path:
    """Write a <strings> file below base, creating folders as needed."""
    path = base / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        f'<?xml version="1.0" encoding="utf-8"?>\n<strings>\n{body}\n</strings>\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def resource_tree(tmp_path):
    """A base directory with an invariant file, a translation and a subfolder."""
    base = tmp_path / "Resources"
    write_resource(base, "strings.xml",
                   '  <string key="Hello" comment="Start page">Hi</string>\n'
                   '  <string key="Bye">Goodbye</string>')
    write_resource(base, "strings.de-DE.xml",
                   '  <string key="Hello">Hallo</string>\n'
                   '  <string key="Bye">Tschuess</string>')
    write_resource(base, "en/menu.xml",
                   '  <string key="File">File</string>')
    write_resource(base, "en/menu.fr-FR.xml",
                   '  <string key="File">Fichier</string>\n'
                   '  <string key="Edit">Editer</string>')
    return base
