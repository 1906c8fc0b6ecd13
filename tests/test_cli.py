#!/usr/bin/env python3
"""
Tests for the xmlres command-line interface.

Tests verify:
1. import prints or saves the merged records
2. export writes files and reports per-file results
3. Errors are reported as JSON on stderr with exit status 1
"""

import json

from xmlres.cli import load_records, main
from xmlres.codec import XmlRecordCodec


def _stdout_json(capsys):
    return json.loads(capsys.readouterr().out)


def test_import_to_stdout(resource_tree, capsys):
    """Test that import prints records and stats as JSON."""
    assert main(["import", "--base-dir", str(resource_tree)]) == 0

    result = _stdout_json(capsys)
    assert result["status"] == "ok"
    assert result["stats"]["records"] == 4
    assert result["stats"]["locales"] == ["", "de-DE", "fr-FR"]
    assert {r["key"] for r in result["records"]} == {"Hello", "Bye", "File", "Edit"}


def test_import_drop_orphans(resource_tree, capsys):
    """Test that --drop-orphans filters records without invariant text."""
    assert main(["import", "--base-dir", str(resource_tree), "--drop-orphans"]) == 0

    result = _stdout_json(capsys)
    assert result["stats"]["records"] == 3
    assert result["stats"]["dropped_orphans"] == 1


def test_import_to_file_then_export(resource_tree, tmp_path, capsys):
    """Test an import to a records file, an edit and an export back."""
    records_file = tmp_path / "records.json"
    assert main(["import", "--base-dir", str(resource_tree), "--project", "App",
                 "--output", str(records_file)]) == 0
    assert _stdout_json(capsys)["records_file"] == str(records_file)

    project, records = load_records(str(records_file))
    assert project == "App"
    assert len(records) == 4

    data = json.loads(records_file.read_text(encoding="utf-8"))
    for record in data["records"]:
        if record["key"] == "Hello":
            record["translations"]["it"] = "Ciao"
    records_file.write_text(json.dumps(data), encoding="utf-8")

    assert main(["export", "--base-dir", str(resource_tree), "--input", str(records_file)]) == 0

    result = _stdout_json(capsys)
    assert result["project"] == "App"
    assert result["stats"]["files_failed"] == 0
    entries = XmlRecordCodec().read_file(resource_tree / "strings.it.xml")
    assert [(e.key, e.text) for e in entries] == [("Hello", "Ciao")]


def test_export_with_corrupted_file(tmp_path, capsys):
    """Test that a failed file gives exit status 1 while others are written."""
    (tmp_path / "strings.xml").write_text("<strings>", encoding="utf-8")
    records_file = tmp_path / "records.json"
    records_file.write_text(json.dumps([
        {"key": "A", "storage_group": "strings", "translations": {"": "a"}},
        {"key": "B", "storage_group": "other", "translations": {"": "b"}},
    ]), encoding="utf-8")

    assert main(["export", "--base-dir", str(tmp_path), "--input", str(records_file)]) == 1

    result = _stdout_json(capsys)
    assert result["status"] == "error"
    assert result["stats"] == {"records": 2, "files_written": 1, "files_failed": 1}
    assert (tmp_path / "other.xml").is_file()


def test_config_file(resource_tree, tmp_path, capsys):
    """Test that options come from a YAML configuration file."""
    config = tmp_path / "xmlres.yaml"
    config.write_text("base_directory: Resources\nproject_name: FromConfig\n", encoding="utf-8")

    assert main(["import", "--config", str(config)]) == 0

    result = _stdout_json(capsys)
    assert result["project"] == "FromConfig"
    assert result["stats"]["records"] == 4


def test_malformed_import_reports_error(tmp_path, capsys):
    """Test that a malformed file is reported as JSON on stderr."""
    (tmp_path / "strings.xml").write_text("<strings><string>x</string></strings>", encoding="utf-8")

    assert main(["import", "--base-dir", str(tmp_path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    error = json.loads(captured.err.strip().splitlines()[-1])
    assert error["status"] == "error"
    assert error["error_type"] == "MalformedRecordError"


def test_missing_base_dir_option(capsys):
    """Test that running without a base directory is an error."""
    assert main(["import"]) == 1
    error = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert "base_directory is not set" in error["error"]


def test_providers(capsys):
    """Test that the providers command lists the XML provider."""
    assert main(["providers"]) == 0
    result = _stdout_json(capsys)
    assert result["providers"][0]["name"] == "XML Resources Provider"


def test_no_command(capsys):
    """Test that no command prints help and fails."""
    assert main([]) == 1
