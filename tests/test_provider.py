#!/usr/bin/env python3
"""
Tests for the XML resources provider and the provider registry.
"""

import os
from pathlib import Path

import pytest

from xmlres.models import ResourceRecord, ResultStatus, StorageType
from xmlres.providers import ProviderRegistry, ResourcesProvider, XmlResourcesProvider


@pytest.fixture
def provider(resource_tree):
    """Fixture to create a provider rooted at the sample resource tree."""
    return XmlResourcesProvider(storage_location=str(resource_tree))


def test_metadata():
    """Test the texts and storage type shown to the host."""
    provider = XmlResourcesProvider()

    assert provider.name == "XML Resources Provider"
    assert provider.description == "Standard XML Resources Provider. Every XML file contains one language."
    assert provider.storage_location_user_text == "Base Directory where language files are located"
    assert provider.storage_type is StorageType.DIRECTORY


@pytest.mark.parametrize("value", ["", "   ", None])
def test_blank_storage_location_is_rejected(value):
    """Test that an empty or blank storage location raises ValueError."""
    provider = XmlResourcesProvider()
    with pytest.raises(ValueError):
        provider.storage_location = value


def test_unset_storage_location(tmp_path):
    """Test that importing without a storage location raises ValueError."""
    with pytest.raises(ValueError):
        XmlResourcesProvider(solution_path=str(tmp_path)).import_resource_strings("Demo")


def test_relative_location_uses_solution_path(tmp_path):
    """Test that a relative location is joined to the solution path and normalized."""
    provider = XmlResourcesProvider(storage_location="Resources/../Resources", solution_path=str(tmp_path))
    assert provider.resolve_storage_location() == tmp_path / "Resources"


def test_absolute_location_is_used_verbatim(tmp_path):
    """Test that an absolute location ignores the solution path."""
    provider = XmlResourcesProvider(storage_location=str(tmp_path / "abs"), solution_path="/somewhere/else")
    assert provider.resolve_storage_location() == tmp_path / "abs"


def test_relative_location_without_solution_path(tmp_path, monkeypatch):
    """Test that the current directory is the root when no solution path is set."""
    monkeypatch.chdir(tmp_path)
    provider = XmlResourcesProvider(storage_location="Resources")
    assert provider.resolve_storage_location() == Path.cwd() / "Resources"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_symlinked_solution_path_is_kept(tmp_path):
    """Test that a symlinked solution directory is not replaced by its target."""
    real = tmp_path / "real"
    (real / "Resources").mkdir(parents=True)
    link = tmp_path / "link"
    try:
        link.symlink_to(real, target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlink")

    provider = XmlResourcesProvider(storage_location="Resources", solution_path=str(link))

    assert provider.resolve_storage_location() == link / "Resources"


def test_import(provider):
    """Test that the provider imports the whole tree."""
    records = provider.import_resource_strings("Demo")
    assert {(r.storage_group, r.key) for r in records} == {
        ("strings", "Hello"), ("strings", "Bye"), ("en/menu", "File"), ("en/menu", "Edit"),
    }


def test_import_relative_to_solution(resource_tree):
    """Test import through a location relative to the solution path."""
    provider = XmlResourcesProvider(storage_location="Resources", solution_path=str(resource_tree.parent))
    assert len(provider.import_resource_strings("Demo")) == 4


def test_export_reports_results(provider, resource_tree):
    """Test that export reports one success per written file."""
    results = []
    records = [ResourceRecord("Hello", "strings", {"": "Hey", "es": "Hola"})]

    provider.export_resource_strings("Demo", records, results.append)

    assert {Path(r.file_path).name for r in results} == {"strings.xml", "strings.es.xml"}
    assert all(r.status is ResultStatus.SUCCESS and r.project_name == "Demo" for r in results)
    assert (resource_tree / "strings.es.xml").is_file()


def test_export_returns_nothing(provider):
    """Test that export signals only through the callback."""
    assert provider.export_resource_strings("Demo", []) is None


def test_registry_lookup():
    """Test lookup by alias and by display name."""
    assert isinstance(ProviderRegistry.get_provider("xml"), XmlResourcesProvider)
    assert isinstance(ProviderRegistry.get_provider("XML Resources Provider"), XmlResourcesProvider)


def test_registry_passes_settings(tmp_path):
    """Test that keyword arguments reach the provider instance."""
    provider = ProviderRegistry.get_provider("xml", storage_location="res", solution_path=str(tmp_path))
    assert provider.resolve_storage_location() == tmp_path / "res"


def test_registry_unknown_provider():
    """Test that an unknown name raises ValueError listing the choices."""
    with pytest.raises(ValueError, match="Unknown provider"):
        ProviderRegistry.get_provider("json")


def test_registry_lists_each_provider_once():
    """Test that an alias does not duplicate a provider in the listing."""
    providers = ProviderRegistry.list_providers()
    names = [p["name"] for p in providers]

    assert names.count("XML Resources Provider") == 1
    assert providers[names.index("XML Resources Provider")]["storage_type"] == "directory"


def test_provider_contract_is_abstract():
    """Test that the base class cannot be instantiated."""
    with pytest.raises(TypeError):
        ResourcesProvider()
