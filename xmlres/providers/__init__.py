#!/usr/bin/env python3
"""
Resources providers.

Available providers:
- xml: one XML string table per language, <name>[.<locale>].xml
"""

from .base import ProviderRegistry, ResourcesProvider
from .xml_provider import XmlResourcesProvider

ProviderRegistry.register(XmlResourcesProvider, alias="xml")

__all__ = [
    'ProviderRegistry',
    'ResourcesProvider',
    'XmlResourcesProvider',
]
