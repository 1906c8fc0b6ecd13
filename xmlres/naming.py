#!/usr/bin/env python3
"""
File naming convention for XML resource files.

Files are named <relative path>/<base name>[.<locale>].xml. A file without a
locale segment holds the invariant language:

    strings.xml          -> storage group 'strings', locale ''
    en/strings.de-DE.xml -> storage group 'en/strings', locale 'de-DE'

The storage group always uses '/' as separator, whatever the platform.
"""

from pathlib import Path, PurePath
from typing import Union

from .models import INVARIANT_LOCALE

RESOURCE_EXTENSION = ".xml"

PathLike = Union[str, PurePath]


def is_resource_file(path: PathLike) -> bool:
    """Check whether a path follows the *.xml naming convention."""
    return PurePath(path).suffix.lower() == RESOURCE_EXTENSION


def strip_extension(file_name: str) -> str:
    """Drop the .xml extension once."""
    if file_name.lower().endswith(RESOURCE_EXTENSION):
        return file_name[:-len(RESOURCE_EXTENSION)]
    return file_name


def split_locale(stem: str) -> tuple[str, str]:
    """
    Split a file name without extension into base name and locale tag.

    The final dot-separated segment is the locale; no dot means the
    invariant language.
    """
    if "." not in stem:
        return stem, INVARIANT_LOCALE
    base_name, _, locale = stem.rpartition(".")
    return base_name, locale


def locale_of(path: PathLike) -> str:
    """Locale tag encoded in a resource file name."""
    return split_locale(strip_extension(PurePath(path).name))[1]


def _relative_to_base(path: Path, base: Path) -> PurePath:
    try:
        return path.relative_to(base)
    except ValueError:
        pass

    # One side relative, the other absolute
    if path.is_absolute() != base.is_absolute():
        try:
            return path.absolute().relative_to(base.absolute())
        except ValueError:
            pass

    if path.is_absolute():
        raise ValueError(f"{path} is not inside base directory {base}")

    # Already relative to the base directory
    return path


def decompose(path: PathLike, base_directory: PathLike) -> tuple[str, str]:
    """
    Derive (storage group, locale tag) from a resource file path.

    Args:
        path: Path of the resource file, absolute or relative to base_directory
        base_directory: Root of the resource tree

    Returns:
        Tuple of storage group ('/' separated, no locale, no extension) and
        locale tag ('' for the invariant file)
    """
    relative = _relative_to_base(Path(path), Path(base_directory))
    base_name, locale = split_locale(strip_extension(relative.name))

    parent = relative.parent.as_posix()
    if parent in ("", "."):
        return base_name, locale
    return f"{parent}/{base_name}", locale


def compose(base_directory: PathLike, storage_group: str, locale: str = INVARIANT_LOCALE) -> Path:
    """
    Build the file path for a storage group in a given locale.

    The invariant file is named exactly <storage group>.xml. An absolute
    storage group already carries its directory and is not prefixed with
    base_directory again.
    """
    group = storage_group.replace("\\", "/")
    if locale:
        file_name = f"{group}.{locale}{RESOURCE_EXTENSION}"
    else:
        file_name = f"{group}{RESOURCE_EXTENSION}"

    candidate = Path(file_name)
    if candidate.is_absolute():
        return candidate
    return Path(base_directory) / candidate
