"""
Version helpers shared by every CI plugin.

Versions reach the plugins in two shapes:

    - ``packaging.version.Version``  — structured, formatted as ``major.minor``
    - ``str``                        — opaque labels (``"nightly"``) or
                                       already-canonical strings (``"1.3"``)

Everything a view builder puts in a template is the canonical string form.
"""

from __future__ import annotations

import re
from typing import Iterable, Union

from packaging.version import Version

VersionSpec = Union[Version, str]

# ── Static tables ───────────────────────────────────────────────

# Versions permitted to fail without failing the pipeline.
# Release candidates get added here while they are being tested.
ALLOWED_FAILURES: tuple[str, ...] = ("1.3", "nightly")

DEFAULT_VERSION = Version("1.0")
LATEST_VERSION = Version("1.5")
NIGHTLY = "nightly"


def format_version(v: VersionSpec) -> str:
    """Strip everything but the major and minor release from a version.

    Strings are returned unchanged.

    >>> format_version(Version("1.4.2"))
    '1.4'
    >>> format_version("nightly")
    'nightly'
    """
    if isinstance(v, Version):
        return f"{v.major}.{v.minor}"
    return str(v)


DEFAULT_CI_VERSIONS: tuple[str, ...] = tuple(
    format_version(v) for v in (DEFAULT_VERSION, LATEST_VERSION, NIGHTLY)
)
# Nightly has no Docker image, so container-based providers skip it.
DEFAULT_CI_VERSIONS_NO_NIGHTLY: tuple[str, ...] = tuple(
    format_version(v) for v in (DEFAULT_VERSION, LATEST_VERSION)
)


_NUMERIC_PART = re.compile(r"\d+")


def _numeric_key(v: str) -> tuple:
    # Numeric versions first, ordered by their integer parts; labels after.
    parts = v.split(".")
    if all(_NUMERIC_PART.fullmatch(p) for p in parts):
        return (0, tuple(int(p) for p in parts), v)
    return (1, (), v)


def collect_versions(
    primary: VersionSpec,
    extra_versions: Iterable[VersionSpec],
    *,
    numeric: bool = False,
) -> list[str]:
    """Combine the package version with extra versions, formatted as ``major.minor``.

    The result has no duplicates and is sorted by plain string comparison,
    so ``"1.10"`` sorts before ``"1.9"``. Pass ``numeric=True`` to order
    numeric versions by value instead.

    Args:
        primary: The package's own language version.
        extra_versions: Additional versions to test against.
        numeric: Sort numerically rather than lexicographically.

    Returns:
        Sorted list of canonical version strings.
    """
    versions = {format_version(v) for v in (primary, *extra_versions)}
    if numeric:
        return sorted(versions, key=_numeric_key)
    return sorted(versions)


def allowed_failures(versions: Iterable[str]) -> list[str]:
    """Return the versions that CI should allow to fail, in input order."""
    return [v for v in versions if v in ALLOWED_FAILURES]


def quote_list(items: Iterable[str]) -> str:
    """Render items as a comma-joined list of double-quoted literals.

    >>> quote_list(["amd64", "arm"])
    '"amd64", "arm"'
    """
    return ", ".join(f'"{item}"' for item in items)
