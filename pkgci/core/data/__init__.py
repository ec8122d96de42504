"""
Built-in template files shipped with the package.

The default ``file`` of every CI plugin points into ``templates/`` here.
The renderer reads them; nothing in this package parses them.

Usage::

    from pkgci.core.data import default_file

    default_file("travis.yml")   # → "/…/pkgci/core/data/templates/travis.yml"
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent
TEMPLATES_DIR = _DATA_DIR / "templates"


def default_file(name: str) -> str:
    """Resolve a built-in template by logical name.

    Missing files are not an error here: the path is only a default value
    and may be overridden before anything tries to read it.
    """
    path = TEMPLATES_DIR / name
    if not path.is_file():
        logger.warning("Default template not found: %s", path)
    return str(path)


def available_templates() -> list[str]:
    """List the logical names of all built-in templates."""
    if not TEMPLATES_DIR.is_dir():
        return []
    return sorted(p.name for p in TEMPLATES_DIR.iterdir() if p.is_file())
