"""
Configuration loader — reads template.yml into a ``Template``.

This is the primary entry point for loading a package template.
It reads YAML, validates against the Pydantic models, and returns
a typed ``Template`` whose plugins are ready for view building.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from pkgci.core.models.template import Template

logger = logging.getLogger(__name__)

# Default config filename
TEMPLATE_CONFIG_FILE = "template.yml"


class _TemplateLoader(yaml.SafeLoader):
    """SafeLoader that keeps float scalars as their source text.

    Versions are written as ``1.10`` far more often than as ``"1.10"``;
    reading them as floats would turn that into ``1.1``.
    """


def _float_as_text(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> str:
    return loader.construct_scalar(node)


_TemplateLoader.add_constructor("tag:yaml.org,2002:float", _float_as_text)


class ConfigError(Exception):
    """Raised when template configuration is invalid or missing."""


def find_template_file(start_dir: Path | None = None) -> Path | None:
    """Search for template.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to template.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / TEMPLATE_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_template(path: Path | None = None) -> Template:
    """Load and validate a package template.

    Args:
        path: Explicit path to template.yml. If None, searches upward.

    Returns:
        Validated Template model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_template_file()

    if path is None:
        raise ConfigError(
            f"No {TEMPLATE_CONFIG_FILE} found. "
            "Create one in the package directory, or specify --config."
        )

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading template config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.load(raw, Loader=_TemplateLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "template" key or be flat
    template_data = data["template"] if isinstance(data.get("template"), dict) else data

    # Merge top-level keys that sit alongside "template"
    for key in ("user", "version", "plugins"):
        if key in data and key not in template_data:
            template_data[key] = data[key]

    try:
        template = Template.model_validate(template_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid template configuration in {path}: {e}") from e

    logger.info(
        "Loaded template for user '%s' with %d plugins", template.user, len(template.plugins)
    )
    return template
