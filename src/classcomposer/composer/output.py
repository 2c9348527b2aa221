"""
Fragment manifests and class files.

A manifest is a YAML or JSON document listing the submissions for one class.
Loading one and applying it to a composer replays those submissions; the
rendered class is then written to ``<ClassName>.java``.
"""

import logging
import re
from pathlib import Path

import orjson
import yaml
from pydantic import ValidationError

from classcomposer.composer.composer import ClassBodyComposer
from classcomposer.composer.exceptions import ComposerError, ManifestError
from classcomposer.config.models import JAVA_IDENTIFIER, ClassTemplate, FragmentManifest

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def load_manifest(manifest_path: Path) -> FragmentManifest:
    """Load a fragment manifest from a YAML or JSON file."""
    if not manifest_path.exists():
        raise ManifestError(f"Manifest file not found: {manifest_path}")

    suffix = manifest_path.suffix.lower()
    try:
        if suffix in JSON_SUFFIXES:
            raw = orjson.loads(manifest_path.read_bytes())
        elif suffix in YAML_SUFFIXES:
            # Bytes let the YAML reader report bad encodings as YAMLError
            raw = yaml.safe_load(manifest_path.read_bytes())
        else:
            raise ManifestError(
                f"Unsupported manifest format '{suffix}'. "
                f"Expected one of: {list(YAML_SUFFIXES + JSON_SUFFIXES)}"
            )
    except (orjson.JSONDecodeError, yaml.YAMLError) as e:
        raise ManifestError(f"Invalid manifest {manifest_path}: {e}")

    if raw is None:
        raise ManifestError(f"Manifest file is empty: {manifest_path}")
    if not isinstance(raw, dict):
        raise ManifestError(f"Manifest must be a mapping, got {type(raw).__name__}")

    try:
        manifest = FragmentManifest(**raw)
    except ValidationError as e:
        raise ManifestError(f"Manifest validation failed:\n{e}")

    logger.info(f"Loaded {len(manifest.fragments)} manifest entries from {manifest_path}")
    return manifest


def compose_from_manifest(
    manifest: FragmentManifest,
    template: ClassTemplate | None = None,
) -> ClassBodyComposer:
    """Create a composer and replay a manifest's submissions into it."""
    composer = ClassBodyComposer(template)
    manifest.apply(composer)
    return composer


def write_class_file(composer: ClassBodyComposer, output_dir: Path) -> Path:
    """Render the composer and write ``<ClassName>.java`` into ``output_dir``.

    Returns the path of the written file.
    """
    if not re.fullmatch(JAVA_IDENTIFIER, composer.class_name):
        raise ComposerError(f"Invalid class name for a class file: {composer.class_name!r}")

    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / f"{composer.class_name}.java"
    out_path.write_text(composer.render())
    logger.info(f"Wrote {out_path}")
    return out_path
