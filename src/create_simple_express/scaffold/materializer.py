"""Template materialization.

Copies a template's file tree into the target directory. Files are
dispatched on their name:

- names in :data:`RENAME_FILES` stand in for dotfiles a template cannot
  ship literally and are written under the aliased name,
- names containing the ``.template`` marker are read as text, every
  ``{{name}}`` is replaced with the package name and the marker is dropped
  from the output name,
- everything else is copied byte for byte.

The template's ``package.json`` is handled last: placeholders are
substituted, the JSON is parsed, its ``name`` is forced to the package name
and it is written back with two-space indentation.

Materialization is not transactional. An I/O error part-way through leaves
whatever was already written in place and propagates to the caller.
"""

import json
import shutil
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from create_simple_express.scaffold.errors import ManifestError
from create_simple_express.utils.logger import get_logger

logger = get_logger("materializer")

MANIFEST_FILE = "package.json"
PLACEHOLDER = "{{name}}"
TEMPLATE_MARKER = ".template"

RENAME_FILES = MappingProxyType(
    {
        "_gitignore": ".gitignore",
        "_prettierrc": ".prettierrc",
        "_gitattributes": ".gitattributes",
        "_env_example": ".env.example",
    }
)


# ============================================================================
# FILE CLASSIFICATION
# ============================================================================


@dataclass(frozen=True)
class PlainCopy:
    """Copied unchanged under its own name."""


@dataclass(frozen=True)
class TemplatedText:
    """Placeholder substitution, written as ``target``."""

    target: str


@dataclass(frozen=True)
class Renamed:
    """Copied unchanged, written as ``target``."""

    target: str


FileKind = PlainCopy | TemplatedText | Renamed


def classify(name: str) -> FileKind:
    """Classify a file by its base name.

    Examples:
        >>> classify("_gitignore")
        Renamed(target='.gitignore')
        >>> classify("README.template.md")
        TemplatedText(target='README.md')
        >>> classify("server.js")
        PlainCopy()
    """
    if TEMPLATE_MARKER in name:
        stripped = name.replace(TEMPLATE_MARKER, "", 1)
        return TemplatedText(target=RENAME_FILES.get(stripped, stripped))
    if name in RENAME_FILES:
        return Renamed(target=RENAME_FILES[name])
    return PlainCopy()


@dataclass(frozen=True)
class FileEntry:
    """A template file and where it lands in the generated project.

    Attributes:
        relative_path: Path inside the template
        kind: How the file is written
        target_path: Path inside the generated project
    """

    relative_path: Path
    kind: FileKind

    @property
    def target_path(self) -> Path:
        if isinstance(self.kind, PlainCopy):
            return self.relative_path
        return self.relative_path.with_name(self.kind.target)


# ============================================================================
# MATERIALIZATION
# ============================================================================


def enumerate_template(template_root: Path) -> list[FileEntry]:
    """List every file of a template except its top-level manifest.

    Args:
        template_root: Directory of the template payload

    Returns:
        Entries in a stable (sorted) order
    """
    template_root = Path(template_root)
    entries = []
    for path in sorted(template_root.rglob("*")):
        if not path.is_file():
            continue
        relative_path = path.relative_to(template_root)
        if relative_path == Path(MANIFEST_FILE):
            continue
        entries.append(FileEntry(relative_path=relative_path, kind=classify(path.name)))
    return entries


def _substitute(text: str, package_name: str) -> str:
    return text.replace(PLACEHOLDER, package_name)


def write_entry(entry: FileEntry, template_root: Path, target_root: Path, package_name: str) -> Path:
    """Write a single template file into the target directory.

    Returns:
        Absolute path of the written file
    """
    source = Path(template_root) / entry.relative_path
    destination = Path(target_root) / entry.target_path
    destination.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(entry.kind, TemplatedText):
        # Line endings stay as they are in the template
        content = source.read_bytes().decode("utf-8")
        destination.write_bytes(_substitute(content, package_name).encode("utf-8"))
    else:
        shutil.copyfile(source, destination)

    logger.debug(f"Wrote {entry.relative_path} -> {entry.target_path}")
    return destination


def write_manifest(template_root: Path, target_root: Path, package_name: str) -> Path:
    """Render the template's package.json with ``name`` set to ``package_name``.

    Raises:
        ManifestError: If the manifest is missing or is not a JSON object
    """
    source = Path(template_root) / MANIFEST_FILE
    if not source.is_file():
        raise ManifestError(f"Template at {template_root} has no {MANIFEST_FILE}")

    raw = _substitute(source.read_bytes().decode("utf-8"), package_name)
    try:
        manifest = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid {MANIFEST_FILE} in template {template_root}: {e}") from e

    if not isinstance(manifest, dict):
        raise ManifestError(f"{MANIFEST_FILE} in template {template_root} must be a JSON object")

    manifest["name"] = package_name

    destination = Path(target_root) / MANIFEST_FILE
    rendered = json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
    destination.write_bytes(rendered.encode("utf-8"))
    logger.debug(f"Wrote {MANIFEST_FILE} with name '{package_name}'")
    return destination


def materialize(template_root: Path, target_root: Path, package_name: str) -> list[Path]:
    """Copy a template into ``target_root``.

    Args:
        template_root: Directory of the template payload
        target_root: Existing directory receiving the project
        package_name: Resolved package name, substituted for ``{{name}}``

    Returns:
        Paths of the written files, relative to ``target_root``

    Raises:
        ManifestError: If the template's package.json cannot be used
        OSError: On any filesystem failure (already written files are kept)
    """
    target_root = Path(target_root)
    written = []
    for entry in enumerate_template(template_root):
        write_entry(entry, template_root, target_root, package_name)
        written.append(entry.target_path)

    write_manifest(template_root, target_root, package_name)
    written.append(Path(MANIFEST_FILE))

    logger.info(f"Materialized {len(written)} files into {target_root}")
    return written
