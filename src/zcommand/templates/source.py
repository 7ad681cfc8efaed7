"""Locate the template library on disk.

A development checkout ships a plain ``templates/`` tree. Installed packages
ship ``templates.zip`` instead, which is extracted once per distinct archive
content into ``<tmp>/z-command-templates/<md5>/``.
"""

import hashlib
import os
import shutil
import tempfile
import zipfile
from pathlib import Path

from zcommand.config import (
    LOCAL_TEMPLATES_DIR,
    TEMPLATE_CACHE_DIRNAME,
    TEMPLATES_ZIP,
)
from zcommand.exceptions import TemplatesNotFoundError

ARCHIVE_ROOT = "templates"


def default_cache_root() -> Path:
    return Path(tempfile.gettempdir()) / TEMPLATE_CACHE_DIRNAME


def _md5_file(path: Path) -> str:
    h = hashlib.md5()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b""):
            h.update(chunk)
    return h.hexdigest()


def _is_complete(extract_dir: Path) -> bool:
    return (extract_dir / ARCHIVE_ROOT).is_dir()


def extract_templates_zip(zip_path: Path, cache_root: Path | None = None) -> Path:
    """Extract a templates archive into its content-addressed cache directory.

    Returns the extraction directory. A complete directory for the same hash
    is reused without touching the archive again. The archive is unpacked
    into a temporary sibling and renamed into place; when another process
    wins the rename, its copy is kept.
    """
    cache_root = cache_root or default_cache_root()
    extract_dir = cache_root / _md5_file(zip_path)

    if _is_complete(extract_dir):
        return extract_dir

    # Left over from an interrupted extraction by an older release
    if extract_dir.exists():
        shutil.rmtree(extract_dir, ignore_errors=True)

    cache_root.mkdir(parents=True, exist_ok=True)
    staging = Path(tempfile.mkdtemp(prefix=f".{extract_dir.name}-", dir=cache_root))
    try:
        with zipfile.ZipFile(zip_path) as archive:
            archive.extractall(staging)
        try:
            os.replace(staging, extract_dir)
        except OSError:
            if not _is_complete(extract_dir):
                raise
    finally:
        if staging.exists():
            shutil.rmtree(staging, ignore_errors=True)

    return extract_dir


def resolve_templates_dir(
    local_dir: Path | None = None,
    zip_path: Path | None = None,
    cache_root: Path | None = None,
) -> Path:
    """Return a directory containing ``skills/`` and ``agents/``.

    Raises:
        TemplatesNotFoundError: If neither the local tree nor the zip exists.
    """
    local_dir = local_dir or LOCAL_TEMPLATES_DIR
    zip_path = zip_path or TEMPLATES_ZIP

    if local_dir.is_dir():
        return local_dir

    if zip_path.is_file():
        return extract_templates_zip(zip_path, cache_root) / ARCHIVE_ROOT

    raise TemplatesNotFoundError(
        f"Templates not found: looked for {local_dir} and {zip_path}"
    )


def bundle_templates(templates_dir: Path | None = None, output_zip: Path | None = None) -> Path:
    """Zip a templates tree under a top-level ``templates/`` folder."""
    templates_dir = templates_dir or LOCAL_TEMPLATES_DIR
    output_zip = output_zip or TEMPLATES_ZIP

    if not templates_dir.is_dir():
        raise TemplatesNotFoundError(f"Templates directory not found: {templates_dir}")

    output_zip.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(
        output_zip, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9
    ) as archive:
        for path in sorted(templates_dir.rglob("*")):
            if path.is_file():
                arcname = Path(ARCHIVE_ROOT) / path.relative_to(templates_dir)
                archive.write(path, arcname.as_posix())

    return output_zip
