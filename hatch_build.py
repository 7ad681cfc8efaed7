"""Bundle templates/ into the wheel as zcommand/templates.zip."""

import tempfile
import zipfile
from pathlib import Path

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

ARCHIVE_ROOT = "templates"
WHEEL_PATH = "zcommand/templates.zip"


def write_templates_zip(templates_dir: Path, output_zip: Path) -> Path:
    with zipfile.ZipFile(
        output_zip, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9
    ) as archive:
        for path in sorted(templates_dir.rglob("*")):
            if path.is_file():
                arcname = Path(ARCHIVE_ROOT) / path.relative_to(templates_dir)
                archive.write(path, arcname.as_posix())
    return output_zip


class TemplatesBuildHook(BuildHookInterface):
    PLUGIN_NAME = "custom"

    def initialize(self, version: str, build_data: dict) -> None:
        # Editable installs read templates/ from the checkout directly
        if self.target_name != "wheel" or version == "editable":
            return

        templates_dir = Path(self.root) / ARCHIVE_ROOT
        if not templates_dir.is_dir():
            raise FileNotFoundError(f"Templates directory not found: {templates_dir}")

        self._staging = tempfile.TemporaryDirectory()
        output_zip = write_templates_zip(templates_dir, Path(self._staging.name) / "templates.zip")
        build_data.setdefault("force_include", {})[str(output_zip)] = WHEEL_PATH

    def finalize(self, version: str, build_data: dict, artifact_path: str) -> None:
        staging = getattr(self, "_staging", None)
        if staging is not None:
            staging.cleanup()
