"""Generated launcher scripts for running JavaScript test artifacts under node."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from importlib import resources
from pathlib import Path

from runtime_launcher.test_selection.test_spec_models import InvocationTestSpec

DRIVER_FILENAME = "driver.cjs"
MANIFEST_FILENAME = "package.json"
MANIFEST_CONTENT = "{}"

_TEMPLATE_RESOURCE = "templates/js_driver.js"
_PATH_PLACEHOLDER = "origin_js_path"
_PARAMS_PLACEHOLDER = "let testParams = []"
_PACKAGE_PLACEHOLDER = 'let packageName = ""'

_LOGGER = logging.getLogger(__name__)


class DriverSynthesisError(Exception):
    """Raised when the driver script or its directory cannot be written."""


def load_driver_template() -> str:
    return (
        resources.files("runtime_launcher.driver_synthesis")
        .joinpath(_TEMPLATE_RESOURCE)
        .read_text(encoding="utf-8")
    )


def render_js_driver(
    template: str, artifact_path: os.PathLike[str] | str, test_spec: InvocationTestSpec
) -> str:
    """Substitute the artifact path, test parameters and package name into the template.

    Plain text replacement: placeholder text appearing elsewhere in the template
    is replaced too. Needs hardening.
    """
    artifact_text = os.fspath(artifact_path).replace("\\", "/")
    test_params = json.dumps(list(test_spec.native_argument_tokens()), separators=(",", ":"))
    return (
        template.replace(_PATH_PLACEHOLDER, artifact_text)
        .replace(_PARAMS_PLACEHOLDER, f"let testParams = {test_params}")
        .replace(_PACKAGE_PLACEHOLDER, f"let packageName = {json.dumps(test_spec.package)}")
    )


def synthesize_js_driver(
    artifact_path: os.PathLike[str] | str, test_spec: InvocationTestSpec
) -> tuple[tempfile.TemporaryDirectory[str], Path]:
    """Write a test driver for a JS artifact into a fresh temporary directory.

    The directory also receives an empty `package.json` so that a parent
    `package.json` declaring `"type": "module"` does not change how node loads
    the driver.

    Returns:
      The owned temporary directory and the path of the driver script inside it.

    Raises:
      DriverSynthesisError: If the directory or one of its files cannot be written.
    """
    driver_text = render_js_driver(load_driver_template(), artifact_path, test_spec)
    try:
        temp_dir = tempfile.TemporaryDirectory(prefix="runtime-launcher-js-")
    except OSError as exc:
        raise DriverSynthesisError(f"Failed to create JS test driver directory: {exc}") from exc

    directory = Path(temp_dir.name)
    driver_path = directory / DRIVER_FILENAME
    try:
        driver_path.write_text(driver_text, encoding="utf-8")
        (directory / MANIFEST_FILENAME).write_text(MANIFEST_CONTENT, encoding="utf-8")
    except OSError as exc:
        temp_dir.cleanup()
        raise DriverSynthesisError(f"Failed to write JS test driver in {directory}: {exc}") from exc

    _LOGGER.debug("Wrote JS test driver %s", driver_path)
    return temp_dir, driver_path
