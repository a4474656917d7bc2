"""Driver synthesis exports."""

from .js_driver import (
    DRIVER_FILENAME,
    MANIFEST_FILENAME,
    DriverSynthesisError,
    render_js_driver,
    synthesize_js_driver,
)

__all__ = [
    "DRIVER_FILENAME",
    "MANIFEST_FILENAME",
    "DriverSynthesisError",
    "render_js_driver",
    "synthesize_js_driver",
]
