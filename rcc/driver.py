"""Helpers that drive the compilation pipeline around the parser."""

from __future__ import annotations

import subprocess
from pathlib import Path


def compute_output_file(input_file: str | Path) -> Path:
    """Return the preprocessed-file path: the input with its extension set to ``.i``."""
    return Path(input_file).with_suffix(".i")


def run_preprocessor(
    gcc_path: str | Path, input_file: str | Path, output_file: str | Path
) -> subprocess.CompletedProcess[bytes]:
    """Run the C preprocessor on ``input_file``, writing to ``output_file``.

    Raises ``OSError`` when the preprocessor cannot be started; a non-zero exit
    status is reported through the returned process result.
    """
    return subprocess.run(
        [str(gcc_path), "-E", "-P", str(input_file), "-o", str(output_file)],
        capture_output=True,
        check=False,
    )