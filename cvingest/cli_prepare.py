"""
CLI Phase 2: Prepare execution environment.

Validates inputs and prepares directories for execution.
No actual execution - just setup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from .cli_config import UserConfig
from .cli_parallel import output_path_for, scan_directory_for_resumes
from .logging_utils import LOG


def _check_distinct_outputs(config: UserConfig) -> None:
    """Refuse inputs whose JSON would land on the same file."""
    seen: Dict[str, Path] = {}
    for path in config.inputs:
        out = output_path_for(path, config)
        if out is None:
            continue
        # case-insensitive filesystems treat CV.pdf.json and cv.pdf.json as one file
        key = str(out).lower()
        if key in seen:
            raise ValueError(f"{seen[key]} and {path} would both be written to {out}")
        seen[key] = path


def prepare_execution_environment(config: UserConfig) -> UserConfig:
    """
    Phase 2: Validate inputs and prepare execution environment.

    - Collects input files from the source file or folder
    - Checks the output options fit the source
    - Creates the target directory

    Returns the same config (for chaining).
    """
    src = config.source
    if src.is_file():
        config.inputs = [src]
    elif src.is_dir():
        config.inputs = scan_directory_for_resumes(src)
        if not config.inputs:
            raise ValueError(f"No .pdf or .docx files found in directory: {src}")
        if config.output is not None:
            raise ValueError("--output can only be used with a single source file; use --target")
        if config.target_dir is None:
            raise ValueError("--target is required when the source is a folder")
    else:
        raise FileNotFoundError(f"Path not found or not a file/folder: {src}")

    _check_distinct_outputs(config)

    if config.target_dir is not None:
        config.target_dir.mkdir(parents=True, exist_ok=True)

    LOG.debug("Collected %d input file(s) from %s", len(config.inputs), src)
    return config
