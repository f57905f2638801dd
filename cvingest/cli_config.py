"""
CLI configuration data structures.

Defines UserConfig, the result of parsing the command line, used by the
gather / prepare / execute phases of the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .shared import MAX_FILE_SIZE, IngestConfig


@dataclass
class UserConfig:
    """Configuration gathered from user input."""

    source: Path  # Input PDF/DOCX file or folder
    target_dir: Optional[Path] = None  # Folder for <stem>.json outputs
    output: Optional[Path] = None  # Output JSON for a single-file source

    # Execution settings
    workers: int = 1
    max_file_size: int = MAX_FILE_SIZE
    validate: bool = True  # Run the upload checks before parsing
    debug: bool = False
    log_file: Optional[str] = None

    # Filled in by the prepare phase
    inputs: List[Path] = field(default_factory=list)

    @property
    def ingest_config(self) -> IngestConfig:
        return IngestConfig(max_file_size=self.max_file_size)

    @property
    def is_batch(self) -> bool:
        """Whether more than one document is processed."""
        return len(self.inputs) > 1 or self.source.is_dir()
