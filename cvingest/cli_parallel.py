"""
CLI parallel processing.

Parses every collected resume, one document per task, on a thread pool.
Documents share no state, so no ordering or locking is needed between them.
"""

from __future__ import annotations

import traceback
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional, Tuple

from .cli_config import UserConfig
from .errors import CVIngestError
from .logging_utils import LOG, fmt_sections
from .pipeline import process_single_file
from .validation import ALLOWED_EXTENSIONS, validate_upload


def scan_directory_for_resumes(directory: Path) -> List[Path]:
    """
    Recursively scan directory for all .pdf and .docx files.

    Args:
        directory: Directory to scan

    Returns:
        Sorted list of resume paths; Word lock files (~$...) are skipped
    """
    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ValueError(f"Path is not a directory: {directory}")

    resumes = []
    for path in directory.rglob("*"):
        if not path.is_file() or path.suffix.lower() not in ALLOWED_EXTENSIONS:
            continue
        # Skip temporary Word files (start with ~$)
        if path.name.startswith("~$"):
            continue
        resumes.append(path)

    return sorted(resumes)


def output_path_for(file_path: Path, config: UserConfig) -> Optional[Path]:
    """
    Where the JSON for ``file_path`` goes; None means stdout.

    Under --target the folder layout below the source is kept and the
    input's extension stays in the name, so cv.pdf, cv.docx and sub/cv.pdf
    get cv.pdf.json, cv.docx.json and sub/cv.pdf.json.
    """
    if config.output is not None:
        return config.output
    if config.target_dir is None:
        return None

    if config.source.is_dir():
        rel = file_path.relative_to(config.source)
    else:
        rel = Path(file_path.name)
    return config.target_dir / rel.parent / f"{rel.name}.json"


def process_single_file_wrapper(file_path: Path, config: UserConfig) -> Tuple[bool, str]:
    """
    Parse one resume and write its JSON next to the others.

    Returns:
        Tuple of (success: bool, message: str)
    """
    try:
        if config.validate:
            validate_upload(file_path.name, file_path.stat().st_size, max_size=config.max_file_size)

        data = process_single_file(
            file_path,
            out=output_path_for(file_path, config),
            config=config.ingest_config,
        )
        return (True, fmt_sections(data["sections"]))
    except CVIngestError as e:
        return (False, str(e))
    except Exception as e:
        error_msg = str(e)
        if config.debug:
            error_msg = traceback.format_exc()
        return (False, error_msg)


def execute_parallel_pipeline(config: UserConfig) -> int:
    """
    Parse all collected inputs on ``config.workers`` threads.

    Returns:
        Exit code (0 = all success, 1 = one or more failed)
    """
    files = config.inputs
    if not files:
        LOG.error("No input files to process")
        return 1

    LOG.info("Processing %d files with %d parallel workers", len(files), config.workers)

    success_count = 0
    failed_files = []

    with ThreadPoolExecutor(max_workers=config.workers) as executor:
        future_to_file = {
            executor.submit(process_single_file_wrapper, file_path, config): file_path
            for file_path in files
        }

        for future in as_completed(future_to_file):
            file_path = future_to_file[future]
            try:
                success, message = future.result()
            except Exception as e:
                success, message = False, f"Unexpected error: {e}"
                if config.debug:
                    LOG.error(traceback.format_exc())

            if success:
                LOG.info("✓ %s | %s", file_path.name, message)
                success_count += 1
            else:
                LOG.error("✗ %s | %s", file_path.name, message)
                failed_files.append(str(file_path))

    LOG.info("=" * 60)
    LOG.info("Completed: %d/%d files succeeded, %d failed",
             success_count, len(files), len(failed_files))

    if failed_files:
        LOG.info("Failed files:")
        for failed_file in sorted(failed_files):
            LOG.info("  - %s", failed_file)
        return 1
    return 0
