"""
CLI Phase 1: Gather user requirements.

Parses command-line arguments and returns UserConfig dataclass.
No side effects - just parsing and conversion.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .cli_config import UserConfig
from .shared import MAX_FILE_SIZE


def gather_user_requirements(argv: Optional[List[str]] = None) -> UserConfig:
    """
    Phase 1: Parse command-line arguments and return user configuration.
    """
    parser = argparse.ArgumentParser(
        description="Parse PDF/DOCX resumes into normalized, sectioned JSON.",
        epilog="""
Examples:
  Print one resume as JSON:
    python -m cvingest.cli --source resume.pdf

  Parse a folder of resumes with 4 workers:
    python -m cvingest.cli \\
      --source resumes/ \\
      --target output/ \\
      --workers 4
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--source", required=True,
                        help="Input .pdf/.docx file or folder (scanned recursively)")
    parser.add_argument("--target",
                        help="Output directory; one <name>.json per input")
    parser.add_argument("--output",
                        help="Output JSON path (single-file source only)")
    parser.add_argument("--workers", type=int, default=1,
                        help="Number of documents parsed concurrently (default: 1)")
    parser.add_argument("--max-file-size", type=int, default=MAX_FILE_SIZE,
                        help=f"Reject inputs above this many bytes (default: {MAX_FILE_SIZE})")
    parser.add_argument("--no-validate", action="store_true",
                        help="Skip the upload type/size check and route purely by extension.")
    parser.add_argument("--debug", action="store_true",
                        help="Verbose logs + stack traces on failure.")
    parser.add_argument("--log-file",
                        help="Optional path to a log file. If set, all output is also written there.")

    args = parser.parse_args(argv)

    if args.workers < 1:
        raise ValueError("--workers must be at least 1")
    if args.max_file_size < 1:
        raise ValueError("--max-file-size must be positive")

    return UserConfig(
        source=Path(args.source),
        target_dir=Path(args.target) if args.target else None,
        output=Path(args.output) if args.output else None,
        workers=args.workers,
        max_file_size=args.max_file_size,
        validate=not args.no_validate,
        debug=args.debug,
        log_file=args.log_file,
    )
