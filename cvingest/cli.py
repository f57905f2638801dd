#!/usr/bin/env python3
# Copyright 2025 Ivo Mateev
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Command-line interface for cvingest.

Three-phase architecture:
1. Gather user requirements (parse args) -> UserConfig
2. Prepare execution environment (collect inputs, create dirs)
3. Execute (parse each document, write JSON)
"""

from __future__ import annotations

import json
import traceback
from pathlib import Path
from typing import List, Optional

from .cli_config import UserConfig
from .cli_gather import gather_user_requirements
from .cli_parallel import execute_parallel_pipeline, output_path_for
from .cli_prepare import prepare_execution_environment
from .errors import CVIngestError
from .logging_utils import LOG, fmt_sections, setup_logging
from .pipeline import process_single_file
from .validation import validate_upload


def execute_single(config: UserConfig) -> int:
    """Parse the one input; JSON goes to --output, --target or stdout."""
    path = config.inputs[0]
    if config.validate:
        validate_upload(path.name, path.stat().st_size, max_size=config.max_file_size)

    out = output_path_for(path, config)
    data = process_single_file(path, out=out, config=config.ingest_config)
    if out is None:
        print(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        LOG.info("✓ %s | %s -> %s", path.name, fmt_sections(data["sections"]), out)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with three-phase architecture.

    Phase 1: Gather user requirements (parse args)
    Phase 2: Prepare execution environment (validate, setup)
    Phase 3: Execute (parse documents)
    """
    # Phase 1: Gather requirements
    config = gather_user_requirements(argv)

    # Setup logging (side effect necessary for all phases)
    if config.log_file:
        Path(config.log_file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    setup_logging(config.debug, log_file=config.log_file)

    try:
        # Phase 2: Prepare environment
        config = prepare_execution_environment(config)

        # Phase 3: Execute
        if config.is_batch:
            return execute_parallel_pipeline(config)
        return execute_single(config)
    except CVIngestError as e:
        LOG.error("✗ %s | %s", config.source.name, e)
        if config.debug:
            LOG.error(traceback.format_exc())
        return 1
    except Exception as e:
        LOG.error(str(e))
        if config.debug:
            LOG.error(traceback.format_exc())
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
