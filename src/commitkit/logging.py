# Copyright 2026 Google LLC
#
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
#
# SPDX-License-Identifier: Apache-2.0

"""Structured logging for commitkit.

Configures `structlog <https://www.structlog.org/>`_ for the history
source and config loader. The parsing core never logs.

Two renderers are available:

- **Console** (default): human-readable, colored when the stream is a TTY.
- **JSON** (``json_log=True``): one JSON object per line.

Output goes to stderr unless another stream is given, so callers that
print classified commits on stdout keep it clean.

Usage::

    from commitkit.logging import configure_logging, get_logger

    configure_logging(verbose=True)
    log = get_logger(__name__)
    log.info('commits_loaded', count=42, to_ref='HEAD')
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def _level(*, verbose: bool, quiet: bool) -> int:
    """Map the verbosity flags to a stdlib level. ``quiet`` wins."""
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for commitkit.

    Safe to call more than once; the last call wins.

    Args:
        verbose: Enable debug-level output (every ``git`` invocation).
        quiet: Only emit warnings and errors.
        json_log: Render events as JSON instead of console text.
        stream: Destination stream. Defaults to ``sys.stderr``.
    """
    out = stream or sys.stderr

    logging.basicConfig(
        format='%(message)s',
        stream=out,
        level=_level(verbose=verbose, quiet=quiet),
        force=True,
    )

    renderer: structlog.types.Processor
    if json_log:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'commitkit') -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger.

    Args:
        name: Logger name, usually the calling module's ``__name__``.
    """
    return structlog.get_logger(name)


__all__ = [
    'configure_logging',
    'get_logger',
]
