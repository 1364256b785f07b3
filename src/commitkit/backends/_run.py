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

"""Subprocess seam for commitkit.

:func:`run_command` is the one place a child process is started. It
captures text output under a timeout and logs the outcome, so tests
patch it (or the backend method wrapping it) rather than :mod:`subprocess`.
"""

from __future__ import annotations

import subprocess  # noqa: S404 - the git backend shells out through here
import time
from dataclasses import dataclass
from pathlib import Path

from commitkit.logging import get_logger

log = get_logger('commitkit.backends.run')

# Generous enough for `git log` over a large history.
DEFAULT_TIMEOUT_SECONDS = 120

CalledProcessError = subprocess.CalledProcessError
TimeoutExpired = subprocess.TimeoutExpired


@dataclass(frozen=True)
class CommandResult:
    """Captured output of a finished command."""

    command: list[str]
    return_code: int
    stdout: str = ''
    stderr: str = ''


def _elapsed_ms(start: float) -> float:
    return round((time.monotonic() - start) * 1000, 1)


def run_command(
    cmd: list[str],
    *,
    cwd: Path | str | None = None,
    timeout: int = DEFAULT_TIMEOUT_SECONDS,
    check: bool = False,
) -> CommandResult:
    """Run ``cmd`` and capture its output as UTF-8 text.

    Undecodable bytes are replaced rather than raising, since commit
    bodies are not guaranteed to be valid UTF-8.

    Raises:
        CalledProcessError: ``check`` is set and the exit code is non-zero.
        TimeoutExpired: The command ran longer than ``timeout`` seconds.
        OSError: The executable could not be started.
    """
    start = time.monotonic()
    try:
        proc = subprocess.run(  # noqa: S603 - argument list, no shell
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
            timeout=timeout,
        )
    except TimeoutExpired:
        log.error('command_timeout', cmd=cmd, timeout=timeout, elapsed_ms=_elapsed_ms(start))
        raise

    elapsed_ms = _elapsed_ms(start)
    if proc.returncode:
        log.warning(
            'command_failed',
            cmd=cmd,
            return_code=proc.returncode,
            stderr=proc.stderr.strip()[:500],
            elapsed_ms=elapsed_ms,
        )
        if check:
            raise CalledProcessError(proc.returncode, cmd, output=proc.stdout, stderr=proc.stderr)
    else:
        log.debug('command_ok', cmd=cmd, cwd=str(cwd or '.'), elapsed_ms=elapsed_ms)

    return CommandResult(command=cmd, return_code=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)


__all__ = [
    'DEFAULT_TIMEOUT_SECONDS',
    'CalledProcessError',
    'CommandResult',
    'TimeoutExpired',
    'run_command',
]
