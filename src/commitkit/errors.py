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

"""Structured error system for commitkit.

Every diagnostic has a unique ``CK-NAMED-KEY`` code, a human-readable
message, and an optional hint.

Where errors can happen::

    ┌──────────────────────┬──────────────────────────────────────────────┐
    │ Layer                │ Failure policy                               │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ commit_parsing       │ Never fails. Bad records become empty fields │
    │                      │ or non-conventional commits.                 │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ History source (git) │ Never raises. Logs and warns (via            │
    │                      │ CommitKitWarning) CK-HISTORY-UNAVAILABLE,    │
    │                      │ then returns no records.                     │
    ├──────────────────────┼──────────────────────────────────────────────┤
    │ commitkit.toml       │ Raises CommitKitError (CK-CONFIG-*).         │
    └──────────────────────┴──────────────────────────────────────────────┘

Usage::

    from commitkit.errors import CommitKitError, E

    raise CommitKitError(
        code=E.CONFIG_INVALID_KEY,
        message="Unknown key 'exclude_key' in commitkit.toml.",
        hint="Did you mean 'exclude_keys'?",
    )
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from rich.console import Console
from rich.markup import escape as rich_escape


class ErrorCode(str, Enum):
    """Enumeration of all commitkit diagnostic codes."""

    # Configuration
    CONFIG_NOT_FOUND = 'CK-CONFIG-NOT-FOUND'
    CONFIG_PARSE_ERROR = 'CK-CONFIG-PARSE-ERROR'
    CONFIG_INVALID_KEY = 'CK-CONFIG-INVALID-KEY'
    CONFIG_INVALID_VALUE = 'CK-CONFIG-INVALID-VALUE'

    # History source
    HISTORY_UNAVAILABLE = 'CK-HISTORY-UNAVAILABLE'
    HISTORY_SYNC_UNSUPPORTED = 'CK-HISTORY-SYNC-UNSUPPORTED'


# Convenience alias for shorter imports.
E = ErrorCode


@dataclass(frozen=True)
class ErrorInfo:
    """Metadata for a single error code.

    Attributes:
        code: The ``CK-NAMED-KEY`` error code.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    code: ErrorCode
    message: str
    hint: str = ''


class CommitKitError(Exception):
    """Base exception for all commitkit errors.

    Args:
        code: The error code from :class:`ErrorCode`.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    def __init__(self, code: ErrorCode, message: str, hint: str = '') -> None:
        """Initialize with an error code, message, and optional hint."""
        self.info = ErrorInfo(code=code, message=message, hint=hint)
        super().__init__(f'[{code.value}] {message}')

    @property
    def code(self) -> ErrorCode:
        """The error code."""
        return self.info.code

    @property
    def hint(self) -> str:
        """Suggestion for fixing this error, or empty string."""
        return self.info.hint


class CommitKitWarning(UserWarning):
    """Base warning for all commitkit warnings.

    Same structure as :class:`CommitKitError` but emitted via
    :func:`warnings.warn` or rendered, never raised.
    """

    def __init__(self, code: ErrorCode, message: str, hint: str = '') -> None:
        """Initialize with an error code, message, and optional hint."""
        self.info = ErrorInfo(code=code, message=message, hint=hint)
        super().__init__(f'[{code.value}] {message}')

    @property
    def code(self) -> ErrorCode:
        """The error code."""
        return self.info.code

    @property
    def hint(self) -> str:
        """Suggestion for addressing this warning, or empty string."""
        return self.info.hint


ERRORS: dict[ErrorCode, ErrorInfo] = {
    E.CONFIG_PARSE_ERROR: ErrorInfo(
        code=E.CONFIG_PARSE_ERROR,
        message='commitkit.toml could not be read or is not valid TOML.',
        hint='Check the file for syntax errors, e.g. unquoted strings.',
    ),
    E.CONFIG_INVALID_KEY: ErrorInfo(
        code=E.CONFIG_INVALID_KEY,
        message='commitkit.toml contains an unknown key.',
        hint='Valid keys: exclude_keys, folder, include_non_conventional, non_conventional_key, to_ref.',
    ),
    E.HISTORY_UNAVAILABLE: ErrorInfo(
        code=E.HISTORY_UNAVAILABLE,
        message='git log failed; no commits were read.',
        hint='Check that git is installed, the directory is a repository, and both refs exist.',
    ),
    E.HISTORY_SYNC_UNSUPPORTED: ErrorInfo(
        code=E.HISTORY_SYNC_UNSUPPORTED,
        message='The history source has no blocking raw_commits_sync() method.',
        hint='Use the async get_commits() instead, or pass a source that offers raw_commits_sync().',
    ),
}


def explain(code: str) -> str | None:
    """Return a detailed explanation for an error code.

    Args:
        code: The error code string, e.g. ``"CK-HISTORY-UNAVAILABLE"``.

    Returns:
        A formatted explanation string, or ``None`` if the code is unknown.
    """
    try:
        error_code = ErrorCode(code)
    except ValueError:
        return None

    info = ERRORS.get(error_code)
    if info is None:
        return f'{code}: No detailed explanation available.'

    lines = [f'{code}: {info.message}']
    if info.hint:
        lines.append(f'  Hint: {info.hint}')
    return '\n'.join(lines)


def _render(label: str, color: str, info: ErrorInfo, out: TextIO) -> None:
    """Print one diagnostic, colored when ``out`` is a terminal."""
    if out.isatty():
        console = Console(file=out, highlight=False)
        console.print(
            f'[bold {color}]{label}\\[{info.code.value}][/bold {color}][bold]: {rich_escape(info.message)}[/bold]',
        )
        if info.hint:
            console.print('  [dim]|[/dim]')
            console.print(f'  [dim]=[/dim] [cyan]hint[/cyan]: {rich_escape(info.hint)}')
        console.print()
        return

    print(f'{label}[{info.code.value}]: {info.message}', file=out)  # noqa: T201 - diagnostic output
    if info.hint:
        print('  |', file=out)  # noqa: T201 - diagnostic output
        print(f'  = hint: {info.hint}', file=out)  # noqa: T201 - diagnostic output
    print(file=out)  # noqa: T201 - diagnostic output


def render_error(exc: CommitKitError, *, file: TextIO | None = None) -> None:
    """Render an error in compiler style.

    Output format::

        error[CK-CONFIG-INVALID-KEY]: Unknown key 'exclude_key' in commitkit.toml.
          |
          = hint: Did you mean 'exclude_keys'?

    Args:
        exc: The error to render.
        file: Output stream (defaults to ``sys.stderr``).
    """
    _render('error', 'red', exc.info, file or sys.stderr)


def render_warning(exc: CommitKitWarning, *, file: TextIO | None = None) -> None:
    """Render a warning in compiler style.

    Args:
        exc: The warning to render.
        file: Output stream (defaults to ``sys.stderr``).
    """
    _render('warning', 'yellow', exc.info, file or sys.stderr)


__all__ = [
    'E',
    'ERRORS',
    'CommitKitError',
    'CommitKitWarning',
    'ErrorCode',
    'ErrorInfo',
    'explain',
    'render_error',
    'render_warning',
]
