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

"""Git history source for commitkit.

The :class:`GitCLIBackend` implements the
:class:`~commitkit.backends.vcs.HistorySource` protocol by running
``git log`` through :func:`run_command`.

Each commit is printed as one framed record::

    ----
    <short_hash>|<hash>|<subject>|<author_name>|<author_email>|<date>|<body>

The ``----`` line frames records; the parser only ever sees what lies
between two frames.

Any failure to run ``git`` is logged, emitted as a
:class:`~commitkit.errors.CommitKitWarning` and turned into an empty
list: callers never have to handle a subprocess error.
"""

from __future__ import annotations

import asyncio
import warnings
from pathlib import Path

from commitkit.backends._run import CalledProcessError, CommandResult, TimeoutExpired, run_command
from commitkit.errors import E, CommitKitWarning
from commitkit.logging import get_logger

log = get_logger('commitkit.backends.git')

# commit_short_hash | commit_hash | subject | author_name | author_email | author_date | body
# See https://git-scm.com/docs/pretty-formats.
GIT_LOG_FORMAT = '----%n%h|%H|%s|%an|%ae|%ad|%b'

RECORD_SEPARATOR = '----\n'


def split_records(stdout: str) -> list[str]:
    """Split framed ``git log`` output into one string per commit.

    Records keep their internal and trailing newlines; only the
    framing lines and empty chunks are dropped.
    """
    return [record for record in stdout.strip().split(RECORD_SEPARATOR) if record]


def log_args(
    *,
    from_ref: str | None = None,
    to_ref: str = 'HEAD',
    folder: str | None = None,
) -> list[str]:
    """Build the ``git log`` argument list (without the ``git`` itself).

    ``from_ref`` selects the symmetric range ``from...to``; without it
    the whole history reachable from ``to_ref`` is read. ``folder``
    limits the log to commits touching that path.
    """
    revision = f'{from_ref}...{to_ref}' if from_ref else to_ref
    args = ['--no-pager', 'log', revision, f'--pretty={GIT_LOG_FORMAT}']
    if folder:
        args.extend(['--', folder])
    return args


class GitCLIBackend:
    """Default :class:`~commitkit.backends.vcs.HistorySource` using ``git``.

    Args:
        repo_root: Directory in which ``git`` is run.
    """

    def __init__(self, repo_root: Path) -> None:
        """Initialize with the git repository root path."""
        self._root = repo_root

    def _git(self, *args: str) -> CommandResult:
        """Run a git command synchronously."""
        return run_command(['git', *args], cwd=self._root, check=True)

    def raw_commits_sync(
        self,
        *,
        from_ref: str | None = None,
        to_ref: str = 'HEAD',
        folder: str | None = None,
    ) -> list[str]:
        """Return one raw record per commit, newest first. Blocking.

        Returns an empty list and warns with ``CK-HISTORY-UNAVAILABLE``
        when ``git`` fails for any reason.
        """
        args = log_args(from_ref=from_ref, to_ref=to_ref, folder=folder)
        try:
            result = self._git(*args)
        except (CalledProcessError, TimeoutExpired, OSError) as exc:
            log.warning(
                'history_unavailable',
                code=E.HISTORY_UNAVAILABLE.value,
                repo=str(self._root),
                from_ref=from_ref,
                to_ref=to_ref,
                folder=folder,
                error=str(exc),
            )
            warnings.warn(
                CommitKitWarning(
                    E.HISTORY_UNAVAILABLE,
                    f'git log failed in {self._root}; no commits were read.',
                    hint=str(exc),
                ),
                stacklevel=2,
            )
            return []

        records = split_records(result.stdout)
        log.debug('history_read', repo=str(self._root), count=len(records))
        return records

    async def raw_commits(
        self,
        *,
        from_ref: str | None = None,
        to_ref: str = 'HEAD',
        folder: str | None = None,
    ) -> list[str]:
        """Return one raw record per commit, newest first.

        The blocking ``git`` call runs in a worker thread via
        ``asyncio.to_thread()``.
        """
        return await asyncio.to_thread(
            self.raw_commits_sync,
            from_ref=from_ref,
            to_ref=to_ref,
            folder=folder,
        )
