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

"""Read and classify commits between two points in history.

Flow::

    HistorySource.raw_commits(from_ref, to_ref, folder)
         │  list[str]
         ▼
    parse_raw_commit(record)
         │  RawCommit
         ▼
    CommitParser.parse(raw)
         │  Commit
         ▼
    list[Commit]   (history order, newest first for git)

Usage::

    from commitkit.commits import get_commits, get_commits_sync

    commits = await get_commits(from_ref='v1.0.0', cwd='/path/to/repo')
    commits = get_commits_sync(from_ref='v1.0.0', folder='src')
"""

from __future__ import annotations

from pathlib import Path

from commitkit.backends.vcs import GitCLIBackend, HistorySource
from commitkit.commit_parsing import Commit, CommitParser, ConventionalCommitParser, parse_raw_commit
from commitkit.errors import E, CommitKitError
from commitkit.logging import get_logger

logger = get_logger(__name__)


def _classify(records: list[str], parser: CommitParser | None) -> list[Commit]:
    """Split and classify raw records, keeping their order."""
    commit_parser = parser or ConventionalCommitParser()
    return [commit_parser.parse(parse_raw_commit(record)) for record in records]


def _source(history: HistorySource | None, cwd: Path | str | None) -> HistorySource:
    return history if history is not None else GitCLIBackend(Path(cwd or '.'))


async def get_commits(
    *,
    from_ref: str | None = None,
    to_ref: str = 'HEAD',
    cwd: Path | str | None = None,
    folder: str | None = None,
    history: HistorySource | None = None,
    parser: CommitParser | None = None,
) -> list[Commit]:
    """Retrieve classified commits between two points in history.

    Args:
        from_ref: Starting point. ``None`` reads everything reachable
            from ``to_ref``.
        to_ref: Ending point. Defaults to ``"HEAD"``.
        cwd: Repository directory for the default git source. Ignored
            when ``history`` is given.
        folder: Only include commits touching this path.
        history: History source. Defaults to :class:`GitCLIBackend`.
        parser: Commit classifier. Defaults to
            :class:`ConventionalCommitParser`.

    Returns:
        Classified commits in history order. Empty if the history
        source failed.
    """
    source = _source(history, cwd)
    records = await source.raw_commits(from_ref=from_ref, to_ref=to_ref, folder=folder)
    commits = _classify(records, parser)
    logger.debug('commits_loaded', count=len(commits), from_ref=from_ref, to_ref=to_ref)
    return commits


def get_commits_sync(
    *,
    from_ref: str | None = None,
    to_ref: str = 'HEAD',
    cwd: Path | str | None = None,
    folder: str | None = None,
    history: HistorySource | None = None,
    parser: CommitParser | None = None,
) -> list[Commit]:
    """Blocking twin of :func:`get_commits`.

    Raises:
        CommitKitError: If ``history`` has no ``raw_commits_sync()``.
    """
    source = _source(history, cwd)
    read = getattr(source, 'raw_commits_sync', None)
    if read is None:
        raise CommitKitError(
            E.HISTORY_SYNC_UNSUPPORTED,
            f'{type(source).__name__} cannot be read without an event loop.',
            hint='Await get_commits() instead.',
        )

    records = read(from_ref=from_ref, to_ref=to_ref, folder=folder)
    commits = _classify(records, parser)
    logger.debug('commits_loaded', count=len(commits), from_ref=from_ref, to_ref=to_ref)
    return commits


__all__ = [
    'get_commits',
    'get_commits_sync',
]
