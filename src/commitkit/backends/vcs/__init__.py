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

"""History source protocol for commitkit.

The :class:`HistorySource` protocol is the only thing the retrieval
layer needs from version control: an ordered list of raw, delimited
commit records. Implementations:

- :class:`~commitkit.backends.vcs.git.GitCLIBackend` — ``git`` CLI
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from commitkit.backends.vcs.git import GitCLIBackend as GitCLIBackend

__all__ = [
    'GitCLIBackend',
    'HistorySource',
]


@runtime_checkable
class HistorySource(Protocol):
    """Protocol for sources of raw commit records.

    Each returned string is exactly one commit in the form
    ``short_hash|hash|subject|author_name|author_email|date|body...``,
    already separated from its neighbours. Implementations must not
    raise on VCS failures; they return an empty list instead.

    Sources that can also run without an event loop should offer a
    ``raw_commits_sync()`` method with the same signature.
    """

    async def raw_commits(
        self,
        *,
        from_ref: str | None = None,
        to_ref: str = 'HEAD',
        folder: str | None = None,
    ) -> list[str]:
        """Return one raw record per commit.

        Args:
            from_ref: Exclusive starting point. ``None`` reads the whole
                history reachable from ``to_ref``.
            to_ref: Ending point (commit, branch or tag).
            folder: Only include commits touching this path.
        """
        ...
