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

"""Group classified commits by Conventional Commit type.

Key Concepts::

    ┌─────────────────────────┬────────────────────────────────────────────┐
    │ Concept                 │ Explanation                               │
    ├─────────────────────────┼────────────────────────────────────────────┤
    │ Group key               │ The lowercased commit type ("feat",       │
    │                         │ "fix", ...) or the non-conventional key.  │
    ├─────────────────────────┼────────────────────────────────────────────┤
    │ Non-conventional key    │ Where commits that don't follow the       │
    │                         │ convention land. Defaults to "misc".      │
    ├─────────────────────────┼────────────────────────────────────────────┤
    │ exclude_keys            │ Keys whose commits are dropped entirely.  │
    └─────────────────────────┴────────────────────────────────────────────┘

Rules, applied per commit in order:

1. Non-conventional and ``include_non_conventional`` is off: skip.
2. Non-conventional: key is ``non_conventional_key``.
3. Conventional: key is ``type.lower()``; an empty type is skipped.
4. Key in ``exclude_keys``: skip.

Usage::

    from commitkit.grouping import GroupByTypeOptions, group_by_type

    groups = group_by_type(commits, GroupByTypeOptions(non_conventional_key='other'))
    features = groups.get('feat', [])
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from commitkit.commit_parsing import Commit


@dataclass(frozen=True)
class GroupByTypeOptions:
    """Options controlling :func:`group_by_type`.

    Attributes:
        include_non_conventional: Group non-conventional commits under
            ``non_conventional_key`` instead of dropping them.
        non_conventional_key: Key for non-conventional commits.
        exclude_keys: Group keys to drop.
    """

    include_non_conventional: bool = True
    non_conventional_key: str = 'misc'
    exclude_keys: frozenset[str] = frozenset()


def _group_key(commit: Commit, options: GroupByTypeOptions) -> str | None:
    if not commit.is_conventional:
        return options.non_conventional_key if options.include_non_conventional else None
    return commit.type.lower() or None


def group_by_type(
    commits: Iterable[Commit],
    options: GroupByTypeOptions | None = None,
) -> dict[str, list[Commit]]:
    """Group commits by their Conventional Commit type.

    Args:
        commits: Classified commits.
        options: Grouping options. Defaults to :class:`GroupByTypeOptions`.

    Returns:
        A dict from group key to commits, keys in first-seen order and
        commits in input order.

    Example::

        >>> groups = group_by_type(commits)
        >>> list(groups)
        ['feat', 'fix', 'misc']
    """
    opts = options or GroupByTypeOptions()
    grouped: dict[str, list[Commit]] = {}

    for commit in commits:
        key = _group_key(commit, opts)
        if key is None or key in opts.exclude_keys:
            continue
        grouped.setdefault(key, []).append(commit)

    return grouped


__all__ = [
    'GroupByTypeOptions',
    'group_by_type',
]
