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

"""Parse git history into classified Conventional Commits.

Usage::

    from commitkit import get_commits_sync, group_by_type

    commits = get_commits_sync(from_ref='v1.0.0')
    for key, group in group_by_type(commits).items():
        print(key, [c.description for c in group])
"""

from commitkit.commit_parsing import (
    Author,
    Commit,
    CommitParser,
    ConventionalCommitParser,
    RawCommit,
    Reference,
    ReferenceType,
    parse_commit,
    parse_raw_commit,
)
from commitkit.commits import get_commits, get_commits_sync
from commitkit.grouping import GroupByTypeOptions, group_by_type

__all__ = [
    'Author',
    'Commit',
    'CommitParser',
    'ConventionalCommitParser',
    'GroupByTypeOptions',
    'RawCommit',
    'Reference',
    'ReferenceType',
    'get_commits',
    'get_commits_sync',
    'group_by_type',
    'parse_commit',
    'parse_raw_commit',
]
