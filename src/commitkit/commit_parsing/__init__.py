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

"""Commit record parsing and classification.

This subpackage turns delimited history records into classified
commits. Every function here is pure and total: malformed input yields
empty fields or a non-conventional commit, never an exception.

The :class:`CommitParser` protocol lets teams plug in their own
classifier while keeping the same retrieval and grouping machinery.

Built-in parsers:

- :class:`ConventionalCommitParser` — ``type(scope)!: description``

Usage::

    from commitkit.commit_parsing import parse_commit, parse_raw_commit

    raw = parse_raw_commit('abc123|abc123def|feat(ui): add button (#42)|Ann|ann@example.com|2025-01-01')
    commit = parse_commit(raw)
    assert commit.type == 'feat'
    assert commit.scope == 'ui'
    assert commit.description == 'add button'
"""

from commitkit.commit_parsing._authors import CO_AUTHORED_BY_PATTERN, extract_authors
from commitkit.commit_parsing._conventional import (
    BREAKING_FOOTER_PATTERN,
    CC_PATTERN,
    ConventionalCommitParser,
    SubjectMatch,
    has_breaking_footer,
    match_subject,
)
from commitkit.commit_parsing._raw import FIELD_SEPARATOR, parse_raw_commit
from commitkit.commit_parsing._references import (
    ISSUE_PATTERN,
    PULL_REQUEST_PATTERN,
    extract_references,
)
from commitkit.commit_parsing._types import (
    Author,
    Commit,
    CommitParser,
    RawCommit,
    Reference,
    ReferenceType,
)

# Module-level singleton for convenience.
_DEFAULT_PARSER = ConventionalCommitParser()


def parse_commit(raw: RawCommit) -> Commit:
    """Classify a raw commit record as a Conventional Commit.

    Convenience wrapper around :meth:`ConventionalCommitParser.parse`.

    Args:
        raw: The split history record.

    Returns:
        The classified :class:`Commit`.
    """
    return _DEFAULT_PARSER.parse(raw)


__all__ = [
    'BREAKING_FOOTER_PATTERN',
    'CC_PATTERN',
    'CO_AUTHORED_BY_PATTERN',
    'FIELD_SEPARATOR',
    'ISSUE_PATTERN',
    'PULL_REQUEST_PATTERN',
    'Author',
    'Commit',
    'CommitParser',
    'ConventionalCommitParser',
    'RawCommit',
    'Reference',
    'ReferenceType',
    'SubjectMatch',
    'extract_authors',
    'extract_references',
    'has_breaking_footer',
    'match_subject',
    'parse_commit',
    'parse_raw_commit',
]
