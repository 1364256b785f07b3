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

"""Pure types for commit record parsing.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass, enum, or protocol: no I/O, no
logging, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Author:
    """A commit author or co-author.

    Attributes:
        name: The author's display name.
        email: The author's email address.
    """

    name: str
    email: str


@dataclass(frozen=True)
class RawCommit:
    """One history record split into its positional fields.

    Attributes:
        short_hash: The abbreviated commit hash.
        hash: The full commit hash.
        message: The subject line.
        author: The primary author.
        date: The author date, verbatim. Never parsed.
        body: The commit body, possibly multi-line, possibly empty.
    """

    short_hash: str
    hash: str
    message: str
    author: Author
    date: str = ''
    body: str = ''


class ReferenceType(str, Enum):
    """Kinds of cross-references a commit can carry."""

    ISSUE = 'issue'
    PULL_REQUEST = 'pull-request'


@dataclass(frozen=True)
class Reference:
    """An issue or pull request cited by a commit.

    Attributes:
        type: Whether the citation is an issue or a pull request.
        value: The literal marker text, e.g. ``"#123"``.
    """

    type: ReferenceType
    value: str


@dataclass(frozen=True)
class Commit:
    """A fully classified commit.

    Carries every :class:`RawCommit` field except ``author``, which is
    folded into ``authors``.

    Attributes:
        short_hash: The abbreviated commit hash.
        hash: The full commit hash.
        message: The original subject line.
        date: The author date, verbatim.
        body: The commit body.
        is_conventional: Whether the subject follows Conventional Commits.
        type: The captured type (e.g. ``"feat"``), or ``""`` when the
            subject is not conventional. Casing is preserved.
        scope: The captured scope, or ``None`` when the subject has none.
        description: The subject description with pull request markers
            removed and whitespace trimmed.
        is_breaking: Whether the commit declares a breaking change, via
            ``!`` in the subject or a ``BREAKING CHANGE:`` footer.
        references: Issue and pull request references, deduplicated by
            value in discovery order.
        authors: The primary author followed by any co-authors.
    """

    short_hash: str
    hash: str
    message: str
    date: str
    body: str
    is_conventional: bool
    type: str
    description: str
    scope: str | None = None
    is_breaking: bool = False
    references: tuple[Reference, ...] = ()
    authors: tuple[Author, ...] = ()


@runtime_checkable
class CommitParser(Protocol):
    """Protocol for commit classifiers.

    Implement this protocol to classify commits with a convention other
    than `Conventional Commits <https://www.conventionalcommits.org/>`_
    while reusing history retrieval and grouping.

    A parser receives a :class:`RawCommit` and must always return a
    :class:`Commit`. Records that do not follow the convention are
    returned with ``is_conventional=False`` rather than rejected.

    Built-in implementations:

    - :class:`~commitkit.commit_parsing.ConventionalCommitParser`
    """

    def parse(self, raw: RawCommit) -> Commit:
        """Classify a raw commit record.

        Args:
            raw: The split history record.

        Returns:
            The classified :class:`Commit`.
        """
        ...
