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

"""Conventional Commits classifier.

Pure implementation: depends only on ``re`` and the sibling modules.
No I/O, no logging, no side effects.

Classification flow::

    RawCommit
       │
       ├── match_subject(message) ──────► type, scope, "!", description
       ├── has_breaking_footer(body) ───► BREAKING CHANGE: footer
       ├── extract_references(...) ─────► references, cleaned description
       └── extract_authors(...) ────────► primary + co-authors
       │
       ▼
    Commit
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from commitkit.commit_parsing._authors import extract_authors
from commitkit.commit_parsing._references import extract_references
from commitkit.commit_parsing._types import Commit, RawCommit

# Regex for Conventional Commits: [emoji] type(scope)!: description
# https://www.conventionalcommits.org/en/v1.0.0/
CC_PATTERN: re.Pattern[str] = re.compile(
    r'(?P<emoji>:.+:|[\U0001F300-\U0001F64F\U0001F680-\U0001F6FF\u2600-\u2B55])?'  # gitmoji or emoji
    r' *'
    r'(?P<type>[a-z]+)'  # type (e.g. feat, fix, chore)
    r'(?:\((?P<scope>.+)\))?'  # optional scope in parens
    r'(?P<breaking>!)?'  # optional breaking change indicator
    r': '
    r'(?P<description>.+)',
    re.IGNORECASE | re.ASCII,
)

# "BREAKING CHANGE:", "BREAKING-CHANGES:", "breaking change:" anywhere in the body.
BREAKING_FOOTER_PATTERN: re.Pattern[str] = re.compile(r'breaking[ -]changes?:', re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class SubjectMatch:
    """The pieces captured from a conventional subject line.

    Attributes:
        type: The type, casing preserved.
        description: Everything after ``": "``.
        scope: The parenthesized scope, or ``None``.
        breaking: Whether ``!`` preceded the colon.
    """

    type: str
    description: str
    scope: str | None = None
    breaking: bool = False


def match_subject(message: str) -> SubjectMatch | None:
    """Match a subject line against the Conventional Commits grammar.

    Args:
        message: The commit subject line.

    Returns:
        A :class:`SubjectMatch`, or ``None`` if the subject does not
        follow the convention.
    """
    match = CC_PATTERN.search(message)
    if match is None:
        return None
    return SubjectMatch(
        type=match.group('type'),
        description=match.group('description'),
        scope=match.group('scope'),
        breaking=match.group('breaking') is not None,
    )


def has_breaking_footer(body: str) -> bool:
    """Return ``True`` if the body declares a breaking change footer."""
    return BREAKING_FOOTER_PATTERN.search(body) is not None


class ConventionalCommitParser:
    """Classifier for `Conventional Commits <https://www.conventionalcommits.org/>`_.

    Recognizes subjects of the form ``type(scope)!: description``,
    optionally prefixed by an emoji or ``:gitmoji:`` shortcode.
    Non-conventional subjects are not rejected: they come back with
    ``is_conventional=False`` and the whole subject as the description.
    """

    def parse(self, raw: RawCommit) -> Commit:
        """Classify a raw commit record.

        Args:
            raw: The split history record.

        Returns:
            The classified :class:`Commit`. Never raises.
        """
        subject = match_subject(raw.message)
        raw_description = subject.description if subject else raw.message
        breaking = bool(subject and subject.breaking) or has_breaking_footer(raw.body)

        references, description = extract_references(raw_description, raw.body)

        return Commit(
            short_hash=raw.short_hash,
            hash=raw.hash,
            message=raw.message,
            date=raw.date,
            body=raw.body,
            is_conventional=subject is not None,
            type=subject.type if subject else '',
            scope=subject.scope if subject else None,
            description=description,
            is_breaking=breaking,
            references=references,
            authors=extract_authors(raw.body, raw.author),
        )
