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

"""Issue and pull request reference extraction.

Two patterns are scanned over the description, then over the body:

- ``(#456)`` or ``(fixes #456)`` is a pull request reference.
- Any other ``#456`` is an issue reference.

Precedence::

    description ──► PR pass ──► issue pass
         │
         ▼
    body        ──► PR pass ──► issue pass

A PR match always claims its number, even if an earlier issue pass saw
it first. An issue match never displaces an existing entry. The result
keeps the order in which each number was first discovered.
"""

from __future__ import annotations

import re

from commitkit.commit_parsing._types import Reference, ReferenceType

# "(#123)", "(closes #123)". Lowercase ASCII letters and spaces, ASCII digits.
PULL_REQUEST_PATTERN: re.Pattern[str] = re.compile(r'\([ a-z]*(#[0-9]+)\s*\)')

ISSUE_PATTERN: re.Pattern[str] = re.compile(r'(#[0-9]+)')


def _collect(text: str, refs: dict[str, ReferenceType]) -> None:
    """Record the references found in ``text`` into ``refs``."""
    # PRs first so they take precedence.
    for match in PULL_REQUEST_PATTERN.finditer(text):
        refs[match.group(1)] = ReferenceType.PULL_REQUEST

    for match in ISSUE_PATTERN.finditer(text):
        refs.setdefault(match.group(1), ReferenceType.ISSUE)


def extract_references(description: str, body: str = '') -> tuple[tuple[Reference, ...], str]:
    """Extract references and strip pull request markers from a description.

    Args:
        description: The commit description (or full subject when the
            commit is not conventional).
        body: The commit body. Scanned after the description.

    Returns:
        A ``(references, cleaned_description)`` pair. Issue markers are
        left inline in the cleaned description.

    Example::

        >>> refs, desc = extract_references('crash, closes #1 (#2)')
        >>> [(r.type.value, r.value) for r in refs]
        [('pull-request', '#2'), ('issue', '#1')]
        >>> desc
        'crash, closes #1'
    """
    refs: dict[str, ReferenceType] = {}
    _collect(description, refs)
    if body:
        _collect(body, refs)

    references = tuple(Reference(type=ref_type, value=value) for value, ref_type in refs.items())
    cleaned = PULL_REQUEST_PATTERN.sub('', description).strip()
    return references, cleaned
