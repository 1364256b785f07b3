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

"""Co-author trailer extraction."""

from __future__ import annotations

import re

from commitkit.commit_parsing._types import Author

# "Co-authored-by: Jane Doe <jane@example.com>". The email must be bracketed.
CO_AUTHORED_BY_PATTERN: re.Pattern[str] = re.compile(
    r'co-authored-by:\s*(?P<name>.+)(<(?P<email>.+)>)',
    re.IGNORECASE,
)


def extract_authors(body: str, primary: Author) -> tuple[Author, ...]:
    """Return the primary author followed by every co-author in ``body``.

    Co-authors appear in body order. Repeated trailers are kept.

    Args:
        body: The commit body.
        primary: The commit's primary author.

    Returns:
        A tuple of at least one :class:`Author`.
    """
    authors = [primary]
    for match in CO_AUTHORED_BY_PATTERN.finditer(body):
        authors.append(
            Author(
                name=match.group('name').strip(),
                email=match.group('email').strip(),
            )
        )
    return tuple(authors)
