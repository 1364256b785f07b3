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

"""Splitter for delimited history records.

A record looks like::

    short_hash|hash|subject|author_name|author_email|date|body...

Anything after the sixth separator belongs to the body. Since the body
may itself contain ``|``, each trailing segment becomes one body line.
"""

from __future__ import annotations

from commitkit.commit_parsing._types import Author, RawCommit

FIELD_SEPARATOR = '|'

# short_hash, hash, subject, author_name, author_email, date
_LEADING_FIELDS = 6


def parse_raw_commit(record: str) -> RawCommit:
    """Split one delimited history record into a :class:`RawCommit`.

    Never raises. Missing fields become empty strings and empty trailing
    segments are dropped from the body.

    Args:
        record: One commit's record, already separated from its
            neighbours by the history source.

    Returns:
        The positional fields as a :class:`RawCommit`.

    Example::

        >>> parse_raw_commit('abc|abcdef|fix: x|Ann|ann@example.com|today||line').body
        'line'
    """
    segments = record.split(FIELD_SEPARATOR)
    leading = segments[:_LEADING_FIELDS]
    leading += [''] * (_LEADING_FIELDS - len(leading))
    short_hash, full_hash, message, author_name, author_email, date = leading
    body = '\n'.join(segment for segment in segments[_LEADING_FIELDS:] if segment)

    return RawCommit(
        short_hash=short_hash,
        hash=full_hash,
        message=message,
        author=Author(name=author_name, email=author_email),
        date=date,
        body=body,
    )
