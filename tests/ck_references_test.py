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

"""Tests for issue and pull request reference extraction."""

from __future__ import annotations

from commitkit.commit_parsing import Reference, ReferenceType, extract_references

PR = ReferenceType.PULL_REQUEST
ISSUE = ReferenceType.ISSUE


class TestReferenceType:
    """Tests for ReferenceType enum."""

    def test_values(self) -> None:
        """Test values."""
        assert ReferenceType.ISSUE.value == 'issue'
        assert ReferenceType.PULL_REQUEST.value == 'pull-request'

    def test_is_str(self) -> None:
        """Members compare equal to their wire values."""
        assert ReferenceType.PULL_REQUEST == 'pull-request'


class TestExtractReferences:
    """Tests for extract_references()."""

    def test_no_references(self) -> None:
        """Test no references."""
        assert extract_references('add button') == ((), 'add button')

    def test_pull_request(self) -> None:
        """Test pull request."""
        refs, desc = extract_references('add button (#42)')
        assert refs == (Reference(type=PR, value='#42'),)
        assert desc == 'add button'

    def test_pull_request_with_words(self) -> None:
        """Test pull request with words."""
        refs, desc = extract_references('fix crash (fixes #456)')
        assert refs == (Reference(type=PR, value='#456'),)
        assert desc == 'fix crash'

    def test_uppercase_words_are_not_a_pull_request(self) -> None:
        """Only lowercase letters may precede the number inside the parens."""
        refs, desc = extract_references('fix crash (Fixes #456)')
        assert refs == (Reference(type=ISSUE, value='#456'),)
        assert desc == 'fix crash (Fixes #456)'

    def test_issue_left_inline(self) -> None:
        """Test issue left inline."""
        refs, desc = extract_references('resolve crash, closes #123 (#456)')
        assert refs == (
            Reference(type=PR, value='#456'),
            Reference(type=ISSUE, value='#123'),
        )
        assert desc == 'resolve crash, closes #123'

    def test_same_number_pull_request_wins(self) -> None:
        """A number seen both bare and parenthesized yields one pull request reference."""
        refs, _ = extract_references('closes #5 (#5)')
        assert refs == (Reference(type=PR, value='#5'),)

    def test_body_pull_request_overrides_description_issue(self) -> None:
        """Test body pull request overrides description issue."""
        refs, desc = extract_references('closes #5', 'Follow-up to (#5)')
        assert refs == (Reference(type=PR, value='#5'),)
        assert desc == 'closes #5'

    def test_body_issue_never_downgrades(self) -> None:
        """Test body issue never downgrades."""
        refs, _ = extract_references('thing (#7)', 'see #7')
        assert refs == (Reference(type=PR, value='#7'),)

    def test_description_before_body(self) -> None:
        """Test description before body."""
        refs, _ = extract_references('uses #3', 'Fixes #1\nRefs #2 (#4)')
        assert [r.value for r in refs] == ['#3', '#4', '#1', '#2']
        assert [r.type for r in refs] == [ISSUE, PR, ISSUE, ISSUE]

    def test_discovery_order_not_numeric(self) -> None:
        """Test discovery order not numeric."""
        refs, _ = extract_references('#30 then #4 then #100')
        assert [r.value for r in refs] == ['#30', '#4', '#100']

    def test_multiple_pull_requests_stripped(self) -> None:
        """Test multiple pull requests stripped."""
        refs, desc = extract_references('a (#1) b (#2)')
        assert refs == (
            Reference(type=PR, value='#1'),
            Reference(type=PR, value='#2'),
        )
        assert desc == 'a  b'

    def test_body_pull_request_not_stripped_from_description(self) -> None:
        """Only the description is cleaned; the body is left alone."""
        _, desc = extract_references('add thing', 'Merged in (#9)')
        assert desc == 'add thing'

    def test_whitespace_trimmed(self) -> None:
        """Test whitespace trimmed."""
        _, desc = extract_references('  spaced out  (#1 )  ')
        assert desc == 'spaced out'

    def test_values_unique(self) -> None:
        """Test values unique."""
        refs, _ = extract_references('#1 #1 (#1) #2', '#2 (#2) #1')
        values = [r.value for r in refs]
        assert len(values) == len(set(values))

    def test_non_ascii_digits_ignored(self) -> None:
        """Only ASCII 0-9 form a reference number."""
        text = 'fix \u0661\u0662 #\u0661\u0662 (#\u0663)'
        refs, desc = extract_references(text)
        assert refs == ()
        assert desc == text

    def test_number_stops_at_non_ascii_digit(self) -> None:
        """Test number stops at non ascii digit."""
        refs, _ = extract_references('see #7\u0668')
        assert refs == (Reference(type=ISSUE, value='#7'),)
