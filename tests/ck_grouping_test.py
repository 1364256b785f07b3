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

"""Tests for commitkit.grouping."""

from __future__ import annotations

from commitkit.grouping import GroupByTypeOptions, group_by_type

from tests._fakes import make_commit


class TestGroupByTypeOptions:
    """Tests for GroupByTypeOptions defaults."""

    def test_defaults(self) -> None:
        """Test defaults."""
        opts = GroupByTypeOptions()
        assert opts.include_non_conventional is True
        assert opts.non_conventional_key == 'misc'
        assert opts.exclude_keys == frozenset()


class TestGroupByType:
    """Tests for group_by_type()."""

    def test_groups_conventional_commits_by_type(self) -> None:
        """Test groups conventional commits by type."""
        feat1 = make_commit(type='feat', short_hash='a')
        fix = make_commit(type='fix', short_hash='b')
        feat2 = make_commit(type='feat', short_hash='c')

        result = group_by_type([feat1, fix, feat2])

        assert list(result) == ['feat', 'fix']
        assert result['feat'] == [feat1, feat2]
        assert result['fix'] == [fix]

    def test_type_is_lowercased(self) -> None:
        """Test type is lowercased."""
        result = group_by_type([make_commit(type='FEAT'), make_commit(type='Feat')])
        assert list(result) == ['feat']
        assert len(result['feat']) == 2

    def test_non_conventional_default_key(self) -> None:
        """Test non conventional default key."""
        misc = make_commit(is_conventional=False, type='')
        assert group_by_type([misc]) == {'misc': [misc]}

    def test_non_conventional_custom_key(self) -> None:
        """Test non conventional custom key."""
        feat = make_commit(type='feat')
        misc = make_commit(is_conventional=False, type='')

        result = group_by_type([feat, misc], GroupByTypeOptions(non_conventional_key='other'))

        assert result == {'feat': [feat], 'other': [misc]}

    def test_skips_non_conventional_when_disabled(self) -> None:
        """Test skips non conventional when disabled."""
        feat = make_commit(type='feat')
        misc = make_commit(is_conventional=False, type='')

        result = group_by_type([feat, misc], GroupByTypeOptions(include_non_conventional=False))

        assert result == {'feat': [feat]}

    def test_skips_conventional_without_type(self) -> None:
        """Test skips conventional without type."""
        feat = make_commit(type='feat')
        result = group_by_type([feat, make_commit(type='')])
        assert result == {'feat': [feat]}

    def test_excludes_keys(self) -> None:
        """Test excludes keys."""
        feat = make_commit(type='feat')
        commits = [
            feat,
            make_commit(type='fix'),
            make_commit(type='docs'),
            make_commit(is_conventional=False, type=''),
        ]

        result = group_by_type(commits, GroupByTypeOptions(exclude_keys=frozenset({'fix', 'docs'})))

        assert list(result) == ['feat', 'misc']
        assert result['feat'] == [feat]

    def test_excludes_non_conventional_key(self) -> None:
        """Test excludes non conventional key."""
        feat = make_commit(type='feat')
        misc = make_commit(is_conventional=False, type='')

        result = group_by_type([feat, misc], GroupByTypeOptions(exclude_keys=frozenset({'misc'})))

        assert result == {'feat': [feat]}

    def test_exclude_matches_lowercased_key(self) -> None:
        """Test exclude matches lowercased key."""
        result = group_by_type([make_commit(type='CHORE')], GroupByTypeOptions(exclude_keys=frozenset({'chore'})))
        assert result == {}

    def test_empty(self) -> None:
        """Test empty."""
        assert group_by_type([]) == {}

    def test_accepts_generator(self) -> None:
        """Test accepts generator."""
        result = group_by_type(make_commit(type=t) for t in ('feat', 'fix'))
        assert list(result) == ['feat', 'fix']
