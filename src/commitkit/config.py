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

"""Configuration reader for commitkit.

Reads ``commitkit.toml`` from the repository root and returns a
validated :class:`CommitKitConfig`. A missing file means defaults.

Validation Pipeline::

    commitkit.toml
    ┌──────────────────────┐
    │ exclude_key = [...]  │  ← typo!
    └──────────┬───────────┘
               │
               ▼
    ┌──────────────────┐     ┌──────────────────────────────┐
    │ 1. Unknown key   │────→│ CK-CONFIG-INVALID-KEY:       │
    │    detection     │     │ hint: "Did you mean          │
    └────────┬─────────┘     │       'exclude_keys'?"       │
             │               └──────────────────────────────┘
             ▼
    ┌──────────────────┐     ┌──────────────────────────────┐
    │ 2. Type check    │────→│ CK-CONFIG-INVALID-VALUE:     │
    │    each value    │     │ Expected bool, got str       │
    └────────┬─────────┘     └──────────────────────────────┘
             │
             ▼
    ┌──────────────────┐
    │ CommitKitConfig  │  ← frozen dataclass, ready to use
    └──────────────────┘

Supported keys::

    include_non_conventional = true          # group non-conventional commits
    non_conventional_key     = "misc"        # key for those commits
    exclude_keys             = ["chore"]     # group keys to drop
    folder                   = "packages/ui" # only commits touching this path
    to_ref                   = "HEAD"        # default end of the range

Usage::

    from commitkit.config import load_config

    cfg = load_config(Path('/path/to/repo'))
    commits = get_commits_sync(from_ref='v1.0.0', **cfg.history_options())
    groups = group_by_type(commits, cfg.grouping_options())
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from commitkit.errors import E, CommitKitError
from commitkit.grouping import GroupByTypeOptions
from commitkit.logging import get_logger

logger = get_logger(__name__)

# The config file name at the repository root.
CONFIG_FILENAME = 'commitkit.toml'

VALID_KEYS: frozenset[str] = frozenset({
    'exclude_keys',
    'folder',
    'include_non_conventional',
    'non_conventional_key',
    'to_ref',
})

_TYPE_MAP: dict[str, type] = {
    'exclude_keys': list,
    'folder': str,
    'include_non_conventional': bool,
    'non_conventional_key': str,
    'to_ref': str,
}


@dataclass(frozen=True)
class CommitKitConfig:
    """Validated commitkit settings.

    Attributes:
        include_non_conventional: Group non-conventional commits.
        non_conventional_key: Group key for non-conventional commits.
        exclude_keys: Group keys to drop.
        folder: Restrict history to commits touching this path.
        to_ref: Default end of the history range.
        config_path: The file the settings came from, or ``None`` for
            defaults.
    """

    include_non_conventional: bool = True
    non_conventional_key: str = 'misc'
    exclude_keys: frozenset[str] = frozenset()
    folder: str | None = None
    to_ref: str = 'HEAD'
    config_path: Path | None = None

    def grouping_options(self) -> GroupByTypeOptions:
        """Return the grouping options described by this config."""
        return GroupByTypeOptions(
            include_non_conventional=self.include_non_conventional,
            non_conventional_key=self.non_conventional_key,
            exclude_keys=self.exclude_keys,
        )

    def history_options(self) -> dict[str, str | None]:
        """Return the history range settings as keyword arguments.

        Meant to be splatted into :func:`~commitkit.commits.get_commits`
        or :func:`~commitkit.commits.get_commits_sync`::

            commits = await get_commits(from_ref='v1.0.0', **cfg.history_options())
        """
        return {'folder': self.folder, 'to_ref': self.to_ref}


def _suggest_key(unknown: str) -> str | None:
    """Return the closest valid key for a typo, or None."""
    matches = difflib.get_close_matches(unknown, VALID_KEYS, n=1, cutoff=0.6)
    return matches[0] if matches else None


def _validate_value_type(key: str, value: Any) -> None:  # noqa: ANN401 - dynamic config values
    """Raise if a config value has the wrong type."""
    expected = _TYPE_MAP[key]
    if not isinstance(value, expected):
        raise CommitKitError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"'{key}' must be {expected.__name__}, got {type(value).__name__}",
            hint=f'Check the value of {key} in {CONFIG_FILENAME}.',
        )


def _validate_exclude_keys(value: list[Any]) -> frozenset[str]:  # noqa: ANN401
    """Raise unless every entry is a string; return them as a set."""
    for item in value:
        if not isinstance(item, str):
            raise CommitKitError(
                code=E.CONFIG_INVALID_VALUE,
                message=f"'exclude_keys' entries must be str, got {type(item).__name__}",
                hint='Write exclude_keys as a list of strings, e.g. ["chore", "ci"].',
            )
    return frozenset(value)


def load_config(repo_root: Path, *, required: bool = False) -> CommitKitConfig:
    """Load and validate ``commitkit.toml``.

    Args:
        repo_root: Directory containing ``commitkit.toml``.
        required: Raise instead of returning defaults when the file is
            missing.

    Returns:
        A validated :class:`CommitKitConfig`.

    Raises:
        CommitKitError: If the file is missing (and ``required``),
            unreadable, not valid TOML, or contains invalid settings.
    """
    config_path = repo_root / CONFIG_FILENAME

    if not config_path.is_file():
        if required:
            raise CommitKitError(
                code=E.CONFIG_NOT_FOUND,
                message=f'No {CONFIG_FILENAME} found in {repo_root}',
                hint=f'Create {CONFIG_FILENAME} at the repository root.',
            )
        logger.debug('no_commitkit_config', path=str(config_path))
        return CommitKitConfig()

    try:
        text = config_path.read_text(encoding='utf-8')
    except OSError as exc:
        raise CommitKitError(
            code=E.CONFIG_PARSE_ERROR,
            message=f'Failed to read {config_path}: {exc}',
        ) from exc

    try:
        doc = tomlkit.parse(text)
    except tomlkit.exceptions.TOMLKitError as exc:
        raise CommitKitError(
            code=E.CONFIG_PARSE_ERROR,
            message=f'Failed to parse {config_path}: {exc}',
        ) from exc

    raw: dict[str, Any] = doc.unwrap()  # noqa: ANN401

    for key, value in raw.items():
        if key not in VALID_KEYS:
            suggestion = _suggest_key(key)
            raise CommitKitError(
                code=E.CONFIG_INVALID_KEY,
                message=f"Unknown key '{key}' in {CONFIG_FILENAME}",
                hint=f"Did you mean '{suggestion}'?" if suggestion else f'Valid keys: {", ".join(sorted(VALID_KEYS))}.',
            )
        _validate_value_type(key, value)

    if 'exclude_keys' in raw:
        raw['exclude_keys'] = _validate_exclude_keys(raw['exclude_keys'])

    if 'non_conventional_key' in raw and not raw['non_conventional_key'].strip():
        raise CommitKitError(
            code=E.CONFIG_INVALID_VALUE,
            message="'non_conventional_key' must not be empty",
            hint='Use a name such as "misc" or "other".',
        )

    logger.debug('commitkit_config_loaded', path=str(config_path), keys=sorted(raw))
    return CommitKitConfig(**raw, config_path=config_path)


__all__ = [
    'CONFIG_FILENAME',
    'VALID_KEYS',
    'CommitKitConfig',
    'load_config',
]
