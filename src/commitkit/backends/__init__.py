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

"""Protocol-based backend layer for commitkit.

All external tool calls go through injectable Protocol interfaces so
tests can swap in a fake history source.

- :class:`HistorySource` — raw commit records (default: :class:`GitCLIBackend`)
"""

from commitkit.backends._run import CommandResult, run_command
from commitkit.backends.vcs import GitCLIBackend, HistorySource

__all__ = [
    'CommandResult',
    'GitCLIBackend',
    'HistorySource',
    'run_command',
]
