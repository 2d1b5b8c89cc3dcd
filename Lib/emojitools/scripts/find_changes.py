#!/usr/bin/env python3
# Copyright 2023 The Emoji Tools Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""Build release notes for the current tag and stage the changed SVGs.

Intended to run in the release workflow, where GITHUB_TOKEN, GITHUB_REF and
GITHUB_REPOSITORY are provided. See emojitools.actions.findchanges.

Usage:
emojitools find-changes
"""
from emojitools.actions.findchanges import main

if __name__ == "__main__":
    main()
