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

# =====================================
# GLOBAL CONSTANTS DEFINITIONS

# Asset files
SVG_EXTENSION = ".svg"
PNG_EXTENSION = ".png"

# Release notes
# The maintainer cuts every release, so they are not listed as a contributor.
EXCLUDED_CONTRIBUTOR = "olivvybee"
TAG_REF_PREFIX = "refs/tags/"
UPDATES_DIR_PREFIX = "updates-"
PREVIEW_PREFIX = "preview-updates-"

# PNG generation
DEFAULT_SIZE = 256
PNG_OUTPUT_DIR = "png"
IGNORE_FILE = ".gitignore"
RESERVED_PREFIX = "."
TOOLS_DIR = "scripts"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
