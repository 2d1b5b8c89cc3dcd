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
import os
import re
import subprocess
import uuid
from pathlib import Path

from emojitools.constants import TAG_REF_PREFIX
from emojitools.errors import ConfigurationError, IOFailure

# =====================================
# HELPER FUNCTIONS


def github_user_repo(github_url):
    if github_url.endswith(".git"):
        github_url = github_url[:-4]
    pattern = r"(?:https?://w?w?w?\.?|git@)github\.com[/:](?P<user>[^/]+)/(?P<repo>[^/]+)"
    match = re.search(pattern, github_url)
    if not match:
        raise ValueError(
            f"Cannot extract github user and repo name from url '{github_url}'."
        )
    return match.group("user"), match.group("repo")


def origin_remote_url():
    return (
        subprocess.check_output(["git", "remote", "get-url", "origin"])
        .decode("utf8")
        .strip()
    )


def require_env(name):
    value = os.environ.get(name)
    if not value:
        raise ConfigurationError(f"{name} environment variable not set")
    return value


def tag_name_from_ref(ref):
    """'refs/tags/2023.10' -> '2023.10'. Other refs are returned unchanged."""
    return ref.replace(TAG_REF_PREFIX, "")


def normalise_tag(tag_name):
    """Make a tag usable as a single path component."""
    return "-".join(tag_name.split("/"))


def _escape_command_value(value):
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_output_value(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def set_output(name, value):
    """Report a step output to GitHub Actions.

    Outputs are appended to the file named by GITHUB_OUTPUT using the
    multiline delimiter syntax, so Markdown release notes survive intact.
    Outside of an action run, the legacy ``::set-output`` workflow command
    is printed instead.
    """
    value = format_output_value(value)
    output_file = os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        print(f"::set-output name={name}::{_escape_command_value(value)}")
        return
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    try:
        with open(output_file, "a", encoding="utf-8") as doc:
            doc.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    except OSError as e:
        raise IOFailure(f"Could not write output '{name}' to {output_file}: {e}") from e


def read_lines(fp: Path):
    """Return the lines of a text file, or an empty list if it doesn't exist."""
    if not fp.exists():
        return []
    try:
        return fp.read_text(encoding="utf-8").split("\n")
    except OSError as e:
        raise IOFailure(f"Could not read {fp}: {e}") from e
