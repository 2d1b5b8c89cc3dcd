"""Build release notes from the changes between two tags.

The GitHub compare payload is reduced to :class:`Commit` and
:class:`FileChange` items. From those we work out which emoji SVGs were
added or updated, who contributed, and render the Markdown body used for
the GitHub release. Everything here apart from :func:`stage_assets` is pure.
"""
from __future__ import annotations
import logging
import os
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from emojitools.constants import (
    EXCLUDED_CONTRIBUTOR,
    PREVIEW_PREFIX,
    SVG_EXTENSION,
)
from emojitools.errors import IOFailure
from emojitools.utils import normalise_tag

log = logging.getLogger("emojitools.release")


class ChangeKind(Enum):
    ADDED = "Added"
    UPDATED = "Updated"


@dataclass(frozen=True)
class AssetChange:
    name: str
    kind: ChangeKind


@dataclass(frozen=True)
class Contributor:
    login: str
    html_url: str

    @classmethod
    def from_github_json(cls, data):
        if not data:
            return None
        return cls(data["login"], data["html_url"])


@dataclass(frozen=True)
class FileChange:
    filename: str
    status: str

    @classmethod
    def from_github_json(cls, data):
        return cls(data["filename"], data["status"])


@dataclass(frozen=True)
class Commit:
    message: str
    author: Optional[Contributor] = None

    @classmethod
    def from_github_json(cls, data):
        # "author" is the linked GitHub account and is null for commits made
        # with an email address that isn't attached to one.
        return cls(
            data["commit"]["message"],
            Contributor.from_github_json(data.get("author")),
        )


@dataclass(frozen=True)
class Comparison:
    commits: List[Commit]
    files: List[FileChange]

    @classmethod
    def from_github_json(cls, data):
        return cls(
            [Commit.from_github_json(c) for c in data.get("commits") or []],
            [FileChange.from_github_json(f) for f in data.get("files") or []],
        )

    @property
    def messages(self):
        return [c.message for c in self.commits]


def is_changed_asset(change: FileChange):
    return change.filename.endswith(SVG_EXTENSION) and change.status != "removed"


def changed_asset_paths(files: Sequence[FileChange]) -> List[str]:
    return [f.filename for f in files if is_changed_asset(f)]


def asset_name(path: str):
    """'animals/cat_happy.svg' -> 'cat_happy'"""
    name = path[path.rfind("/") + 1 :]
    if name.endswith(SVG_EXTENSION):
        name = name[: -len(SVG_EXTENSION)]
    return name


def classify_assets(files: Sequence[FileChange]) -> List[AssetChange]:
    svg_changes = [f for f in files if is_changed_asset(f)]
    added = {f.filename for f in svg_changes if f.status == "added"}
    return [
        AssetChange(
            asset_name(f.filename),
            ChangeKind.ADDED if f.filename in added else ChangeKind.UPDATED,
        )
        for f in svg_changes
    ]


def collect_contributors(
    commits: Sequence[Commit], excluded: str = EXCLUDED_CONTRIBUTOR
) -> List[Contributor]:
    seen = set()
    contributors = []
    for commit in commits:
        author = commit.author
        if author is None or author.login == excluded:
            continue
        if author.login in seen:
            continue
        seen.add(author.login)
        contributors.append(author)
    return contributors


RELEASE_NOTES_TEMPLATE = """
## New and updated emojis in this release

{changes}
*See the [README]({repo_url}) for usage instructions.*

{contributors}
<details>
<summary>
<h2>All changes in this release</h2>
</summary>

{change_list}
</details>
"""

CHANGES_TEMPLATE = """![A grid of the emojis that were new or updated in this release]({preview_url})

{new}

{updated}
"""

SUBSECTION_TEMPLATE = """### {title}

{items}
"""

CONTRIBUTORS_TEMPLATE = """
## Contributors to this release

{items}

"""


def preview_url(repo_url: str, tag_name: str):
    return (
        f"{repo_url}/releases/download/{tag_name}/"
        f"{PREVIEW_PREFIX}{normalise_tag(tag_name)}.png"
    )


def first_line(message: str):
    return message.split("\n")[0]


def change_list(commit_messages: Sequence[str]):
    return "\n".join(f"- {first_line(m)}" for m in commit_messages)


def _subsection(title, changes, kind):
    items = "\n".join(f"- `{c.name}`" for c in changes if c.kind == kind)
    if not items:
        return ""
    return SUBSECTION_TEMPLATE.format(title=title, items=items)


def build_release_notes(
    commit_messages: Sequence[str],
    asset_changes: Sequence[AssetChange],
    contributors: Sequence[Contributor],
    repo_url: str,
    tag_name: str,
) -> str:
    if asset_changes:
        changes = CHANGES_TEMPLATE.format(
            preview_url=preview_url(repo_url, tag_name),
            new=_subsection("New", asset_changes, ChangeKind.ADDED),
            updated=_subsection("Updated", asset_changes, ChangeKind.UPDATED),
        )
    else:
        changes = "None."

    if contributors:
        contributors_section = CONTRIBUTORS_TEMPLATE.format(
            items="\n".join(f"- [{c.login}]({c.html_url})" for c in contributors)
        )
    else:
        contributors_section = ""

    return RELEASE_NOTES_TEMPLATE.format(
        changes=changes,
        repo_url=repo_url,
        contributors=contributors_section,
        change_list=change_list(commit_messages),
    )


def stage_assets(paths: Sequence[str], destination: Path, root: Path = Path(".")):
    """Copy each changed SVG into destination, flattening the directory tree.

    Files with the same name in different directories overwrite each other.
    Returns the staged paths in input order."""
    destination = Path(destination)
    root = Path(root)
    staged = []
    try:
        os.makedirs(destination, exist_ok=True)
        for path in paths:
            src = root / path
            dst = destination / Path(path).name
            log.debug(f"Copying {src} to {dst}")
            shutil.copyfile(src, dst)
            staged.append(dst)
    except OSError as e:
        raise IOFailure(f"Could not stage assets in {destination}: {e}") from e
    return staged
