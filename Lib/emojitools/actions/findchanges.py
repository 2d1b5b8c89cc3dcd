"""Build release notes for a tagged release and stage the changed SVGs.

This is run by the release workflow when a tag is pushed. It compares the
tag against the most recent non-prerelease release on GitHub, renders the
release notes, and copies every new or updated SVG into
``updates-<tag>/`` so a later step can build a preview grid from them.

The results are reported to GitHub Actions as the ``releaseNotes`` and
``hasSvgChanges`` step outputs:

    % GITHUB_TOKEN=... GITHUB_REF=refs/tags/2023.10 \\
        python3 -m emojitools.actions.findchanges
"""
import logging
from pathlib import Path

from emojitools.argparse import EmojiArgumentParser
from emojitools.constants import UPDATES_DIR_PREFIX
from emojitools.emojigithub import GitHubClient
from emojitools.logging import setup_logging
from emojitools.release import (
    Comparison,
    build_release_notes,
    changed_asset_paths,
    classify_assets,
    collect_contributors,
    stage_assets,
)
from emojitools.utils import normalise_tag, require_env, set_output, tag_name_from_ref

log = logging.getLogger("emojitools.actions")


def find_previous_release_tag(client: GitHubClient):
    for release in client.list_releases():
        if not release["prerelease"]:
            return release["tag_name"]
    return None


def detect_changes(client: GitHubClient, previous_tag: str, current_ref: str):
    log.info(f"Comparing {previous_tag}...{current_ref}")
    return Comparison.from_github_json(
        client.compare_commits(previous_tag, current_ref)
    )


def find_changes(client: GitHubClient, ref: str, root: Path = Path(".")):
    """Report release notes for ref and stage its changed SVGs under root.

    Returns True if any SVGs were staged."""
    tag_name = tag_name_from_ref(ref)

    previous_tag = find_previous_release_tag(client)
    if not previous_tag:
        log.info("No non-prerelease releases found to compare against.")
        set_output("hasSvgChanges", False)
        return False

    changes = detect_changes(client, previous_tag, ref)
    changed_svgs = changed_asset_paths(changes.files)

    release_notes = build_release_notes(
        changes.messages,
        classify_assets(changes.files),
        collect_contributors(changes.commits),
        client.repo_url,
        tag_name,
    )
    set_output("releaseNotes", release_notes)

    if not changed_svgs:
        log.info("No changes to SVGs found since previous release.")
        set_output("hasSvgChanges", False)
        return False

    changes_dir = Path(root) / f"{UPDATES_DIR_PREFIX}{normalise_tag(tag_name)}"
    staged = stage_assets(changed_svgs, changes_dir, root=root)
    log.info(f"Copied {len(staged)} changed SVGs to {changes_dir}")
    set_output("hasSvgChanges", True)
    return True


def main(args=None):
    parser = EmojiArgumentParser(
        description="Build release notes and stage changed SVGs for a tag"
    )
    args = parser.parse_args(args)
    setup_logging("emojitools.actions", args, __name__)

    # Both are needed before we touch the network.
    token = require_env("GITHUB_TOKEN")
    ref = require_env("GITHUB_REF")

    client = GitHubClient.from_env(token=token)
    find_changes(client, ref)


if __name__ == "__main__":
    main()
