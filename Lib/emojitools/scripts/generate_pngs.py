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
"""Generate PNGs from the emoji SVGs.

Every top-level directory that isn't listed in .gitignore is converted by
default. PNGs are written to png/<directory>/, scaled to the requested width
with the height following each SVG's aspect ratio.

Usage:
# Convert everything at 256px wide
emojitools generate-pngs
# Convert two directories at 512px wide
emojitools generate-pngs -d animals food -s 512
# Convert a checkout somewhere else
emojitools generate-pngs --root ~/src/emojis
"""
from pathlib import Path
import argparse
import logging

from emojitools.argparse import EmojiArgumentParser
from emojitools.constants import DEFAULT_SIZE, PNG_OUTPUT_DIR
from emojitools.logging import setup_logging
from emojitools.pngs import all_directories, generate, plan_all, read_ignore_file

log = logging.getLogger("emojitools.pngs")


def positive_int(value):
    size = int(value)
    if size <= 0:
        raise ValueError(value)
    return size


def root_parser(default_root=Path(".")):
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--root",
        type=Path,
        default=default_root,
        help="Repository checkout holding the emoji directories",
    )
    return parser


def build_parser(directories, default_root=Path(".")):
    parser = EmojiArgumentParser(
        description=__doc__.split("\n")[0], parents=[root_parser(default_root)]
    )
    parser.add_argument(
        "-d",
        "--directories",
        nargs="+",
        action="extend",
        choices=directories,
        metavar="DIRECTORY",
        help="Input directories containing SVGs "
        f"(choices: {', '.join(directories)}). Defaults to all of them",
    )
    parser.add_argument(
        "-s",
        "--size",
        type=positive_int,
        default=DEFAULT_SIZE,
        help="The size to generate PNGs at, in pixels",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=PNG_OUTPUT_DIR,
        help="Directory to write PNGs to, relative to the root",
    )
    return parser


def main(args=None, root=Path(".")):
    # --root decides which directories -d accepts, so it is read first.
    known, _ = root_parser(Path(root)).parse_known_args(args)
    root = known.root
    # Resolved once; both the defaults and the allowed choices come from it.
    directories = all_directories(root, read_ignore_file(root))

    parser = build_parser(directories, root)
    args = parser.parse_args(args)
    setup_logging("emojitools.pngs", args, __name__)

    selected = args.directories or directories
    log.debug(f"Converting SVGs in {', '.join(selected)}")
    jobs = plan_all(root, selected, args.size, output_dir=args.output)
    generate(jobs)


if __name__ == "__main__":
    main()
