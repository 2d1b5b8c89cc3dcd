"""Rasterize the emoji SVGs to PNGs.

Each top-level directory of the repository holds one set of emoji SVGs.
Conversion mirrors that layout under ``png/``, so ``cats/cat_happy.svg``
becomes ``png/cats/cat_happy.png``. Jobs are run one at a time in directory
listing order.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from rich import progress
from rich.console import Console
from rich.progress import Progress

from emojitools.constants import (
    DEFAULT_SIZE,
    IGNORE_FILE,
    PNG_EXTENSION,
    PNG_OUTPUT_DIR,
    RESERVED_PREFIX,
    SVG_EXTENSION,
    TOOLS_DIR,
)
from emojitools.errors import IOFailure, RenderFailure
from emojitools.utils import read_lines

log = logging.getLogger("emojitools.pngs")


@dataclass(frozen=True)
class ConversionJob:
    svg_path: Path
    png_path: Path
    size: int = DEFAULT_SIZE


def read_ignore_file(root: Path) -> List[str]:
    return [line.strip() for line in read_lines(Path(root) / IGNORE_FILE)]


def all_directories(root: Path, ignored: Sequence[str] = ()) -> List[str]:
    """Top-level directories of root which hold emoji SVGs."""
    root = Path(root)
    ignored = set(ignored)
    return [
        name
        for name in os.listdir(root)
        if (root / name).is_dir()
        and name not in ignored
        and not name.startswith(RESERVED_PREFIX)
        and name != TOOLS_DIR
    ]


def plan_conversions(svg_dir: Path, png_dir: Path, size: int = DEFAULT_SIZE):
    svg_dir = Path(svg_dir)
    png_dir = Path(png_dir)
    try:
        svgs = [f for f in os.listdir(svg_dir) if f.endswith(SVG_EXTENSION)]
        if not png_dir.exists():
            os.makedirs(png_dir, exist_ok=True)
    except OSError as e:
        raise IOFailure(f"Could not plan conversions for {svg_dir}: {e}") from e

    return [
        ConversionJob(
            svg_dir / filename,
            png_dir / (filename[: -len(SVG_EXTENSION)] + PNG_EXTENSION),
            size,
        )
        for filename in svgs
    ]


def plan_all(
    root: Path,
    directories: Sequence[str],
    size: int = DEFAULT_SIZE,
    output_dir: str = PNG_OUTPUT_DIR,
) -> List[ConversionJob]:
    root = Path(root)
    jobs = []
    for directory in directories:
        jobs.extend(
            plan_conversions(root / directory, root / output_dir / directory, size)
        )
    return jobs


def render_svg(svg_path: Path, size: int) -> bytes:
    """Render an SVG to PNG bytes, scaled to size pixels wide."""
    # cairosvg loads the cairo shared library on import
    import cairosvg

    return cairosvg.svg2png(url=str(svg_path), output_width=size)


def rasterize(job: ConversionJob, render: Callable[[Path, int], bytes] = render_svg):
    try:
        data = render(job.svg_path, job.size)
    except Exception as e:
        raise RenderFailure(f"Could not render {job.svg_path}: {e}") from e
    try:
        with open(job.png_path, "wb") as doc:
            doc.write(data)
    except OSError as e:
        raise IOFailure(f"Could not write {job.png_path}: {e}") from e


def generate(
    jobs: Sequence[ConversionJob],
    render: Callable[[Path, int], bytes] = render_svg,
    console: Optional[Console] = None,
):
    with Progress(
        progress.BarColumn(),
        progress.TextColumn("{task.completed}/{task.total}"),
        progress.TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        progress.TimeRemainingColumn(),
        console=console,
    ) as progressbar:
        task = progressbar.add_task("Generating PNGs", total=len(jobs))
        for job in jobs:
            rasterize(job, render=render)
            progressbar.console.print(
                f"{job.svg_path.name} -> {job.png_path.name}", markup=False
            )
            progressbar.update(task, advance=1)
        progressbar.remove_task(task)
    log.info(f"Generated {len(jobs)} PNGs")
