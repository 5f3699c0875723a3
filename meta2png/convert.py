"""
Convert .meta material files into PNG textures (one pixel per material).

python -m meta2png models/tree.obj.meta
python -m meta2png models/ --jobs 8

Each <name>.meta is written as <name>.png next to it, e.g.
models/tree.obj.meta -> models/tree.obj.png
"""

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

import numpy as np
from PIL import Image

from .errors import EmptyInputError
from .metadata import METADATA_EXT, load_color_codes
from .rasterize import rasterize

OUTPUT_EXT = ".png"


@dataclass(frozen=True)
class ConversionResult:
    source: Path
    output: Optional[Path] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def output_path(path: Path) -> Path:
    # only the last suffix is replaced: tree.obj.meta -> tree.obj.png
    return path.with_suffix(OUTPUT_EXT)


def walk_files(root: Path) -> Iterator[Path]:
    """Every regular file under root, depth-first in sorted name order."""
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            yield from walk_files(entry)
        else:
            yield entry


def find_metadata_files(path) -> List[Path]:
    path = Path(path).resolve()
    if path.is_file():
        if path.suffix != METADATA_EXT:
            raise ValueError(f"Not a {METADATA_EXT} file: {path}")
        return [path]
    if not path.exists():
        raise FileNotFoundError(f"No such file or directory: {path}")
    return [p for p in walk_files(path) if p.suffix == METADATA_EXT]


def write_png(grid: np.ndarray, path: Path) -> None:
    Image.fromarray(grid).save(path, format="PNG")


def convert_meta(path: Path, strict: bool = False) -> Path:
    """Load one .meta file, rasterize its materials and write the PNG beside it."""
    codes = load_color_codes(path)
    if not codes:
        raise EmptyInputError(f"No materials found in {path}")
    grid = rasterize(codes, strict=strict)
    out = output_path(path)
    write_png(grid, out)
    return out


def _convert_one(path: Path, strict: bool) -> ConversionResult:
    try:
        return ConversionResult(path, output=convert_meta(path, strict=strict))
    except Exception as e:
        return ConversionResult(path, error=e)


def convert_all(paths: Iterable[Path], jobs: int = 1, strict: bool = False) -> Iterator[ConversionResult]:
    """
    Convert every path, yielding one result per file as it finishes.

    A failing file is reported through its result and never stops the batch.
    """
    paths = list(paths)
    if jobs <= 1:
        for p in paths:
            yield _convert_one(p, strict)
        return
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        futures = [pool.submit(_convert_one, p, strict) for p in paths]
        for fut in as_completed(futures):
            yield fut.result()


def run(path, jobs: int = 1, strict: bool = False) -> List[ConversionResult]:
    files = find_metadata_files(path)
    total = len(files)
    results = []
    for i, res in enumerate(convert_all(files, jobs=jobs, strict=strict), 1):
        if res.ok:
            print(f"{i}/{total}: Converted {res.source.name} to {res.output.name}")
        else:
            print(f"{i}/{total}: Error during conversion of {res.source.name}, {res.error}")
        results.append(res)
    return results


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Convert .meta material files into PNG textures.")
    ap.add_argument("input", help=f"Path to a {METADATA_EXT} file or a directory to search for them")
    ap.add_argument("--jobs", type=int, default=1, help="Files to convert in parallel (default: 1)")
    ap.add_argument("--strict-colors", action="store_true",
                    help="Fail on malformed color codes instead of writing 0 channels")
    args = ap.parse_args(argv)

    try:
        results = run(args.input, jobs=args.jobs, strict=args.strict_colors)
    except (OSError, ValueError) as e:
        sys.exit(f"ERROR: {e}")

    if not results:
        print(f"⚠️ No {METADATA_EXT} files found under {args.input}", file=sys.stderr)
        return 1

    done = sum(1 for r in results if r.ok)
    if done == len(results):
        print(f"✅ Converted {done}/{len(results)} file(s)")
        return 0
    print(f"⚠️ Converted {done}/{len(results)} file(s), {len(results) - done} failed")
    return 1
