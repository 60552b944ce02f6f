"""Ship a range of KOBIS list pages to JSON files.

    python -m movieShipper.ship --start 1 --end 5
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from movieShipper.settings import OUTPUT_FOLDER
from movieShipper.utils import log_debug, print_progress_bar_cmdln
from movieShipper.metadata import KoficClient, KoficError
from movieShipper.shipping.json_functions import page_file, write_movies_json


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Fetch KOBIS movie pages and write them as JSON.")
    p.add_argument("--start", type=int, default=1, help="first page (1-based)")
    p.add_argument("--end", type=int, default=None, help="last page, inclusive (default: --start)")
    p.add_argument("--out", type=Path, default=OUTPUT_FOLDER, help="output folder")
    p.add_argument("--api-key", default=None, help="overrides KOFIC_API_KEY")
    return p


def ship_pages(client: KoficClient, start: int, end: int, out: Path) -> List[Path]:
    """Fetch pages *start*..*end* and write one JSON file per page.

    Stops at the first error; files already written are kept.
    """
    written: List[Path] = []
    total = end - start + 1
    for i, page in enumerate(range(start, end + 1)):
        print_progress_bar_cmdln(i, total, prefix="Shipping", suffix=f"page {page}")
        movies = client.fetch_movies_by_page(page)
        path = page_file(out, page)
        write_movies_json(path, movies)
        written.append(path)
    print_progress_bar_cmdln(total, total, prefix="Shipping", suffix="done")
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    end = args.end if args.end is not None else args.start
    if args.start < 1 or end < args.start:
        print(f"Invalid page range {args.start}..{end}", file=sys.stderr)
        return 2

    try:
        client = KoficClient(args.api_key)
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 2

    try:
        written = ship_pages(client, args.start, end, args.out)
    except KoficError as exc:
        log_debug(f"Shipping aborted: {type(exc).__name__}: {exc}")
        print(f"Shipping aborted: {exc}", file=sys.stderr)
        return 1

    log_debug(f"Shipped pages {args.start}..{end} → {args.out}")
    print(f"Shipped {len(written)} page(s) → {args.out}")
    return 0


# Python entry-point guard
if __name__ == "__main__":
    sys.exit(main())
