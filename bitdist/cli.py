# bitdist/cli.py
import argparse
import os
import time
from typing import Callable, List, Optional

from .config import DEFAULTS, load_config
from .display import show_result
from .distance import METHODS
from .errors import BitmapError
from .factory import Random, Supplied, create_bitmaps
from .metrics import summarize_bitmap
from .validation import ask_until_valid, parse_bit, parse_bits, parse_positive_int
from .viz import plot_bitmap_distances


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser("bitdist", description="Nearest-1 Manhattan distances for binary bitmaps.")
    ap.add_argument("--config", type=str, default=None, help="JSON file with count/width/height/mode/values/seed/method.")
    ap.add_argument("--count", type=int, default=None, help="Number of bitmaps.")
    ap.add_argument("--width", type=int, default=None, help="Number of columns.")
    ap.add_argument("--height", type=int, default=None, help="Number of rows.")
    ap.add_argument("--mode", choices=["random", "input"], default=None)
    ap.add_argument("--values", type=str, default=None,
                    help="Cell values for --mode input, column-major, e.g. '1 0 0 0' or '1000'.")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--method", choices=sorted(METHODS), default=None,
                    help="bfs (linear) or brute (all pairs, reference).")
    ap.add_argument("--stats", action="store_true", help="Print a summary per bitmap.")
    ap.add_argument("--plot", action="store_true", help="Show (or save with --plot-dir) a heatmap per bitmap.")
    ap.add_argument("--plot-dir", type=str, default=None)
    ap.add_argument("--interactive", action="store_true",
                    help="Ask for every parameter on the console, re-asking on bad answers.")
    ap.add_argument("--quiet", action="store_true", help="Hide status lines, keep the results.")
    return ap


def ask_parameters(cfg: dict, read: Callable[[str], str]) -> dict:
    """Console question flow; every answer is re-asked until it parses."""
    print("Welcome to the bitmap distance app")
    count = ask_until_valid("Input the number of bitmaps: ", lambda s: parse_positive_int(s, "count"),
                            read=read, error_msg="Incorrect amount. The value must be a number")
    width = ask_until_valid("Input the bitmap width: ", lambda s: parse_positive_int(s, "width"),
                            read=read, error_msg="Incorrect width. The value must be a number")
    height = ask_until_valid("Input the bitmap height: ", lambda s: parse_positive_int(s, "height"),
                             read=read, error_msg="Incorrect height. The value must be a number")
    way = ask_until_valid("Do you want the data to be generated randomly or by input? (0 - input, 1 - random): ",
                          parse_bit, read=read, error_msg="Incorrect answer. The value must be either 0 or 1")

    values = None
    if way == 0:
        n = count * width * height
        print(f"Input {n} numbers from 0 to 1")
        values = []
        while len(values) < n:
            question = "" if not values else "Input another number: "
            values.append(ask_until_valid(question, parse_bit, read=read,
                                          error_msg="Incorrect data, the value must be either 0 or 1"))

    return {**cfg, "count": count, "width": width, "height": height,
            "mode": "input" if way == 0 else "random", "values": values}


def _values_from_cfg(raw) -> List[int]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return parse_bits(raw)
    return [parse_bit(v) for v in raw]


def main(argv: Optional[List[str]] = None, *, read: Callable[[str], str] = input) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    def vprint(*a, **k):
        if not args.quiet:
            print(*a, **k)

    # === Config ===
    if args.config:
        cfg = load_config(args.config)
        vprint(f"[OK] config loaded: {args.config}")
    else:
        cfg = dict(DEFAULTS)

    for key in ("count", "width", "height", "mode", "values", "seed", "method"):
        v = getattr(args, key)
        if v is not None:
            cfg[key] = v

    if args.interactive or any(cfg[k] is None for k in ("count", "width", "height")):
        cfg = ask_parameters(cfg, read)

    # === Bitmaps ===
    if cfg["mode"] not in ("random", "input"):
        ap.error(f"unknown mode {cfg['mode']!r}, expected 'random' or 'input'")
    try:
        if cfg["mode"] == "input":
            source = Supplied(_values_from_cfg(cfg["values"]))
        else:
            seed = cfg["seed"] if cfg["seed"] is not None else (time.time_ns() & 0xFFFFFFFF)
            vprint(f"[seeds] run_seed={seed}")
            source = Random(seed=seed)
        bitmaps = create_bitmaps(cfg["count"], cfg["width"], cfg["height"], source)
    except BitmapError as e:
        print(f"[ERROR] {e}")
        ap.error(str(e))

    if cfg["method"] not in METHODS:
        ap.error(f"unknown method {cfg['method']!r}, expected one of {sorted(METHODS)}")
    transform = METHODS[cfg["method"]]
    if args.plot and args.plot_dir:
        os.makedirs(args.plot_dir, exist_ok=True)

    # === Distances ===
    for k, bitmap in enumerate(bitmaps):
        distances = transform(bitmap)
        vprint(f"\n=== bitmap {k + 1}/{len(bitmaps)} | {bitmap.width}x{bitmap.height} "
               f"| ones={bitmap.ones()} | repaired={bitmap.repaired} ===")
        show_result(bitmap, distances)

        if args.stats:
            s = summarize_bitmap(bitmap, distances)
            print(f"stats -> ones={s['ones']} | density={s['density']:.2f} | "
                  f"max={s['max_distance']} | mean={s['mean_distance']:.2f} | hist={s['histogram']}")

        if args.plot:
            savepath = os.path.join(args.plot_dir, f"bitmap_{k:03d}.png") if args.plot_dir else None
            plot_bitmap_distances(bitmap, distances, title=f"bitmap {k + 1}", savepath=savepath)
            if savepath:
                vprint(f"[plot] saved → {savepath}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
