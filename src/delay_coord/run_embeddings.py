"""
Map a time series into delay-coordinate space.

Usage:
    delay-coord -m DIM -d DELAY [INPUT]
    python -m delay_coord.run_embeddings -m 3 -d 2 series.csv

INPUT holds one sample per line, components separated by commas (read from
stdin when omitted or '-'). Every embedded point is written as one
comma-separated record, newest sample first.
"""

import argparse
import sys
from typing import List, Optional

import numpy as np

from .geometry import ForwardDelayCoordinates
from .io import (read_series, write_points, component_counts, load_config,
                 write_params)

__version__ = "0.1.0"


def _positive_int(s: str) -> int:
    v = int(s)
    if v < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {v}")
    return v


def _non_negative_int(s: str) -> int:
    v = int(s)
    if v < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {v}")
    return v


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog = "delay-coord",
        description = "Maps time series into a delay-coordinate space",
        formatter_class = argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs = "?", default = None, metavar = "INPUT",
                        help = "Input file (default: stdin)")
    parser.add_argument("-m", "--dimension", "--embedding-dimension", dest = "dimension",
                        type = _positive_int, metavar = "DIM",
                        help = "Embedding dimension")
    parser.add_argument("-d", "--delay", "--time-delay", dest = "delay",
                        type = _non_negative_int, metavar = "DELAY",
                        help = "Delay in steps")
    parser.add_argument("--config", metavar = "JSON",
                        help = "JSON file with 'dimension' and/or 'delay'; flags take precedence")
    parser.add_argument("-o", "--output", metavar = "PATH",
                        help = "Output file (default: stdout)")
    parser.add_argument("--params-out", metavar = "JSON",
                        help = "Write a JSON record describing the run")
    parser.add_argument("--qc-plot", metavar = "PNG",
                        help = "Save a scatter of the embedded trajectory")
    parser.add_argument("-q", "--quiet", action = "store_true",
                        help = "Suppress diagnostics on stderr")
    parser.add_argument("-V", "--version", action = "version", version = f"%(prog)s {__version__}")
    return parser


def _resolve_params(parser: argparse.ArgumentParser, args) -> None:
    cfg = {}
    if args.config:
        try:
            cfg = load_config(args.config)
        except (OSError, ValueError) as e:
            parser.error(f"--config: {e}")
    for key, check in (("dimension", _positive_int), ("delay", _non_negative_int)):
        if getattr(args, key) is not None:
            continue
        if key not in cfg:
            parser.error(f"{key} must be specified (--{key} or --config)")
        try:
            setattr(args, key, check(str(cfg[key])))
        except (argparse.ArgumentTypeError, ValueError) as e:
            parser.error(f"config {key}: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _resolve_params(parser, args)

    def log(msg: str):
        if not args.quiet:
            print(msg, file = sys.stderr)

    data = read_series(args.input)
    counts = component_counts(data)
    if len(counts) > 1:
        log(f"[WARN] Samples have differing component counts {counts}; records will differ in length.")

    coord = ForwardDelayCoordinates(dimension = args.dimension, delay = args.delay)
    points = (view.to_flat_list() for view in coord.mapping_iter(data))
    if args.output:
        with open(args.output, "w", newline = "") as fout:
            n_points = write_points(points, fout)
    else:
        n_points = write_points(points, sys.stdout)

    if n_points == 0:
        log(f"[WARN] {len(data)} samples are fewer than window_size = {coord.window_size}; no points written.")
    log(f"[EMBED] dimension = {coord.dimension} | delay = {coord.delay} | "
        f"window_size = {coord.window_size} | points = {n_points}")

    if args.params_out:
        write_params(args.params_out, {
            "geometry": type(coord).__name__,
            "dimension": coord.dimension,
            "delay": coord.delay,
            "window_size": coord.window_size,
            "n_samples": len(data),
            "n_points": n_points,
            "n_components": counts[0] if len(counts) == 1 else counts,
            "input": args.input or "-",
        })

    if args.qc_plot:
        if len(counts) > 1:
            log("[WARN] QC plot needs samples with a uniform component count; skipped.")
        else:
            from .qc import save_embedding_scatter
            from .takens import takens_embed
            X = takens_embed(np.asarray(data, dtype = float), coord)
            if save_embedding_scatter(args.qc_plot, X, n_components = counts[0] if counts else 1):
                log(f"[EMBED] QC plot -> {args.qc_plot}")
            else:
                log(f"[WARN] Embedding of shape {X.shape} is too small to plot; skipped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
