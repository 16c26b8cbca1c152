# src/delay_coord/io.py
import os, sys, csv, json, math
import numpy as np
from typing import Dict, Iterable, List, Optional, TextIO

CONFIG_KEYS = ("dimension", "delay")


def _parse_line(line: str, lineno: int) -> List[float]:
    row = []
    for j, field in enumerate(line.split(",")):
        try:
            row.append(float(field))
        except ValueError:
            raise ValueError(f"Line {lineno}, field {j + 1}: cannot parse {field.strip()!r} as a number") from None
    return row


def parse_series(lines: Iterable[str]) -> List[List[float]]:
    """One sample per line, comma-separated components. Blank lines are skipped."""
    data = []
    for lineno, line in enumerate(lines, start = 1):
        line = line.strip()
        if not line:
            continue
        data.append(_parse_line(line, lineno))
    return data


def read_series(path: Optional[str] = None) -> List[List[float]]:
    """Read a series from `path`, or from stdin when path is None or '-'."""
    if path is None or path == "-":
        return parse_series(sys.stdin)
    with open(path, "r") as f:
        return parse_series(f)


def component_counts(data: List[List[float]]) -> List[int]:
    return sorted({len(row) for row in data})


def format_value(v) -> str:
    """
    Plain positional notation with the shortest round-trip digits:
    4 (not 4.0), 0.0000001 (not 1e-07), -0, NaN, inf, -inf.
    """
    if isinstance(v, (float, np.floating)):
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "inf" if v > 0 else "-inf"
        return np.format_float_positional(v, trim = "-")
    return str(v)


def write_points(points: Iterable[List], out: TextIO) -> int:
    """Write one comma-separated record per point; returns the record count."""
    w = csv.writer(out, lineterminator = "\n")
    n = 0
    for p in points:
        w.writerow([format_value(v) for v in p])
        n += 1
    return n


def load_config(path: str) -> Dict[str, int]:
    with open(path, "r") as f:
        cfg = json.load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must hold a JSON object")
    unknown = sorted(set(cfg) - set(CONFIG_KEYS))
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {unknown}")
    return cfg


def write_params(path: str, record: Dict) -> None:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok = True)
    with open(path, "w") as f:
        f.write(json.dumps(record) + "\n")
