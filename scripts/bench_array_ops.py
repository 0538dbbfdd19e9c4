# scripts/bench_array_ops.py
"""
Microbench: NDArray elementwise / slicing / assignment ops (ndcell vs NumPy).

What it measures
----------------
- Per-op latency for broadcasting arithmetic, slicing views, reshape and
  write-through assignment on ndcell arrays.
- The same op on NumPy arrays is timed alongside as a reference point.
- Uses warmup iterations (not recorded), then repeats with median/p95.

Notes
-----
- ndcell stores one Python object per element, so expect it to be orders of
  magnitude slower than NumPy. The interesting numbers are how ops scale with
  shape and how broadcasting compares to same-shape arithmetic.
- Inputs are allocated once and reused. Arithmetic outputs are created each
  iteration; assignments overwrite the same cells every iteration.

Example
-------
python -O scripts/bench_array_ops.py --ops add add_bcast assign_bcast slice \
    --shape 64 32 --dtype float64 --warmup 5 --repeats 50 --sanity
"""

from __future__ import annotations

import argparse
import logging
import math
import statistics
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np

import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import ndcell as nc  # noqa: E402


# ----------------------------
# Stats helpers
# ----------------------------
def _median(xs: Sequence[float]) -> float:
    return statistics.median(xs) if xs else float("nan")


def _p95(xs: Sequence[float]) -> float:
    if not xs:
        return float("nan")
    ys = sorted(xs)
    k = int(math.ceil(0.95 * len(ys))) - 1
    k = max(0, min(k, len(ys) - 1))
    return ys[k]


def _fmt(sec: float) -> str:
    if math.isnan(sec):
        return "n/a"
    if sec < 1e-3:
        return f"{sec * 1e6:8.1f} µs"
    return f"{sec * 1e3:8.3f} ms"


@dataclass
class OpResult:
    name: str
    nd_med: float
    nd_p95: float
    np_med: float
    np_p95: float


# ----------------------------
# Bench core
# ----------------------------
def _time_op(fn: Callable[[], object], *, warmup: int, repeats: int) -> List[float]:
    for _ in range(warmup):
        fn()

    times: List[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def _row_shape(shape: Tuple[int, ...]) -> Tuple[int, ...]:
    return (1,) * (len(shape) - 1) + (shape[-1],)


def _build_ops(a, b, row, alpha: float) -> Dict[str, Callable[[], object]]:
    # ndcell and NumPy arrays expose the same operator surface for every op here.
    half = max(1, a.shape[0] // 2)

    def assign_full():
        a[...] = b

    def assign_bcast():
        a[...] = row

    def assign_scalar():
        a[:half] = alpha

    ops: Dict[str, Callable[[], object]] = {
        "add": lambda: a + b,
        "sub": lambda: a - b,
        "mul": lambda: a * b,
        "div": lambda: a / b,
        "neg": lambda: -a,
        "add_bcast": lambda: a + row,
        "mul_scalar": lambda: a * alpha,
        "slice": lambda: a[1:half],
        "index": lambda: a[half],
        "reshape": lambda: a.reshape(-1),
        "assign": assign_full,
        "assign_bcast": assign_bcast,
        "assign_scalar": assign_scalar,
    }
    return ops


def _sanity_check(nd_out, np_out, name: str) -> None:
    got = nd_out.to_numpy() if isinstance(nd_out, nc.NDArray) else nd_out
    if not np.allclose(got, np_out, rtol=1e-10, atol=1e-12):
        raise AssertionError(f"[sanity] {name} mismatch")


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument(
        "--shape",
        nargs="+",
        type=int,
        default=[64, 32],
        help="Array shape, e.g. --shape 64 32",
    )
    ap.add_argument("--dtype", choices=["float32", "float64"], default="float64")
    ap.add_argument("--warmup", type=int, default=5)
    ap.add_argument("--repeats", type=int, default=50)
    ap.add_argument(
        "--ops",
        nargs="*",
        default=[
            "add",
            "mul",
            "div",
            "neg",
            "add_bcast",
            "mul_scalar",
            "slice",
            "reshape",
            "assign_bcast",
        ],
    )
    ap.add_argument("--alpha", type=float, default=0.125)
    ap.add_argument(
        "--sanity",
        action="store_true",
        help="Run correctness check (ndcell vs NumPy) once per op",
    )
    ap.add_argument("--debug", action="store_true", help="Enable ndcell DEBUG logs")
    args = ap.parse_args()

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    shape = tuple(int(x) for x in args.shape)
    dtype = np.dtype(args.dtype)
    alpha = float(args.alpha)

    print("=" * 88)
    print(
        f"NDArray ops bench | shape={shape} dtype={dtype} warmup={args.warmup} repeats={args.repeats}"
    )
    print("=" * 88)

    rng = np.random.default_rng(0)
    a_np = (rng.standard_normal(size=shape).astype(dtype)) * 0.25
    b_np = (rng.standard_normal(size=shape).astype(dtype)) * 0.25 + 1.0
    row_np = (rng.standard_normal(size=_row_shape(shape)).astype(dtype)) + 2.0

    a_nd = nc.array(a_np)
    b_nd = nc.array(b_np)
    row_nd = nc.array(row_np)

    nd_ops = _build_ops(a_nd, b_nd, row_nd, alpha)
    np_ops = _build_ops(a_np.copy(), b_np, row_np, alpha)

    selected = [op for op in args.ops if op in nd_ops]
    if not selected:
        raise SystemExit(
            f"No valid ops selected. Choose from: {' '.join(sorted(nd_ops))}"
        )

    results: List[OpResult] = []
    for name in selected:
        if args.sanity and not name.startswith("assign"):
            _sanity_check(nd_ops[name](), np_ops[name](), name)

        nd_times = _time_op(nd_ops[name], warmup=args.warmup, repeats=args.repeats)
        np_times = _time_op(np_ops[name], warmup=args.warmup, repeats=args.repeats)
        results.append(
            OpResult(
                name=name,
                nd_med=_median(nd_times),
                nd_p95=_p95(nd_times),
                np_med=_median(np_times),
                np_p95=_p95(np_times),
            )
        )

    print("\nResults (median / p95):")
    print("-" * 88)
    print(
        f"{'op':14s} | {'ndcell_med':>12s} {'ndcell_p95':>12s} | "
        f"{'numpy_med':>12s} {'numpy_p95':>12s} | {'ratio':>8s}"
    )
    print("-" * 88)
    for r in results:
        ratio = f"{r.nd_med / r.np_med:7.0f}x" if r.np_med > 0 else "   n/a"
        print(
            f"{r.name:14s} | {_fmt(r.nd_med):>12s} {_fmt(r.nd_p95):>12s} | "
            f"{_fmt(r.np_med):>12s} {_fmt(r.np_p95):>12s} | {ratio:>8s}"
        )
    print("-" * 88)
    if args.sanity:
        print("Sanity: PASS (all non-assignment ops)")


if __name__ == "__main__":
    main()
