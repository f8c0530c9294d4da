#!/usr/bin/env python3
"""Quick perf benchmark for signature parsing."""

from __future__ import annotations

import argparse
from pathlib import Path
import statistics
import time

from tqdm import tqdm

from dbussig import SignatureError, parse_signature

DEFAULT_SIGNATURES: tuple[str, ...] = (
    "iis",
    "a{sv}",
    "a{oa{sa{sv}}}",
    "a(iis{si}i)",
    "a{s{u(iodai)}}",
    "(ybnqiuxtdhsogv)",
)


def _load_signatures(path: Path | None) -> list[str]:
    if path is None:
        return list(DEFAULT_SIGNATURES)
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith("#")]


def _run_once(
    signatures: list[str],
    *,
    repeat: int,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_nodes = 0
    total_errors = 0
    iterator = (
        tqdm(range(repeat), desc=label, unit="batch")
        if show_progress
        else range(repeat)
    )
    for _ in iterator:
        for signature in signatures:
            try:
                total_nodes += len(parse_signature(signature))
            except SignatureError:
                total_errors += 1
    duration = time.perf_counter() - start
    return duration, total_nodes, total_errors


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark signature parsing throughput")
    parser.add_argument(
        "--signatures",
        type=Path,
        default=None,
        help="File with one signature per line (default: built-in sample set)",
    )
    parser.add_argument("--repeat", type=int, default=10_000, help="Batches per run")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    args = parser.parse_args()

    signatures = _load_signatures(args.signatures)
    if not signatures:
        raise SystemExit(f"No signatures found in {args.signatures}")

    show_progress = not args.no_progress
    repeat = max(args.repeat, 1)

    for warmup_idx in range(max(args.warmups, 0)):
        _run_once(
            signatures,
            repeat=repeat,
            label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
            show_progress=show_progress,
        )

    timings: list[float] = []
    nodes_count = 0
    errors_count = 0
    for run_idx in range(max(args.runs, 1)):
        duration, nodes_count, errors_count = _run_once(
            signatures,
            repeat=repeat,
            label=f"run {run_idx + 1}/{max(args.runs, 1)}",
            show_progress=show_progress,
        )
        timings.append(duration)

    parsed = len(signatures) * repeat
    mean = statistics.mean(timings)

    print(f"Signatures: {len(signatures)} x {repeat}")
    print(f"Top-level types: {nodes_count}")
    print(f"Errors: {errors_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Signatures/s (mean): {parsed / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
