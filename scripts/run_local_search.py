"""Build a nearest-neighbour tour and refine it with 2-opt and Or-opt."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
for candidate in (SRC_ROOT, PROJECT_ROOT):
    candidate_str = str(candidate)
    if candidate_str not in sys.path:
        sys.path.insert(0, candidate_str)

from config import DEFAULT_INSTANCE, DEFAULT_LOCAL_SEARCH_PARAMS, LocalSearchParams
from config.instance_generator import INSTANCE_PRESETS, InstanceConfig, describe_instance, generate_cities
from core.city import City, coordinates_by_id
from core.instance_io import format_tour_length, load_cities, save_tour
from physics.distance import METRICS, create_distance_matrix
from planner.construction import nearest_neighbour_tour
from planner.local_search import optimize_tour

logger = logging.getLogger("run_local_search")


def _load_instance(args: argparse.Namespace) -> List[City]:
    if args.input:
        cities = load_cities(args.input)
        logger.info(f"Loaded {len(cities)} cities from {args.input}")
        return cities
    if args.preset:
        config = INSTANCE_PRESETS[args.preset]
    else:
        config = InstanceConfig(num_cities=args.random, seed=args.seed)
    logger.info(f"Generated instance: {describe_instance(config)}")
    return generate_cities(config)


def _run(args: argparse.Namespace) -> Dict[str, Any]:
    cities = _load_instance(args)
    matrix = create_distance_matrix(coordinates_by_id(cities), metric=args.metric)
    params = LocalSearchParams(improvement_tolerance=args.tolerance, max_passes=args.max_passes)

    started = time.perf_counter()
    tour = nearest_neighbour_tour(matrix.node_ids, start=0, distance=matrix)
    constructed = time.perf_counter()
    result = optimize_tour(tour, distance=matrix, params=params)
    finished = time.perf_counter()

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        save_tour(out_path, result.final_length, tour)
        logger.info(f"Saved tour to {out_path}")

    return {
        "num_cities": len(cities),
        "metric": args.metric,
        "nearest_neighbour_length": result.initial_length,
        "two_opt_length": result.two_opt_length,
        "final_length": result.final_length,
        "improvement_ratio": result.improvement_ratio,
        "two_opt_moves": result.two_opt_stats.moves,
        "two_opt_passes": result.two_opt_stats.passes,
        "or_opt_moves": result.two_half_opt_stats.moves,
        "or_opt_passes": result.two_half_opt_stats.passes,
        "construction_s": constructed - started,
        "local_search_s": finished - constructed,
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Improve a TSP tour with 2-opt and Or-opt local search.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", type=str, help="Instance file with one 'id x y' line per city.")
    source.add_argument("--random", type=int, help="Generate this many uniformly random cities.")
    source.add_argument("--preset", choices=sorted(INSTANCE_PRESETS), help="Use a named random instance.")
    parser.add_argument("--seed", type=int, default=DEFAULT_INSTANCE.seed, help="Seed for --random.")
    parser.add_argument("--metric", choices=sorted(METRICS), default="rounded")
    parser.add_argument("--tolerance", type=float, default=DEFAULT_LOCAL_SEARCH_PARAMS.improvement_tolerance,
                        help="Minimum gain for a move to be accepted.")
    parser.add_argument("--max-passes", type=int, default=DEFAULT_LOCAL_SEARCH_PARAMS.max_passes,
                        help="Cap on sweeps per optimiser.")
    parser.add_argument("--output", type=str, default=None, help="Optional tour output path.")
    parser.add_argument("--log-level", type=str, default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    summary = _run(args)
    print(json.dumps(summary, ensure_ascii=True, indent=2))
    print(f"length: {format_tour_length(summary['final_length'])}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
