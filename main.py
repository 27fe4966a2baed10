from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import yaml

from graph import UnknownNodeError, graph_from_config
from influence import DIRECTIONS, INCOMING, InfluenceResult, influence_report, rank_influence


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(log_level: str | int = "INFO") -> None:
    """Configure root logging once for the command line run."""
    if isinstance(log_level, str):
        level = getattr(logging, log_level.upper(), logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
    else:
        level = log_level

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def select_graph_section(config: Dict, name: Optional[str]) -> Tuple[str, Dict]:
    if config is not None and not isinstance(config, dict):
        raise ValueError("Configuration must be a mapping with a 'graphs' section.")
    graphs = (config or {}).get("graphs") or {}
    if not isinstance(graphs, dict):
        raise ValueError("The 'graphs' section must map graph names to graphs.")
    if not graphs:
        raise ValueError("Configuration does not define any graphs.")
    if name is None:
        name = next(iter(graphs))
    if name not in graphs:
        raise ValueError(
            f"Graph {name!r} not found, available: {', '.join(graphs)}."
        )
    return name, graphs[name]


def print_result(result: InfluenceResult, graph_size: int) -> None:
    print(f"Influence score of {result.node}: {result.score:.4f}")
    print(
        f"  Connected to {result.reachable} of {graph_size - 1} other nodes, "
        f"total distance {result.total_distance}"
    )


def print_ranking(results: List[InfluenceResult]) -> None:
    if not results:
        print("Graph has no nodes.")
        return

    width = max(len(result.node) for result in results)
    for rank, result in enumerate(results, start=1):
        print(
            f"{rank:>3}. {result.node:<{width}}  {result.score:.4f}  "
            f"(reachable {result.reachable}, total distance {result.total_distance})"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute closeness influence scores for nodes of a graph."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("social_network.yaml"),
        help="Path to the YAML file describing the graphs.",
    )
    parser.add_argument(
        "--graph",
        default=None,
        help="Name of the graph under 'graphs' (defaults to the first one).",
    )
    parser.add_argument("--node", default=None, help="Node to score.")
    parser.add_argument(
        "--all",
        action="store_true",
        help="Rank every node of the graph by influence.",
    )
    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help="Only show the N most influential nodes when ranking.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used to score nodes when ranking.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level.",
    )
    parser.add_argument(
        "--direction",
        default=INCOMING,
        choices=DIRECTIONS,
        help="Measure distances to the scored node (incoming) or from it (outgoing).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = load_config(args.config)
        name, section = select_graph_section(config, args.graph)
        kind, graph = graph_from_config(section)
        logger.info("Loaded %s graph %r with %d nodes", kind, name, len(graph))

        if args.node is not None and not args.all:
            print_result(influence_report(kind, graph, args.node, args.direction), len(graph))
            return 0

        print(f"=== Influence ranking for {name} ({kind}) ===")
        print_ranking(
            rank_influence(
                kind,
                graph,
                top_n=args.top_n,
                workers=args.workers,
                direction=args.direction,
            )
        )
        return 0
    except (UnknownNodeError, ValueError) as exc:
        logger.error("%s", exc)
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
