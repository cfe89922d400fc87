from __future__ import annotations

import argparse
import asyncio
import logging

from .comparison import DEFAULT_PRESETS, ComparisonConfig, compare_policies
from .presets import list_presets
from .providers import NetworkXGraphProvider
from .reporting import comparison_markdown_report, comparison_rows_csv
from .scenarios import bridged_stars, labelled_barabasi_albert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare expansion policies on a synthetic graph")
    parser.add_argument("--scenario", choices=("ba", "bridged"), default="ba")
    parser.add_argument("--nodes", type=int, default=200)
    parser.add_argument("--m", type=int, default=2)
    parser.add_argument("--num-seeds", type=int, default=3)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--presets", default=",".join(DEFAULT_PRESETS), help=f"comma list of {', '.join(list_presets())}")
    parser.add_argument("--max-nodes", type=int, default=None)
    parser.add_argument("--hub-threshold", type=int, default=10)
    parser.add_argument("--format", choices=("csv", "markdown"), default="csv")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.scenario == "bridged":
        scenario = bridged_stars()
    else:
        scenario = labelled_barabasi_albert(n=args.nodes, m=args.m, num_seeds=args.num_seeds, seed=args.seed)
    config = ComparisonConfig(
        presets=tuple(p.strip() for p in args.presets.split(",") if p.strip()),
        max_nodes=args.max_nodes,
        hub_threshold=args.hub_threshold,
    )
    report = asyncio.run(compare_policies(lambda: NetworkXGraphProvider(scenario.graph), scenario.seeds, config))

    if args.format == "markdown":
        print(comparison_markdown_report(report, title=f"Expansion Comparison ({scenario.scenario_id})"), end="")
    else:
        print(comparison_rows_csv(report.rows), end="")


if __name__ == "__main__":
    main()
