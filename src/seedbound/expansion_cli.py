from __future__ import annotations

import argparse
import asyncio
import json
import logging

from .engine import ExpansionEngine
from .models import ExpansionResult
from .policies import get_priority, get_termination, list_priorities, list_terminations
from .presets import get_preset, list_presets
from .providers import NetworkXGraphProvider
from .scenarios import bridged_stars, labelled_barabasi_albert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run one multi-seed expansion and print its paths")
    parser.add_argument("--scenario", choices=("ba", "bridged"), default="bridged")
    parser.add_argument("--preset", choices=list_presets(), default="degree")
    parser.add_argument("--priority", choices=list_priorities(), default=None, help="override the preset with a named priority policy")
    parser.add_argument("--termination", choices=list_terminations(), default=None, help="override the preset with a named termination policy")
    parser.add_argument("--seeds", default="", help="comma separated seed vertices; defaults to the scenario's")
    parser.add_argument("--nodes", type=int, default=200)
    parser.add_argument("--m", type=int, default=2)
    parser.add_argument("--num-seeds", type=int, default=3)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--max-nodes", type=int, default=None)
    parser.add_argument("--hub-threshold", type=int, default=None)
    parser.add_argument("--format", choices=("json", "table"), default="table")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def render_table(result: ExpansionResult) -> str:
    lines = ["from_seed,to_seed,length,salience,nodes"]
    for p in result.paths:
        salience = "" if p.salience is None else f"{p.salience:.4f}"
        lines.append(f"{p.from_seed},{p.to_seed},{len(p.nodes)},{salience},{' '.join(p.nodes)}")
    lines.append(
        f"# expanded={result.stats.nodes_expanded} sampled={len(result.sampled_nodes)} "
        f"edges={len(result.sampled_edges)} reason={result.termination_reason}"
    )
    return "\n".join(lines) + "\n"


def build_engine(args: argparse.Namespace, provider: NetworkXGraphProvider, seeds: list[str]) -> ExpansionEngine:
    """Preset engine, or an engine composed from named policies when either is given."""
    if args.priority is None and args.termination is None:
        return get_preset(args.preset)(
            provider,
            seeds,
            max_nodes=args.max_nodes,
            hub_threshold=args.hub_threshold,
        )
    return ExpansionEngine(
        provider,
        seeds,
        priority=get_priority(args.priority) if args.priority else None,
        termination=get_termination(args.termination) if args.termination else None,
        max_nodes=args.max_nodes,
        hub_threshold=args.hub_threshold,
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.scenario == "bridged":
        scenario = bridged_stars()
    else:
        scenario = labelled_barabasi_albert(n=args.nodes, m=args.m, num_seeds=args.num_seeds, seed=args.seed)
    seeds = [s.strip() for s in args.seeds.split(",") if s.strip()] or scenario.seeds

    engine = build_engine(args, NetworkXGraphProvider(scenario.graph), seeds)
    result = asyncio.run(engine.run())

    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=2, sort_keys=True))
    else:
        print(render_table(result), end="")


if __name__ == "__main__":
    main()
