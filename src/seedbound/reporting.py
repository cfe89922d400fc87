from __future__ import annotations

from .comparison import ComparisonReport, ComparisonRow


def _fmt(value: float | None, digits: int = 6) -> str:
    if value is None:
        return ""
    return f"{value:.{digits}f}"


def comparison_rows_csv(rows: list[ComparisonRow]) -> str:
    header = (
        "method,path_count,sampled_nodes,sampled_edges,nodes_expanded,rejected_paths,"
        "path_diversity,mean_path_salience,first_hub_fraction,mean_hub_fraction,"
        "termination_reason,final_phase"
    )
    lines = [header]
    for r in rows:
        lines.append(
            f"{r.method},{r.path_count},{r.sampled_nodes},{r.sampled_edges},{r.nodes_expanded},"
            f"{r.rejected_paths},{_fmt(r.path_diversity)},{_fmt(r.mean_path_salience)},"
            f"{_fmt(r.first_hub_fraction)},{_fmt(r.mean_hub_fraction)},"
            f"{r.termination_reason},{r.final_phase or ''}"
        )
    return "\n".join(lines) + "\n"


def comparison_markdown_report(report: ComparisonReport, title: str = "Expansion Comparison") -> str:
    lines: list[str] = []
    lines.append(f"# {title}")
    lines.append("")
    lines.append("## Summary")
    lines.append(
        f"- Methods: `{len(report.rows)}` | Visited sets agree: `{'yes' if report.visited_sets_agree else 'no'}`"
    )
    best = max(report.rows, key=lambda r: (r.path_count, r.path_diversity), default=None)
    if best is not None:
        lines.append(f"- Most paths: `{best.method}` ({best.path_count})")
    lines.append("")
    lines.append("## Methods")
    lines.append("| Method | Paths | Sampled | Expanded | Rejected | Diversity | Salience | First Hub | Stop |")
    lines.append("|---|---:|---:|---:|---:|---:|---:|---:|---|")
    for r in report.rows:
        lines.append(
            f"| `{r.method}` | {r.path_count} | {r.sampled_nodes} | {r.nodes_expanded} | {r.rejected_paths} | "
            f"{r.path_diversity:.4f} | {_fmt(r.mean_path_salience, 4) or '-'} | "
            f"{_fmt(r.first_hub_fraction, 4) or '-'} | {r.termination_reason} |"
        )
    lines.append("")
    lines.append("## Notes")
    lines.append("- Higher `First Hub` means hubs were deferred longer.")
    lines.append("- Runs stopped by policy or budget sample a subset of the reachable graph.")
    return "\n".join(lines) + "\n"
