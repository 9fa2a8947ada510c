from typing import Any, Dict


def render_md(report: Dict[str, Any]) -> str:
    """Render a scan report as Markdown."""
    verdict = report.get("verdict") or {}
    refs = report.get("references") or {}
    lines = [
        f"# Scan: {report.get('file_name') or 'candidate'}",
        "",
        f"**Status:** {report.get('status', '')}  ",
        f"**Clearance:** {report.get('clearance', '')}",
        "",
        "| Similarity | Matched project | Threshold | References scored |",
        "|---|---|---|---|",
        "| {pct:.1f}% | {title} | {thr:.2f} | {scored}/{total} |".format(
            pct=float(report.get("similarity_pct", 0.0)),
            title=verdict.get("matched_title") or "-",
            thr=float(verdict.get("threshold", 0.0)),
            scored=refs.get("scored", 0),
            total=refs.get("total", 0),
        ),
    ]

    keywords = report.get("keywords") or []
    if keywords:
        lines += ["", "## Digital DNA", "", ", ".join(f"`{k}`" for k in keywords)]

    if report.get("recommendation"):
        lines += ["", "## Recommendation", "", report["recommendation"]]

    if report.get("generated_at"):
        lines += ["", f"_Generated {report['generated_at']} in {report.get('elapsed_s', 0):.3f}s_"]

    return "\n".join(lines) + "\n"
