
#!/usr/bin/env python3
import argparse
import json

from sentinel.orchestrator import run_once
from sentinel.stages.keywords import top_keywords
from sentinel.stages.similarity import cosine_similarity
from sentinel.utils import load_file


def _cmd_scan(args) -> int:
    overrides = {
        "threshold": args.threshold,
        "recommend_threshold": args.recommend_threshold,
        "batch": args.batch,
        "keywords_limit": args.keywords,
        "output_dir": args.output_dir,
    }
    report = run_once(args.config, args.candidate, overrides=overrides)
    print(json.dumps(report, ensure_ascii=False, indent=2))
    return 1 if report["verdict"]["is_duplicate"] and args.fail_on_duplicate else 0


def _cmd_compare(args) -> int:
    score = cosine_similarity(load_file(args.a), load_file(args.b))
    print(f"{score:.6f}")
    return 0


def _cmd_keywords(args) -> int:
    for kw in top_keywords(load_file(args.file), args.limit):
        print(kw)
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="SentinelFlow duplicate-scan CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Scan a plain-text candidate against the configured references")
    scan.add_argument("--config", required=True, help="Path to YAML config")
    scan.add_argument("--candidate", required=True, help="Path to the candidate's extracted plain text")
    scan.add_argument("--threshold", type=float, help="Duplicate threshold (0-1, strict >)")
    scan.add_argument("--recommend-threshold", dest="recommend_threshold", type=float, help="Recommendation bound (0-1, strict >)")
    scan.add_argument("--batch", dest="batch", action="store_true", help="Score references in one sparse-matrix pass")
    scan.add_argument("--no-batch", dest="batch", action="store_false", help="Score references one by one")
    scan.add_argument("--keywords", type=int, help="Number of keywords to report")
    scan.add_argument("--output-dir", dest="output_dir", help="Write md/json report here")
    scan.add_argument("--fail-on-duplicate", dest="fail_on_duplicate", action="store_true", help="Exit 1 when flagged as duplicate")
    scan.set_defaults(batch=None, func=_cmd_scan)

    compare = sub.add_parser("compare", help="Cosine similarity of two plain-text files")
    compare.add_argument("a")
    compare.add_argument("b")
    compare.set_defaults(func=_cmd_compare)

    kw = sub.add_parser("keywords", help="Top keywords of a plain-text file")
    kw.add_argument("file")
    kw.add_argument("--limit", type=int, default=5)
    kw.set_defaults(func=_cmd_keywords)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
