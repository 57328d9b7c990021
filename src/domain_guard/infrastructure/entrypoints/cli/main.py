"""Command-line entry point: evaluate guard rules against a diff file."""

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from domain_guard.core.application.workflows import GuardEvaluationResult, GuardEvaluationWorkflow
from domain_guard.core.exceptions import DomainGuardError
from domain_guard.infrastructure.configuration import GuardSettings
from domain_guard.infrastructure.observability import configure_logging, get_logger
from domain_guard.infrastructure.repositories import MatchStoreFileAdapter
from domain_guard.infrastructure.rules import YamlRuleRepository


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domain-guard",
        description="Match Domain Guard rules against a unified diff.",
    )
    parser.add_argument("--diff", required=True, help="Path to a unified diff, or '-' for stdin")
    parser.add_argument("--rules-root", type=Path, help="Directory searched for rule files")
    parser.add_argument("--matches-file", type=Path, help="JSON file with previous matches")
    parser.add_argument(
        "--no-persist", action="store_true", help="Do not read or write the matches file"
    )
    parser.add_argument("--format", choices=("json", "text"), default="json")
    return parser


def read_diff(source: str) -> str:
    """Decode the diff as UTF-8; undecodable bytes become U+FFFD."""
    if source == "-":
        return sys.stdin.buffer.read().decode("utf-8", errors="replace")
    return Path(source).read_text(encoding="utf-8", errors="replace")


def render_text(result: GuardEvaluationResult) -> str:
    new_identities = {match.identity for match in result.new_matches}
    lines = [f"Files changed: {len(result.diff.file_diffs)}"]
    for match in result.matches:
        marker = "new" if match.identity in new_identities else "seen"
        lines.append(f"[{marker}] {match.identity}: {', '.join(match.all_files())}")
    if result.plan is not None and not result.plan.is_empty():
        lines.append("")
        lines.append(result.plan.summary)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = GuardSettings()
    configure_logging(settings.log_level)
    logger = get_logger("cli")

    rules_root = args.rules_root or settings.rules_root
    matches_file = args.matches_file or settings.matches_file
    workflow = GuardEvaluationWorkflow(
        rule_source=YamlRuleRepository(rules_root, settings.rule_file_suffix),
        match_store=None if args.no_persist else MatchStoreFileAdapter(matches_file),
        max_assignees=settings.max_assignees,
        summary_title=settings.summary_title,
    )
    try:
        raw_diff = read_diff(args.diff)
        result = workflow.execute(raw_diff)
    except (OSError, DomainGuardError) as exc:
        logger.error("Guard evaluation failed", error=str(exc))
        return 1

    if args.format == "text":
        print(render_text(result))
    else:
        print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
