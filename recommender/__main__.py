"""Main entry point for Job-Recs."""

import argparse
import json
import sys
from pathlib import Path

from recommender import __version__
from recommender.config.settings import Settings
from recommender.utils.logging import configure_logging


def _limit(value: str) -> int:
    limit = int(value)
    if limit < 0:
        raise argparse.ArgumentTypeError("--limit must be >= 0")
    return limit


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def format_result(result) -> str:
    """Format a RecommendationResult for CLI output."""
    lines: list[str] = []
    lines.append(
        f"Profile completeness: {result.profile_completeness:.0f}% | "
        f"jobs analyzed: {result.total_jobs_analyzed} | mode: {result.scoring_mode}"
    )
    if not result.recommendations:
        lines.append("No recommendations.")
    for rank, rec in enumerate(result.recommendations, start=1):
        job = rec.job
        where = f" ({job.location})" if job.location else ""
        company = job.company or "Unknown company"
        lines.append(f"{rank}. [{rec.score:.2f}] {job.title} - {company}{where}")
        for reason in rec.reasons:
            lines.append(f"     - {reason}")
    if result.insights:
        lines.append("Insights:")
        for insight in result.insights:
            lines.append(f"  * {insight}")
    return "\n".join(lines)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="job-recs",
        description="Job-Recs: explainable job recommendations for job board users",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m recommender rank --profile profile.yaml --data jobboard.yaml --limit 5
  python -m recommender completeness --profile profile.yaml
  python -m recommender analyze --profile profile.yaml --llm
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="commands",
        description="Available commands",
    )

    rank_parser = subparsers.add_parser(
        "rank",
        help="Rank job postings for a user profile",
    )
    rank_parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="Path to the user profile (YAML/JSON); defaults to PROFILE_PATH",
    )
    rank_parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Path to the job board data file (YAML/JSON); defaults to DATA_PATH",
    )
    rank_parser.add_argument(
        "--limit",
        type=_limit,
        default=None,
        help="Number of recommendations to return; defaults to DEFAULT_LIMIT",
    )
    rank_parser.add_argument(
        "--neutral",
        action="store_true",
        help="Use the neutral degraded mode (fixed score, newest jobs first)",
    )
    rank_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the result as JSON to this file",
    )

    completeness_parser = subparsers.add_parser(
        "completeness",
        help="Show how complete a profile is for recommendations",
    )
    completeness_parser.add_argument("--profile", type=Path, default=None)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Score profile strength and suggest an improvement",
    )
    analyze_parser.add_argument("--profile", type=Path, default=None)
    analyze_parser.add_argument(
        "--llm",
        action="store_true",
        help="Phrase the suggestion with the configured LLM (falls back to rules)",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    logger = configure_logging(level=parsed.log_level or settings.log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"Job-Recs v{__version__} running {parsed.mode}")

    from recommender.scoring.profile import ProfileService

    try:
        profile = ProfileService(settings=settings).load_profile(parsed.profile)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading profile: {e}", file=sys.stderr)
        return 1

    if parsed.mode == "completeness":
        from recommender.scoring.profile import completeness, missing_fields

        print(f"Profile completeness: {completeness(profile):.0f}%")
        missing = missing_fields(profile)
        if missing:
            print(f"Missing: {', '.join(missing)}")
        return 0

    if parsed.mode == "analyze":
        from recommender.scoring.advisor import ProfileAdvisor
        from recommender.scoring.config import RecommendationConfig

        config = RecommendationConfig()
        if parsed.llm:
            config = config.model_copy(update={"suggestion_mode": "llm"})

        analysis = ProfileAdvisor(config=config).analyze_profile(profile)
        print(f"Profile strength: {analysis.score}/100 ({analysis.suggestion_source})")
        print(analysis.suggestion)
        return 0

    if parsed.mode == "rank":
        from recommender.scoring.service import (
            DependencyUnavailableError,
            RecommendationService,
        )
        from recommender.store.file import FileDataStore

        store = FileDataStore(parsed.data or settings.data_path)
        service = RecommendationService(job_store=store, application_store=store)
        limit = parsed.limit if parsed.limit is not None else settings.default_limit

        try:
            result = service.rank(
                profile, limit, mode="neutral" if parsed.neutral else None
            )
        except DependencyUnavailableError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        print(format_result(result))
        if parsed.out is not None:
            _write_json(parsed.out, result.to_dict())
            print(f"Wrote: {parsed.out}")
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
