"""Command-line interface for runningdinner."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from runningdinner.calculator import assign_courses, build_schedule, form_teams
from runningdinner.config import DinnerConfig
from runningdinner.errors import NoPossibleRunningDinnerError, ScheduleInvariantError
from runningdinner.models import CourseClass, GenderAspect
from runningdinner.output import format_results, format_routes_csv
from runningdinner.parser import create_config_template, parse_config_yaml, parse_participants_csv
from runningdinner.validator import validate_schedule


def _apply_overrides(config: DinnerConfig, args: argparse.Namespace) -> DinnerConfig:
    """Let command-line options take precedence over the configuration file."""
    overrides = {}
    if args.team_size is not None:
        overrides["team_size"] = args.team_size
    if args.courses:
        overrides["course_classes"] = tuple(CourseClass(label) for label in args.courses)
    if args.gender_aspect is not None:
        overrides["gender_aspect"] = GenderAspect(args.gender_aspect)
    if args.no_capacity_balance:
        overrides["force_equal_distributed_capacity"] = False
    if args.seed is not None:
        overrides["seed"] = args.seed
    return dataclasses.replace(config, **overrides)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for runningdinner CLI."""
    parser = argparse.ArgumentParser(
        description="Form teams and visiting routes for a running dinner.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  runningdinner participants.csv
  runningdinner participants.csv --config dinner.yaml --csv routes.csv
  runningdinner participants.csv --courses Starter Main Dessert --gender-aspect force_mixed --seed 42
""",
    )
    parser.add_argument(
        "participants_csv",
        type=Path,
        help="Path to the CSV file with the participants",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to the dinner configuration YAML file",
    )
    parser.add_argument(
        "--team-size",
        type=int,
        default=None,
        help="Participants per team (default: 2)",
    )
    parser.add_argument(
        "--courses",
        nargs="+",
        help="Course labels in serving order (default: Appetizer 'Main course' Dessert)",
    )
    parser.add_argument(
        "--gender-aspect",
        choices=[a.value for a in GenderAspect],
        default=None,
        help="How gender is considered when forming teams (default: ignore)",
    )
    parser.add_argument(
        "--no-capacity-balance",
        action="store_true",
        help="Do not spread participants with enough seats for hosting over the teams",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible results",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        help="Write the routes as CSV to this path",
    )
    parser.add_argument(
        "--output-template",
        type=Path,
        help="Write a dinner configuration template to this path",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.output_template:
        create_config_template(args.output_template)
        print(f"Created configuration template at: {args.output_template}")

    # Validate participants CSV exists
    if not args.participants_csv.exists():
        print(f"Error: Participants file not found: {args.participants_csv}", file=sys.stderr)
        return 1

    try:
        participants = parse_participants_csv(args.participants_csv)
    except Exception as e:
        print(f"Error parsing participants CSV: {e}", file=sys.stderr)
        return 1

    config = DinnerConfig()
    if args.config:
        if not args.config.exists():
            print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
            return 1
        try:
            config = parse_config_yaml(args.config)
        except Exception as e:
            print(f"Error parsing configuration YAML: {e}", file=sys.stderr)
            return 1

    try:
        config = _apply_overrides(config, args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Loaded {len(participants)} participants")
    print(
        f"Team size {config.team_size}, courses: "
        f"{', '.join(str(c) for c in config.course_classes)}"
    )

    rng = config.create_rng()
    try:
        result = form_teams(participants, config, rng=rng)
        assign_courses(result.regular_teams, config.course_classes, rng=rng)
        build_schedule(result.regular_teams, result.combination_info, config)
    except NoPossibleRunningDinnerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ScheduleInvariantError as e:
        print(f"Error: Could not build the dinner: {e}", file=sys.stderr)
        return 1

    report = validate_schedule(result.regular_teams, config.num_course_classes)

    # Output results
    print()
    print(format_results(result, config.course_classes))
    print()
    print(report)

    if args.csv:
        args.csv.write_text(
            format_routes_csv(result.regular_teams, config.course_classes) + "\n", encoding="utf-8"
        )
        print(f"\nWrote routes to: {args.csv}")

    return 0 if report.all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
