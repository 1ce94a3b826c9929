#!/usr/bin/env python3
"""Console demo: seed sample data, grade it, and print the results."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

import yaml

from autograde.libs.config_loader import ConfigType, get_config, load_all_configs, load_configs
from .data_manager import GradingDataManager, GradingOutcome
from .errors import InvalidConfigurationError
from .grader import HeuristicGrader
from .sample_data import load_sample_data

LOG = logging.getLogger(__name__)


def setup_logging(configs: ConfigType, verbose: bool = False) -> None:
    level = get_config("logging.level", configs, default="INFO")
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, str(level).upper(), logging.INFO),
        format=get_config(
            "logging.format", configs,
            default='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ),
        force=True
    )


def print_store(manager: GradingDataManager, graded: bool) -> None:
    for submission in manager.submissions:
        student = manager.find_student(submission.student_id)
        assignment = manager.find_assignment(submission.assignment_id)
        student_name = student.name if student else "Unknown student"
        title = assignment.title if assignment else "Unknown assignment"
        print(f"- {student_name} - {title}")
        if not graded:
            print(f"  Content: {submission.content}")
            print(f"  Score: {submission.score if submission.is_graded else 'Not graded'}")
            continue
        if submission.is_graded and assignment is not None:
            print(f"  Score: {submission.score:.0f}/{assignment.max_score:.0f}")
            print("  Feedback:")
            for line in submission.feedback.splitlines():
                print(f"    {line}")
        else:
            print("  Score: Not graded")
        print()


def write_summary(path: Path, outcomes: List[GradingOutcome]) -> None:
    summary = {
        'total_submissions': len(outcomes),
        'successful': sum(1 for o in outcomes if o.success),
        'failed': sum(1 for o in outcomes if not o.success),
        'results': [outcome.to_dict() for outcome in outcomes],
    }

    with open(path, 'w') as f:
        yaml.dump(summary, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


def main(argv: List[str] = None) -> int:
    """Main entry point for the autograde-demo command."""
    parser = argparse.ArgumentParser(
        description='Grade the sample submissions with the heuristic grader',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Grade the sample data with the bundled config
  autograde-demo

  # Use a custom heuristic config layered over the defaults
  autograde-demo --config autograde/config/default.yaml --config my_weights.yaml

  # Save a YAML summary of the grading run
  autograde-demo --summary grading_summary.yaml
        """
    )
    parser.add_argument(
        '--config', '-c',
        action='append',
        default=None,
        help='YAML config file (repeatable, later files override earlier ones; '
             'default: every YAML file in the bundled autograde/config/ directory)'
    )
    parser.add_argument(
        '--summary', '-o',
        type=Path,
        default=None,
        help='Path to save a YAML summary of the grading run'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args(argv)

    try:
        configs = load_configs(*args.config) if args.config else load_all_configs()
    except (TypeError, ValueError, yaml.YAMLError) as e:
        logging.basicConfig(level=logging.INFO)
        LOG.error(f"Failed to load configuration: {e}")
        return 1

    setup_logging(configs, args.verbose)

    try:
        grader = HeuristicGrader.from_config(configs)
    except (InvalidConfigurationError, TypeError) as e:
        LOG.error(f"Invalid grading configuration: {e}")
        return 1

    manager = load_sample_data(GradingDataManager(grader))

    print("=== Automated Grading App ===")
    print("\nStudents:")
    for student in manager.students:
        print(f"- {student.name} ({student.email})")

    print("\nAssignments:")
    for assignment in manager.assignments:
        print(f"- {assignment.title}: {assignment.description}")
        print(f"  Max Score: {assignment.max_score}")

    print("\nSubmissions before grading:")
    print_store(manager, graded=False)

    print("\nGrading all submissions...")
    outcomes = manager.grade_all()

    print("\nSubmissions after grading:")
    print_store(manager, graded=True)

    if args.summary:
        try:
            write_summary(args.summary, outcomes)
            LOG.info(f"Summary saved to: {args.summary}")
        except OSError as e:
            LOG.error(f"Failed to save summary: {e}")
            return 1

    return 0 if all(o.success for o in outcomes) else 1


if __name__ == '__main__':
    sys.exit(main())
