#!/usr/bin/env python3
"""
SteadyDay Command Line Interface

Main entry point for the `steadyday` command.

Usage:
    steadyday serve                                      # Start the API server
    steadyday duration --mood good --energy high --focus medium
    steadyday quiz-questions                             # Print the Enneagram questions
    steadyday classify --answers 4,2,5,1,3,3,4,2,1,5,2,4,1,3,3,5,2,1
    steadyday --version                                  # Show version
"""

import argparse
import json
import sys

from steadyday.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def cmd_serve(args):
    """Handle serve subcommand."""
    import uvicorn

    print(f"Starting SteadyDay API at http://{args.host}:{args.port}")
    print("Press Ctrl+C to stop")

    uvicorn.run(
        "steadyday.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


def cmd_duration(args):
    """Print the recommended focus session length for a mood."""
    from steadyday.focus.adaptive import MoodVector, break_duration, recommend_duration
    from steadyday.focus.pomodoro import load_config

    config = load_config()
    try:
        vector = MoodVector.from_values(args.mood, args.energy, args.focus)
        duration = recommend_duration(
            vector,
            base=args.base if args.base is not None else config["base_duration"],
            min_minutes=config["min_duration"],
            max_minutes=config["max_duration"],
        )
    except ValueError as e:
        logger.error("invalid duration input", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(json.dumps({"duration": duration, "break_duration": break_duration(duration)}))
    return 0


def cmd_quiz_questions(args):
    """Print the question bank."""
    from steadyday.personality.results import list_questions

    for question in list_questions():
        print(f"{question['id']:>2}. {question['question']}")
    return 0


def cmd_classify(args):
    """Classify comma separated answers without storing anything."""
    from steadyday.personality.classifier import QUESTION_BANK, classify
    from steadyday.personality.profiles import get_profile

    try:
        answers = [int(part) for part in args.answers.split(",") if part.strip()]
        result = classify(QUESTION_BANK, answers)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    output = result.to_dict()
    if result.dominant is not None:
        output["name"] = get_profile(result.dominant).name
    print(json.dumps(output, indent=2))
    return 0


def cmd_version(args):
    """Show version information."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        v = version("steadyday")
    except PackageNotFoundError:
        from steadyday import __version__

        v = f"{__version__} (development)"

    print(f"SteadyDay version {v}")


def main(argv=None):
    """Main CLI entry point."""
    setup_logging()

    parser = argparse.ArgumentParser(
        prog="steadyday",
        description="SteadyDay - routines, focus and habits for ADHD brains",
    )
    parser.add_argument(
        "--version", "-V", action="store_true", help="Show version and exit"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument(
        "--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)"
    )
    serve_parser.add_argument(
        "--port", type=int, default=8000, help="Port to bind to (default: 8000)"
    )
    serve_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )
    serve_parser.set_defaults(func=cmd_serve)

    # Duration subcommand
    duration_parser = subparsers.add_parser(
        "duration", help="Recommended focus session length for a mood"
    )
    duration_parser.add_argument("--mood", required=True, help="very_low, low, neutral, good, excellent")
    duration_parser.add_argument("--energy", required=True, help="very_low, low, medium, high, very_high")
    duration_parser.add_argument("--focus", required=True, help="very_low, low, medium, high, very_high")
    duration_parser.add_argument("--base", type=float, help="Base duration in minutes")
    duration_parser.set_defaults(func=cmd_duration)

    # Quiz subcommands
    questions_parser = subparsers.add_parser(
        "quiz-questions", help="Print the Enneagram quiz questions"
    )
    questions_parser.set_defaults(func=cmd_quiz_questions)

    classify_parser = subparsers.add_parser(
        "classify", help="Classify quiz answers (comma separated, 1-5)"
    )
    classify_parser.add_argument("--answers", required=True, help="Answers in question order")
    classify_parser.set_defaults(func=cmd_classify)

    # Version subcommand
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    # Handle --version at top level
    if args.version:
        cmd_version(args)
        return

    # If no command given, show help
    if not args.command:
        parser.print_help()
        return

    # Execute command
    result = args.func(args)

    # Commands may return an exit code
    if isinstance(result, int) and result != 0:
        sys.exit(result)


if __name__ == "__main__":
    main()
