"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Wiring of configuration, logging and the DI container
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from clean_patterns import __version__
from clean_patterns.application.demo_service import DemoApplicationService
from clean_patterns.cli.formatters import OUTPUT_FORMATS, format_output
from clean_patterns.config.manager import ConfigurationManager
from clean_patterns.domain.base.exceptions import DomainException
from clean_patterns.domain.patterns.factory import VehicleFactory
from clean_patterns.infrastructure.di.container import get_container
from clean_patterns.infrastructure.di.exceptions import DependencyResolutionError
from clean_patterns.infrastructure.logging.logger import get_logger, setup_logging

DEMO_CHOICES = ["singleton", "factory", "observer", "strategy", "decorator", "cleancode", "all"]

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "clean-patterns",
        description="Clean code rules and design pattern examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo all                       # Run every example
  %(prog)s demo observer --format json    # Run one example as JSON
  %(prog)s factory create suv             # Build one vehicle
  %(prog)s patterns list                  # List available examples
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured logging level",
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default="text", help="Output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="resource", help="Available resources")

    demo_parser = subparsers.add_parser("demo", help="Run examples")
    demo_parser.add_argument("name", choices=DEMO_CHOICES, help="Example to run")

    factory_parser = subparsers.add_parser("factory", help="Vehicle factory")
    factory_subparsers = factory_parser.add_subparsers(dest="action", help="Factory actions")
    factory_create = factory_subparsers.add_parser("create", help="Create a vehicle")
    factory_create.add_argument("kind", help="Vehicle kind, e.g. sedan or suv")

    patterns_parser = subparsers.add_parser("patterns", help="Available examples")
    patterns_subparsers = patterns_parser.add_subparsers(dest="action", help="Pattern actions")
    patterns_subparsers.add_parser("list", help="List examples")

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, service: DemoApplicationService) -> Dict[str, Any]:
    """
    Route parsed arguments to the matching operation.

    Raises:
        DomainException: On invalid input or unknown kinds
    """
    if args.resource == "demo":
        if args.name == "all":
            results = service.run_all()
        else:
            results = [service.run(args.name)]
        return {"results": [result.to_dict() for result in results]}

    if args.resource == "factory" and args.action == "create":
        return VehicleFactory.create(args.kind).model_dump()

    if args.resource == "patterns" and args.action == "list":
        return {"lines": service.available_demos()}

    raise ValueError(f"Unsupported command: {args.resource} {getattr(args, 'action', '') or ''}".strip())


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    if not args.resource:
        parse_args(["--help"])

    try:
        config_manager = ConfigurationManager(args.config)
        app_config = config_manager.app_config
        logging_config = app_config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": args.log_level})
        setup_logging(logging_config).debug("CLI started", resource=args.resource)

        service = DemoApplicationService(app_config, get_container())
        result = execute_command(args, service)
    except (DomainException, DependencyResolutionError) as e:
        logger.error(f"Command failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(format_output(result, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
