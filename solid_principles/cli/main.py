"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with application services
"""
import argparse
import sys
import traceback
from typing import Any, List, Optional

from solid_principles._package import CLI_NAME, DESCRIPTION
from solid_principles._version import __version__
from solid_principles.cli.formatters import format_output
from solid_principles.config.schemas import OUTPUT_FORMATS
from solid_principles.domain.exceptions import DomainException
from solid_principles.domain.principle import PrincipleId, Variant
from solid_principles.infrastructure.logging.logger import get_logger

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
PRINCIPLE_CHOICES = [p.value for p in PrincipleId]


def _principle_id(value: str) -> str:
    try:
        return PrincipleId.parse(value).value
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid principle '{value}' (choose from {', '.join(PRINCIPLE_CHOICES)})"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the resource-action structure."""
    parser = argparse.ArgumentParser(
        prog=CLI_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s principles list --format table     # List the five principles
  %(prog)s principles show ocp --variant bad  # Print the OCP Bad snippet
  %(prog)s snippets validate                  # Check every snippet
  %(prog)s readme check                       # Compare README with snippets
  %(prog)s readme render --output README.md   # Regenerate the README
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Set logging level')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, help='Output format')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Print tracebacks on unexpected errors')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Principles resource
    principles_parser = subparsers.add_parser('principles', help='Browse the principles')
    principles_subparsers = principles_parser.add_subparsers(dest='action', help='Principle actions')

    principles_subparsers.add_parser('list', help='List all principles')

    principles_show = principles_subparsers.add_parser('show', help='Show a principle and its snippets')
    principles_show.add_argument('principle_id', type=_principle_id, help='Principle acronym, e.g. OCP')
    principles_show.add_argument('--variant', choices=[v.value for v in Variant],
                                 help='Print only the Bad or Good snippet source')

    # Snippets resource
    snippets_parser = subparsers.add_parser('snippets', help='Check the snippet files')
    snippets_subparsers = snippets_parser.add_subparsers(dest='action', help='Snippet actions')

    snippets_validate = snippets_subparsers.add_parser('validate', help='Validate snippets against their prose')
    snippets_validate.add_argument('principle_id', nargs='?', type=_principle_id,
                                   help='Only validate this principle')

    # README resource
    readme_parser = subparsers.add_parser('readme', help='Render or check the README')
    readme_subparsers = readme_parser.add_subparsers(dest='action', help='README actions')

    readme_render = readme_subparsers.add_parser('render', help='Render the README')
    readme_render.add_argument('--output', help='Write to this file instead of stdout')

    readme_check = readme_subparsers.add_parser('check', help='Compare README code blocks with snippets')
    readme_check.add_argument('--readme', help='README path (default: from configuration)')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def execute_command(args: argparse.Namespace, app) -> Any:
    """Execute the appropriate command handler."""
    # Imported here so that --help and --version stay cheap
    from solid_principles.interface.command_handlers import COMMAND_HANDLERS

    handler_key = (args.resource, args.action)
    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    handler = COMMAND_HANDLERS[handler_key](app)
    return handler.handle(args)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.")
            sys.exit(1)

        if not args.action:
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
            sys.exit(1)

        try:
            from solid_principles.bootstrap import create_application
            app = create_application(args.config, log_level=args.log_level)
        except DomainException as e:
            logger.error("Failed to initialize application", error=str(e))
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)

        try:
            result = execute_command(args, app)
        except DomainException as e:
            logger.error("Domain error", error=str(e))
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error("Unexpected error", error=str(e))
            if args.verbose:
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            sys.exit(1)

        output_format = args.format or app.config.output_format
        failed = isinstance(result, dict) and result.get("status") == "failed"
        # String results are the payload itself and print even with --quiet
        if failed or isinstance(result, str) or not args.quiet:
            print(format_output(result, output_format).rstrip("\n"))
        if failed:
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
