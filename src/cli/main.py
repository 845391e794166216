"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the demo registry and the hot drink machine
"""
import sys
import argparse
from typing import Any, List, Optional

from src._package import DESCRIPTION, PACKAGE_NAME_SHORT, VERSION
from src.config.manager import ConfigurationManager, get_config_manager
from src.config.schemas import DrinkConfig, LoggingConfig
from src.domain.core.exceptions import DomainException
from src.domain.factory import HotDrinkMachine
from src.application.demos.registration import register_demos
from src.infrastructure.logging.logger import get_logger, setup_logging
from src.cli.formatters import format_output

FORMATS = ['json', 'yaml', 'table', 'list']


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME_SHORT,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demos list                        # List all demos
  %(prog)s demos list --format table         # Display as table
  %(prog)s demos run faceted-builder         # Run one demo
  %(prog)s demos run --all                   # Run every demo
  %(prog)s drinks list                       # Show the drink menu
  %(prog)s drinks make --index 1             # Make a tea
  echo 0 | %(prog)s drinks make              # Pick a drink from stdin
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=FORMATS, default='list', help='Output format')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')

    # Resource subparsers
    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Demos resource
    demos_parser = subparsers.add_parser('demos', help='List and run pattern demos')
    demos_subparsers = demos_parser.add_subparsers(dest='action', help='Demo actions')

    # Demos list
    demos_list = demos_subparsers.add_parser('list', help='List all demos')
    demos_list.add_argument('--category', help='Only list demos of this category')
    demos_list.add_argument('--format', choices=FORMATS, dest='action_format', help='Output format')

    # Demos run
    demos_run = demos_subparsers.add_parser('run', help='Run demos')
    demos_run.add_argument('names', nargs='*', help='Demo names to run')
    demos_run.add_argument('--all', action='store_true', help='Run every registered demo')

    # Drinks resource
    drinks_parser = subparsers.add_parser('drinks', help='Use the hot drink machine')
    drinks_subparsers = drinks_parser.add_subparsers(dest='action', help='Drink actions')

    # Drinks list
    drinks_list = drinks_subparsers.add_parser('list', help='Show the drink menu')
    drinks_list.add_argument('--format', choices=FORMATS, dest='action_format', help='Output format')

    # Drinks make
    drinks_make = drinks_subparsers.add_parser('make', help='Make a drink')
    drinks_make.add_argument('--index', type=int,
                             help='Menu position; read from stdin when omitted')
    drinks_make.add_argument('--amount', type=int, help='Amount to pour in ml')

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, config_manager: ConfigurationManager) -> Optional[Any]:
    """
    Execute the requested resource action.

    Returns:
        Data to format and print, or None when the command printed its own output
    """
    if args.resource == 'demos':
        registry = register_demos()
        if args.action == 'list':
            demos = registry.get_registered_demos(getattr(args, 'category', None))
            return {"demos": [d.to_dict() for d in demos]}
        if args.action == 'run':
            if args.all:
                names = [d.name for d in registry.get_registered_demos()]
            else:
                names = args.names
            if not names:
                raise DomainException("No demo specified. Give demo names or --all.")
            # Resolve every name first so a typo fails before anything runs
            registrations = [registry.get_registration(name) for name in names]
            for registration in registrations:
                if not args.quiet and len(registrations) > 1:
                    print(f"== {registration.name} ==")
                registration.runner()
            return None

    elif args.resource == 'drinks':
        drink_config = config_manager.get_typed(DrinkConfig)
        machine = HotDrinkMachine(default_amount=drink_config.default_amount)
        if args.action == 'list':
            return {"drinks": [
                {"index": i, "name": name} for i, name in enumerate(machine.list_available())
            ]}
        if args.action == 'make':
            if args.index is None:
                drink = machine.make_drink_interactive(input, args.amount)
            else:
                drink = machine.make_drink(args.index, args.amount)
            drink.consume()
            return None

    raise DomainException(f"Unknown action {args.action!r} for {args.resource}")


def configure_logging(args: argparse.Namespace, config_manager: ConfigurationManager) -> None:
    """Set up logging from configuration, honouring --log-level and --verbose."""
    logging_config = config_manager.get_typed(LoggingConfig)
    level = args.log_level or ('DEBUG' if args.verbose else None)
    if level:
        logging_config = logging_config.model_copy(update={"level": level})
    setup_logging(logging_config)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.")
            sys.exit(1)

        if not args.action:
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
            sys.exit(1)

        try:
            config_manager = get_config_manager(args.config)
            configure_logging(args, config_manager)
        except DomainException as e:
            print(f"Error: {e}")
            sys.exit(1)

        logger = get_logger(__name__)

        # Execute command
        try:
            result = execute_command(args, config_manager)

            if result is not None:
                output_format = getattr(args, 'action_format', None) or args.format
                print(format_output(result, output_format))

        except DomainException as e:
            logger.error(f"Domain error: {e}")
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)
    except EOFError:
        print("\nError: No input received.")
        sys.exit(1)


if __name__ == "__main__":
    main()
