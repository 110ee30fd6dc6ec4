"""
CategoryDesk Client - Main Entry Point

This is the main entry point for the CategoryDesk client application.
Handles both GUI and CLI modes depending on command-line arguments.

Author: CategoryDesk Project
"""

import sys
import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='CategoryDesk - Category Management Client',
        epilog='Run without arguments to launch GUI mode'
    )

    # Optional positional argument for operation (CLI mode)
    parser.add_argument('operation', nargs='?',
                        choices=['list', 'add', 'update', 'delete', 'register'],
                        help='Operation to perform (CLI mode)')

    parser.add_argument('--email', help='Account email (login, or the new account for register)')
    parser.add_argument('--id', type=int, help='Category id for update/delete')
    parser.add_argument('--name', help='Category name for add/update')
    parser.add_argument('--description', help='Category description for add/update')

    registration = parser.add_argument_group('registration')
    registration.add_argument('--full-name')
    registration.add_argument('--date-of-birth', help='YYYY-MM-DD')
    registration.add_argument('--street')
    registration.add_argument('--city')
    registration.add_argument('--state')
    registration.add_argument('--zip-code')

    return parser


def main(argv=None):
    """
    Main entry point for CategoryDesk client.

    Parses command-line arguments and launches either:
    - GUI mode (default when no arguments)
    - CLI mode (when an operation is specified)
    """
    args = build_parser().parse_args(argv)

    if args.operation:
        # CLI mode
        from .cli import run_cli_operation
        return run_cli_operation(args)
    else:
        # GUI mode
        from .gui import launch_gui
        launch_gui()
        return 0


if __name__ == '__main__':
    sys.exit(main())
