"""
CategoryDesk Client - CLI Mode Module

Implements command-line interface mode for scripted category management.
Each invocation is one session: it logs in, performs one operation and
exits, so the access token never outlives the process.

Author: CategoryDesk Project
"""

import sys
import getpass
import logging
from pathlib import Path
from typing import Optional

from .managers import ConfigManager, SessionManager
from .models import LoginDraft, RegistrationDraft, AddressDraft, SubmissionStatus
from .api import CategoryDeskAPI
from .app_shell import AppShell
from .exceptions import CategoryDeskAPIError, CategoryDeskValidationError
from .log_files import LOG_FORMAT, new_log_file, cleanup_old_logs


# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_AUTH_ERROR = 3
EXIT_VALIDATION_ERROR = 4


def setup_cli_logging(config_manager: ConfigManager, log_dir: Optional[Path] = None) -> Path:
    """
    Setup logging for CLI mode with timestamped log file.

    Creates log file with format: categorydesk-YYYY-MM-DD-HH-MM-SS.log
    in a "logs" subdirectory next to the executable or in the current directory.

    Args:
        config_manager: ConfigManager instance for log settings
        log_dir: Override for the log directory

    Returns:
        Path to the created log file
    """
    log_level = config_manager.get("log_level", "INFO")
    log_file = new_log_file(log_dir=log_dir)

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stdout)  # Also output to console
        ],
        force=True
    )

    logger = logging.getLogger(__name__)
    logger.info(f"CategoryDesk CLI Mode - Log file: {log_file}")
    logger.info(f"Log level: {log_level}")

    return log_file


def _report_validation(logger, error: CategoryDeskValidationError):
    for field_name in error.errors:
        for message in error.errors.all(field_name):
            logger.error(f"  {field_name}: {message}")


def _register(shell: AppShell, args, password: str, logger) -> int:
    draft = RegistrationDraft(
        full_name=args.full_name or "",
        email=args.email or "",
        date_of_birth=args.date_of_birth or "",
        address=AddressDraft(
            street=args.street or "",
            city=args.city or "",
            state=args.state or "",
            zip_code=args.zip_code or ""
        ),
        password=password
    )
    outcome = shell.signup_form.submit(draft)
    if outcome.errors:
        raise CategoryDeskValidationError(outcome.errors)
    if outcome.status == SubmissionStatus.FAILED:
        logger.error(f"Registration failed: {outcome.message}")
        return EXIT_FAILURE

    logger.info(outcome.message)
    return EXIT_SUCCESS


def _login(shell: AppShell, email: str, password: str, logger) -> int:
    outcome = shell.login_form.submit(LoginDraft(email, password))
    if outcome.errors:
        raise CategoryDeskValidationError(outcome.errors)
    if outcome.status == SubmissionStatus.FAILED:
        logger.error(f"Login failed: {outcome.message}")
        return EXIT_AUTH_ERROR
    return EXIT_SUCCESS


def _run_category_operation(shell: AppShell, args, logger) -> int:
    sync = shell.synchronizer

    # Login navigates to the category view, which loads the list
    if sync.last_error:
        logger.error(sync.last_error)
        return EXIT_FAILURE

    if args.operation == "list":
        categories = sync.categories
        logger.info(f"{len(categories)} categories")
        for category in categories:
            logger.info(f"  [{category.id}] {category.name}: {category.description}")
        return EXIT_SUCCESS

    if args.operation == "add":
        success = sync.create(args.name or "", args.description or "")
    elif args.operation == "update":
        position = next((index for index, category in enumerate(sync.categories)
                         if category.id == args.id), None)
        if position is None:
            logger.error(f"Category {args.id} not found")
            return EXIT_FAILURE
        sync.begin_edit(position)
        if args.name is not None:
            sync.draft.name = args.name
        if args.description is not None:
            sync.draft.description = args.description
        success = sync.commit_edit()
    else:
        success = sync.delete(args.id)

    if not success:
        logger.error(sync.last_error or f"{args.operation} failed")
        return EXIT_FAILURE
    logger.info(f"{args.operation.upper()} COMPLETED SUCCESSFULLY")
    return EXIT_SUCCESS


def _check_arguments(args) -> Optional[str]:
    if args.operation in ("update", "delete") and args.id is None:
        return f"--id is required for {args.operation}"
    if args.operation != "register" and not args.email:
        return "--email is required to log in"
    return None


def run_cli_operation(args, password: Optional[str] = None,
                      config_manager: Optional[ConfigManager] = None) -> int:
    """
    Execute CLI operation without GUI.

    Process:
    1. Load configuration and setup logging
    2. Register, or log in and load the category list
    3. Execute requested operation
    4. Return appropriate exit code

    Args:
        args: Parsed command-line arguments (see client.build_parser)
        password: Password to use (prompted for when None)
        config_manager: Preloaded configuration (loaded from disk when None)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    logger = None

    try:
        config_mgr = config_manager
        if config_mgr is None:
            config_mgr = ConfigManager()
            config_mgr.load_config()
        log_file = setup_cli_logging(config_mgr)
        logger = logging.getLogger(__name__)
        cleanup_old_logs(config_mgr, log_file)

        problem = _check_arguments(args)
        if problem:
            logger.error(problem)
            return EXIT_CONFIG_ERROR

        logger.info("=" * 60)
        logger.info(f"Starting CategoryDesk CLI: {args.operation.upper()}")
        logger.info("=" * 60)

        if password is None:
            password = getpass.getpass("Password: ")

        session = SessionManager()
        api_client = CategoryDeskAPI.from_config(config_mgr, token_provider=session.get_credential)
        shell = AppShell(api_client, session)

        try:
            if args.operation == "register":
                return _register(shell, args, password, logger)

            exit_code = _login(shell, args.email, password, logger)
            if exit_code != EXIT_SUCCESS:
                return exit_code
            return _run_category_operation(shell, args, logger)
        finally:
            api_client.close()

    except CategoryDeskValidationError as e:
        logger.error("Input rejected:")
        _report_validation(logger, e)
        return EXIT_VALIDATION_ERROR

    except CategoryDeskAPIError as e:
        if logger:
            logger.error(f"API Error: {e}")
        else:
            print(f"API Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    except KeyboardInterrupt:
        if logger:
            logger.warning("Operation cancelled by user (Ctrl+C)")
        else:
            print("\nOperation cancelled by user", file=sys.stderr)
        return EXIT_FAILURE
