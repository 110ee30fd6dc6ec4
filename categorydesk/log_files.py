"""
CategoryDesk Client - Log File Helpers

Timestamped log file naming and retention cleanup, shared by CLI and
GUI modes.

Author: CategoryDesk Project
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .managers import get_base_dir

LOG_FILE_PREFIX = "categorydesk"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configured_level(config_manager) -> int:
    """Logging level named by the log_level setting (INFO if unknown)."""
    return getattr(logging, str(config_manager.get("log_level", "INFO")).upper(), logging.INFO)


def apply_log_level(config_manager) -> int:
    """
    Re-apply the log_level setting to the root logger and its handlers.

    Returns:
        The level now in effect
    """
    level = configured_level(config_manager)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)
    return level


def new_log_file(suffix: str = "", log_dir: Optional[Path] = None) -> Path:
    """
    Path for a new timestamped log file.

    Format: categorydesk[-suffix]-YYYY-MM-DD-HH-MM-SS.log, in a "logs"
    subdirectory next to config.json (created if missing).
    """
    if log_dir is None:
        log_dir = get_base_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    prefix = f"{LOG_FILE_PREFIX}-{suffix}" if suffix else LOG_FILE_PREFIX
    return log_dir / f"{prefix}-{timestamp}.log"


def cleanup_old_logs(config_manager, current_log: Path) -> int:
    """
    Delete log files older than retention period.

    Args:
        config_manager: ConfigManager instance for retention settings
        current_log: Path to current log file (don't delete this)

    Returns:
        Number of files deleted
    """
    logger = logging.getLogger(__name__)
    retention_days = config_manager.get("log_retention_days", 30)

    if retention_days <= 0:
        return 0  # Retention disabled

    logger.info(f"Cleaning up log files older than {retention_days} days")

    cutoff_time = datetime.now().timestamp() - (retention_days * 86400)

    deleted_count = 0
    # Covers both GUI and CLI log files
    for log_file in current_log.parent.glob(f"{LOG_FILE_PREFIX}-*.log"):
        if log_file == current_log:
            continue

        try:
            if log_file.stat().st_mtime < cutoff_time:
                log_file.unlink()
                deleted_count += 1
        except OSError as e:
            logger.warning(f"Failed to delete old log file {log_file}: {e}")

    if deleted_count > 0:
        logger.info(f"Deleted {deleted_count} old log file(s)")
    return deleted_count
