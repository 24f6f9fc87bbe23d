import logging

from systemd.journal import JournalHandler


def setup_logger(level: int = logging.DEBUG) -> None:
    """Configure logging to use systemd journal.

    Args:
        level: Threshold for the `afsctl` logger
    """
    app_logger = logging.getLogger('afsctl')
    app_logger.setLevel(level)

    # Keep repeated calls (CLI then panel) from duplicating records
    if any(isinstance(h, JournalHandler) for h in app_logger.handlers):
        return

    journal_handler = JournalHandler(SYSLOG_IDENTIFIER='afsctl')

    app_logger.addHandler(journal_handler)
