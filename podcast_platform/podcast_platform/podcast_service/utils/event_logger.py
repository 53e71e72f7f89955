"""
Event logger utility for account events.
"""
from datetime import datetime
from typing import Optional
import sys
import logging
import os

from ..models import User

logger = logging.getLogger(__name__)


ALLOWED_EVENT_TYPES = {
    "account_created",
    "login_success",
    "login_failure",
    "profile_updated",
}


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """
    Configure stdout logging and, when ``log_dir`` is usable, a file handler
    writing ``account_events.log``.
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    # Continue without the file handler if the directory cannot be created
    if log_dir:
        try:
            os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(os.path.join(log_dir, "account_events.log")))
        except (OSError, PermissionError) as e:
            print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s:%(name)s:%(message)s",
        handlers=handlers,
        force=True,
    )


def log_account_event(event_type: str, user: User, metadata: dict = None) -> None:
    """
    Log an account event.

    Args:
        event_type: One of: account_created, login_success, login_failure,
                    profile_updated
        user: User the event is about
        metadata: Optional dictionary of additional context

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    try:
        logger.info(
            "ACCOUNT %s user_id=%s email=%s metadata=%s timestamp=%s",
            event_type, user.id, user.email, metadata or {}, datetime.utcnow().isoformat()
        )
    except Exception as e:
        # A logging failure should not break the account flow
        print(
            f"WARNING: Failed to log account event - "
            f"event_type={event_type}, error={str(e)}",
            file=sys.stderr
        )
