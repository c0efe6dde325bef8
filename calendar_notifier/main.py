from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from calendar_notifier.config import Settings
from calendar_notifier.errors import FetchError
from calendar_notifier.pipeline import run
from calendar_notifier.providers.caldav_client import CalDAVClient
from calendar_notifier.providers.slack_client import SlackClient
from calendar_notifier.providers.telegram_client import TelegramClient
from calendar_notifier.utils.dates import today_in


logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("calendar-notifier")


def _log_only(message: str) -> bool:
    logger.info("DRY_RUN, would send: %s", message)
    return True


def build_notifier(settings: Settings) -> tuple[Callable[[str], bool], Optional[Callable[[], None]]]:
    """Return the send function for the configured notifier and its close hook."""
    if settings.dry_run:
        return _log_only, None
    if settings.notifier == "slack":
        slack = SlackClient(settings.slack_bot_token, channel=settings.slack_channel, user_id=settings.slack_user_id)
        return slack.send, None
    telegram = TelegramClient(settings.telegram_bot_token or "", settings.telegram_chat_id or "", timeout=settings.request_timeout)
    return telegram.send, telegram.close


def main() -> int:
    logger.info("Starting calendar-notifier")
    try:
        settings = Settings.load()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    logging.getLogger().setLevel(settings.log_level)
    logger.info("Loaded configuration (notifier=%s, tz=%s, dry_run=%s)", settings.notifier, settings.tz, settings.dry_run)

    notify, close_notifier = build_notifier(settings)
    try:
        with CalDAVClient(
            settings.caldav_server_url,
            settings.caldav_username,
            settings.caldav_password,
            timeout=settings.request_timeout,
        ) as caldav:
            summary = run(caldav.fetch, notify, today_in(settings.tz))
    except FetchError as exc:
        logger.error("Failed to get events: %s", exc)
        return 1
    finally:
        if close_notifier is not None:
            close_notifier()

    if summary.failed:
        logger.warning("%d notification(s) could not be delivered", summary.failed)
    logger.info("Program finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
