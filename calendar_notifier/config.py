from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import pytz
from dotenv import load_dotenv

from calendar_notifier.utils.dates import get_timezone


NOTIFIERS = {"telegram", "slack"}
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    caldav_server_url: str
    caldav_username: str
    caldav_password: str

    notifier: str
    telegram_bot_token: Optional[str]
    telegram_chat_id: Optional[str]
    slack_bot_token: Optional[str]
    slack_channel: Optional[str]
    slack_user_id: Optional[str]

    tz: str
    request_timeout: float
    log_level: str
    dry_run: bool

    @staticmethod
    def _strip_env(key: str, default: str | None = None) -> str | None:
        """Get env var and strip whitespace/newlines (common issue with CI secrets)."""
        val = os.getenv(key)
        if val is None:
            return default
        stripped = val.strip()
        return stripped if stripped else default

    @staticmethod
    def _require(key: str) -> str:
        val = Settings._strip_env(key)
        if not val:
            raise ValueError(f"{key} environment variable is required")
        return val

    @staticmethod
    def load(dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()

        caldav_server_url = Settings._require("CALDAV_SERVER_URL")
        caldav_username = Settings._require("CALDAV_SERVER_USERNAME")
        caldav_password = Settings._require("CALDAV_SERVER_PASSWORD")

        notifier = (Settings._strip_env("NOTIFIER") or "telegram").lower()
        if notifier not in NOTIFIERS:
            raise ValueError(f"NOTIFIER must be one of {sorted(NOTIFIERS)}, got {notifier!r}")
        dry_run = (Settings._strip_env("DRY_RUN") or "false").lower() in {"1", "true", "yes"}

        telegram_bot_token = Settings._strip_env("TELEGRAM_BOT_TOKEN")
        telegram_chat_id = Settings._strip_env("TELEGRAM_CHAT_ID")
        slack_bot_token = Settings._strip_env("SLACK_BOT_TOKEN")
        slack_channel = Settings._strip_env("SLACK_CHANNEL")
        slack_user_id = Settings._strip_env("SLACK_USER_ID")

        if not dry_run:
            if notifier == "telegram" and not (telegram_bot_token and telegram_chat_id):
                raise ValueError("TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID are required for the telegram notifier")
            if notifier == "slack" and not (slack_bot_token and (slack_channel or slack_user_id)):
                raise ValueError("SLACK_BOT_TOKEN and SLACK_CHANNEL or SLACK_USER_ID are required for the slack notifier")

        timeout_str = Settings._strip_env("REQUEST_TIMEOUT") or "30"
        try:
            request_timeout = float(timeout_str)
        except ValueError:
            request_timeout = 30.0
        tz = Settings._strip_env("TZ") or "UTC"
        try:
            get_timezone(tz)
        except pytz.exceptions.UnknownTimeZoneError as exc:
            raise ValueError(f"TZ is not a known timezone: {tz!r}") from exc
        log_level = (Settings._strip_env("LOG_LEVEL") or "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {log_level!r}")

        return Settings(
            caldav_server_url=caldav_server_url,
            caldav_username=caldav_username,
            caldav_password=caldav_password,
            notifier=notifier,
            telegram_bot_token=telegram_bot_token,
            telegram_chat_id=telegram_chat_id,
            slack_bot_token=slack_bot_token,
            slack_channel=slack_channel,
            slack_user_id=slack_user_id,
            tz=tz,
            request_timeout=request_timeout,
            log_level=log_level,
            dry_run=dry_run,
        )
