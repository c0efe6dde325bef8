from __future__ import annotations

import pytest


SAMPLE_RESPONSE = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<d:multistatus><d:response><cal:calendar-data>BEGIN:VCALENDAR\n"
    "VERSION:2.0\n"
    "BEGIN:VEVENT\n"
    "UID:evt-1\n"
    "SUMMARY:Dentist\n"
    "DTSTART;TZID=Europe/Oslo:20240115T090000\n"
    "END:VEVENT\n"
    "BEGIN:VEVENT\n"
    "UID:evt-2\n"
    "SUMMARY:Broken\n"
    "END:VEVENT\n"
    "BEGIN:VEVENT\n"
    "UID:evt-3\n"
    "SUMMARY:Team dinner\n"
    "DTSTART;VALUE=DATE:20240122\n"
    "END:VEVENT\n"
    "BEGIN:VEVENT\n"
    "UID:evt-4\n"
    "SUMMARY:Haircut\n"
    "DTSTART;TZID=Europe/Oslo:20240116T170000\n"
    "END:VEVENT\n"
    "END:VCALENDAR\n</cal:calendar-data></d:response></d:multistatus>\n"
)


@pytest.fixture
def sample_response() -> str:
    return SAMPLE_RESPONSE


@pytest.fixture
def clean_env(monkeypatch):
    for key in (
        "CALDAV_SERVER_URL",
        "CALDAV_SERVER_USERNAME",
        "CALDAV_SERVER_PASSWORD",
        "NOTIFIER",
        "TELEGRAM_BOT_TOKEN",
        "TELEGRAM_CHAT_ID",
        "SLACK_BOT_TOKEN",
        "SLACK_CHANNEL",
        "SLACK_USER_ID",
        "TZ",
        "REQUEST_TIMEOUT",
        "LOG_LEVEL",
        "DRY_RUN",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("calendar_notifier.config.load_dotenv", lambda *a, **kw: False)
    return monkeypatch


@pytest.fixture
def caldav_env(clean_env):
    clean_env.setenv("CALDAV_SERVER_URL", "https://dav.example.com/calendars/me/home/")
    clean_env.setenv("CALDAV_SERVER_USERNAME", "me")
    clean_env.setenv("CALDAV_SERVER_PASSWORD", "secret")
    return clean_env
