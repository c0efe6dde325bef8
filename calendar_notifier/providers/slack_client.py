from __future__ import annotations

import logging

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError


logger = logging.getLogger(__name__)


class SlackClient:
    """Posts reminders to one Slack destination: a channel, or a user's DM."""

    def __init__(self, token: str | None, channel: str | None = None, user_id: str | None = None):
        self.channel = channel
        self.user_id = user_id
        self.client = WebClient(token=token) if token else None
        self._dm_channel_id: str | None = None

    def _destination(self) -> str | None:
        if self.channel:
            return self.channel
        if not self.user_id:
            return None
        if self._dm_channel_id is None:
            im = self.client.conversations_open(users=[self.user_id])
            self._dm_channel_id = im["channel"]["id"]
        return self._dm_channel_id

    def send(self, message: str) -> bool:
        if not self.client:
            logger.warning("Slack client not configured")
            return False
        try:
            destination = self._destination()
            if destination is None:
                logger.warning("Slack destination not configured")
                return False
            self.client.chat_postMessage(channel=destination, text=message)
            return True
        except SlackApiError as e:
            logger.error("Slack post failed: %s", e)
            return False
