from __future__ import annotations

import logging
from typing import Optional

import httpx

from calendar_notifier.errors import FetchError


logger = logging.getLogger(__name__)

OK_STATUS_CODES = (200, 207)

CALENDAR_QUERY = """<?xml version="1.0" encoding="utf-8" ?>
<C:calendar-query xmlns:D="DAV:" xmlns:C="urn:ietf:params:xml:ns:caldav">
  <D:prop>
    <D:getetag/>
    <C:calendar-data>
      <C:comp name="VCALENDAR">
        <C:prop name="VERSION"/>
        <C:comp name="VEVENT">
          <C:prop name="UID"/>
          <C:prop name="SUMMARY"/>
          <C:prop name="DTSTART"/>
          <C:prop name="DTEND"/>
        </C:comp>
      </C:comp>
    </C:calendar-data>
  </D:prop>
  <C:filter>
    <C:comp-filter name="VEVENT"/>
  </C:filter>
</C:calendar-query>"""


class CalDAVClient:
    """Runs a calendar-query REPORT against a CalDAV collection."""

    def __init__(
        self,
        server_url: str,
        username: str,
        password: str,
        timeout: float = 30,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            server_url: URL of the calendar collection to query
            username, password: HTTP basic auth credentials
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.server_url = server_url
        self.timeout = timeout
        self.client = httpx.Client(auth=(username, password), timeout=timeout, transport=transport)

    def fetch(self) -> str:
        """Return the raw REPORT response body. Raises FetchError on any failure."""
        try:
            response = self.client.request(
                "REPORT",
                self.server_url,
                content=CALENDAR_QUERY.encode("utf-8"),
                headers={
                    "Content-Type": "text/xml; charset=utf-8",
                    "Depth": "1",
                },
            )
        except httpx.HTTPError as e:
            logger.error("CalDAV HTTP error: %s", e)
            raise FetchError(f"CalDAV request failed: {e}") from e

        if response.status_code not in OK_STATUS_CODES:
            logger.error("CalDAV server answered %d", response.status_code)
            raise FetchError(
                f"CalDAV server returned status {response.status_code}",
                status_code=response.status_code,
            )
        logger.info("Fetched %d bytes from calendar server", len(response.content))
        return response.text

    def close(self):
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
