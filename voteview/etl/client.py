"""
HTTP client for the Voteview API.

Sends form-encoded POST requests to the search and member endpoints and hands
back the decoded response body. Interpreting the body is left to the callers.
"""

import logging
from typing import Any, Dict, Optional

import requests

from voteview.utils.config import MEMBERS_ENDPOINT, SEARCH_ENDPOINT, USER_AGENT, get_settings

logger = logging.getLogger(__name__)


class VoteviewClient:
    """Client for the Voteview search and member endpoints."""

    def __init__(self,
                 base_url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize Voteview client.

        Args:
            base_url: Server root. If not provided, will look for VOTEVIEW_BASE_URL env var.
            timeout: Seconds to wait for a response. If not provided, will look for
                VOTEVIEW_TIMEOUT env var, otherwise waits indefinitely.
            session: Pre-configured requests session to reuse.
        """
        self.settings = get_settings(base_url=base_url, timeout=timeout)
        self.base_url = self.settings.base_url
        self.timeout = self.settings.timeout

        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': USER_AGENT,
            'Accept': 'application/json'
        })

    def post(self, endpoint: str, data: Dict[str, Any]) -> str:
        """
        POST form fields to an endpoint.

        Args:
            endpoint: Path below the base URL (e.g., '/api/search')
            data: Form fields; fields set to None are not sent

        Returns:
            Response body decoded as UTF-8

        Raises:
            requests.RequestException: If the request cannot be completed
        """
        url = f"{self.base_url}{endpoint}"
        form = {key: value for key, value in data.items() if value is not None}
        logger.debug("POST %s %s", url, form)

        response = self.session.post(url, data=form, timeout=self.timeout)
        logger.debug("POST %s returned status %s", url, response.status_code)

        # The server does not always declare a charset, so decode explicitly
        return response.content.decode('utf-8', errors='replace')

    def search(self, query_string: str) -> str:
        """Run a roll call query and return the raw body."""
        return self.post(SEARCH_ENDPOINT, {'q': query_string})

    def get_members(self,
                    name: Optional[str] = None,
                    icpsr: Any = None,
                    state: Optional[str] = None,
                    congress: Any = None,
                    cqlabel: Optional[str] = None,
                    chamber: Optional[str] = None) -> str:
        """Run a member query and return the raw body."""
        return self.post(MEMBERS_ENDPOINT, {
            'name': name,
            'icpsr': icpsr,
            'state': state,
            'congress': congress,
            'cqlabel': cqlabel,
            'chamber': chamber
        })

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
