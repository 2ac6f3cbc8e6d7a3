"""
Member search against the Voteview database.

Arguments are forwarded to the server untouched; it decides how they combine.
"""

import json
import logging
from typing import Any, Optional

import pandas as pd

from voteview.etl.client import VoteviewClient
from voteview.utils.flatten import flatten_records

logger = logging.getLogger(__name__)

MEMBER_COLUMNS = ['id']


def member_search(name: Optional[str] = None,
                  icpsr: Any = None,
                  state: Optional[str] = None,
                  congress: Any = None,
                  cqlabel: Optional[str] = None,
                  chamber: Optional[str] = None,
                  client: Optional[VoteviewClient] = None) -> pd.DataFrame:
    """
    Search the Voteview database for members of Congress.

    Args:
        name: Name to search for
        icpsr: ICPSR number
        state: State abbreviation
        congress: Congress number
        cqlabel: CQ label, e.g. '(TX-10)'
        chamber: 'House' or 'Senate'
        client: Client to send the request with; a default one is created otherwise

    Returns:
        DataFrame with one row per member-congress record, id first

    Raises:
        ValueError: If the response is not JSON
        EmptyInputError: If no members were returned
    """
    # TODO: validate state and chamber the way voteview_search validates its arguments
    client = client or VoteviewClient()
    body = client.get_members(
        name=name,
        icpsr=icpsr,
        state=state,
        congress=congress,
        cqlabel=cqlabel,
        chamber=chamber
    )

    results = json.loads(body)['results']
    logger.info("Member search returned %d records", len(results))

    return flatten_records(results, MEMBER_COLUMNS)
