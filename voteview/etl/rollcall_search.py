"""
Roll call search against the Voteview database.

Builds the query string from the search arguments, sends it to the search
endpoint and returns the matching roll calls as a DataFrame.
"""

import json
import logging
import warnings
from typing import Any, Dict, Iterable, Optional, Union

import pandas as pd

from voteview.etl.client import VoteviewClient
from voteview.utils.config import SEARCH_ENDPOINT
from voteview.utils.exceptions import EmptyResultError, TransportError, VoteviewWarning
from voteview.utils.flatten import flatten_records
from voteview.utils.query_builder import SearchParameters, build_query_string

logger = logging.getLogger(__name__)

ROLLCALL_COLUMNS = [
    'description', 'shortdescription', 'date', 'bill', 'chamber', 'congress',
    'rollnumber', 'yea', 'nay', 'support', 'id'
]

QSTRING_ATTR = 'qstring'


def parse_search_response(body: str, url: Optional[str] = None) -> Dict[str, Any]:
    """
    Decode a search response body.

    Raises:
        TransportError: If the body is not a JSON object; the raw text is kept for debugging
    """
    try:
        data = json.loads(body)
    except ValueError:
        raise TransportError(body, url=url)
    if not isinstance(data, dict):
        raise TransportError(body, url=url)
    return data


def voteview_search(q: Optional[str] = None,
                    startdate=None,
                    enddate=None,
                    chamber: Optional[str] = None,
                    congress: Union[int, Iterable[int], None] = None,
                    maxsupport: Optional[float] = None,
                    minsupport: Optional[float] = None,
                    client: Optional[VoteviewClient] = None) -> pd.DataFrame:
    """
    Search the Voteview database for roll calls.

    Any one or more of the arguments may be given. q is passed to the server's
    query parser as-is (apart from quote normalization), so it can hold plain
    key words, quoted phrases, field:value terms, ranges like support:[10 to 90]
    and AND/OR groups. The other arguments are appended as AND clauses.

    Args:
        q: Free text or advanced query
        startdate: Earliest roll call date, as yyyy, yyyy-mm or yyyy-mm-dd
        enddate: Latest roll call date, same formats
        chamber: 'House' or 'Senate' (any case)
        congress: Congress number or numbers; several are OR'd
        maxsupport: Highest share of Yea among Yea and Nay votes, 0-100
        minsupport: Lowest share of Yea among Yea and Nay votes, 0-100
        client: Client to send the request with; a default one is created otherwise

    Returns:
        DataFrame of roll calls with description, shortdescription, date, bill,
        chamber, congress, rollnumber, yea, nay, support and id first, then any
        other fields the server returned (e.g. score for key word searches).
        The query string used is stored in df.attrs['qstring'].

    Raises:
        ValidationError: If the arguments are empty or out of range
        TransportError: If the server did not answer with JSON
        EmptyResultError: If no roll calls matched
    """
    params = SearchParameters(
        q=q,
        startdate=startdate,
        enddate=enddate,
        congress=congress,
        chamber=chamber,
        minsupport=minsupport,
        maxsupport=maxsupport
    )
    query_string = build_query_string(params)

    client = client or VoteviewClient()
    body = client.search(query_string)
    data = parse_search_response(body, url=f"{client.base_url}{SEARCH_ENDPOINT}")

    rollcalls = data.get('rollcalls') or []
    recordcount = data.get('recordcount')
    recordcount = len(rollcalls) if recordcount is None else int(recordcount)

    logger.info("Query '%s' returned %d rollcalls...", query_string, recordcount)

    if data.get('errormessage'):
        warnings.warn(str(data['errormessage']), VoteviewWarning, stacklevel=2)

    if recordcount == 0:
        raise EmptyResultError(query_string)

    df = flatten_records(rollcalls, ROLLCALL_COLUMNS)
    df.attrs[QSTRING_ATTR] = query_string
    return df


def get_query_string(df: pd.DataFrame) -> Optional[str]:
    """Return the query string a search result was built from."""
    return df.attrs.get(QSTRING_ATTR)
