"""
Client library for searching the Voteview roll call and member database.
"""

from voteview.etl.client import VoteviewClient
from voteview.etl.member_search import member_search
from voteview.etl.rollcall_search import get_query_string, voteview_search
from voteview.utils.exceptions import (
    EmptyInputError,
    EmptyResultError,
    TransportError,
    ValidationError,
    VoteviewError,
    VoteviewWarning,
)
from voteview.utils.flatten import flatten_records, jlist2df
from voteview.utils.query_builder import SearchParameters, build_query_string

__version__ = "0.1.0"

__all__ = [
    "VoteviewClient",
    "voteview_search",
    "member_search",
    "get_query_string",
    "SearchParameters",
    "build_query_string",
    "flatten_records",
    "jlist2df",
    "VoteviewError",
    "ValidationError",
    "TransportError",
    "EmptyResultError",
    "EmptyInputError",
    "VoteviewWarning",
]
