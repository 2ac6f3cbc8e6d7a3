"""
Query string builder for the Voteview roll call search.

Turns structured search parameters into the boolean query accepted by the
server. The free text goes first, then one parenthesised clause per populated
parameter, joined with AND in the order given by CLAUSE_ORDER:

    (tax) AND (startdate:2005-01-01) AND (congress:110 112) AND (chamber:house)

Query syntax reference:
https://github.com/JeffreyBLewis/Rvoteview/wiki/Query-Documentation
"""

import re
import logging
import numbers
from collections.abc import Sized
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from voteview.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

CHAMBERS = ('house', 'senate')

# Fields the server parser understands (informational; q is passed through untouched)
TEXT_FIELDS = ('codes', 'code.Clausen', 'code.Peltzman', 'code.Issue',
               'description', 'shortdescription', 'bill', 'alltext')
NUMERIC_FIELDS = ('congress', 'yea', 'nay', 'support', 'startdate', 'enddate')

# yyyy, yyyy-mm or yyyy-mm-dd; days are range-checked only
DATE_PATTERN = re.compile(r'[0-9]{4}(-(0[1-9]|1[0-2])(-(0[1-9]|[12][0-9]|3[01]))?)?')

_QUOTE_AFTER_TEXT = re.compile(r"(?<=[^:\s])'")
_QUOTE_BEFORE_SPACE = re.compile(r"'(?=\s|$)")

DateLike = Union[str, int, date]
CongressLike = Union[int, Iterable[int]]


@dataclass
class SearchParameters:
    """Roll call search parameters. Every field is optional, but at least one must be set."""

    q: Optional[str] = None
    startdate: Optional[DateLike] = None
    enddate: Optional[DateLike] = None
    congress: Optional[CongressLike] = None
    chamber: Optional[str] = None
    minsupport: Optional[float] = None
    maxsupport: Optional[float] = None

    def has_text(self) -> bool:
        return not _is_empty(self.q)

    def has_constraints(self) -> bool:
        return any(not _is_empty(value) for value in (
            self.startdate, self.enddate, self.congress,
            self.chamber, self.minsupport, self.maxsupport
        ))

    def is_empty(self) -> bool:
        return not (self.has_text() or self.has_constraints())


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ''
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _date_text(value: DateLike) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def check_date(value: DateLike) -> str:
    """Return the date as query text, or raise ValidationError if it is not yyyy[-mm[-dd]]."""
    text = _date_text(value)
    if not DATE_PATTERN.fullmatch(text):
        raise ValidationError(
            f"A date is formatted incorrectly ({text!r}). Please use yyyy, yyyy-mm, or yyyy-mm-dd "
            "format. Note that if months or days are excluded, they default to the earliest "
            "values, so '2013' defaults to '2013-01-01'."
        )
    return text


def check_congress(congress: CongressLike) -> List[int]:
    """Normalize congress to a list of integers in 1..999."""
    if isinstance(congress, (str, numbers.Number)):
        values = [congress]
    else:
        values = list(congress)

    checked = []
    for value in values:
        if isinstance(value, bool):
            number = None
        else:
            try:
                number = float(value)
            except (TypeError, ValueError):
                number = None
        if number is None or not number.is_integer() or not 0 < number <= 999:
            raise ValidationError(
                "Congress must be a positive number or vector of positive numbers "
                f"greater than 0 and less than 1000 (got {value!r})"
            )
        checked.append(int(number))
    return checked


def check_support(minsupport: Optional[float], maxsupport: Optional[float]) -> Tuple[float, float]:
    """Fill in the open end of the support range (0 or 100) and check it."""
    bounds = []
    for name, value in (('minsupport', minsupport), ('maxsupport', maxsupport)):
        if value is None:
            bounds.append(None)
            continue
        if isinstance(value, bool) or not isinstance(value, (numbers.Real, str)):
            raise ValidationError(f"{name} must be a number, got {value!r}")
        try:
            number = float(value)
        except ValueError:
            raise ValidationError(f"{name} must be a number, got {value!r}")
        if not 0 <= number <= 100:
            raise ValidationError("Min and max support must be between 0 and 100")
        bounds.append(value if isinstance(value, numbers.Real) else number)

    low = 0 if bounds[0] is None else bounds[0]
    high = 100 if bounds[1] is None else bounds[1]
    if high < low:
        raise ValidationError("maxsupport must be greater than minsupport")
    return low, high


def check_chamber(chamber: str) -> str:
    """Lowercase the chamber name; only House and Senate are accepted."""
    if not isinstance(chamber, str) or chamber.lower() not in CHAMBERS:
        raise ValidationError("Chamber must be either 'House' or 'Senate'")
    return chamber.lower()


def validate(params: SearchParameters) -> None:
    """
    Check search parameters without building anything.

    Raises:
        ValidationError: naming the first violated constraint
    """
    if params.is_empty():
        raise ValidationError("Must specify at least one argument")
    for _, clause in CLAUSE_ORDER:
        clause(params)


def normalize_quotes(text: str) -> str:
    """
    Turn single quotes used as phrase delimiters into double quotes.

    Two passes: a quote directly after a character other than a colon or
    whitespace, then a quote directly before whitespace or the end of the text.
    Apostrophes inside words are converted by the first pass too.
    """
    text = _QUOTE_AFTER_TEXT.sub('"', text)
    return _QUOTE_BEFORE_SPACE.sub('"', text)


def _startdate_clause(params: SearchParameters) -> Optional[str]:
    if _is_empty(params.startdate):
        return None
    return f"startdate:{check_date(params.startdate)}"


def _enddate_clause(params: SearchParameters) -> Optional[str]:
    if _is_empty(params.enddate):
        return None
    return f"enddate:{check_date(params.enddate)}"


def _congress_clause(params: SearchParameters) -> Optional[str]:
    if _is_empty(params.congress):
        return None
    # space separated congresses are OR'd by the server
    return "congress:" + " ".join(str(c) for c in check_congress(params.congress))


def _support_clause(params: SearchParameters) -> Optional[str]:
    minsupport = None if _is_empty(params.minsupport) else params.minsupport
    maxsupport = None if _is_empty(params.maxsupport) else params.maxsupport
    if minsupport is None and maxsupport is None:
        return None
    low, high = check_support(minsupport, maxsupport)
    return f"support:[{_format_number(low)} to {_format_number(high)}]"


def _chamber_clause(params: SearchParameters) -> Optional[str]:
    if _is_empty(params.chamber):
        return None
    return f"chamber:{check_chamber(params.chamber)}"


CLAUSE_ORDER: Tuple[Tuple[str, Callable[[SearchParameters], Optional[str]]], ...] = (
    ('startdate', _startdate_clause),
    ('enddate', _enddate_clause),
    ('congress', _congress_clause),
    ('support', _support_clause),
    ('chamber', _chamber_clause),
)


def base_clause(params: SearchParameters) -> str:
    if not params.has_text():
        # keeps the query from starting with a bare AND
        return "()"
    if params.has_constraints():
        return normalize_quotes(f"({params.q})")
    return normalize_quotes(str(params.q))


def build_query_string(params: Optional[SearchParameters] = None, **kwargs) -> str:
    """
    Build the query string sent to the search endpoint.

    Args:
        params: Search parameters. Keyword arguments are used instead when omitted.
        **kwargs: Fields of SearchParameters

    Returns:
        Query string, e.g. "(Iraq) AND (chamber:house)"

    Raises:
        ValidationError: If no parameter is set or a parameter is out of range
    """
    if params is None:
        params = SearchParameters(**kwargs)
    elif kwargs:
        raise TypeError("Pass either a SearchParameters instance or keyword arguments, not both")

    if params.is_empty():
        raise ValidationError("Must specify at least one argument")

    query_string = base_clause(params)
    for _, clause in CLAUSE_ORDER:
        body = clause(params)
        if body is not None:
            query_string = f"{query_string} AND ({body})"

    logger.debug("Built query string: %s", query_string)
    return query_string
