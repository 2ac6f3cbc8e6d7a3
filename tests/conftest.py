"""Shared pytest fixtures for Voteview client tests."""

import json

import pytest


class StubClient:
    """Stands in for VoteviewClient; records requests and returns canned bodies."""

    base_url = "https://voteview.test"

    def __init__(self, body: str):
        self.body = body
        self.queries = []
        self.member_requests = []

    def search(self, query_string: str) -> str:
        self.queries.append(query_string)
        return self.body

    def get_members(self, **fields) -> str:
        self.member_requests.append(fields)
        return self.body


@pytest.fixture
def sample_rollcalls() -> list[dict]:
    """Roll call records shaped like the search endpoint's output."""
    return [
        {
            "id": "RH1100123",
            "score": 3.2,
            "congress": 110,
            "chamber": "House",
            "rollnumber": 123,
            "date": "2007-03-23",
            "bill": "HR1591",
            "yea": 218,
            "nay": 212,
            "support": 50.7,
            "description": "U.S. Troop Readiness, Veterans' Care, Katrina Recovery, and Iraq Accountability Appropriations Act",
            "shortdescription": "IRAQ WAR SUPPLEMENTAL",
            "codes": {"Clausen": ["Government Management"]},
        },
        {
            "id": "RH1120456",
            "score": 1.9,
            "congress": 112,
            "chamber": "House",
            "rollnumber": 456,
            "date": "2011-06-03",
            "yea": 410,
            "nay": 15,
            "support": 96.5,
            "description": "Iraq withdrawal resolution",
            "shortdescription": "IRAQ WITHDRAWAL",
        },
    ]


@pytest.fixture
def sample_members() -> list[dict]:
    """Member records shaped like the members endpoint's output."""
    return [
        {
            "bioname": "OBAMA, Barack",
            "icpsr": 40502,
            "state_abbrev": "IL",
            "congress": 109,
            "chamber": "Senate",
            "nominate": {"dim1": -0.343, "dim2": -0.25},
            "id": "MS10940502",
        },
        {
            "bioname": "OBAMA, Barack",
            "icpsr": 40502,
            "state_abbrev": "IL",
            "congress": 110,
            "chamber": "Senate",
            "id": "MS11040502",
        },
    ]


@pytest.fixture
def search_body(sample_rollcalls) -> str:
    return json.dumps({"recordcount": len(sample_rollcalls), "rollcalls": sample_rollcalls})


@pytest.fixture
def stub_client():
    return StubClient
