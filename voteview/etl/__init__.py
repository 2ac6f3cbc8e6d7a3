"""Request/response layer for the Voteview API."""
