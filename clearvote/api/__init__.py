"""HTTP API for ClearVote (FastAPI)."""
