"""Application layer for ClearVote: ports and the registry service."""
