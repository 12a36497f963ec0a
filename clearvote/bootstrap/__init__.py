"""Bootstrap wiring for ClearVote."""
