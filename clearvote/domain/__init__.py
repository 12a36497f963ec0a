"""Domain layer for ClearVote.

Pure registry logic: errors, models, audit event payloads and the
access-control, lifecycle and id-allocation rules. No I/O.
"""
