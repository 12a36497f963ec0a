"""Metadata hash value object.

The registry stores a 32-byte opaque digest per voter. It never inspects
the preimage; it only enforces the size.
"""

from __future__ import annotations

from dataclasses import dataclass

METADATA_HASH_SIZE = 32


@dataclass(frozen=True)
class MetadataHash:
    """Immutable 32-byte digest attached to a voter record.

    Attributes:
        digest: Exactly 32 raw bytes.

    Raises:
        ValueError: If the digest is not exactly 32 bytes.
    """

    digest: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.digest, (bytes, bytearray)):
            raise ValueError(
                f"metadata hash must be bytes, got {type(self.digest).__name__}"
            )
        if len(self.digest) != METADATA_HASH_SIZE:
            raise ValueError(
                f"metadata hash must be {METADATA_HASH_SIZE} bytes, got {len(self.digest)}"
            )
        if isinstance(self.digest, bytearray):
            object.__setattr__(self, "digest", bytes(self.digest))

    @classmethod
    def from_hex(cls, value: str) -> MetadataHash:
        """Parse a 64-character hex string (an optional 0x prefix is accepted).

        Raises:
            ValueError: If the string is not valid hex of the right length.
        """
        text = value[2:] if value.startswith(("0x", "0X")) else value
        try:
            digest = bytes.fromhex(text)
        except ValueError as exc:
            raise ValueError(f"metadata hash is not valid hex: {value!r}") from exc
        return cls(digest)

    @classmethod
    def zero(cls) -> MetadataHash:
        """Return the all-zero digest."""
        return cls(bytes(METADATA_HASH_SIZE))

    def hex(self) -> str:
        """Lowercase hex wire form."""
        return self.digest.hex()

    def __str__(self) -> str:
        return self.hex()
