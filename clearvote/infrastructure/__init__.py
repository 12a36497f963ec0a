"""Infrastructure layer: observability, stubs and persistence adapters."""
