"""Application layer: contracts over the domain types."""
