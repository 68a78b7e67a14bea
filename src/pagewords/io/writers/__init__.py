"""Writers persisting document models."""
