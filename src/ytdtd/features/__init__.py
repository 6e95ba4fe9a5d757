"""Feature packages: album packaging and manifest serialization."""
