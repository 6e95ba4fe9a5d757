"""Application layer wiring use cases to platform adapters."""
