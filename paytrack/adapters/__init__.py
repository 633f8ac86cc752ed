"""Entry points wiring use cases to concrete adapters."""
