"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Inverts dependencies: flows and services depend on abstractions, so the
  model adapter and the marketplace read service can be substituted in tests.
"""
