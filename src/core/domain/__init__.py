"""Domain models and schema validation.

Why:
- Pure, strict data structures (Pydantic v2) for everything exchanged with
  the generative model.
- The domain knows nothing about HTTP, the CLI or SDKs.
"""
