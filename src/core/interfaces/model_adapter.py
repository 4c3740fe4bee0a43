"""Generative model call boundary.

Why Protocol:
- The model is the only non-deterministic collaborator; keeping it behind a
  structural contract makes rendering, validation and ranking testable with
  a fixed-response stand-in.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ModelAdapter(Protocol):
    """The only component allowed to call the external generative model.

    Design rules:
    - `invoke` is async: it waits on a network round trip.
    - It returns a value already validated against `output_schema`, or `None`
      (Empty) when the model produced nothing usable. It never raises for a
      transport failure or a non-conformant reply; deciding what Empty means
      belongs to the calling flow.
    """

    async def invoke(self, prompt: str, output_schema: Any) -> Any | None:
        ...
