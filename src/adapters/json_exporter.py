"""JSON export of flow results.

Why JSON:
- Results feed the marketplace UI and other pipelines as-is.
- Wire names (camelCase) and a stable key order make exports diffable.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

_ANY = TypeAdapter(Any)


def result_to_jsonable(result: Any) -> Any:
    return _ANY.dump_python(result, mode="json", by_alias=True)


def export_result_json(*, result: Any, output_path: Path) -> Path:
    """Write a flow result (model or list of models) as UTF-8 JSON."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(result_to_jsonable(result), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
