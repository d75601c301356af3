from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_request(path: str) -> Any:
    request_path = Path(path)
    if not request_path.exists():
        raise SystemExit(f"ERROR: request file does not exist: {request_path}")
    try:
        return json.loads(request_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"ERROR: request file is not valid JSON: {exc}")


def print_response(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2, allow_nan=False))
