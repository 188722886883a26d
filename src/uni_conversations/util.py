from __future__ import annotations

import json
from typing import Any


def json_dumps_pretty(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=True, indent=2, sort_keys=True)
