from __future__ import annotations

import json
from pathlib import Path

from mindmate.main import app


def main() -> None:
    schema = app.openapi()
    output_path = Path(__file__).resolve().parents[1] / "docs" / "openapi.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(schema, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    print(f"wrote {output_path}")


if __name__ == "__main__":
    main()
