import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional


def load_records(path: str, key: str) -> List[Dict[str, Any]]:
    """
    Read a JSON file holding either a list of records or an object with the
    list under key (e.g. {"pages": [...]}).
    """
    with open(Path(path).expanduser(), 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get(key, [])

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of {key}")

    return data


def book_id_for(path: str) -> str:
    """Log context id derived from the input file name."""
    return Path(path).stem


def write_json(data: Any, output: Optional[str] = None):
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output:
        with open(Path(output).expanduser(), 'w', encoding='utf-8') as f:
            f.write(text + '\n')
    else:
        print(text)


def fail(message: str):
    print(f"❌ {message}")
    sys.exit(1)
