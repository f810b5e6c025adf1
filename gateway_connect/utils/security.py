import hashlib
from typing import Any, Mapping

def _as_token_part(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

def sha256_values_token(fields: Mapping[str, Any]) -> str:
    """
    sha256 по значениям `fields`, отсортированным по ключу.
    Вложенные объекты (Receipt, DATA-объект и т.п.) в токен не входят.
    """
    parts = [
        _as_token_part(fields[key])
        for key in sorted(fields)
        if fields[key] is not None and not isinstance(fields[key], (dict, list, tuple))
    ]
    return hashlib.sha256("".join(parts).encode("utf-8")).hexdigest()
