from __future__ import annotations

from typing import Any


class ModuleConfig:
    """Module arguments after ``parse_module_args`` has applied types and defaults."""

    def __init__(self, args: dict[str, Any]) -> None:
        self._args = dict(args)

    def get(self, key: str, default: Any = None) -> Any:
        return self._args.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        value = self._args.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be an integer, got {value!r}") from None

    def __contains__(self, key: str) -> bool:
        return key in self._args

    def __repr__(self) -> str:
        return f"ModuleConfig({self._args!r})"
