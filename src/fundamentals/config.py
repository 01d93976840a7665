from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FundamentalsConfig:
    json_indent: int | None = None  # None renders compact output
    json_sort_keys: bool = False
    json_ensure_ascii: bool = False

    @property
    def json_separators(self) -> tuple[str, str]:
        """Separators matching JSON.stringify when not indenting."""
        if self.json_indent is None:
            return (",", ":")
        return (",", ": ")


DEFAULT_CONFIG = FundamentalsConfig()
