from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class VennConfig:
    width: int = 500
    height: int = 500
    padding: int = 15
    default_opacity: float = 0.5
    stroke: str = "#fff"
    stroke_width: int = 3

    def merged(self, overrides: Mapping[str, Any]) -> VennConfig:
        """Return a copy with *overrides* applied; unknown keys raise ValueError."""
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown venn config key(s): {', '.join(unknown)}")
        return dataclasses.replace(self, **overrides)
