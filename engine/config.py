"""Rules configuration."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

from engine.pieces import Side


@dataclass(frozen=True)
class RulesConfig:
    """Tunable rule constants for one match."""

    opening_budget: int = 2
    normal_budget: int = 3
    first_side: Side = Side.BLUE
    # Landing a jump on a trap cell; older builds disagreed on this.
    allow_jump_onto_trap: bool = True

    def __post_init__(self) -> None:
        if self.opening_budget < 1 or self.normal_budget < 1:
            raise ValueError("Move budgets must be at least 1")
        if not isinstance(self.allow_jump_onto_trap, bool):
            raise ValueError(f"allow_jump_onto_trap must be true or false, got {self.allow_jump_onto_trap!r}")

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RulesConfig":
        defaults = cls()
        return cls(
            opening_budget=int(payload.get("opening_budget", defaults.opening_budget)),
            normal_budget=int(payload.get("normal_budget", defaults.normal_budget)),
            first_side=Side(payload.get("first_side", defaults.first_side.value)),
            allow_jump_onto_trap=payload.get("allow_jump_onto_trap", defaults.allow_jump_onto_trap),
        )

    @classmethod
    def from_json(cls, path: str | Path) -> "RulesConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.from_dict(payload)

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["first_side"] = self.first_side.value
        return payload
