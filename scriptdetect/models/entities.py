from __future__ import annotations

from dataclasses import dataclass, field

from scriptdetect.core.scripts import Script


@dataclass(slots=True)
class ScriptDetection:
    script: Script | None
    total_chars: int
    threshold: int
    early_exit: bool = False
    shard_count: int = 0
    counts: dict[Script, int] = field(default_factory=dict)
