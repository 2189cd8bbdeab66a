from __future__ import annotations

import logging
from dataclasses import dataclass

from scriptdetect.settings import Settings, settings

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ShardingConfig:
    enabled: bool = False
    max_shards: int = 8
    min_shard_chars: int = 4096
    max_workers: int = 4

    def normalized(self) -> ShardingConfig:
        return ShardingConfig(
            enabled=bool(self.enabled),
            max_shards=max(1, int(self.max_shards)),
            min_shard_chars=max(1, int(self.min_shard_chars)),
            max_workers=max(1, int(self.max_workers)),
        )

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> ShardingConfig:
        cfg = source or settings
        return cls(
            enabled=cfg.sharding_enabled,
            max_shards=cfg.max_shards,
            min_shard_chars=cfg.min_shard_chars,
            max_workers=cfg.max_workers,
        ).normalized()

    @classmethod
    def sequential(cls) -> ShardingConfig:
        return cls(enabled=False, max_shards=1, max_workers=1)


@dataclass(slots=True, frozen=True)
class ShardWindow:
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


def build_shards(text_length: int, config: ShardingConfig) -> list[ShardWindow]:
    """
    Split `[0, text_length)` into contiguous, ordered windows.

    Windows never overlap and always cover the whole range. The split depends
    only on the length and the config, so reduction order is reproducible.
    """
    cfg = config.normalized()
    length = max(0, int(text_length))
    if length == 0:
        return []
    if not cfg.enabled or length <= cfg.min_shard_chars:
        return [ShardWindow(start=0, end=length)]

    shard_count = min(cfg.max_shards, -(-length // cfg.min_shard_chars))
    base, remainder = divmod(length, shard_count)

    windows: list[ShardWindow] = []
    start = 0
    for idx in range(shard_count):
        # Earlier windows absorb the remainder.
        size = base + (1 if idx < remainder else 0)
        windows.append(ShardWindow(start=start, end=start + size))
        start += size

    logger.debug("planned %d shards for %d chars", len(windows), length)
    return windows
