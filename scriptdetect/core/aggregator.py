from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable

from scriptdetect.core.predicates import SCRIPT_PREDICATES, ScriptPredicate, classify_index, validate_predicate_table
from scriptdetect.core.scripts import Script
from scriptdetect.core.stop_chars import is_stop_char
from scriptdetect.models.entities import ScriptDetection
from scriptdetect.runtime.sharding import ShardingConfig, ShardWindow, build_shards

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _ShardTally:
    counts: list[int]
    winner: int | None = None


class ScriptAggregator:
    """
    Majority vote over the scripts of a text.

    Every shard folds its characters into a private count vector and stops as
    soon as one slot exceeds half of the whole text length. Sequential runs
    add the totals of earlier shards to that check. Shard vectors are then
    merged pairwise, level by level, with the same check after each
    merge. Without an early winner the largest count wins and ties go to the
    later entry of the predicate table.

    An early winner holds more than half of all characters, so at most one
    script can trigger it and sharding never changes which one.
    """

    def __init__(
        self,
        config: ShardingConfig | None = None,
        *,
        is_stop: Callable[[str], bool] = is_stop_char,
        table: tuple[tuple[Script, ScriptPredicate], ...] = SCRIPT_PREDICATES,
    ) -> None:
        validate_predicate_table(table)
        self._config = (config or ShardingConfig.from_settings()).normalized()
        self._is_stop = is_stop
        self._table = tuple(table)

    @property
    def config(self) -> ShardingConfig:
        return self._config

    def _fold_shard(
        self,
        text: str,
        window: ShardWindow,
        half: int,
        carried: list[int] | None = None,
    ) -> _ShardTally:
        # `carried` holds the totals of the shards already folded before this
        # one; it is only read, never updated.
        counts = [0] * len(self._table)
        offset = carried or [0] * len(self._table)
        is_stop = self._is_stop
        table = self._table
        for idx in range(window.start, window.end):
            char = text[idx]
            if is_stop(char):
                continue
            slot = classify_index(char, table)
            if slot is None:
                continue
            counts[slot] += 1
            if counts[slot] + offset[slot] > half:
                return _ShardTally(counts=counts, winner=slot)
        return _ShardTally(counts=counts)

    def _run_shards(self, text: str, windows: list[ShardWindow], half: int) -> list[_ShardTally]:
        # Tallies are consumed in shard order and collection stops at the
        # first early winner, for both execution paths. The sequential path
        # checks the running total, so it stops as early as a single pass.
        tallies: list[_ShardTally] = []
        if len(windows) <= 1 or self._config.max_workers <= 1:
            carried = [0] * len(self._table)
            for window in windows:
                tally = self._fold_shard(text, window, half, carried)
                tallies.append(tally)
                if tally.winner is not None:
                    break
                carried = [left + right for left, right in zip(carried, tally.counts)]
            return tallies

        with ThreadPoolExecutor(max_workers=min(self._config.max_workers, len(windows))) as ex:
            futures = [ex.submit(self._fold_shard, text, window, half) for window in windows]
            for future in futures:
                tally = future.result()
                tallies.append(tally)
                if tally.winner is not None:
                    for pending in futures:
                        pending.cancel()
                    break
        return tallies

    def _reduce(self, tallies: list[_ShardTally], half: int) -> tuple[list[int], int | None]:
        level = [tally.counts for tally in tallies]
        if not level:
            return [0] * len(self._table), None

        while len(level) > 1:
            merged: list[list[int]] = []
            for idx in range(0, len(level), 2):
                if idx + 1 == len(level):
                    merged.append(level[idx])
                    continue
                combined = [left + right for left, right in zip(level[idx], level[idx + 1])]
                for slot, count in enumerate(combined):
                    if count > half:
                        return combined, slot
                merged.append(combined)
            level = merged
        return level[0], None

    def _select_maximum(self, counts: list[int]) -> int | None:
        if not any(counts):
            return None
        best = 0
        for slot, count in enumerate(counts):
            if count >= counts[best]:
                best = slot
        return best

    def detect(self, text: str) -> ScriptDetection:
        text = text or ""
        total = len(text)
        half = total // 2
        windows = build_shards(total, self._config)
        tallies = self._run_shards(text, windows, half)

        early_exit = bool(tallies) and tallies[-1].winner is not None
        if early_exit:
            counts = [sum(column) for column in zip(*(tally.counts for tally in tallies))]
            winner = tallies[-1].winner
        else:
            counts, winner = self._reduce(tallies, half)
            early_exit = winner is not None

        if winner is None:
            winner = self._select_maximum(counts)
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "early winner %s after %d/%d shards (threshold=%d)",
                self._table[winner][0],
                len(tallies),
                len(windows),
                half,
            )

        return ScriptDetection(
            script=self._table[winner][0] if winner is not None else None,
            total_chars=total,
            threshold=half,
            early_exit=early_exit,
            shard_count=len(windows),
            counts={script: counts[slot] for slot, (script, _) in enumerate(self._table)},
        )

    def detect_script(self, text: str) -> Script | None:
        return self.detect(text).script


@lru_cache(maxsize=1)
def get_default_aggregator() -> ScriptAggregator:
    return ScriptAggregator(ShardingConfig.from_settings())


def detect_script(text: str) -> Script | None:
    """
    Return the dominant script of `text`, or None when no character belongs
    to a known script.

    >>> detect_script("Благодаря Эсперанто вы обрётете друзей по всему миру!")
    Script.CYRILLIC
    """
    return get_default_aggregator().detect_script(text)


def detect_script_details(text: str) -> ScriptDetection:
    return get_default_aggregator().detect(text)
