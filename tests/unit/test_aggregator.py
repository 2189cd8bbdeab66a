from __future__ import annotations

import pytest

from scriptdetect.core import aggregator as aggregator_module
from scriptdetect.core.aggregator import ScriptAggregator, detect_script, detect_script_details, get_default_aggregator
from scriptdetect.core.predicates import SCRIPT_PREDICATES, is_cyrillic, is_latin
from scriptdetect.core.scripts import Script
from scriptdetect.core.stop_chars import is_stop_char
from scriptdetect.runtime import sharding as sharding_module
from scriptdetect.runtime.sharding import ShardingConfig
from scriptdetect.settings import Settings


def _sequential() -> ScriptAggregator:
    return ScriptAggregator(ShardingConfig.sequential())


def test_detect_script_single_script() -> None:
    assert detect_script("Hello!") is Script.LATIN
    assert detect_script("Привет всем!") is Script.CYRILLIC
    assert detect_script("ქართული ენა მსოფლიო ") is Script.GEORGIAN
    assert detect_script("県見夜上温国阪題富販") is Script.MANDARIN
    assert detect_script(" ككل حوالي 1.6، ومعظم الناس ") is Script.ARABIC
    assert detect_script("हिमालयी वन चिड़िया (जूथेरा सालिमअली) चिड़िया की एक प्रजाति है") is Script.DEVANAGARI
    assert detect_script("היסטוריה והתפתחות של האלפבית העברי") is Script.HEBREW
    assert detect_script("የኢትዮጵያ ፌዴራላዊ ዴሞክራሲያዊሪፐብሊክ") is Script.ETHIOPIC
    assert detect_script("Η ελληνική γλώσσα") is Script.GREEK
    assert detect_script("ภาษาไทย") is Script.THAI


def test_detect_script_mixed_scripts() -> None:
    assert detect_script("Привет! Текст на русском with some English.") is Script.CYRILLIC
    assert detect_script("Russian word любовь means love.") is Script.LATIN


def test_detect_script_without_script_characters_returns_none() -> None:
    assert detect_script("1234567890-,;!") is None
    assert detect_script("") is None
    assert detect_script("   \n\t") is None
    assert detect_script("€€€") is None


def test_detect_script_is_idempotent() -> None:
    text = "Russian word любовь means love."
    assert detect_script(text) is detect_script(text)


def test_details_for_majority_without_early_exit() -> None:
    details = _sequential().detect("Привет! Текст на русском with some English.")

    assert details.script is Script.CYRILLIC
    assert details.early_exit is False
    assert details.total_chars == 43
    assert details.threshold == 21
    assert details.shard_count == 1
    assert details.counts[Script.CYRILLIC] == 20
    assert details.counts[Script.LATIN] == 15
    assert sum(details.counts.values()) == 35


def test_details_for_early_exit_stop_counting() -> None:
    details = _sequential().detect("Hello!")

    assert details.script is Script.LATIN
    assert details.early_exit is True
    assert details.threshold == 3
    # Folding stops at the fourth Latin letter.
    assert details.counts[Script.LATIN] == 4


def test_details_for_text_without_scripts() -> None:
    details = _sequential().detect("1234567890-,;!")

    assert details.script is None
    assert details.early_exit is False
    assert set(details.counts) == set(Script)
    assert not any(details.counts.values())


def test_majority_over_half_of_all_characters_wins() -> None:
    details = _sequential().detect("abcdжжжжжж")

    assert details.script is Script.CYRILLIC
    assert details.early_exit is True
    assert details.counts[Script.LATIN] == 4


def test_stop_characters_count_towards_threshold() -> None:
    # 4 Latin letters out of 10 characters never pass the threshold of 5.
    details = _sequential().detect("abcd      ")

    assert details.script is Script.LATIN
    assert details.early_exit is False


def test_tie_prefers_later_table_entry() -> None:
    assert _sequential().detect_script("abвг") is Script.CYRILLIC
    assert _sequential().detect_script("вгab") is Script.CYRILLIC
    # Greek follows Latin in the table even though it sorts earlier by name.
    assert _sequential().detect_script("αβab") is Script.GREEK


def test_unmatched_characters_do_not_count() -> None:
    details = _sequential().detect("€€€a")

    assert details.script is Script.LATIN
    assert details.early_exit is False
    assert sum(details.counts.values()) == 1


def test_early_exit_during_tree_reduction() -> None:
    # Shards fold independently on the pool, so only the merge sees a majority.
    agg = ScriptAggregator(ShardingConfig(enabled=True, max_shards=4, min_shard_chars=4, max_workers=4))
    details = agg.detect("aaaa" "aaaa" "aaa " "ж   ")

    assert details.shard_count == 4
    assert details.threshold == 8
    assert details.script is Script.LATIN
    assert details.early_exit is True
    assert details.counts[Script.LATIN] == 11
    assert details.counts[Script.CYRILLIC] == 1


def test_early_exit_inside_shard() -> None:
    # 21 chars split 11 + 10; the first shard alone passes the threshold of 10.
    agg = ScriptAggregator(ShardingConfig(enabled=True, max_shards=2, min_shard_chars=10, max_workers=1))
    details = agg.detect("ж" * 11 + "abcdefghij")

    assert details.shard_count == 2
    assert details.threshold == 10
    assert details.script is Script.CYRILLIC
    assert details.early_exit is True
    assert details.counts[Script.CYRILLIC] == 11
    assert details.counts[Script.LATIN] == 0


def _counting_stop(calls: list[str]):
    def _is_stop(char: str) -> bool:
        calls.append(char)
        return is_stop_char(char)

    return _is_stop


def test_default_config_stops_scanning_at_majority() -> None:
    calls: list[str] = []
    agg = ScriptAggregator(ShardingConfig.from_settings(Settings(_env_file=None)), is_stop=_counting_stop(calls))
    details = agg.detect("ж" * 100_000)

    assert details.shard_count == 1
    assert details.script is Script.CYRILLIC
    assert details.early_exit is True
    assert len(calls) == 50_001


def test_sequential_shards_stop_scanning_at_majority() -> None:
    calls: list[str] = []
    agg = ScriptAggregator(
        ShardingConfig(enabled=True, max_shards=8, min_shard_chars=4096, max_workers=1),
        is_stop=_counting_stop(calls),
    )
    details = agg.detect("ж" * 100_000)

    assert details.shard_count == 8
    assert details.early_exit is True
    assert details.counts[Script.CYRILLIC] == 50_001
    assert len(calls) == 50_001


def test_threaded_and_sequential_runs_agree() -> None:
    threaded = ScriptAggregator(ShardingConfig(enabled=True, max_shards=4, min_shard_chars=8, max_workers=4))
    sequential = _sequential()
    texts = [
        "",
        "Hello!",
        "1234567890-,;!",
        "Привет! Текст на русском with some English." * 3,
        "Russian word любовь means love. " * 7,
        "abвг" * 20,
        "県見夜上温国阪題富販 ひらがな カタカナ" * 5,
        "aaaa" "aaaa" "aaa " "ж   ",
    ]
    for text in texts:
        assert threaded.detect_script(text) is sequential.detect_script(text), text


def test_large_homogeneous_document() -> None:
    agg = ScriptAggregator(ShardingConfig(enabled=True, max_shards=8, min_shard_chars=1024, max_workers=4))
    details = agg.detect("Привет всем! " * 2000)

    assert details.shard_count == 8
    assert details.script is Script.CYRILLIC
    assert details.early_exit is True


def test_custom_stop_predicate() -> None:
    agg = ScriptAggregator(ShardingConfig.sequential(), is_stop=lambda ch: ch == "a")
    assert agg.detect_script("aaaж") is Script.CYRILLIC
    assert agg.detect_script("aaaa") is None


def test_custom_table_first_match_wins() -> None:
    table = tuple(
        (script, (lambda ch: is_latin(ch) or is_cyrillic(ch)) if script is Script.LATIN else predicate)
        for script, predicate in SCRIPT_PREDICATES
    )
    agg = ScriptAggregator(ShardingConfig.sequential(), table=table)
    assert agg.detect_script("жжж") is Script.LATIN


def test_incomplete_table_is_rejected() -> None:
    with pytest.raises(ValueError, match="missing scripts"):
        ScriptAggregator(ShardingConfig.sequential(), table=SCRIPT_PREDICATES[1:])


def test_default_aggregator_reads_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        sharding_module,
        "settings",
        Settings(_env_file=None, sharding_enabled=True, max_shards=3, min_shard_chars=2, max_workers=1),
    )
    get_default_aggregator.cache_clear()
    try:
        agg = get_default_aggregator()
        assert agg.config == ShardingConfig(enabled=True, max_shards=3, min_shard_chars=2, max_workers=1)
        details = detect_script_details("Привет всем!")
        assert details.shard_count == 3
        assert details.script is Script.CYRILLIC
        assert aggregator_module.get_default_aggregator() is agg
    finally:
        get_default_aggregator.cache_clear()
