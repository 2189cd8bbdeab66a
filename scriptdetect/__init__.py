from scriptdetect.core import (
    SCRIPT_PREDICATES,
    Script,
    ScriptAggregator,
    detect_script,
    detect_script_details,
    is_stop_char,
    script_of,
)
from scriptdetect.models.entities import ScriptDetection
from scriptdetect.runtime import ShardingConfig
from scriptdetect.settings import configure_logging

__all__ = [
    "Script",
    "SCRIPT_PREDICATES",
    "ScriptAggregator",
    "ScriptDetection",
    "ShardingConfig",
    "configure_logging",
    "detect_script",
    "detect_script_details",
    "is_stop_char",
    "script_of",
]
