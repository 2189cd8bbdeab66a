from scriptdetect.core.aggregator import ScriptAggregator, detect_script, detect_script_details
from scriptdetect.core.predicates import SCRIPT_PREDICATES, script_of
from scriptdetect.core.scripts import Script
from scriptdetect.core.stop_chars import is_stop_char

__all__ = [
    "Script",
    "SCRIPT_PREDICATES",
    "ScriptAggregator",
    "detect_script",
    "detect_script_details",
    "is_stop_char",
    "script_of",
]
