"""Generic sequence primitives: affixes, periods, matching and substitution."""

from .view import (
    EmptyPatternError,
    PerformanceWarning,
    SequenceView,
    window,
)
from .affix import (
    common_prefix,
    common_prefix_length,
    common_suffix,
    common_suffix_length,
)
from .period import (
    is_period,
    least_common_period,
    least_common_slice,
)
from .matching import (
    count_occurrences,
    first_range,
    ranges,
)
from .substitution import replacing_occurrences

__all__ = [
    "EmptyPatternError",
    "PerformanceWarning",
    "SequenceView",
    "window",
    "common_prefix",
    "common_prefix_length",
    "common_suffix",
    "common_suffix_length",
    "is_period",
    "least_common_period",
    "least_common_slice",
    "count_occurrences",
    "first_range",
    "ranges",
    "replacing_occurrences",
]
