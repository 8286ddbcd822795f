"""
certes: combinators, restartable lazy sequences and list utilities.
"""

from .combinators import (
    A, B, C, I, K, V, T, Th,
    apply, compose, flip, identity, constant, pair, apply_to,
)
from .common import noop
from .lazy import (
    LazySequence,
    generate, iterate, repeat,
    drop, take, prepend,
    collect, take_eager,
)
from .lists import (
    concat, find_last, flatten, includes, index_of,
    push, reduce_right, reverse, some,
)
from .models import CountArgument, Settings
from .utils import InvalidArgument, configure_logging

__version__ = "0.1.0"

__all__ = [
    "A", "B", "C", "I", "K", "V", "T", "Th",
    "apply", "compose", "flip", "identity", "constant", "pair", "apply_to",
    "noop",
    "LazySequence", "generate", "iterate", "repeat",
    "drop", "take", "prepend", "collect", "take_eager",
    "concat", "find_last", "flatten", "includes", "index_of",
    "push", "reduce_right", "reverse", "some",
    "CountArgument", "Settings", "InvalidArgument", "configure_logging",
]
