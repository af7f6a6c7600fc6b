"""Kernel layer - pure abstractions for kinetic."""

from kinetic.kernel.behavior import Behavior, create, lift, select
from kinetic.kernel.errors import NothingError
from kinetic.kernel.option import (
    Option,
    bind,
    from_nullable,
    map_option,
    match_none,
    match_some,
    none,
    some,
)
from kinetic.kernel.trace import Evidence, Trace

__all__ = [
    "Behavior",
    "create",
    "lift",
    "select",
    # Option
    "Option",
    "none",
    "some",
    "from_nullable",
    "match_none",
    "match_some",
    "bind",
    "map_option",
    "NothingError",
    # Tracing
    "Evidence",
    "Trace",
]
