"""Option resolution.

The visualization flags overlap the way GNU cat's do:
- -A turns on everything
- -t and -e turn on tabs and line ends outright
- -T and -E only count when the -v gate is also set

Resolution is pure: the same FlagSet always gives the same OutputOptions.
"""

from __future__ import annotations
import argparse
import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlagSet:
    """Raw flag values as they came off the command line."""
    all: bool = False
    show_end: bool = False
    show_tab: bool = False
    show_end_partial: bool = False
    show_tab_partial: bool = False
    show_non_printing: bool = False

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> FlagSet:
        return cls(
            all=ns.all,
            show_end=ns.show_end,
            show_tab=ns.show_tab,
            show_end_partial=ns.show_end_partial,
            show_tab_partial=ns.show_tab_partial,
            show_non_printing=ns.show_non_printing,
        )


@dataclass(frozen=True)
class OutputOptions:
    show_tabs: bool = False
    show_ends: bool = False

    @property
    def passthrough(self) -> bool:
        return not (self.show_tabs or self.show_ends)


def resolve(flags: FlagSet) -> OutputOptions:
    """Collapse a FlagSet into the transformations that actually apply."""
    gate = flags.show_non_printing
    opts = OutputOptions(
        show_tabs=flags.all or flags.show_tab or (gate and flags.show_tab_partial),
        show_ends=flags.all or flags.show_end or (gate and flags.show_end_partial),
    )
    log.debug("resolved %s -> %s", flags, opts)
    return opts
