# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from antlr4.error.Errors import IllegalStateException
from antlr4.IntervalSet import IntervalSet


class ReadOnlyIntervalSet(IntervalSet):
    """
    Frozen snapshot of an :class:`antlr4.IntervalSet.IntervalSet`. Every
    mutator raises :exc:`antlr4.error.Errors.IllegalStateException`, so the
    set can be shared between threads.
    """

    def __init__(self, iset=None):
        """
        :param ~antlr4.IntervalSet.IntervalSet iset: The set to copy (default:
            empty set).
        """
        super().__init__()
        if iset is not None and iset.intervals:
            self.intervals = tuple(iset.intervals)
        self.readonly = True

    def _read_only(self, *args, **kwargs):
        raise IllegalStateException("can't alter readonly IntervalSet")

    addOne = _read_only
    addRange = _read_only
    addSet = _read_only
    reduce = _read_only
    removeRange = _read_only
    removeOne = _read_only
