# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from __future__ import annotations

import logging

from typing import TYPE_CHECKING, Optional, Union

from antlr4 import RuleContext
from antlr4.IntervalSet import IntervalSet
from antlr4.Token import Token

from .atn_state import ATNState, RuleStopState
from .context import InvocationContext
from .transition import AbstractPredicateTransition, NotSetTransition, RuleTransition, WildcardTransition

if TYPE_CHECKING:
    from .atn import ATN

logger = logging.getLogger(__name__)


class LookaheadAnalyzer:
    """
    LL(1) closure search over the ATN. Computes the set of symbols that can
    be matched next from a state, optionally following the return points of
    an invocation context beyond the end of the current rule.
    """

    # Special value added to the lookahead sets to indicate that we hit a
    # predicate during analysis if ``see_thru_preds`` is false.
    HIT_PRED = Token.INVALID_TYPE

    def __init__(self, atn: ATN) -> None:
        self.atn = atn

    def get_decision_lookahead(self, s: Optional[ATNState]) -> Optional[list[Optional[IntervalSet]]]:
        """
        Calculate the SLL(1) expected lookahead set for each outgoing
        transition of a decision state. The returned list has one element for
        each outgoing transition in ``s``. If the closure from transition
        ``i`` leads to a semantic predicate before matching a symbol, the
        element at index ``i`` of the result will be ``None``.

        :param s: The ATN state.
        :return: The expected symbols for each outgoing transition of ``s``.
        """
        if s is None:
            return None

        look: list[Optional[IntervalSet]] = []
        for alt, t in enumerate(s.transitions):
            alt_look = IntervalSet()
            self._look(t.target, None, InvocationContext.EMPTY, alt_look, set(), set(), False, False)
            # Wipe out lookahead for this alternative if we found nothing
            # or we had a predicate when we !see_thru_preds.
            if alt_look.intervals is None or self.HIT_PRED in alt_look:
                alt_look = None
            look.append(alt_look)
            logger.debug('Lookahead of alternative %d of state %d: %s', alt, s.state_number, alt_look)
        return look

    def look(self, s: ATNState, stop_state: Optional[ATNState] = None, ctx: Union[None, InvocationContext, RuleContext] = None) -> IntervalSet:
        """
        Compute the set of tokens that can follow ``s`` in the ATN in the
        specified ``ctx``.

        If ``ctx`` is ``None`` and the end of the rule containing ``s`` is
        reached, :attr:`Token.EPSILON` is added to the result set. If ``ctx``
        is not ``None`` and the end of the outermost rule is reached,
        :attr:`Token.EOF` is added to the result set.

        :param s: The ATN state.
        :param stop_state: The ATN state to stop at. This can be a
            :class:`~lookinator.runtime.BlockEndState` to detect epsilon paths
            through a closure.
        :param ctx: The complete parser context, or ``None`` if the context
            should be ignored.
        :return: The set of tokens that can follow ``s`` in the ATN in the
            specified ``ctx``.
        """
        r = IntervalSet()
        self._look(s, stop_state, InvocationContext.of(ctx), r, set(), set(), True, True)
        return r

    def _look(self, s, stop_state, ctx, look, look_busy, called_rule_stack, see_thru_preds, add_eof):
        """
        Compute the set of tokens that can follow ``s`` in the ATN in the
        specified ``ctx``. Recursion is guarded by ``look_busy`` (the
        ``(state, context)`` pairs already visited) and by
        ``called_rule_stack`` (the indices of the rules entered on the current
        path, which cuts off left recursion).
        """
        c = (s.state_number, ctx)
        if c in look_busy:
            return
        look_busy.add(c)

        if s is stop_state or isinstance(s, RuleStopState):
            if ctx is None:
                look.addOne(Token.EPSILON)
                return
            if ctx.is_empty and add_eof:
                look.addOne(Token.EOF)
                return

        if isinstance(s, RuleStopState) and not ctx.is_empty:
            # Run through all possible stack tops in ctx.
            removed = s.rule_index in called_rule_stack
            try:
                called_rule_stack.discard(s.rule_index)
                return_state = self.atn.follow_state(ctx.invoking_state)
                self._look(return_state, stop_state, ctx.parent, look, look_busy, called_rule_stack, see_thru_preds, add_eof)
            finally:
                if removed:
                    called_rule_stack.add(s.rule_index)
            return

        for t in s.transitions:
            if isinstance(t, RuleTransition):
                if t.target.rule_index in called_rule_stack:
                    continue

                new_ctx = InvocationContext(ctx, s.state_number)
                try:
                    called_rule_stack.add(t.target.rule_index)
                    self._look(t.target, stop_state, new_ctx, look, look_busy, called_rule_stack, see_thru_preds, add_eof)
                finally:
                    called_rule_stack.remove(t.target.rule_index)
            elif isinstance(t, AbstractPredicateTransition):
                if see_thru_preds:
                    self._look(t.target, stop_state, ctx, look, look_busy, called_rule_stack, see_thru_preds, add_eof)
                else:
                    look.addOne(self.HIT_PRED)
            elif t.is_epsilon:
                self._look(t.target, stop_state, ctx, look, look_busy, called_rule_stack, see_thru_preds, add_eof)
            elif isinstance(t, WildcardTransition):
                if self.atn.max_token_type >= Token.MIN_USER_TOKEN_TYPE:
                    look.addRange(range(Token.MIN_USER_TOKEN_TYPE, self.atn.max_token_type + 1))
            elif t.label is not None:
                label = t.label
                if isinstance(t, NotSetTransition):
                    # No user token types at all: the complement is empty.
                    if self.atn.max_token_type < Token.MIN_USER_TOKEN_TYPE:
                        continue
                    label = label.complement(Token.MIN_USER_TOKEN_TYPE, self.atn.max_token_type)
                look.addSet(label)
