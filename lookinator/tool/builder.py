# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from __future__ import annotations

import logging

from itertools import zip_longest
from typing import Iterable, Optional

from antlr4.atn.LexerAction import LexerAction
from antlr4.IntervalSet import IntervalSet

from ..runtime import (ATN, ATNState, ATNType, ActionTransition, AtomTransition, BasicBlockStartState, BasicState, BlockEndState,
                       BlockStartState, DecisionState, EpsilonTransition, LoopEndState, MalformedATNError, NotSetTransition,
                       PlusBlockStartState, PrecedencePredicateTransition, PredicateTransition, RangeTransition, RuleStartState,
                       RuleStopState, RuleTransition, SetTransition, StarLoopbackState, StarLoopEntryState, TokensStartState,
                       Transition, WildcardTransition)

logger = logging.getLogger(__name__)


class ATNBuilder:
    """
    Helper to assemble an :class:`~lookinator.runtime.ATN` in code, following
    the same construction steps as a deserializer: states are numbered in
    creation order, rule and decision indices are assigned densely, and the
    stop state of every invoked rule gets an epsilon transition back to the
    follow state of the invocation.
    """

    def __init__(self, grammar_type: ATNType = ATNType.PARSER, max_token_type: int = 0, *, generate_rule_bypass_transitions: bool = False) -> None:
        """
        :param grammar_type: The flavor of the ATN to build.
        :param max_token_type: The maximum token type of the vocabulary.
        :param generate_rule_bypass_transitions: Allocate the rule to token
            type table for parser ATNs as well.
        """
        self.atn = ATN(grammar_type, max_token_type)
        if generate_rule_bypass_transitions and self.atn.rule_to_token_type is None:
            self.atn.rule_to_token_type = []

    def state(self, cls: type[ATNState] = BasicState, rule_index: int = -1) -> ATNState:
        """
        Create a state of class ``cls`` and add it to the ATN.
        """
        state = cls(rule_index)
        self.atn.add_state(state)
        return state

    def rule(self, token_type: int = 0) -> tuple[RuleStartState, RuleStopState]:
        """
        Create the start and stop states of the next rule.

        :param token_type: The token type of the rule (used by lexer ATNs and
            by parser ATNs with rule bypass transitions).
        :return: The start and stop state of the new rule.
        """
        rule_index = len(self.atn.rule_to_start_state)
        start = self.state(RuleStartState, rule_index)
        stop = self.state(RuleStopState, rule_index)
        start.stop_state = stop
        self.atn.rule_to_start_state.append(start)
        self.atn.rule_to_stop_state.append(stop)
        if self.atn.rule_to_token_type is not None:
            self.atn.rule_to_token_type.append(token_type)
        logger.debug('Rule %d: start state %d, stop state %d.', rule_index, start.state_number, stop.state_number)
        return start, stop

    def block(self, rule_index: int, cls: type[BlockStartState] = BasicBlockStartState) -> tuple[BlockStartState, BlockEndState]:
        """
        Create the linked start and end states of a block and define the
        start state as a decision.
        """
        start = self.state(cls, rule_index)
        end = self.state(BlockEndState, rule_index)
        start.end_state = end
        end.start_state = start
        self.decision(start)
        return start, end

    def decision(self, state: DecisionState) -> int:
        return self.atn.define_decision_state(state)

    def mode(self, start: TokensStartState, name: Optional[str] = None) -> int:
        self.decision(start)
        return self.atn.define_mode(start, name)

    def lexer_action(self, action: LexerAction) -> int:
        """
        Register a lexer action and return its index.
        """
        self.atn.lexer_actions.append(action)
        return len(self.atn.lexer_actions) - 1

    def transition(self, frm: ATNState, t: Transition) -> Transition:
        frm.add_transition(t)
        return t

    def epsilon(self, frm: ATNState, to: ATNState, outermost_precedence_return: int = -1) -> Transition:
        return self.transition(frm, EpsilonTransition(to, outermost_precedence_return))

    def atom(self, frm: ATNState, to: ATNState, token: int) -> Transition:
        return self.transition(frm, AtomTransition(to, token))

    def interval(self, frm: ATNState, to: ATNState, start: int, stop: int) -> Transition:
        return self.transition(frm, RangeTransition(to, start, stop))

    def token_set(self, frm: ATNState, to: ATNState, tokens: Iterable[int]) -> Transition:
        return self.transition(frm, SetTransition(to, self._interval_set(tokens)))

    def not_token_set(self, frm: ATNState, to: ATNState, tokens: Iterable[int]) -> Transition:
        return self.transition(frm, NotSetTransition(to, self._interval_set(tokens)))

    def wildcard(self, frm: ATNState, to: ATNState) -> Transition:
        return self.transition(frm, WildcardTransition(to))

    def predicate(self, frm: ATNState, to: ATNState, pred_index: int, is_ctx_dependent: bool = False) -> Transition:
        return self.transition(frm, PredicateTransition(to, frm.rule_index, pred_index, is_ctx_dependent))

    def precedence(self, frm: ATNState, to: ATNState, precedence: int) -> Transition:
        return self.transition(frm, PrecedencePredicateTransition(to, precedence))

    def action(self, frm: ATNState, to: ATNState, action_index: int = -1, is_ctx_dependent: bool = False) -> Transition:
        return self.transition(frm, ActionTransition(to, frm.rule_index, action_index, is_ctx_dependent))

    def call(self, frm: ATNState, rule_index: int, follow: ATNState, precedence: int = 0) -> RuleTransition:
        """
        Invoke rule ``rule_index`` from ``frm``, continuing at ``follow`` once
        it returns. ``frm`` becomes the invoking state of the call.
        """
        start = self.atn.get_rule_to_start_state(rule_index)
        t = RuleTransition(start, rule_index, precedence, follow)
        self.transition(frm, t)

        outermost_precedence_return = rule_index if start.is_left_recursive_rule and precedence == 0 else -1
        self.epsilon(self.atn.get_rule_to_stop_state(rule_index), follow, outermost_precedence_return)
        return t

    def build(self, verify: bool = True) -> ATN:
        """
        Finish the construction.

        :param verify: Check the structural invariants of the ATN with
            :func:`verify_atn`.
        :return: The constructed ATN.
        """
        if verify:
            verify_atn(self.atn)
        logger.debug('Built %s ATN with %d states, %d rules and %d decisions.',
                     self.atn.grammar_type.name.lower(), len(self.atn.states), len(self.atn.rule_to_start_state), len(self.atn.decision_to_state))
        return self.atn

    @staticmethod
    def _interval_set(tokens: Iterable[int]) -> IntervalSet:
        iset = IntervalSet()
        for token in tokens:
            iset.addOne(token)
        return iset


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise MalformedATNError(message)


def verify_atn(atn: ATN) -> None:
    """
    Check the structural invariants of a fully constructed ATN.

    :raises MalformedATNError: at the first violated invariant.
    """
    for r, (start, stop) in enumerate(zip_longest(atn.rule_to_start_state, atn.rule_to_stop_state)):
        _check(start is not None, f'Rule {r} has no start state.')
        _check(stop is not None, f'Rule {r} has no stop state.')
        _check(start.stop_state is stop, f'Start state of rule {r} is not linked to its stop state.')

    for decision, state in enumerate(atn.decision_to_state):
        _check(state.decision == decision, f'State {state.state_number} is registered as decision {decision} but it is stamped with {state.decision}.')

    for state in atn.states:
        if state is None:
            continue

        n = state.state_number
        _check(state.epsilon_only_transitions or len(state.transitions) <= 1, f'State {n} has both epsilon and non-epsilon transitions.')

        for i, t in enumerate(state.transitions):
            if isinstance(t, RuleTransition):
                _check(i == 0 and len(state.transitions) == 1, f'Rule invocation in state {n} is not its only transition.')
                _check(t.follow_state is not None, f'Rule invocation in state {n} has no follow state.')

        if isinstance(state, PlusBlockStartState):
            _check(state.loop_back_state is not None, f'Plus block start state {n} has no loop back state.')

        if isinstance(state, StarLoopEntryState):
            _check(state.loop_back_state is not None, f'Star loop entry state {n} has no loop back state.')
            _check(len(state.transitions) == 2, f'Star loop entry state {n} must have exactly two transitions.')

        if isinstance(state, StarLoopbackState):
            _check(len(state.transitions) == 1 and isinstance(state.transitions[0].target, StarLoopEntryState),
                   f'Star loop back state {n} must point to a star loop entry state.')

        if isinstance(state, LoopEndState):
            _check(state.loop_back_state is not None, f'Loop end state {n} has no loop back state.')

        if isinstance(state, RuleStartState):
            _check(state.stop_state is not None, f'Rule start state {n} has no stop state.')

        if isinstance(state, BlockStartState):
            _check(state.end_state is not None, f'Block start state {n} has no end state.')

        if isinstance(state, BlockEndState):
            _check(state.start_state is not None, f'Block end state {n} has no start state.')

        if isinstance(state, DecisionState):
            _check(len(state.transitions) <= 1 or state.decision >= 0, f'Decision state {n} has no decision number.')
        else:
            _check(len(state.transitions) <= 1 or isinstance(state, RuleStopState), f'State {n} has multiple transitions but it is not a decision state.')
