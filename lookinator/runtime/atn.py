# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from __future__ import annotations

import logging

from enum import IntEnum
from typing import Optional, Union

from antlr4 import RuleContext
from antlr4.atn.LexerAction import LexerAction
from antlr4.IntervalSet import IntervalSet
from antlr4.Token import Token

from .atn_state import ATNState, DecisionState, RuleStartState, RuleStopState, TokensStartState
from .context import InvocationContext
from .errors import InvalidStateNumberError, MalformedATNError
from .interval_set import ReadOnlyIntervalSet
from .ll1_analyzer import LookaheadAnalyzer
from .transition import RuleTransition

logger = logging.getLogger(__name__)

# Alternative number of a context whose alternative is not (yet) known.
INVALID_ALT_NUMBER = 0

ContextType = Union[None, InvocationContext, RuleContext]


class ATNType(IntEnum):
    """
    Flavor of the ATN. Combined grammars are compiled into a lexer and a
    parser ATN.
    """
    LEXER = 0
    PARSER = 1


class ATN:
    """
    Augmented Transition Network: the graph of states and transitions
    encoding the rules (and for lexers, the modes) of a grammar.

    The graph is populated once by a single writer (a deserializer or
    :class:`~lookinator.tool.ATNBuilder`) and is shared read-only between
    any number of threads afterwards. The only state mutated after
    construction is the per-state cache of
    :meth:`next_tokens_no_context`, which is guarded by per-state locks.
    """

    def __init__(self, grammar_type: ATNType, max_token_type: int) -> None:
        """
        :param grammar_type: The flavor of the ATN.
        :param max_token_type: The maximum value for any symbol recognized by
            a transition in the ATN.

        :ivar list[ATNState] states: All states of the ATN, indexed by state
            number. Removed states leave a ``None`` slot behind.
        :ivar list[DecisionState] decision_to_state: The decision points of
            all rules, subrules, optional blocks, ``()+``, ``()*``, etc.,
            indexed by decision number.
        :ivar list[RuleStartState] rule_to_start_state: Rule index to rule
            start state mapping.
        :ivar list[RuleStopState] rule_to_stop_state: Rule index to rule stop
            state mapping.
        :ivar rule_to_token_type: For lexer ATNs, maps the rule index to the
            resulting token type. For parser ATNs, maps the rule index to the
            generated bypass token type if rule bypass transitions were
            requested, and it is ``None`` otherwise.
        :ivar list[TokensStartState] mode_to_start_state: Start states of the
            lexer modes, indexed by mode ordinal.
        :ivar dict[str, TokensStartState] mode_name_to_start_state: Start
            states of the lexer modes, indexed by mode name.
        :ivar list[LexerAction] lexer_actions: Actions referenced by the
            action transitions of lexer ATNs.
        """
        self.grammar_type: ATNType = ATNType(grammar_type)
        self.max_token_type: int = max_token_type
        self.states: list[Optional[ATNState]] = []
        self.decision_to_state: list[DecisionState] = []
        self.rule_to_start_state: list[Optional[RuleStartState]] = []
        self.rule_to_stop_state: list[Optional[RuleStopState]] = []
        self.rule_to_token_type: Optional[list[int]] = [] if self.is_lexer else None
        self.mode_to_start_state: list[TokensStartState] = []
        self.mode_name_to_start_state: dict[str, TokensStartState] = {}
        self.lexer_actions: list[LexerAction] = []

    @property
    def is_lexer(self) -> bool:
        return self.grammar_type == ATNType.LEXER

    def next_tokens_in_context(self, s: ATNState, ctx: ContextType) -> IntervalSet:
        """
        Compute the set of valid tokens that can occur starting in ``s``. If
        ``ctx`` is ``None``, the set of tokens will not include what can
        follow the rule surrounding ``s``. In other words, the set will be
        restricted to tokens reachable staying within the rule of ``s``.
        """
        return LookaheadAnalyzer(self).look(s, None, ctx)

    def next_tokens_no_context(self, s: ATNState) -> IntervalSet:
        """
        Compute the set of valid tokens that can occur starting in ``s`` and
        staying in the same rule. :attr:`Token.EPSILON` is in the set if the
        end of the rule is reachable.

        The result is computed at most once per state and cached on the
        state. The cached set is read-only: its mutators raise
        :exc:`antlr4.error.Errors.IllegalStateException`.
        """
        iset = s.next_token_within_rule
        if iset is not None:
            return iset

        with s.next_token_lock:
            if s.next_token_within_rule is None:
                iset = ReadOnlyIntervalSet(self.next_tokens_in_context(s, None))
                s.next_token_within_rule = iset
                logger.debug('Next tokens within rule %d from state %d: %s', s.rule_index, s.state_number, iset)
            return s.next_token_within_rule

    def next_tokens(self, s: ATNState, ctx: ContextType = None) -> IntervalSet:
        """
        Compute the set of valid tokens starting in ``s``, by calling either
        :meth:`next_tokens_no_context` (if ``ctx`` is ``None`` or the empty
        root context) or :meth:`next_tokens_in_context` (otherwise).
        """
        ctx = InvocationContext.of(ctx)
        if ctx is None or ctx.is_empty:
            return self.next_tokens_no_context(s)
        return self.next_tokens_in_context(s, ctx)

    def add_state(self, state: Optional[ATNState]) -> None:
        """
        Append ``state`` to the ATN and stamp it with the next state number.
        ``None`` reserves an unpopulated slot.
        """
        if state is not None:
            state.atn = self
            state.state_number = len(self.states)
        self.states.append(state)

    def remove_state(self, state_number: int) -> None:
        """
        Clear the slot of a state. The other states keep their numbers.
        """
        self.states[state_number] = None

    def define_decision_state(self, s: DecisionState) -> int:
        """
        Register ``s`` as the next decision point.

        :return: The decision number assigned to ``s``.
        """
        self.decision_to_state.append(s)
        s.decision = len(self.decision_to_state) - 1
        return s.decision

    def get_decision_state(self, decision: int) -> Optional[DecisionState]:
        if not self.decision_to_state:
            return None
        return self.decision_to_state[decision]

    def define_mode(self, start_state: TokensStartState, name: Optional[str] = None) -> int:
        """
        Register the start state of the next lexer mode.

        :return: The ordinal of the mode.
        """
        self.mode_to_start_state.append(start_state)
        if name is not None:
            self.mode_name_to_start_state[name] = start_state
        return len(self.mode_to_start_state) - 1

    def get_mode_start_state(self, mode: Union[int, str]) -> TokensStartState:
        """
        Look up the start state of a lexer mode either by ordinal or by name.
        """
        if isinstance(mode, str):
            return self.mode_name_to_start_state[mode]
        return self.mode_to_start_state[mode]

    def get_rule_to_start_state(self, index: int) -> RuleStartState:
        state = self.rule_to_start_state[index]
        if state is None:
            raise MalformedATNError(f'Rule {index} has no start state.')
        return state

    def get_rule_to_stop_state(self, index: int) -> RuleStopState:
        state = self.rule_to_stop_state[index]
        if state is None:
            raise MalformedATNError(f'Rule {index} has no stop state.')
        return state

    def get_max_token_type(self) -> int:
        return self.max_token_type

    def follow_state(self, invoking_state: int) -> ATNState:
        """
        Get the state where the caller rule continues after the rule invoked
        at ``invoking_state`` returns.

        :raises MalformedATNError: if ``invoking_state`` is not a rule
            invocation point.
        """
        state = self.states[invoking_state] if 0 <= invoking_state < len(self.states) else None
        if state is None:
            raise MalformedATNError(f'Invoking state {invoking_state} is not in the ATN.')
        if not state.transitions or not isinstance(state.transitions[0], RuleTransition):
            raise MalformedATNError(f'Invoking state {invoking_state} has no rule transition.')
        return state.transitions[0].follow_state

    def get_expected_tokens(self, state_number: int, ctx: ContextType) -> IntervalSet:
        """
        Compute the set of input symbols which could follow ATN state number
        ``state_number`` in the specified full parse context ``ctx``. This
        method considers the complete parser context, but does not evaluate
        semantic predicates (i.e., all predicates encountered during the
        calculation are assumed true). If a path in the ATN exists from the
        starting state to the rule stop state of the outermost context
        without matching any symbols, :attr:`Token.EOF` is added to the
        returned set.

        A ``None`` ``ctx`` is treated as the empty root context.

        :param state_number: The ATN state number.
        :param ctx: The full parse context.
        :return: The set of potentially valid input symbols which could
            follow the specified state in the specified context.
        :raises InvalidStateNumberError: if the ATN does not contain a state
            with number ``state_number``.
        """
        if state_number < 0 or state_number >= len(self.states) or self.states[state_number] is None:
            raise InvalidStateNumberError(state_number, len(self.states))

        ctx = InvocationContext.of(ctx)
        following = self.next_tokens(self.states[state_number])
        if Token.EPSILON not in following:
            return following

        expected = IntervalSet()
        expected.addSet(following)
        expected.removeOne(Token.EPSILON)
        while ctx is not None and ctx.invoking_state >= 0 and Token.EPSILON in following:
            following = self.next_tokens(self.follow_state(ctx.invoking_state))
            expected.addSet(following)
            expected.removeOne(Token.EPSILON)
            ctx = ctx.parent

        if Token.EPSILON in following:
            expected.addOne(Token.EOF)

        return expected
