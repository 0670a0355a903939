# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from __future__ import annotations

import logging

from enum import IntEnum
from threading import Lock
from typing import TYPE_CHECKING, ClassVar, Optional

from antlr4.IntervalSet import IntervalSet

if TYPE_CHECKING:
    from .atn import ATN
    from .transition import Transition

logger = logging.getLogger(__name__)


class ATNStateType(IntEnum):
    """
    Kinds of ATN states. The values match the codes of the serialized ATN
    format.
    """
    INVALID_TYPE = 0
    BASIC = 1
    RULE_START = 2
    BLOCK_START = 3
    PLUS_BLOCK_START = 4
    STAR_BLOCK_START = 5
    TOKEN_START = 6
    RULE_STOP = 7
    BLOCK_END = 8
    STAR_LOOP_BACK = 9
    STAR_LOOP_ENTRY = 10
    PLUS_LOOP_BACK = 11
    LOOP_END = 12


class ATNState:
    """
    Base class of the nodes of the ATN. A state is addressed from the outside
    by its ``state_number`` only, which is assigned by :meth:`ATN.add_state`
    and never changes afterwards.
    """

    INVALID_STATE_NUMBER: ClassVar[int] = -1
    state_type: ClassVar[ATNStateType] = ATNStateType.INVALID_TYPE

    def __init__(self, rule_index: int = -1) -> None:
        """
        :param rule_index: Index of the rule containing the state.
        """
        self.atn: Optional[ATN] = None
        self.state_number: int = ATNState.INVALID_STATE_NUMBER
        self.rule_index: int = rule_index
        self.epsilon_only_transitions: bool = False
        self.transitions: list[Transition] = []
        # Set of tokens reachable from the state without leaving its rule.
        # Written once under next_token_lock, read-only afterwards.
        self.next_token_within_rule: Optional[IntervalSet] = None
        self.next_token_lock: Lock = Lock()

    def add_transition(self, t: Transition, index: Optional[int] = None) -> None:
        """
        Add an outgoing transition to the state.

        :param t: The transition to add.
        :param index: Position to insert the transition at (default: append).
        """
        if not self.transitions:
            self.epsilon_only_transitions = t.is_epsilon
        elif self.epsilon_only_transitions != t.is_epsilon:
            logger.error('ATN state %d has both epsilon and non-epsilon transitions.', self.state_number)
            self.epsilon_only_transitions = False

        if index is None:
            self.transitions.append(t)
        else:
            self.transitions.insert(index, t)

    def __getstate__(self):
        state = self.__dict__.copy()
        del state['next_token_lock']
        return state

    def __setstate__(self, state):
        self.__dict__.update(state)
        self.next_token_lock = Lock()

    def __str__(self) -> str:
        return str(self.state_number)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.state_number}, rule={self.rule_index})'


class BasicState(ATNState):
    state_type = ATNStateType.BASIC


class DecisionState(ATNState):
    """
    State with more than one outgoing path where a prediction is needed.
    ``decision`` is its index in :attr:`ATN.decision_to_state` (-1 until the
    state is defined as a decision).
    """

    def __init__(self, rule_index: int = -1) -> None:
        super().__init__(rule_index)
        self.decision: int = -1
        self.non_greedy: bool = False


class BlockStartState(DecisionState):
    """
    The start of a regular ``(...)`` block.
    """

    def __init__(self, rule_index: int = -1) -> None:
        super().__init__(rule_index)
        self.end_state: Optional[BlockEndState] = None


class BasicBlockStartState(BlockStartState):
    state_type = ATNStateType.BLOCK_START


class BlockEndState(ATNState):
    """
    Terminal node of a simple ``(a|b|c)`` block.
    """
    state_type = ATNStateType.BLOCK_END

    def __init__(self, rule_index: int = -1) -> None:
        super().__init__(rule_index)
        self.start_state: Optional[BlockStartState] = None


class RuleStopState(ATNState):
    """
    The last node in the ATN for a rule, unless that rule is the start
    symbol. In that case, there is one transition to EOF. Later, we might
    encode references to all calls to this rule to compute FOLLOW sets for
    error handling.
    """
    state_type = ATNStateType.RULE_STOP


class RuleStartState(ATNState):
    state_type = ATNStateType.RULE_START

    def __init__(self, rule_index: int = -1) -> None:
        super().__init__(rule_index)
        self.stop_state: Optional[RuleStopState] = None
        self.is_left_recursive_rule: bool = False


class PlusLoopbackState(DecisionState):
    """
    Decision state for ``A+`` and ``(A|B)+``. It has two transitions: one to
    the loop back to start of the block and one to exit.
    """
    state_type = ATNStateType.PLUS_LOOP_BACK


class PlusBlockStartState(BlockStartState):
    """
    Start of ``(A|B|...)+`` loop. Technically a decision state, but we don't
    use for code generation; somebody might need it, so we're defining it for
    completeness. In reality, the :class:`PlusLoopbackState` node is the real
    decision-making node for ``A+``.
    """
    state_type = ATNStateType.PLUS_BLOCK_START

    def __init__(self, rule_index: int = -1) -> None:
        super().__init__(rule_index)
        self.loop_back_state: Optional[PlusLoopbackState] = None


class StarBlockStartState(BlockStartState):
    """
    The block that begins a closure loop.
    """
    state_type = ATNStateType.STAR_BLOCK_START


class StarLoopbackState(ATNState):
    state_type = ATNStateType.STAR_LOOP_BACK


class StarLoopEntryState(DecisionState):
    state_type = ATNStateType.STAR_LOOP_ENTRY

    def __init__(self, rule_index: int = -1) -> None:
        super().__init__(rule_index)
        self.loop_back_state: Optional[StarLoopbackState] = None
        self.is_precedence_decision: bool = False


class LoopEndState(ATNState):
    """
    Mark the end of a ``*`` or ``+`` loop.
    """
    state_type = ATNStateType.LOOP_END

    def __init__(self, rule_index: int = -1) -> None:
        super().__init__(rule_index)
        self.loop_back_state: Optional[ATNState] = None


class TokensStartState(DecisionState):
    """
    The Tokens rule start state linking to each lexer rule start state of a
    lexer mode.
    """
    state_type = ATNStateType.TOKEN_START
