# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from .atn import ATN, ATNType, INVALID_ALT_NUMBER
from .atn_state import ATNState, ATNStateType, BasicBlockStartState, BasicState, BlockEndState, BlockStartState, DecisionState, LoopEndState, PlusBlockStartState, PlusLoopbackState, RuleStartState, RuleStopState, StarBlockStartState, StarLoopbackState, StarLoopEntryState, TokensStartState
from .context import InvocationContext
from .errors import ATNError, InvalidStateNumberError, MalformedATNError
from .interval_set import ReadOnlyIntervalSet
from .ll1_analyzer import LookaheadAnalyzer
from .transition import AbstractPredicateTransition, ActionTransition, AtomTransition, EpsilonTransition, NotSetTransition, PrecedencePredicateTransition, PredicateTransition, RangeTransition, RuleTransition, SetTransition, Transition, TransitionType, WildcardTransition
