# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from enum import IntEnum

from antlr4.IntervalSet import IntervalSet
from antlr4.Token import Token


class TransitionType(IntEnum):
    """
    Kinds of ATN transitions. The values match the codes of the serialized
    ATN format.
    """
    EPSILON = 1
    RANGE = 2
    RULE = 3
    PREDICATE = 4
    ATOM = 5
    ACTION = 6
    SET = 7
    NOT_SET = 8
    WILDCARD = 9
    PRECEDENCE = 10


class Transition:
    """
    An ATN transition between any two ATN states. Subclasses define atom,
    set, epsilon, action, predicate, rule transitions.

    This is a one way link. It emanates from a state (usually via a list of
    transitions) and has a target state.

    Since we never have to change the ATN transitions once we construct it,
    we can fix these transitions as specific classes. The DFA transitions on
    the other hand need to update the labels as it adds transitions to the
    states.
    """

    serialization_type = None
    is_epsilon = False

    def __init__(self, target):
        """
        :param ~lookinator.runtime.ATNState target: The state the transition
            points to.
        """
        if target is None:
            raise ValueError('target cannot be None.')
        self.target = target
        self.label = None

    def matches(self, symbol, min_vocab_symbol, max_vocab_symbol):
        """
        Decide whether the transition consumes ``symbol``.

        :param int symbol: Token type (or character) to test.
        :param int min_vocab_symbol: Smallest symbol of the vocabulary.
        :param int max_vocab_symbol: Largest symbol of the vocabulary.
        :rtype: bool
        """
        return False


class AtomTransition(Transition):
    """
    Transition matching a single symbol.
    """

    serialization_type = TransitionType.ATOM

    def __init__(self, target, label):
        super().__init__(target)
        self.label_value = label
        self.label = IntervalSet()
        self.label.addOne(label)

    def matches(self, symbol, min_vocab_symbol, max_vocab_symbol):
        return self.label_value == symbol

    def __str__(self):
        return str(self.label_value)


class RuleTransition(Transition):
    """
    Epsilon transition entering a rule. ``follow_state`` is the state of the
    calling rule where processing continues once the invoked rule returns.
    """

    serialization_type = TransitionType.RULE
    is_epsilon = True

    def __init__(self, rule_start, rule_index, precedence, follow_state):
        super().__init__(rule_start)
        self.rule_index = rule_index
        self.precedence = precedence
        self.follow_state = follow_state

    def __str__(self):
        return f'rule_{self.rule_index}'


class EpsilonTransition(Transition):

    serialization_type = TransitionType.EPSILON
    is_epsilon = True

    def __init__(self, target, outermost_precedence_return=-1):
        super().__init__(target)
        self.outermost_precedence_return = outermost_precedence_return

    def __str__(self):
        return 'epsilon'


class RangeTransition(Transition):

    serialization_type = TransitionType.RANGE

    def __init__(self, target, start, stop):
        super().__init__(target)
        self.start = start
        self.stop = stop
        self.label = IntervalSet()
        self.label.addRange(range(start, stop + 1))

    def matches(self, symbol, min_vocab_symbol, max_vocab_symbol):
        return self.start <= symbol <= self.stop

    def __str__(self):
        return f'{self.start}..{self.stop}'


class AbstractPredicateTransition(Transition):
    is_epsilon = True


class PredicateTransition(AbstractPredicateTransition):

    serialization_type = TransitionType.PREDICATE

    def __init__(self, target, rule_index, pred_index, is_ctx_dependent):
        super().__init__(target)
        self.rule_index = rule_index
        self.pred_index = pred_index
        self.is_ctx_dependent = is_ctx_dependent  # e.g., $i ref in pred

    def __str__(self):
        return f'pred_{self.rule_index}:{self.pred_index}'


class PrecedencePredicateTransition(AbstractPredicateTransition):

    serialization_type = TransitionType.PRECEDENCE

    def __init__(self, target, precedence):
        super().__init__(target)
        self.precedence = precedence

    def __str__(self):
        return f'{self.precedence} >= _p'


class ActionTransition(Transition):

    serialization_type = TransitionType.ACTION
    is_epsilon = True

    def __init__(self, target, rule_index, action_index=-1, is_ctx_dependent=False):
        super().__init__(target)
        self.rule_index = rule_index
        self.action_index = action_index
        self.is_ctx_dependent = is_ctx_dependent  # e.g., $i ref in pred

    def __str__(self):
        return f'action_{self.rule_index}:{self.action_index}'


class SetTransition(Transition):
    """
    A transition containing a set of values. An empty set is replaced by
    ``{Token.INVALID_TYPE}``.
    """

    serialization_type = TransitionType.SET

    def __init__(self, target, label_set=None):
        super().__init__(target)
        if label_set is not None and label_set.intervals:
            self.label = label_set
        else:
            self.label = IntervalSet()
            self.label.addOne(Token.INVALID_TYPE)

    def matches(self, symbol, min_vocab_symbol, max_vocab_symbol):
        return symbol in self.label

    def __str__(self):
        return str(self.label)


class NotSetTransition(SetTransition):

    serialization_type = TransitionType.NOT_SET

    def matches(self, symbol, min_vocab_symbol, max_vocab_symbol):
        return min_vocab_symbol <= symbol <= max_vocab_symbol and not super().matches(symbol, min_vocab_symbol, max_vocab_symbol)

    def __str__(self):
        return f'~{super().__str__()}'


class WildcardTransition(Transition):

    serialization_type = TransitionType.WILDCARD

    def matches(self, symbol, min_vocab_symbol, max_vocab_symbol):
        return min_vocab_symbol <= symbol <= max_vocab_symbol

    def __str__(self):
        return '.'
