# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import pickle

import pytest

from antlr4.atn.LexerAction import LexerPushModeAction, LexerSkipAction

from lookinator import ATN, ATNBuilder, ATNType
from lookinator.runtime import (BasicBlockStartState, BasicState, INVALID_ALT_NUMBER, MalformedATNError,
                                StarLoopEntryState, TokensStartState)


def test_add_state_numbers():
    atn = ATN(ATNType.PARSER, 1)
    states = [BasicState(), BasicState(), BasicState()]
    for state in states:
        atn.add_state(state)

    assert [state.state_number for state in states] == [0, 1, 2]
    assert all(state.atn is atn for state in states)
    assert atn.states == states


def test_add_none_reserves_slot():
    atn = ATN(ATNType.PARSER, 1)
    atn.add_state(None)
    state = BasicState()
    atn.add_state(state)

    assert atn.states == [None, state]
    assert state.state_number == 1


def test_remove_state_keeps_numbers():
    atn = ATN(ATNType.PARSER, 1)
    states = [BasicState() for _ in range(4)]
    for state in states:
        atn.add_state(state)

    atn.remove_state(1)
    assert atn.states[1] is None
    assert [atn.states[i].state_number for i in (0, 2, 3)] == [0, 2, 3]

    new_state = BasicState()
    atn.add_state(new_state)
    assert new_state.state_number == 4
    assert atn.states[1] is None


def test_decision_states():
    atn = ATN(ATNType.PARSER, 1)
    assert atn.get_decision_state(0) is None

    decisions = [BasicBlockStartState(), StarLoopEntryState(), TokensStartState()]
    for state in decisions:
        atn.add_state(state)

    # Decision numbers are independent of state numbers.
    atn.add_state(BasicState())
    assert [atn.define_decision_state(state) for state in reversed(decisions)] == [0, 1, 2]

    for i, state in enumerate(reversed(decisions)):
        assert atn.get_decision_state(i) is state
        assert state.decision == i

    with pytest.raises(IndexError):
        atn.get_decision_state(len(decisions))


def test_rule_tables():
    builder = ATNBuilder(ATNType.PARSER, 1)
    rules = [builder.rule() for _ in range(3)]
    atn = builder.build()

    for i, (start, stop) in enumerate(rules):
        assert atn.get_rule_to_start_state(i) is start
        assert atn.get_rule_to_stop_state(i) is stop
        assert start.stop_state is stop
        assert start.rule_index == stop.rule_index == i

    with pytest.raises(IndexError):
        atn.get_rule_to_start_state(3)
    with pytest.raises(IndexError):
        atn.get_rule_to_stop_state(3)


def test_missing_rule_state():
    builder = ATNBuilder(ATNType.PARSER, 1)
    builder.rule()
    atn = builder.build()
    atn.rule_to_stop_state[0] = None

    with pytest.raises(MalformedATNError):
        atn.get_rule_to_stop_state(0)


@pytest.mark.parametrize('grammar_type, is_lexer, token_types', [
    (ATNType.LEXER, True, []),
    (ATNType.PARSER, False, None),
])
def test_grammar_type(grammar_type, is_lexer, token_types):
    atn = ATN(grammar_type, 10)
    assert atn.is_lexer == is_lexer
    assert atn.rule_to_token_type == token_types
    assert atn.get_max_token_type() == 10
    assert atn.mode_name_to_start_state == {}
    assert atn.states == []


def test_lexer_atn():
    builder = ATNBuilder(ATNType.LEXER, 0xFFFF)
    default_mode = builder.state(TokensStartState)
    string_mode = builder.state(TokensStartState)
    assert builder.mode(default_mode, 'DEFAULT_MODE') == 0
    assert builder.mode(string_mode, 'STRING') == 1

    start, stop = builder.rule(token_type=5)
    builder.epsilon(default_mode, start)
    builder.interval(start, stop, ord('a'), ord('z'))
    assert builder.lexer_action(LexerSkipAction.INSTANCE) == 0
    assert builder.lexer_action(LexerPushModeAction(1)) == 1
    atn = builder.build()

    assert atn.rule_to_token_type == [5]
    assert atn.get_mode_start_state(0) is default_mode
    assert atn.get_mode_start_state('STRING') is string_mode
    assert atn.lexer_actions[0] is LexerSkipAction.INSTANCE
    assert atn.lexer_actions[1].mode == 1
    with pytest.raises(KeyError):
        atn.get_mode_start_state('COMMENT')


def test_rule_bypass_token_types():
    builder = ATNBuilder(ATNType.PARSER, 3, generate_rule_bypass_transitions=True)
    builder.rule(token_type=4)
    assert builder.build().rule_to_token_type == [4]


def test_invalid_alt_number():
    assert INVALID_ALT_NUMBER == 0


def test_pickle_state(optional_atn):
    start = optional_atn.get_rule_to_start_state(0)
    optional_atn.next_tokens(start)

    clone = pickle.loads(pickle.dumps(start))
    assert clone.state_number == start.state_number
    assert set(clone.next_token_within_rule) == set(start.next_token_within_rule)
    with clone.next_token_lock:
        pass
