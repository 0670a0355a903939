# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import pytest

from lookinator import ATNBuilder, ATNType, verify_atn
from lookinator.runtime import (EpsilonTransition, LoopEndState, MalformedATNError, PlusBlockStartState, RuleStartState,
                                RuleTransition, StarLoopbackState, StarLoopEntryState)


def test_call_adds_return_edge(call_atn):
    atn = call_atn.atn
    t = call_atn.k.transitions[0]
    assert isinstance(t, RuleTransition)
    assert t.target is atn.get_rule_to_start_state(1)
    assert t.follow_state is call_atn.f
    assert atn.follow_state(call_atn.k.state_number) is call_atn.f

    # b is invoked from a and from d.
    returns = atn.get_rule_to_stop_state(1).transitions
    assert all(isinstance(r, EpsilonTransition) for r in returns)
    assert [r.target for r in returns] == [call_atn.f, call_atn.h]


def test_left_recursive_return_edge():
    builder = ATNBuilder(ATNType.PARSER, 1)
    start, stop = builder.rule()
    start.is_left_recursive_rule = True
    frm = builder.state(rule_index=0)
    follow = builder.state(rule_index=0)
    builder.call(frm, 0, follow)
    assert stop.transitions[0].outermost_precedence_return == 0


def test_verify_valid(optional_atn, call_atn):
    verify_atn(optional_atn)
    verify_atn(call_atn.atn)


def test_verify_missing_stop_state(optional_atn):
    optional_atn.rule_to_stop_state[0] = None
    with pytest.raises(MalformedATNError):
        verify_atn(optional_atn)


def test_verify_unlinked_rule():
    builder = ATNBuilder(ATNType.PARSER, 1)
    start, _ = builder.rule()
    start.stop_state = None
    with pytest.raises(MalformedATNError):
        builder.build()


def test_verify_decision_numbers(optional_atn):
    optional_atn.decision_to_state[0].decision = 5
    with pytest.raises(MalformedATNError):
        verify_atn(optional_atn)


def test_verify_multiple_transitions_without_decision():
    builder = ATNBuilder(ATNType.PARSER, 3)
    start, stop = builder.rule()
    mid = builder.state(rule_index=0)
    builder.epsilon(start, mid)
    builder.epsilon(start, stop)
    builder.epsilon(mid, stop)
    with pytest.raises(MalformedATNError):
        builder.build()
    # Construction can be finished without the checks.
    assert builder.build(verify=False) is builder.atn


def test_verify_mixed_transitions():
    builder = ATNBuilder(ATNType.PARSER, 3)
    start, stop = builder.rule()
    block, end = builder.block(0)
    builder.epsilon(start, block)
    builder.epsilon(block, end)
    builder.atom(block, end, 1)
    builder.epsilon(end, stop)
    assert not block.epsilon_only_transitions
    with pytest.raises(MalformedATNError):
        builder.build()


def test_verify_rule_transition_not_alone():
    builder = ATNBuilder(ATNType.PARSER, 3)
    a_start, a_stop = builder.rule()
    builder.rule()
    block, end = builder.block(0)
    builder.epsilon(a_start, block)
    builder.epsilon(block, end)
    builder.call(block, 1, end)
    builder.epsilon(end, a_stop)
    with pytest.raises(MalformedATNError):
        builder.build()


@pytest.mark.parametrize('cls', [PlusBlockStartState, StarLoopEntryState, LoopEndState])
def test_verify_loop_back_state(cls):
    builder = ATNBuilder(ATNType.PARSER, 3)
    builder.state(cls, 0)
    with pytest.raises(MalformedATNError):
        builder.build()


def test_verify_star_loop_back():
    builder = ATNBuilder(ATNType.PARSER, 3)
    loop_back = builder.state(StarLoopbackState, 0)
    other = builder.state(rule_index=0)
    builder.epsilon(loop_back, other)
    with pytest.raises(MalformedATNError):
        builder.build()


def test_rule_start_without_stop():
    builder = ATNBuilder(ATNType.PARSER, 3)
    builder.state(RuleStartState, 0)
    with pytest.raises(MalformedATNError):
        builder.build()
