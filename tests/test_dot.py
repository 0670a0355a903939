# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from lookinator import DotRenderer


def test_render(optional_atn):
    start = optional_atn.get_rule_to_start_state(0)
    block = optional_atn.get_decision_state(0)

    dot = DotRenderer(rule_names=['r'], token_names=[None, "'t'"]).render(optional_atn)
    assert dot.startswith('digraph parser {')
    assert f's{start.state_number} [label="{start.state_number}: r start"];' in dot
    assert f's{block.state_number} [label="{block.state_number}", shape=box];' in dot
    assert f's{start.state_number} -> s{block.state_number} [label="epsilon", style=dashed];' in dot
    assert '[label="\'t\'"];' in dot


def test_render_rule(call_atn):
    dot = DotRenderer().render(call_atn.atn, rule_index=0)
    assert dot.startswith('digraph rule_0 {')
    assert f's{call_atn.k.state_number} -> s{call_atn.b_start.state_number} [label="rule_1", style=dashed];' in dot
    assert f's{call_atn.c_start.state_number} ' not in dot
