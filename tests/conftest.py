# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from types import SimpleNamespace

import pytest

from lookinator import ATNBuilder, ATNType

T, X, Y = 1, 2, 3


@pytest.fixture
def optional_atn():
    """
    r : T? ;
    """
    builder = ATNBuilder(ATNType.PARSER, max_token_type=3)
    start, stop = builder.rule()
    block, end = builder.block(start.rule_index)
    alt = builder.state(rule_index=start.rule_index)
    builder.epsilon(start, block)
    builder.epsilon(block, alt)
    builder.atom(alt, end, T)
    builder.epsilon(block, end)
    builder.epsilon(end, stop)
    return builder.build()


@pytest.fixture
def call_atn():
    """
    a : b X ;
    b : ;
    c : d Y ;
    d : b ;

    The returned namespace holds the ATN and the interesting states: the
    invoking states of ``b`` in ``a`` (``k``) and in ``d`` (``n``), and the
    invoking state of ``d`` in ``c`` (``m``).
    """
    builder = ATNBuilder(ATNType.PARSER, max_token_type=3)
    a_start, a_stop = builder.rule()
    b_start, b_stop = builder.rule()
    c_start, c_stop = builder.rule()
    d_start, d_stop = builder.rule()

    k = builder.state(rule_index=0)
    f = builder.state(rule_index=0)
    a_end = builder.state(rule_index=0)
    builder.epsilon(a_start, k)
    builder.call(k, 1, f)
    builder.atom(f, a_end, X)
    builder.epsilon(a_end, a_stop)

    builder.epsilon(b_start, b_stop)

    m = builder.state(rule_index=2)
    g = builder.state(rule_index=2)
    c_end = builder.state(rule_index=2)
    builder.epsilon(c_start, m)
    builder.call(m, 3, g)
    builder.atom(g, c_end, Y)
    builder.epsilon(c_end, c_stop)

    n = builder.state(rule_index=3)
    h = builder.state(rule_index=3)
    builder.epsilon(d_start, n)
    builder.call(n, 1, h)
    builder.epsilon(h, d_stop)

    return SimpleNamespace(atn=builder.build(), a_start=a_start, b_start=b_start, c_start=c_start, d_start=d_start, k=k, f=f, m=m, n=n, h=h)
