# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from __future__ import annotations

import logging

from pkgutil import get_data
from typing import Optional

from antlr4.IntervalSet import IntervalSet
from antlr4.Token import Token
from jinja2 import Environment

from ..runtime import ATN, ATNState, AtomTransition, NotSetTransition, RuleStartState, RuleStopState, RuleTransition, SetTransition, Transition

logger = logging.getLogger(__name__)


class DotRenderer:
    """
    Render an ATN (or the states of one of its rules) in Graphviz DOT format.
    """

    def __init__(self, rule_names: Optional[list[str]] = None, token_names: Optional[list[str]] = None) -> None:
        """
        :param rule_names: Names of the rules, indexed by rule index (default:
            ``rule_<index>``).
        :param token_names: Names of the tokens, indexed by token type
            (default: the numeric token type).
        """
        self._rule_names = rule_names or []
        self._token_names = token_names or []

        env = Environment(trim_blocks=True,
                          lstrip_blocks=True,
                          keep_trailing_newline=True,
                          autoescape=False)
        env.filters['state_label'] = self._state_label
        env.filters['transition_label'] = self._transition_label
        template_data = get_data(__package__, 'resources/atn.dot.jinja')
        if template_data is None:
            raise ValueError('No template found for DOT rendering.')
        self._template = env.from_string(template_data.decode('utf-8'))

    def render(self, atn: ATN, rule_index: Optional[int] = None) -> str:
        """
        :param atn: The ATN to render.
        :param rule_index: Render only the states of this rule (default:
            render every state).
        :return: The DOT source.
        """
        states = [state for state in atn.states if state is not None and (rule_index is None or state.rule_index == rule_index)]
        name = self.rule_name(rule_index) if rule_index is not None else atn.grammar_type.name.lower()
        logger.debug('Rendering %d states of %s.', len(states), name)
        return self._template.render(name=name, states=states)

    def rule_name(self, rule_index: int) -> str:
        return self._rule_names[rule_index] if 0 <= rule_index < len(self._rule_names) else f'rule_{rule_index}'

    def token_name(self, token_type: int) -> str:
        if token_type == Token.EOF:
            return 'EOF'
        if token_type == Token.EPSILON:
            return 'EPSILON'
        return self._token_names[token_type] if 0 <= token_type < len(self._token_names) and self._token_names[token_type] else str(token_type)

    def format_set(self, iset: IntervalSet) -> str:
        parts = []
        for r in iset.intervals or []:
            if len(r) == 1:
                parts.append(self.token_name(r.start))
            else:
                parts.append(f'{self.token_name(r.start)}..{self.token_name(r.stop - 1)}')
        return '{' + ', '.join(parts) + '}'

    def _state_label(self, state: ATNState) -> str:
        if isinstance(state, RuleStartState):
            return f'{state.state_number}: {self.rule_name(state.rule_index)} start'
        if isinstance(state, RuleStopState):
            return f'{state.state_number}: {self.rule_name(state.rule_index)} stop'
        return str(state.state_number)

    def _transition_label(self, t: Transition) -> str:
        if isinstance(t, RuleTransition):
            label = self.rule_name(t.rule_index)
        elif isinstance(t, AtomTransition):
            label = self.token_name(t.label_value)
        elif isinstance(t, NotSetTransition):
            label = f'~{self.format_set(t.label)}'
        elif isinstance(t, SetTransition):
            label = self.format_set(t.label)
        else:
            label = str(t)
        return label.replace('"', '\\"')
