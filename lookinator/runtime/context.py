# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from __future__ import annotations

from typing import ClassVar, Iterator, Optional, Union

from antlr4 import RuleContext


class InvocationContext:
    """
    Immutable link of a rule invocation chain: the ATN state number in the
    caller rule where the current rule was entered (``invoking_state``), and
    the link of the caller (``parent``). Chains end in :attr:`EMPTY`, the
    root marker with ``invoking_state == -1``.

    Links are never mutated, so chains can be shared between threads and
    extended with :meth:`push` without copying. Links compare and hash
    structurally.

    A ``None`` parent means that nothing is known about the callers. The
    lookahead analysis stops at the end of the rule in that case instead of
    reporting end of input.
    """

    __slots__ = ('parent', 'invoking_state', '_hash')

    EMPTY: ClassVar[InvocationContext]

    parent: Optional[InvocationContext]
    invoking_state: int

    def __init__(self, parent: Optional[InvocationContext], invoking_state: int) -> None:
        """
        :param parent: Link of the caller rule.
        :param invoking_state: Number of the state in the caller rule that
            invoked the current rule.
        """
        object.__setattr__(self, 'parent', parent)
        object.__setattr__(self, 'invoking_state', invoking_state)
        object.__setattr__(self, '_hash', hash((parent, invoking_state)))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable.')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable.')

    @classmethod
    def from_rule_context(cls, ctx: Optional[RuleContext]) -> InvocationContext:
        """
        Take a snapshot of an ANTLR rule context chain (linked via
        ``parentCtx`` and ``invokingState``).

        :param ctx: The innermost rule context, or ``None``.
        :return: The equivalent invocation chain ending in :attr:`EMPTY`.
        """
        invoking_states = []
        while ctx is not None and ctx.invokingState >= 0:
            invoking_states.append(ctx.invokingState)
            ctx = ctx.parentCtx

        result = cls.EMPTY
        for invoking_state in reversed(invoking_states):
            result = cls(result, invoking_state)
        return result

    @classmethod
    def of(cls, ctx: Union[None, InvocationContext, RuleContext]) -> Optional[InvocationContext]:
        """
        Normalize the accepted context representations. ``None`` and
        :class:`InvocationContext` objects are returned as is, ANTLR rule
        contexts are converted with :meth:`from_rule_context`.
        """
        if ctx is None or isinstance(ctx, InvocationContext):
            return ctx
        return cls.from_rule_context(ctx)

    @property
    def is_empty(self) -> bool:
        return self.invoking_state < 0

    @property
    def depth(self) -> int:
        """
        Number of non-root links in the chain.
        """
        return sum(1 for _ in self)

    def push(self, invoking_state: int) -> InvocationContext:
        """
        Create a new innermost link on top of the current one.
        """
        return InvocationContext(self, invoking_state)

    def __iter__(self) -> Iterator[InvocationContext]:
        """
        Iterate over the non-root links, innermost first.
        """
        ctx: Optional[InvocationContext] = self
        while ctx is not None and not ctx.is_empty:
            yield ctx
            ctx = ctx.parent

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, InvocationContext) or self._hash != other._hash:
            return False
        return self.invoking_state == other.invoking_state and self.parent == other.parent

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        if self.is_empty:
            return 'InvocationContext.EMPTY'
        return f'InvocationContext([{", ".join(str(link.invoking_state) for link in self)}])'


InvocationContext.EMPTY = InvocationContext(None, -1)
