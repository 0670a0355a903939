# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.


class ATNError(Exception):
    """
    Base class of the errors signalling a corrupt or incompatible ATN. These
    are never recovered from inside the package.
    """


class InvalidStateNumberError(ATNError, IndexError):
    """
    Raised when a state number does not address a slot of the ATN.
    """

    def __init__(self, state_number, size):
        """
        :param int state_number: The offending state number.
        :param int size: Number of state slots in the ATN.
        """
        super().__init__(f'Invalid state number: {state_number} (the ATN has {size} states).')
        self.state_number = state_number


class MalformedATNError(ATNError):
    """
    Raised when the structure of the ATN violates an invariant the analyses
    rely on (e.g., incomplete rule tables or a rule invocation point without
    a rule transition).
    """
