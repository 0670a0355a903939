# Copyright (c) 2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from . import runtime
from .pkgdata import __version__
from .runtime import ATN, ATNType, InvocationContext, LookaheadAnalyzer
from .tool import ATNBuilder, DotRenderer, verify_atn
