# -*- coding: utf-8 -*-
"""Contains the maximum bipartite matching algorithm and its graph adapter in the submodules."""

from . import hopcroft_karp
from . import bipartite

# pylint: disable=wildcard-import
from .hopcroft_karp import *
from .bipartite import *

__all__ = hopcroft_karp.__all__ + bipartite.__all__
