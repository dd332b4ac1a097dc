# -*- coding: utf-8 -*-
"""Contains all the necessary classes and functions for solving preference conflicts with bipartite matching."""

from importlib.metadata import PackageNotFoundError, version

# pylint: disable=wildcard-import
from . import exceptions
from . import graph
from . import matching
from . import votes

from .exceptions import *
from .graph import *
from .matching import *
from .votes import *

__all__ = exceptions.__all__ + graph.__all__ + matching.__all__ + votes.__all__

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # running from a source checkout
    __version__ = 'unknown'
