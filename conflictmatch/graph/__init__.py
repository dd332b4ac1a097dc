# -*- coding: utf-8 -*-
"""Contains the labeled graph data structure in the `labeled` submodule."""

from . import labeled

# pylint: disable=wildcard-import
from .labeled import *

__all__ = labeled.__all__
