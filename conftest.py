# -*- coding: utf-8 -*-
import pytest

import conflictmatch


@pytest.fixture(autouse=True)
def add_default_names(doctest_namespace):
    doctest_namespace['__name__'] = '__main__'

    for name in conflictmatch.__all__:
        doctest_namespace[name] = getattr(conflictmatch, name)
