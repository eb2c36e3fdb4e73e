"""Shared fixtures: run width-independent tests once per precision module."""

import pytest

from numeric_statistics import f32, f64


@pytest.fixture(params=[f32, f64], ids=["f32", "f64"])
def stats(request):
    return request.param
