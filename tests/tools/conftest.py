import pytest

from exord.tools.order import ExplicitOrder


@pytest.fixture
def make_order():
    def _factory(order=None, **kwargs):
        order = ["a", "b", "c"] if order is None else order
        return ExplicitOrder(order, **kwargs)
    return _factory
