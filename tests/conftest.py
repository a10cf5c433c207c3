import pytest

from ternary_search_tree import TernarySearchTree
from wide_trie import WideTrie


@pytest.fixture(params=[WideTrie, TernarySearchTree], ids=["wide-trie", "tst"])
def table_cls(request):
    return request.param


@pytest.fixture
def table(table_cls):
    return table_cls()


@pytest.fixture
def app_table(table):
    """The three-key example: "app", "appl" and "applic"."""
    table.put("app", 1)
    table.put("applic", 2)
    table.put("appl", 3)
    return table
