import pytest

from linkedlist_queue import LinkedListQueue
from linkedlist_stack import LinkedListStack


@pytest.fixture
def int_queue():
    return LinkedListQueue(int)


@pytest.fixture
def str_stack():
    return LinkedListStack(str)
