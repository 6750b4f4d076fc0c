# type: ignore
import pytest

from rasm.runtime.context import Context
from rasm.runtime.instructions import default_table, build_table, Push, Pop


@pytest.fixture
def with_table():
    yield default_table()


@pytest.fixture
def with_context(with_table):
    yield Context(with_table)


@pytest.fixture
def with_stack_only():
    yield build_table([Push(), Pop()])
