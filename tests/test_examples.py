"""
Test the worked insertion-copy scenarios used by the demo.
"""

from seqpos.containers import ArraySequence, LinkedSequence
from seqpos.examples import build_append_example, build_positional_example


def test_positional_example():
    dest = build_positional_example()
    assert isinstance(dest, ArraySequence)
    assert list(dest) == [-1, 0, 1, 2, 3, 4, 5, -2]


def test_positional_example_linked():
    dest = build_positional_example(linked=True)
    assert isinstance(dest, LinkedSequence)
    assert list(dest) == [-1, 0, 1, 2, 3, 4, 5, -2]


def test_append_example():
    assert list(build_append_example()) == [10, 20, 1, 2, 3]
    assert list(build_append_example(linked=True)) == [10, 20, 1, 2, 3]
