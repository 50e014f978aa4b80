"""
Worked insertion-copy scenarios.

Builds the two canonical scenarios used by the demo and the tests:
    - splice [0..5] into [-1, -2] before index 1
    - append [1, 2, 3] to [10, 20]
"""
from seqpos.algorithms import copy_into
from seqpos.containers import ArraySequence, LinkedSequence
from seqpos.inserters import back_inserter, inserter
from seqpos.traversal import next_position


def build_positional_example(linked: bool = False):
    """Return the destination after splicing [0, 1, 2, 3, 4, 5] before its second element."""
    container = LinkedSequence if linked else ArraySequence
    destination = container([-1, -2])
    source = container(range(6))

    at = next_position(destination.begin(), 1)
    copy_into(source.begin(), source.end(), inserter(destination, at))
    return destination


def build_append_example(linked: bool = False):
    """Return the destination after appending [1, 2, 3] to [10, 20]."""
    container = LinkedSequence if linked else ArraySequence
    destination = container([10, 20])
    source = container([1, 2, 3])

    copy_into(source.begin(), source.end(), back_inserter(destination))
    return destination
