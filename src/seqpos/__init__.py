"""
Sequence Positions (seqpos) Package

Capability-tiered positions over sequences, a non-owning contiguous View,
traversal algorithms and an insertion-copy algorithm.

ARCHITECTURAL GUARANTEE:
------------------------
This package never owns caller data:
    - Positions refer to a sequence, they do not hold it alive
    - Views borrow a contiguous store, they never copy it
    - Algorithms mutate only the destination they are handed

All operations are synchronous and return immediately.
"""

__version__ = "0.1.0"
