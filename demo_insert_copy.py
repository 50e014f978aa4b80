#!/usr/bin/env python3
"""
Demo: traversal and insertion-copy over the three container tiers.

Shows:
    1. advance / next_position / prev_position / distance per tier
    2. A non-owning View over a bytearray
    3. Positional and append insertion-copy
"""

import logging

from seqpos.containers import ArraySequence, LinkedSequence, ForwardList
from seqpos.errors import UnsupportedOperation
from seqpos.examples import build_append_example, build_positional_example
from seqpos.traversal import advance, distance, next_position, prev_position
from seqpos.view import View


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 80)
    print("TRAVERSAL")
    print("=" * 80)

    for container in (ArraySequence, LinkedSequence, ForwardList):
        seq = container([10, 20, 30, 40, 50])
        pos = seq.begin()
        advance(pos, 2)
        print(f"\n{container.__name__} ({seq.capability.name})")
        print(f"  advance(begin, 2)        -> {pos.value}")
        print(f"  next_position(pos, 2)    -> {next_position(pos, 2).value}")
        try:
            print(f"  prev_position(pos, 1)    -> {prev_position(pos, 1).value}")
        except UnsupportedOperation as e:
            print(f"  prev_position(pos, 1)    -> UnsupportedOperation: {e}")
        print(f"  distance(begin, end)     -> {distance(seq.begin(), seq.end())}")

    print("\n" + "=" * 80)
    print("VIEW")
    print("=" * 80)

    buffer = bytearray(b"hello, world")
    with View(buffer, 7, 5) as view:
        print(f"\n  view bytes   -> {bytes(view.to_list())!r}")
        view[0] = ord("W")
        print(f"  after write  -> {bytes(buffer)!r}")
        try:
            buffer.extend(b"!")
        except BufferError as e:
            print(f"  resize while borrowed -> BufferError: {e}")
    buffer.extend(b"!")
    print(f"  after release -> {bytes(buffer)!r}")

    print("\n" + "=" * 80)
    print("INSERTION-COPY")
    print("=" * 80)

    print(f"\n  positional (array)  -> {list(build_positional_example())}")
    print(f"  positional (linked) -> {list(build_positional_example(linked=True))}")
    print(f"  append (array)      -> {list(build_append_example())}")
    print(f"  append (linked)     -> {list(build_append_example(linked=True))}")


if __name__ == "__main__":
    main()
