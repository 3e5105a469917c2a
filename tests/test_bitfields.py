# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import pytest

from cpuid_inspector.inspectorlib.bitfields import getbits, joinbits, bitmask, bitfield_max, bits_needed

BITS_NEEDED_TESTS = [
    (1, 0),
    (2, 1),
    (3, 2),
    (4, 2),
    (5, 3),
    (8, 3),
    (9, 4),
    (64, 6),
]

@pytest.mark.parametrize("args", BITS_NEEDED_TESTS, ids=lambda x: str(x[0]))
def test_bits_needed(args):
    count, width = args
    assert bits_needed(count) == width

def test_getbits():
    assert getbits(0xdeadbeef, 31, 28) == 0xd
    assert getbits(0xdeadbeef, 0) == 1
    assert getbits(0x00003000, 13, 12) == 3

def test_masks():
    assert bitfield_max(3, 0) == 0xf
    assert bitmask(15, 8) == 0xff00
    assert bitmask(31) == 0x80000000

def test_joinbits_puts_first_range_on_top():
    # BrandId 0x0951: bit 15 clear, bits 5:0 = 17
    assert joinbits(0x0951, 15, (5, 0)) == 17
    assert joinbits(0x8951, 15, (5, 0)) == 64 + 17
    assert joinbits(0x0951, (8, 6), 14) == 0xa
