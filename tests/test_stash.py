# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth.stash import CacheFlag, build_stash
from cpuid_inspector.synth.vendor import Vendor

def l2_256k_8way(builder, subleaf=2):
    # unified level 2, 8 ways, 1 partition, 64-byte lines, 512 sets
    return builder.leaf(0x4, 0x43, (7 << 22) | 63, 511, 0, subleaf=subleaf)

def test_leaf_2_descriptors(builder):
    stash = build_stash(builder.vendor("GenuineIntel").signature(6, 0xf, 6).leaf(0x2, 0x00007d01).build())
    assert stash.has(CacheFlag.L2_2M)
    assert stash.has(CacheFlag.L2_8W_1MOR2M)
    assert not stash.has(CacheFlag.L3)

def test_leaf_2_skips_invalid_registers(builder):
    stash = build_stash(builder.vendor("GenuineIntel").leaf(0x2, 0x00000001, 0x80000045).build())
    assert stash.cache_flags == frozenset()

def test_leaf_4_classifies_l2(builder):
    stash = build_stash(l2_256k_8way(builder.vendor("GenuineIntel")).build())
    assert stash.has(CacheFlag.L2_256K)
    assert stash.has(CacheFlag.L2_8W_256K)
    assert not stash.has(CacheFlag.L2_4W_256K)

def test_flags_are_never_cleared(builder):
    builder.vendor("GenuineIntel").signature(6, 0xf, 6).leaf(0x2, 0x00007d01)
    stash = build_stash(l2_256k_8way(builder).build())
    assert stash.has(CacheFlag.L2_2M)
    assert stash.has(CacheFlag.L2_256K)

def test_descriptor_0x49_depends_on_signature(builder):
    xeon_mp = build_stash(builder.vendor("GenuineIntel").signature(0xf, 0x6, 8).leaf(0x2, 0x00004901).build())
    assert xeon_mp.has(CacheFlag.L3)

def test_leaf_1_facts(builder):
    stash = build_stash(builder.vendor("GenuineIntel").signature(6, 0x3a, 9, ebx=(8 << 16) | 0x7, edx=1 << 28).build())
    assert stash.htt
    assert stash.logical_count == 8
    assert stash.brand_index == 7
    assert stash.signature == (6, 0x3a, 9)

def test_brand_string(ivy_bridge):
    stash = build_stash(ivy_bridge.brand("  Intel(R) Core(TM) i7-3770 CPU @ 3.40GHz").build())
    assert stash.brand == "Intel(R) Core(TM) i7-3770 CPU @ 3.40GHz"

def test_missing_leaves(builder):
    stash = build_stash(builder.build())
    assert stash.vendor == Vendor.UNKNOWN
    assert stash.signature is None
    assert stash.brand == ""
    assert stash.val_4_eax is None

def test_topology_levels_skip_invalid(builder):
    builder.vendor("GenuineIntel")
    builder.leaf(0xb, 1, 2, 0x100, 0, subleaf=0)
    builder.leaf(0xb, 4, 8, 0x201, 0, subleaf=1)
    builder.leaf(0xb, 0, 0, 0x002, 0, subleaf=2)
    stash = build_stash(builder.build())
    assert stash.leaf_b_levels == [(1, 1, 2), (2, 4, 8)]

def test_extended_cache_leaves_only_add_flags(builder):
    builder.vendor("AuthenticAMD").signature(0x15, 0x2, 0)
    # 512K 8-way L2 in leaf 0x80000006, then a 1M 8-way L2 in leaf 0x8000001d
    builder.leaf(0x80000006, 0, 0, (512 << 16) | (0x6 << 12) | 64, 0)
    builder.leaf(0x8000001d, 0x43, (7 << 22) | 63, 2047, 0, subleaf=2)
    stash = build_stash(builder.build())
    assert stash.has(CacheFlag.L2_512K)
    assert stash.has(CacheFlag.L2_8W_512K)
    assert stash.has(CacheFlag.L2_1M)
    assert stash.has(CacheFlag.L2_8W_1MOR2M)

def test_amd_l3_from_leaf_80000006(builder):
    builder.vendor("AuthenticAMD").leaf(0x80000006, 0, 0, 0, 16 << 18)
    assert build_stash(builder.build()).has(CacheFlag.L3)
