# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import pytest

from cpuid_inspector.synth.stash import build_stash
from cpuid_inspector.synth.topology import ApicFields, TopologyFacts, synthesize_topology

HTT = 1 << 28

def topology_of(builder):
    return synthesize_topology(build_stash(builder.build()))

def level(builder, leaf, subleaf, level_type, shift, count):
    return builder.leaf(leaf, shift, count, (level_type << 8) | subleaf, 0, subleaf=subleaf)

def test_leaf_1f_wins_over_leaf_b(builder):
    builder.vendor("GenuineIntel", max_leaf=0x1f).signature(6, 0x97, 2, ebx=32 << 16, edx=HTT)
    level(builder, 0x1f, 0, 1, 1, 2)
    level(builder, 0x1f, 1, 2, 5, 16)
    level(builder, 0xb, 0, 1, 1, 2)
    level(builder, 0xb, 1, 2, 4, 8)
    facts, fields = topology_of(builder)
    assert facts == TopologyFacts("Intel leaf 0x1f", 8, 2)
    assert fields == ApicFields(1, 4, 0)

def test_leaf_b(builder):
    builder.vendor("GenuineIntel").signature(6, 0x3a, 9, edx=HTT)
    level(builder, 0xb, 0, 1, 1, 2)
    level(builder, 0xb, 1, 2, 4, 8)
    facts, _ = topology_of(builder)
    assert facts == TopologyFacts("Intel leaf 0xb", 4, 2)

def test_leaf_b_without_core_level_falls_back(builder):
    builder.vendor("GenuineIntel").signature(6, 0x3a, 9)
    level(builder, 0xb, 0, 1, 0, 1)
    facts, _ = topology_of(builder)
    assert facts == TopologyFacts("Intel leaf 1", 1, 1)

def test_intel_leaf_4(builder):
    builder.vendor("GenuineIntel", max_leaf=4).signature(6, 0xf, 6, ebx=8 << 16, edx=HTT)
    builder.leaf(0x4, (3 << 26) | (1 << 5) | 1, 0, 0, 0)
    facts, fields = topology_of(builder)
    assert facts == TopologyFacts("Intel leaf 1/4", 4, 2)
    assert fields == ApicFields(1, 2, 0)

@pytest.mark.parametrize("args", [(HTT, 2), (0, 1)], ids=["htt", "no-htt"])
def test_intel_leaf_1(builder, args):
    edx, hyperthreads = args
    facts, _ = topology_of(builder.vendor("GenuineIntel", max_leaf=1).signature(0xf, 0x2, 9, edx=edx))
    assert facts == TopologyFacts("Intel leaf 1", 1, hyperthreads)

def test_amd_leaf_80000008(deneb):
    facts, fields = topology_of(deneb)
    assert facts == TopologyFacts("AMD leaf 0x80000008", 4, 1)
    assert fields == ApicFields(0, 2, 0)

def test_amd_cmp_legacy_mismatch(deneb):
    # four logical processors and four cores, yet CmpLegacy is clear
    deneb.leaf(0x80000001, 0, 0, 0, 0)
    assert topology_of(deneb) == (None, None)

def test_amd_without_htt(venice_unknown_brand):
    facts, _ = topology_of(venice_unknown_brand)
    assert facts == TopologyFacts("leaf 1", 1, 1)

def test_amd_family_17h(builder):
    builder.vendor("AuthenticAMD", max_leaf=0xd).signature(0x17, 0x71, 0, ebx=16 << 16, edx=HTT)
    builder.leaf(0x80000008, 0x3030, 0, 0x400f, 0)
    builder.leaf(0x8000001e, 0, 0x100, 0, 0)
    facts, _ = topology_of(builder)
    assert facts == TopologyFacts("AMD leaf 0x8000001e", 8, 2)

def test_other_vendor_with_htt_is_unknown(builder):
    builder.vendor("CentaurHauls").signature(6, 0xf, 2, edx=HTT)
    assert topology_of(builder) == (None, None)

def test_apic_fields_layout():
    fields = ApicFields(1, 2, 0)
    assert fields.core_offset == 25
    assert fields.package_offset == 27
    assert fields.package_width == 5
    assert fields.layout() == [("smt", 24, 24), ("core", 26, 25), ("package", 31, 27)]

def test_package_field_dropped_when_no_bits_remain():
    fields = ApicFields(4, 5, 0)
    assert fields.package_width == 0
    assert [name for name, _, _ in fields.layout()] == ["smt", "core"]

def test_amd_family_15h_compute_units(builder):
    # eight cores in four two-core compute units, CmpLegacy set
    builder.vendor("AuthenticAMD", max_leaf=0xd).signature(0x15, 0x2, 0, ebx=8 << 16, edx=HTT)
    builder.leaf(0x80000001, 0, 0, 1 << 1, 0)
    builder.leaf(0x80000008, 0x3030, 0, 0x7, 0)
    builder.leaf(0x8000001e, 0, 1 << 8, 0, 0)
    facts, fields = topology_of(builder)
    assert facts == TopologyFacts("AMD leaf 0x80000008", 8, 1)
    assert fields == ApicFields(0, 1, 2)
    assert fields.layout() == [("core", 24, 24), ("cu", 26, 25), ("package", 31, 27)]
