# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth import decode_cpu
from cpuid_inspector.synth.decoder import AmdFeatures
from cpuid_inspector.synth.topology import TopologyFacts
from cpuid_inspector.synth.uarch import UArch
from cpuid_inspector.synth.vendor import Vendor

def test_intel_without_brand(ivy_bridge):
    decoded = decode_cpu(ivy_bridge.build())
    assert decoded.vendor == Vendor.INTEL
    assert decoded.synth == "Intel Mobile Core i*-3000 (Ivy Bridge E1/L1)"
    assert decoded.uarch == UArch("Ivy Bridge", "Sandy Bridge", "22nm", False)
    assert decoded.description == "Intel Mobile Core i*-3000 (Ivy Bridge E1/L1) [Ivy Bridge] {Sandy Bridge}, 22nm"
    assert decoded.amd_features is None
    assert decoded.override_brand is None

def test_intel_brand_selects_row(ivy_bridge):
    decoded = decode_cpu(ivy_bridge.brand("Intel(R) Celeron(R) CPU G1610 @ 2.60GHz").build())
    assert decoded.synth == "Intel Celeron G1600 (Ivy Bridge E1/N0/L1)"

def test_amd_model_unknown_is_overridden(venice_unknown_brand):
    decoded = decode_cpu(venice_unknown_brand.build())
    assert decoded.brand == "AMD Processor model unknown"
    assert decoded.override_brand == "AMD Sempron(tm) Processor 3000+"
    assert decoded.synth == "AMD Sempron (Palermo DH-E3) Processor 3000+"

def test_amd_without_brand_id(venice_unknown_brand):
    venice_unknown_brand.leaf(0x80000001, 0, 0, 0, 0)
    decoded = decode_cpu(venice_unknown_brand.build())
    assert decoded.override_brand is None
    assert decoded.synth == "AMD Athlon 64 (Venice DH-E3)"

def test_amd_family_10h(deneb):
    decoded = decode_cpu(deneb.build())
    assert decoded.override_brand is None
    assert decoded.synth == "AMD Phenom II X4 (Deneb RB-C2) 955"
    assert decoded.topology == TopologyFacts("AMD leaf 0x80000008", 4, 1)
    assert decoded.amd_features == AmdFeatures(cmpxchg8b=True, cmov=True, prefetch=True)

def test_unknown_vendor(builder):
    decoded = decode_cpu(builder.vendor("GenuineIotel").signature(6, 0x3a, 9).build())
    assert decoded.vendor == Vendor.UNKNOWN
    assert decoded.synth is None
    assert decoded.uarch is None
    assert decoded.description is None

def test_decoding_is_deterministic(deneb):
    snapshot = deneb.build()
    assert decode_cpu(snapshot) == decode_cpu(snapshot)

def test_cpus_do_not_influence_each_other(builder, deneb):
    first = decode_cpu(deneb.build())
    builder.vendor("GenuineIntel").signature(6, 0xf, 6).leaf(0x2, 0x00007d01)
    decode_cpu(builder.build())
    assert decode_cpu(deneb.build()) == first
    assert first.cache_flags == ()

def l2_6m_24way(builder):
    # unified level 2, 24 ways, 1 partition, 64-byte lines, 4096 sets
    return builder.leaf(0x4, 0x43, (23 << 22) | 63, 4095, 0, subleaf=2)

def test_l2_size_tells_wolfdale_apart(builder):
    builder.vendor("GenuineIntel").signature(6, 0x17, 0xa)
    wolfdale_3m = decode_cpu(builder.brand("Intel(R) Core(TM)2 Duo CPU     E7500  @ 2.93GHz").build())
    assert wolfdale_3m.synth == "Intel Core 2 Duo E7000 (Wolfdale-3M R0)"
    wolfdale = decode_cpu(l2_6m_24way(builder.brand("Intel(R) Core(TM)2 Duo CPU     E8400  @ 3.00GHz")).build())
    assert wolfdale.synth == "Intel Core 2 Duo E8000 (Wolfdale E0)"
    assert "L2 6M" in wolfdale.cache_flags

def test_alder_lake_c0_celeron(builder):
    builder.vendor("GenuineIntel", max_leaf=0x20).signature(6, 0x97, 0x2)
    decoded = decode_cpu(builder.brand("Intel(R) Celeron(R) G6900").build())
    assert decoded.synth == "Intel Celeron G6900 (Alder Lake-S C0)"

def test_ice_lake_nnpi(builder):
    decoded = decode_cpu(builder.vendor("GenuineIntel").signature(6, 0x9d, 0x0).build())
    assert decoded.synth == "Intel Nervana NNP-I 1000 (Ice Lake-NNPI)"
    assert decoded.uarch.codename == "Ice Lake"
