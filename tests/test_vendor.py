# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import pytest

from cpuid_inspector.synth.stash import build_stash
from cpuid_inspector.synth.vendor import Vendor, identify_vendor, identify_hypervisor

VENDOR_TESTS = [
    ("GenuineIntel", Vendor.INTEL),
    ("AuthenticAMD", Vendor.AMD),
    ("AMDisbetter!", Vendor.AMD),
    ("CentaurHauls", Vendor.VIA),
    ("  Shanghai  ", Vendor.ZHAOXIN),
    ("HygonGenuine", Vendor.HYGON),
    ("GenuineTMx86", Vendor.TRANSMETA),
    ("Geode by NSC", Vendor.NSC),
    ("GenuineIotel", Vendor.UNKNOWN),
]

@pytest.mark.parametrize("args", VENDOR_TESTS, ids=lambda x: x[0])
def test_identify_vendor(args):
    text, vendor = args
    assert identify_vendor(text) == vendor

def test_vendor_string_from_leaf_0(builder):
    stash = build_stash(builder.vendor("CyrixInstead", max_leaf=2).build())
    assert stash.vendor_string == "CyrixInstead"
    assert stash.vendor == Vendor.CYRIX
    assert stash.max_basic_leaf == 2

@pytest.mark.parametrize("args", [
    ("KVMKVMKVM", "KVM"),
    ("Microsoft Hv", "Microsoft Hyper-V"),
    ("VMwareVMware", "VMware"),
], ids=lambda x: x[0])
def test_hypervisor_from_leaf_40000000(builder, args):
    signature, name = args
    stash = build_stash(builder.vendor("GenuineIntel").hypervisor(signature).build())
    assert stash.hypervisor == name

def test_unknown_hypervisor_is_kept_verbatim():
    assert identify_hypervisor("NewHyperVisr") == "NewHyperVisr"
    assert identify_hypervisor("") is None

def test_unprintable_hypervisor_signature():
    assert identify_hypervisor("\ufffd\x12\ufffd") is None
    assert identify_hypervisor("d\x00\x00\x00") is None

def bare_metal(builder):
    # Leaf 0x40000000 on bare metal repeats the highest basic leaf
    builder.vendor("GenuineIntel", max_leaf=0x16).signature(6, 0x9e, 0xa, ecx=0x7ffafbbf)
    return builder.leaf(0x40000000, 0xe10, 0x12c0, 0x64, 0)

def test_bare_metal_has_no_hypervisor(builder):
    stash = build_stash(bare_metal(builder).build())
    assert not stash.hypervisor_present
    assert stash.hypervisor is None

def test_hypervisor_leaf_below_range(builder):
    builder.vendor("GenuineIntel").signature(6, 0x3a, 9, ecx=1 << 31)
    stash = build_stash(builder.leaf(0x40000000, 0x3, 0x4b4d564b, 0x564b4d56, 0x4d).build())
    assert stash.hypervisor_present
    assert stash.hypervisor is None

def test_leaves_above_maximum_are_ignored(builder):
    builder.vendor("AuthenticAMD", max_leaf=1).signature(0x10, 0x4, 0x2)
    builder.leaf(0xb, 1, 2, 0x100, 0)
    builder.extended_max(0x80000004)
    builder.leaf(0x80000008, 0x3030, 0, 3, 0)
    stash = build_stash(builder.build())
    assert stash.max_basic_leaf == 1
    assert stash.max_extended_leaf == 0x80000004
    assert stash.leaf_b_levels == []
    assert stash.val_80000008_ecx is None

def test_no_extended_leaves_without_bit_31(builder):
    builder.vendor("GenuineIntel").brand("Intel(R) Core(TM) i7-3770 CPU @ 3.40GHz")
    stash = build_stash(builder.leaf(0x80000000, 0x00000004).build())
    assert stash.max_extended_leaf == 0
    assert stash.brand == ""
