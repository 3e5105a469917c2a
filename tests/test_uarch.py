# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import pytest

from cpuid_inspector.synth.predicates import PredicateSet
from cpuid_inspector.synth.signature import Signature
from cpuid_inspector.synth.uarch import UArch, decode_uarch, format_uarch, ua
from cpuid_inspector.synth.vendor import Vendor

UARCH_TESTS = [
    (Vendor.INTEL, Signature(6, 0x3a, 9), UArch("Ivy Bridge", "Sandy Bridge", "22nm", False)),
    (Vendor.INTEL, Signature(6, 0x2a, 7), UArch("Sandy Bridge", "Sandy Bridge", "32nm", True)),
    (Vendor.AMD, Signature(0xf, 0x2f, 0), UArch("Venice", "K8", "90nm", False)),
    (Vendor.UNKNOWN, Signature(6, 0x3a, 9), None),
]

@pytest.mark.parametrize("args", UARCH_TESTS, ids=lambda x: f"{x[0].value} {x[1]}")
def test_decode_uarch(args):
    vendor, signature, uarch = args
    assert decode_uarch(vendor, signature, PredicateSet()) == uarch

def test_format_with_codename():
    text = format_uarch("Intel Core i7-3770", ua("Sandy Bridge", "22nm", "Ivy Bridge"))
    assert text == "Intel Core i7-3770 [Ivy Bridge] {Sandy Bridge}, 22nm"

def test_format_core_named_after_family():
    assert format_uarch("Intel Core i7-2600", ua("Sandy Bridge", "32nm")) == "Intel Core i7-2600 {Sandy Bridge}, 32nm"

def test_format_without_node():
    assert format_uarch("Cyrix 6x86", ua("M1")) == "Cyrix 6x86 {M1}"

def test_format_without_uarch():
    assert format_uarch("Intel Pentium", None) == "Intel Pentium"
    assert format_uarch(None, None) is None
