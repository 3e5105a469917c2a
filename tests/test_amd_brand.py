# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import pytest

from cpuid_inspector.synth.amd_brand import (AmdBrand, AmdBrandVariant, EMPTY_BRAND, NptFields, StringFields,
                                             decode_legacy, decode_npt, decode_strings, legacy_brand_fields,
                                             npt_brand_fields, reconstruct, select_variant)
from cpuid_inspector.synth.signature import Signature
from cpuid_inspector.synth.stash import build_stash

VARIANT_TESTS = [
    (Signature(0xf, 0x2f, 0x0), AmdBrandVariant.LEGACY_0F),
    (Signature(0xf, 0x41, 0x2), AmdBrandVariant.NPT_0F),
    (Signature(0x10, 0x4, 0x2), AmdBrandVariant.FAMILY_10H),
    (Signature(0x11, 0x3, 0x1), AmdBrandVariant.FAMILY_11H),
    (Signature(0x14, 0x2, 0x0), AmdBrandVariant.FAMILY_14H),
    (Signature(0x15, 0x1, 0x2), None),
    (None, None),
]

@pytest.mark.parametrize("args", VARIANT_TESTS, ids=lambda x: str(x[0]))
def test_select_variant(args):
    signature, variant = args
    assert select_variant(signature) == variant

def test_legacy_8bit_brand_id():
    assert legacy_brand_fields(0x2a, 0) == (4, 10)
    assert str(decode_legacy(4, 10)) == "AMD Athlon(tm) 64 Processor 3200+"

def test_legacy_12bit_brand_id():
    assert legacy_brand_fields(0, (0x22 << 6) | 6) == (0x22, 6)
    assert decode_legacy(0x22, 6) == AmdBrand("AMD Sempron(tm)", "Processor 3000+", "")

def test_legacy_without_brand_id():
    assert legacy_brand_fields(0, 0) is None

def test_legacy_opteron_formula():
    assert decode_legacy(0x2c, 4).processor_number == "Processor 165"

def test_legacy_unknown_index():
    assert decode_legacy(0x3f, 1) == EMPTY_BRAND

def test_npt_fields():
    assert npt_brand_fields(0x10000951, 1) == NptFields(1, 1, 4, 0xa, 17)

def test_npt_decode_is_idempotent():
    first = decode_npt(1, 1, 4, 0xa, 17)
    assert first == AmdBrand("Dual-Core AMD Opteron(tm)", "Processor 2216", "")
    assert decode_npt(1, 1, 4, 0xa, 17) == first

def test_npt_fx():
    assert str(decode_npt(1, 1, 0xc, 0x1, 17)) == "AMD Athlon(tm) 64 FX-74 Dual Core Processor"

STRING_TESTS = [
    (StringFields(1, 0, 3, 3, 55, 6), AmdBrand("AMD Phenom(tm) II X4", "955", "Processor")),
    # the later of two entries sharing a key is the one in use
    (StringFields(1, 0, 3, 2, 95, 0), AmdBrand("AMD Phenom(tm)", "9500", "Quad-Core Processor")),
    (StringFields(1, 0, 3, 3, 55, 0xe), AmdBrand("AMD Phenom(tm) II X4", "955", "")),
    (StringFields(1, 0, 3, 0xe, 55, 6), EMPTY_BRAND),
    (StringFields(0xf, 0, 3, 3, 55, 6), EMPTY_BRAND),
]

@pytest.mark.parametrize("args", STRING_TESTS, ids=lambda x: f"{x[0]}")
def test_decode_strings(args):
    fields, brand = args
    assert decode_strings(0x10, fields) == brand

def test_empty_brand_is_falsy():
    assert not EMPTY_BRAND
    assert str(EMPTY_BRAND) == ""
    assert AmdBrand("", "955", "")

def test_reconstruct_legacy(venice_unknown_brand):
    rebuilt = reconstruct(build_stash(venice_unknown_brand.build()))
    assert str(rebuilt) == "AMD Sempron(tm) Processor 3000+"

def test_reconstruct_family_10h(deneb):
    rebuilt = reconstruct(build_stash(deneb.build()))
    assert rebuilt == AmdBrand("AMD Phenom(tm) II X4", "955", "Processor")

def test_reconstruct_without_table(builder):
    stash = build_stash(builder.vendor("AuthenticAMD").signature(0x17, 0x71, 0).build())
    assert reconstruct(stash) is None

FAMILY_STRING_TESTS = [
    (0x11, StringFields(2, 0, 1, 1, 80, 0), AmdBrand("AMD Turion(tm) X2 Ultra Dual-Core Mobile", "ZM-80", "")),
    (0x12, StringFields(1, 0, 3, 1, 0, 1), AmdBrand("AMD", "A8-3500M", "APU with Radeon(tm) HD Graphics")),
    (0x14, StringFields(0, 0, 1, 2, 35, 2), AmdBrand("AMD", "E-350", "APU with Radeon(tm) HD Graphics")),
    (0x14, StringFields(1, 0, 1, 2, 35, 2), EMPTY_BRAND),
]

@pytest.mark.parametrize("args", FAMILY_STRING_TESTS, ids=lambda x: f"{x[0]:#x}-{x[1]}")
def test_decode_strings_later_families(args):
    family, fields, brand = args
    assert decode_strings(family, fields) == brand
