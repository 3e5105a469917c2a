# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import pytest

from cpuid_inspector.synth.brand import parse_brand

FLAG_TESTS = [
    ("Intel(R) Celeron(R) M processor 1.50GHz", ["celeron", "celeron_m"], ["pentium_m"]),
    ("Intel(R) Core(TM)2 Duo CPU     T7500  @ 2.20GHz", ["core2", "core2_duo"], ["core2_quad"]),
    ("Intel(R) Core(TM) i7-3720QM CPU @ 2.60GHz", ["core_i7", "m_line"], ["core_i5"]),
    ("AMD Phenom(tm) II X4 955 Processor", ["phenom", "phenom_ii"], ["athlon_ii", "opteron"]),
    ("AMD Sempron(tm) Processor 3000+", ["sempron"], ["opteron"]),
]

@pytest.mark.parametrize("args", FLAG_TESTS, ids=lambda x: x[0])
def test_flags(args):
    brand, present, absent = args
    flags = parse_brand(brand)
    for name in present:
        assert name in flags
    for name in absent:
        assert name not in flags

def test_whitespace_is_collapsed():
    assert parse_brand("  Intel(R)   Xeon(R)  CPU ").brand == "Intel(R) Xeon(R) CPU"

@pytest.mark.parametrize("args", [
    ("AMD Athlon(tm) 64 X2 Dual Core Processor 4200+", 2),
    ("AMD Phenom(tm) 8450 Triple-Core Processor", 3),
    ("AMD Phenom(tm) II X4 955 Processor", 4),
    ("AMD Sempron(tm) Processor 3000+", None),
], ids=lambda x: x[0])
def test_core_count(args):
    brand, cores = args
    assert parse_brand(brand).cores == cores

def test_model_number():
    flags = parse_brand("Intel(R) Core(TM) i7-3720QM CPU @ 2.60GHz")
    assert flags.model_number == 3720
    assert flags.model_suffix == "QM"

def test_empty_brand():
    flags = parse_brand(None)
    assert flags.brand == ""
    assert not flags.flags
    assert flags.cores is None
    assert flags.model_number is None

def test_unknown_flag_name_is_an_internal_error():
    with pytest.raises(AssertionError):
        "no_such_flag" in parse_brand("Intel")
