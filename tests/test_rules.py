# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import pytest

from cpuid_inspector.synth.predicates import PredicateSet, Q
from cpuid_inspector.synth.rules import F, FM, FMQ, FMS, FMSQ, VendorTable, first_match, lookup
from cpuid_inspector.synth.signature import Signature

TABLE = VendorTable([
    FMSQ(6, 0x3a, 9, Q.CELERON, "exact + Celeron"),
    FMS(6, 0x3a, 9, "exact"),
    FMQ(6, 0x3a, Q.CELERON, "model + Celeron"),
    FM(6, 0x3a, "model"),
    F(6, "family"),
], "default")

LOOKUP_TESTS = [
    (Signature(6, 0x3a, 9), {Q.CELERON}, "exact + Celeron"),
    (Signature(6, 0x3a, 9), set(), "exact"),
    (Signature(6, 0x3a, 8), {Q.CELERON}, "model + Celeron"),
    (Signature(6, 0x3a, 8), {Q.PENTIUM}, "model"),
    (Signature(6, 0x2a, 7), {Q.CELERON}, "family"),
    (Signature(0xf, 0x2, 7), set(), "default"),
]

@pytest.mark.parametrize("args", LOOKUP_TESTS, ids=lambda x: f"{x[0]}")
def test_first_matching_rule_wins(args):
    signature, true_predicates, result = args
    assert lookup(TABLE, signature, PredicateSet(true_predicates)) == result

def test_order_beats_specificity():
    rules = [FM(6, 0x3a, "model"), FMS(6, 0x3a, 9, "exact")]
    assert first_match(rules, Signature(6, 0x3a, 9), PredicateSet()) == "model"

def test_missing_signature_gives_default():
    assert lookup(TABLE, None, PredicateSet()) == "default"
    assert first_match(TABLE.rules, None, PredicateSet()) is None

def test_combined_predicates_must_all_hold():
    rules = [
        FMSQ(6, 0x17, 0xa, (Q.DESKTOP_CORE2_DUO, Q.L2_6M), "both"),
        FMQ(6, 0x17, (Q.MOBILE_CORE2_DUO, Q.L2_6M), "mobile with 6M"),
        FMSQ(6, 0x17, 0xa, Q.DESKTOP_CORE2_DUO, "desktop"),
    ]
    signature = Signature(6, 0x17, 0xa)
    assert first_match(rules, signature, PredicateSet({Q.DESKTOP_CORE2_DUO, Q.L2_6M})) == "both"
    assert first_match(rules, signature, PredicateSet({Q.DESKTOP_CORE2_DUO})) == "desktop"
    assert first_match(rules, signature, PredicateSet({Q.MOBILE_CORE2_DUO})) is None
