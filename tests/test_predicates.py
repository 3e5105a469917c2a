# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth.brand import parse_brand
from cpuid_inspector.synth.predicates import PredicateSet, Q, context_from_stash, evaluate_predicates
from cpuid_inspector.synth.stash import build_stash
from cpuid_inspector.synth.topology import TopologyFacts

def predicates_of(snapshot, topology=None):
    stash = build_stash(snapshot)
    return evaluate_predicates(context_from_stash(stash, parse_brand(stash.effective_brand), topology))

def test_brand_predicates(ivy_bridge):
    predicates = predicates_of(ivy_bridge.brand("Intel(R) Celeron(R) CPU G1610 @ 2.60GHz").build())
    assert Q.CELERON in predicates
    assert Q.PENTIUM not in predicates

def test_cache_predicates(builder):
    predicates = predicates_of(builder.vendor("GenuineIntel").signature(6, 0xf, 6).leaf(0x2, 0x00007d01).build())
    assert predicates[Q.L2_2M]
    assert predicates[Q.BIG_L2]
    assert not predicates[Q.NO_L2]

def test_core_count_from_topology(deneb):
    predicates = predicates_of(deneb.build(), TopologyFacts("AMD leaf 0x80000008", 2, 1))
    assert Q.DUAL_CORE in predicates
    # the brand still says X4
    assert Q.QUAD_CORE in predicates

def test_amd_predicates(deneb):
    predicates = predicates_of(deneb.build())
    assert Q.QUAD_CORE in predicates
    assert Q.OPTERON not in predicates
    assert Q.ATHLON_II not in predicates
    assert Q.TRIPLE_CORE not in predicates

def test_evaluation_is_deterministic(deneb):
    snapshot = deneb.build()
    assert predicates_of(snapshot) == predicates_of(snapshot)

def test_predicate_set():
    predicates = PredicateSet([Q.XEON, Q.CELERON])
    assert len(predicates) == 2
    assert list(predicates) == [Q.CELERON, Q.XEON]
    assert Q.PENTIUM not in predicates
    assert predicates == PredicateSet([Q.CELERON, Q.XEON])
