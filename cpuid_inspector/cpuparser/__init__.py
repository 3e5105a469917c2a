# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import cpuid_inspector.cpuparser.cpuids as cpuids
from cpuid_inspector.cpuparser.platformbase import cpuid_result, CPUIDSnapshot

dispatch_table = {
    0x0: cpuids.LEAF_0,
    0x1: cpuids.LEAF_1,
    0x2: cpuids.LEAF_2,
    0x4: cpuids.LEAF_4,
    0xB: cpuids.LEAF_B,
    0x1F: cpuids.LEAF_1F,
    0x40000000: cpuids.LEAF_40000000,
    0x80000000: cpuids.LEAF_80000000,
    0x80000001: cpuids.LEAF_80000001,
    0x80000002: cpuids.LEAF_80000002,
    0x80000003: cpuids.LEAF_80000003,
    0x80000004: cpuids.LEAF_80000004,
    0x80000006: cpuids.LEAF_80000006,
    0x80000008: cpuids.LEAF_80000008,
    0x8000001D: cpuids.LEAF_8000001D,
    0x8000001E: cpuids.LEAF_8000001E,
}

def parse_cpuid(leaf, subleaf, snapshot):
    """Return the field view of a captured leaf, or None when it has no view or was not captured."""
    if leaf in dispatch_table.keys():
        return dispatch_table[leaf].read(snapshot, subleaf)
    else:
        return None
