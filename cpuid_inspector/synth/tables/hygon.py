# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth.predicates import Q
from cpuid_inspector.synth.rules import F, FM, FMQ, FMS, FMSQ, VendorTable

rules = [
    FMSQ(0x18, 0x0, 0x1, Q.HYGON_C86, "Hygon C86 7100 / 5100 / 3100 (Dhyana A1)"),
    FMS(0x18, 0x0, 0x1, "Hygon Dhyana (A1)"),
    FMSQ(0x18, 0x0, 0x2, Q.HYGON_C86, "Hygon C86 7100 / 5100 / 3100 (Dhyana A2)"),
    FMS(0x18, 0x0, 0x2, "Hygon Dhyana (A2)"),
    FM(0x18, 0x0, "Hygon Dhyana"),
    FMS(0x18, 0x1, 0x0, "Hygon C86 7200 / 3200 (Dhyana Plus B0)"),
    FMS(0x18, 0x1, 0x1, "Hygon C86 7200 / 3200 (Dhyana Plus B1)"),
    FM(0x18, 0x1, "Hygon C86 7200 / 3200 (Dhyana Plus)"),
    FMQ(0x18, 0x2, Q.HYGON_C86, "Hygon C86 3250 (Dhyana)"),
    FM(0x18, 0x2, "Hygon Dhyana (C86-3G)"),
    FM(0x18, 0x4, "Hygon C86 7300 (C86-4G)"),
    FM(0x18, 0x5, "Hygon C86 3350 (C86-4G)"),
    FM(0x18, 0x6, "Hygon C86 7390 (C86-4G)"),
    FM(0x18, 0x7, "Hygon C86 7490 (C86-5G)"),
    F(0x18, "Hygon C86 (unknown model)"),
]

table = VendorTable(rules, "Hygon (unknown model)")
