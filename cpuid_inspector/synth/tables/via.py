# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth.predicates import Q
from cpuid_inspector.synth.rules import F, FM, FMQ, FMS, FMSQ, VendorTable

rules = [
    # IDT WinChip
    FM(5, 0x4, "IDT WinChip C6"),
    FMS(5, 0x8, 0x5, "IDT WinChip 2"),
    FMS(5, 0x8, 0x7, "IDT WinChip 2A"),
    FMS(5, 0x8, 0xa, "IDT WinChip 2B"),
    FMS(5, 0x8, 0xb, "IDT WinChip 2B"),
    FM(5, 0x8, "IDT WinChip 2"),
    FM(5, 0x9, "IDT WinChip 3"),
    F(5, "IDT WinChip (unknown model)"),

    # C3, C7 and Nano
    FM(6, 0x5, "VIA Cyrix III (Joshua)"),
    FMQ(6, 0x6, Q.VIA_EDEN, "VIA Eden ESP (Samuel)"),
    FM(6, 0x6, "VIA C3 / Cyrix III (Samuel)"),
    FMSQ(6, 0x7, 0x0, Q.VIA_EDEN, "VIA Eden ESP (Samuel 2)"),
    FMS(6, 0x7, 0x0, "VIA C3 (Samuel 2)"),
    FMSQ(6, 0x7, 0x1, Q.VIA_EDEN, "VIA Eden ESP (Samuel 2)"),
    FMS(6, 0x7, 0x1, "VIA C3 (Samuel 2)"),
    FMSQ(6, 0x7, 0x3, Q.VIA_EDEN, "VIA Eden ESP (Samuel 2)"),
    FMS(6, 0x7, 0x3, "VIA C3 (Samuel 2)"),
    FMQ(6, 0x7, Q.VIA_EDEN, "VIA Eden ESP (Ezra)"),
    FM(6, 0x7, "VIA C3 (Ezra)"),
    FMQ(6, 0x8, Q.VIA_EDEN, "VIA Eden ESP (Ezra-T)"),
    FM(6, 0x8, "VIA C3 (Ezra-T)"),
    FMSQ(6, 0x9, 0x1, Q.VIA_EDEN, "VIA Eden ESP (Nehemiah)"),
    FMS(6, 0x9, 0x1, "VIA C3 (Nehemiah)"),
    FMSQ(6, 0x9, 0x3, Q.VIA_EDEN, "VIA Eden ESP (Nehemiah)"),
    FMS(6, 0x9, 0x3, "VIA C3 (Nehemiah)"),
    FMQ(6, 0x9, Q.VIA_EDEN, "VIA Eden ESP / Eden-N (Nehemiah P)"),
    FM(6, 0x9, "VIA C3-M / C3 (Nehemiah P)"),
    FMQ(6, 0xa, Q.VIA_C7_M, "VIA C7-M (Esther)"),
    FMQ(6, 0xa, Q.VIA_EDEN, "VIA Eden (Esther)"),
    FM(6, 0xa, "VIA C7 (Esther)"),
    FMQ(6, 0xd, Q.VIA_C7_M, "VIA C7-M (Esther)"),
    FMQ(6, 0xd, Q.VIA_EDEN, "VIA Eden (Esther)"),
    FM(6, 0xd, "VIA C7 (Esther)"),
    FMQ(6, 0xf, Q.VIA_QUADCORE, "VIA QuadCore (Isaiah)"),
    FMQ(6, 0xf, Q.VIA_NANO_X2, "VIA Nano X2 (Isaiah)"),
    FMQ(6, 0xf, Q.VIA_EDEN, "VIA Eden X2 / X4 (Isaiah)"),
    FMQ(6, 0xf, Q.VIA_NANO, "VIA Nano (Isaiah)"),
    FM(6, 0xf, "VIA Nano / Eden (Isaiah)"),
    FM(6, 0x19, "VIA / Zhaoxin ZX-C (ZhangJiang)"),
    F(6, "VIA C3 / C7 / Nano (unknown model)"),
    FM(7, 0x1b, "VIA / Zhaoxin KaiXian KX-5000 (WuDaoKou)"),
    FM(7, 0x3b, "VIA / Zhaoxin KaiXian KX-6000 (LuJiaZui)"),
    F(7, "VIA / Zhaoxin (unknown model)"),
]

table = VendorTable(rules, "VIA (unknown model)")
