# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth.predicates import Q
from cpuid_inspector.synth.rules import F, FM, FMQ, FMS, VendorTable

rules = [
    FM(6, 0xf, "Zhaoxin ZX-A / ZX-B (Isaiah)"),
    FMS(6, 0x19, 0x3, "Zhaoxin KaiXian ZX-C / ZX-C+ (ZhangJiang)"),
    FM(6, 0x19, "Zhaoxin KaiXian ZX-C (ZhangJiang)"),
    F(6, "Zhaoxin (unknown model)"),
    FMQ(7, 0x1b, Q.ZHAOXIN_KH, "Zhaoxin KaiSheng KH-20000 (WuDaoKou)"),
    FM(7, 0x1b, "Zhaoxin KaiXian KX-5000 (WuDaoKou)"),
    FMQ(7, 0x3b, Q.ZHAOXIN_KH, "Zhaoxin KaiSheng KH-30000 (LuJiaZui)"),
    FM(7, 0x3b, "Zhaoxin KaiXian KX-6000 (LuJiaZui)"),
    FMQ(7, 0x5b, Q.ZHAOXIN_KH, "Zhaoxin KaiSheng KH-40000 (YongFeng)"),
    FM(7, 0x5b, "Zhaoxin KaiXian KX-7000 (Century Avenue)"),
    F(7, "Zhaoxin KaiXian / KaiSheng (unknown model)"),
]

table = VendorTable(rules, "Zhaoxin (unknown model)")
