# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth.predicates import Q
from cpuid_inspector.synth.rules import F, FM, FMQ, FMS, VendorTable

rules = [
    FMS(5, 0x4, 0x2, "Transmeta Crusoe TM3200"),
    FMS(5, 0x4, 0x3, "Transmeta Crusoe TM5x00 (TM5500/TM5800)"),
    FMQ(5, 0x4, Q.TRANSMETA_CRUSOE, "Transmeta Crusoe TM5x00"),
    FM(5, 0x4, "Transmeta Crusoe"),
    F(5, "Transmeta Crusoe (unknown model)"),
    FM(0xf, 0x2, "Transmeta Efficeon TM8000 (130nm)"),
    FM(0xf, 0x3, "Transmeta Efficeon TM8800 (90nm)"),
    FMQ(0xf, 0x4, Q.TRANSMETA_EFFICEON, "Transmeta Efficeon TM8800 (90nm)"),
    F(0xf, "Transmeta Efficeon (unknown model)"),
]

table = VendorTable(rules, "Transmeta (unknown model)")
