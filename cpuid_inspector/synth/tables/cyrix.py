# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth.rules import F, FM, VendorTable

rules = [
    FM(4, 0x4, "Cyrix MediaGX (GX, GXm)"),
    FM(4, 0x9, "Cyrix 5x86"),
    F(4, "Cyrix 5x86 / MediaGX (unknown model)"),
    FM(5, 0x2, "Cyrix 6x86 (M1)"),
    FM(5, 0x3, "Cyrix 6x86 (M1) with 2x multiplier"),
    FM(5, 0x4, "Cyrix MediaGX MMX Enhanced (GXm)"),
    F(5, "Cyrix 6x86 / MediaGX (unknown model)"),
    FM(6, 0x0, "Cyrix 6x86MX / MII (M2)"),
    FM(6, 0x5, "VIA Cyrix M2 core"),
    FM(6, 0x6, "VIA Cyrix III (WinChip C5A)"),
    FM(6, 0x7, "VIA Cyrix III (WinChip C5B/C5C)"),
    FM(6, 0x8, "VIA Cyrix III (WinChip C5N)"),
    FM(6, 0x9, "VIA Cyrix III (WinChip C5XL/C5P)"),
    F(6, "Cyrix 6x86MX / MII (unknown model)"),
]

table = VendorTable(rules, "Cyrix (unknown model)")
