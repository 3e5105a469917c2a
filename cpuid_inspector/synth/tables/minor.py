# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Rule tables for vendors that shipped only a handful of x86 designs"""

from cpuid_inspector.synth.predicates import Q
from cpuid_inspector.synth.rules import F, FM, FMQ, FMS, VendorTable

umc_table = VendorTable([
    FM(4, 0x1, "UMC U5D (486DX)"),
    FM(4, 0x2, "UMC U5S (486SX)"),
    F(4, "UMC 486 (unknown model)"),
], "UMC (unknown model)")

nexgen_table = VendorTable([
    FMS(5, 0x0, 0x4, "NexGen P100"),
    FMS(5, 0x0, 0x6, "NexGen P120 (E2/C0)"),
    FM(5, 0x0, "NexGen Nx586"),
    F(5, "NexGen Nx586 (unknown model)"),
], "NexGen (unknown model)")

rise_table = VendorTable([
    FM(5, 0x0, "Rise mP6 iDragon (0.25um)"),
    FM(5, 0x2, "Rise mP6 iDragon (0.18um)"),
    FM(5, 0x8, "Rise mP6 iDragon II (0.25um)"),
    FM(5, 0x9, "Rise mP6 iDragon II (0.18um)"),
    F(5, "Rise mP6 (unknown model)"),
], "Rise (unknown model)")

sis_table = VendorTable([
    FM(5, 0x0, "SiS 55x"),
    F(5, "SiS (unknown model)"),
], "SiS (unknown model)")

nsc_table = VendorTable([
    FM(5, 0x4, "NSC Geode GX1 / GXLV / GXm"),
    FM(5, 0x5, "NSC Geode GX2"),
    FM(5, 0xa, "NSC Geode LX"),
    F(5, "NSC Geode (unknown model)"),
], "NSC (unknown model)")

vortex_table = VendorTable([
    FMQ(5, 0x2, Q.VORTEX86, "DM&P Vortex86DX"),
    FM(5, 0x2, "DM&P Vortex86SX / Vortex86DX"),
    FM(5, 0x8, "DM&P Vortex86MX / Vortex86EX"),
    F(5, "DM&P Vortex86 (unknown model)"),
    FM(6, 0x0, "DM&P Vortex86DX3"),
    FM(6, 0x1, "DM&P Vortex86EX2"),
    F(6, "DM&P Vortex86 (unknown model)"),
], "Vortex (unknown model)")

rdc_table = VendorTable([
    FM(4, 0x5, "RDC IAD 100 (R3210/R8610)"),
    F(4, "RDC 486 (unknown model)"),
], "RDC (unknown model)")
