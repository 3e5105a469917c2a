# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth.predicates import Q
from cpuid_inspector.synth.rules import F, FM, FMQ, FMS, FMSQ, VendorTable

rules = [
    # Am486 and Am5x86
    FM(4, 0x3, "AMD 80486DX2"),
    FM(4, 0x7, "AMD 80486DX2WB"),
    FM(4, 0x8, "AMD 80486DX4"),
    FM(4, 0x9, "AMD 80486DX4WB"),
    FM(4, 0xa, "AMD Elan SC400"),
    FM(4, 0xe, "AMD 5x86"),
    FM(4, 0xf, "AMD 5x86WB"),
    F(4, "AMD 80486 / 5x86 (unknown model)"),

    # K5, K6 and Geode
    FMS(5, 0x0, 0x0, "AMD SSA5 (PR75, PR90, PR100)"),
    FM(5, 0x0, "AMD SSA5 (PR75, PR90, PR100)"),
    FM(5, 0x1, "AMD 5k86 (PR120, PR133)"),
    FM(5, 0x2, "AMD 5k86 (PR166)"),
    FM(5, 0x3, "AMD 5k86 (PR200)"),
    FM(5, 0x5, "AMD Geode GX"),
    FMS(5, 0x6, 0x1, "AMD K6 (B)"),
    FMS(5, 0x6, 0x2, "AMD K6 (C)"),
    FM(5, 0x6, "AMD K6"),
    FMS(5, 0x7, 0x0, "AMD K6 (Little Foot A)"),
    FM(5, 0x7, "AMD K6 (Little Foot)"),
    FMSQ(5, 0x8, 0x0, Q.MOBILE, "AMD Mobile K6-2 (Chomper A)"),
    FMS(5, 0x8, 0x0, "AMD K6-2 (Chomper A)"),
    FMSQ(5, 0x8, 0xc, Q.MOBILE, "AMD Mobile K6-2 (Chomper Extended CXT)"),
    FMS(5, 0x8, 0xc, "AMD K6-2 (Chomper Extended CXT)"),
    FMQ(5, 0x8, Q.MOBILE, "AMD Mobile K6-2 (Chomper)"),
    FM(5, 0x8, "AMD K6-2 (Chomper)"),
    FMS(5, 0x9, 0x1, "AMD K6-III (Sharptooth B)"),
    FM(5, 0x9, "AMD K6-III (Sharptooth)"),
    FM(5, 0xa, "AMD Geode LX"),
    FMQ(5, 0xd, Q.AMD_K6_III, "AMD K6-III+"),
    FMQ(5, 0xd, Q.AMD_K6_2, "AMD K6-2+"),
    FM(5, 0xd, "AMD K6-2+ / K6-III+"),
    F(5, "AMD K5 / K6 (unknown model)"),

    # K7
    FMS(6, 0x1, 0x1, "AMD Athlon (Argon C1)"),
    FMS(6, 0x1, 0x2, "AMD Athlon (Argon C2)"),
    FM(6, 0x1, "AMD Athlon (Argon)"),
    FMS(6, 0x2, 0x1, "AMD Athlon (Pluto/Orion A1)"),
    FMS(6, 0x2, 0x2, "AMD Athlon (Pluto/Orion A2)"),
    FM(6, 0x2, "AMD Athlon (Pluto/Orion)"),
    FMS(6, 0x3, 0x0, "AMD Duron (Spitfire A0)"),
    FMS(6, 0x3, 0x1, "AMD Duron (Spitfire A2)"),
    FMQ(6, 0x3, Q.MOBILE_DURON, "AMD Mobile Duron (Spitfire)"),
    FM(6, 0x3, "AMD Duron (Spitfire)"),
    FMS(6, 0x4, 0x2, "AMD Athlon (Thunderbird A4-A7)"),
    FMS(6, 0x4, 0x4, "AMD Athlon (Thunderbird A9)"),
    FM(6, 0x4, "AMD Athlon (Thunderbird)"),
    FMSQ(6, 0x6, 0x0, Q.ATHLON_MP, "AMD Athlon MP (Palomino A0)"),
    FMSQ(6, 0x6, 0x0, Q.MOBILE_ATHLON, "AMD Mobile Athlon 4 (Palomino A0)"),
    FMSQ(6, 0x6, 0x0, Q.DURON, "AMD Duron (Morgan A0)"),
    FMSQ(6, 0x6, 0x0, Q.L2_64K, "AMD Duron (Morgan A0)"),
    FMS(6, 0x6, 0x0, "AMD Athlon XP (Palomino A0)"),
    FMSQ(6, 0x6, 0x1, Q.ATHLON_MP, "AMD Athlon MP (Palomino A2)"),
    FMSQ(6, 0x6, 0x1, Q.MOBILE_ATHLON, "AMD Mobile Athlon 4 (Palomino A2)"),
    FMSQ(6, 0x6, 0x1, Q.MOBILE_DURON, "AMD Mobile Duron (Morgan A2)"),
    FMSQ(6, 0x6, 0x1, Q.DURON, "AMD Duron (Morgan A2)"),
    FMSQ(6, 0x6, 0x1, Q.L2_64K, "AMD Duron (Morgan A2)"),
    FMS(6, 0x6, 0x1, "AMD Athlon XP (Palomino A2)"),
    FMSQ(6, 0x6, 0x2, Q.ATHLON_MP, "AMD Athlon MP (Palomino A5)"),
    FMSQ(6, 0x6, 0x2, Q.MOBILE_ATHLON_XP, "AMD Mobile Athlon XP (Palomino A5)"),
    FMSQ(6, 0x6, 0x2, Q.MOBILE_ATHLON, "AMD Mobile Athlon 4 (Palomino A5)"),
    FMSQ(6, 0x6, 0x2, Q.MOBILE_DURON, "AMD Mobile Duron (Camaro A5)"),
    FMSQ(6, 0x6, 0x2, Q.DURON, "AMD Duron (Morgan A5)"),
    FMSQ(6, 0x6, 0x2, Q.L2_64K, "AMD Duron (Morgan A5)"),
    FMS(6, 0x6, 0x2, "AMD Athlon XP (Palomino A5)"),
    FMQ(6, 0x6, Q.ATHLON_MP, "AMD Athlon MP (Palomino)"),
    FMQ(6, 0x6, Q.MOBILE_ATHLON_XP, "AMD Mobile Athlon XP (Palomino)"),
    FMQ(6, 0x6, Q.MOBILE_ATHLON, "AMD Mobile Athlon 4 (Palomino)"),
    FMQ(6, 0x6, Q.DURON, "AMD Duron (Morgan)"),
    FMQ(6, 0x6, Q.L2_64K, "AMD Duron (Morgan)"),
    FM(6, 0x6, "AMD Athlon XP (Palomino)"),
    FMSQ(6, 0x7, 0x0, Q.MOBILE_DURON, "AMD Mobile Duron (Morgan A0)"),
    FMS(6, 0x7, 0x0, "AMD Duron (Morgan A0)"),
    FMSQ(6, 0x7, 0x1, Q.MOBILE_DURON, "AMD Mobile Duron (Morgan A1)"),
    FMS(6, 0x7, 0x1, "AMD Duron (Morgan A1)"),
    FMQ(6, 0x7, Q.MOBILE_DURON, "AMD Mobile Duron (Morgan)"),
    FM(6, 0x7, "AMD Duron (Morgan)"),
    FMSQ(6, 0x8, 0x0, Q.ATHLON_MP, "AMD Athlon MP (Thoroughbred A0)"),
    FMSQ(6, 0x8, 0x0, Q.MOBILE_ATHLON_XP, "AMD Mobile Athlon XP (Thoroughbred A0)"),
    FMSQ(6, 0x8, 0x0, Q.DURON, "AMD Duron (Applebred A0)"),
    FMSQ(6, 0x8, 0x0, Q.SEMPRON, "AMD Sempron (Thoroughbred A0)"),
    FMSQ(6, 0x8, 0x0, Q.L2_64K, "AMD Duron (Applebred A0)"),
    FMS(6, 0x8, 0x0, "AMD Athlon XP (Thoroughbred A0)"),
    FMSQ(6, 0x8, 0x1, Q.ATHLON_MP, "AMD Athlon MP (Thoroughbred B0)"),
    FMSQ(6, 0x8, 0x1, Q.MOBILE_ATHLON_XP, "AMD Mobile Athlon XP (Thoroughbred B0)"),
    FMSQ(6, 0x8, 0x1, Q.DURON, "AMD Duron (Applebred B0)"),
    FMSQ(6, 0x8, 0x1, Q.SEMPRON, "AMD Sempron (Thoroughbred B0)"),
    FMSQ(6, 0x8, 0x1, Q.L2_64K, "AMD Duron (Applebred B0)"),
    FMS(6, 0x8, 0x1, "AMD Athlon XP (Thoroughbred B0)"),
    FMQ(6, 0x8, Q.ATHLON_MP, "AMD Athlon MP (Thoroughbred)"),
    FMQ(6, 0x8, Q.MOBILE_ATHLON_XP, "AMD Mobile Athlon XP (Thoroughbred)"),
    FMQ(6, 0x8, Q.DURON, "AMD Duron (Applebred)"),
    FMQ(6, 0x8, Q.SEMPRON, "AMD Sempron (Thoroughbred)"),
    FMQ(6, 0x8, Q.L2_64K, "AMD Duron (Applebred)"),
    FM(6, 0x8, "AMD Athlon XP (Thoroughbred)"),
    FMSQ(6, 0xa, 0x0, Q.ATHLON_MP, "AMD Athlon MP (Barton A2)"),
    FMSQ(6, 0xa, 0x0, Q.MOBILE_ATHLON_XP, "AMD Mobile Athlon XP-M (Barton A2)"),
    FMSQ(6, 0xa, 0x0, Q.MOBILE_SEMPRON, "AMD Mobile Sempron (Barton A2)"),
    FMSQ(6, 0xa, 0x0, Q.SEMPRON, "AMD Sempron (Barton/Thorton A2)"),
    FMSQ(6, 0xa, 0x0, Q.L2_256K, "AMD Athlon XP (Thorton A2)"),
    FMS(6, 0xa, 0x0, "AMD Athlon XP (Barton A2)"),
    FMQ(6, 0xa, Q.ATHLON_MP, "AMD Athlon MP (Barton)"),
    FMQ(6, 0xa, Q.MOBILE_ATHLON_XP, "AMD Mobile Athlon XP-M (Barton)"),
    FMQ(6, 0xa, Q.SEMPRON, "AMD Sempron (Barton/Thorton)"),
    FMQ(6, 0xa, Q.L2_256K, "AMD Athlon XP (Thorton)"),
    FM(6, 0xa, "AMD Athlon XP (Barton)"),
    F(6, "AMD Athlon / Duron (unknown model)"),

    # K8
    FMSQ(0xf, 0x4, 0x0, Q.ATHLON_64_FX, "AMD Athlon 64 FX (ClawHammer SH7-B0)"),
    FMSQ(0xf, 0x4, 0x0, Q.MOBILE_ATHLON_64, "AMD Mobile Athlon 64 (ClawHammer SH7-B0)"),
    FMS(0xf, 0x4, 0x0, "AMD Athlon 64 (ClawHammer SH7-B0)"),
    FMSQ(0xf, 0x4, 0x8, Q.ATHLON_64_FX, "AMD Athlon 64 FX (ClawHammer SH7-C0)"),
    FMSQ(0xf, 0x4, 0x8, Q.MOBILE_ATHLON_64, "AMD Mobile Athlon 64 (ClawHammer SH7-C0)"),
    FMS(0xf, 0x4, 0x8, "AMD Athlon 64 (ClawHammer SH7-C0)"),
    FMSQ(0xf, 0x4, 0xa, Q.ATHLON_64_FX, "AMD Athlon 64 FX (ClawHammer SH7-CG)"),
    FMSQ(0xf, 0x4, 0xa, Q.MOBILE_ATHLON_64, "AMD Mobile Athlon 64 (ClawHammer SH7-CG)"),
    FMSQ(0xf, 0x4, 0xa, Q.TURION, "AMD Turion 64 (ClawHammer SH7-CG)"),
    FMS(0xf, 0x4, 0xa, "AMD Athlon 64 (ClawHammer SH7-CG)"),
    FMQ(0xf, 0x4, Q.MOBILE_ATHLON_64, "AMD Mobile Athlon 64 (ClawHammer)"),
    FM(0xf, 0x4, "AMD Athlon 64 (ClawHammer)"),
    FMSQ(0xf, 0x5, 0x0, Q.OPTERON_MP, "AMD Opteron 800 (SledgeHammer SH7-B0)"),
    FMSQ(0xf, 0x5, 0x0, Q.OPTERON_DP, "AMD Opteron 200 (SledgeHammer SH7-B0)"),
    FMS(0xf, 0x5, 0x0, "AMD Opteron 100 (SledgeHammer SH7-B0)"),
    FMSQ(0xf, 0x5, 0x1, Q.OPTERON_MP, "AMD Opteron 800 (SledgeHammer SH7-B3)"),
    FMSQ(0xf, 0x5, 0x1, Q.OPTERON_DP, "AMD Opteron 200 (SledgeHammer SH7-B3)"),
    FMS(0xf, 0x5, 0x1, "AMD Opteron 100 (SledgeHammer SH7-B3)"),
    FMSQ(0xf, 0x5, 0x8, Q.ATHLON_64_FX, "AMD Athlon 64 FX (SledgeHammer SH7-C0)"),
    FMSQ(0xf, 0x5, 0x8, Q.OPTERON_MP, "AMD Opteron 800 (SledgeHammer SH7-C0)"),
    FMSQ(0xf, 0x5, 0x8, Q.OPTERON_DP, "AMD Opteron 200 (SledgeHammer SH7-C0)"),
    FMS(0xf, 0x5, 0x8, "AMD Opteron 100 (SledgeHammer SH7-C0)"),
    FMSQ(0xf, 0x5, 0xa, Q.ATHLON_64_FX, "AMD Athlon 64 FX (SledgeHammer SH7-CG)"),
    FMSQ(0xf, 0x5, 0xa, Q.OPTERON_MP, "AMD Opteron 800 (SledgeHammer SH7-CG)"),
    FMSQ(0xf, 0x5, 0xa, Q.OPTERON_DP, "AMD Opteron 200 (SledgeHammer SH7-CG)"),
    FMS(0xf, 0x5, 0xa, "AMD Opteron 100 (SledgeHammer SH7-CG)"),
    FMQ(0xf, 0x5, Q.ATHLON_64_FX, "AMD Athlon 64 FX (SledgeHammer)"),
    FM(0xf, 0x5, "AMD Opteron (SledgeHammer)"),
    FMSQ(0xf, 0x7, 0xa, Q.ATHLON_64_FX, "AMD Athlon 64 FX (ClawHammer SH7-CG)"),
    FMSQ(0xf, 0x7, 0xa, Q.SEMPRON, "AMD Sempron (Paris SH7-CG)"),
    FMS(0xf, 0x7, 0xa, "AMD Athlon 64 (ClawHammer SH7-CG)"),
    FM(0xf, 0x7, "AMD Athlon 64 (ClawHammer)"),
    FMSQ(0xf, 0x8, 0x2, Q.MOBILE_SEMPRON, "AMD Mobile Sempron (Dublin CH7-CG)"),
    FMSQ(0xf, 0x8, 0x2, Q.TURION, "AMD Turion 64 (Odessa CH7-CG)"),
    FMS(0xf, 0x8, 0x2, "AMD Mobile Athlon 64 (Odessa CH7-CG)"),
    FM(0xf, 0x8, "AMD Mobile Athlon 64 (Odessa)"),
    FMSQ(0xf, 0xb, 0x2, Q.SEMPRON, "AMD Sempron (Paris CH7-CG)"),
    FMS(0xf, 0xb, 0x2, "AMD Athlon 64 (Newcastle CH7-CG)"),
    FM(0xf, 0xb, "AMD Athlon 64 (Newcastle)"),
    FMSQ(0xf, 0xc, 0x0, Q.MOBILE_SEMPRON, "AMD Mobile Sempron (Dublin DH7-CG)"),
    FMSQ(0xf, 0xc, 0x0, Q.SEMPRON, "AMD Sempron (Paris DH7-CG)"),
    FMSQ(0xf, 0xc, 0x0, Q.MOBILE_ATHLON_64, "AMD Mobile Athlon 64 (Oakville DH7-CG)"),
    FMS(0xf, 0xc, 0x0, "AMD Athlon 64 (Newcastle DH7-CG)"),
    FMQ(0xf, 0xc, Q.SEMPRON, "AMD Sempron (Paris)"),
    FM(0xf, 0xc, "AMD Athlon 64 (Newcastle)"),
    FMSQ(0xf, 0xe, 0x0, Q.SEMPRON, "AMD Sempron (Paris DH7-CG)"),
    FMS(0xf, 0xe, 0x0, "AMD Athlon 64 (Newcastle DH7-CG)"),
    FM(0xf, 0xe, "AMD Athlon 64 (Newcastle)"),
    FMSQ(0xf, 0xf, 0x0, Q.SEMPRON, "AMD Sempron (Paris DH7-CG)"),
    FMS(0xf, 0xf, 0x0, "AMD Athlon 64 (Newcastle DH7-CG)"),
    FMQ(0xf, 0xf, Q.SEMPRON, "AMD Sempron (Paris)"),
    FM(0xf, 0xf, "AMD Athlon 64 (Newcastle)"),
    FMSQ(0xf, 0x14, 0x0, Q.MOBILE_ATHLON_64, "AMD Mobile Athlon 64 (Oakville SH8-D0)"),
    FMS(0xf, 0x14, 0x0, "AMD Athlon 64 (Winchester SH8-D0)"),
    FM(0xf, 0x14, "AMD Athlon 64 (Winchester)"),
    FMSQ(0xf, 0x15, 0x0, Q.OPTERON_MP, "AMD Opteron 800 (Athens SH8-D0)"),
    FMSQ(0xf, 0x15, 0x0, Q.OPTERON_DP, "AMD Opteron 200 (Troy SH8-D0)"),
    FMS(0xf, 0x15, 0x0, "AMD Opteron 100 (Venus SH8-D0)"),
    FM(0xf, 0x15, "AMD Opteron (Troy/Athens/Venus)"),
    FMSQ(0xf, 0x17, 0x0, Q.ATHLON_64_FX, "AMD Athlon 64 FX (San Diego SH8-D0)"),
    FMS(0xf, 0x17, 0x0, "AMD Athlon 64 (Winchester SH8-D0)"),
    FM(0xf, 0x17, "AMD Athlon 64 (Winchester)"),
    FMSQ(0xf, 0x18, 0x0, Q.TURION, "AMD Turion 64 (Lancaster CH8-D0)"),
    FMSQ(0xf, 0x18, 0x0, Q.MOBILE_ATHLON_64, "AMD Mobile Athlon 64 (Oakville CH8-D0)"),
    FMS(0xf, 0x18, 0x0, "AMD Athlon 64 (Winchester CH8-D0)"),
    FM(0xf, 0x18, "AMD Athlon 64 (Winchester)"),
    FMSQ(0xf, 0x1b, 0x0, Q.SEMPRON, "AMD Sempron (Palermo DH8-D0)"),
    FMS(0xf, 0x1b, 0x0, "AMD Athlon 64 (Winchester DH8-D0)"),
    FM(0xf, 0x1b, "AMD Athlon 64 (Winchester)"),
    FMSQ(0xf, 0x1c, 0x0, Q.MOBILE_SEMPRON, "AMD Mobile Sempron (Georgetown/Sonora DH8-D0)"),
    FMSQ(0xf, 0x1c, 0x0, Q.SEMPRON, "AMD Sempron (Palermo DH8-D0)"),
    FMSQ(0xf, 0x1c, 0x0, Q.TURION, "AMD Turion 64 (Lancaster DH8-D0)"),
    FMS(0xf, 0x1c, 0x0, "AMD Mobile Athlon 64 (Oakville DH8-D0)"),
    FM(0xf, 0x1c, "AMD Athlon 64 / Sempron (Winchester/Palermo)"),
    FMSQ(0xf, 0x1f, 0x0, Q.SEMPRON, "AMD Sempron (Palermo DH8-D0)"),
    FMS(0xf, 0x1f, 0x0, "AMD Athlon 64 (Winchester DH8-D0)"),
    FM(0xf, 0x1f, "AMD Athlon 64 (Winchester)"),
    FMSQ(0xf, 0x21, 0x0, Q.OPTERON_MP, "AMD Dual Core Opteron 800 (Egypt JH-E1)"),
    FMSQ(0xf, 0x21, 0x0, Q.OPTERON_DP, "AMD Dual Core Opteron 200 (Italy JH-E1)"),
    FMS(0xf, 0x21, 0x0, "AMD Dual Core Opteron 100 (Denmark JH-E1)"),
    FMSQ(0xf, 0x21, 0x2, Q.OPTERON_MP, "AMD Dual Core Opteron 800 (Egypt JH-E6)"),
    FMSQ(0xf, 0x21, 0x2, Q.OPTERON_DP, "AMD Dual Core Opteron 200 (Italy JH-E6)"),
    FMS(0xf, 0x21, 0x2, "AMD Dual Core Opteron 100 (Denmark JH-E6)"),
    FM(0xf, 0x21, "AMD Dual Core Opteron (Denmark/Italy/Egypt)"),
    FMSQ(0xf, 0x23, 0x2, Q.ATHLON_64_FX, "AMD Athlon 64 FX (Toledo JH-E6)"),
    FMSQ(0xf, 0x23, 0x2, Q.OPTERON, "AMD Dual Core Opteron 100 (Denmark JH-E6)"),
    FMS(0xf, 0x23, 0x2, "AMD Athlon 64 X2 (Toledo JH-E6)"),
    FM(0xf, 0x23, "AMD Athlon 64 X2 (Toledo)"),
    FMSQ(0xf, 0x24, 0x2, Q.TURION_X2, "AMD Turion 64 X2 (Taylor/Trinidad JH-E6)"),
    FMSQ(0xf, 0x24, 0x2, Q.TURION, "AMD Turion 64 (Lancaster SH-E5)"),
    FMS(0xf, 0x24, 0x2, "AMD Mobile Athlon 64 (Newark SH-E5)"),
    FM(0xf, 0x24, "AMD Turion 64 / Mobile Athlon 64 (Lancaster/Newark)"),
    FMSQ(0xf, 0x25, 0x1, Q.OPTERON_MP, "AMD Opteron 800 (Athens SH-E4)"),
    FMSQ(0xf, 0x25, 0x1, Q.OPTERON_DP, "AMD Opteron 200 (Troy SH-E4)"),
    FMS(0xf, 0x25, 0x1, "AMD Opteron 100 (Venus SH-E4)"),
    FM(0xf, 0x25, "AMD Opteron (Troy/Athens/Venus)"),
    FMSQ(0xf, 0x27, 0x1, Q.ATHLON_64_FX, "AMD Athlon 64 FX (San Diego SH-E4)"),
    FMSQ(0xf, 0x27, 0x1, Q.OPTERON, "AMD Opteron 100 (Venus SH-E4)"),
    FMS(0xf, 0x27, 0x1, "AMD Athlon 64 (San Diego SH-E4)"),
    FM(0xf, 0x27, "AMD Athlon 64 (San Diego)"),
    FMSQ(0xf, 0x2b, 0x1, Q.ATHLON_64_X2, "AMD Athlon 64 X2 (Manchester BH-E4)"),
    FMS(0xf, 0x2b, 0x1, "AMD Athlon 64 X2 (Manchester BH-E4)"),
    FM(0xf, 0x2b, "AMD Athlon 64 X2 (Manchester)"),
    FMSQ(0xf, 0x2c, 0x0, Q.MOBILE_SEMPRON, "AMD Mobile Sempron (Albany/Roma DH-E3)"),
    FMSQ(0xf, 0x2c, 0x0, Q.SEMPRON, "AMD Sempron (Palermo DH-E3)"),
    FMS(0xf, 0x2c, 0x0, "AMD Athlon 64 (Venice DH-E3)"),
    FMSQ(0xf, 0x2c, 0x2, Q.MOBILE_SEMPRON, "AMD Mobile Sempron (Albany/Roma DH-E6)"),
    FMSQ(0xf, 0x2c, 0x2, Q.SEMPRON, "AMD Sempron (Palermo DH-E6)"),
    FMS(0xf, 0x2c, 0x2, "AMD Athlon 64 (Venice DH-E6)"),
    FM(0xf, 0x2c, "AMD Athlon 64 / Sempron (Venice/Palermo)"),
    FMSQ(0xf, 0x2f, 0x0, Q.SEMPRON, "AMD Sempron (Palermo DH-E3)"),
    FMS(0xf, 0x2f, 0x0, "AMD Athlon 64 (Venice DH-E3)"),
    FMSQ(0xf, 0x2f, 0x2, Q.SEMPRON, "AMD Sempron (Palermo DH-E6)"),
    FMS(0xf, 0x2f, 0x2, "AMD Athlon 64 (Venice DH-E6)"),
    FM(0xf, 0x2f, "AMD Athlon 64 / Sempron (Venice/Palermo)"),
    FMSQ(0xf, 0x41, 0x2, Q.OPTERON_MP, "AMD Dual Core Opteron 8200 (Santa Rosa JH-F2)"),
    FMSQ(0xf, 0x41, 0x2, Q.OPTERON_DP, "AMD Dual Core Opteron 2200 (Santa Rosa JH-F2)"),
    FMS(0xf, 0x41, 0x2, "AMD Dual Core Opteron (Santa Rosa JH-F2)"),
    FMSQ(0xf, 0x41, 0x3, Q.OPTERON_MP, "AMD Dual Core Opteron 8200 (Santa Rosa JH-F3)"),
    FMSQ(0xf, 0x41, 0x3, Q.OPTERON_DP, "AMD Dual Core Opteron 2200 (Santa Rosa JH-F3)"),
    FMS(0xf, 0x41, 0x3, "AMD Dual Core Opteron (Santa Rosa JH-F3)"),
    FM(0xf, 0x41, "AMD Dual Core Opteron (Santa Rosa)"),
    FMSQ(0xf, 0x43, 0x2, Q.OPTERON, "AMD Dual Core Opteron 1200 (Santa Ana JH-F2)"),
    FMSQ(0xf, 0x43, 0x2, Q.ATHLON_64_FX, "AMD Athlon 64 FX (Windsor JH-F2)"),
    FMSQ(0xf, 0x43, 0x2, Q.ATHLON_64_X2, "AMD Athlon 64 X2 (Windsor JH-F2)"),
    FMS(0xf, 0x43, 0x2, "AMD Athlon 64 (Windsor JH-F2)"),
    FMSQ(0xf, 0x43, 0x3, Q.OPTERON, "AMD Dual Core Opteron 1200 (Santa Ana JH-F3)"),
    FMSQ(0xf, 0x43, 0x3, Q.ATHLON_64_FX, "AMD Athlon 64 FX (Windsor JH-F3)"),
    FMSQ(0xf, 0x43, 0x3, Q.ATHLON_64_X2, "AMD Athlon 64 X2 (Windsor JH-F3)"),
    FMS(0xf, 0x43, 0x3, "AMD Athlon 64 (Windsor JH-F3)"),
    FM(0xf, 0x43, "AMD Athlon 64 X2 (Windsor)"),
    FMSQ(0xf, 0x48, 0x2, Q.TURION_X2, "AMD Turion 64 X2 (Taylor/Trinidad BH-F2)"),
    FMSQ(0xf, 0x48, 0x2, Q.ATHLON_64_X2, "AMD Athlon 64 X2 Mobile (Taylor/Trinidad BH-F2)"),
    FMS(0xf, 0x48, 0x2, "AMD Turion 64 X2 (Taylor/Trinidad BH-F2)"),
    FM(0xf, 0x48, "AMD Turion 64 X2 (Taylor/Trinidad)"),
    FMSQ(0xf, 0x4b, 0x2, Q.ATHLON_64_X2, "AMD Athlon 64 X2 (Windsor BH-F2)"),
    FMSQ(0xf, 0x4b, 0x2, Q.SEMPRON, "AMD Sempron X2 (Windsor BH-F2)"),
    FMS(0xf, 0x4b, 0x2, "AMD Athlon 64 X2 (Windsor BH-F2)"),
    FM(0xf, 0x4b, "AMD Athlon 64 X2 (Windsor)"),
    FMSQ(0xf, 0x4c, 0x2, Q.MOBILE_SEMPRON, "AMD Mobile Sempron (Keene DH-F2)"),
    FMSQ(0xf, 0x4c, 0x2, Q.TURION, "AMD Turion 64 (Richmond DH-F2)"),
    FMS(0xf, 0x4c, 0x2, "AMD Mobile Athlon 64 (Keene DH-F2)"),
    FM(0xf, 0x4c, "AMD Mobile Athlon 64 / Sempron (Keene)"),
    FMSQ(0xf, 0x4f, 0x2, Q.SEMPRON, "AMD Sempron (Manila DH-F2)"),
    FMS(0xf, 0x4f, 0x2, "AMD Athlon 64 (Orleans DH-F2)"),
    FM(0xf, 0x4f, "AMD Athlon 64 / Sempron (Orleans/Manila)"),
    FMSQ(0xf, 0x5d, 0x3, Q.ATHLON_64_X2, "AMD Athlon 64 X2 (Windsor JH-F3)"),
    FMS(0xf, 0x5d, 0x3, "AMD Opteron 1200 / 2200 / 8200 (Santa Ana/Santa Rosa JH-F3)"),
    FM(0xf, 0x5d, "AMD Opteron (Santa Ana/Santa Rosa)"),
    FMSQ(0xf, 0x5f, 0x2, Q.SEMPRON, "AMD Sempron (Manila DH-F2)"),
    FMS(0xf, 0x5f, 0x2, "AMD Athlon 64 (Orleans DH-F2)"),
    FMSQ(0xf, 0x5f, 0x3, Q.SEMPRON, "AMD Sempron (Manila DH-F3)"),
    FMS(0xf, 0x5f, 0x3, "AMD Athlon 64 (Orleans DH-F3)"),
    FM(0xf, 0x5f, "AMD Athlon 64 / Sempron (Orleans/Manila)"),
    FMSQ(0xf, 0x68, 0x1, Q.TURION_X2, "AMD Turion 64 X2 (Tyler BH-G1)"),
    FMSQ(0xf, 0x68, 0x1, Q.SEMPRON, "AMD Sempron X2 (Tyler BH-G1)"),
    FMS(0xf, 0x68, 0x1, "AMD Athlon 64 X2 Mobile (Tyler BH-G1)"),
    FMSQ(0xf, 0x68, 0x2, Q.TURION_X2, "AMD Turion 64 X2 (Tyler BH-G2)"),
    FMS(0xf, 0x68, 0x2, "AMD Athlon 64 X2 Mobile (Tyler BH-G2)"),
    FM(0xf, 0x68, "AMD Turion 64 X2 (Tyler)"),
    FMSQ(0xf, 0x6b, 0x1, Q.SEMPRON, "AMD Sempron X2 (Brisbane BH-G1)"),
    FMSQ(0xf, 0x6b, 0x1, Q.ATHLON_X2, "AMD Athlon X2 (Brisbane BH-G1)"),
    FMS(0xf, 0x6b, 0x1, "AMD Athlon 64 X2 (Brisbane BH-G1)"),
    FMSQ(0xf, 0x6b, 0x2, Q.SEMPRON, "AMD Sempron X2 (Brisbane BH-G2)"),
    FMSQ(0xf, 0x6b, 0x2, Q.ATHLON_64_X2, "AMD Athlon 64 X2 (Brisbane BH-G2)"),
    FMSQ(0xf, 0x6b, 0x2, Q.ATHLON_X2, "AMD Athlon X2 (Brisbane BH-G2)"),
    FMS(0xf, 0x6b, 0x2, "AMD Athlon 64 X2 (Brisbane BH-G2)"),
    FM(0xf, 0x6b, "AMD Athlon 64 X2 (Brisbane)"),
    FMSQ(0xf, 0x6c, 0x1, Q.MOBILE_SEMPRON, "AMD Mobile Sempron (Sherman DH-G1)"),
    FMSQ(0xf, 0x6c, 0x1, Q.SEMPRON, "AMD Sempron (Sparta DH-G1)"),
    FMS(0xf, 0x6c, 0x1, "AMD Athlon 64 (Lima DH-G1)"),
    FMSQ(0xf, 0x6c, 0x2, Q.MOBILE_SEMPRON, "AMD Mobile Sempron (Sherman DH-G2)"),
    FMSQ(0xf, 0x6c, 0x2, Q.SEMPRON, "AMD Sempron (Sparta DH-G2)"),
    FMS(0xf, 0x6c, 0x2, "AMD Athlon 64 (Lima DH-G2)"),
    FM(0xf, 0x6c, "AMD Athlon 64 / Sempron (Lima/Sparta)"),
    FMSQ(0xf, 0x6f, 0x2, Q.SEMPRON, "AMD Sempron (Sparta DH-G2)"),
    FMSQ(0xf, 0x6f, 0x2, Q.ATHLON_NEO, "AMD Athlon Neo (Huron DH-G2)"),
    FMS(0xf, 0x6f, 0x2, "AMD Athlon 64 (Lima DH-G2)"),
    FM(0xf, 0x6f, "AMD Athlon 64 / Sempron (Lima/Sparta)"),
    FMSQ(0xf, 0x7c, 0x2, Q.MOBILE_SEMPRON, "AMD Mobile Sempron (Sherman DH-G2)"),
    FMSQ(0xf, 0x7c, 0x2, Q.SEMPRON, "AMD Sempron (Sparta DH-G2)"),
    FMS(0xf, 0x7c, 0x2, "AMD Athlon 64 (Lima DH-G2)"),
    FM(0xf, 0x7c, "AMD Athlon 64 / Sempron (Lima/Sparta/Sherman)"),
    FMSQ(0xf, 0x7f, 0x1, Q.SEMPRON, "AMD Sempron (Sparta DH-G1)"),
    FMS(0xf, 0x7f, 0x1, "AMD Athlon 64 (Lima DH-G1)"),
    FMSQ(0xf, 0x7f, 0x2, Q.SEMPRON, "AMD Sempron (Sparta DH-G2)"),
    FMSQ(0xf, 0x7f, 0x2, Q.ATHLON_NEO, "AMD Athlon Neo (Huron DH-G2)"),
    FMS(0xf, 0x7f, 0x2, "AMD Athlon 64 (Lima DH-G2)"),
    FM(0xf, 0x7f, "AMD Athlon 64 / Sempron (Lima/Sparta)"),
    FMSQ(0xf, 0xc1, 0x3, Q.OPTERON_MP, "AMD Dual Core Opteron 8200 (Santa Rosa JH-F3)"),
    FMS(0xf, 0xc1, 0x3, "AMD Dual Core Opteron 2200 (Santa Rosa JH-F3)"),
    FM(0xf, 0xc1, "AMD Dual Core Opteron (Santa Rosa)"),
    F(0xf, "AMD Athlon 64 / Opteron / Sempron / Turion (unknown model)"),

    # K10
    FMSQ(0x10, 0x2, 0x2, Q.OPTERON_MP, "AMD Quad-Core Opteron 8300 (Barcelona DR-BA/B2)"),
    FMSQ(0x10, 0x2, 0x2, Q.OPTERON_DP, "AMD Quad-Core Opteron 2300 (Barcelona DR-BA/B2)"),
    FMSQ(0x10, 0x2, 0x2, Q.OPTERON, "AMD Quad-Core Opteron 1300 (Budapest DR-BA/B2)"),
    FMSQ(0x10, 0x2, 0x2, Q.ATHLON_X2, "AMD Athlon X2 (Kuma DR-B2)"),
    FMSQ(0x10, 0x2, 0x2, Q.TRIPLE_CORE, "AMD Phenom X3 (Toliman DR-B2)"),
    FMS(0x10, 0x2, 0x2, "AMD Phenom X4 (Agena DR-B2)"),
    FMSQ(0x10, 0x2, 0x3, Q.OPTERON_MP, "AMD Quad-Core Opteron 8300 (Barcelona DR-B3)"),
    FMSQ(0x10, 0x2, 0x3, Q.OPTERON_DP, "AMD Quad-Core Opteron 2300 (Barcelona DR-B3)"),
    FMSQ(0x10, 0x2, 0x3, Q.OPTERON, "AMD Quad-Core Opteron 1300 (Budapest DR-B3)"),
    FMSQ(0x10, 0x2, 0x3, Q.ATHLON_X2, "AMD Athlon X2 (Kuma DR-B3)"),
    FMSQ(0x10, 0x2, 0x3, Q.TRIPLE_CORE, "AMD Phenom X3 (Toliman DR-B3)"),
    FMS(0x10, 0x2, 0x3, "AMD Phenom X4 (Agena DR-B3)"),
    FMQ(0x10, 0x2, Q.OPTERON, "AMD Quad-Core Opteron (Barcelona/Budapest)"),
    FM(0x10, 0x2, "AMD Phenom (Agena/Toliman)"),
    FMSQ(0x10, 0x4, 0x2, Q.OPTERON_MP, "AMD Opteron 8300 (Shanghai RB-C2)"),
    FMSQ(0x10, 0x4, 0x2, Q.OPTERON_DP, "AMD Opteron 2300 (Shanghai RB-C2)"),
    FMSQ(0x10, 0x4, 0x2, Q.OPTERON, "AMD Opteron 1300 (Suzuka RB-C2)"),
    FMSQ(0x10, 0x4, 0x2, Q.ATHLON_II, "AMD Athlon II X4 (Propus RB-C2)"),
    FMSQ(0x10, 0x4, 0x2, Q.TRIPLE_CORE, "AMD Phenom II X3 (Heka RB-C2)"),
    FMSQ(0x10, 0x4, 0x2, Q.DUAL_CORE, "AMD Phenom II X2 (Callisto RB-C2)"),
    FMS(0x10, 0x4, 0x2, "AMD Phenom II X4 (Deneb RB-C2)"),
    FMSQ(0x10, 0x4, 0x3, Q.OPTERON, "AMD Opteron 1300 (Suzuka RB-C3)"),
    FMSQ(0x10, 0x4, 0x3, Q.ATHLON_II, "AMD Athlon II X4 (Propus RB-C3)"),
    FMSQ(0x10, 0x4, 0x3, Q.TRIPLE_CORE, "AMD Phenom II X3 (Heka RB-C3)"),
    FMSQ(0x10, 0x4, 0x3, Q.DUAL_CORE, "AMD Phenom II X2 (Callisto RB-C3)"),
    FMS(0x10, 0x4, 0x3, "AMD Phenom II X4 (Deneb RB-C3)"),
    FMQ(0x10, 0x4, Q.OPTERON, "AMD Opteron (Shanghai/Suzuka)"),
    FM(0x10, 0x4, "AMD Phenom II (Deneb/Heka/Callisto)"),
    FMSQ(0x10, 0x5, 0x2, Q.TRIPLE_CORE, "AMD Athlon II X3 (Rana BL-C2)"),
    FMS(0x10, 0x5, 0x2, "AMD Athlon II X4 (Propus BL-C2)"),
    FMSQ(0x10, 0x5, 0x3, Q.TRIPLE_CORE, "AMD Athlon II X3 (Rana BL-C3)"),
    FMSQ(0x10, 0x5, 0x3, Q.PHENOM_II, "AMD Phenom II X4 (Zosma BL-C3)"),
    FMS(0x10, 0x5, 0x3, "AMD Athlon II X4 (Propus BL-C3)"),
    FM(0x10, 0x5, "AMD Athlon II X3 / X4 (Rana/Propus)"),
    FMSQ(0x10, 0x6, 0x2, Q.MOBILE, "AMD Turion II / Athlon II Mobile (Caspian DA-C2)"),
    FMSQ(0x10, 0x6, 0x2, Q.TURION_II, "AMD Turion II (Caspian DA-C2)"),
    FMSQ(0x10, 0x6, 0x2, Q.SEMPRON, "AMD Sempron (Sargas DA-C2)"),
    FMSQ(0x10, 0x6, 0x2, Q.PHENOM_II, "AMD Phenom II X2 (Regor DA-C2)"),
    FMS(0x10, 0x6, 0x2, "AMD Athlon II X2 (Regor DA-C2)"),
    FMSQ(0x10, 0x6, 0x3, Q.TURION_II, "AMD Turion II (Champlain DA-C3)"),
    FMSQ(0x10, 0x6, 0x3, Q.ATHLON_II, "AMD Athlon II X2 (Regor DA-C3)"),
    FMSQ(0x10, 0x6, 0x3, Q.PHENOM_II, "AMD Phenom II Mobile (Champlain DA-C3)"),
    FMSQ(0x10, 0x6, 0x3, Q.SEMPRON, "AMD Sempron (Sargas DA-C3)"),
    FMSQ(0x10, 0x6, 0x3, Q.TURION_NEO, "AMD Turion II Neo (Geneva DA-C3)"),
    FMSQ(0x10, 0x6, 0x3, Q.ATHLON_NEO, "AMD Athlon II Neo (Geneva DA-C3)"),
    FMS(0x10, 0x6, 0x3, "AMD Athlon II X2 (Regor DA-C3)"),
    FMQ(0x10, 0x6, Q.TURION_II, "AMD Turion II (Caspian/Champlain)"),
    FM(0x10, 0x6, "AMD Athlon II X2 (Regor)"),
    FMSQ(0x10, 0x8, 0x0, Q.OPTERON_MP, "AMD Six-Core Opteron 8400 (Istanbul HY-D0)"),
    FMSQ(0x10, 0x8, 0x0, Q.OPTERON_DP, "AMD Six-Core Opteron 2400 (Istanbul HY-D0)"),
    FMSQ(0x10, 0x8, 0x0, Q.OPTERON_4000, "AMD Opteron 4100 (Lisbon HY-D0)"),
    FMS(0x10, 0x8, 0x0, "AMD Six-Core Opteron (Istanbul HY-D0)"),
    FMSQ(0x10, 0x8, 0x1, Q.OPTERON_4000, "AMD Opteron 4100 (Lisbon HY-D1)"),
    FMS(0x10, 0x8, 0x1, "AMD Opteron (Istanbul/Lisbon HY-D1)"),
    FM(0x10, 0x8, "AMD Six-Core Opteron (Istanbul/Lisbon)"),
    FMSQ(0x10, 0x9, 0x1, Q.OPTERON_6000, "AMD Opteron 6100 (Magny-Cours HY-D1)"),
    FMS(0x10, 0x9, 0x1, "AMD Opteron (Magny-Cours HY-D1)"),
    FM(0x10, 0x9, "AMD Opteron 6100 (Magny-Cours)"),
    FMSQ(0x10, 0xa, 0x0, Q.QUAD_CORE, "AMD Phenom II X4 (Zosma PH-E0)"),
    FMSQ(0x10, 0xa, 0x0, Q.OPTERON, "AMD Opteron 1400 (Lisbon PH-E0)"),
    FMS(0x10, 0xa, 0x0, "AMD Phenom II X6 (Thuban PH-E0)"),
    FM(0x10, 0xa, "AMD Phenom II X6 (Thuban)"),
    F(0x10, "AMD Phenom / Opteron (unknown model)"),

    # Griffin
    FMSQ(0x11, 0x3, 0x1, Q.TURION_X2, "AMD Turion X2 Ultra (Lion LG-B1)"),
    FMSQ(0x11, 0x3, 0x1, Q.SEMPRON, "AMD Sempron Mobile (Sable LG-B1)"),
    FMSQ(0x11, 0x3, 0x1, Q.ATHLON, "AMD Athlon X2 Mobile (Lion LG-B1)"),
    FMS(0x11, 0x3, 0x1, "AMD Turion X2 (Lion LG-B1)"),
    FM(0x11, 0x3, "AMD Turion X2 / Athlon X2 (Lion)"),
    F(0x11, "AMD Turion X2 (unknown model)"),

    # Llano
    FMSQ(0x12, 0x1, 0x0, Q.AMD_E_SERIES, "AMD E2-3000 (Llano LN-B0)"),
    FMSQ(0x12, 0x1, 0x0, Q.ATHLON_II, "AMD Athlon II X4 (Llano LN-B0)"),
    FMSQ(0x12, 0x1, 0x0, Q.SEMPRON, "AMD Sempron X2 (Llano LN-B0)"),
    FMS(0x12, 0x1, 0x0, "AMD A4 / A6 / A8 (Llano LN-B0)"),
    FM(0x12, 0x1, "AMD A-Series (Llano)"),
    F(0x12, "AMD A-Series (unknown model)"),

    # Bobcat
    FMSQ(0x14, 0x1, 0x0, Q.AMD_C_SERIES, "AMD C-Series (Ontario ON-B0)"),
    FMSQ(0x14, 0x1, 0x0, Q.AMD_G_SERIES, "AMD G-Series (eOntario/eZacate ON-B0)"),
    FMSQ(0x14, 0x1, 0x0, Q.AMD_Z_SERIES, "AMD Z-Series (Desna ON-B0)"),
    FMS(0x14, 0x1, 0x0, "AMD E-Series (Zacate ON-B0)"),
    FM(0x14, 0x1, "AMD C-Series / E-Series (Ontario/Zacate)"),
    FMSQ(0x14, 0x2, 0x0, Q.AMD_C_SERIES, "AMD C-Series (Ontario ON-C0)"),
    FMSQ(0x14, 0x2, 0x0, Q.AMD_G_SERIES, "AMD G-Series (eOntario/eZacate ON-C0)"),
    FMSQ(0x14, 0x2, 0x0, Q.AMD_Z_SERIES, "AMD Z-Series (Desna ON-C0)"),
    FMS(0x14, 0x2, 0x0, "AMD E-Series (Zacate ON-C0)"),
    FM(0x14, 0x2, "AMD C-Series / E-Series (Ontario/Zacate)"),
    F(0x14, "AMD C-Series / E-Series (unknown model)"),

    # Bulldozer family
    FMSQ(0x15, 0x1, 0x2, Q.OPTERON_6000, "AMD Opteron 6200 (Interlagos OR-B2)"),
    FMSQ(0x15, 0x1, 0x2, Q.OPTERON_4000, "AMD Opteron 4200 (Valencia OR-B2)"),
    FMSQ(0x15, 0x1, 0x2, Q.OPTERON_3000, "AMD Opteron 3200 (Zurich OR-B2)"),
    FMS(0x15, 0x1, 0x2, "AMD FX (Zambezi OR-B2)"),
    FM(0x15, 0x1, "AMD FX / Opteron (Zambezi/Interlagos/Valencia)"),
    FMSQ(0x15, 0x2, 0x0, Q.OPTERON_6000, "AMD Opteron 6300 (Abu Dhabi OR-C0)"),
    FMSQ(0x15, 0x2, 0x0, Q.OPTERON_4000, "AMD Opteron 4300 (Seoul OR-C0)"),
    FMSQ(0x15, 0x2, 0x0, Q.OPTERON_3000, "AMD Opteron 3300 (Delhi OR-C0)"),
    FMS(0x15, 0x2, 0x0, "AMD FX (Vishera OR-C0)"),
    FM(0x15, 0x2, "AMD FX / Opteron (Vishera/Abu Dhabi/Seoul/Delhi)"),
    FMSQ(0x15, 0x10, 0x1, Q.ATHLON, "AMD Athlon X2 / X4 (Trinity TN-A1)"),
    FMSQ(0x15, 0x10, 0x1, Q.SEMPRON, "AMD Sempron X2 (Trinity TN-A1)"),
    FMSQ(0x15, 0x10, 0x1, Q.OPTERON, "AMD Opteron 3300 (Trinity TN-A1)"),
    FMSQ(0x15, 0x10, 0x1, Q.AMD_R_SERIES, "AMD R-Series (Trinity TN-A1)"),
    FMSQ(0x15, 0x10, 0x1, Q.AMD_FX, "AMD FX (Trinity TN-A1)"),
    FMS(0x15, 0x10, 0x1, "AMD A-Series (Trinity TN-A1)"),
    FM(0x15, 0x10, "AMD A-Series (Trinity)"),
    FMSQ(0x15, 0x13, 0x1, Q.ATHLON, "AMD Athlon X2 / X4 (Richland RL-A1)"),
    FMSQ(0x15, 0x13, 0x1, Q.SEMPRON, "AMD Sempron X2 (Richland RL-A1)"),
    FMSQ(0x15, 0x13, 0x1, Q.AMD_FX, "AMD FX (Richland RL-A1)"),
    FMS(0x15, 0x13, 0x1, "AMD A-Series (Richland RL-A1)"),
    FM(0x15, 0x13, "AMD A-Series (Richland)"),
    FMSQ(0x15, 0x30, 0x1, Q.ATHLON, "AMD Athlon X4 (Kaveri KV-A1)"),
    FMSQ(0x15, 0x30, 0x1, Q.AMD_FX, "AMD FX (Kaveri KV-A1)"),
    FMSQ(0x15, 0x30, 0x1, Q.OPTERON_X, "AMD Opteron X3400 (Berlin KV-A1)"),
    FMSQ(0x15, 0x30, 0x1, Q.AMD_R_SERIES, "AMD R-Series (Bald Eagle KV-A1)"),
    FMS(0x15, 0x30, 0x1, "AMD A-Series (Kaveri KV-A1)"),
    FM(0x15, 0x30, "AMD A-Series (Kaveri)"),
    FMSQ(0x15, 0x38, 0x1, Q.ATHLON_X4, "AMD Athlon X4 (Godavari GV-A1)"),
    FMS(0x15, 0x38, 0x1, "AMD A-Series (Godavari GV-A1)"),
    FM(0x15, 0x38, "AMD A-Series (Godavari)"),
    FMSQ(0x15, 0x60, 0x1, Q.AMD_FX, "AMD FX (Carrizo CZ-A1)"),
    FMSQ(0x15, 0x60, 0x1, Q.OPTERON_X, "AMD Opteron X3000 (Toronto CZ-A1)"),
    FMSQ(0x15, 0x60, 0x1, Q.AMD_R_SERIES, "AMD R-Series (Merlin Falcon CZ-A1)"),
    FMS(0x15, 0x60, 0x1, "AMD A-Series (Carrizo CZ-A1)"),
    FM(0x15, 0x60, "AMD A-Series (Carrizo)"),
    FMSQ(0x15, 0x65, 0x1, Q.ATHLON_X4, "AMD Athlon X4 (Bristol Ridge BR-A1)"),
    FMSQ(0x15, 0x65, 0x1, Q.AMD_FX, "AMD FX (Bristol Ridge BR-A1)"),
    FMS(0x15, 0x65, 0x1, "AMD A-Series PRO (Bristol Ridge BR-A1)"),
    FM(0x15, 0x65, "AMD A-Series (Bristol Ridge)"),
    FMSQ(0x15, 0x70, 0x0, Q.AMD_E_SERIES, "AMD E-Series (Stoney Ridge ST-A0)"),
    FMSQ(0x15, 0x70, 0x0, Q.AMD_G_SERIES, "AMD G-Series (Prairie Falcon ST-A0)"),
    FMS(0x15, 0x70, 0x0, "AMD A-Series (Stoney Ridge ST-A0)"),
    FM(0x15, 0x70, "AMD A-Series / E-Series (Stoney Ridge)"),
    F(0x15, "AMD FX / A-Series / Opteron (unknown model)"),

    # Jaguar and Puma
    FMSQ(0x16, 0x0, 0x1, Q.OPTERON_X, "AMD Opteron X1100 / X2100 (Kyoto KB-A1)"),
    FMSQ(0x16, 0x0, 0x1, Q.ATHLON, "AMD Athlon (Kabini KB-A1)"),
    FMSQ(0x16, 0x0, 0x1, Q.SEMPRON, "AMD Sempron (Kabini KB-A1)"),
    FMSQ(0x16, 0x0, 0x1, Q.AMD_G_SERIES, "AMD G-Series (Steppe Eagle/Crowned Eagle KB-A1)"),
    FMSQ(0x16, 0x0, 0x1, Q.AMD_E_SERIES, "AMD E-Series (Kabini KB-A1)"),
    FMS(0x16, 0x0, 0x1, "AMD A-Series (Kabini/Temash KB-A1)"),
    FM(0x16, 0x0, "AMD A-Series / E-Series (Kabini/Temash)"),
    FMSQ(0x16, 0x30, 0x1, Q.AMD_E_SERIES, "AMD E-Series (Beema ML-A1)"),
    FMSQ(0x16, 0x30, 0x1, Q.AMD_G_SERIES, "AMD G-Series (Steppe Eagle ML-A1)"),
    FMSQ(0x16, 0x30, 0x1, Q.AMD_R_SERIES, "AMD R-Series (Beema ML-A1)"),
    FMSQ(0x16, 0x30, 0x1, Q.MOBILE, "AMD A-Series Micro (Mullins ML-A1)"),
    FMS(0x16, 0x30, 0x1, "AMD A-Series (Beema/Mullins ML-A1)"),
    FM(0x16, 0x30, "AMD A-Series / E-Series (Beema/Mullins)"),
    F(0x16, "AMD A-Series / E-Series (unknown model)"),

    # Zen, Zen+ and Zen 2
    FMSQ(0x17, 0x1, 0x1, Q.EPYC, "AMD EPYC 7001 (Naples ZP-B1)"),
    FMSQ(0x17, 0x1, 0x1, Q.RYZEN_THREADRIPPER, "AMD Ryzen Threadripper 1000 (Whitehaven ZP-B1)"),
    FMS(0x17, 0x1, 0x1, "AMD Ryzen 1000 (Summit Ridge ZP-B1)"),
    FMSQ(0x17, 0x1, 0x2, Q.EPYC_EMBEDDED, "AMD EPYC Embedded 3000 (Snowy Owl ZP-B2)"),
    FMSQ(0x17, 0x1, 0x2, Q.EPYC, "AMD EPYC 7001 (Naples ZP-B2)"),
    FMSQ(0x17, 0x1, 0x2, Q.RYZEN_THREADRIPPER, "AMD Ryzen Threadripper 1000 (Whitehaven ZP-B2)"),
    FMS(0x17, 0x1, 0x2, "AMD Ryzen 1000 (Summit Ridge ZP-B2)"),
    FMQ(0x17, 0x1, Q.EPYC, "AMD EPYC 7001 (Naples)"),
    FMQ(0x17, 0x1, Q.RYZEN_THREADRIPPER, "AMD Ryzen Threadripper 1000 (Whitehaven)"),
    FM(0x17, 0x1, "AMD Ryzen 1000 (Summit Ridge)"),
    FMSQ(0x17, 0x8, 0x2, Q.RYZEN_THREADRIPPER, "AMD Ryzen Threadripper 2000 (Colfax PiR-B2)"),
    FMS(0x17, 0x8, 0x2, "AMD Ryzen 2000 (Pinnacle Ridge PiR-B2)"),
    FMQ(0x17, 0x8, Q.RYZEN_THREADRIPPER, "AMD Ryzen Threadripper 2000 (Colfax)"),
    FM(0x17, 0x8, "AMD Ryzen 2000 (Pinnacle Ridge)"),
    FMSQ(0x17, 0x11, 0x0, Q.RYZEN_EMBEDDED, "AMD Ryzen Embedded V1000 (Great Horned Owl RV-A0)"),
    FMSQ(0x17, 0x11, 0x0, Q.MOBILE_RYZEN, "AMD Ryzen 2000 Mobile (Raven Ridge RV-A0)"),
    FMSQ(0x17, 0x11, 0x0, Q.ATHLON, "AMD Athlon 200GE (Raven Ridge RV-A0)"),
    FMS(0x17, 0x11, 0x0, "AMD Ryzen 2000 (Raven Ridge RV-A0)"),
    FMQ(0x17, 0x11, Q.MOBILE_RYZEN, "AMD Ryzen 2000 Mobile (Raven Ridge)"),
    FM(0x17, 0x11, "AMD Ryzen 2000 (Raven Ridge)"),
    FMSQ(0x17, 0x18, 0x1, Q.RYZEN_EMBEDDED, "AMD Ryzen Embedded R1000 (Banded Kestrel PCO-B1)"),
    FMSQ(0x17, 0x18, 0x1, Q.MOBILE_RYZEN, "AMD Ryzen 3000 Mobile (Picasso PCO-B1)"),
    FMSQ(0x17, 0x18, 0x1, Q.ATHLON, "AMD Athlon 300 (Picasso PCO-B1)"),
    FMS(0x17, 0x18, 0x1, "AMD Ryzen 3000 (Picasso PCO-B1)"),
    FM(0x17, 0x18, "AMD Ryzen 3000 (Picasso)"),
    FMSQ(0x17, 0x20, 0x1, Q.ATHLON_SILVER_GOLD, "AMD Athlon Silver/Gold 3000 (Dali RV2-A1)"),
    FMSQ(0x17, 0x20, 0x1, Q.RYZEN_EMBEDDED, "AMD Ryzen Embedded R1000 (River Hawk RV2-A1)"),
    FMS(0x17, 0x20, 0x1, "AMD Ryzen 3000 (Dali/Pollock RV2-A1)"),
    FM(0x17, 0x20, "AMD Ryzen 3000 (Dali)"),
    FMSQ(0x17, 0x31, 0x0, Q.EPYC, "AMD EPYC 7002 (Rome SSP-B0)"),
    FMSQ(0x17, 0x31, 0x0, Q.RYZEN_THREADRIPPER, "AMD Ryzen Threadripper 3000 (Castle Peak SSP-B0)"),
    FMS(0x17, 0x31, 0x0, "AMD EPYC 7002 (Rome SSP-B0)"),
    FMQ(0x17, 0x31, Q.RYZEN_THREADRIPPER, "AMD Ryzen Threadripper 3000 (Castle Peak)"),
    FM(0x17, 0x31, "AMD EPYC 7002 (Rome)"),
    FM(0x17, 0x47, "AMD 4700S (Cardinal)"),
    FMSQ(0x17, 0x60, 0x1, Q.RYZEN_EMBEDDED, "AMD Ryzen Embedded V2000 (Grey Hawk RN-A1)"),
    FMSQ(0x17, 0x60, 0x1, Q.MOBILE_RYZEN, "AMD Ryzen 4000 Mobile (Renoir RN-A1)"),
    FMS(0x17, 0x60, 0x1, "AMD Ryzen 4000 (Renoir RN-A1)"),
    FM(0x17, 0x60, "AMD Ryzen 4000 (Renoir)"),
    FMS(0x17, 0x68, 0x1, "AMD Ryzen 5000 Mobile (Lucienne LCN-A1)"),
    FM(0x17, 0x68, "AMD Ryzen 5000 Mobile (Lucienne)"),
    FMS(0x17, 0x71, 0x0, "AMD Ryzen 3000 (Matisse MTS-B0)"),
    FM(0x17, 0x71, "AMD Ryzen 3000 (Matisse)"),
    FMS(0x17, 0x90, 0x1, "AMD Custom APU 0405 (Van Gogh VN-A1)"),
    FM(0x17, 0x90, "AMD Custom APU (Van Gogh)"),
    FMQ(0x17, 0xa0, Q.ATHLON_SILVER_GOLD, "AMD Athlon Gold/Silver 7000 (Mendocino MDN-A0)"),
    FM(0x17, 0xa0, "AMD Ryzen 7020 (Mendocino)"),
    F(0x17, "AMD Ryzen / EPYC (unknown model)"),

    # Zen 3 and Zen 4
    FMSQ(0x19, 0x0, 0x1, Q.EPYC, "AMD EPYC 7003 (Milan GN-B0)"),
    FMS(0x19, 0x0, 0x1, "AMD EPYC 7003 (Milan GN-B0)"),
    FMS(0x19, 0x1, 0x0, "AMD EPYC 7003 (Milan GN-B0)"),
    FMS(0x19, 0x1, 0x1, "AMD EPYC 7003 (Milan GN-B1)"),
    FMS(0x19, 0x1, 0x2, "AMD EPYC 7003 (Milan-X GN-B2)"),
    FM(0x19, 0x1, "AMD EPYC 7003 (Milan)"),
    FMQ(0x19, 0x8, Q.RYZEN_THREADRIPPER, "AMD Ryzen Threadripper PRO 5000WX (Chagall CHS-B2)"),
    FM(0x19, 0x8, "AMD Ryzen Threadripper PRO 5000WX (Chagall)"),
    FMS(0x19, 0x11, 0x1, "AMD EPYC 9004 (Genoa RS-B1)"),
    FMS(0x19, 0x11, 0x2, "AMD EPYC 9004 (Genoa-X RS-B2)"),
    FM(0x19, 0x11, "AMD EPYC 9004 (Genoa)"),
    FMQ(0x19, 0x18, Q.RYZEN_THREADRIPPER, "AMD Ryzen Threadripper 7000 (Storm Peak STP-B1)"),
    FM(0x19, 0x18, "AMD EPYC 8004 / Threadripper 7000 (Siena/Storm Peak)"),
    FMS(0x19, 0x21, 0x0, "AMD Ryzen 5000 (Vermeer VMR-B0)"),
    FMS(0x19, 0x21, 0x2, "AMD Ryzen 5000 (Vermeer VMR-B2)"),
    FMQ(0x19, 0x21, Q.EPYC, "AMD EPYC 4004 (Vermeer)"),
    FM(0x19, 0x21, "AMD Ryzen 5000 (Vermeer)"),
    FMS(0x19, 0x40, 0x1, "AMD Ryzen 6000 Mobile (Rembrandt RMB-A1)"),
    FM(0x19, 0x40, "AMD Ryzen 6000 Mobile (Rembrandt)"),
    FMS(0x19, 0x44, 0x1, "AMD Ryzen 7035 Mobile (Rembrandt-R RMB-A1)"),
    FM(0x19, 0x44, "AMD Ryzen 7035 Mobile (Rembrandt-R)"),
    FMSQ(0x19, 0x50, 0x0, Q.MOBILE_RYZEN, "AMD Ryzen 5000 Mobile (Cezanne/Barcelo CZN-A0)"),
    FMSQ(0x19, 0x50, 0x0, Q.RYZEN_EMBEDDED, "AMD Ryzen Embedded V3000 (Cezanne CZN-A0)"),
    FMS(0x19, 0x50, 0x0, "AMD Ryzen 5000G (Cezanne CZN-A0)"),
    FM(0x19, 0x50, "AMD Ryzen 5000 (Cezanne)"),
    FMSQ(0x19, 0x61, 0x2, Q.EPYC, "AMD EPYC 4004 (Raphael RPL-B2)"),
    FMSQ(0x19, 0x61, 0x2, Q.MOBILE_RYZEN, "AMD Ryzen 7045HX (Dragon Range RPL-B2)"),
    FMS(0x19, 0x61, 0x2, "AMD Ryzen 7000 (Raphael RPL-B2)"),
    FM(0x19, 0x61, "AMD Ryzen 7000 (Raphael)"),
    FMSQ(0x19, 0x74, 0x1, Q.RYZEN_AI, "AMD Ryzen 7040 Mobile (Phoenix PHX-A1)"),
    FMSQ(0x19, 0x74, 0x1, Q.MOBILE_RYZEN, "AMD Ryzen 7040 Mobile (Phoenix PHX-A1)"),
    FMS(0x19, 0x74, 0x1, "AMD Ryzen 8000G (Phoenix PHX-A1)"),
    FMQ(0x19, 0x74, Q.MOBILE_RYZEN, "AMD Ryzen 7040 / 8040 Mobile (Phoenix/Hawk Point)"),
    FM(0x19, 0x74, "AMD Ryzen 8000G (Phoenix)"),
    FMQ(0x19, 0x75, Q.MOBILE_RYZEN, "AMD Ryzen 8040 Mobile (Hawk Point)"),
    FM(0x19, 0x75, "AMD Ryzen 8000 (Hawk Point)"),
    FM(0x19, 0x78, "AMD Ryzen 7040U / Z1 (Phoenix 2)"),
    FM(0x19, 0x7c, "AMD Ryzen (Hawk Point 2)"),
    FMS(0x19, 0xa0, 0x1, "AMD EPYC 97x4 (Bergamo RS-A1)"),
    FMS(0x19, 0xa0, 0x2, "AMD EPYC 8004 (Siena RS-A2)"),
    FM(0x19, 0xa0, "AMD EPYC 97x4 / 8004 (Bergamo/Siena)"),
    F(0x19, "AMD Ryzen / EPYC (unknown model)"),

    # Zen 5
    FM(0x1a, 0x2, "AMD EPYC 9005 (Turin)"),
    FM(0x1a, 0x11, "AMD EPYC 9005 (Turin Dense)"),
    FMQ(0x1a, 0x24, Q.RYZEN_AI, "AMD Ryzen AI 300 (Strix Point)"),
    FM(0x1a, 0x24, "AMD Ryzen AI 300 (Strix Point)"),
    FM(0x1a, 0x44, "AMD Ryzen 9000 (Granite Ridge)"),
    FM(0x1a, 0x60, "AMD Ryzen AI 300 (Krackan Point)"),
    FM(0x1a, 0x70, "AMD Ryzen AI Max (Strix Halo)"),
    F(0x1a, "AMD Ryzen / EPYC (unknown model)"),
]

table = VendorTable(rules, "AMD (unknown model)")
