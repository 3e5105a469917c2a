# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth.predicates import Q
from cpuid_inspector.synth.rules import F, FM, FMQ, FMS, FMSQ, VendorTable

rules = [
    # i486
    FM(4, 0x0, "Intel i80486DX-25/33"),
    FM(4, 0x1, "Intel i80486DX-50"),
    FM(4, 0x2, "Intel i80486SX"),
    FM(4, 0x3, "Intel i80486DX/2"),
    FM(4, 0x4, "Intel i80486SL"),
    FM(4, 0x5, "Intel i80486SX/2"),
    FM(4, 0x7, "Intel i80486DX/2-WB"),
    FM(4, 0x8, "Intel i80486DX/4"),
    FM(4, 0x9, "Intel i80486DX/4-WB"),
    F(4, "Intel i80486 (unknown model)"),

    # P5
    FM(5, 0x0, "Intel Pentium 60/66 A-step"),
    FMSQ(5, 0x1, 0x3, Q.OVERDRIVE, "Intel Pentium OverDrive for P5 (B1)"),
    FMS(5, 0x1, 0x3, "Intel Pentium 60/66 (B1)"),
    FMS(5, 0x1, 0x5, "Intel Pentium 60/66 (C1)"),
    FMS(5, 0x1, 0x7, "Intel Pentium 60/66 (D1)"),
    FMQ(5, 0x1, Q.OVERDRIVE, "Intel Pentium OverDrive for P5"),
    FM(5, 0x1, "Intel Pentium 60/66"),
    FMS(5, 0x2, 0x1, "Intel Pentium P54C (B1)"),
    FMS(5, 0x2, 0x2, "Intel Pentium P54C (B3)"),
    FMS(5, 0x2, 0x4, "Intel Pentium P54C (B5)"),
    FMS(5, 0x2, 0x5, "Intel Pentium P54C (C2/mA1)"),
    FMS(5, 0x2, 0x6, "Intel Pentium P54C (E0)"),
    FMS(5, 0x2, 0xb, "Intel Pentium P54C (cB1/mcB1)"),
    FMS(5, 0x2, 0xc, "Intel Pentium P54C (cC0/mcC0/acC0)"),
    FMQ(5, 0x2, Q.OVERDRIVE, "Intel Pentium OverDrive for P54C"),
    FM(5, 0x2, "Intel Pentium P54C"),
    FMS(5, 0x3, 0x1, "Intel Pentium OverDrive for i486 (P24T B1)"),
    FMS(5, 0x3, 0x2, "Intel Pentium OverDrive for i486 (P24T B2)"),
    FM(5, 0x3, "Intel Pentium OverDrive for i486 (P24T)"),
    FMSQ(5, 0x4, 0x3, Q.OVERDRIVE, "Intel Pentium MMX OverDrive (P55CTP B1)"),
    FMSQ(5, 0x4, 0x4, Q.OVERDRIVE, "Intel Pentium MMX OverDrive (P55CTP A3)"),
    FMS(5, 0x4, 0x3, "Intel Pentium MMX P55C (B1)"),
    FMS(5, 0x4, 0x4, "Intel Pentium MMX P55C (A3)"),
    FMQ(5, 0x4, Q.OVERDRIVE, "Intel Pentium MMX OverDrive (P55CTP)"),
    FM(5, 0x4, "Intel Pentium MMX P55C"),
    FMS(5, 0x7, 0x0, "Intel Pentium MMX P54C 75-200 (A4)"),
    FM(5, 0x7, "Intel Pentium MMX P54C 75-200"),
    FMS(5, 0x8, 0x1, "Intel Pentium MMX P55C (Tillamook A0)"),
    FMS(5, 0x8, 0x2, "Intel Pentium MMX P55C (Tillamook B2)"),
    FM(5, 0x8, "Intel Pentium MMX P55C (Tillamook)"),
    FMS(5, 0x9, 0x0, "Intel Quark X1000 / D1000 / D2000 / C1000 (Lakemont A0)"),
    FM(5, 0x9, "Intel Quark X1000 / D1000 / D2000 / C1000 (Lakemont)"),
    FMQ(5, 0xa, Q.QUARK, "Intel Quark SE (Lakemont)"),
    FM(5, 0xa, "Intel Quark (Lakemont)"),
    F(5, "Intel Pentium (unknown model)"),

    # P6
    FMS(6, 0x0, 0x1, "Intel Pentium Pro (A0)"),
    FM(6, 0x0, "Intel Pentium Pro"),
    FMS(6, 0x1, 0x1, "Intel Pentium Pro (B0)"),
    FMS(6, 0x1, 0x2, "Intel Pentium Pro (C0)"),
    FMS(6, 0x1, 0x6, "Intel Pentium Pro (sA0)"),
    FMS(6, 0x1, 0x7, "Intel Pentium Pro (sA1)"),
    FMS(6, 0x1, 0x9, "Intel Pentium Pro (sB1)"),
    FM(6, 0x1, "Intel Pentium Pro"),
    FMSQ(6, 0x3, 0x2, Q.OVERDRIVE, "Intel Pentium II OverDrive (TdB0)"),
    FMS(6, 0x3, 0x3, "Intel Pentium II (Klamath C0)"),
    FMS(6, 0x3, 0x4, "Intel Pentium II (Klamath C1)"),
    FMQ(6, 0x3, Q.OVERDRIVE, "Intel Pentium II OverDrive"),
    FM(6, 0x3, "Intel Pentium II (Klamath)"),
    FM(6, 0x4, "Intel Pentium P55CT OverDrive (Deschutes)"),
    FMSQ(6, 0x5, 0x0, Q.NO_L2, "Intel Celeron (Covington dA0)"),
    FMSQ(6, 0x5, 0x0, Q.BIG_L2, "Intel Pentium II Xeon (Deschutes A0)"),
    FMSQ(6, 0x5, 0x0, Q.L2_256K, "Intel Mobile Pentium II (Tonga mdA0)"),
    FMS(6, 0x5, 0x0, "Intel Pentium II (Deschutes dA0)"),
    FMSQ(6, 0x5, 0x1, Q.NO_L2, "Intel Celeron (Covington dA1)"),
    FMSQ(6, 0x5, 0x1, Q.BIG_L2, "Intel Pentium II Xeon (Deschutes A1)"),
    FMSQ(6, 0x5, 0x1, Q.L2_256K, "Intel Mobile Pentium II (Tonga mdA1)"),
    FMS(6, 0x5, 0x1, "Intel Pentium II (Deschutes dA1)"),
    FMSQ(6, 0x5, 0x2, Q.NO_L2, "Intel Celeron (Covington dB0)"),
    FMSQ(6, 0x5, 0x2, Q.BIG_L2, "Intel Pentium II Xeon (Deschutes B0)"),
    FMSQ(6, 0x5, 0x2, Q.L2_256K, "Intel Mobile Pentium II (Tonga mdB0)"),
    FMS(6, 0x5, 0x2, "Intel Pentium II (Deschutes dB0)"),
    FMSQ(6, 0x5, 0x3, Q.BIG_L2, "Intel Pentium II Xeon (Deschutes B1)"),
    FMSQ(6, 0x5, 0x3, Q.NO_L2, "Intel Celeron (Covington dB1)"),
    FMS(6, 0x5, 0x3, "Intel Pentium II (Deschutes dB1)"),
    FMQ(6, 0x5, Q.NO_L2, "Intel Celeron (Covington)"),
    FMQ(6, 0x5, Q.BIG_L2, "Intel Pentium II Xeon (Deschutes)"),
    FMQ(6, 0x5, Q.L2_256K, "Intel Mobile Pentium II (Tonga)"),
    FM(6, 0x5, "Intel Pentium II (Deschutes)"),
    FMSQ(6, 0x6, 0x0, Q.L2_128K, "Intel Celeron (Mendocino A0)"),
    FMSQ(6, 0x6, 0x0, Q.L2_256K, "Intel Mobile Pentium II (Dixon A0)"),
    FMS(6, 0x6, 0x0, "Intel Celeron / Mobile Pentium II (Mendocino/Dixon A0)"),
    FMSQ(6, 0x6, 0x5, Q.L2_128K, "Intel Celeron (Mendocino B0)"),
    FMSQ(6, 0x6, 0x5, Q.L2_256K, "Intel Mobile Pentium II (Dixon B0)"),
    FMS(6, 0x6, 0x5, "Intel Celeron / Mobile Pentium II (Mendocino/Dixon B0)"),
    FMSQ(6, 0x6, 0xa, Q.L2_128K, "Intel Mobile Celeron (Mendocino mdbA0)"),
    FMSQ(6, 0x6, 0xa, Q.L2_256K, "Intel Mobile Pentium II (Dixon mdxA0)"),
    FMS(6, 0x6, 0xa, "Intel Mobile Celeron / Mobile Pentium II (Mendocino/Dixon mdbA0/mdxA0)"),
    FMQ(6, 0x6, Q.L2_128K, "Intel Celeron (Mendocino)"),
    FMQ(6, 0x6, Q.L2_256K, "Intel Mobile Pentium II (Dixon)"),
    FM(6, 0x6, "Intel Celeron / Mobile Pentium II (Mendocino/Dixon)"),
    FMSQ(6, 0x7, 0x2, Q.BIG_L2, "Intel Pentium III Xeon (Tanner B0)"),
    FMS(6, 0x7, 0x2, "Intel Pentium III (Katmai B0)"),
    FMSQ(6, 0x7, 0x3, Q.BIG_L2, "Intel Pentium III Xeon (Tanner C0)"),
    FMS(6, 0x7, 0x3, "Intel Pentium III (Katmai C0)"),
    FMQ(6, 0x7, Q.BIG_L2, "Intel Pentium III Xeon (Tanner)"),
    FM(6, 0x7, "Intel Pentium III (Katmai)"),
    FMSQ(6, 0x8, 0x1, Q.L2_128K, "Intel Celeron (Coppermine-128 A2)"),
    FMS(6, 0x8, 0x1, "Intel Pentium III (Coppermine A2)"),
    FMSQ(6, 0x8, 0x3, Q.BI_PENTIUM_III_XEON, "Intel Pentium III Xeon (Cascades B0)"),
    FMSQ(6, 0x8, 0x3, Q.MOBILE_PENTIUM, "Intel Mobile Pentium III (Coppermine B0)"),
    FMSQ(6, 0x8, 0x3, Q.BI_CELERON, "Intel Celeron (Coppermine-128 B0)"),
    FMSQ(6, 0x8, 0x3, Q.L2_128K, "Intel Celeron (Coppermine-128 B0)"),
    FMS(6, 0x8, 0x3, "Intel Pentium III (Coppermine B0)"),
    FMSQ(6, 0x8, 0x6, Q.BI_PENTIUM_III_XEON, "Intel Pentium III Xeon (Cascades C0)"),
    FMSQ(6, 0x8, 0x6, Q.MOBILE_PENTIUM, "Intel Mobile Pentium III (Coppermine C0)"),
    FMSQ(6, 0x8, 0x6, Q.BI_CELERON, "Intel Celeron (Coppermine-128 C0)"),
    FMSQ(6, 0x8, 0x6, Q.L2_128K, "Intel Celeron (Coppermine-128 C0)"),
    FMS(6, 0x8, 0x6, "Intel Pentium III (Coppermine C0)"),
    FMSQ(6, 0x8, 0xa, Q.BI_PENTIUM_III_XEON, "Intel Pentium III Xeon (Cascades D0)"),
    FMSQ(6, 0x8, 0xa, Q.MOBILE_PENTIUM, "Intel Mobile Pentium III (Coppermine D0)"),
    FMSQ(6, 0x8, 0xa, Q.BI_CELERON, "Intel Celeron (Coppermine-128 D0)"),
    FMSQ(6, 0x8, 0xa, Q.L2_128K, "Intel Celeron (Coppermine-128 D0)"),
    FMS(6, 0x8, 0xa, "Intel Pentium III (Coppermine D0)"),
    FMQ(6, 0x8, Q.BI_PENTIUM_III_XEON, "Intel Pentium III Xeon (Cascades)"),
    FMQ(6, 0x8, Q.BI_CELERON, "Intel Celeron (Coppermine-128)"),
    FMQ(6, 0x8, Q.L2_128K, "Intel Celeron (Coppermine-128)"),
    FM(6, 0x8, "Intel Pentium III (Coppermine)"),
    FMSQ(6, 0x9, 0x5, Q.CELERON_M, "Intel Celeron M (Banias B1)"),
    FMSQ(6, 0x9, 0x5, Q.BI_CELERON_M, "Intel Celeron M (Banias B1)"),
    FMS(6, 0x9, 0x5, "Intel Pentium M (Banias B1)"),
    FMQ(6, 0x9, Q.CELERON_M, "Intel Celeron M (Banias)"),
    FM(6, 0x9, "Intel Pentium M (Banias)"),
    FMS(6, 0xa, 0x0, "Intel Pentium III Xeon (Cascades A0)"),
    FMS(6, 0xa, 0x1, "Intel Pentium III Xeon (Cascades A1)"),
    FMSQ(6, 0xa, 0x4, Q.L2_2M, "Intel Pentium III Xeon 2MB (Cascades B0)"),
    FMSQ(6, 0xa, 0x4, Q.L2_1M, "Intel Pentium III Xeon 1MB (Cascades B0)"),
    FMS(6, 0xa, 0x4, "Intel Pentium III Xeon (Cascades B0)"),
    FMQ(6, 0xa, Q.L2_2M, "Intel Pentium III Xeon 2MB (Cascades)"),
    FMQ(6, 0xa, Q.L2_1M, "Intel Pentium III Xeon 1MB (Cascades)"),
    FM(6, 0xa, "Intel Pentium III Xeon (Cascades)"),
    FMSQ(6, 0xb, 0x1, Q.BI_CELERON, "Intel Celeron (Tualatin A1)"),
    FMSQ(6, 0xb, 0x1, Q.BI_MOBILE_CELERON, "Intel Mobile Celeron (Tualatin A1)"),
    FMSQ(6, 0xb, 0x1, Q.BI_MOBILE_PENTIUM_III, "Intel Mobile Pentium III-M (Tualatin A1)"),
    FMSQ(6, 0xb, 0x1, Q.L2_512K, "Intel Pentium III-S (Tualatin-512 A1)"),
    FMS(6, 0xb, 0x1, "Intel Pentium III (Tualatin A1)"),
    FMSQ(6, 0xb, 0x4, Q.BI_CELERON, "Intel Celeron (Tualatin B1)"),
    FMSQ(6, 0xb, 0x4, Q.BI_MOBILE_CELERON, "Intel Mobile Celeron (Tualatin B1)"),
    FMSQ(6, 0xb, 0x4, Q.BI_MOBILE_PENTIUM_III, "Intel Mobile Pentium III-M (Tualatin B1)"),
    FMSQ(6, 0xb, 0x4, Q.L2_512K, "Intel Pentium III-S (Tualatin-512 B1)"),
    FMS(6, 0xb, 0x4, "Intel Pentium III (Tualatin B1)"),
    FMQ(6, 0xb, Q.BI_CELERON, "Intel Celeron (Tualatin)"),
    FMQ(6, 0xb, Q.BI_MOBILE_CELERON, "Intel Mobile Celeron (Tualatin)"),
    FMQ(6, 0xb, Q.BI_MOBILE_PENTIUM_III, "Intel Mobile Pentium III-M (Tualatin)"),
    FMQ(6, 0xb, Q.PENTIUM_III_M, "Intel Mobile Pentium III-M (Tualatin)"),
    FMQ(6, 0xb, Q.L2_512K, "Intel Pentium III-S (Tualatin-512)"),
    FM(6, 0xb, "Intel Pentium III (Tualatin)"),
    FMSQ(6, 0xd, 0x6, Q.CELERON_M, "Intel Celeron M (Dothan B1)"),
    FMS(6, 0xd, 0x6, "Intel Pentium M (Dothan B1)"),
    FMSQ(6, 0xd, 0x8, Q.CELERON_M, "Intel Celeron M (Dothan C0)"),
    FMS(6, 0xd, 0x8, "Intel Pentium M (Dothan C0)"),
    FMQ(6, 0xd, Q.CELERON_M, "Intel Celeron M (Dothan)"),
    FM(6, 0xd, "Intel Pentium M (Dothan)"),
    FMSQ(6, 0xe, 0x8, Q.XEON, "Intel Xeon LV (Sossaman C0)"),
    FMSQ(6, 0xe, 0x8, Q.CORE_SOLO, "Intel Core Solo (Yonah C0)"),
    FMSQ(6, 0xe, 0x8, Q.CORE_DUO, "Intel Core Duo (Yonah C0)"),
    FMSQ(6, 0xe, 0x8, Q.CELERON_M, "Intel Celeron M (Yonah C0)"),
    FMSQ(6, 0xe, 0x8, Q.PENTIUM_DUAL_CORE, "Intel Pentium Dual-Core Mobile T2000 (Yonah C0)"),
    FMS(6, 0xe, 0x8, "Intel Core Solo / Core Duo (Yonah C0)"),
    FMSQ(6, 0xe, 0xc, Q.XEON, "Intel Xeon LV (Sossaman D0)"),
    FMSQ(6, 0xe, 0xc, Q.CORE_SOLO, "Intel Core Solo (Yonah D0)"),
    FMSQ(6, 0xe, 0xc, Q.CORE_DUO, "Intel Core Duo (Yonah D0)"),
    FMSQ(6, 0xe, 0xc, Q.CELERON_M, "Intel Celeron M (Yonah D0)"),
    FMSQ(6, 0xe, 0xc, Q.PENTIUM_DUAL_CORE, "Intel Pentium Dual-Core Mobile T2000 (Yonah D0)"),
    FMSQ(6, 0xe, 0xc, Q.GENUINE_INTEL, "Intel Genuine Intel T2000 (Yonah D0)"),
    FMS(6, 0xe, 0xc, "Intel Core Solo / Core Duo (Yonah D0)"),
    FMQ(6, 0xe, Q.XEON, "Intel Xeon LV (Sossaman)"),
    FMQ(6, 0xe, Q.CORE_SOLO, "Intel Core Solo (Yonah)"),
    FMQ(6, 0xe, Q.CORE_DUO, "Intel Core Duo (Yonah)"),
    FMQ(6, 0xe, Q.CELERON_M, "Intel Celeron M (Yonah)"),
    FM(6, 0xe, "Intel Core Solo / Core Duo (Yonah)"),

    # Core
    FMSQ(6, 0xf, 0x2, Q.DESKTOP_CELERON, "Intel Celeron Dual-Core E1000 (Allendale L2)"),
    FMSQ(6, 0xf, 0x2, Q.CELERON, "Intel Celeron M (Merom L2)"),
    FMSQ(6, 0xf, 0x2, Q.MOBILE_PENTIUM_DUAL_CORE, "Intel Pentium Dual-Core Mobile T2000 (Merom L2)"),
    FMSQ(6, 0xf, 0x2, Q.PENTIUM_DUAL_CORE, "Intel Pentium Dual-Core E2000 (Allendale L2)"),
    FMSQ(6, 0xf, 0x2, Q.XEON, "Intel Xeon 3000 (Allendale L2)"),
    FMSQ(6, 0xf, 0x2, Q.MOBILE_CORE2_DUO, "Intel Core 2 Duo Mobile (Merom L2)"),
    FMSQ(6, 0xf, 0x2, Q.CORE2_DUO, "Intel Core 2 Duo (Allendale L2)"),
    FMS(6, 0xf, 0x2, "Intel Core 2 Duo (Allendale/Merom L2)"),
    FMSQ(6, 0xf, 0x4, Q.XEON, "Intel Xeon 5100 (Woodcrest B0)"),
    FMS(6, 0xf, 0x4, "Intel Core 2 Duo (Conroe B0)"),
    FMSQ(6, 0xf, 0x5, Q.XEON, "Intel Xeon 5100 (Woodcrest B1)"),
    FMS(6, 0xf, 0x5, "Intel Core 2 Duo (Conroe B1)"),
    FMSQ(6, 0xf, 0x6, Q.XEON, "Intel Xeon 3000 / 5100 (Conroe/Woodcrest B2)"),
    FMSQ(6, 0xf, 0x6, Q.MOBILE_CORE2_EXTREME, "Intel Core 2 Extreme Mobile (Merom XE B2)"),
    FMSQ(6, 0xf, 0x6, Q.CORE2_EXTREME, "Intel Core 2 Extreme (Conroe XE B2)"),
    FMSQ(6, 0xf, 0x6, Q.MOBILE_CORE2_DUO, "Intel Core 2 Duo Mobile (Merom B2)"),
    FMSQ(6, 0xf, 0x6, Q.CORE2_DUO, "Intel Core 2 Duo (Conroe B2)"),
    FMSQ(6, 0xf, 0x6, Q.MOBILE_PENTIUM_DUAL_CORE, "Intel Pentium Dual-Core Mobile T2000 (Merom B2)"),
    FMSQ(6, 0xf, 0x6, Q.PENTIUM_DUAL_CORE, "Intel Pentium Dual-Core E2000 (Conroe B2)"),
    FMS(6, 0xf, 0x6, "Intel Core 2 Duo (Conroe/Merom B2)"),
    FMSQ(6, 0xf, 0x7, Q.XEON, "Intel Xeon 3200 / 5300 (Kentsfield/Clovertown B3)"),
    FMSQ(6, 0xf, 0x7, Q.CORE2_EXTREME, "Intel Core 2 Extreme Quad-Core (Kentsfield XE B3)"),
    FMSQ(6, 0xf, 0x7, Q.CORE2_QUAD, "Intel Core 2 Quad (Kentsfield B3)"),
    FMS(6, 0xf, 0x7, "Intel Core 2 Quad (Kentsfield B3)"),
    FMSQ(6, 0xf, 0xa, Q.MOBILE_CORE2_EXTREME, "Intel Core 2 Extreme Mobile (Merom XE E1)"),
    FMSQ(6, 0xf, 0xa, Q.MOBILE_CORE2_DUO, "Intel Core 2 Duo Mobile (Merom E1)"),
    FMSQ(6, 0xf, 0xa, Q.CELERON, "Intel Celeron M (Merom E1)"),
    FMSQ(6, 0xf, 0xa, Q.PENTIUM_DUAL_CORE, "Intel Pentium Dual-Core Mobile T2000 (Merom E1)"),
    FMS(6, 0xf, 0xa, "Intel Core 2 Duo Mobile (Merom E1)"),
    FMSQ(6, 0xf, 0xb, Q.XEON_MP, "Intel Xeon 7200 / 7300 (Tigerton G0)"),
    FMSQ(6, 0xf, 0xb, Q.XEON, "Intel Xeon 3000 / 3200 / 5100 / 5300 (Conroe/Kentsfield/Woodcrest/Clovertown G0)"),
    FMSQ(6, 0xf, 0xb, Q.CORE2_EXTREME, "Intel Core 2 Extreme (Kentsfield XE G0)"),
    FMSQ(6, 0xf, 0xb, Q.CORE2_QUAD, "Intel Core 2 Quad (Kentsfield G0)"),
    FMSQ(6, 0xf, 0xb, Q.MOBILE_CORE2_DUO, "Intel Core 2 Duo Mobile (Merom G0)"),
    FMSQ(6, 0xf, 0xb, Q.CORE2_DUO, "Intel Core 2 Duo (Conroe G0)"),
    FMSQ(6, 0xf, 0xb, Q.CELERON, "Intel Celeron (Conroe G0)"),
    FMSQ(6, 0xf, 0xb, Q.PENTIUM_DUAL_CORE, "Intel Pentium Dual-Core (Conroe G0)"),
    FMS(6, 0xf, 0xb, "Intel Core 2 (Conroe/Kentsfield/Merom G0)"),
    FMSQ(6, 0xf, 0xd, Q.XEON, "Intel Xeon 3000 (Conroe M0)"),
    FMSQ(6, 0xf, 0xd, (Q.MOBILE_CORE2_DUO, Q.L2_2M), "Intel Core 2 Duo Mobile T5000 / T7100 (Merom-2M M0)"),
    FMSQ(6, 0xf, 0xd, Q.MOBILE_CORE2_DUO, "Intel Core 2 Duo Mobile (Merom M1)"),
    FMSQ(6, 0xf, 0xd, (Q.DESKTOP_CORE2_DUO, Q.L2_2M), "Intel Core 2 Duo E4000 (Allendale M0)"),
    FMSQ(6, 0xf, 0xd, Q.CORE2_DUO, "Intel Core 2 Duo (Conroe M0)"),
    FMSQ(6, 0xf, 0xd, Q.CELERON, "Intel Celeron M (Merom M1)"),
    FMSQ(6, 0xf, 0xd, Q.MOBILE_PENTIUM_DUAL_CORE, "Intel Pentium Dual-Core Mobile T2000 (Merom M1)"),
    FMSQ(6, 0xf, 0xd, Q.PENTIUM_DUAL_CORE, "Intel Pentium Dual-Core E2000 (Allendale M0)"),
    FMS(6, 0xf, 0xd, "Intel Core 2 Duo (Conroe/Merom M0/M1)"),
    FMQ(6, 0xf, Q.XEON_MP, "Intel Xeon (Tigerton)"),
    FMQ(6, 0xf, Q.XEON, "Intel Xeon (Woodcrest/Clovertown/Conroe/Kentsfield)"),
    FMQ(6, 0xf, Q.CORE2_QUAD, "Intel Core 2 Quad (Kentsfield)"),
    FMQ(6, 0xf, Q.MOBILE_CORE2_DUO, "Intel Core 2 Duo Mobile (Merom)"),
    FMQ(6, 0xf, Q.CORE2_DUO, "Intel Core 2 Duo (Conroe)"),
    FM(6, 0xf, "Intel Core 2 (Merom/Conroe)"),
    FMSQ(6, 0x16, 0x1, Q.MOBILE_CORE2_DUO, "Intel Core 2 Duo Mobile (Merom-L A1)"),
    FMSQ(6, 0x16, 0x1, Q.CORE2_SOLO, "Intel Core 2 Solo Mobile (Merom-L A1)"),
    FMSQ(6, 0x16, 0x1, Q.MOBILE_CELERON, "Intel Mobile Celeron (Merom-L A1)"),
    FMSQ(6, 0x16, 0x1, Q.DESKTOP_CELERON, "Intel Celeron 400 (Conroe-L A1)"),
    FMSQ(6, 0x16, 0x1, Q.CELERON, "Intel Celeron M 500 (Merom-L A1)"),
    FMS(6, 0x16, 0x1, "Intel Celeron (Conroe-L/Merom-L A1)"),
    FMQ(6, 0x16, Q.DESKTOP_CELERON, "Intel Celeron 400 (Conroe-L)"),
    FM(6, 0x16, "Intel Celeron (Conroe-L/Merom-L)"),
    FMSQ(6, 0x17, 0x6, Q.XEON_DP, "Intel Xeon 3100 / 3300 / 5200 / 5400 (Wolfdale/Yorkfield/Harpertown C0)"),
    FMSQ(6, 0x17, 0x6, Q.MOBILE_CORE2_EXTREME, "Intel Core 2 Extreme Mobile (Penryn C0)"),
    FMSQ(6, 0x17, 0x6, Q.CORE2_EXTREME, "Intel Core 2 Extreme (Yorkfield XE C0)"),
    FMSQ(6, 0x17, 0x6, Q.CORE2_QUAD, "Intel Core 2 Quad (Yorkfield C0)"),
    FMSQ(6, 0x17, 0x6, Q.MOBILE_CORE2_DUO, "Intel Core 2 Duo Mobile (Penryn C0)"),
    FMSQ(6, 0x17, 0x6, Q.CORE2_DUO, "Intel Core 2 Duo (Wolfdale C0)"),
    FMS(6, 0x17, 0x6, "Intel Core 2 (Penryn/Wolfdale/Yorkfield C0)"),
    FMSQ(6, 0x17, 0x7, Q.XEON_DP, "Intel Xeon 3100 / 3300 / 5200 / 5400 (Wolfdale/Yorkfield/Harpertown C1)"),
    FMSQ(6, 0x17, 0x7, Q.CORE2_QUAD, "Intel Core 2 Quad (Yorkfield C1)"),
    FMSQ(6, 0x17, 0x7, Q.MOBILE_CORE2_DUO, "Intel Core 2 Duo Mobile (Penryn C1)"),
    FMSQ(6, 0x17, 0x7, Q.CORE2_DUO, "Intel Core 2 Duo (Wolfdale C1)"),
    FMS(6, 0x17, 0x7, "Intel Core 2 (Penryn/Wolfdale/Yorkfield C1)"),
    FMSQ(6, 0x17, 0xa, Q.XEON_DP, "Intel Xeon 3100 / 3300 / 5200 / 5400 (Wolfdale/Yorkfield/Harpertown E0)"),
    FMSQ(6, 0x17, 0xa, Q.MOBILE_CORE2_EXTREME, "Intel Core 2 Extreme Mobile (Penryn E0)"),
    FMSQ(6, 0x17, 0xa, Q.CORE2_EXTREME, "Intel Core 2 Extreme (Yorkfield XE E0)"),
    FMSQ(6, 0x17, 0xa, Q.MOBILE_CORE2_QUAD, "Intel Core 2 Quad Mobile (Penryn QC E0)"),
    FMSQ(6, 0x17, 0xa, Q.CORE2_QUAD, "Intel Core 2 Quad (Yorkfield E0)"),
    FMSQ(6, 0x17, 0xa, (Q.MOBILE_CORE2_DUO, Q.L2_6M), "Intel Core 2 Duo Mobile (Penryn E0)"),
    FMSQ(6, 0x17, 0xa, Q.MOBILE_CORE2_DUO, "Intel Core 2 Duo Mobile (Penryn-3M R0)"),
    FMSQ(6, 0x17, 0xa, (Q.DESKTOP_CORE2_DUO, Q.L2_6M), "Intel Core 2 Duo E8000 (Wolfdale E0)"),
    FMSQ(6, 0x17, 0xa, Q.DESKTOP_CORE2_DUO, "Intel Core 2 Duo E7000 (Wolfdale-3M R0)"),
    FMSQ(6, 0x17, 0xa, Q.CORE2_DUO, "Intel Core 2 Duo (Wolfdale E0)"),
    FMSQ(6, 0x17, 0xa, Q.CORE2_SOLO, "Intel Core 2 Solo Mobile (Penryn E0)"),
    FMSQ(6, 0x17, 0xa, Q.MOBILE_PENTIUM, "Intel Pentium T4000 / SU2000 (Penryn E0)"),
    FMSQ(6, 0x17, 0xa, Q.PENTIUM, "Intel Pentium E2000 / E5000 / E6000 (Wolfdale E0)"),
    FMSQ(6, 0x17, 0xa, Q.DESKTOP_CELERON, "Intel Celeron E3000 (Wolfdale E0)"),
    FMSQ(6, 0x17, 0xa, Q.CELERON, "Intel Celeron M 700 / 900 (Penryn E0)"),
    FMS(6, 0x17, 0xa, "Intel Core 2 (Penryn/Wolfdale/Yorkfield E0)"),
    FMQ(6, 0x17, Q.XEON_DP, "Intel Xeon (Wolfdale/Yorkfield/Harpertown)"),
    FMQ(6, 0x17, Q.CORE2_QUAD, "Intel Core 2 Quad (Yorkfield)"),
    FMQ(6, 0x17, Q.MOBILE_CORE2_DUO, "Intel Core 2 Duo Mobile (Penryn)"),
    FMQ(6, 0x17, Q.CORE2_DUO, "Intel Core 2 Duo (Wolfdale)"),
    FM(6, 0x17, "Intel Core 2 (Penryn/Wolfdale/Yorkfield)"),
    FMS(6, 0x1d, 0x1, "Intel Xeon 7400 (Dunnington A1)"),
    FM(6, 0x1d, "Intel Xeon 7400 (Dunnington)"),

    # Nehalem and Westmere
    FMSQ(6, 0x1a, 0x4, Q.XEON, "Intel Xeon 3500 / 5500 (Bloomfield/Gainestown C0)"),
    FMSQ(6, 0x1a, 0x4, Q.CORE_I7_EXTREME, "Intel Core i7 Extreme 900 (Bloomfield C0)"),
    FMS(6, 0x1a, 0x4, "Intel Core i7-900 (Bloomfield C0)"),
    FMSQ(6, 0x1a, 0x5, Q.XEON, "Intel Xeon 3500 / 5500 (Bloomfield/Gainestown D0)"),
    FMSQ(6, 0x1a, 0x5, Q.CORE_I7_EXTREME, "Intel Core i7 Extreme 900 (Bloomfield D0)"),
    FMS(6, 0x1a, 0x5, "Intel Core i7-900 (Bloomfield D0)"),
    FMQ(6, 0x1a, Q.XEON, "Intel Xeon 3500 / 5500 (Bloomfield/Gainestown)"),
    FM(6, 0x1a, "Intel Core i7-900 (Bloomfield)"),
    FMSQ(6, 0x1e, 0x5, Q.XEON, "Intel Xeon 3400 / C5500 / C3500 (Lynnfield/Jasper Forest B1)"),
    FMSQ(6, 0x1e, 0x5, Q.MOBILE_CORE_I, "Intel Core i7-700 / i7-800 / i7-900 Mobile (Clarksfield B1)"),
    FMSQ(6, 0x1e, 0x5, Q.CORE_I5, "Intel Core i5-700 (Lynnfield B1)"),
    FMSQ(6, 0x1e, 0x5, Q.CORE_I7, "Intel Core i7-800 (Lynnfield B1)"),
    FMS(6, 0x1e, 0x5, "Intel Core i5 / i7 (Lynnfield/Clarksfield B1)"),
    FMQ(6, 0x1e, Q.XEON, "Intel Xeon 3400 (Lynnfield)"),
    FMQ(6, 0x1e, Q.MOBILE_CORE_I, "Intel Core i7 Mobile (Clarksfield)"),
    FM(6, 0x1e, "Intel Core i5 / i7 (Lynnfield/Clarksfield)"),
    FM(6, 0x1f, "Intel Core i5 / i7 (Auburndale/Havendale)"),
    FMSQ(6, 0x25, 0x2, Q.XEON, "Intel Xeon L3406 (Clarkdale C2)"),
    FMSQ(6, 0x25, 0x2, Q.MOBILE_CORE_I, "Intel Core i3 / i5 / i7 Mobile (Arrandale C2)"),
    FMSQ(6, 0x25, 0x2, Q.CORE_I, "Intel Core i3 / i5 (Clarkdale C2)"),
    FMSQ(6, 0x25, 0x2, Q.DESKTOP_PENTIUM, "Intel Pentium G6900 (Clarkdale C2)"),
    FMSQ(6, 0x25, 0x2, Q.PENTIUM, "Intel Pentium P6000 (Arrandale C2)"),
    FMSQ(6, 0x25, 0x2, Q.CELERON, "Intel Celeron P4000 / U3000 (Arrandale C2)"),
    FMS(6, 0x25, 0x2, "Intel Core i3 / i5 / i7 (Clarkdale/Arrandale C2)"),
    FMSQ(6, 0x25, 0x5, Q.XEON, "Intel Xeon L3406 (Clarkdale K0)"),
    FMSQ(6, 0x25, 0x5, Q.MOBILE_CORE_I, "Intel Core i3 / i5 / i7 Mobile (Arrandale K0)"),
    FMSQ(6, 0x25, 0x5, Q.CORE_I3, "Intel Core i3-500 (Clarkdale K0)"),
    FMSQ(6, 0x25, 0x5, Q.CORE_I, "Intel Core i3 / i5 (Clarkdale K0)"),
    FMSQ(6, 0x25, 0x5, Q.DESKTOP_PENTIUM, "Intel Pentium G6900 (Clarkdale K0)"),
    FMSQ(6, 0x25, 0x5, Q.PENTIUM, "Intel Pentium P6000 / U5000 (Arrandale K0)"),
    FMSQ(6, 0x25, 0x5, Q.CELERON, "Intel Celeron P4000 / U3000 (Arrandale K0)"),
    FMS(6, 0x25, 0x5, "Intel Core i3 / i5 / i7 (Clarkdale/Arrandale K0)"),
    FM(6, 0x25, "Intel Core i3 / i5 / i7 (Clarkdale/Arrandale)"),
    FMSQ(6, 0x2c, 0x2, Q.XEON, "Intel Xeon 3600 / 5600 (Gulftown/Westmere-EP B1)"),
    FMS(6, 0x2c, 0x2, "Intel Core i7-900 (Gulftown B1)"),
    FMQ(6, 0x2c, Q.XEON, "Intel Xeon 3600 / 5600 (Gulftown/Westmere-EP)"),
    FM(6, 0x2c, "Intel Core i7-900 (Gulftown)"),
    FMS(6, 0x2e, 0x6, "Intel Xeon 6500 / 7500 (Beckton D0)"),
    FM(6, 0x2e, "Intel Xeon 6500 / 7500 (Beckton)"),
    FMS(6, 0x2f, 0x2, "Intel Xeon E7-8800 / E7-4800 / E7-2800 (Westmere-EX A2)"),
    FM(6, 0x2f, "Intel Xeon E7 (Westmere-EX)"),

    # Sandy Bridge and Ivy Bridge
    FMSQ(6, 0x2a, 0x7, Q.XEON_E3, "Intel Xeon E3-1100 / E3-1200 (Sandy Bridge D2/J1/Q0)"),
    FMSQ(6, 0x2a, 0x7, Q.MOBILE_CORE_I, "Intel Mobile Core i3-2000 / i5-2000 / i7-2000 (Sandy Bridge D2/J1/Q0)"),
    FMSQ(6, 0x2a, 0x7, Q.DESKTOP_CORE_I, "Intel Core i3-2000 / i5-2000 / i7-2000 (Sandy Bridge D2/J1/Q0)"),
    FMSQ(6, 0x2a, 0x7, Q.DESKTOP_PENTIUM, "Intel Pentium G500 / G600 / G800 (Sandy Bridge D2/J1/Q0)"),
    FMSQ(6, 0x2a, 0x7, Q.PENTIUM, "Intel Pentium 900 / B900 (Sandy Bridge D2/J1/Q0)"),
    FMSQ(6, 0x2a, 0x7, Q.DESKTOP_CELERON, "Intel Celeron G400 / G500 (Sandy Bridge D2/J1/Q0)"),
    FMSQ(6, 0x2a, 0x7, Q.CELERON, "Intel Celeron 700 / 800 / B800 (Sandy Bridge D2/J1/Q0)"),
    FMS(6, 0x2a, 0x7, "Intel Core i*-2000 (Sandy Bridge D2/J1/Q0)"),
    FMQ(6, 0x2a, Q.XEON_E3, "Intel Xeon E3-1200 (Sandy Bridge)"),
    FMQ(6, 0x2a, Q.MOBILE_CORE_I, "Intel Mobile Core i*-2000 (Sandy Bridge)"),
    FMQ(6, 0x2a, Q.CELERON, "Intel Celeron (Sandy Bridge)"),
    FMQ(6, 0x2a, Q.PENTIUM, "Intel Pentium (Sandy Bridge)"),
    FM(6, 0x2a, "Intel Core i*-2000 (Sandy Bridge)"),
    FMSQ(6, 0x2d, 0x6, Q.XEON_E5, "Intel Xeon E5-1600 / E5-2600 / E5-4600 (Sandy Bridge-E C1/M0)"),
    FMS(6, 0x2d, 0x6, "Intel Core i7-3800 / i7-3900 (Sandy Bridge-E C1)"),
    FMSQ(6, 0x2d, 0x7, Q.XEON_E5, "Intel Xeon E5-1600 / E5-2600 / E5-4600 (Sandy Bridge-E C2/M1)"),
    FMS(6, 0x2d, 0x7, "Intel Core i7-3800 / i7-3900 (Sandy Bridge-E C2)"),
    FMQ(6, 0x2d, Q.XEON_E5, "Intel Xeon E5 (Sandy Bridge-E)"),
    FM(6, 0x2d, "Intel Core i7-3800 / i7-3900 (Sandy Bridge-E)"),
    FMSQ(6, 0x3a, 0x9, Q.XEON_E3, "Intel Xeon E3-1200 v2 (Ivy Bridge E1/N0/L1)"),
    FMSQ(6, 0x3a, 0x9, Q.DESKTOP_CORE_I, "Intel Core i3-3000 / i5-3000 / i7-3000 (Ivy Bridge E1/N0/L1)"),
    FMSQ(6, 0x3a, 0x9, Q.DESKTOP_PENTIUM, "Intel Pentium G2000 (Ivy Bridge E1/N0/L1)"),
    FMSQ(6, 0x3a, 0x9, Q.PENTIUM, "Intel Pentium 2000 (Ivy Bridge E1/N0/L1)"),
    FMSQ(6, 0x3a, 0x9, Q.DESKTOP_CELERON, "Intel Celeron G1600 (Ivy Bridge E1/N0/L1)"),
    FMSQ(6, 0x3a, 0x9, Q.CELERON, "Intel Celeron 1000 (Ivy Bridge E1/N0/L1)"),
    FMS(6, 0x3a, 0x9, "Intel Mobile Core i*-3000 (Ivy Bridge E1/L1)"),
    FMQ(6, 0x3a, Q.XEON_E3, "Intel Xeon E3-1200 v2 (Ivy Bridge)"),
    FMQ(6, 0x3a, Q.DESKTOP_CORE_I, "Intel Core i*-3000 (Ivy Bridge)"),
    FMQ(6, 0x3a, Q.CELERON, "Intel Celeron (Ivy Bridge)"),
    FMQ(6, 0x3a, Q.PENTIUM, "Intel Pentium (Ivy Bridge)"),
    FM(6, 0x3a, "Intel Mobile Core i*-3000 (Ivy Bridge)"),
    FMSQ(6, 0x3e, 0x4, Q.XEON_E7, "Intel Xeon E7-8800 / E7-4800 / E7-2800 v2 (Ivy Bridge-EX D1)"),
    FMSQ(6, 0x3e, 0x4, Q.XEON, "Intel Xeon E5-1600 / E5-2600 / E5-4600 v2 (Ivy Bridge-EP S1)"),
    FMS(6, 0x3e, 0x4, "Intel Core i7-4800 / i7-4900 (Ivy Bridge-E S1)"),
    FMSQ(6, 0x3e, 0x7, Q.XEON_E7, "Intel Xeon E7-8800 / E7-4800 / E7-2800 v2 (Ivy Bridge-EX D1)"),
    FMS(6, 0x3e, 0x7, "Intel Xeon E7 v2 (Ivy Bridge-EX D1)"),
    FMQ(6, 0x3e, Q.XEON, "Intel Xeon E5 v2 / E7 v2 (Ivy Bridge-EP/EX)"),
    FM(6, 0x3e, "Intel Core i7-4800 / i7-4900 (Ivy Bridge-E)"),

    # Haswell and Broadwell
    FMSQ(6, 0x3c, 0x3, Q.XEON_E3, "Intel Xeon E3-1200 v3 (Haswell C0)"),
    FMSQ(6, 0x3c, 0x3, Q.MOBILE_CORE_I, "Intel Mobile Core i*-4000 (Haswell C0)"),
    FMSQ(6, 0x3c, 0x3, Q.DESKTOP_CORE_I, "Intel Core i3-4000 / i5-4000 / i7-4000 (Haswell C0)"),
    FMSQ(6, 0x3c, 0x3, Q.DESKTOP_PENTIUM, "Intel Pentium G3000 (Haswell C0)"),
    FMSQ(6, 0x3c, 0x3, Q.PENTIUM, "Intel Pentium 3500 (Haswell C0)"),
    FMSQ(6, 0x3c, 0x3, Q.DESKTOP_CELERON, "Intel Celeron G1800 (Haswell C0)"),
    FMSQ(6, 0x3c, 0x3, Q.CELERON, "Intel Celeron 2900 (Haswell C0)"),
    FMS(6, 0x3c, 0x3, "Intel Core i*-4000 (Haswell C0)"),
    FMQ(6, 0x3c, Q.XEON_E3, "Intel Xeon E3-1200 v3 (Haswell)"),
    FMQ(6, 0x3c, Q.CELERON, "Intel Celeron (Haswell)"),
    FMQ(6, 0x3c, Q.PENTIUM, "Intel Pentium (Haswell)"),
    FM(6, 0x3c, "Intel Core i*-4000 (Haswell)"),
    FMSQ(6, 0x3f, 0x2, Q.XEON_E5, "Intel Xeon E5-1600 / E5-2600 / E5-4600 v3 (Haswell-EP R2)"),
    FMS(6, 0x3f, 0x2, "Intel Core i7-5800 / i7-5900 (Haswell-E R2)"),
    FMSQ(6, 0x3f, 0x4, Q.XEON_E7, "Intel Xeon E7-8800 / E7-4800 v3 (Haswell-EX E0)"),
    FMS(6, 0x3f, 0x4, "Intel Xeon E7 v3 (Haswell-EX E0)"),
    FMQ(6, 0x3f, Q.XEON_E7, "Intel Xeon E7 v3 (Haswell-EX)"),
    FMQ(6, 0x3f, Q.XEON, "Intel Xeon E5 v3 (Haswell-EP)"),
    FM(6, 0x3f, "Intel Core i7-5800 / i7-5900 (Haswell-E)"),
    FMSQ(6, 0x45, 0x1, Q.CELERON, "Intel Celeron 2900U (Haswell ULT C0/D0)"),
    FMSQ(6, 0x45, 0x1, Q.PENTIUM, "Intel Pentium 3500U (Haswell ULT C0/D0)"),
    FMS(6, 0x45, 0x1, "Intel Core i*-4000U (Haswell ULT C0/D0)"),
    FM(6, 0x45, "Intel Core i*-4000U (Haswell ULT)"),
    FMS(6, 0x46, 0x1, "Intel Core i*-4000 (Crystal Well C0)"),
    FM(6, 0x46, "Intel Core i*-4000 (Crystal Well)"),
    FMSQ(6, 0x3d, 0x4, Q.CORE_M, "Intel Core M (Broadwell-Y E0/F0)"),
    FMSQ(6, 0x3d, 0x4, Q.CELERON, "Intel Celeron 3000 (Broadwell-U E0/F0)"),
    FMSQ(6, 0x3d, 0x4, Q.PENTIUM, "Intel Pentium 3800 (Broadwell-U E0/F0)"),
    FMS(6, 0x3d, 0x4, "Intel Core i*-5000U (Broadwell-U E0/F0)"),
    FM(6, 0x3d, "Intel Core i*-5000 (Broadwell-U)"),
    FMSQ(6, 0x47, 0x1, Q.XEON_E3, "Intel Xeon E3-1200 v4 (Broadwell-H G0)"),
    FMS(6, 0x47, 0x1, "Intel Core i*-5000 (Broadwell-H G0)"),
    FM(6, 0x47, "Intel Core i*-5000 (Broadwell-H)"),
    FMSQ(6, 0x4f, 0x1, Q.XEON_E7, "Intel Xeon E7-8800 / E7-4800 v4 (Broadwell-EX B0)"),
    FMSQ(6, 0x4f, 0x1, Q.XEON, "Intel Xeon E5-1600 / E5-2600 / E5-4600 v4 (Broadwell-EP M0/B0)"),
    FMS(6, 0x4f, 0x1, "Intel Core i7-6800 / i7-6900 (Broadwell-E M0/R0)"),
    FMQ(6, 0x4f, Q.XEON, "Intel Xeon E5 v4 / E7 v4 (Broadwell-EP/EX)"),
    FM(6, 0x4f, "Intel Core i7-6800 / i7-6900 (Broadwell-E)"),
    FMS(6, 0x56, 0x2, "Intel Xeon D-1500 (Broadwell-DE V2)"),
    FMS(6, 0x56, 0x3, "Intel Xeon D-1500 (Broadwell-DE V3)"),
    FMS(6, 0x56, 0x4, "Intel Xeon D-1500 (Broadwell-DE Y0)"),
    FMS(6, 0x56, 0x5, "Intel Xeon D-1500N (Broadwell-DE A1)"),
    FMQ(6, 0x56, Q.PENTIUM, "Intel Pentium D1500 (Broadwell-DE)"),
    FM(6, 0x56, "Intel Xeon D-1500 (Broadwell-DE)"),

    # Skylake and its refreshes
    FMSQ(6, 0x4e, 0x3, Q.CORE_M, "Intel Core m3 / m5 / m7 (Skylake-Y D1)"),
    FMSQ(6, 0x4e, 0x3, Q.CELERON, "Intel Celeron 3800U / 3900U (Skylake-U D1)"),
    FMSQ(6, 0x4e, 0x3, Q.PENTIUM, "Intel Pentium 4400U (Skylake-U D1)"),
    FMSQ(6, 0x4e, 0x3, Q.XEON, "Intel Xeon E3-1500M v5 (Skylake-H D1)"),
    FMS(6, 0x4e, 0x3, "Intel Core i*-6000U / i*-6000Y (Skylake-U/Y D1)"),
    FM(6, 0x4e, "Intel Core i*-6000U / i*-6000Y (Skylake-U/Y)"),
    FMSQ(6, 0x5e, 0x3, Q.XEON_E3, "Intel Xeon E3-1200 v5 (Skylake-S R0/S0)"),
    FMSQ(6, 0x5e, 0x3, Q.MOBILE_CORE_I, "Intel Core i*-6000H (Skylake-H R0)"),
    FMSQ(6, 0x5e, 0x3, Q.DESKTOP_PENTIUM, "Intel Pentium G4000 (Skylake-S R0/S0)"),
    FMSQ(6, 0x5e, 0x3, Q.DESKTOP_CELERON, "Intel Celeron G3900 (Skylake-S R0/S0)"),
    FMS(6, 0x5e, 0x3, "Intel Core i*-6000 (Skylake-S R0/S0)"),
    FM(6, 0x5e, "Intel Core i*-6000 (Skylake-S)"),
    FMSQ(6, 0x55, 0x3, Q.XEON_W, "Intel Xeon W-2100 (Skylake-W B1)"),
    FMS(6, 0x55, 0x3, "Intel Xeon Scalable (Skylake-SP B1)"),
    FMSQ(6, 0x55, 0x4, Q.XEON_W, "Intel Xeon W-2100 / W-3100 (Skylake-W H0/M0/U0)"),
    FMSQ(6, 0x55, 0x4, Q.XEON_D, "Intel Xeon D-2100 (Skylake-DE M1/U0)"),
    FMSQ(6, 0x55, 0x4, Q.XEON_SCALABLE, "Intel Xeon Bronze / Silver / Gold / Platinum (Skylake-SP H0/M0/U0)"),
    FMSQ(6, 0x55, 0x4, Q.XEON, "Intel Xeon Scalable (Skylake-SP H0/M0/U0)"),
    FMSQ(6, 0x55, 0x4, Q.CORE_I9, "Intel Core i9-7900X / i9-7980XE (Skylake-X H0/M0/U0)"),
    FMS(6, 0x55, 0x4, "Intel Core i7-7800X / i9-7900X (Skylake-X H0/M0/U0)"),
    FMSQ(6, 0x55, 0x5, Q.XEON, "Intel Xeon Scalable 2nd Gen (Cascade Lake A0)"),
    FMS(6, 0x55, 0x5, "Intel Xeon (Cascade Lake A0)"),
    FMSQ(6, 0x55, 0x6, Q.XEON, "Intel Xeon Scalable 2nd Gen (Cascade Lake B0)"),
    FMS(6, 0x55, 0x6, "Intel Xeon (Cascade Lake B0)"),
    FMSQ(6, 0x55, 0x7, Q.XEON_W, "Intel Xeon W-2200 / W-3200 (Cascade Lake-W B1/L1/R1)"),
    FMSQ(6, 0x55, 0x7, Q.XEON_SCALABLE, "Intel Xeon Bronze / Silver / Gold / Platinum 2nd Gen (Cascade Lake B1/L1/R1)"),
    FMSQ(6, 0x55, 0x7, Q.XEON, "Intel Xeon Scalable 2nd Gen (Cascade Lake B1/L1/R1)"),
    FMS(6, 0x55, 0x7, "Intel Core i9-10900X (Cascade Lake-X B1/L1/R1)"),
    FMSQ(6, 0x55, 0xb, Q.XEON, "Intel Xeon Scalable 3rd Gen (Cooper Lake A1)"),
    FMS(6, 0x55, 0xb, "Intel Xeon (Cooper Lake A1)"),
    FMQ(6, 0x55, Q.XEON, "Intel Xeon Scalable (Skylake-SP/Cascade Lake/Cooper Lake)"),
    FM(6, 0x55, "Intel Core i7 / i9 (Skylake-X)"),
    FMSQ(6, 0x8e, 0x9, Q.CORE_M, "Intel Core m3-7Y00 (Kaby Lake-Y H0)"),
    FMSQ(6, 0x8e, 0x9, Q.Y_LINE, "Intel Core i*-7Y00 / i*-8Y00 (Kaby Lake-Y / Amber Lake-Y H0)"),
    FMSQ(6, 0x8e, 0x9, Q.CELERON, "Intel Celeron 3865U / 3965U (Kaby Lake-U H0)"),
    FMSQ(6, 0x8e, 0x9, Q.PENTIUM, "Intel Pentium 4415U (Kaby Lake-U H0)"),
    FMS(6, 0x8e, 0x9, "Intel Core i*-7000U (Kaby Lake-U H0/J1)"),
    FMSQ(6, 0x8e, 0xa, Q.CELERON, "Intel Celeron 3867U (Coffee Lake-U D0)"),
    FMS(6, 0x8e, 0xa, "Intel Core i*-8000U (Kaby Lake-R Y0 / Coffee Lake-U D0)"),
    FMSQ(6, 0x8e, 0xb, Q.CELERON, "Intel Celeron 4205U (Whiskey Lake-U W0)"),
    FMSQ(6, 0x8e, 0xb, Q.PENTIUM, "Intel Pentium 5405U (Whiskey Lake-U W0)"),
    FMS(6, 0x8e, 0xb, "Intel Core i*-8000U (Whiskey Lake-U W0)"),
    FMSQ(6, 0x8e, 0xc, Q.Y_LINE, "Intel Core i*-10000Y (Amber Lake-Y V0)"),
    FMSQ(6, 0x8e, 0xc, Q.CELERON, "Intel Celeron 5205U (Comet Lake-U V1)"),
    FMSQ(6, 0x8e, 0xc, Q.PENTIUM, "Intel Pentium 6405U (Comet Lake-U V1)"),
    FMS(6, 0x8e, 0xc, "Intel Core i*-8000U / i*-10000U (Whiskey Lake-U V0 / Comet Lake-U V1)"),
    FMQ(6, 0x8e, Q.CORE_M, "Intel Core m (Kaby Lake-Y)"),
    FM(6, 0x8e, "Intel Core i*-7000U / i*-8000U (Kaby Lake/Coffee Lake/Whiskey Lake)"),
    FMSQ(6, 0x9e, 0x9, Q.XEON_E3, "Intel Xeon E3-1200 v6 (Kaby Lake-S B0)"),
    FMSQ(6, 0x9e, 0x9, Q.MOBILE_CORE_I, "Intel Core i*-7000H (Kaby Lake-H B0)"),
    FMSQ(6, 0x9e, 0x9, Q.DESKTOP_PENTIUM, "Intel Pentium G4500 / G4600 (Kaby Lake-S B0)"),
    FMSQ(6, 0x9e, 0x9, Q.DESKTOP_CELERON, "Intel Celeron G3900 (Kaby Lake-S B0)"),
    FMS(6, 0x9e, 0x9, "Intel Core i*-7000 (Kaby Lake-S B0/S0)"),
    FMSQ(6, 0x9e, 0xa, Q.XEON_E, "Intel Xeon E-2100 (Coffee Lake-S U0)"),
    FMSQ(6, 0x9e, 0xa, Q.MOBILE_CORE_I, "Intel Core i*-8000H (Coffee Lake-H U0)"),
    FMS(6, 0x9e, 0xa, "Intel Core i*-8000 (Coffee Lake-S U0)"),
    FMSQ(6, 0x9e, 0xb, Q.DESKTOP_PENTIUM, "Intel Pentium Gold G5000 (Coffee Lake-S B0)"),
    FMSQ(6, 0x9e, 0xb, Q.DESKTOP_CELERON, "Intel Celeron G4900 (Coffee Lake-S B0)"),
    FMS(6, 0x9e, 0xb, "Intel Core i3-8000 / i3-9000 (Coffee Lake-S B0)"),
    FMSQ(6, 0x9e, 0xc, Q.XEON_E, "Intel Xeon E-2200 (Coffee Lake-S P0)"),
    FMS(6, 0x9e, 0xc, "Intel Core i*-9000 (Coffee Lake-S P0)"),
    FMSQ(6, 0x9e, 0xd, Q.XEON_E, "Intel Xeon E-2200 (Coffee Lake-S R0)"),
    FMSQ(6, 0x9e, 0xd, Q.MOBILE_CORE_I, "Intel Core i*-9000H (Coffee Lake-H R0)"),
    FMS(6, 0x9e, 0xd, "Intel Core i*-9000 (Coffee Lake-S R0)"),
    FMQ(6, 0x9e, Q.XEON, "Intel Xeon E3 v6 / E-2100 / E-2200 (Kaby Lake/Coffee Lake)"),
    FM(6, 0x9e, "Intel Core i*-7000 / i*-8000 / i*-9000 (Kaby Lake/Coffee Lake)"),
    FMSQ(6, 0xa5, 0x2, Q.MOBILE_CORE_I, "Intel Core i*-10000H (Comet Lake-H R1)"),
    FMS(6, 0xa5, 0x2, "Intel Core i*-10000 (Comet Lake-S R1)"),
    FMSQ(6, 0xa5, 0x3, Q.DESKTOP_PENTIUM, "Intel Pentium Gold G6400 (Comet Lake-S G1)"),
    FMSQ(6, 0xa5, 0x3, Q.DESKTOP_CELERON, "Intel Celeron G5900 (Comet Lake-S G1)"),
    FMS(6, 0xa5, 0x3, "Intel Core i*-10000 (Comet Lake-S G1)"),
    FMSQ(6, 0xa5, 0x5, Q.XEON_W, "Intel Xeon W-1200 (Comet Lake-S Q0)"),
    FMS(6, 0xa5, 0x5, "Intel Core i*-10000 (Comet Lake-S Q0)"),
    FMQ(6, 0xa5, Q.XEON, "Intel Xeon W-1200 (Comet Lake)"),
    FM(6, 0xa5, "Intel Core i*-10000 (Comet Lake)"),
    FMS(6, 0xa6, 0x0, "Intel Core i*-10000U (Comet Lake-U A0)"),
    FMSQ(6, 0xa6, 0x1, Q.CELERON, "Intel Celeron 5205U (Comet Lake-U K1/S0)"),
    FMSQ(6, 0xa6, 0x1, Q.PENTIUM, "Intel Pentium Gold 6405U (Comet Lake-U K1/S0)"),
    FMS(6, 0xa6, 0x1, "Intel Core i*-10000U (Comet Lake-U K1/S0)"),
    FM(6, 0xa6, "Intel Core i*-10000U (Comet Lake-U)"),
    FMQ(6, 0xa7, Q.XEON, "Intel Xeon E-2300 / W-1300 (Rocket Lake)"),
    FMS(6, 0xa7, 0x1, "Intel Core i*-11000 (Rocket Lake B0)"),
    FM(6, 0xa7, "Intel Core i*-11000 (Rocket Lake)"),
    FM(6, 0x66, "Intel Core i3-8121U / m3-8114Y (Cannon Lake)"),

    # Ice Lake and later client cores
    FMSQ(6, 0x7e, 0x5, Q.CELERON, "Intel Celeron 6305 (Ice Lake-U D1)"),
    FMSQ(6, 0x7e, 0x5, Q.PENTIUM, "Intel Pentium Gold 7505 (Ice Lake-U D1)"),
    FMS(6, 0x7e, 0x5, "Intel Core i*-1000G (Ice Lake-U/Y D1)"),
    FM(6, 0x7e, "Intel Core i*-1000G (Ice Lake-U/Y)"),
    FM(6, 0x7d, "Intel Core i*-1000G (Ice Lake-Y)"),
    FM(6, 0x9d, "Intel Nervana NNP-I 1000 (Ice Lake-NNPI)"),
    FMSQ(6, 0x6a, 0x4, Q.XEON, "Intel Xeon Scalable 3rd Gen (Ice Lake-SP C0)"),
    FMSQ(6, 0x6a, 0x5, Q.XEON, "Intel Xeon Scalable 3rd Gen (Ice Lake-SP C1)"),
    FMSQ(6, 0x6a, 0x6, Q.XEON_W, "Intel Xeon W-3300 (Ice Lake-W D2)"),
    FMSQ(6, 0x6a, 0x6, Q.XEON, "Intel Xeon Scalable 3rd Gen (Ice Lake-SP D2)"),
    FM(6, 0x6a, "Intel Xeon (Ice Lake-SP)"),
    FMS(6, 0x6c, 0x1, "Intel Xeon D-1700 / D-2700 (Ice Lake-D B1)"),
    FM(6, 0x6c, "Intel Xeon D-1700 / D-2700 (Ice Lake-D)"),
    FMSQ(6, 0x8c, 0x1, Q.CELERON, "Intel Celeron 6305 (Tiger Lake-U B1)"),
    FMSQ(6, 0x8c, 0x1, Q.PENTIUM, "Intel Pentium Gold 7505 (Tiger Lake-U B1)"),
    FMS(6, 0x8c, 0x1, "Intel Core i*-1100G (Tiger Lake-U B1)"),
    FMSQ(6, 0x8c, 0x2, Q.CELERON, "Intel Celeron 6305 (Tiger Lake-U C0)"),
    FMSQ(6, 0x8c, 0x2, Q.PENTIUM, "Intel Pentium Gold 7505 (Tiger Lake-U C0)"),
    FMS(6, 0x8c, 0x2, "Intel Core i*-1100G (Tiger Lake-U C0)"),
    FM(6, 0x8c, "Intel Core i*-1100G (Tiger Lake-U)"),
    FMSQ(6, 0x8d, 0x1, Q.XEON_W, "Intel Xeon W-11000M (Tiger Lake-H R0)"),
    FMS(6, 0x8d, 0x1, "Intel Core i*-11000H (Tiger Lake-H R0)"),
    FM(6, 0x8d, "Intel Core i*-11000H (Tiger Lake-H)"),
    FMS(6, 0x8a, 0x1, "Intel Core i*-L16G7 (Lakefield B2/B3)"),
    FM(6, 0x8a, "Intel Core i*-L16G7 (Lakefield)"),
    FMSQ(6, 0x97, 0x2, Q.DESKTOP_PENTIUM, "Intel Pentium Gold G7400 (Alder Lake-S C0)"),
    FMSQ(6, 0x97, 0x2, Q.DESKTOP_CELERON, "Intel Celeron G6900 (Alder Lake-S C0)"),
    FMSQ(6, 0x97, 0x2, Q.XEON_E, "Intel Xeon E-2400 (Alder Lake-S C0)"),
    FMS(6, 0x97, 0x2, "Intel Core i*-12000 (Alder Lake-S C0)"),
    FMSQ(6, 0x97, 0x5, Q.DESKTOP_PENTIUM, "Intel Pentium Gold G7400 (Alder Lake-S H0)"),
    FMSQ(6, 0x97, 0x5, Q.DESKTOP_CELERON, "Intel Celeron G6900 (Alder Lake-S H0)"),
    FMS(6, 0x97, 0x5, "Intel Core i*-12000 (Alder Lake-S H0)"),
    FM(6, 0x97, "Intel Core i*-12000 (Alder Lake-S)"),
    FMSQ(6, 0x9a, 0x3, Q.P_LINE, "Intel Core i*-1200P (Alder Lake-P J0)"),
    FMSQ(6, 0x9a, 0x3, Q.HX_LINE, "Intel Core i*-12000HX (Alder Lake-HX J0)"),
    FMSQ(6, 0x9a, 0x3, Q.H_LINE, "Intel Core i*-12000H (Alder Lake-H J0)"),
    FMSQ(6, 0x9a, 0x3, Q.CELERON, "Intel Celeron 7305 (Alder Lake-U J0)"),
    FMSQ(6, 0x9a, 0x3, Q.PENTIUM, "Intel Pentium Gold 8505 (Alder Lake-U J0)"),
    FMS(6, 0x9a, 0x3, "Intel Core i*-1200U (Alder Lake-U J0)"),
    FMSQ(6, 0x9a, 0x4, Q.P_LINE, "Intel Core i*-1200P (Alder Lake-P L0/R0)"),
    FMSQ(6, 0x9a, 0x4, Q.H_LINE, "Intel Core i*-12000H (Alder Lake-H L0/R0)"),
    FMSQ(6, 0x9a, 0x4, Q.CELERON, "Intel Celeron 7305 (Alder Lake-U Q0/R0)"),
    FMSQ(6, 0x9a, 0x4, Q.PENTIUM, "Intel Pentium Gold 8505 (Alder Lake-U Q0/R0)"),
    FMS(6, 0x9a, 0x4, "Intel Core i*-1200U (Alder Lake-U Q0/R0)"),
    FM(6, 0x9a, "Intel Core i*-1200 (Alder Lake-P/U)"),
    FMSQ(6, 0xbe, 0x0, Q.INTEL_N_SERIES, "Intel N100 / N200 / N300 (Alder Lake-N N0)"),
    FMS(6, 0xbe, 0x0, "Intel Core i3-N300 / N-series (Alder Lake-N N0)"),
    FMQ(6, 0xbe, Q.ATOM, "Intel Atom x7000E (Alder Lake-N)"),
    FM(6, 0xbe, "Intel N-series (Alder Lake-N)"),
    FMSQ(6, 0xb7, 0x1, Q.HX_LINE, "Intel Core i*-13000HX / i*-14000HX (Raptor Lake-HX B0)"),
    FMSQ(6, 0xb7, 0x1, Q.XEON_E, "Intel Xeon E-2400 (Raptor Lake-S B0)"),
    FMS(6, 0xb7, 0x1, "Intel Core i*-13000 / i*-14000 (Raptor Lake-S B0)"),
    FM(6, 0xb7, "Intel Core i*-13000 / i*-14000 (Raptor Lake-S)"),
    FMSQ(6, 0xba, 0x2, Q.P_LINE, "Intel Core i*-1300P (Raptor Lake-P J0)"),
    FMSQ(6, 0xba, 0x2, Q.H_LINE, "Intel Core i*-13000H (Raptor Lake-H J0)"),
    FMS(6, 0xba, 0x2, "Intel Core i*-1300U (Raptor Lake-U J0)"),
    FMSQ(6, 0xba, 0x3, Q.P_LINE, "Intel Core i*-1300P (Raptor Lake-P Q0)"),
    FMSQ(6, 0xba, 0x3, Q.H_LINE, "Intel Core i*-13000H (Raptor Lake-H Q0)"),
    FMS(6, 0xba, 0x3, "Intel Core i*-1300U (Raptor Lake-U Q0)"),
    FMQ(6, 0xba, Q.CORE_3_5_7, "Intel Core 3 / 5 / 7 100U (Raptor Lake-U Refresh)"),
    FM(6, 0xba, "Intel Core i*-1300 (Raptor Lake-P/U)"),
    FMSQ(6, 0xbf, 0x2, Q.DESKTOP_CORE_I, "Intel Core i*-12000 / i*-13000 (Alder Lake-S C0 Refresh)"),
    FMS(6, 0xbf, 0x2, "Intel Core i*-13000 / i*-14000 (Raptor Lake-S C0)"),
    FMS(6, 0xbf, 0x5, "Intel Core i*-12000 / i*-13000 / i*-14000 (Raptor Lake-S H0)"),
    FM(6, 0xbf, "Intel Core i*-13000 / i*-14000 (Raptor Lake-S)"),
    FMSQ(6, 0xaa, 0x4, Q.H_LINE, "Intel Core Ultra 100H (Meteor Lake-H C0)"),
    FMS(6, 0xaa, 0x4, "Intel Core Ultra 100U (Meteor Lake-U C0)"),
    FM(6, 0xaa, "Intel Core Ultra 100 (Meteor Lake)"),
    FM(6, 0xab, "Intel Core Ultra (Meteor Lake-S)"),
    FM(6, 0xac, "Intel Core Ultra (Meteor Lake)"),
    FMS(6, 0xbd, 0x1, "Intel Core Ultra 200V (Lunar Lake B0)"),
    FM(6, 0xbd, "Intel Core Ultra 200V (Lunar Lake)"),
    FMS(6, 0xc5, 0x2, "Intel Core Ultra 200H (Arrow Lake-H B0)"),
    FM(6, 0xc5, "Intel Core Ultra 200H (Arrow Lake-H)"),
    FMS(6, 0xc6, 0x2, "Intel Core Ultra 200S (Arrow Lake-S B0)"),
    FMQ(6, 0xc6, Q.HX_LINE, "Intel Core Ultra 200HX (Arrow Lake-HX)"),
    FM(6, 0xc6, "Intel Core Ultra 200S (Arrow Lake-S)"),
    FM(6, 0xb5, "Intel Core Ultra 200U (Arrow Lake-U)"),
    FM(6, 0xcc, "Intel Core Ultra 300 (Panther Lake)"),

    # Server cores after Ice Lake
    FMSQ(6, 0x8f, 0x4, Q.XEON_W, "Intel Xeon W-2400 / W-3400 (Sapphire Rapids-WS B0)"),
    FMS(6, 0x8f, 0x4, "Intel Xeon Scalable 4th Gen (Sapphire Rapids B0)"),
    FMSQ(6, 0x8f, 0x5, Q.XEON_MAX, "Intel Xeon CPU Max (Sapphire Rapids HBM C0)"),
    FMS(6, 0x8f, 0x5, "Intel Xeon Scalable 4th Gen (Sapphire Rapids C0)"),
    FMS(6, 0x8f, 0x6, "Intel Xeon Scalable 4th Gen (Sapphire Rapids D0)"),
    FMSQ(6, 0x8f, 0x7, Q.XEON_W, "Intel Xeon W-2400 / W-3400 (Sapphire Rapids-WS E0)"),
    FMS(6, 0x8f, 0x7, "Intel Xeon Scalable 4th Gen (Sapphire Rapids E0)"),
    FMSQ(6, 0x8f, 0x8, Q.XEON_MAX, "Intel Xeon CPU Max (Sapphire Rapids HBM E3)"),
    FMSQ(6, 0x8f, 0x8, Q.XEON_W, "Intel Xeon W-2400 / W-3400 (Sapphire Rapids-WS E3/E4/E5)"),
    FMS(6, 0x8f, 0x8, "Intel Xeon Scalable 4th Gen (Sapphire Rapids E3/E4/E5)"),
    FM(6, 0x8f, "Intel Xeon Scalable 4th Gen (Sapphire Rapids)"),
    FMS(6, 0xcf, 0x2, "Intel Xeon Scalable 5th Gen (Emerald Rapids A1)"),
    FM(6, 0xcf, "Intel Xeon Scalable 5th Gen (Emerald Rapids)"),
    FM(6, 0xad, "Intel Xeon 6 (Granite Rapids)"),
    FM(6, 0xae, "Intel Xeon 6 (Granite Rapids-D)"),
    FM(6, 0xaf, "Intel Xeon 6 (Sierra Forest)"),
    FM(6, 0xdd, "Intel Xeon 6+ (Clearwater Forest)"),
    FM(6, 0xb6, "Intel Atom (Grand Ridge)"),

    # Atom and small cores
    FMSQ(6, 0x1c, 0x2, Q.DUAL_CORE, "Intel Atom 330 / N280 (Diamondville C0)"),
    FMS(6, 0x1c, 0x2, "Intel Atom Z500 / N200 / 230 (Silverthorne/Diamondville C0)"),
    FMSQ(6, 0x1c, 0xa, Q.DUAL_CORE, "Intel Atom D500 / N500 (Pineview A0)"),
    FMS(6, 0x1c, 0xa, "Intel Atom D400 / N400 (Pineview A0/B0)"),
    FM(6, 0x1c, "Intel Atom (Bonnell)"),
    FMS(6, 0x26, 0x1, "Intel Atom Z600 (Lincroft C0)"),
    FM(6, 0x26, "Intel Atom Z600 (Lincroft)"),
    FMS(6, 0x27, 0x1, "Intel Atom Z2400 (Penwell B0)"),
    FM(6, 0x27, "Intel Atom Z2400 (Penwell)"),
    FMS(6, 0x35, 0x1, "Intel Atom Z2700 (Cloverview B1)"),
    FM(6, 0x35, "Intel Atom Z2700 (Cloverview)"),
    FMSQ(6, 0x36, 0x1, Q.DUAL_CORE, "Intel Atom D2000 / N2000 (Cedarview B2/B3)"),
    FMS(6, 0x36, 0x1, "Intel Atom D2000 / N2000 (Cedarview B2/B3)"),
    FM(6, 0x36, "Intel Atom D2000 / N2000 (Cedarview)"),
    FMSQ(6, 0x37, 0x3, Q.CELERON, "Intel Celeron N2800 / J1800 (Bay Trail-M/D B2/B3)"),
    FMSQ(6, 0x37, 0x3, Q.PENTIUM, "Intel Pentium N3500 / J2800 (Bay Trail-M/D B2/B3)"),
    FMS(6, 0x37, 0x3, "Intel Atom Z3000 (Bay Trail-T B2/B3)"),
    FMSQ(6, 0x37, 0x8, Q.CELERON, "Intel Celeron N2800 / J1800 (Bay Trail-M/D C0)"),
    FMSQ(6, 0x37, 0x8, Q.PENTIUM, "Intel Pentium N3500 / J2900 (Bay Trail-M/D C0)"),
    FMS(6, 0x37, 0x8, "Intel Atom Z3000 / E3800 (Bay Trail-T/I C0)"),
    FMSQ(6, 0x37, 0x9, Q.CELERON, "Intel Celeron N2800 / J1800 (Bay Trail-M/D D0)"),
    FMSQ(6, 0x37, 0x9, Q.PENTIUM, "Intel Pentium N3500 / J2900 (Bay Trail-M/D D0)"),
    FMS(6, 0x37, 0x9, "Intel Atom Z3000 / E3800 (Bay Trail-T/I D0)"),
    FMQ(6, 0x37, Q.CELERON, "Intel Celeron (Bay Trail)"),
    FMQ(6, 0x37, Q.PENTIUM, "Intel Pentium (Bay Trail)"),
    FM(6, 0x37, "Intel Atom (Bay Trail)"),
    FM(6, 0x4a, "Intel Atom Z3400 (Merrifield)"),
    FMSQ(6, 0x4c, 0x3, Q.CELERON, "Intel Celeron N3000 / J3000 (Braswell C0)"),
    FMSQ(6, 0x4c, 0x3, Q.PENTIUM, "Intel Pentium N3700 / J3700 (Braswell C0)"),
    FMS(6, 0x4c, 0x3, "Intel Atom x5-Z8000 / x7-Z8000 (Cherry Trail C0)"),
    FMSQ(6, 0x4c, 0x4, Q.CELERON, "Intel Celeron N3000 / J3000 (Braswell D1)"),
    FMSQ(6, 0x4c, 0x4, Q.PENTIUM, "Intel Pentium N3700 / J3700 (Braswell D1)"),
    FMS(6, 0x4c, 0x4, "Intel Atom x5-Z8000 / x7-Z8000 / x5-E8000 (Cherry Trail D1)"),
    FMQ(6, 0x4c, Q.CELERON, "Intel Celeron (Braswell)"),
    FMQ(6, 0x4c, Q.PENTIUM, "Intel Pentium (Braswell)"),
    FM(6, 0x4c, "Intel Atom (Cherry Trail)"),
    FMSQ(6, 0x4d, 0x8, Q.ATOM, "Intel Atom C2000 (Avoton/Rangeley B0/C0)"),
    FM(6, 0x4d, "Intel Atom C2000 (Avoton/Rangeley)"),
    FMS(6, 0x5a, 0x0, "Intel Atom Z3500 (Moorefield/Anniedale A0)"),
    FM(6, 0x5a, "Intel Atom Z3500 (Moorefield/Anniedale)"),
    FM(6, 0x5d, "Intel Atom x3-C3000 (SoFIA)"),
    FM(6, 0x75, "Intel Atom (Lightning Mountain)"),
    FMSQ(6, 0x5c, 0x9, Q.CELERON, "Intel Celeron N3350 / J3355 (Apollo Lake B0)"),
    FMSQ(6, 0x5c, 0x9, Q.PENTIUM, "Intel Pentium N4200 / J4205 (Apollo Lake B0)"),
    FMS(6, 0x5c, 0x9, "Intel Atom x5-E3900 / x7-E3900 (Apollo Lake B0)"),
    FMSQ(6, 0x5c, 0xa, Q.CELERON, "Intel Celeron N3350 / J3355 (Apollo Lake E0)"),
    FMSQ(6, 0x5c, 0xa, Q.PENTIUM, "Intel Pentium N4200 / J4205 (Apollo Lake E0)"),
    FMS(6, 0x5c, 0xa, "Intel Atom x5-E3900 / x7-E3900 (Apollo Lake E0)"),
    FM(6, 0x5c, "Intel Atom / Celeron / Pentium (Apollo Lake)"),
    FMS(6, 0x5f, 0x1, "Intel Atom C3000 (Denverton B0/B1)"),
    FM(6, 0x5f, "Intel Atom C3000 (Denverton)"),
    FMSQ(6, 0x7a, 0x1, Q.CELERON, "Intel Celeron N4000 / J4005 (Gemini Lake B0)"),
    FMSQ(6, 0x7a, 0x1, Q.PENTIUM, "Intel Pentium Silver N5000 / J5005 (Gemini Lake B0)"),
    FMS(6, 0x7a, 0x1, "Intel Celeron / Pentium Silver (Gemini Lake B0)"),
    FMSQ(6, 0x7a, 0x8, Q.CELERON, "Intel Celeron N4020 / J4025 (Gemini Lake Refresh R0)"),
    FMSQ(6, 0x7a, 0x8, Q.PENTIUM, "Intel Pentium Silver N5030 / J5040 (Gemini Lake Refresh R0)"),
    FMS(6, 0x7a, 0x8, "Intel Celeron / Pentium Silver (Gemini Lake Refresh R0)"),
    FM(6, 0x7a, "Intel Celeron / Pentium Silver (Gemini Lake)"),
    FMS(6, 0x86, 0x4, "Intel Atom P5900 / Xeon D-1700 (Snow Ridge B0)"),
    FMS(6, 0x86, 0x5, "Intel Atom C5000 / P5000 (Jacobsville/Snow Ridge B1)"),
    FM(6, 0x86, "Intel Atom (Snow Ridge/Jacobsville)"),
    FMSQ(6, 0x96, 0x1, Q.CELERON, "Intel Celeron J6412 / N6210 (Elkhart Lake B1)"),
    FMSQ(6, 0x96, 0x1, Q.PENTIUM, "Intel Pentium J6426 / N6415 (Elkhart Lake B1)"),
    FMS(6, 0x96, 0x1, "Intel Atom x6000E (Elkhart Lake B1)"),
    FM(6, 0x96, "Intel Atom x6000E (Elkhart Lake)"),
    FMSQ(6, 0x9c, 0x0, Q.CELERON, "Intel Celeron N4500 / N5100 (Jasper Lake A0)"),
    FMSQ(6, 0x9c, 0x0, Q.PENTIUM, "Intel Pentium Silver N6000 (Jasper Lake A0)"),
    FMS(6, 0x9c, 0x0, "Intel Celeron / Pentium Silver (Jasper Lake A0)"),
    FM(6, 0x9c, "Intel Celeron / Pentium Silver (Jasper Lake)"),

    # Xeon Phi
    FMS(6, 0x57, 0x1, "Intel Xeon Phi x200 (Knights Landing B0)"),
    FM(6, 0x57, "Intel Xeon Phi x200 (Knights Landing)"),
    FMS(6, 0x85, 0x0, "Intel Xeon Phi 72x5 (Knights Mill A0)"),
    FM(6, 0x85, "Intel Xeon Phi 72x5 (Knights Mill)"),
    F(6, "Intel Pentium II / Pentium III / Core (unknown model)"),

    # Itanium in IA-32 mode
    F(7, "Intel Itanium (Merced)"),

    # Knights Corner
    FMS(0xb, 0x1, 0x1, "Intel Xeon Phi Coprocessor (Knights Corner B0)"),
    FMS(0xb, 0x1, 0x3, "Intel Xeon Phi Coprocessor (Knights Corner B1)"),
    FMS(0xb, 0x1, 0x4, "Intel Xeon Phi Coprocessor (Knights Corner C0)"),
    FM(0xb, 0x1, "Intel Xeon Phi Coprocessor (Knights Corner)"),
    F(0xb, "Intel Xeon Phi (unknown model)"),

    # NetBurst
    FMQ(0xf, 0x0, Q.BI_XEON, "Intel Xeon (Foster)"),
    FMSQ(0xf, 0x0, 0x7, Q.XEON, "Intel Xeon (Foster B2)"),
    FMSQ(0xf, 0x0, 0x7, Q.CELERON, "Intel Celeron (Willamette B2)"),
    FMS(0xf, 0x0, 0x7, "Intel Pentium 4 (Willamette B2)"),
    FMSQ(0xf, 0x0, 0xa, Q.XEON, "Intel Xeon (Foster C1)"),
    FMSQ(0xf, 0x0, 0xa, Q.CELERON, "Intel Celeron (Willamette C1)"),
    FMS(0xf, 0x0, 0xa, "Intel Pentium 4 (Willamette C1)"),
    FMQ(0xf, 0x0, Q.XEON, "Intel Xeon (Foster)"),
    FM(0xf, 0x0, "Intel Pentium 4 (Willamette)"),
    FMQ(0xf, 0x1, Q.BI_XEON, "Intel Xeon (Foster)"),
    FMSQ(0xf, 0x1, 0x1, Q.XEON, "Intel Xeon (Foster C0)"),
    FMSQ(0xf, 0x1, 0x1, Q.CELERON, "Intel Celeron (Willamette C0)"),
    FMS(0xf, 0x1, 0x1, "Intel Pentium 4 (Willamette C0)"),
    FMSQ(0xf, 0x1, 0x2, Q.XEON, "Intel Xeon (Foster D0)"),
    FMSQ(0xf, 0x1, 0x2, Q.CELERON, "Intel Celeron (Willamette D0)"),
    FMS(0xf, 0x1, 0x2, "Intel Pentium 4 (Willamette D0)"),
    FMSQ(0xf, 0x1, 0x3, Q.BI_XEON_MP, "Intel Xeon MP (Foster MP E0)"),
    FMSQ(0xf, 0x1, 0x3, Q.XEON_MP, "Intel Xeon MP (Foster MP E0)"),
    FMSQ(0xf, 0x1, 0x3, Q.XEON, "Intel Xeon (Foster E0)"),
    FMSQ(0xf, 0x1, 0x3, Q.CELERON, "Intel Celeron (Willamette E0)"),
    FMS(0xf, 0x1, 0x3, "Intel Pentium 4 (Willamette E0)"),
    FMQ(0xf, 0x1, Q.XEON_MP, "Intel Xeon MP (Foster MP)"),
    FMQ(0xf, 0x1, Q.XEON, "Intel Xeon (Foster)"),
    FMQ(0xf, 0x1, Q.CELERON, "Intel Celeron (Willamette)"),
    FM(0xf, 0x1, "Intel Pentium 4 (Willamette)"),
    FMQ(0xf, 0x2, Q.BI_MOBILE_PENTIUM_4, "Intel Mobile Pentium 4-M (Northwood)"),
    FMSQ(0xf, 0x2, 0x2, Q.XEON_MP, "Intel Xeon MP (Gallatin A0)"),
    FMSQ(0xf, 0x2, 0x2, Q.XEON, "Intel Xeon (Prestonia A0)"),
    FMSQ(0xf, 0x2, 0x2, Q.PENTIUM_EXTREME, "Intel Pentium 4 Extreme Edition (Gallatin A0)"),
    FMS(0xf, 0x2, 0x2, "Intel Pentium 4 (Northwood A0)"),
    FMSQ(0xf, 0x2, 0x4, Q.XEON_MP, "Intel Xeon MP (Gallatin B0)"),
    FMSQ(0xf, 0x2, 0x4, Q.XEON, "Intel Xeon (Prestonia B0)"),
    FMSQ(0xf, 0x2, 0x4, Q.MOBILE_CELERON, "Intel Mobile Celeron (Northwood B0)"),
    FMSQ(0xf, 0x2, 0x4, Q.CELERON, "Intel Celeron (Northwood B0)"),
    FMSQ(0xf, 0x2, 0x4, Q.PENTIUM_4_M, "Intel Mobile Pentium 4-M (Northwood B0)"),
    FMS(0xf, 0x2, 0x4, "Intel Pentium 4 (Northwood B0)"),
    FMSQ(0xf, 0x2, 0x5, (Q.XEON, Q.L3), "Intel Xeon MP (Gallatin C0)"),
    FMSQ(0xf, 0x2, 0x5, Q.XEON_MP, "Intel Xeon MP (Gallatin C0)"),
    FMSQ(0xf, 0x2, 0x5, Q.XEON, "Intel Xeon (Prestonia C0)"),
    FMSQ(0xf, 0x2, 0x5, Q.PENTIUM_EXTREME, "Intel Pentium 4 Extreme Edition (Gallatin M0)"),
    FMS(0xf, 0x2, 0x5, "Intel Pentium 4 (Northwood C0)"),
    FMSQ(0xf, 0x2, 0x6, (Q.XEON, Q.L3), "Intel Xeon MP (Gallatin C1)"),
    FMSQ(0xf, 0x2, 0x6, Q.XEON_MP, "Intel Xeon MP (Gallatin C1)"),
    FMSQ(0xf, 0x2, 0x6, Q.XEON, "Intel Xeon (Prestonia C1)"),
    FMS(0xf, 0x2, 0x6, "Intel Pentium 4 Extreme Edition (Gallatin C1)"),
    FMSQ(0xf, 0x2, 0x7, Q.XEON, "Intel Xeon (Prestonia C1)"),
    FMSQ(0xf, 0x2, 0x7, Q.MOBILE_CELERON, "Intel Mobile Celeron (Northwood C1)"),
    FMSQ(0xf, 0x2, 0x7, Q.CELERON, "Intel Celeron (Northwood C1)"),
    FMSQ(0xf, 0x2, 0x7, Q.PENTIUM_4_M, "Intel Mobile Pentium 4-M (Northwood C1)"),
    FMS(0xf, 0x2, 0x7, "Intel Pentium 4 (Northwood C1)"),
    FMSQ(0xf, 0x2, 0x9, Q.XEON, "Intel Xeon (Prestonia D1)"),
    FMSQ(0xf, 0x2, 0x9, Q.MOBILE_CELERON, "Intel Mobile Celeron (Northwood D1)"),
    FMSQ(0xf, 0x2, 0x9, Q.CELERON, "Intel Celeron (Northwood D1)"),
    FMSQ(0xf, 0x2, 0x9, Q.PENTIUM_4_M, "Intel Mobile Pentium 4-M (Northwood D1)"),
    FMSQ(0xf, 0x2, 0x9, Q.HYPERTHREADED, "Intel Pentium 4 HT (Northwood D1)"),
    FMS(0xf, 0x2, 0x9, "Intel Pentium 4 (Northwood D1)"),
    FMQ(0xf, 0x2, Q.XEON_MP, "Intel Xeon MP (Gallatin)"),
    FMQ(0xf, 0x2, Q.XEON, "Intel Xeon (Prestonia)"),
    FMQ(0xf, 0x2, Q.CELERON, "Intel Celeron (Northwood)"),
    FMQ(0xf, 0x2, Q.PENTIUM_4_M, "Intel Mobile Pentium 4-M (Northwood)"),
    FM(0xf, 0x2, "Intel Pentium 4 (Northwood)"),
    FMSQ(0xf, 0x3, 0x3, Q.XEON, "Intel Xeon (Nocona C0)"),
    FMSQ(0xf, 0x3, 0x3, Q.CELERON_D, "Intel Celeron D (Prescott C0)"),
    FMSQ(0xf, 0x3, 0x3, Q.MOBILE_PENTIUM, "Intel Mobile Pentium 4 (Prescott C0)"),
    FMS(0xf, 0x3, 0x3, "Intel Pentium 4 (Prescott C0)"),
    FMSQ(0xf, 0x3, 0x4, Q.XEON, "Intel Xeon (Nocona D0)"),
    FMSQ(0xf, 0x3, 0x4, Q.CELERON_D, "Intel Celeron D (Prescott D0)"),
    FMSQ(0xf, 0x3, 0x4, Q.MOBILE_PENTIUM, "Intel Mobile Pentium 4 (Prescott D0)"),
    FMS(0xf, 0x3, 0x4, "Intel Pentium 4 (Prescott D0)"),
    FMQ(0xf, 0x3, Q.XEON, "Intel Xeon (Nocona)"),
    FMQ(0xf, 0x3, Q.CELERON_D, "Intel Celeron D (Prescott)"),
    FM(0xf, 0x3, "Intel Pentium 4 (Prescott)"),
    FMSQ(0xf, 0x4, 0x1, Q.XEON_MP, "Intel Xeon MP (Cranford/Potomac B0)"),
    FMSQ(0xf, 0x4, 0x1, Q.XEON, "Intel Xeon (Nocona E0)"),
    FMSQ(0xf, 0x4, 0x1, Q.CELERON_D, "Intel Celeron D (Prescott E0)"),
    FMSQ(0xf, 0x4, 0x1, Q.MOBILE_PENTIUM, "Intel Mobile Pentium 4 (Prescott E0)"),
    FMS(0xf, 0x4, 0x1, "Intel Pentium 4 (Prescott E0)"),
    FMSQ(0xf, 0x4, 0x3, Q.XEON, "Intel Xeon (Irwindale N0)"),
    FMSQ(0xf, 0x4, 0x3, Q.PENTIUM_EXTREME, "Intel Pentium 4 Extreme Edition (Prescott 2M N0)"),
    FMS(0xf, 0x4, 0x3, "Intel Pentium 4 (Prescott 2M N0)"),
    FMSQ(0xf, 0x4, 0x4, Q.XEON, "Intel Xeon (Paxville A0)"),
    FMSQ(0xf, 0x4, 0x4, Q.PENTIUM_EXTREME, "Intel Pentium Extreme Edition (Smithfield A0)"),
    FMS(0xf, 0x4, 0x4, "Intel Pentium D (Smithfield A0)"),
    FMSQ(0xf, 0x4, 0x7, Q.PENTIUM_EXTREME, "Intel Pentium Extreme Edition (Smithfield B0)"),
    FMS(0xf, 0x4, 0x7, "Intel Pentium D (Smithfield B0)"),
    FMSQ(0xf, 0x4, 0x8, Q.XEON_MP, "Intel Xeon MP 7000 (Paxville MP A0)"),
    FMS(0xf, 0x4, 0x8, "Intel Xeon 7000 (Paxville MP A0)"),
    FMSQ(0xf, 0x4, 0x9, Q.CELERON_D, "Intel Celeron D (Prescott G1)"),
    FMS(0xf, 0x4, 0x9, "Intel Pentium 4 (Prescott G1)"),
    FMSQ(0xf, 0x4, 0xa, Q.XEON, "Intel Xeon (Irwindale R0)"),
    FMSQ(0xf, 0x4, 0xa, Q.PENTIUM_EXTREME, "Intel Pentium 4 Extreme Edition (Prescott 2M R0)"),
    FMS(0xf, 0x4, 0xa, "Intel Pentium 4 (Prescott 2M R0)"),
    FMQ(0xf, 0x4, Q.XEON_MP, "Intel Xeon MP (Cranford/Potomac/Paxville MP)"),
    FMQ(0xf, 0x4, Q.XEON, "Intel Xeon (Nocona/Irwindale/Paxville)"),
    FMQ(0xf, 0x4, Q.PENTIUM_D, "Intel Pentium D (Smithfield)"),
    FMQ(0xf, 0x4, Q.CELERON_D, "Intel Celeron D (Prescott)"),
    FM(0xf, 0x4, "Intel Pentium 4 (Prescott)"),
    FMSQ(0xf, 0x6, 0x2, Q.XEON, "Intel Xeon 5000 (Dempsey B1)"),
    FMSQ(0xf, 0x6, 0x2, Q.PENTIUM_EXTREME, "Intel Pentium Extreme Edition (Presler B1)"),
    FMSQ(0xf, 0x6, 0x2, Q.PENTIUM_D, "Intel Pentium D (Presler B1)"),
    FMSQ(0xf, 0x6, 0x2, Q.CELERON_D, "Intel Celeron D (Cedar Mill B1)"),
    FMS(0xf, 0x6, 0x2, "Intel Pentium 4 (Cedar Mill B1)"),
    FMSQ(0xf, 0x6, 0x4, Q.XEON, "Intel Xeon 5000 (Dempsey C1)"),
    FMSQ(0xf, 0x6, 0x4, Q.PENTIUM_D, "Intel Pentium D (Presler C1)"),
    FMSQ(0xf, 0x6, 0x4, Q.CELERON_D, "Intel Celeron D (Cedar Mill C1)"),
    FMS(0xf, 0x6, 0x4, "Intel Pentium 4 (Cedar Mill C1)"),
    FMSQ(0xf, 0x6, 0x5, Q.CELERON_D, "Intel Celeron D (Cedar Mill D0)"),
    FMSQ(0xf, 0x6, 0x5, Q.PENTIUM_D, "Intel Pentium D (Presler D0)"),
    FMS(0xf, 0x6, 0x5, "Intel Pentium 4 (Cedar Mill D0)"),
    FMSQ(0xf, 0x6, 0x8, Q.XEON_MP, "Intel Xeon 7100 (Tulsa B0)"),
    FMS(0xf, 0x6, 0x8, "Intel Xeon 7100 (Tulsa B0)"),
    FMQ(0xf, 0x6, Q.XEON_MP, "Intel Xeon 7100 (Tulsa)"),
    FMQ(0xf, 0x6, Q.XEON, "Intel Xeon 5000 (Dempsey)"),
    FMQ(0xf, 0x6, Q.PENTIUM_D, "Intel Pentium D (Presler)"),
    FMQ(0xf, 0x6, Q.CELERON_D, "Intel Celeron D (Cedar Mill)"),
    FM(0xf, 0x6, "Intel Pentium 4 (Cedar Mill)"),
    F(0xf, "Intel Pentium 4 / Xeon (unknown model)"),

    # Itanium 2 in IA-32 mode
    FM(0x1f, 0x0, "Intel Itanium 2 (McKinley)"),
    FM(0x1f, 0x1, "Intel Itanium 2 (Madison/Deerfield)"),
    FM(0x1f, 0x2, "Intel Itanium 2 (Madison 9M)"),
    F(0x1f, "Intel Itanium 2 (unknown model)"),
    F(0x20, "Intel Itanium 2 dual-core (Montecito/Montvale)"),
]

table = VendorTable(rules, "Intel (unknown model)")
