# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Reconstruction of AMD processor numbers from the BrandId fields.

Older AMD parts do not carry a usable brand string in leaves 0x80000002-4
(boards with an old BIOS report "AMD Processor model unknown"). The
processor number can nevertheless be rebuilt from the BrandId fields of leaf
1 and leaf 0x80000001 with the tables of the AMD revision guides:

  * Family 0Fh before NPT (25759, "Constructing the Processor Name String"),
    indexed by BrandTableIndex with one affine formula over NN per entry.
  * NPT Family 0Fh (33610), indexed by PkgType, CmpCap, BTI and PwrLmt.
  * Families 10h, 11h, 12h and 14h (41788 and later), where two independent
    tables per package type give the text before (String1) and after
    (String2) a two-digit PartialModel.

Every table is an exact-match dictionary. A missing key is not an error; the
part that could not be resolved is simply left empty."""

import logging
from collections import namedtuple
from enum import Enum

from cpuid_inspector.inspectorlib.bitfields import getbits, joinbits

class AmdBrandVariant(Enum):
    LEGACY_0F = "Family 0Fh"
    NPT_0F = "NPT Family 0Fh"
    FAMILY_10H = "Family 10h"
    FAMILY_11H = "Family 11h"
    FAMILY_12H = "Family 12h"
    FAMILY_14H = "Family 14h"

class AmdBrand(namedtuple("AmdBrand", ["brand_pre", "processor_number", "brand_post"])):
    __slots__ = ()

    def __str__(self):
        return " ".join(part for part in self if part)

    def __bool__(self):
        return any(self)

EMPTY_BRAND = AmdBrand("", "", "")

def select_variant(signature):
    if signature is None:
        return None
    if signature.family == 0xf:
        return AmdBrandVariant.NPT_0F if signature.model >= 0x40 else AmdBrandVariant.LEGACY_0F
    return {
        0x10: AmdBrandVariant.FAMILY_10H,
        0x11: AmdBrandVariant.FAMILY_11H,
        0x12: AmdBrandVariant.FAMILY_12H,
        0x14: AmdBrandVariant.FAMILY_14H,
    }.get(signature.family)

#
# Family 0Fh, before NPT
#

legacy_formulas = {
    "XX": lambda nn: 22 + nn,
    "YY": lambda nn: 38 + 2 * nn,
    "ZZ": lambda nn: 24 + nn,
    "TT": lambda nn: 24 + nn,
    "RR": lambda nn: 45 + 5 * nn,
    "EE": lambda nn: 9 + nn,
}

# BrandTableIndex -> (brand_pre, number pattern, formula, brand_post)
legacy_table = {
    0x04: ("AMD Athlon(tm) 64", "Processor %02d00+", "XX", ""),
    0x05: ("AMD Athlon(tm) 64 X2 Dual Core", "Processor %02d00+", "XX", ""),
    0x06: ("AMD Athlon(tm) 64", "FX-%02d", "ZZ", "Dual Core"),
    0x08: ("Mobile AMD Athlon(tm) 64", "Processor %02d00+", "XX", ""),
    0x09: ("Mobile AMD Athlon(tm) 64", "Processor %02d00+", "XX", ""),
    0x0a: ("AMD Turion(tm) Mobile Technology", "ML-%02d", "XX", ""),
    0x0b: ("AMD Turion(tm) Mobile Technology", "MT-%02d", "XX", ""),
    0x0c: ("AMD Opteron(tm)", "Processor 1%02d", "YY", ""),
    0x0d: ("AMD Opteron(tm)", "Processor 1%02d", "YY", ""),
    0x0e: ("AMD Opteron(tm)", "Processor 1%02d", "YY", "HE"),
    0x0f: ("AMD Opteron(tm)", "Processor 1%02d", "YY", "EE"),
    0x10: ("AMD Opteron(tm)", "Processor 2%02d", "YY", ""),
    0x11: ("AMD Opteron(tm)", "Processor 2%02d", "YY", ""),
    0x12: ("AMD Opteron(tm)", "Processor 2%02d", "YY", "HE"),
    0x13: ("AMD Opteron(tm)", "Processor 2%02d", "YY", "EE"),
    0x14: ("AMD Opteron(tm)", "Processor 8%02d", "YY", ""),
    0x15: ("AMD Opteron(tm)", "Processor 8%02d", "YY", ""),
    0x16: ("AMD Opteron(tm)", "Processor 8%02d", "YY", "HE"),
    0x17: ("AMD Opteron(tm)", "Processor 8%02d", "YY", "EE"),
    0x18: ("AMD Athlon(tm) 64", "Processor %02d00+", "EE", ""),
    0x1d: ("Mobile AMD Athlon(tm) XP-M", "Processor %02d00+", "XX", ""),
    0x1e: ("Mobile AMD Athlon(tm) XP-M", "Processor %02d00+", "XX", ""),
    0x20: ("AMD Athlon(tm) XP", "Processor %02d00+", "XX", ""),
    0x21: ("Mobile AMD Sempron(tm)", "Processor %02d00+", "TT", ""),
    0x22: ("AMD Sempron(tm)", "Processor %02d00+", "TT", ""),
    0x23: ("Mobile AMD Sempron(tm)", "Processor %02d00+", "TT", ""),
    0x24: ("AMD Athlon(tm) 64", "FX-%02d", "ZZ", ""),
    0x26: ("AMD Sempron(tm)", "Processor %02d00+", "TT", ""),
    0x29: ("Dual Core AMD Opteron(tm)", "Processor 1%02d", "RR", "SE"),
    0x2a: ("Dual Core AMD Opteron(tm)", "Processor 2%02d", "RR", "SE"),
    0x2b: ("Dual Core AMD Opteron(tm)", "Processor 8%02d", "RR", "SE"),
    0x2c: ("Dual Core AMD Opteron(tm)", "Processor 1%02d", "RR", ""),
    0x2d: ("Dual Core AMD Opteron(tm)", "Processor 1%02d", "RR", "HE"),
    0x2e: ("Dual Core AMD Opteron(tm)", "Processor 1%02d", "RR", "EE"),
    0x2f: ("Dual Core AMD Opteron(tm)", "Processor 2%02d", "RR", ""),
    0x30: ("Dual Core AMD Opteron(tm)", "Processor 2%02d", "RR", "HE"),
    0x31: ("Dual Core AMD Opteron(tm)", "Processor 2%02d", "RR", "EE"),
    0x32: ("Dual Core AMD Opteron(tm)", "Processor 8%02d", "RR", ""),
    0x33: ("Dual Core AMD Opteron(tm)", "Processor 8%02d", "RR", "HE"),
    0x34: ("Dual Core AMD Opteron(tm)", "Processor 8%02d", "RR", "EE"),
    0x38: ("Mobile AMD Athlon(tm) 64", "Processor %02d00+", "XX", ""),
    0x39: ("AMD Opteron(tm)", "Processor 1%02d", "YY", "SE"),
    0x3a: ("AMD Opteron(tm)", "Processor 2%02d", "YY", "SE"),
    0x3b: ("AMD Opteron(tm)", "Processor 8%02d", "YY", "SE"),
}

def legacy_brand_fields(val_1_ebx, val_80000001_ebx):
    """Return (bti, nn) from the 8-bit or 12-bit BrandId, or None if neither is set.

    The 8-bit index is scaled by four so that both index the same table."""
    brand_id_8 = getbits(val_1_ebx, 7, 0)
    if brand_id_8:
        return getbits(brand_id_8, 7, 5) << 2, getbits(brand_id_8, 4, 0)
    brand_id_12 = getbits(val_80000001_ebx, 11, 0)
    if brand_id_12:
        return getbits(brand_id_12, 11, 6), getbits(brand_id_12, 5, 0)
    return None

def decode_legacy(bti, nn):
    entry = legacy_table.get(bti)
    if entry is None:
        return EMPTY_BRAND
    brand_pre, pattern, formula, brand_post = entry
    return AmdBrand(brand_pre, pattern % legacy_formulas[formula](nn), brand_post)

#
# NPT Family 0Fh
#

npt_formulas = {
    "RR": lambda nn, cmpcap: nn - 1,
    "PP": lambda nn, cmpcap: 26 + nn,
    "TT": lambda nn, cmpcap: 15 + cmpcap * 10 + nn,
    "ZZ": lambda nn, cmpcap: 57 + nn,
    "YY": lambda nn, cmpcap: 29 + nn,
}

# (pkgtype, cmpcap, bti, pwrlmt) -> (brand_pre, number pattern, formula, brand_post)
npt_table = {
    # Socket F (1207)
    (0x1, 0, 0x1, 0x2): ("AMD Opteron(tm)", "Processor 12%02d", "RR", "EE"),
    (0x1, 1, 0x1, 0x2): ("Dual-Core AMD Opteron(tm)", "Processor 12%02d", "RR", "EE"),
    (0x1, 1, 0x1, 0x6): ("Dual-Core AMD Opteron(tm)", "Processor 12%02d", "RR", "HE"),
    (0x1, 1, 0x1, 0xa): ("Dual-Core AMD Opteron(tm)", "Processor 12%02d", "RR", ""),
    (0x1, 1, 0x1, 0xc): ("Dual-Core AMD Opteron(tm)", "Processor 12%02d", "RR", "SE"),
    (0x1, 1, 0x4, 0x2): ("Dual-Core AMD Opteron(tm)", "Processor 22%02d", "RR", "EE"),
    (0x1, 1, 0x4, 0x6): ("Dual-Core AMD Opteron(tm)", "Processor 22%02d", "RR", "HE"),
    (0x1, 1, 0x4, 0xa): ("Dual-Core AMD Opteron(tm)", "Processor 22%02d", "RR", ""),
    (0x1, 1, 0x4, 0xc): ("Dual-Core AMD Opteron(tm)", "Processor 22%02d", "RR", "SE"),
    (0x1, 1, 0x7, 0x2): ("Dual-Core AMD Opteron(tm)", "Processor 82%02d", "RR", "EE"),
    (0x1, 1, 0x7, 0x6): ("Dual-Core AMD Opteron(tm)", "Processor 82%02d", "RR", "HE"),
    (0x1, 1, 0x7, 0xa): ("Dual-Core AMD Opteron(tm)", "Processor 82%02d", "RR", ""),
    (0x1, 1, 0x7, 0xc): ("Dual-Core AMD Opteron(tm)", "Processor 82%02d", "RR", "SE"),
    (0x1, 1, 0xc, 0x1): ("AMD Athlon(tm) 64", "FX-%02d", "ZZ", "Dual Core Processor"),
    # AM2 and ASB1
    (0x3, 0, 0x1, 0x5): ("AMD Athlon(tm) 64", "Processor %02d00+", "TT", ""),
    (0x3, 0, 0x1, 0x6): ("AMD Athlon(tm) 64", "Processor %02d00+", "TT", ""),
    (0x3, 0, 0x2, 0x6): ("AMD Athlon(tm) 64", "Processor LE-1%02d0", "RR", ""),
    (0x3, 0, 0x3, 0x6): ("AMD Athlon(tm)", "Processor %02d00+", "TT", ""),
    (0x3, 0, 0x4, 0x1): ("AMD Sempron(tm)", "Processor LE-1%02d0", "RR", ""),
    (0x3, 0, 0x6, 0x4): ("AMD Sempron(tm)", "Processor %02d00+", "TT", ""),
    (0x3, 0, 0x6, 0x8): ("AMD Sempron(tm)", "Processor %02d00+", "TT", ""),
    (0x3, 1, 0x1, 0x5): ("AMD Athlon(tm) 64 X2 Dual Core", "Processor %02d00+", "TT", ""),
    (0x3, 1, 0x1, 0x6): ("AMD Athlon(tm) 64 X2 Dual Core", "Processor %02d00+", "TT", ""),
    (0x3, 1, 0x1, 0x8): ("AMD Athlon(tm) 64 X2 Dual Core", "Processor %02d00+", "TT", ""),
    (0x3, 1, 0x2, 0x6): ("AMD Athlon(tm) X2 Dual Core", "Processor BE-2%02d0", "RR", ""),
    (0x3, 1, 0x3, 0x5): ("AMD Opteron(tm)", "Processor 12%02d", "RR", "HE"),
    (0x3, 1, 0x3, 0x6): ("AMD Opteron(tm)", "Processor 12%02d", "RR", ""),
    (0x3, 1, 0x4, 0xf): ("AMD Athlon(tm) 64", "FX-%02d", "ZZ", "Dual Core Processor"),
    (0x3, 1, 0x6, 0x4): ("AMD Sempron(tm) Dual Core", "Processor %02d00", "RR", ""),
    (0x3, 1, 0x7, 0x2): ("AMD Turion(tm) 64 X2 Mobile Technology", "TL-%02d", "YY", ""),
    (0x3, 1, 0x8, 0x2): ("AMD Athlon(tm) 64 X2 Dual-Core", "TK-%02d", "PP", ""),
    # S1g1
    (0x0, 0, 0x1, 0x2): ("AMD Athlon(tm) 64", "Processor %02d00+", "TT", ""),
    (0x0, 0, 0x2, 0x2): ("AMD Turion(tm) 64 Mobile Technology", "MK-%02d", "YY", ""),
    (0x0, 0, 0x3, 0x1): ("Mobile AMD Sempron(tm)", "Processor %02d00+", "TT", ""),
    (0x0, 0, 0x3, 0x2): ("Mobile AMD Sempron(tm)", "Processor %02d00+", "TT", ""),
    (0x0, 0, 0x4, 0x1): ("AMD Sempron(tm)", "Processor %02d00+", "TT", ""),
    (0x0, 0, 0x6, 0x2): ("AMD Sempron(tm)", "Processor %02d00+", "TT", ""),
    (0x0, 1, 0x1, 0x2): ("AMD Turion(tm) 64 X2 Mobile Technology", "TL-%02d", "YY", ""),
    (0x0, 1, 0x1, 0xc): ("AMD Turion(tm) 64 X2 Mobile Technology", "TL-%02d", "YY", ""),
    (0x0, 1, 0x2, 0xc): ("AMD Turion(tm) 64 X2 Mobile Technology", "TL-%02d", "YY", ""),
    (0x0, 1, 0x3, 0xc): ("AMD Athlon(tm) 64 X2 Dual-Core", "TK-%02d", "PP", ""),
    (0x0, 1, 0x5, 0xc): ("AMD Turion(tm) X2 Dual-Core Mobile", "RM-%02d", "YY", ""),
    (0x0, 1, 0x6, 0xc): ("AMD Athlon(tm) X2 Dual-Core", "QL-%02d", "YY", ""),
}

NptFields = namedtuple("NptFields", ["pkgtype", "cmpcap", "bti", "pwrlmt", "nn"])

def npt_brand_fields(val_80000001_ebx, val_80000008_ecx):
    brand_id = getbits(val_80000001_ebx, 15, 0)
    return NptFields(
        pkgtype=getbits(val_80000001_ebx, 31, 28),
        cmpcap=1 if getbits(val_80000008_ecx, 7, 0) > 0 else 0,
        bti=getbits(brand_id, 13, 9),
        pwrlmt=joinbits(brand_id, (8, 6), 14),
        nn=joinbits(brand_id, 15, (5, 0)),
    )

def decode_npt(pkgtype, cmpcap, bti, pwrlmt, nn):
    entry = npt_table.get((pkgtype, cmpcap, bti, pwrlmt))
    if entry is None:
        return EMPTY_BRAND
    brand_pre, pattern, formula, brand_post = entry
    return AmdBrand(brand_pre, pattern % npt_formulas[formula](nn, cmpcap), brand_post)

#
# Families 10h, 11h, 12h and 14h
#
# Both tables of a package type are keyed on (pg, nc, string index). String1
# ends with the leading characters of the processor number, String2 starts
# with its trailing characters.
#

def dense(pairs):
    """Build a dense lookup table. A key listed twice resolves to its last entry."""
    return dict(pairs)

string1_tables = {
    (0x10, 0x0): dense([
        # Socket F (1207)
        ((0, 3, 0x0), "Quad-Core AMD Opteron(tm) Processor 83"),
        ((0, 3, 0x1), "Quad-Core AMD Opteron(tm) Processor 23"),
        ((0, 5, 0x0), "Six-Core AMD Opteron(tm) Processor 84"),
        ((0, 5, 0x1), "Six-Core AMD Opteron(tm) Processor 24"),
        ((1, 3, 0x1), "Embedded AMD Opteron(tm) Processor "),
        ((1, 5, 0x1), "Embedded AMD Opteron(tm) Processor "),
    ]),
    (0x10, 0x1): dense([
        # AM2r2 and AM3
        ((0, 0, 0x1), "AMD Athlon(tm) "),
        ((0, 0, 0x2), "AMD Sempron(tm) 1"),
        ((0, 0, 0x3), "AMD Athlon(tm) II 1"),
        ((0, 0, 0x4), "AMD Athlon(tm) "),
        ((0, 1, 0x3), "AMD Athlon(tm) II X2 2"),
        ((0, 1, 0x4), "AMD Athlon(tm) II X2 B2"),
        ((0, 1, 0x5), "AMD Athlon(tm) II X2 "),
        ((0, 1, 0x7), "AMD Phenom(tm) II X2 5"),
        ((0, 1, 0xa), "AMD Phenom(tm) II X2 "),
        ((0, 1, 0xb), "AMD Phenom(tm) II X2 B5"),
        ((0, 1, 0xc), "AMD Sempron(tm) X2 1"),
        ((0, 2, 0x0), "AMD Phenom(tm) "),
        ((0, 2, 0x3), "AMD Phenom(tm) II X3 B7"),
        ((0, 2, 0x4), "AMD Phenom(tm) II X3 "),
        ((0, 2, 0x7), "AMD Athlon(tm) II X3 4"),
        ((0, 2, 0x8), "AMD Phenom(tm) II X3 7"),
        ((0, 2, 0xa), "AMD Athlon(tm) II X3 "),
        ((0, 3, 0x0), "Quad-Core AMD Opteron(tm) Processor 13"),
        ((0, 3, 0x2), "AMD Phenom(tm) II X4 9"),
        ((0, 3, 0x3), "AMD Phenom(tm) II X4 9"),
        ((0, 3, 0x4), "AMD Phenom(tm) II X4 8"),
        ((0, 3, 0x7), "AMD Phenom(tm) II X4 B9"),
        ((0, 3, 0x8), "AMD Phenom(tm) II X4 "),
        ((0, 3, 0xa), "AMD Athlon(tm) II X4 6"),
        ((0, 3, 0xf), "AMD Athlon(tm) II X4 "),
        ((0, 5, 0x0), "AMD Phenom(tm) II X6 1"),
        ((1, 1, 0x1), "AMD Athlon(tm) II XLT V"),
        ((1, 1, 0x2), "AMD Athlon(tm) II XL V"),
        ((1, 3, 0x1), "AMD Phenom(tm) II XLT Q"),
        ((1, 3, 0x2), "AMD Phenom(tm) II X4 9"),
        ((1, 3, 0x3), "AMD Phenom(tm) II X4 8"),
        ((1, 3, 0x4), "AMD Phenom(tm) II X4 6"),
        # listed twice in the vendor table, the later entry is the one in use
        ((0, 3, 0x2), "AMD Phenom(tm) "),
    ]),
    (0x10, 0x2): dense([
        # S1g3 and S1g4
        ((0, 0, 0x0), "AMD Sempron(tm) M1"),
        ((0, 0, 0x1), "AMD Athlon(tm) II M3"),
        ((0, 1, 0x0), "AMD Turion(tm) II Ultra Dual-Core Mobile M6"),
        ((0, 1, 0x1), "AMD Turion(tm) II Dual-Core Mobile M5"),
        ((0, 1, 0x2), "AMD Athlon(tm) II Dual-Core M3"),
        ((0, 1, 0x3), "AMD Turion(tm) II P"),
        ((0, 1, 0x4), "AMD Athlon(tm) II P"),
        ((0, 1, 0x5), "AMD Phenom(tm) II X"),
        ((0, 1, 0x6), "AMD Phenom(tm) II N"),
        ((0, 1, 0x7), "AMD Turion(tm) II N"),
        ((0, 1, 0x8), "AMD Athlon(tm) II N"),
        ((0, 1, 0x9), "AMD Phenom(tm) II P"),
        ((0, 2, 0x2), "AMD Phenom(tm) II N"),
        ((0, 2, 0x3), "AMD Phenom(tm) II P"),
        ((0, 2, 0x4), "AMD Phenom(tm) II X"),
        ((0, 3, 0x1), "AMD Phenom(tm) II P"),
        ((0, 3, 0x2), "AMD Phenom(tm) II X"),
        ((0, 3, 0x3), "AMD Phenom(tm) II N"),
    ]),
    (0x10, 0x3): dense([
        # G34
        ((0, 7, 0x0), "AMD Opteron(tm) Processor 61"),
        ((0, 11, 0x0), "AMD Opteron(tm) Processor 61"),
        ((1, 7, 0x1), "Embedded AMD Opteron(tm) Processor "),
    ]),
    (0x10, 0x4): dense([
        # ASB2
        ((0, 0, 0x1), "AMD Athlon(tm) II Neo K"),
        ((0, 0, 0x2), "AMD V"),
        ((0, 0, 0x3), "AMD Athlon(tm) II Neo R"),
        ((0, 1, 0x1), "AMD Turion(tm) II Neo K"),
        ((0, 1, 0x2), "AMD Athlon(tm) II Neo K"),
        ((0, 1, 0x3), "AMD V"),
        ((0, 1, 0x4), "AMD Turion(tm) II Neo N"),
        ((0, 1, 0x5), "AMD Athlon(tm) II Neo N"),
    ]),
    (0x10, 0x5): dense([
        # C32
        ((0, 3, 0x0), "AMD Opteron(tm) Processor 41"),
        ((0, 5, 0x0), "AMD Opteron(tm) Processor 41"),
        ((1, 3, 0x1), "Embedded AMD Opteron(tm) Processor "),
        ((1, 5, 0x1), "Embedded AMD Opteron(tm) Processor "),
        ((1, 5, 0x2), "Embedded AMD Opteron(tm) Processor "),
    ]),
    (0x11, 0x2): dense([
        # S1g2
        ((0, 0, 0x1), "AMD Sempron(tm) SI-"),
        ((0, 0, 0x2), "AMD Athlon(tm) QI-"),
        ((0, 1, 0x1), "AMD Turion(tm) X2 Ultra Dual-Core Mobile ZM-"),
        ((0, 1, 0x2), "AMD Turion(tm) X2 Dual-Core Mobile RM-"),
        ((0, 1, 0x3), "AMD Athlon(tm) X2 Dual-Core QL-"),
        ((0, 1, 0x4), "AMD Sempron(tm) X2 Dual-Core NI-"),
    ]),
    (0x12, 0x1): dense([
        # FS1
        ((0, 1, 0x1), "AMD A4-33"),
        ((0, 1, 0x2), "AMD E2-30"),
        ((0, 3, 0x1), "AMD A8-35"),
        ((0, 3, 0x3), "AMD A6-34"),
    ]),
    (0x12, 0x2): dense([
        # FM1
        ((0, 1, 0x1), "AMD A4-33"),
        ((0, 1, 0x2), "AMD E2-32"),
        ((0, 1, 0x4), "AMD Athlon(tm) II X2 2"),
        ((0, 1, 0x5), "AMD A4-34"),
        ((0, 1, 0xc), "AMD Sempron(tm) X2 1"),
        ((0, 2, 0x5), "AMD A6-35"),
        ((0, 3, 0x5), "AMD A8-38"),
        ((0, 3, 0x6), "AMD A6-36"),
        ((0, 3, 0xd), "AMD Athlon(tm) II X4 6"),
    ]),
    (0x14, 0x0): dense([
        # FT1
        ((0, 0, 0x1), "AMD C-"),
        ((0, 0, 0x2), "AMD E-"),
        ((0, 0, 0x4), "AMD G-T"),
        ((0, 1, 0x1), "AMD C-"),
        ((0, 1, 0x2), "AMD E-"),
        ((0, 1, 0x3), "AMD Z-"),
        ((0, 1, 0x4), "AMD G-T"),
        ((0, 1, 0x5), "AMD E1-1"),
        ((0, 1, 0x6), "AMD E2-1"),
        ((0, 1, 0x7), "AMD E2-2"),
    ]),
}

string2_tables = {
    (0x10, 0x0): dense([
        ((0, 3, 0xa), " SE"),
        ((0, 3, 0xb), " HE"),
        ((0, 3, 0xc), " EE"),
        ((0, 5, 0x0), " SE"),
        ((0, 5, 0x1), " HE"),
        ((0, 5, 0x2), " EE"),
        ((1, 3, 0x1), "GF HE"),
        ((1, 3, 0x2), "HF HE"),
        ((1, 3, 0x3), "VS"),
        ((1, 3, 0x4), "QS HE"),
        ((1, 3, 0x5), "NP HE"),
        ((1, 3, 0x6), "KH HE"),
        ((1, 3, 0x7), "KS EE"),
        ((1, 5, 0x1), "QS"),
        ((1, 5, 0x2), "KS HE"),
    ]),
    (0x10, 0x1): dense([
        ((0, 0, 0xa), " Processor"),
        ((0, 0, 0xb), "u Processor"),
        ((0, 1, 0x3), "50 Dual-Core Processor"),
        ((0, 1, 0x6), " Processor"),
        ((0, 1, 0x7), "e Processor"),
        ((0, 1, 0x9), "0 Processor"),
        ((0, 1, 0xa), "0e Processor"),
        ((0, 1, 0xb), "u Processor"),
        ((0, 2, 0x0), "00 Triple-Core Processor"),
        ((0, 2, 0x1), "00e Triple-Core Processor"),
        ((0, 2, 0x2), "00B Triple-Core Processor"),
        ((0, 2, 0x3), "50 Triple-Core Processor"),
        ((0, 2, 0x4), "50e Triple-Core Processor"),
        ((0, 2, 0x5), "50B Triple-Core Processor"),
        ((0, 2, 0x6), " Processor"),
        ((0, 2, 0x7), "e Processor"),
        ((0, 2, 0x9), "0e Processor"),
        ((0, 2, 0xa), "0 Processor"),
        ((0, 3, 0x0), "00 Quad-Core Processor"),
        ((0, 3, 0x1), "00e Quad-Core Processor"),
        ((0, 3, 0x2), "00B Quad-Core Processor"),
        ((0, 3, 0x3), "50 Quad-Core Processor"),
        ((0, 3, 0x4), "50e Quad-Core Processor"),
        ((0, 3, 0x5), "50B Quad-Core Processor"),
        ((0, 3, 0x6), " Processor"),
        ((0, 3, 0x7), "e Processor"),
        ((0, 3, 0x9), "0e Processor"),
        ((0, 3, 0xa), " SE"),
        ((0, 5, 0x0), "T Processor"),
        ((1, 1, 0x1), "L Processor"),
        ((1, 1, 0x2), "C Processor"),
        ((1, 3, 0x1), "L Processor"),
        ((1, 3, 0x4), "T Processor"),
    ]),
    (0x10, 0x2): dense([
        ((0, 0, 0x1), "0 Processor"),
        ((0, 1, 0x2), "0 Dual-Core Processor"),
        ((0, 2, 0x2), "0 Triple-Core Processor"),
        ((0, 3, 0x1), "0 Quad-Core Processor"),
    ]),
    (0x10, 0x3): dense([
        ((0, 7, 0x1), " HE"),
        ((0, 7, 0x2), " SE"),
        ((0, 11, 0x1), " HE"),
        ((0, 11, 0x2), " SE"),
        ((1, 7, 0x1), "QS"),
        ((1, 7, 0x2), "KS"),
    ]),
    (0x10, 0x4): dense([
        ((0, 0, 0x1), "5 Processor"),
        ((0, 0, 0x2), "L Processor"),
        ((0, 1, 0x1), "5 Dual-Core Processor"),
        ((0, 1, 0x2), "L Dual-Core Processor"),
        ((0, 1, 0x4), "H Dual-Core Processor"),
    ]),
    (0x10, 0x5): dense([
        ((0, 3, 0x0), " HE"),
        ((0, 3, 0x1), " EE"),
        ((0, 5, 0x0), " HE"),
        ((0, 5, 0x1), " EE"),
        ((1, 3, 0x1), "QS HE"),
        ((1, 3, 0x2), "LE HE"),
        ((1, 3, 0x3), "CL EE"),
        ((1, 5, 0x1), "KX HE"),
        ((1, 5, 0x2), "GL EE"),
    ]),
    (0x11, 0x2): dense([
        ((0, 0, 0x0), ""),
        ((0, 1, 0x0), ""),
    ]),
    (0x12, 0x1): dense([
        ((0, 1, 0x1), "M APU with Radeon(tm) HD Graphics"),
        ((0, 1, 0x2), "MX APU with Radeon(tm) HD Graphics"),
        ((0, 3, 0x1), "M APU with Radeon(tm) HD Graphics"),
        ((0, 3, 0x2), "MX APU with Radeon(tm) HD Graphics"),
    ]),
    (0x12, 0x2): dense([
        ((0, 1, 0x1), " APU with Radeon(tm) HD Graphics"),
        ((0, 1, 0x2), " Dual-Core Processor"),
        ((0, 2, 0x1), " APU with Radeon(tm) HD Graphics"),
        ((0, 3, 0x1), " APU with Radeon(tm) HD Graphics"),
        ((0, 3, 0x2), " Quad-Core Processor"),
    ]),
    (0x14, 0x0): dense([
        ((0, 0, 0x1), " Processor"),
        ((0, 0, 0x2), " APU with Radeon(tm) HD Graphics"),
        ((0, 1, 0x1), " Processor"),
        ((0, 1, 0x2), "0 APU with Radeon(tm) HD Graphics"),
        ((0, 1, 0x3), " APU with Radeon(tm) HD Graphics"),
        ((0, 1, 0x4), "0 Processor"),
    ]),
}

StringFields = namedtuple("StringFields", ["pkgtype", "pg", "nc", "str1", "partial_model", "str2"])

def string_brand_fields(val_80000001_ebx, val_80000008_ecx):
    return StringFields(
        pkgtype=getbits(val_80000001_ebx, 31, 28),
        pg=getbits(val_80000001_ebx, 15),
        nc=getbits(val_80000008_ecx, 7, 0),
        str1=getbits(val_80000001_ebx, 14, 11),
        partial_model=getbits(val_80000001_ebx, 10, 4),
        str2=getbits(val_80000001_ebx, 3, 0),
    )

def decode_strings(family, fields):
    string1 = string1_tables.get((family, fields.pkgtype), {}).get((fields.pg, fields.nc, fields.str1))
    if string1 is None:
        return EMPTY_BRAND
    brand_pre, _, number_head = string1.rpartition(" ")
    number = f"{number_head}{fields.partial_model:02d}"

    brand_post = ""
    string2 = string2_tables.get((family, fields.pkgtype), {}).get((fields.pg, fields.nc, fields.str2))
    if string2 is not None:
        number_tail, _, brand_post = string2.partition(" ")
        number += number_tail
    return AmdBrand(brand_pre.strip(), number, brand_post.strip())

def reconstruct(stash):
    """Rebuild the brand of an AMD part from the BrandId fields in the stash.

    Returns None for families without BrandId tables, an empty AmdBrand when
    the fields index no table entry."""
    variant = select_variant(stash.signature)
    if variant is None:
        return None
    ext_ebx = stash.val_80000001_ebx
    nc_ecx = stash.val_80000008_ecx or 0

    if variant is AmdBrandVariant.LEGACY_0F:
        fields = legacy_brand_fields(stash.val_1_ebx, ext_ebx)
        result = decode_legacy(*fields) if fields else EMPTY_BRAND
    elif variant is AmdBrandVariant.NPT_0F:
        result = decode_npt(*npt_brand_fields(ext_ebx, nc_ecx))
    else:
        result = decode_strings(stash.signature.family, string_brand_fields(ext_ebx, nc_ecx))

    logging.debug(f"CPU {stash.cpu_id}: {variant.value} brand reconstruction gives {tuple(result)}")
    return result
