# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Named tie-break predicates.

Decode tables refer to the members of Q by name. All of them are evaluated
once per CPU, after every leaf has been folded into the stash, and the result
is frozen into a PredicateSet that the tables only read."""

import logging
from collections import namedtuple
from enum import Enum

from cpuid_inspector.synth.stash import CacheFlag
from cpuid_inspector.synth.vendor import Vendor

class Q(Enum):
    # Intel brand index (leaf 1 EBX[7:0])
    BI_CELERON = "brand index: Celeron"
    BI_PENTIUM_III_XEON = "brand index: Pentium III Xeon"
    BI_MOBILE_PENTIUM_III = "brand index: Mobile Pentium III-M"
    BI_MOBILE_CELERON = "brand index: Mobile Celeron"
    BI_XEON = "brand index: Xeon"
    BI_XEON_MP = "brand index: Xeon MP"
    BI_MOBILE_PENTIUM_4 = "brand index: Mobile Pentium 4-M"
    BI_CELERON_M = "brand index: Celeron M"

    # Intel brand string
    CELERON = "Celeron"
    DESKTOP_CELERON = "desktop Celeron"
    MOBILE_CELERON = "mobile Celeron"
    CELERON_M = "Celeron M"
    CELERON_D = "Celeron D"
    PENTIUM = "Pentium"
    DESKTOP_PENTIUM = "desktop Pentium"
    MOBILE_PENTIUM = "mobile Pentium"
    PENTIUM_III_M = "Pentium III-M"
    PENTIUM_4_M = "Mobile Pentium 4"
    PENTIUM_D = "Pentium D"
    PENTIUM_EXTREME = "Pentium Extreme Edition"
    PENTIUM_DUAL_CORE = "Pentium Dual-Core"
    MOBILE_PENTIUM_DUAL_CORE = "mobile Pentium Dual-Core"
    XEON = "Xeon"
    XEON_MP = "Xeon MP"
    XEON_DP = "Xeon DP"
    XEON_E3 = "Xeon E3"
    XEON_E5 = "Xeon E5"
    XEON_E7 = "Xeon E7"
    XEON_D = "Xeon D"
    XEON_W = "Xeon W"
    XEON_E = "Xeon E"
    XEON_SCALABLE = "Xeon Scalable"
    XEON_MAX = "Xeon Max"
    CORE_DUO = "Core Duo"
    CORE_SOLO = "Core Solo"
    CORE2_DUO = "Core 2 Duo"
    DESKTOP_CORE2_DUO = "desktop Core 2 Duo"
    MOBILE_CORE2_DUO = "mobile Core 2 Duo"
    CORE2_QUAD = "Core 2 Quad"
    MOBILE_CORE2_QUAD = "mobile Core 2 Quad"
    CORE2_EXTREME = "Core 2 Extreme"
    MOBILE_CORE2_EXTREME = "mobile Core 2 Extreme"
    CORE2_SOLO = "Core 2 Solo"
    CORE_I3 = "Core i3"
    CORE_I5 = "Core i5"
    CORE_I7 = "Core i7"
    CORE_I9 = "Core i9"
    CORE_I = "Core i3/i5/i7/i9"
    DESKTOP_CORE_I = "desktop Core i3/i5/i7/i9"
    MOBILE_CORE_I = "mobile Core i3/i5/i7/i9"
    CORE_I7_EXTREME = "Core i7 Extreme"
    CORE_M = "Core m"
    CORE_3_5_7 = "Core 3/5/7"
    ATOM = "Atom"
    INTEL_N_SERIES = "Intel N-series"
    QUARK = "Quark"
    GENUINE_INTEL = "Genuine Intel"
    Y_LINE = "Y-line"
    H_LINE = "H-line"
    HX_LINE = "HX-line"
    P_LINE = "P-line"
    OVERDRIVE = "OverDrive"
    MOBILE = "Mobile"

    # cache classification
    L2_64K = "L2 64K"
    L2_128K = "L2 128K"
    L2_256K = "L2 256K"
    L2_512K = "L2 512K"
    L2_1M = "L2 1M"
    L2_2M = "L2 2M"
    L2_6M = "L2 6M"
    L3 = "L3"
    NO_L2 = "no L2"
    BIG_L2 = "L2 1M or larger"

    # core and thread counts
    DUAL_CORE = "dual-core"
    TRIPLE_CORE = "triple-core"
    QUAD_CORE = "quad-core"
    HYPERTHREADED = "hyper-threaded"

    # AMD and Hygon brand string
    ATHLON = "Athlon"
    MOBILE_ATHLON = "mobile Athlon"
    MOBILE_ATHLON_XP = "mobile Athlon XP"
    ATHLON_MP = "Athlon MP"
    MOBILE_ATHLON_64 = "mobile Athlon 64"
    ATHLON_64_X2 = "Athlon 64 X2"
    ATHLON_64_FX = "Athlon 64 FX"
    ATHLON_II = "Athlon II"
    ATHLON_NEO = "Athlon Neo"
    ATHLON_X2 = "Athlon X2"
    ATHLON_X4 = "Athlon X4"
    ATHLON_SILVER_GOLD = "Athlon Silver/Gold"
    DURON = "Duron"
    MOBILE_DURON = "mobile Duron"
    SEMPRON = "Sempron"
    MOBILE_SEMPRON = "mobile Sempron"
    OPTERON = "Opteron"
    OPTERON_DP = "Opteron 2xx/2xxx"
    OPTERON_MP = "Opteron 8xx/8xxx"
    OPTERON_4000 = "Opteron 4xxx"
    OPTERON_6000 = "Opteron 6xxx"
    OPTERON_3000 = "Opteron 3xxx"
    OPTERON_X = "Opteron X"
    PHENOM_II = "Phenom II"
    TURION = "Turion"
    TURION_X2 = "Turion X2"
    TURION_II = "Turion II"
    TURION_NEO = "Turion Neo"
    MOBILE_RYZEN = "mobile Ryzen"
    RYZEN_THREADRIPPER = "Ryzen Threadripper"
    RYZEN_AI = "Ryzen AI"
    RYZEN_EMBEDDED = "Ryzen Embedded"
    EPYC = "EPYC"
    EPYC_EMBEDDED = "EPYC Embedded"
    AMD_E_SERIES = "AMD E-series"
    AMD_C_SERIES = "AMD C-series"
    AMD_G_SERIES = "AMD G-series"
    AMD_Z_SERIES = "AMD Z-series"
    AMD_R_SERIES = "AMD R-series"
    AMD_FX = "AMD FX"
    AMD_K6_2 = "AMD K6-2"
    AMD_K6_III = "AMD K6-III"
    HYGON_C86 = "Hygon C86"

    # VIA, Zhaoxin and others
    VIA_C7_M = "VIA C7-M"
    VIA_EDEN = "VIA Eden"
    VIA_NANO = "VIA Nano"
    VIA_NANO_X2 = "VIA Nano X2"
    VIA_QUADCORE = "VIA QuadCore"
    ZHAOXIN_KH = "Zhaoxin KaiSheng"
    TRANSMETA_CRUSOE = "Transmeta Crusoe"
    TRANSMETA_EFFICEON = "Transmeta Efficeon"
    VORTEX86 = "Vortex86"


PredicateContext = namedtuple("PredicateContext", [
    "vendor",
    "signature",
    "signature_word",
    "processor_type",
    "brand_index",
    "cache",
    "brand",
    "topology",
])

def brand(*names):
    return lambda c: c.brand.has(*names)

def cache(flag):
    return lambda c: flag in c.cache

def cores(*counts):
    def check(c):
        if c.topology is not None and c.topology.cores in counts:
            return True
        return c.brand.cores in counts
    return check

def model_range(low, high):
    """True if the brand model number falls in [low, high]"""
    return lambda c: c.brand.model_number is not None and low <= c.brand.model_number <= high

def prefix(*letters):
    return lambda c: c.brand.model_prefix in letters

def all_of(*checks):
    return lambda c: all(check(c) for check in checks)

def none_of(*checks):
    return lambda c: not any(check(c) for check in checks)

def suffix(*letters):
    return lambda c: c.brand.model_suffix is not None and c.brand.model_suffix.startswith(letters)

l2_flags = [f for f in CacheFlag if f is not CacheFlag.L3]
is_mobile = brand("mobile")
mobile_core2_prefixes = ("T", "L", "U", "P", "S", "SL", "SP", "SU")

common_predicates = {
    Q.MOBILE: is_mobile,

    Q.L2_64K: cache(CacheFlag.L2_64K),
    Q.L2_128K: cache(CacheFlag.L2_128K),
    Q.L2_256K: cache(CacheFlag.L2_256K),
    Q.L2_512K: cache(CacheFlag.L2_512K),
    Q.L2_1M: cache(CacheFlag.L2_1M),
    Q.L2_2M: cache(CacheFlag.L2_2M),
    Q.L2_6M: cache(CacheFlag.L2_6M),
    Q.L3: cache(CacheFlag.L3),
    Q.NO_L2: lambda c: not any(f in c.cache for f in l2_flags),
    Q.BIG_L2: lambda c: any(f in c.cache for f in (CacheFlag.L2_1M, CacheFlag.L2_2M, CacheFlag.L2_6M,
                                                   CacheFlag.L2_4W_1MOR2M, CacheFlag.L2_8W_1MOR2M)),

    Q.DUAL_CORE: cores(2),
    Q.TRIPLE_CORE: cores(3),
    Q.QUAD_CORE: cores(4),
    Q.HYPERTHREADED: lambda c: c.topology is not None and (c.topology.hyperthreads or 0) > 1,
}

def brand_index_in(*values):
    return lambda c: c.brand_index in values

intel_predicates = {
    Q.BI_CELERON: lambda c: c.brand_index in (0x01, 0x0a, 0x14) or (c.brand_index == 0x03 and c.signature_word == 0x6b1),
    Q.BI_PENTIUM_III_XEON: lambda c: c.brand_index == 0x03 and c.signature_word != 0x6b1,
    Q.BI_MOBILE_PENTIUM_III: brand_index_in(0x06),
    Q.BI_MOBILE_CELERON: brand_index_in(0x07, 0x0f, 0x13, 0x17),
    Q.BI_XEON: lambda c: (c.brand_index == 0x0b and c.signature_word != 0xf13) or (c.brand_index == 0x0e and c.signature_word == 0xf13),
    Q.BI_XEON_MP: lambda c: c.brand_index == 0x0c or (c.brand_index == 0x0b and c.signature_word == 0xf13),
    Q.BI_MOBILE_PENTIUM_4: lambda c: c.brand_index == 0x0e and c.signature_word != 0xf13,
    Q.BI_CELERON_M: brand_index_in(0x12),

    Q.CELERON: brand("celeron"),
    Q.DESKTOP_CELERON: all_of(brand("celeron"), none_of(is_mobile, brand("celeron_m", "celeron_jn"))),
    Q.MOBILE_CELERON: all_of(brand("celeron"), is_mobile),
    Q.CELERON_M: brand("celeron_m"),
    Q.CELERON_D: brand("celeron_d"),
    Q.PENTIUM: brand("pentium"),
    Q.DESKTOP_PENTIUM: all_of(brand("pentium"), none_of(is_mobile, brand("pentium_m", "pentium_4_m", "pentium_iii_m", "pentium_jn"))),
    Q.MOBILE_PENTIUM: all_of(brand("pentium"), is_mobile),
    Q.PENTIUM_III_M: brand("pentium_iii_m"),
    Q.PENTIUM_4_M: all_of(brand("pentium_4"), lambda c: c.brand.has("pentium_4_m", "mobile")),
    Q.PENTIUM_D: brand("pentium_d"),
    Q.PENTIUM_EXTREME: brand("pentium_extreme"),
    Q.PENTIUM_DUAL_CORE: brand("pentium_dual_core"),
    Q.MOBILE_PENTIUM_DUAL_CORE: all_of(brand("pentium_dual_core"), lambda c: c.brand.has("mobile") or prefix("T")(c)),
    Q.XEON: brand("xeon"),
    Q.XEON_MP: all_of(brand("xeon"), lambda c: c.brand.has("xeon_mp")),
    Q.XEON_DP: all_of(brand("xeon"), none_of(brand("xeon_mp"))),
    Q.XEON_E3: brand("xeon_e3"),
    Q.XEON_E5: brand("xeon_e5"),
    Q.XEON_E7: brand("xeon_e7"),
    Q.XEON_D: brand("xeon_d"),
    Q.XEON_W: brand("xeon_w"),
    Q.XEON_E: brand("xeon_e"),
    Q.XEON_SCALABLE: brand("xeon_bronze", "xeon_silver", "xeon_gold", "xeon_platinum"),
    Q.XEON_MAX: brand("xeon_max"),
    Q.CORE_DUO: brand("core_duo"),
    Q.CORE_SOLO: brand("core_solo"),
    Q.CORE2_DUO: brand("core2_duo"),
    Q.DESKTOP_CORE2_DUO: all_of(brand("core2_duo"), none_of(is_mobile, prefix(*mobile_core2_prefixes))),
    Q.MOBILE_CORE2_DUO: all_of(brand("core2_duo"), lambda c: c.brand.has("mobile") or prefix(*mobile_core2_prefixes)(c)),
    Q.CORE2_QUAD: brand("core2_quad"),
    Q.MOBILE_CORE2_QUAD: all_of(brand("core2_quad"), lambda c: c.brand.has("mobile") or (prefix("Q")(c) and model_range(9000, 9199)(c))),
    Q.CORE2_EXTREME: brand("core2_extreme"),
    Q.MOBILE_CORE2_EXTREME: all_of(brand("core2_extreme"), lambda c: c.brand.has("mobile") or (prefix("X")(c) and model_range(7000, 9999)(c)) or (prefix("QX")(c) and model_range(9300, 9300)(c))),
    Q.CORE2_SOLO: brand("core2_solo"),
    Q.CORE_I3: brand("core_i3"),
    Q.CORE_I5: brand("core_i5"),
    Q.CORE_I7: brand("core_i7"),
    Q.CORE_I9: brand("core_i9"),
    Q.CORE_I: brand("core_i3", "core_i5", "core_i7", "core_i9"),
    Q.DESKTOP_CORE_I: all_of(brand("core_i3", "core_i5", "core_i7", "core_i9"),
                             none_of(is_mobile, brand("u_line", "y_line", "h_line", "hx_line", "m_line", "p_line"))),
    Q.MOBILE_CORE_I: all_of(brand("core_i3", "core_i5", "core_i7", "core_i9"),
                            brand("mobile", "u_line", "y_line", "h_line", "hx_line", "m_line", "p_line")),
    Q.CORE_I7_EXTREME: brand("core_i7_extreme"),
    Q.CORE_M: brand("core_m"),
    Q.CORE_3_5_7: brand("core_3_5_7"),
    Q.ATOM: brand("atom"),
    Q.INTEL_N_SERIES: brand("intel_n_series", "intel_processor"),
    Q.QUARK: brand("quark"),
    Q.GENUINE_INTEL: brand("genuine_intel"),
    Q.Y_LINE: brand("y_line"),
    Q.H_LINE: brand("h_line"),
    Q.HX_LINE: brand("hx_line"),
    Q.P_LINE: brand("p_line"),
    Q.OVERDRIVE: lambda c: c.processor_type == 1,
}

def opteron_series(*leading):
    def check(c):
        if not c.brand.has("opteron") or c.brand.model_number is None:
            return False
        return str(c.brand.model_number)[0] in leading
    return check

amd_predicates = {
    Q.ATHLON: brand("athlon"),
    Q.MOBILE_ATHLON: all_of(brand("athlon"), is_mobile),
    Q.MOBILE_ATHLON_XP: all_of(brand("athlon_xp"), lambda c: c.brand.has("mobile") or "XP-M" in c.brand.brand),
    Q.ATHLON_MP: brand("athlon_mp"),
    Q.MOBILE_ATHLON_64: all_of(brand("athlon_64"), is_mobile),
    Q.ATHLON_64_X2: brand("athlon_64_x2"),
    Q.ATHLON_64_FX: brand("athlon_64_fx"),
    Q.ATHLON_II: brand("athlon_ii"),
    Q.ATHLON_NEO: brand("athlon_neo"),
    Q.ATHLON_X2: brand("athlon_x2"),
    Q.ATHLON_X4: brand("athlon_x4"),
    Q.ATHLON_SILVER_GOLD: brand("athlon_silver", "athlon_gold"),
    Q.DURON: brand("duron"),
    Q.MOBILE_DURON: all_of(brand("duron"), is_mobile),
    Q.SEMPRON: brand("sempron"),
    Q.MOBILE_SEMPRON: all_of(brand("sempron"), is_mobile),
    Q.OPTERON: brand("opteron"),
    Q.OPTERON_DP: opteron_series("2"),
    Q.OPTERON_MP: opteron_series("8"),
    Q.OPTERON_3000: opteron_series("3"),
    Q.OPTERON_4000: opteron_series("4"),
    Q.OPTERON_6000: opteron_series("6"),
    Q.OPTERON_X: brand("opteron_x"),
    Q.PHENOM_II: brand("phenom_ii"),
    Q.TURION: brand("turion"),
    Q.TURION_X2: brand("turion_x2"),
    Q.TURION_II: brand("turion_ii"),
    Q.TURION_NEO: brand("turion_neo"),
    Q.MOBILE_RYZEN: all_of(brand("ryzen"), lambda c: suffix("U", "H", "HS", "HX")(c) or c.brand.has("ryzen_ai")),
    Q.RYZEN_THREADRIPPER: brand("ryzen_threadripper"),
    Q.RYZEN_AI: brand("ryzen_ai"),
    Q.RYZEN_EMBEDDED: all_of(brand("ryzen"), brand("amd_embedded")),
    Q.EPYC: brand("epyc"),
    Q.EPYC_EMBEDDED: brand("epyc_embedded"),
    Q.AMD_E_SERIES: brand("e_series"),
    Q.AMD_C_SERIES: brand("c_series"),
    Q.AMD_G_SERIES: brand("g_series"),
    Q.AMD_Z_SERIES: brand("z_series"),
    Q.AMD_R_SERIES: brand("r_series"),
    Q.AMD_FX: brand("fx"),
    Q.AMD_K6_2: brand("k6_2"),
    Q.AMD_K6_III: brand("k6_iii"),
    Q.HYGON_C86: brand("hygon_c86"),
}

other_predicates = {
    Q.VIA_C7_M: brand("via_c7_m"),
    Q.VIA_EDEN: brand("via_eden"),
    Q.VIA_NANO: brand("via_nano"),
    Q.VIA_NANO_X2: brand("via_nano_x2"),
    Q.VIA_QUADCORE: brand("via_quadcore"),
    Q.ZHAOXIN_KH: brand("zhaoxin_kh"),
    Q.TRANSMETA_CRUSOE: brand("transmeta_crusoe"),
    Q.TRANSMETA_EFFICEON: brand("transmeta_efficeon"),
    Q.VORTEX86: brand("vortex"),
}

predicate_groups = {
    Vendor.INTEL: [common_predicates, intel_predicates],
    Vendor.AMD: [common_predicates, amd_predicates],
    Vendor.HYGON: [common_predicates, amd_predicates],
}
default_predicate_groups = [common_predicates, other_predicates]

class PredicateSet(object):
    """The frozen truth values of every predicate for one CPU"""

    def __init__(self, true_predicates=()):
        self._true = frozenset(true_predicates)

    def __contains__(self, predicate):
        return predicate in self._true

    def __getitem__(self, predicate):
        return predicate in self._true

    def __iter__(self):
        return iter(sorted(self._true, key=lambda q: q.name))

    def __len__(self):
        return len(self._true)

    def __eq__(self, other):
        return isinstance(other, PredicateSet) and self._true == other._true

    def __hash__(self):
        return hash(self._true)

    def __repr__(self):
        return "PredicateSet({})".format(", ".join(q.name for q in self))

def context_from_stash(stash, brand_flags, topology):
    return PredicateContext(
        vendor=stash.vendor,
        signature=stash.signature,
        signature_word=stash.val_1_eax & 0x0fff0fff,
        processor_type=stash.processor_type,
        brand_index=stash.brand_index,
        cache=stash.cache_flags,
        brand=brand_flags,
        topology=topology,
    )

def evaluate_predicates(context):
    groups = predicate_groups.get(context.vendor, default_predicate_groups)
    true_predicates = []
    for group in groups:
        for predicate, check in group.items():
            if check(context):
                true_predicates.append(predicate)
    result = PredicateSet(true_predicates)
    logging.debug(f"{context.vendor.value} predicates: {result}")
    return result
