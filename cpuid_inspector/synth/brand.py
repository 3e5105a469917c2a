# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Brand string parsing.

The brand string is free text written by the vendor (or, on some AMD boards,
by the BIOS). Decoding never trusts it for the signature, but it is the only
place where e.g. a Celeron and a Pentium built from the same die can be told
apart. Every pattern here is compiled at import time, so a broken pattern
aborts the program before any decoding starts."""

import re

brand_patterns = {
    # Intel
    "celeron": r"Celeron",
    "celeron_m": r"Celeron\((?:R|TM)\) M\b|Celeron M\b",
    "celeron_d": r"Celeron\((?:R|TM)\) D\b|Celeron D\b",
    "celeron_jn": r"Celeron\((?:R|TM)\) (?:CPU +)?[JN][0-9]{4}",
    "pentium": r"Pentium",
    "pentium_jn": r"Pentium\((?:R|TM)\) (?:CPU +)?[JN][0-9]{4}",
    "pentium_iii_m": r"Pentium\((?:R|TM)\) III-M|Pentium III-M",
    "pentium_4": r"Pentium\((?:R|TM)\) 4|Pentium 4",
    "pentium_4_m": r"Pentium\((?:R|TM)\) 4 - M|Pentium 4-M|Pentium\((?:R|TM)\) 4 Mobile",
    "pentium_m": r"Pentium\((?:R|TM)\) M\b|Pentium M\b",
    "pentium_d": r"Pentium\((?:R|TM)\) D\b|Pentium D\b",
    "pentium_extreme": r"Pentium\((?:R|TM)\) Extreme|Pentium Extreme|Pentium\((?:R|TM)\) EE",
    "pentium_dual_core": r"Pentium\((?:R|TM)\) Dual|Pentium Dual",
    "xeon": r"Xeon",
    "xeon_mp": r"Xeon\((?:R|TM)\) MP|Xeon MP\b|Xeon\((?:R|TM)\) CPU +7\d{3}\b",
    "xeon_e3": r"Xeon\(R\) (?:CPU )?E3-",
    "xeon_e5": r"Xeon\(R\) (?:CPU )?E5-",
    "xeon_e7": r"Xeon\(R\) (?:CPU )?E7-",
    "xeon_d": r"Xeon\(R\) (?:CPU )?D-",
    "xeon_w": r"Xeon\(R\) (?:CPU )?W-",
    "xeon_e": r"Xeon\(R\) E-",
    "xeon_bronze": r"Xeon\(R\) Bronze",
    "xeon_silver": r"Xeon\(R\) Silver",
    "xeon_gold": r"Xeon\(R\) Gold",
    "xeon_platinum": r"Xeon\(R\) Platinum",
    "xeon_max": r"Xeon\(R\) (?:CPU )?Max",
    "core_duo": r"Core\((?:R|TM)\) Duo|Core Duo",
    "core_solo": r"Core\((?:R|TM)\) Solo|Core Solo",
    "core2": r"Core\((?:R|TM)\)2|Core 2",
    "core2_duo": r"Core\((?:R|TM)\)2 Duo|Core 2 Duo",
    "core2_quad": r"Core\((?:R|TM)\)2 Quad|Core 2 Quad",
    "core2_extreme": r"Core\((?:R|TM)\)2 Extreme|Core 2 Extreme",
    "core2_solo": r"Core\((?:R|TM)\)2 Solo|Core 2 Solo",
    "core_i3": r"Core\((?:R|TM)\) i3|Core i3",
    "core_i5": r"Core\((?:R|TM)\) i5|Core i5",
    "core_i7": r"Core\((?:R|TM)\) i7|Core i7",
    "core_i9": r"Core\((?:R|TM)\) i9|Core i9",
    "core_i7_extreme": r"Core\((?:R|TM)\) i7 CPU +(?:X|[0-9]{3,4}X)\b|Core\((?:R|TM)\) i7 Extreme",
    "core_m": r"Core\((?:R|TM)\) m[357]?\b|Core\((?:R|TM)\) M-?[0-9]",
    "core_3_5_7": r"Core\((?:R|TM)\) [357] ",
    "atom": r"Atom",
    "intel_n_series": r"Intel\(R\) N[0-9]{2,3}\b|Intel\(R\) Processor N[0-9]",
    "intel_processor": r"Intel\(R\) Processor [NU][0-9]",
    "quark": r"Quark",
    "genuine_intel": r"Genuine Intel",
    "mobile": r"Mobile",
    "u_line": r"-[0-9]{3,5}[A-Z]?U[EM]?\b",
    "y_line": r"-[0-9]{3,5}[A-Z]?Y\b|\b[0-9]Y[0-9]{2}\b",
    "h_line": r"-[0-9]{3,5}H[KQSX]?\b",
    "m_line": r"-[0-9]{3,4}[QX]?M\b",
    "p_line": r"-[0-9]{4,5}P\b",
    "hx_line": r"-[0-9]{4,5}HX\b",
    # AMD and Hygon
    "athlon": r"Athlon",
    "athlon_xp": r"Athlon\(tm\) XP|Athlon XP",
    "athlon_mp": r"Athlon\(tm\) MP|Athlon MP",
    "athlon_64": r"Athlon\(tm\) 64|Athlon 64",
    "athlon_64_x2": r"Athlon\(tm\) 64 X2|Athlon 64 X2",
    "athlon_64_fx": r"Athlon\(tm\) 64 FX|Athlon 64 FX|Athlon\(tm\) FX",
    "athlon_ii": r"Athlon\(tm\) II|Athlon II",
    "athlon_neo": r"Athlon\(tm\) Neo|Athlon Neo",
    "athlon_x2": r"Athlon\(tm\) X2|Athlon X2",
    "athlon_x4": r"Athlon\(tm\) X4|Athlon X4",
    "athlon_silver": r"Athlon Silver",
    "athlon_gold": r"Athlon Gold",
    "duron": r"Duron",
    "sempron": r"Sempron",
    "opteron": r"Opteron",
    "opteron_x": r"Opteron\(tm\) X[0-9]",
    "phenom": r"Phenom",
    "phenom_ii": r"Phenom\(tm\) II|Phenom II",
    "turion": r"Turion",
    "turion_x2": r"Turion\(tm\) X2|Turion 64 X2|Turion\(tm\) 64 X2",
    "turion_ii": r"Turion\(tm\) II|Turion II",
    "turion_neo": r"Turion\(tm\) Neo|Turion Neo",
    "ryzen": r"Ryzen",
    "ryzen_threadripper": r"Threadripper",
    "ryzen_ai": r"Ryzen AI",
    "epyc": r"EPYC",
    "epyc_embedded": r"EPYC Embedded",
    "e_series": r"\bE[0-9]?-[0-9]{3,4}",
    "c_series": r"\bC-[0-9]{2,3}\b",
    "g_series": r"\bG-[A-Z]?[0-9]{2,3}",
    "z_series": r"\bZ-[0-9]{2}\b",
    "r_series": r"\bR(?:X)?-[0-9]{3,4}",
    "fx": r"\bFX\(tm\)|\bFX-[0-9]",
    "k6_2": r"K6\(tm\)-2|K6-2",
    "k6_iii": r"K6\(tm\)-III|K6-III",
    "amd_embedded": r"Embedded",
    "hygon_c86": r"C86",
    # VIA, Zhaoxin and the rest
    "via_c7_m": r"C7-M\b",
    "via_eden": r"Eden",
    "via_nano": r"Nano",
    "via_nano_x2": r"Nano X2|Nano\(tm\) X2",
    "via_quadcore": r"QuadCore|Quad Core",
    "zhaoxin_kh": r"KaiSheng|KH-[0-9]",
    "transmeta_crusoe": r"Crusoe",
    "transmeta_efficeon": r"Efficeon",
    "vortex": r"Vortex86",
}

brand_regexes = {name: re.compile(pattern) for name, pattern in brand_patterns.items()}

core_count_patterns = [
    (re.compile(r"Dual[- ]Core|\bX2\b|\bDuo\b"), 2),
    (re.compile(r"Triple[- ]Core|\bX3\b"), 3),
    (re.compile(r"Quad[- ]?Core|\bX4\b|\bQuad\b"), 4),
    (re.compile(r"Six[- ]Core|Hexa[- ]Core|\bX6\b"), 6),
    (re.compile(r"Eight[- ]Core|Octa[- ]Core|\bX8\b"), 8),
    (re.compile(r"Twelve[- ]Core|12-Core"), 12),
    (re.compile(r"16-Core"), 16),
]

# A model number of three to five digits with an optional letter prefix and
# suffix, e.g. "T7500", "i7-3720QM" or "E5-2680"
model_number_regex = re.compile(r"\b([A-Za-z]{0,2})(?:[0-9]-)?([0-9]{3,5})([A-Z]{1,2})?\b")
whitespace_regex = re.compile(r"\s+")

class BrandFlags(object):
    """Named facts extracted from one brand string"""

    def __init__(self, brand):
        self.brand = whitespace_regex.sub(" ", brand or "").strip()
        self.flags = frozenset(name for name, regex in brand_regexes.items() if regex.search(self.brand))

        self.cores = None
        for regex, cores in core_count_patterns:
            if regex.search(self.brand):
                self.cores = cores

        self.model_prefix = None
        self.model_number = None
        self.model_suffix = None
        m = model_number_regex.search(self.brand)
        if m:
            self.model_prefix = m.group(1)
            self.model_number = int(m.group(2))
            self.model_suffix = m.group(3) or ""

    def __contains__(self, name):
        assert name in brand_regexes, f"Internal error: unknown brand flag {name}"
        return name in self.flags

    def has(self, *names):
        return any(name in self for name in names)

    def __eq__(self, other):
        return isinstance(other, BrandFlags) and self.brand == other.brand

    def __hash__(self):
        return hash(self.brand)

    def __repr__(self):
        return f"BrandFlags({self.brand!r}, flags={sorted(self.flags)}, cores={self.cores})"

def parse_brand(brand):
    return BrandFlags(brand)
