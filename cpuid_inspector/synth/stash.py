# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Cross-leaf facts accumulated while walking the leaves of one CPU.

Family, model and stepping are not enough to tell every chip apart: a Pentium
II and a Pentium II Xeon share one signature and differ only in their L2
cache. The stash remembers such facts from every leaf seen during one decode
pass so that the decode tables can consult them afterwards."""

import logging
from enum import Enum

from cpuid_inspector.cpuparser import parse_cpuid
from cpuid_inspector.cpuparser.cpuids import LEAF_80000002, LEAF_80000003, LEAF_80000004
from cpuid_inspector.synth.signature import extract_signature, processor_type
from cpuid_inspector.synth.vendor import Vendor, identify_vendor, identify_hypervisor

class CacheFlag(Enum):
    L2_4W_1MOR2M = "L2 4-way 1M or 2M"
    L2_4W_512K = "L2 4-way 512K"
    L2_4W_256K = "L2 4-way 256K"
    L2_8W_1MOR2M = "L2 8-way 1M or 2M"
    L2_8W_512K = "L2 8-way 512K"
    L2_8W_256K = "L2 8-way 256K"
    L2_64K = "L2 64K"
    L2_128K = "L2 128K"
    L2_256K = "L2 256K"
    L2_512K = "L2 512K"
    L2_1M = "L2 1M"
    L2_2M = "L2 2M"
    L2_6M = "L2 6M"
    L3 = "L3"

F = CacheFlag

# Leaf 2 one-byte descriptors that matter for telling chips apart.
descriptor_flags = {
    0x21: (F.L2_256K, F.L2_8W_256K),
    0x22: (F.L3,),
    0x23: (F.L3,),
    0x25: (F.L3,),
    0x29: (F.L3,),
    0x39: (F.L2_128K,),
    0x3b: (F.L2_128K,),
    0x3c: (F.L2_256K, F.L2_4W_256K),
    0x3e: (F.L2_512K, F.L2_4W_512K),
    0x41: (F.L2_128K,),
    0x42: (F.L2_256K, F.L2_4W_256K),
    0x43: (F.L2_512K, F.L2_4W_512K),
    0x44: (F.L2_1M, F.L2_4W_1MOR2M),
    0x45: (F.L2_2M, F.L2_4W_1MOR2M),
    0x46: (F.L3,),
    0x47: (F.L3,),
    0x4a: (F.L3,),
    0x4b: (F.L3,),
    0x4c: (F.L3,),
    0x4d: (F.L3,),
    0x4e: (F.L2_6M,),
    0x78: (F.L2_1M, F.L2_4W_1MOR2M),
    0x79: (F.L2_128K,),
    0x7a: (F.L2_256K, F.L2_8W_256K),
    0x7b: (F.L2_512K, F.L2_8W_512K),
    0x7c: (F.L2_1M, F.L2_8W_1MOR2M),
    0x7d: (F.L2_2M, F.L2_8W_1MOR2M),
    0x7e: (F.L2_256K, F.L2_8W_256K),
    0x7f: (F.L2_512K,),
    0x80: (F.L2_512K, F.L2_8W_512K),
    0x81: (F.L2_128K,),
    0x82: (F.L2_256K, F.L2_8W_256K),
    0x83: (F.L2_512K, F.L2_8W_512K),
    0x84: (F.L2_1M, F.L2_8W_1MOR2M),
    0x85: (F.L2_2M, F.L2_8W_1MOR2M),
    0x86: (F.L2_512K, F.L2_4W_512K),
    0x87: (F.L2_1M, F.L2_8W_1MOR2M),
    0x88: (F.L3,),
    0x89: (F.L3,),
    0x8a: (F.L3,),
    0x8d: (F.L3,),
    0xd0: (F.L3,),
    0xd1: (F.L3,),
    0xd2: (F.L3,),
    0xd6: (F.L3,),
    0xd7: (F.L3,),
    0xd8: (F.L3,),
    0xdc: (F.L3,),
    0xdd: (F.L3,),
    0xde: (F.L3,),
    0xe2: (F.L3,),
    0xe3: (F.L3,),
    0xe4: (F.L3,),
    0xea: (F.L3,),
    0xeb: (F.L3,),
    0xec: (F.L3,),
}

# L2 sizes in KB that carry a flag of their own, with the way-qualified
# flag for 4- and 8-way variants.
size_flags = {
    64: (F.L2_64K, None, None),
    128: (F.L2_128K, None, None),
    256: (F.L2_256K, F.L2_4W_256K, F.L2_8W_256K),
    512: (F.L2_512K, F.L2_4W_512K, F.L2_8W_512K),
    1024: (F.L2_1M, F.L2_4W_1MOR2M, F.L2_8W_1MOR2M),
    2048: (F.L2_2M, F.L2_4W_1MOR2M, F.L2_8W_1MOR2M),
    6144: (F.L2_6M, None, None),
}

class CodeStash(object):
    """Per-CPU accumulator. Cache flags can be set but never cleared."""

    def __init__(self, cpu_id=0):
        self.cpu_id = cpu_id
        self.vendor = Vendor.UNKNOWN
        self.vendor_string = None
        self.hypervisor_present = False
        self.hypervisor = None

        # None until leaf 0 or 0x80000000 is seen
        self.max_basic_leaf = None
        self.max_extended_leaf = None

        self.signature = None
        self.processor_type = 0
        self.val_1_eax = 0
        self.val_1_ebx = 0
        self.val_1_ecx = 0
        self.val_1_edx = 0

        self.val_4_eax = None
        self.leaf_b_levels = []
        self.leaf_1f_levels = []

        self.val_80000001_eax = 0
        self.val_80000001_ebx = 0
        self.val_80000001_ecx = 0
        self.val_80000001_edx = 0
        self.val_80000008_ecx = None
        self.val_8000001e_ebx = None

        self.brand = ""
        self.override_brand = None

        self._cache_flags = set()

    @property
    def cache_flags(self):
        return frozenset(self._cache_flags)

    def set_cache_flag(self, flag):
        if flag not in self._cache_flags:
            logging.debug(f"CPU {self.cpu_id}: cache flag {flag.value} set.")
        self._cache_flags.add(flag)

    def has(self, flag):
        return flag in self._cache_flags

    @property
    def effective_brand(self):
        """The brand string the predicates should look at"""
        return self.override_brand if self.override_brand else self.brand

    @property
    def htt(self):
        return bool(self.val_1_edx & (1 << 28))

    @property
    def logical_count(self):
        return (self.val_1_ebx >> 16) & 0xff

    @property
    def brand_index(self):
        return self.val_1_ebx & 0xff

    def __repr__(self):
        flags = ", ".join(sorted(f.value for f in self._cache_flags))
        return f"CodeStash(cpu={self.cpu_id}, vendor={self.vendor.value}, signature={self.signature}, flags=[{flags}])"

def classify_l2(stash, size_kb, ways):
    entry = size_flags.get(size_kb)
    if entry is None:
        return
    flag, flag_4w, flag_8w = entry
    stash.set_cache_flag(flag)
    if ways == 4 and flag_4w:
        stash.set_cache_flag(flag_4w)
    elif ways == 8 and flag_8w:
        stash.set_cache_flag(flag_8w)

def stash_leaf_0(stash, view):
    stash.max_basic_leaf = view.max_leaf
    stash.vendor_string = view.vendor
    stash.vendor = identify_vendor(view.vendor)

def stash_leaf_1(stash, view):
    eax = view.regs.eax
    stash.val_1_eax = eax
    stash.val_1_ebx = view.regs.ebx
    stash.val_1_ecx = view.regs.ecx
    stash.val_1_edx = view.regs.edx
    stash.signature = extract_signature(eax)
    stash.processor_type = processor_type(eax)
    stash.hypervisor_present = bool(view.hypervisor)

def stash_leaf_2(stash, view):
    for descriptor in view.descriptors:
        if descriptor == 0x49:
            # 4MB L3 on the Xeon MP family 0Fh model 06h, 4MB L2 everywhere else
            if stash.signature is not None and stash.signature[:2] == (0xf, 0x6):
                stash.set_cache_flag(F.L3)
            continue
        for flag in descriptor_flags.get(descriptor, ()):
            stash.set_cache_flag(flag)

def stash_deterministic_cache(stash, view):
    if view.cache_type == 0:
        return
    if view.cache_level == 2:
        classify_l2(stash, view.cache_size // 1024, view.ways)
    elif view.cache_level == 3:
        stash.set_cache_flag(F.L3)

def stash_leaf_4(stash, view):
    if view.subleaf == 0:
        stash.val_4_eax = view.regs.eax
    stash_deterministic_cache(stash, view)

def stash_topology_level(levels, view):
    if view.level_type == 0:
        return
    levels.append((view.level_type, view.num_bit_shift, view.logical_proccessors_at_level))

def stash_leaf_b(stash, view):
    stash_topology_level(stash.leaf_b_levels, view)

def stash_leaf_1f(stash, view):
    stash_topology_level(stash.leaf_1f_levels, view)

def stash_leaf_40000000(stash, view):
    # Bare metal answers leaf 0x40000000 with whatever the highest basic leaf
    # holds, so the leaf only means something when leaf 1 says so.
    if not stash.hypervisor_present:
        logging.debug(f"CPU {stash.cpu_id}: no hypervisor bit in leaf 1, leaf 0x40000000 ignored.")
        return
    if view.max_hypervisor_leaf < 0x40000000:
        return
    stash.hypervisor = identify_hypervisor(view.signature)

def stash_leaf_80000000(stash, view):
    # Without bit 31 set no extended leaf is implemented at all
    stash.max_extended_leaf = view.max_extended_leaf if view.max_extended_leaf & 0x80000000 else 0

def stash_leaf_80000001(stash, view):
    stash.val_80000001_eax = view.regs.eax
    stash.val_80000001_ebx = view.regs.ebx
    stash.val_80000001_ecx = view.regs.ecx
    stash.val_80000001_edx = view.regs.edx

def stash_leaf_80000006(stash, view):
    if view.cache_size_k:
        classify_l2(stash, view.cache_size_k, view.l2_ways)
    if stash.vendor in (Vendor.AMD, Vendor.HYGON) and view.l3_size_512k:
        stash.set_cache_flag(F.L3)

def stash_leaf_80000008(stash, view):
    stash.val_80000008_ecx = view.regs.ecx

def stash_leaf_8000001e(stash, view):
    stash.val_8000001e_ebx = view.regs.ebx

stash_handlers = {
    0x0: stash_leaf_0,
    0x1: stash_leaf_1,
    0x2: stash_leaf_2,
    0x4: stash_leaf_4,
    0xB: stash_leaf_b,
    0x1F: stash_leaf_1f,
    0x40000000: stash_leaf_40000000,
    0x80000000: stash_leaf_80000000,
    0x80000001: stash_leaf_80000001,
    0x80000006: stash_leaf_80000006,
    0x80000008: stash_leaf_80000008,
    0x8000001D: stash_deterministic_cache,
    0x8000001E: stash_leaf_8000001e,
}

def leaf_implemented(stash, leaf):
    """Whether the maximum leaves seen so far admit this leaf.

    A leaf above the reported maximum returns stale data on real hardware, so
    it is ignored even if the dump contains it. Nothing is ruled out while the
    matching maximum leaf has not been captured."""
    if leaf < 0x40000000:
        return stash.max_basic_leaf is None or leaf <= stash.max_basic_leaf
    if leaf > 0x80000000:
        return stash.max_extended_leaf is None or leaf <= stash.max_extended_leaf
    return True

def stash_brand(stash, snapshot):
    brandstring = b""
    for leaf in [LEAF_80000002, LEAF_80000003, LEAF_80000004]:
        if not leaf_implemented(stash, leaf.leaf):
            return
        leaf_data = leaf.read(snapshot)
        if leaf_data is None:
            return
        brandstring += leaf_data.brandstring
    brand = brandstring.replace(b"\x00", b"").decode("ascii", errors="replace")
    stash.brand = "".join(c for c in brand if c.isprintable()).strip()

def build_stash(snapshot):
    """Fold every captured leaf of one CPU into a fresh stash.

    Leaf 0 sorts first, so the vendor and the highest basic leaf are known
    before any other leaf is looked at, and the same holds for leaf 0x80000000
    among the extended leaves. Leaf 1 precedes leaf 2, which needs the
    signature to interpret descriptor 0x49, and leaf 0x40000000, which is only
    trusted when leaf 1 reports a hypervisor."""
    stash = CodeStash(snapshot.cpu_id)
    for leaf, subleaf in snapshot:
        handler = stash_handlers.get(leaf)
        if handler is None:
            continue
        if not leaf_implemented(stash, leaf):
            logging.debug(f"CPU {stash.cpu_id}: leaf {leaf:#x} is above the reported maximum, ignored.")
            continue
        view = parse_cpuid(leaf, subleaf, snapshot)
        handler(stash, view)
    stash_brand(stash, snapshot)
    return stash
