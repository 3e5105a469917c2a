# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Core and thread counts per package, and the layout of the APIC ID.

Only the first usable method is taken:

  Intel:      leaf 0x1f, leaf 0xb, leaf 4 with leaf 1, leaf 1 alone
  AMD/Hygon:  leaf 0x8000001e (family 17h on), leaf 0x80000008, leaf 1
  Others:     leaf 1, and only when HTT is clear"""

import logging
from collections import namedtuple

from cpuid_inspector.inspectorlib.bitfields import getbits, bitfield_max, bits_needed
from cpuid_inspector.synth.vendor import Vendor

SMT_LEVEL = 1
CORE_LEVEL = 2

APIC_FIELD_BASE = 24
APIC_ID_BITS = 32

TopologyFacts = namedtuple("TopologyFacts", ["method", "cores", "hyperthreads"])

class ApicFields(namedtuple("ApicFields", ["smt_width", "core_width", "cu_width"])):
    """Widths of the SMT, core and compute unit fields of the initial APIC ID.

    The fields are laid out from bit 24 upwards in that order; the package
    field takes whatever is left up to bit 32."""
    __slots__ = ()

    @property
    def smt_offset(self):
        return APIC_FIELD_BASE

    @property
    def core_offset(self):
        return self.smt_offset + self.smt_width

    @property
    def cu_offset(self):
        return self.core_offset + self.core_width

    @property
    def package_offset(self):
        return self.cu_offset + self.cu_width

    @property
    def package_width(self):
        return max(APIC_ID_BITS - self.package_offset, 0)

    def layout(self):
        """(name, msb, lsb) of every non-empty field, lowest first"""
        fields = []
        for name, offset, width in [
                ("smt", self.smt_offset, self.smt_width),
                ("core", self.core_offset, self.core_width),
                ("cu", self.cu_offset, self.cu_width),
                ("package", self.package_offset, self.package_width)]:
            if width > 0:
                fields.append((name, offset + width - 1, offset))
        return fields

def extended_topology(levels, method):
    smt = None
    core = None
    for level_type, shift, count in levels:
        if level_type == SMT_LEVEL and smt is None:
            smt = (shift, count)
        elif level_type == CORE_LEVEL and core is None:
            core = (shift, count)
    if smt is None or core is None or smt[1] == 0:
        return None, None
    cores = core[1] // smt[1]
    facts = TopologyFacts(method, cores, smt[1])
    fields = ApicFields(smt[0], max(core[0] - smt[0], 0), 0)
    return facts, fields

def intel_topology(stash):
    for levels, method in [(stash.leaf_1f_levels, "Intel leaf 0x1f"), (stash.leaf_b_levels, "Intel leaf 0xb")]:
        facts, fields = extended_topology(levels, method)
        if facts is not None:
            return facts, fields

    if stash.val_4_eax is not None:
        cores = getbits(stash.val_4_eax, 31, 26) + 1
        logical = stash.logical_count if stash.htt else 1
        facts = TopologyFacts("Intel leaf 1/4", cores, max(logical // cores, 1))
    elif stash.htt:
        facts = TopologyFacts("Intel leaf 1", 1, 2)
    else:
        facts = TopologyFacts("Intel leaf 1", 1, 1)
    return facts, None

def amd_topology(stash):
    family = stash.signature.family if stash.signature is not None else 0
    nc_ecx = stash.val_80000008_ecx

    if family >= 0x17 and stash.val_8000001e_ebx is not None and nc_ecx is not None:
        threads_per_core = getbits(stash.val_8000001e_ebx, 15, 8) + 1
        cores = (getbits(nc_ecx, 7, 0) + 1) // threads_per_core
        return TopologyFacts("AMD leaf 0x8000001e", cores, threads_per_core), None

    if not stash.htt:
        return TopologyFacts("leaf 1", 1, 1), None
    if nc_ecx is None:
        return None, None

    size = getbits(nc_ecx, 15, 12)
    nc = getbits(nc_ecx, 7, 0)
    cores = (nc & bitfield_max(size - 1, 0) if size else nc) + 1
    total = stash.logical_count
    cmp_legacy = bool(getbits(stash.val_80000001_ecx, 1))
    if (total == cores) != cmp_legacy:
        logging.debug(f"CPU {stash.cpu_id}: {total} logical processors and {cores} cores disagree with CmpLegacy={cmp_legacy:d}.")
        return None, None
    return TopologyFacts("AMD leaf 0x80000008", cores, max(total // cores, 1)), None

def other_topology(stash):
    if stash.htt:
        return None, None
    return TopologyFacts("leaf 1", 1, 1), None

def compute_unit_fields(stash, facts):
    """Family 15h modules pair two cores into one compute unit"""
    cores_per_cu = getbits(stash.val_8000001e_ebx, 15, 8) + 1
    return ApicFields(bits_needed(facts.hyperthreads), bits_needed(cores_per_cu),
                      bits_needed(max(facts.cores // cores_per_cu, 1)))

def synthesize_topology(stash):
    """Return (TopologyFacts, ApicFields) for the CPU in the stash.

    Both are None when no method applies or the AMD legacy check fails."""
    if stash.vendor == Vendor.INTEL:
        facts, fields = intel_topology(stash)
    elif stash.vendor in (Vendor.AMD, Vendor.HYGON):
        facts, fields = amd_topology(stash)
    else:
        facts, fields = other_topology(stash)

    if facts is None:
        logging.debug(f"CPU {stash.cpu_id}: no usable topology information.")
        return None, None

    if fields is None:
        if stash.vendor in (Vendor.AMD, Vendor.HYGON) and stash.signature is not None \
                and stash.signature.family == 0x15 and stash.val_8000001e_ebx is not None:
            fields = compute_unit_fields(stash, facts)
        else:
            fields = ApicFields(bits_needed(facts.hyperthreads), bits_needed(facts.cores), 0)

    logging.debug(f"CPU {stash.cpu_id}: {facts.cores} cores, {facts.hyperthreads} threads per core ({facts.method}).")
    return facts, fields
