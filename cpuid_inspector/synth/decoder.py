# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import logging
from collections import namedtuple

from cpuid_inspector.inspectorlib.bitfields import getbits
from cpuid_inspector.synth.amd_brand import reconstruct, select_variant
from cpuid_inspector.synth.brand import parse_brand
from cpuid_inspector.synth.predicates import context_from_stash, evaluate_predicates
from cpuid_inspector.synth.rules import lookup
from cpuid_inspector.synth.stash import build_stash
from cpuid_inspector.synth.tables import synth_tables
from cpuid_inspector.synth.topology import synthesize_topology
from cpuid_inspector.synth.uarch import decode_uarch, format_uarch
from cpuid_inspector.synth.vendor import Vendor

AMD_VENDORS = (Vendor.AMD, Vendor.HYGON)

AmdFeatures = namedtuple("AmdFeatures", ["cmpxchg8b", "cmov", "prefetch"])

class DecodedOutput(namedtuple("DecodedOutput", [
        "cpu_id",
        "vendor",
        "signature",
        "brand",
        "override_brand",
        "hypervisor",
        "synth",
        "uarch",
        "topology",
        "apic_fields",
        "amd_features",
        "cache_flags",
        ])):
    __slots__ = ()

    @property
    def description(self):
        """Marketing name followed by the microarchitecture annotation"""
        return format_uarch(self.synth, self.uarch)

def amd_features(stash):
    return AmdFeatures(
        cmpxchg8b=bool(getbits(stash.val_1_edx, 8)),
        cmov=bool(getbits(stash.val_1_edx, 15)),
        prefetch=bool(getbits(stash.val_80000001_ecx, 8)
                      or getbits(stash.val_80000001_edx, 31)
                      or getbits(stash.val_80000001_edx, 29)),
    )

def override_brand(stash):
    """Replace a BIOS "model unknown" brand with the reconstructed one.

    Returns the reconstruction (which may be None) so that it need not be
    computed twice."""
    rebuilt = reconstruct(stash)
    if "model unknown" in stash.brand and rebuilt:
        stash.override_brand = str(rebuilt)
        logging.info(f"CPU {stash.cpu_id}: brand \"{stash.brand}\" overridden by \"{stash.override_brand}\".")
    return rebuilt

def augment(synth, signature, rebuilt):
    if synth is None or rebuilt is None or select_variant(signature) is None:
        return synth
    if rebuilt.processor_number:
        return f"{synth} {rebuilt.processor_number}"
    return synth

def decode_cpu(snapshot):
    """Decode the captured leaves of one logical CPU.

    Every call starts from a fresh stash, so CPUs never influence each
    other and decoding the same snapshot twice gives equal results."""
    stash = build_stash(snapshot)
    vendor = stash.vendor

    rebuilt = override_brand(stash) if vendor in AMD_VENDORS else None
    brand_flags = parse_brand(stash.effective_brand)
    topology, apic_fields = synthesize_topology(stash)
    predicates = evaluate_predicates(context_from_stash(stash, brand_flags, topology))

    table = synth_tables.get(vendor)
    synth = lookup(table, stash.signature, predicates) if table is not None else None
    uarch = decode_uarch(vendor, stash.signature, predicates)
    if vendor == Vendor.AMD:
        synth = augment(synth, stash.signature, rebuilt)

    if synth is None:
        logging.info(f"CPU {stash.cpu_id}: no decode table for vendor string \"{stash.vendor_string}\".")

    return DecodedOutput(
        cpu_id=stash.cpu_id,
        vendor=vendor,
        signature=stash.signature,
        brand=stash.brand,
        override_brand=stash.override_brand,
        hypervisor=stash.hypervisor,
        synth=synth,
        uarch=uarch,
        topology=topology,
        apic_fields=apic_fields,
        amd_features=amd_features(stash) if vendor in AMD_VENDORS else None,
        cache_flags=tuple(sorted(f.value for f in stash.cache_flags)),
    )
