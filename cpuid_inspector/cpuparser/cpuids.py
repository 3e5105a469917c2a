# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""CPUID register decoding."""

from cpuid_inspector.cpuparser.platformbase import CPUID, cpuidfield
import struct

EAX = 0
EBX = 1
ECX = 2
EDX = 3

def regs_to_text(*words):
    """Pack little-endian register words into an ASCII string, dropping NULs"""
    return struct.pack('<' + 'I' * len(words), *words).decode("ascii", errors="replace").replace("\x00", "")

class LEAF_0(CPUID):
    """Basic CPUID information including vendor and max supported basic leaf."""

    leaf = 0x0
    max_leaf = cpuidfield(EAX, 31, 0, doc="Highest value the CPUID recognizes for returning basic processor information")

    @property
    def vendor(self):
        """Vendor identification string"""
        return struct.pack('<III', self.regs.ebx, self.regs.edx, self.regs.ecx).decode("ascii", errors="replace")

class LEAF_1(CPUID):
    """Basic CPUID Information

    Contains version type, family, model, and stepping ID; brand index; CLFLUSH
    line size; maximum number of addressable IDs for logical processors in the
    physical package; initial APIC ID; and feature information"""

    leaf = 0x1

    stepping = cpuidfield(EAX, 3, 0, doc="Stepping ID")
    model = cpuidfield(EAX, 7, 4, doc="Model")
    family = cpuidfield(EAX, 11, 8, doc="Family ID")
    processor_type = cpuidfield(EAX, 13, 12, doc="Processor Type")
    ext_model = cpuidfield(EAX, 19, 16, doc="Extended Model ID")
    ext_family = cpuidfield(EAX, 27, 20, doc="Extended Family ID")

    brand_index = cpuidfield(EBX, 7, 0, doc="Brand index")
    CLFLUSH_line_size = cpuidfield(EBX, 15, 8, doc="CLFLUSH instruction cache line size (in 8-byte words)")
    max_logical_processor_ids = cpuidfield(EBX, 23, 16, doc="The maximum number of addressable IDs for logical processors in the physical package.")
    initial_apic_id = cpuidfield(EBX, 31, 24, doc="Initial APIC ID")

    hypervisor = cpuidfield(ECX, 31, 31, doc="Running under a hypervisor")

    cmpxchg8b = cpuidfield(EDX, 8, 8, doc="CMPXCHG8B instruction")
    cmov = cpuidfield(EDX, 15, 15, doc="Conditional move instructions")
    htt = cpuidfield(EDX, 28, 28, doc="Max APIC IDs reserved field is valid")

class LEAF_2(CPUID):
    """TLB, Cache, and Prefetch Information"""

    leaf = 0x2
    times_to_run = cpuidfield(EAX, 7, 0, doc="Number of times CPUID must be executed with EAX = 2 to retrieve a complete description of the processor's TLB, Cache, and Prefetch hardware")

    @property
    def descriptors(self):
        """One-byte descriptors from every register whose bit 31 is clear, AL excluded"""
        result = []
        for regnum, value in enumerate(self.regs):
            if value & 0x80000000:
                continue
            for shift in range(0, 32, 8):
                if regnum == EAX and shift == 0:
                    continue
                byte = (value >> shift) & 0xff
                if byte != 0:
                    result.append(byte)
        return result

class LEAF_4(CPUID):
    """Deterministic cache parameters

    Returns encoded data that describes a set of deterministic cache parameters
    for the cache level associated in ECX"""

    leaf = 0x4
    cache_type = cpuidfield(EAX, 4, 0, doc="Cache Type Field")
    cache_level = cpuidfield(EAX, 7, 5, doc="Cache Level")
    self_initializing = cpuidfield(EAX, 8, 8, doc="Self Initializing Cache Level")
    fully_associative = cpuidfield(EAX, 9, 9, doc="Fully Associative Cache")
    max_logical_processors_sharing_cache_z = cpuidfield(EAX, 25, 14, doc="Max number of addressable IDs for logical processors sharing this cache (zero based)")
    max_cores_sharing_cache_z = cpuidfield(EAX, 31, 26, doc="Max number of addressable IDs for processor cores in the physical package (zero based)")

    line_size_z = cpuidfield(EBX, 11, 0, doc="System Coherency Line Size (zero-based)")
    partitions_z = cpuidfield(EBX, 21, 12, doc="Physical Line Partitions (zero-based)")
    ways_z = cpuidfield(EBX, 31, 22, doc="Ways of associativity (zero-based)")

    sets_z = cpuidfield(ECX, 31, 0, doc="Sets (zero-based)")

    @property
    def max_logical_processors_sharing_cache(self):
        """Maximum number of addressable IDs for logical processors sharing this cache"""
        return self.max_logical_processors_sharing_cache_z + 1

    @property
    def max_cores_sharing_cache(self):
        """Maximum number of addressable IDs for processor cores in the physical pacakge"""
        return self.max_cores_sharing_cache_z + 1

    @property
    def partitions(self):
        """Number of physical line partitions"""
        return self.partitions_z + 1

    @property
    def line_size(self):
        """System Coherency line size"""
        return self.line_size_z + 1

    @property
    def ways(self):
        """Ways of associativity"""
        return self.ways_z + 1

    @property
    def sets(self):
        """Number of sets"""
        return self.sets_z + 1

    @property
    def cache_size(self):
        """Cache size in bytes"""
        return self.ways * self.partitions * self.line_size * self.sets

class LEAF_B(CPUID):
    """Extended Topology Enumeration Leaf

    Returns information about extended topology enumeration data"""

    leaf = 0xB

    num_bit_shift = cpuidfield(EAX, 4, 0, doc="Number of bits to shift right on x2APID ID to get a unique topology ID of the next level type")

    logical_proccessors_at_level = cpuidfield(EBX, 15, 0, doc="Number of logical processors at this level type.")

    level_number = cpuidfield(ECX, 7, 0, doc="Level number")
    level_type = cpuidfield(ECX, 15, 8, doc="Level type")

    x2apic_id = cpuidfield(EDX, 31, 0, doc="x2APIC ID of the current logical processor")

class LEAF_1F(LEAF_B):
    """Extened Topology Enumeration Leaf v2"""

    leaf = 0x1F

class LEAF_40000000(CPUID):
    """Hypervisor vendor leaf"""

    leaf = 0x40000000

    max_hypervisor_leaf = cpuidfield(EAX, 31, 0, doc="Highest hypervisor leaf")

    @property
    def signature(self):
        return regs_to_text(self.regs.ebx, self.regs.ecx, self.regs.edx)

class LEAF_80000000(CPUID):
    """Extended Function CPUID Information"""

    leaf = 0x80000000

    max_extended_leaf = cpuidfield(EAX, 31, 0, doc="Highest extended function input value understood by CPUID")

class LEAF_80000001(CPUID):
    """Extended Function CPUID Information"""

    leaf = 0x80000001

    stepping = cpuidfield(EAX, 3, 0, doc="Stepping ID")
    model = cpuidfield(EAX, 7, 4, doc="Model")
    family = cpuidfield(EAX, 11, 8, doc="Family ID")
    ext_model = cpuidfield(EAX, 19, 16, doc="Extended Model ID")
    ext_family = cpuidfield(EAX, 27, 20, doc="Extended Family ID")

    brand_id = cpuidfield(EBX, 15, 0, doc="AMD BrandId")
    brand_id_12 = cpuidfield(EBX, 11, 0, doc="AMD 12-bit BrandId (family 0Fh before revision F)")
    pkg_type = cpuidfield(EBX, 31, 28, doc="AMD package type")

    cmp_legacy = cpuidfield(ECX, 1, 1, doc="Core multi-processing legacy mode")
    prefetch_3dnow = cpuidfield(ECX, 8, 8, doc="PREFETCH/PREFETCHW support (3DNowPrefetch)")

    long_mode = cpuidfield(EDX, 29, 29, doc="Long mode")
    amd_3dnow = cpuidfield(EDX, 31, 31, doc="3DNow! instructions")

class LEAF_80000002(CPUID):
    """Extended Function CPUID Information

    Processor Brand String"""

    leaf = 0x80000002

    @property
    def brandstring(self):
        """Processor Brand String"""
        return struct.pack('<IIII', self.regs.eax, self.regs.ebx, self.regs.ecx, self.regs.edx).rstrip(b"\x00")

class LEAF_80000003(LEAF_80000002):
    """Extended Function CPUID Information

    Processor Brand String Continued"""

    leaf = 0x80000003

class LEAF_80000004(LEAF_80000002):
    """Extended Function CPUID Information

    Processor Brand String Continued"""

    leaf = 0x80000004

class LEAF_80000006(CPUID):
    """Extended Function CPUID Information"""

    leaf = 0x80000006

    cache_line_size = cpuidfield(ECX, 7, 0, doc="Cache Line size in bytes")

    l2_associativity = cpuidfield(ECX, 15, 12, doc="L2 Associativity field")
    cache_size_k = cpuidfield(ECX, 31, 16, doc="Cache size in 1K units")

    l3_associativity = cpuidfield(EDX, 15, 12, doc="L3 Associativity field")
    l3_size_512k = cpuidfield(EDX, 31, 18, doc="L3 size in 512K units")

    # AMD encoding of the associativity fields
    associativity_ways = {
        0x1: 1,
        0x2: 2,
        0x4: 4,
        0x6: 8,
        0x8: 16,
        0xA: 32,
        0xB: 48,
        0xC: 64,
        0xD: 96,
        0xE: 128,
    }

    @property
    def l2_ways(self):
        return self.associativity_ways.get(self.l2_associativity)

class LEAF_80000008(CPUID):
    """Returns linear/physical address size"""

    leaf = 0x80000008
    nc = cpuidfield(ECX, 7, 0, doc="Number of physical cores minus one")
    apic_id_core_id_size = cpuidfield(ECX, 15, 12, doc="Number of APIC ID bits that identify cores within the package")

class LEAF_8000001D(LEAF_4):
    """AMD Cache Topology Information"""

    leaf = 0x8000001D

class LEAF_8000001E(CPUID):
    """AMD Extended APIC ID, compute unit and node identifiers"""

    leaf = 0x8000001E

    extended_apic_id = cpuidfield(EAX, 31, 0, doc="Extended APIC ID")
    compute_unit_id = cpuidfield(EBX, 7, 0, doc="Compute unit (core) ID")
    threads_per_compute_unit_z = cpuidfield(EBX, 15, 8, doc="Threads per core (Zen) or cores per compute unit (family 15h), zero-based")
    node_id = cpuidfield(ECX, 7, 0, doc="Node ID")
    nodes_per_processor_z = cpuidfield(ECX, 10, 8, doc="Nodes per processor (zero-based)")

    @property
    def threads_per_compute_unit(self):
        return self.threads_per_compute_unit_z + 1
