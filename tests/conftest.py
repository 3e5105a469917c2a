# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import struct
import pytest

from cpuid_inspector.cpuparser.platformbase import CPUIDSnapshot
from cpuid_inspector.synth.signature import compose_eax

class SnapshotBuilder(object):
    """Assemble the raw leaves of one synthetic CPU."""

    def __init__(self, cpu_id=0):
        self.cpu_id = cpu_id
        self.records = {}

    def leaf(self, leaf, eax=0, ebx=0, ecx=0, edx=0, subleaf=0):
        self.records[(leaf, subleaf)] = (eax, ebx, ecx, edx)
        return self

    def vendor(self, text, max_leaf=0xd):
        ebx, edx, ecx = struct.unpack('<III', text.encode("ascii"))
        return self.leaf(0x0, max_leaf, ebx, ecx, edx)

    def signature(self, family, model, stepping, ebx=0, ecx=0, edx=0):
        return self.leaf(0x1, compose_eax(family, model, stepping), ebx, ecx, edx)

    def extended_max(self, max_leaf):
        eax = self.records.get((0x80000000, 0), (0,))[0]
        return self.leaf(0x80000000, max(eax, max_leaf))

    def brand(self, text):
        words = struct.unpack('<12I', text.encode("ascii").ljust(48, b"\x00"))
        self.extended_max(0x80000004)
        for idx, leaf in enumerate([0x80000002, 0x80000003, 0x80000004]):
            self.leaf(leaf, *words[idx * 4:idx * 4 + 4])
        return self

    def hypervisor(self, text):
        eax, ebx, ecx, edx = self.records.get((0x1, 0), (0, 0, 0, 0))
        self.leaf(0x1, eax, ebx, ecx | (1 << 31), edx)
        ebx, ecx, edx = struct.unpack('<III', text.encode("ascii").ljust(12, b"\x00"))
        return self.leaf(0x40000000, 0x40000001, ebx, ecx, edx)

    def build(self):
        return CPUIDSnapshot(self.cpu_id, self.records)

    def dump_lines(self):
        """The leaves in the format written by `cpuid -r`"""
        lines = [f"CPU {self.cpu_id}:"]
        for (leaf, subleaf), (eax, ebx, ecx, edx) in sorted(self.records.items()):
            lines.append(f"   {leaf:#010x} {subleaf:#04x}: eax={eax:#010x} ebx={ebx:#010x} ecx={ecx:#010x} edx={edx:#010x}")
        return lines

@pytest.fixture
def builder():
    return SnapshotBuilder()

@pytest.fixture
def ivy_bridge():
    return SnapshotBuilder().vendor("GenuineIntel").signature(6, 0x3a, 9)

@pytest.fixture
def venice_unknown_brand():
    return (SnapshotBuilder()
            .vendor("AuthenticAMD", max_leaf=1)
            .signature(0xf, 0x2f, 0x0)
            .leaf(0x80000001, compose_eax(0xf, 0x2f, 0x0), (0x22 << 6) | 6)
            .brand("AMD Processor model unknown"))

@pytest.fixture
def deneb():
    return (SnapshotBuilder()
            .vendor("AuthenticAMD", max_leaf=5)
            .signature(0x10, 0x4, 0x2, ebx=4 << 16, edx=(1 << 28) | (1 << 15) | (1 << 8))
            .leaf(0x80000001, compose_eax(0x10, 0x4, 0x2), (1 << 28) | (3 << 11) | (55 << 4) | 6, 1 << 1, 1 << 29)
            .leaf(0x80000008, 0x3030, 0, 3, 0)
            .extended_max(0x80000008)
            .brand("AMD Phenom(tm) II X4 955 Processor"))
