# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Base classes and infrastructure for CPUID decoding"""

import logging
from collections import namedtuple
from collections.abc import Mapping

class cpuid_result(namedtuple('cpuid_result', ['eax', 'ebx', 'ecx', 'edx'])):
    __slots__ = ()

    def __repr__(self):
        return "cpuid_result(eax={eax:#010x}, ebx={ebx:#010x}, ecx={ecx:#010x}, edx={edx:#010x})".format(**self._asdict())

class CPUIDSnapshot(Mapping):
    """All (leaf, subleaf) register sets captured for one logical CPU.

    Leaves that were never captured are simply absent; lookups of those return
    None instead of raising."""

    def __init__(self, cpu_id, records=None):
        self.cpu_id = cpu_id
        self._records = {}
        for (leaf, subleaf), regs in (records or {}).items():
            self._records[(leaf, subleaf)] = cpuid_result(*regs)

    def __getitem__(self, key):
        return self._records[key]

    def __iter__(self):
        return iter(sorted(self._records))

    def __len__(self):
        return len(self._records)

    def regs(self, leaf, subleaf=0):
        return self._records.get((leaf, subleaf))

    def __repr__(self):
        return f"CPUIDSnapshot(cpu_id={self.cpu_id}, records={len(self._records)})"

class CPUID(object):
    # Subclasses must define a "leaf" field as part of the class definition.

    def __init__(self, regs):
        self.regs = regs

    @classmethod
    def read(cls, snapshot, subleaf=0):
        regs = snapshot.regs(cls.leaf, subleaf)
        if regs is None:
            logging.debug(f"CPUID leaf {cls.leaf:#x} subleaf {subleaf:#x} not captured for CPU {snapshot.cpu_id}.")
            return None
        r = cls(regs)
        r.snapshot = snapshot
        r.subleaf = subleaf
        return r

    def __getitem__(self, subleaf):
        return self.read(self.snapshot, subleaf)

    def __eq__(self, other):
        return self.regs == other.regs

    def __ne__(self, other):
        return self.regs != other.regs

    def __repr__(self):
        return "{}(leaf={:#x}, subleaf={:#x}, {!r})".format(type(self).__name__, self.leaf, getattr(self, "subleaf", 0), self.regs)

class cpuidfield(property):
    def __init__(self, reg, msb, lsb, doc="Bogus"):
        self.reg = reg
        self.msb = msb
        self.lsb = lsb

        max_value = (1 << (msb - lsb + 1)) - 1
        field_mask = max_value << lsb

        def getter(self):
            return (self.regs[reg] & field_mask) >> lsb
        super(cpuidfield, self).__init__(getter, doc=doc)
