# Copyright (C) 2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Replay of raw CPUID dumps as written by `cpuid -r`."""

import re
import logging

from cpuid_inspector.cpuparser.platformbase import CPUIDSnapshot

regex_hex = "0x[0-9a-f]+"

# "cpuid -1 -r" omits the CPU number
cpu_header_regex = re.compile(r"^CPU(?:\s+(\d+))?:\s*(.*)$", re.IGNORECASE)
record_regex = re.compile(
    f"^({regex_hex})(?:\\s+({regex_hex}))?:\\s+eax=({regex_hex})\\s+ebx=({regex_hex})\\s+ecx=({regex_hex})\\s+edx=({regex_hex})$",
    re.IGNORECASE)

class DumpFormatError(ValueError):
    def __init__(self, filename, lineno, line):
        self.filename = filename
        self.lineno = lineno
        self.line = line
        super().__init__(f"{filename}:{lineno}: malformed CPUID dump record: {line!r}")

def parse_dump(lines, filename="<dump>"):
    """Parse dump lines into a dict of CPU index -> CPUIDSnapshot.

    Records seen before any "CPU n:" header belong to CPU 0. Any line that is
    neither blank, a comment, a header nor a register record makes the whole
    dump untrustworthy and raises DumpFormatError."""
    records = {}
    cpu_id = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        m = cpu_header_regex.match(line)
        if m:
            cpu_id = int(m.group(1)) if m.group(1) else 0
            records.setdefault(cpu_id, {})
            line = m.group(2).strip()
            if not line:
                continue

        m = record_regex.match(line)
        if not m:
            raise DumpFormatError(filename, lineno, raw.rstrip("\n"))

        leaf = int(m.group(1), base=16)
        subleaf = int(m.group(2), base=16) if m.group(2) else 0
        regs = tuple(int(m.group(idx), base=16) & 0xffffffff for idx in range(3, 7))
        cpu_records = records.setdefault(cpu_id, {})
        if (leaf, subleaf) in cpu_records:
            logging.debug(f"{filename}:{lineno}: CPU {cpu_id} leaf {leaf:#x} subleaf {subleaf:#x} captured twice; keeping the last one.")
        cpu_records[(leaf, subleaf)] = regs

    return {cpu: CPUIDSnapshot(cpu, recs) for cpu, recs in sorted(records.items())}

def load_dump(path):
    with open(path, "r", encoding="ascii", errors="replace") as f:
        return parse_dump(f, filename=str(path))

def parse_cpu_ids(text):
    """Expand a CPU list such as "0-3,6" into [0, 1, 2, 3, 6]."""
    acc = list()
    for r in text.strip().split(","):
        if r.find("-") > 0:
            first, last = tuple(map(int, r.split("-")))
            acc.extend(range(first, last + 1))
        else:
            if r:
                acc.append(int(r))
    return acc
