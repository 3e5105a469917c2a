# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import pytest

from cpuid_inspector.inspectorlib.dumpfile import DumpFormatError, load_dump, parse_dump, parse_cpu_ids

DUMP = """\
# captured with cpuid -r
CPU 0:
   0x00000000 0x00: eax=0x0000000d ebx=0x756e6547 ecx=0x6c65746e edx=0x49656e69
   0x00000001 0x00: eax=0x000306a9 ebx=0x00100800 ecx=0x7fbae3bf edx=0xbfebfbff
   0x00000004 0x01: eax=0x1c004122 ebx=0x01c0003f ecx=0x0000003f edx=0x00000000

CPU 1:
   0x00000000 0x00: eax=0x0000000d ebx=0x756e6547 ecx=0x6c65746e edx=0x49656e69
   0x00000001: eax=0x000306a9 ebx=0x01100800 ecx=0x7fbae3bf edx=0xbfebfbff
""".splitlines()

def test_parse_dump():
    snapshots = parse_dump(DUMP)
    assert sorted(snapshots) == [0, 1]
    assert snapshots[0].regs(0x4, 1).eax == 0x1c004122
    assert snapshots[0].regs(0).eax == 0xd
    assert snapshots[1].regs(0x1).ebx == 0x01100800
    assert snapshots[1].regs(0x4, 1) is None

def test_records_before_any_header_belong_to_cpu_0():
    snapshots = parse_dump(["0x00000000 0x00: eax=0x00000001 ebx=0x0 ecx=0x0 edx=0x0"])
    assert list(snapshots) == [0]

def test_header_on_the_same_line():
    snapshots = parse_dump(["CPU 3: 0x00000001 0x00: eax=0x000306a9 ebx=0x0 ecx=0x0 edx=0x0"])
    assert snapshots[3].regs(0x1).eax == 0x000306a9

def test_single_cpu_header_without_number():
    snapshots = parse_dump([
        "CPU:",
        "   0x00000000 0x00: eax=0x0000000d ebx=0x756e6547 ecx=0x6c65746e edx=0x49656e69",
        "   0x00000001 0x00: eax=0x000306a9 ebx=0x00100800 ecx=0x7fbae3bf edx=0xbfebfbff",
    ])
    assert list(snapshots) == [0]
    assert snapshots[0].regs(0x1).eax == 0x000306a9

def test_last_duplicate_wins():
    snapshots = parse_dump([
        "0x00000001 0x00: eax=0x00000001 ebx=0x0 ecx=0x0 edx=0x0",
        "0x00000001 0x00: eax=0x00000002 ebx=0x0 ecx=0x0 edx=0x0",
    ])
    assert snapshots[0].regs(0x1).eax == 2

@pytest.mark.parametrize("line", [
    "0x00000001 0x00: eax=0x000306a9 ebx=0x0 ecx=0x0",
    "leaf 1: eax=0x000306a9 ebx=0x0 ecx=0x0 edx=0x0",
    "0x00000001 0x00: eax=0xzz ebx=0x0 ecx=0x0 edx=0x0",
])
def test_malformed_record(line):
    with pytest.raises(DumpFormatError) as e:
        parse_dump(DUMP + [line], filename="broken.txt")
    assert e.value.lineno == len(DUMP) + 1
    assert e.value.filename == "broken.txt"
    assert "broken.txt" in str(e.value)

def test_load_dump(tmp_path):
    path = tmp_path / "dump.txt"
    path.write_text("\n".join(DUMP) + "\n")
    assert sorted(load_dump(path)) == [0, 1]

@pytest.mark.parametrize("args", [
    ("0", [0]),
    ("0-3,6", [0, 1, 2, 3, 6]),
    ("2,5-6", [2, 5, 6]),
], ids=lambda x: x[0])
def test_parse_cpu_ids(args):
    text, cpus = args
    assert parse_cpu_ids(text) == cpus
