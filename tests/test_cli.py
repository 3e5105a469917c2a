# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import lxml.etree
import pytest

from cpuid_inspector.cli import main, select_cpus
from cpuid_inspector.cpuparser.platformbase import CPUIDSnapshot

def write_dump(path, *builders):
    lines = []
    for b in builders:
        lines.extend(b.dump_lines())
    path.write_text("\n".join(lines) + "\n")
    return path

def test_writes_report(tmp_path, deneb, ivy_bridge):
    ivy_bridge.cpu_id = 1
    dump = write_dump(tmp_path / "cpuid.txt", deneb, ivy_bridge)
    out = tmp_path / "report.xml"
    main([str(dump), "--out", str(out)])
    report = lxml.etree.parse(str(out))
    assert report.xpath("//cpu/@id") == ["0", "1"]
    assert report.xpath("string(//cpu[@id='0']/synth)") == "AMD Phenom II X4 (Deneb RB-C2) 955"

def test_default_report_name(tmp_path, ivy_bridge):
    dump = write_dump(tmp_path / "cpuid.txt", ivy_bridge)
    main([str(dump)])
    assert (tmp_path / "cpuid.txt.xml").exists()

def test_cpu_selection(tmp_path, deneb, ivy_bridge):
    ivy_bridge.cpu_id = 1
    dump = write_dump(tmp_path / "cpuid.txt", deneb, ivy_bridge)
    out = tmp_path / "report.xml"
    main([str(dump), "--out", str(out), "--cpu", "1"])
    assert lxml.etree.parse(str(out)).xpath("//cpu/vendor/text()") == ["Intel"]

def test_malformed_dump(tmp_path):
    dump = tmp_path / "cpuid.txt"
    dump.write_text("CPU 0:\n   0x00000000 0x00: eax=0x0000000d\n")
    with pytest.raises(SystemExit) as e:
        main([str(dump), "--out", str(tmp_path / "report.xml")])
    assert e.value.code == 1
    assert not (tmp_path / "report.xml").exists()

def test_no_selected_cpu(tmp_path, ivy_bridge):
    dump = write_dump(tmp_path / "cpuid.txt", ivy_bridge)
    with pytest.raises(SystemExit) as e:
        main([str(dump), "--cpu", "7"])
    assert e.value.code == 1

def test_invalid_loglevel(tmp_path, capsys):
    with pytest.raises(SystemExit) as e:
        main([str(tmp_path / "cpuid.txt"), "--loglevel", "chatty"])
    assert e.value.code == 1
    assert "chatty is not a valid log level" in capsys.readouterr().out

def test_select_cpus_skips_missing():
    snapshots = {0: CPUIDSnapshot(0), 2: CPUIDSnapshot(2)}
    assert [s.cpu_id for s in select_cpus(snapshots, "0-2")] == [0, 2]
    assert len(select_cpus(snapshots, None)) == 2

def test_bare_metal_report_has_no_hypervisor(tmp_path, builder):
    builder.vendor("GenuineIntel", max_leaf=0x16).signature(6, 0x9e, 0xa, ecx=0x7ffafbbf)
    builder.leaf(0x40000000, 0xe10, 0x12c0, 0x64, 0)
    dump = write_dump(tmp_path / "cpuid.txt", builder)
    out = tmp_path / "report.xml"
    main([str(dump), "--out", str(out)])
    report = lxml.etree.parse(str(out))
    assert report.xpath("//cpu[@id='0']/vendor/text()") == ["Intel"]
    assert report.xpath("//cpu/hypervisor") == []
