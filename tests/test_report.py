# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import argparse
import logging

from cpuid_inspector.cli import build_report
from cpuid_inspector.inspectorlib import validator
from cpuid_inspector.synth import decode_cpu

ARGS = argparse.Namespace(dump="/tmp/cpuid.txt", out=None, loglevel="warning", cpu=None)

def report_of(*snapshots):
    return build_report(ARGS, [decode_cpu(s) for s in snapshots])

def test_identity(ivy_bridge):
    report = report_of(ivy_bridge.brand("Intel(R) Celeron(R) CPU G1610 @ 2.60GHz").build())
    root = report.getroot()
    assert root.tag == "cpus"
    assert root.get("source") == "cpuid.txt"
    assert report.xpath("string(//cpu[@id='0']/vendor)") == "Intel"
    signature = report.xpath("//cpu[@id='0']/signature")[0]
    assert (signature.get("family"), signature.get("model"), signature.get("stepping")) == ("0x6", "0x3a", "0x9")
    assert report.xpath("string(//cpu/brand)") == "Intel(R) Celeron(R) CPU G1610 @ 2.60GHz"

def test_microarchitecture(ivy_bridge):
    report = report_of(ivy_bridge.build())
    uarch = report.xpath("//cpu/microarchitecture")[0]
    assert uarch.get("codename") == "Ivy Bridge"
    assert uarch.get("family") == "Sandy Bridge"
    assert uarch.get("process_node") == "22nm"
    assert uarch.text == "Intel Mobile Core i*-3000 (Ivy Bridge E1/L1) [Ivy Bridge] {Sandy Bridge}, 22nm"

def test_topology_and_features(deneb):
    report = report_of(deneb.build())
    assert report.xpath("string(//cpu/topology/@method)") == "AMD leaf 0x80000008"
    assert report.xpath("string(//cpu/topology/cores)") == "4"
    fields = [(f.get("name"), f.get("msb"), f.get("lsb")) for f in report.xpath("//cpu/apic_id_fields/field")]
    assert fields == [("core", "25", "24"), ("package", "31", "26")]
    assert report.xpath("//cpu/amd_instructions/instruction[@id='cmov']/@supported") == ["true"]
    assert report.xpath("string(//cpu/override_brand)") == ""

def test_cpus_keep_dump_order(ivy_bridge, deneb):
    ivy_bridge.cpu_id = 1
    report = report_of(deneb.build(), ivy_bridge.build())
    assert report.xpath("//cpu/@id") == ["0", "1"]
    assert report.xpath("//cpu/vendor/text()") == ["AMD", "Intel"]

def test_valid_report_passes(ivy_bridge):
    report = report_of(ivy_bridge.build())
    assert validator.validate_report(validator.default_schema, report) == 0

def test_missing_topology_is_a_warning(builder, caplog):
    report = report_of(builder.vendor("CentaurHauls").signature(6, 0xf, 2, edx=1 << 28).build())
    with caplog.at_level(logging.WARNING):
        count = validator.validate_report(validator.default_schema, report)
    assert count == 1
    assert "cores and threads" in caplog.text

def test_hypervisor_is_only_informative(ivy_bridge, caplog):
    report = report_of(ivy_bridge.hypervisor("KVMKVMKVM").build())
    assert report.xpath("string(//cpu/hypervisor)") == "KVM"
    with caplog.at_level(logging.INFO):
        count = validator.validate_report(validator.default_schema, report)
    assert count == 0
    assert "virtual machine" in caplog.text
