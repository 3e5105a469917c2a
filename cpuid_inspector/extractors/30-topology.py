# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import logging

from cpuid_inspector.extractors.helpers import add_child, get_cpu_node

def extract_apic_fields(cpu_node, apic_fields):
    n = add_child(cpu_node, "apic_id_fields")
    for name, msb, lsb in apic_fields.layout():
        add_child(n, "field", name=name, msb=str(msb), lsb=str(lsb))

def extract(args, report_etree, decoded):
    for cpu in decoded:
        cpu_node = get_cpu_node(report_etree, cpu.cpu_id)
        if cpu.topology is None:
            logging.warning(f"Cannot determine the number of cores and threads of CPU {cpu.cpu_id}.")
            continue
        n = add_child(cpu_node, "topology", method=cpu.topology.method)
        add_child(n, "cores", str(cpu.topology.cores))
        add_child(n, "hyperthreads", str(cpu.topology.hyperthreads))
        if cpu.apic_fields is not None:
            extract_apic_fields(cpu_node, cpu.apic_fields)
