# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.extractors.helpers import add_child, get_cpu_node

def extract(args, report_etree, decoded):
    for cpu in decoded:
        cpu_node = get_cpu_node(report_etree, cpu.cpu_id)
        if cpu.synth:
            add_child(cpu_node, "synth", cpu.synth)
        if cpu.uarch is not None:
            n = add_child(cpu_node, "microarchitecture", cpu.description,
                          family=cpu.uarch.family_codename)
            if not cpu.uarch.core_name_is_family_name:
                n.set("codename", cpu.uarch.codename)
            if cpu.uarch.process_node:
                n.set("process_node", cpu.uarch.process_node)
