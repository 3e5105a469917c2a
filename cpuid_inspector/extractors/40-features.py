# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.extractors.helpers import add_child, get_cpu_node, bool_str

def extract(args, report_etree, decoded):
    for cpu in decoded:
        cpu_node = get_cpu_node(report_etree, cpu.cpu_id)
        if cpu.cache_flags:
            n = add_child(cpu_node, "cache_flags")
            for flag in cpu.cache_flags:
                add_child(n, "flag", flag)
        if cpu.amd_features is not None:
            n = add_child(cpu_node, "amd_instructions")
            for name, supported in cpu.amd_features._asdict().items():
                add_child(n, "instruction", id=name, supported=bool_str(supported))
