# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import logging

from cpuid_inspector.extractors.helpers import add_child, get_node, hex_str

def extract_signature(cpu_node, signature):
    if signature is None:
        logging.warning(f"CPU {cpu_node.get('id')} does not report leaf 1. Its family, model and stepping are unknown.")
        return
    add_child(cpu_node, "signature",
              family=hex_str(signature.family),
              model=hex_str(signature.model),
              stepping=hex_str(signature.stepping))

def extract(args, report_etree, decoded):
    root_node = report_etree.getroot()
    for cpu in decoded:
        assert get_node(report_etree, f"//cpu[@id='{cpu.cpu_id}']") is None, \
            f"Internal error: CPU {cpu.cpu_id} is decoded twice"
        cpu_node = add_child(root_node, "cpu", id=str(cpu.cpu_id))
        add_child(cpu_node, "vendor", cpu.vendor.value)
        extract_signature(cpu_node, cpu.signature)
        if cpu.brand:
            add_child(cpu_node, "brand", cpu.brand)
        if cpu.override_brand:
            add_child(cpu_node, "override_brand", cpu.override_brand)
        if cpu.hypervisor:
            add_child(cpu_node, "hypervisor", cpu.hypervisor)
