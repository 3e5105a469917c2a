# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import lxml.etree

def add_child(element, tag, text=None, **kwargs):
    child = lxml.etree.Element(tag)
    child.text = text
    for k,v in kwargs.items():
        child.set(k, v)
    element.append(child)
    return child

def get_node(etree, xpath):
    result = etree.xpath(xpath)
    assert len(result) <= 1, \
        "Internal error: cannot get texts from multiple nodes at a time.  " \
        "Rerun the CPUID inspector with `--loglevel debug` and attach the full logs when reporting this issue."
    return result[0] if len(result) == 1 else None

def get_cpu_node(report_etree, cpu_id):
    n = get_node(report_etree, f"//cpu[@id='{cpu_id}']")
    assert n is not None, f"Internal error: no report node for CPU {cpu_id}"
    return n

def hex_str(value):
    return f"{value:#x}"

def bool_str(value):
    return "true" if value else "false"
