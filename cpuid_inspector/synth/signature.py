# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Family/model/stepping signatures"""

from collections import namedtuple

from cpuid_inspector.inspectorlib.bitfields import getbits

class Signature(namedtuple('Signature', ['family', 'model', 'stepping'])):
    __slots__ = ()

    def __str__(self):
        return f"family {self.family:#x}, model {self.model:#x}, stepping {self.stepping:#x}"

def extract_signature(eax):
    """Decode a leaf 1 (or 0x80000001) EAX value.

    The extended fields are always added in: hardware leaves them zero
    whenever the base family does not call for them."""
    family = getbits(eax, 11, 8) + getbits(eax, 27, 20)
    model = getbits(eax, 7, 4) + (getbits(eax, 19, 16) << 4)
    stepping = getbits(eax, 3, 0)
    return Signature(family, model, stepping)

def processor_type(eax):
    """Leaf 1 EAX[13:12]: 0 = OEM, 1 = OverDrive, 2 = dual processor"""
    return getbits(eax, 13, 12)

def compose_eax(family, model, stepping, processor_type=0):
    """Inverse of extract_signature, mostly useful for building synthetic leaves."""
    if family >= 0xf:
        base_family, ext_family = 0xf, family - 0xf
    else:
        base_family, ext_family = family, 0
    return ((ext_family << 20) | ((model >> 4) << 16) | (processor_type << 12)
            | (base_family << 8) | ((model & 0xf) << 4) | stepping)
