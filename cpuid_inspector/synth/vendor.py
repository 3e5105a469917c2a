# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""CPU and hypervisor vendor identification"""

from enum import Enum

class Vendor(Enum):
    INTEL = "Intel"
    AMD = "AMD"
    CYRIX = "Cyrix"
    VIA = "VIA"
    TRANSMETA = "Transmeta"
    UMC = "UMC"
    NEXGEN = "NexGen"
    RISE = "Rise"
    SIS = "SiS"
    NSC = "NSC"
    VORTEX = "Vortex"
    RDC = "RDC"
    HYGON = "Hygon"
    ZHAOXIN = "Zhaoxin"
    UNKNOWN = "Unknown"

vendor_strings = {
    "GenuineIntel": Vendor.INTEL,
    "AuthenticAMD": Vendor.AMD,
    "AMDisbetter!": Vendor.AMD,
    "CyrixInstead": Vendor.CYRIX,
    "CentaurHauls": Vendor.VIA,
    "GenuineTMx86": Vendor.TRANSMETA,
    "TransmetaCPU": Vendor.TRANSMETA,
    "UMC UMC UMC ": Vendor.UMC,
    "NexGenDriven": Vendor.NEXGEN,
    "RiseRiseRise": Vendor.RISE,
    "SiS SiS SiS ": Vendor.SIS,
    "Geode by NSC": Vendor.NSC,
    "Vortex86 SoC": Vendor.VORTEX,
    "Genuine  RDC": Vendor.RDC,
    "HygonGenuine": Vendor.HYGON,
    "  Shanghai  ": Vendor.ZHAOXIN,
}

def identify_vendor(vendor_string):
    """Map the 12-character leaf 0 string to a Vendor; anything unrecognized is Vendor.UNKNOWN."""
    return vendor_strings.get(vendor_string, Vendor.UNKNOWN)

hypervisor_strings = {
    "VMwareVMware": "VMware",
    "KVMKVMKVM": "KVM",
    "Linux KVM Hv": "KVM (Hyper-V emulation)",
    "Microsoft Hv": "Microsoft Hyper-V",
    "XenVMMXenVMM": "Xen HVM",
    "ACRNACRNACRN": "ACRN",
    "prl hyperv": "Parallels",
    " lrpepyh  vr": "Parallels",
    "VBoxVBoxVBox": "VirtualBox",
    "bhyve bhyve": "bhyve",
    "TCGTCGTCGTCG": "QEMU TCG",
    "QNXQVMBSQG": "QNX Hypervisor",
    "VirtualApple": "Apple Rosetta 2",
    "Jailhouse": "Jailhouse",
    "EVMMEVMMEVMM": "Intel EVMM",
    "SRESRESRESRE": "Lockheed Martin LMHS",
    "HAXMHAXMHAXM": "Intel HAXM",
    "UnisysSpar64": "Unisys s-Par",
    "GenuineIntel": "Intel Simics",
    "MicrosoftXTA": "Microsoft x86-to-ARM",
}

def identify_hypervisor(signature):
    """Name the hypervisor behind a leaf 0x40000000 signature.

    Unrecognized signatures are returned verbatim so that they still show up in
    the report, unless they are not printable ASCII, in which case the leaf
    holds no signature at all."""
    if signature in hypervisor_strings:
        return hypervisor_strings[signature]
    signature = signature.strip()
    if not signature or not signature.isascii() or not signature.isprintable():
        return None
    return hypervisor_strings.get(signature, signature)
