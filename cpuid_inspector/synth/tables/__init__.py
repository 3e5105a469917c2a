# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth.vendor import Vendor
from cpuid_inspector.synth.tables import amd, cyrix, hygon, intel, minor, transmeta, via, zhaoxin

synth_tables = {
    Vendor.INTEL: intel.table,
    Vendor.AMD: amd.table,
    Vendor.CYRIX: cyrix.table,
    Vendor.VIA: via.table,
    Vendor.TRANSMETA: transmeta.table,
    Vendor.UMC: minor.umc_table,
    Vendor.NEXGEN: minor.nexgen_table,
    Vendor.RISE: minor.rise_table,
    Vendor.SIS: minor.sis_table,
    Vendor.NSC: minor.nsc_table,
    Vendor.VORTEX: minor.vortex_table,
    Vendor.RDC: minor.rdc_table,
    Vendor.HYGON: hygon.table,
    Vendor.ZHAOXIN: zhaoxin.table,
}
