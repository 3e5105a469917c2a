# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Decode recorded CPUID register dumps into a hardware report"""

__version__ = "1.0"
