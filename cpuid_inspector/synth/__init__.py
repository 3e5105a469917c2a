# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

from cpuid_inspector.synth.decoder import decode_cpu, DecodedOutput
