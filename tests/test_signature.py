# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import pytest

from cpuid_inspector.synth.signature import Signature, extract_signature, processor_type, compose_eax

# (leaf 1 EAX, signature)
SIGNATURE_TEST_DATA = [
    (0x00000633, Signature(0x6, 0x3, 0x3)),
    (0x000306a9, Signature(0x6, 0x3a, 0x9)),
    (0x00020ff0, Signature(0xf, 0x2f, 0x0)),
    (0x00100f42, Signature(0x10, 0x4, 0x2)),
    (0x00a20f10, Signature(0x19, 0x21, 0x0)),
    (0x00000f29, Signature(0xf, 0x2, 0x9)),
]

@pytest.mark.parametrize("args", SIGNATURE_TEST_DATA, ids=lambda x: "%#010x" % x[0])
def test_extract_signature(args):
    eax, signature = args
    assert extract_signature(eax) == signature

@pytest.mark.parametrize("args", SIGNATURE_TEST_DATA, ids=lambda x: "%#010x" % x[0])
def test_compose_eax(args):
    eax, signature = args
    assert compose_eax(*signature) == eax

def test_processor_type():
    assert processor_type(0x00001632) == 1
    assert processor_type(0x000306a9) == 0

def test_str():
    assert str(Signature(0x6, 0x3a, 0x9)) == "family 0x6, model 0x3a, stepping 0x9"
