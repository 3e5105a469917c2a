# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Ordered first-match decode rules.

A vendor table is a plain list of rule records. The scanner walks the list
from the top and returns the payload of the first record whose key matches;
it never looks further for a "better" match. Tables therefore list the
stepping- and predicate-qualified records of a family/model group before the
catch-all records of the same group.

The predicate of a qualified record is either a single predicate or a tuple of
predicates that must all hold, e.g. (Q.DESKTOP_CORE2_DUO, Q.L2_6M)."""

from collections import namedtuple

def predicate_holds(predicate, predicates):
    if isinstance(predicate, tuple):
        return all(p in predicates for p in predicate)
    return predicate in predicates

class FamilyOnly(namedtuple("FamilyOnly", ["family", "result"])):
    __slots__ = ()

    def matches(self, signature, predicates):
        return signature.family == self.family

class FamilyModel(namedtuple("FamilyModel", ["family", "model", "result"])):
    __slots__ = ()

    def matches(self, signature, predicates):
        return signature.family == self.family and signature.model == self.model

class FamilyModelPredicate(namedtuple("FamilyModelPredicate", ["family", "model", "predicate", "result"])):
    __slots__ = ()

    def matches(self, signature, predicates):
        return signature.family == self.family and signature.model == self.model \
            and predicate_holds(self.predicate, predicates)

class Exact(namedtuple("Exact", ["family", "model", "stepping", "result"])):
    __slots__ = ()

    def matches(self, signature, predicates):
        return tuple(signature) == (self.family, self.model, self.stepping)

class ExactWithPredicate(namedtuple("ExactWithPredicate", ["family", "model", "stepping", "predicate", "result"])):
    __slots__ = ()

    def matches(self, signature, predicates):
        return tuple(signature) == (self.family, self.model, self.stepping) \
            and predicate_holds(self.predicate, predicates)

def F(family, result):
    return FamilyOnly(family, result)

def FM(family, model, result):
    return FamilyModel(family, model, result)

def FMQ(family, model, predicate, result):
    return FamilyModelPredicate(family, model, predicate, result)

def FMS(family, model, stepping, result):
    return Exact(family, model, stepping, result)

def FMSQ(family, model, stepping, predicate, result):
    return ExactWithPredicate(family, model, stepping, predicate, result)

VendorTable = namedtuple("VendorTable", ["rules", "default"])

def first_match(rules, signature, predicates, default=None):
    """Return the payload of the first rule matching signature, or default"""
    if signature is None:
        return default
    for rule in rules:
        if rule.matches(signature, predicates):
            return rule.result
    return default

def lookup(table, signature, predicates):
    return first_match(table.rules, signature, predicates, table.default)
