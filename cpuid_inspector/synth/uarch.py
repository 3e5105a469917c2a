# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

"""Microarchitecture decode.

A second set of first-match tables, independent of the marketing-name tables,
mapping a signature to the core codename, the family it belongs to and the
process node it was built on."""

from collections import namedtuple

from cpuid_inspector.synth.rules import F, FM, FMS, VendorTable, lookup
from cpuid_inspector.synth.vendor import Vendor

UArch = namedtuple("UArch", ["codename", "family_codename", "process_node", "core_name_is_family_name"])

def ua(family, node="", codename=None):
    if codename is None:
        return UArch(family, family, node, True)
    return UArch(codename, family, node, False)

intel_uarch = [
    FM(4, 0x0, ua("i486", "1000nm")),
    FM(4, 0x1, ua("i486", "1000nm")),
    FM(4, 0x2, ua("i486", "1000nm")),
    FM(4, 0x3, ua("i486", "800nm")),
    FM(4, 0x4, ua("i486", "800nm")),
    FM(4, 0x5, ua("i486", "800nm")),
    FM(4, 0x7, ua("i486", "800nm")),
    FM(4, 0x8, ua("i486", "600nm")),
    FM(4, 0x9, ua("i486", "600nm")),
    F(4, ua("i486")),
    FM(5, 0x0, ua("P5", "800nm")),
    FM(5, 0x1, ua("P5", "800nm")),
    FM(5, 0x2, ua("P5", "600nm", "P54C")),
    FM(5, 0x3, ua("P5", "600nm", "P24T")),
    FM(5, 0x4, ua("P5", "350nm", "P55C")),
    FM(5, 0x7, ua("P5", "350nm", "P54C")),
    FM(5, 0x8, ua("P5", "250nm", "Tillamook")),
    FM(5, 0x9, ua("Lakemont", "32nm")),
    FM(5, 0xa, ua("Lakemont", "32nm")),
    F(5, ua("P5")),
    FM(6, 0x0, ua("P6", "500nm", "Pentium Pro")),
    FM(6, 0x1, ua("P6", "350nm", "Pentium Pro")),
    FM(6, 0x3, ua("P6", "350nm", "Klamath")),
    FM(6, 0x4, ua("P6", "250nm", "Deschutes")),
    FM(6, 0x5, ua("P6", "250nm", "Deschutes")),
    FM(6, 0x6, ua("P6", "250nm", "Mendocino")),
    FM(6, 0x7, ua("P6", "250nm", "Katmai")),
    FM(6, 0x8, ua("P6", "180nm", "Coppermine")),
    FM(6, 0x9, ua("P6 Pentium M", "130nm", "Banias")),
    FM(6, 0xa, ua("P6", "180nm", "Cascades")),
    FM(6, 0xb, ua("P6", "130nm", "Tualatin")),
    FM(6, 0xd, ua("P6 Pentium M", "90nm", "Dothan")),
    FM(6, 0xe, ua("P6 Pentium M", "65nm", "Yonah")),
    FM(6, 0xf, ua("Core", "65nm", "Merom")),
    FM(6, 0x16, ua("Core", "65nm", "Merom-L")),
    FM(6, 0x17, ua("Core", "45nm", "Penryn")),
    FM(6, 0x1d, ua("Core", "45nm", "Dunnington")),
    FM(6, 0x1a, ua("Nehalem", "45nm")),
    FM(6, 0x1e, ua("Nehalem", "45nm", "Lynnfield")),
    FM(6, 0x1f, ua("Nehalem", "45nm", "Havendale")),
    FM(6, 0x2e, ua("Nehalem", "45nm", "Beckton")),
    FM(6, 0x25, ua("Nehalem", "32nm", "Westmere")),
    FM(6, 0x2c, ua("Nehalem", "32nm", "Westmere")),
    FM(6, 0x2f, ua("Nehalem", "32nm", "Westmere-EX")),
    FM(6, 0x2a, ua("Sandy Bridge", "32nm")),
    FM(6, 0x2d, ua("Sandy Bridge", "32nm")),
    FM(6, 0x3a, ua("Sandy Bridge", "22nm", "Ivy Bridge")),
    FM(6, 0x3e, ua("Sandy Bridge", "22nm", "Ivy Bridge")),
    FM(6, 0x3c, ua("Haswell", "22nm")),
    FM(6, 0x3f, ua("Haswell", "22nm")),
    FM(6, 0x45, ua("Haswell", "22nm")),
    FM(6, 0x46, ua("Haswell", "22nm")),
    FM(6, 0x3d, ua("Haswell", "14nm", "Broadwell")),
    FM(6, 0x47, ua("Haswell", "14nm", "Broadwell")),
    FM(6, 0x4f, ua("Haswell", "14nm", "Broadwell")),
    FM(6, 0x56, ua("Haswell", "14nm", "Broadwell")),
    FM(6, 0x4e, ua("Skylake", "14nm")),
    FM(6, 0x5e, ua("Skylake", "14nm")),
    FMS(6, 0x55, 0x5, ua("Skylake", "14nm", "Cascade Lake")),
    FMS(6, 0x55, 0x6, ua("Skylake", "14nm", "Cascade Lake")),
    FMS(6, 0x55, 0x7, ua("Skylake", "14nm", "Cascade Lake")),
    FMS(6, 0x55, 0xb, ua("Skylake", "14nm", "Cooper Lake")),
    FM(6, 0x55, ua("Skylake", "14nm")),
    FMS(6, 0x8e, 0x9, ua("Skylake", "14nm", "Kaby Lake")),
    FMS(6, 0x8e, 0xa, ua("Skylake", "14nm", "Coffee Lake")),
    FMS(6, 0x8e, 0xb, ua("Skylake", "14nm", "Whiskey Lake")),
    FMS(6, 0x8e, 0xc, ua("Skylake", "14nm", "Comet Lake")),
    FM(6, 0x8e, ua("Skylake", "14nm", "Kaby Lake")),
    FMS(6, 0x9e, 0x9, ua("Skylake", "14nm", "Kaby Lake")),
    FM(6, 0x9e, ua("Skylake", "14nm", "Coffee Lake")),
    FM(6, 0xa5, ua("Skylake", "14nm", "Comet Lake")),
    FM(6, 0xa6, ua("Skylake", "14nm", "Comet Lake")),
    FM(6, 0x66, ua("Palm Cove", "10nm", "Cannon Lake")),
    FM(6, 0x7d, ua("Sunny Cove", "10nm", "Ice Lake")),
    FM(6, 0x7e, ua("Sunny Cove", "10nm", "Ice Lake")),
    FM(6, 0x9d, ua("Sunny Cove", "10nm", "Ice Lake")),
    FM(6, 0x6a, ua("Sunny Cove", "10nm", "Ice Lake-SP")),
    FM(6, 0x6c, ua("Sunny Cove", "10nm", "Ice Lake-D")),
    FM(6, 0xa7, ua("Cypress Cove", "14nm", "Rocket Lake")),
    FM(6, 0x8c, ua("Willow Cove", "10nm SuperFin", "Tiger Lake")),
    FM(6, 0x8d, ua("Willow Cove", "10nm SuperFin", "Tiger Lake-H")),
    FM(6, 0x8a, ua("Sunny Cove + Tremont", "10nm", "Lakefield")),
    FM(6, 0x97, ua("Golden Cove + Gracemont", "Intel 7", "Alder Lake-S")),
    FM(6, 0x9a, ua("Golden Cove + Gracemont", "Intel 7", "Alder Lake-P")),
    FM(6, 0xbe, ua("Gracemont", "Intel 7", "Alder Lake-N")),
    FM(6, 0xb7, ua("Raptor Cove + Gracemont", "Intel 7", "Raptor Lake-S")),
    FM(6, 0xba, ua("Raptor Cove + Gracemont", "Intel 7", "Raptor Lake-P")),
    FM(6, 0xbf, ua("Raptor Cove + Gracemont", "Intel 7", "Raptor Lake-S")),
    FM(6, 0xaa, ua("Redwood Cove + Crestmont", "Intel 4", "Meteor Lake")),
    FM(6, 0xab, ua("Redwood Cove + Crestmont", "Intel 4", "Meteor Lake")),
    FM(6, 0xac, ua("Redwood Cove + Crestmont", "Intel 4", "Meteor Lake")),
    FM(6, 0xbd, ua("Lion Cove + Skymont", "TSMC N3B", "Lunar Lake")),
    FM(6, 0xb5, ua("Lion Cove + Skymont", "TSMC N3B", "Arrow Lake-U")),
    FM(6, 0xc5, ua("Lion Cove + Skymont", "TSMC N3B", "Arrow Lake-H")),
    FM(6, 0xc6, ua("Lion Cove + Skymont", "TSMC N3B", "Arrow Lake-S")),
    FM(6, 0xcc, ua("Cougar Cove + Darkmont", "Intel 18A", "Panther Lake")),
    FM(6, 0x8f, ua("Golden Cove", "Intel 7", "Sapphire Rapids")),
    FM(6, 0xcf, ua("Raptor Cove", "Intel 7", "Emerald Rapids")),
    FM(6, 0xad, ua("Redwood Cove", "Intel 3", "Granite Rapids")),
    FM(6, 0xae, ua("Redwood Cove", "Intel 3", "Granite Rapids-D")),
    FM(6, 0xaf, ua("Crestmont", "Intel 3", "Sierra Forest")),
    FM(6, 0xb6, ua("Crestmont", "Intel 4", "Grand Ridge")),
    FM(6, 0xdd, ua("Darkmont", "Intel 18A", "Clearwater Forest")),
    FM(6, 0x1c, ua("Bonnell", "45nm")),
    FM(6, 0x26, ua("Bonnell", "45nm", "Lincroft")),
    FM(6, 0x27, ua("Saltwell", "32nm", "Penwell")),
    FM(6, 0x35, ua("Saltwell", "32nm", "Cloverview")),
    FM(6, 0x36, ua("Saltwell", "32nm", "Cedarview")),
    FM(6, 0x37, ua("Silvermont", "22nm", "Bay Trail")),
    FM(6, 0x4a, ua("Silvermont", "22nm", "Merrifield")),
    FM(6, 0x4d, ua("Silvermont", "22nm", "Avoton")),
    FM(6, 0x5a, ua("Silvermont", "22nm", "Moorefield")),
    FM(6, 0x5d, ua("Silvermont", "28nm", "SoFIA")),
    FM(6, 0x4c, ua("Airmont", "14nm", "Cherry Trail")),
    FM(6, 0x75, ua("Airmont", "14nm", "Lightning Mountain")),
    FM(6, 0x5c, ua("Goldmont", "14nm", "Apollo Lake")),
    FM(6, 0x5f, ua("Goldmont", "14nm", "Denverton")),
    FM(6, 0x7a, ua("Goldmont Plus", "14nm", "Gemini Lake")),
    FM(6, 0x86, ua("Tremont", "10nm", "Snow Ridge")),
    FM(6, 0x96, ua("Tremont", "10nm", "Elkhart Lake")),
    FM(6, 0x9c, ua("Tremont", "10nm", "Jasper Lake")),
    FM(6, 0x57, ua("Knights Landing", "14nm")),
    FM(6, 0x85, ua("Knights Landing", "14nm", "Knights Mill")),
    F(7, ua("Itanium", "180nm", "Merced")),
    F(0xb, ua("Knights Corner", "22nm")),
    FM(0xf, 0x0, ua("NetBurst", "180nm", "Willamette")),
    FM(0xf, 0x1, ua("NetBurst", "180nm", "Willamette")),
    FM(0xf, 0x2, ua("NetBurst", "130nm", "Northwood")),
    FM(0xf, 0x3, ua("NetBurst", "90nm", "Prescott")),
    FM(0xf, 0x4, ua("NetBurst", "90nm", "Prescott")),
    FM(0xf, 0x6, ua("NetBurst", "65nm", "Cedar Mill")),
    F(0xf, ua("NetBurst")),
    FM(0x1f, 0x0, ua("Itanium 2", "180nm", "McKinley")),
    FM(0x1f, 0x1, ua("Itanium 2", "130nm", "Madison")),
    FM(0x1f, 0x2, ua("Itanium 2", "130nm", "Madison 9M")),
    F(0x20, ua("Itanium 2", "90nm", "Montecito")),
]

amd_uarch = [
    FM(4, 0xe, ua("Am5x86", "350nm")),
    FM(4, 0xf, ua("Am5x86", "350nm")),
    F(4, ua("Am486")),
    FM(5, 0x0, ua("K5", "350nm", "SSA5")),
    FM(5, 0x1, ua("K5", "350nm", "5k86")),
    FM(5, 0x2, ua("K5", "350nm", "5k86")),
    FM(5, 0x3, ua("K5", "350nm", "5k86")),
    FM(5, 0x5, ua("Geode", "180nm", "Geode GX")),
    FM(5, 0x6, ua("K6", "300nm")),
    FM(5, 0x7, ua("K6", "250nm", "Little Foot")),
    FM(5, 0x8, ua("K6", "250nm", "Chomper")),
    FM(5, 0x9, ua("K6", "250nm", "Sharptooth")),
    FM(5, 0xa, ua("Geode", "130nm", "Geode LX")),
    FM(5, 0xd, ua("K6", "180nm", "Sharptooth")),
    F(5, ua("K5/K6")),
    FM(6, 0x1, ua("K7", "250nm", "Argon")),
    FM(6, 0x2, ua("K7", "180nm", "Pluto/Orion")),
    FM(6, 0x3, ua("K7", "180nm", "Spitfire")),
    FM(6, 0x4, ua("K7", "180nm", "Thunderbird")),
    FM(6, 0x6, ua("K7", "180nm", "Palomino")),
    FM(6, 0x7, ua("K7", "180nm", "Morgan")),
    FM(6, 0x8, ua("K7", "130nm", "Thoroughbred")),
    FM(6, 0xa, ua("K7", "130nm", "Barton")),
    F(6, ua("K7")),
    FM(0xf, 0x4, ua("K8", "130nm", "ClawHammer")),
    FM(0xf, 0x5, ua("K8", "130nm", "SledgeHammer")),
    FM(0xf, 0x7, ua("K8", "130nm", "ClawHammer")),
    FM(0xf, 0x8, ua("K8", "130nm", "Odessa")),
    FM(0xf, 0xb, ua("K8", "130nm", "Newcastle")),
    FM(0xf, 0xc, ua("K8", "130nm", "Newcastle")),
    FM(0xf, 0xe, ua("K8", "130nm", "Newcastle")),
    FM(0xf, 0xf, ua("K8", "130nm", "Newcastle")),
    FM(0xf, 0x14, ua("K8", "90nm", "Winchester")),
    FM(0xf, 0x15, ua("K8", "90nm", "Troy")),
    FM(0xf, 0x17, ua("K8", "90nm", "Winchester")),
    FM(0xf, 0x18, ua("K8", "90nm", "Lancaster")),
    FM(0xf, 0x1b, ua("K8", "90nm", "Winchester")),
    FM(0xf, 0x1c, ua("K8", "90nm", "Palermo")),
    FM(0xf, 0x1f, ua("K8", "90nm", "Winchester")),
    FM(0xf, 0x21, ua("K8", "90nm", "Italy")),
    FM(0xf, 0x23, ua("K8", "90nm", "Toledo")),
    FM(0xf, 0x24, ua("K8", "90nm", "Lancaster")),
    FM(0xf, 0x25, ua("K8", "90nm", "Troy")),
    FM(0xf, 0x27, ua("K8", "90nm", "San Diego")),
    FM(0xf, 0x2b, ua("K8", "90nm", "Manchester")),
    FM(0xf, 0x2c, ua("K8", "90nm", "Venice")),
    FM(0xf, 0x2f, ua("K8", "90nm", "Venice")),
    FM(0xf, 0x41, ua("K8", "90nm", "Santa Rosa")),
    FM(0xf, 0x43, ua("K8", "90nm", "Windsor")),
    FM(0xf, 0x48, ua("K8", "90nm", "Taylor")),
    FM(0xf, 0x4b, ua("K8", "90nm", "Windsor")),
    FM(0xf, 0x4c, ua("K8", "90nm", "Keene")),
    FM(0xf, 0x4f, ua("K8", "90nm", "Orleans")),
    FM(0xf, 0x5d, ua("K8", "90nm", "Santa Ana")),
    FM(0xf, 0x5f, ua("K8", "90nm", "Orleans")),
    FM(0xf, 0x68, ua("K8", "65nm", "Tyler")),
    FM(0xf, 0x6b, ua("K8", "65nm", "Brisbane")),
    FM(0xf, 0x6c, ua("K8", "65nm", "Sparta")),
    FM(0xf, 0x6f, ua("K8", "65nm", "Lima")),
    FM(0xf, 0x7c, ua("K8", "65nm", "Sherman")),
    FM(0xf, 0x7f, ua("K8", "65nm", "Lima")),
    FM(0xf, 0xc1, ua("K8", "90nm", "Santa Rosa")),
    F(0xf, ua("K8")),
    FM(0x10, 0x2, ua("K10", "65nm", "Barcelona")),
    FM(0x10, 0x4, ua("K10", "45nm", "Shanghai")),
    FM(0x10, 0x5, ua("K10", "45nm", "Propus")),
    FM(0x10, 0x6, ua("K10", "45nm", "Regor")),
    FM(0x10, 0x8, ua("K10", "45nm", "Istanbul")),
    FM(0x10, 0x9, ua("K10", "45nm", "Magny-Cours")),
    FM(0x10, 0xa, ua("K10", "45nm", "Thuban")),
    F(0x10, ua("K10")),
    F(0x11, ua("K8 & K10 hybrid", "65nm", "Griffin")),
    F(0x12, ua("K10", "32nm", "Llano")),
    F(0x14, ua("Bobcat", "40nm")),
    FM(0x15, 0x0, ua("Bulldozer", "32nm")),
    FM(0x15, 0x1, ua("Bulldozer", "32nm")),
    FM(0x15, 0x2, ua("Piledriver", "32nm", "Vishera")),
    FM(0x15, 0x10, ua("Piledriver", "32nm", "Trinity")),
    FM(0x15, 0x13, ua("Piledriver", "32nm", "Richland")),
    FM(0x15, 0x30, ua("Steamroller", "28nm", "Kaveri")),
    FM(0x15, 0x38, ua("Steamroller", "28nm", "Godavari")),
    FM(0x15, 0x60, ua("Excavator", "28nm", "Carrizo")),
    FM(0x15, 0x65, ua("Excavator", "28nm", "Bristol Ridge")),
    FM(0x15, 0x70, ua("Excavator", "28nm", "Stoney Ridge")),
    F(0x15, ua("Bulldozer")),
    FM(0x16, 0x0, ua("Jaguar", "28nm", "Kabini")),
    FM(0x16, 0x30, ua("Puma", "28nm", "Beema")),
    F(0x16, ua("Jaguar")),
    FM(0x17, 0x1, ua("Zen", "14nm", "Summit Ridge")),
    FM(0x17, 0x8, ua("Zen+", "12nm", "Pinnacle Ridge")),
    FM(0x17, 0x11, ua("Zen", "14nm", "Raven Ridge")),
    FM(0x17, 0x18, ua("Zen+", "12nm", "Picasso")),
    FM(0x17, 0x20, ua("Zen", "14nm", "Dali")),
    FM(0x17, 0x31, ua("Zen 2", "7nm", "Rome")),
    FM(0x17, 0x47, ua("Zen 2", "7nm", "Cardinal")),
    FM(0x17, 0x60, ua("Zen 2", "7nm", "Renoir")),
    FM(0x17, 0x68, ua("Zen 2", "7nm", "Lucienne")),
    FM(0x17, 0x71, ua("Zen 2", "7nm", "Matisse")),
    FM(0x17, 0x90, ua("Zen 2", "7nm", "Van Gogh")),
    FM(0x17, 0xa0, ua("Zen 2", "6nm", "Mendocino")),
    F(0x17, ua("Zen")),
    FM(0x19, 0x0, ua("Zen 3", "7nm", "Milan")),
    FM(0x19, 0x1, ua("Zen 3", "7nm", "Milan")),
    FM(0x19, 0x8, ua("Zen 3", "7nm", "Chagall")),
    FM(0x19, 0x10, ua("Zen 4", "5nm", "Genoa")),
    FM(0x19, 0x11, ua("Zen 4", "5nm", "Genoa")),
    FM(0x19, 0x18, ua("Zen 4", "5nm", "Storm Peak")),
    FM(0x19, 0x21, ua("Zen 3", "7nm", "Vermeer")),
    FM(0x19, 0x40, ua("Zen 3+", "6nm", "Rembrandt")),
    FM(0x19, 0x44, ua("Zen 3+", "6nm", "Rembrandt-R")),
    FM(0x19, 0x50, ua("Zen 3", "7nm", "Cezanne")),
    FM(0x19, 0x61, ua("Zen 4", "5nm", "Raphael")),
    FM(0x19, 0x74, ua("Zen 4", "4nm", "Phoenix")),
    FM(0x19, 0x75, ua("Zen 4", "4nm", "Hawk Point")),
    FM(0x19, 0x78, ua("Zen 4", "4nm", "Phoenix 2")),
    FM(0x19, 0x7c, ua("Zen 4", "4nm", "Hawk Point 2")),
    FM(0x19, 0xa0, ua("Zen 4c", "5nm", "Bergamo")),
    F(0x19, ua("Zen 3")),
    FM(0x1a, 0x2, ua("Zen 5", "4nm", "Turin")),
    FM(0x1a, 0x11, ua("Zen 5c", "3nm", "Turin Dense")),
    FM(0x1a, 0x24, ua("Zen 5", "4nm", "Strix Point")),
    FM(0x1a, 0x44, ua("Zen 5", "4nm", "Granite Ridge")),
    FM(0x1a, 0x60, ua("Zen 5", "4nm", "Krackan Point")),
    FM(0x1a, 0x70, ua("Zen 5", "4nm", "Strix Halo")),
    F(0x1a, ua("Zen 5")),
]

hygon_uarch = [
    F(0x18, ua("Zen", "14nm", "Dhyana")),
]

via_uarch = [
    FM(5, 0x4, ua("WinChip", "350nm", "C6")),
    FM(5, 0x8, ua("WinChip", "250nm", "WinChip 2")),
    FM(5, 0x9, ua("WinChip", "250nm", "WinChip 3")),
    FM(6, 0x5, ua("Cyrix M2", "180nm", "Joshua")),
    FM(6, 0x6, ua("C3", "180nm", "Samuel")),
    FMS(6, 0x7, 0x0, ua("C3", "150nm", "Samuel 2")),
    FMS(6, 0x7, 0x1, ua("C3", "150nm", "Samuel 2")),
    FMS(6, 0x7, 0x3, ua("C3", "150nm", "Samuel 2")),
    FM(6, 0x7, ua("C3", "130nm", "Ezra")),
    FM(6, 0x8, ua("C3", "130nm", "Ezra-T")),
    FM(6, 0x9, ua("C3", "130nm", "Nehemiah")),
    FM(6, 0xa, ua("C7", "90nm", "Esther")),
    FM(6, 0xd, ua("C7", "90nm", "Esther")),
    FM(6, 0xf, ua("Isaiah", "65nm")),
    FM(6, 0x19, ua("ZhangJiang", "28nm")),
    FM(7, 0x1b, ua("WuDaoKou", "28nm")),
    FM(7, 0x3b, ua("LuJiaZui", "16nm")),
]

zhaoxin_uarch = [
    FM(6, 0xf, ua("Isaiah", "40nm")),
    FM(6, 0x19, ua("ZhangJiang", "28nm")),
    FM(7, 0x1b, ua("WuDaoKou", "28nm")),
    FM(7, 0x3b, ua("LuJiaZui", "16nm")),
    FM(7, 0x5b, ua("Century Avenue", "16nm")),
]

cyrix_uarch = [
    FM(4, 0x4, ua("MediaGX", "600nm")),
    FM(4, 0x9, ua("5x86", "650nm")),
    FM(5, 0x2, ua("M1", "650nm")),
    FM(5, 0x3, ua("M1", "650nm")),
    FM(5, 0x4, ua("MediaGX", "350nm", "GXm")),
    FM(6, 0x0, ua("M2", "350nm")),
    F(6, ua("Cyrix III", "180nm")),
]

transmeta_uarch = [
    F(5, ua("Crusoe", "130nm")),
    FM(0xf, 0x2, ua("Efficeon", "130nm")),
    F(0xf, ua("Efficeon", "90nm")),
]

uarch_tables = {
    Vendor.INTEL: VendorTable(intel_uarch, None),
    Vendor.AMD: VendorTable(amd_uarch, None),
    Vendor.HYGON: VendorTable(hygon_uarch, None),
    Vendor.VIA: VendorTable(via_uarch, None),
    Vendor.ZHAOXIN: VendorTable(zhaoxin_uarch, None),
    Vendor.CYRIX: VendorTable(cyrix_uarch, None),
    Vendor.TRANSMETA: VendorTable(transmeta_uarch, None),
    Vendor.UMC: VendorTable([F(4, ua("U5", "600nm"))], None),
    Vendor.NEXGEN: VendorTable([F(5, ua("Nx586", "500nm"))], None),
    Vendor.RISE: VendorTable([F(5, ua("mP6", "250nm"))], None),
    Vendor.SIS: VendorTable([F(5, ua("mP6", "180nm", "SiS 55x"))], None),
    Vendor.NSC: VendorTable([FM(5, 0x4, ua("Geode", "180nm", "GX1")), F(5, ua("Geode"))], None),
    Vendor.VORTEX: VendorTable([F(5, ua("Vortex86", "90nm")), F(6, ua("Vortex86", "65nm"))], None),
    Vendor.RDC: VendorTable([F(4, ua("IAD 100"))], None),
}

def decode_uarch(vendor, signature, predicates):
    table = uarch_tables.get(vendor)
    if table is None:
        return None
    return lookup(table, signature, predicates)

def format_uarch(synth, uarch):
    """Append "[codename] {family}, node" to a marketing name.

    The codename is left out when the core is named after its own family, so
    that e.g. Sandy Bridge is not printed twice."""
    if uarch is None:
        return synth
    parts = [synth] if synth else []
    if not uarch.core_name_is_family_name:
        parts.append(f"[{uarch.codename}]")
    parts.append(f"{{{uarch.family_codename}}}")
    text = " ".join(parts)
    if uarch.process_node:
        text += f", {uarch.process_node}"
    return text
