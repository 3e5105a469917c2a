"""
setup.py for the CPUID inspector and its associated libraries.
"""

from setuptools import setup

setup(
    name="cpuid_inspector",
    version="1.0",
    description="CPUID Inspector",
    long_description="cpuid-inspector decodes raw CPUID dumps into a report naming the vendor, model, microarchitecture and topology of every logical CPU.",
    license="BSD-3-Clause",
    python_requires=">=3.8",
    packages=[
        "cpuid_inspector",
        "cpuid_inspector.cpuparser",
        "cpuid_inspector.extractors",
        "cpuid_inspector.inspectorlib",
        "cpuid_inspector.schema",
        "cpuid_inspector.synth",
        "cpuid_inspector.synth.tables",
    ],
    package_data={
        "cpuid_inspector.schema": ["*.xsd"],
    },

    install_requires=[
        "lxml",
        "xmlschema",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cpuid-inspector = cpuid_inspector.cli:main",
        ],
    },
)
