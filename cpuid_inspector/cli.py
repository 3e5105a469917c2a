#!/usr/bin/env python3
#
# Copyright (C) 2021-2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import sys, os
import logging
import tempfile
import lxml.etree
import argparse
from tqdm import tqdm
from importlib import import_module

from cpuid_inspector.inspectorlib import validator
from cpuid_inspector.inspectorlib.dumpfile import DumpFormatError, load_dump, parse_cpu_ids
from cpuid_inspector.synth import decode_cpu

script_dir = os.path.dirname(os.path.realpath(__file__))

logger = logging.getLogger()

def setup_logging(loglevel):
    """Send log records to stderr and to a scratch file.

    The scratch file is read back by summary_loginfo once the report is
    written, so that the problems found in a long dump are listed together."""
    level = loglevel.upper()
    tmpfile = tempfile.NamedTemporaryFile(delete=True)
    logger.setLevel(level)
    formatter = logging.Formatter('%(asctime)s %(levelname)s: %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
    for handler in [logging.FileHandler(str(tmpfile.name)), logging.StreamHandler()]:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return tmpfile

# Severity, color of the listed records and what the records mean for the report
summary_sections = [
    ("WARNING", "1;33", "Some CPUs could not be named or counted exactly. The rest of their entries are still valid."),
    ("ERROR", "1;31", "Some report entries contradict each other. Recapture the dump before trusting the affected CPUs."),
    ("CRITICAL", "1;31", "No report was written. Fix the dump or the command line and run the decoder again."),
]

def summary_loginfo(report_xml, tmpfile):
    length = 120
    records = {severity: [] for severity, _, _ in summary_sections}
    with open(str(tmpfile.name), "r", encoding='UTF-8') as log_lines:
        for line in log_lines:
            for severity in records:
                if f" {severity}: " in line:
                    records[severity].append(line.strip('\n'))
                    break

    for severity, color, note in summary_sections:
        if len(records[severity]) == 0:
            continue
        print("="*length)
        print(f"\033[1;37m{severity}\033[0m")
        print(f"{note}\n")
        for line in records[severity]:
            print(f"\033[{color}m{line}\033[0m")

    print("="*length)
    if len(records["CRITICAL"]) == 0:
        print(f"\033[1;32mSUCCESS: CPUID report {os.path.basename(report_xml)} saved to {os.path.dirname(os.path.abspath(report_xml))}\033[0m\n")
    tmpfile.close()

def select_cpus(snapshots, cpu_list):
    if not cpu_list:
        return list(snapshots.values())
    wanted = parse_cpu_ids(cpu_list)
    missing = [cpu for cpu in wanted if cpu not in snapshots]
    if missing:
        logger.warning(f"CPUs {missing} are not present in the dump and are skipped.")
    return [snapshots[cpu] for cpu in wanted if cpu in snapshots]

def build_report(args, decoded, pbar=None):
    """Run the numbered extractors in order over the decoded CPUs"""
    report_etree = lxml.etree.ElementTree(lxml.etree.Element("cpus", source=os.path.basename(args.dump)))

    extractors_path = os.path.join(script_dir, "extractors")
    extractors = [f for f in os.listdir(extractors_path) if f[:2].isdigit()]
    for extractor in sorted(extractors):
        module_name = os.path.splitext(extractor)[0]
        module = import_module(f"cpuid_inspector.extractors.{module_name}")
        module.extract(args, report_etree, decoded)
        if pbar is not None:
            pbar.update(5)

    return report_etree

def generate(args, report_xml, tmpfile):
    print(f"Decoding CPUID dump {args.dump}...")

    with tqdm(total=100) as pbar:
        try:
            snapshots = load_dump(args.dump)
        except (DumpFormatError, OSError) as e:
            logger.critical(e)
            sys.exit(1)
        pbar.update(10)

        selected = select_cpus(snapshots, args.cpu)
        if len(selected) == 0:
            logger.critical(f"No CPU to decode in {args.dump}.")
            sys.exit(1)

        decoded = []
        for snapshot in selected:
            decoded.append(decode_cpu(snapshot))
            pbar.update(50 / len(selected))

        report_etree = build_report(args, decoded, pbar)

        # Validate the report against XSD assertions
        count = validator.validate_report(os.path.join(script_dir, 'schema', 'report.xsd'), report_etree)
        if count == 0:
            logger.info("All report checks passed.")

        report_etree.write(report_xml, pretty_print=True)

        summary_loginfo(report_xml, tmpfile)
        pbar.update(20)

def main(argv=None):
    parser = argparse.ArgumentParser(description="Decode a raw CPUID dump into an XML processor report.")
    parser.add_argument("dump", help="the CPUID dump to decode, as written by `cpuid -r`")
    parser.add_argument("--out", help="the name of the report file")
    parser.add_argument("--loglevel", default="warning", help="choose log level, e.g. debug, info, warning, error or critical")
    parser.add_argument("--cpu", default=None, help="decode only the listed CPUs, e.g. 0 or 0-3,6")
    args = parser.parse_args(argv)
    try:
        tmpfile = setup_logging(args.loglevel)
    except ValueError:
        print(f"{args.loglevel} is not a valid log level")
        print(f"Valid log levels (non case-sensitive): critical, error, warning, info, debug")
        sys.exit(1)

    report_xml = args.out if args.out else f"{args.dump}.xml"
    generate(args, report_xml, tmpfile)

if __name__ == "__main__":
    main()
