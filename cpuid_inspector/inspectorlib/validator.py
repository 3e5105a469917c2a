# Copyright (C) 2022 Intel Corporation.
#
# SPDX-License-Identifier: BSD-3-Clause
#

import os
import lxml.etree as etree
import logging
import xmlschema

SEVERITY_ATTR = "{https://projectacrn.org}severity"
DOCUMENTATION_TAG = "{http://www.w3.org/2001/XMLSchema}documentation"

logging_fn = {
    "error": logging.error,
    "warning": logging.warning,
    "info": logging.info,
}

default_schema = os.path.join(os.path.dirname(os.path.dirname(os.path.realpath(__file__))), "schema", "report.xsd")

def load_schema(xsd_path=default_schema):
    schema_etree = etree.parse(xsd_path)
    schema_etree.xinclude()
    return xmlschema.XMLSchema11(schema_etree)

def validate_report(xsd_path, report_etree):
    """Log every schema violation of the report and return how many are errors or warnings.

    Assertions carry their own severity and message in their annotation; any
    other violation means the report is malformed and is logged as an error."""
    schema = load_schema(xsd_path)

    count = 0
    for error in schema.iter_errors(report_etree):
        anno = getattr(error.validator, "annotation", None)
        if anno is not None and anno.elem.get(SEVERITY_ATTR) is not None:
            severity = anno.elem.get(SEVERITY_ATTR)
            description = anno.elem.find(DOCUMENTATION_TAG).text.strip()
        else:
            severity = "error"
            description = f"Malformed report: {error.reason}"
        logging_fn[severity](description)
        if severity in ["error", "warning"]:
            count += 1

    return count
