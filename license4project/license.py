# Copyright (C) 2023 Anthony Harrison
# SPDX-License-Identifier: Apache-2.0

import json
import os
import re

from lib4sbom.license import LicenseScanner as SPDXLicenseList


def load_reference_licenses():
    # SPDX license list bundled with lib4sbom
    reference = {}
    for lic in SPDXLicenseList().licenses["licenses"]:
        see_also = lic.get("seeAlso") or []
        reference[lic["licenseId"]] = {
            "name": lic["name"],
            "osiApproved": lic.get("isOsiApproved", False),
            "deprecated": lic.get("isDeprecatedLicenseId", False),
            "url": see_also[0] if len(see_also) > 0 else None,
        }
    return reference


def load_override_licenses(filename=None):
    if filename is None:
        license_dir, _ = os.path.split(__file__)
        filename = os.path.join(license_dir, "license_data", "licenses.json")
    try:
        with open(filename, encoding="utf-8") as licfile:
            return json.load(licfile)
    except (OSError, ValueError) as ex:
        print(f"[ERROR] Unable to load license aliases from {filename} - {ex}")
        return {}


def build_catalog(reference, override):
    """
    Merge the reference license metadata with the override/alias metadata.

    Every identifier from either source is kept. Override fields which are
    set replace the reference value, field by field.
    """
    if not isinstance(reference, dict) or not isinstance(override, dict):
        raise TypeError("License metadata sources must be mappings")
    catalog = {}
    for key in list(reference) + [k for k in override if k not in reference]:
        entry = dict(reference.get(key) or {})
        for field, value in (override.get(key) or {}).items():
            if value is not None:
                entry[field] = value
        catalog[key] = entry
    return catalog


class LicenseScanner:

    TEXT_DIRECTORY = "text"

    def __init__(self, catalog=None, text_dir=None, debug=False):
        if catalog is None:
            catalog = build_catalog(
                load_reference_licenses(), load_override_licenses()
            )
        self.licenses = catalog
        if text_dir is None:
            license_dir, _ = os.path.split(__file__)
            text_dir = os.path.join(license_dir, "license_data", self.TEXT_DIRECTORY)
        self.text_dir = text_dir
        self.debug = debug

    def get_matches(self, query, return_all=False):
        # Comparisons ignore case of provided query
        needle = query.lower()
        matches = []
        description_matches = []
        for key, lic in self.licenses.items():
            if needle == key.lower():
                if not return_all:
                    return [key]
                matches.append(key)
                continue
            alias = lic.get("alias")
            if alias and re.search(alias, needle, re.IGNORECASE):
                if not return_all:
                    return [key]
                matches.append(key)
                continue
            if needle in key.lower():
                matches.append(key)
            else:
                assert (
                    lic.get("name") is not None
                ), f"No name for {key} (alias entry without SPDX license)"
                if needle in lic["name"].lower():
                    description_matches.append(key)
        # Description matches are listed first
        if return_all or len(matches) == 0:
            return description_matches + matches
        return matches

    def find_license(self, query):
        matches = self.get_matches(query)
        return matches[0] if len(matches) == 1 else None

    def get_license_list(self):
        licenses = []
        for key in sorted(self.licenses):
            name = self.licenses[key].get("name")
            assert name is not None, f"No name for {key} (alias entry without SPDX license)"
            licenses.append((key, name))
        return licenses

    def valid(self, license_id):
        return license_id in self.licenses

    def osi_approved(self, license_id):
        return self.licenses.get(license_id, {}).get("osiApproved", False)

    def get_license_text(self, license_id):
        filename = os.path.join(self.text_dir, f"{license_id}.txt")
        if self.debug:
            print(f"Reading license text from {filename}")
        with open(filename, encoding="utf-8") as textfile:
            return textfile.read()

    def get_details(self, license_id, full_text=False, template=None):
        lic = {"key": license_id, "valid": self.valid(license_id)}
        lic.update(self.licenses.get(license_id, {}))
        if full_text and lic["valid"]:
            try:
                text = self.get_license_text(license_id)
                if template is None:
                    lic["full"] = text
                elif lic.get("header"):
                    lic["header"] = template.extract_header(lic, text)
                    lic["full"] = text
                else:
                    lic["full"] = template.apply_placeholders(lic, text)
            except (OSError, ValueError) as ex:
                print(f"[ERROR] Unable to read {license_id} license text - {ex}")
                lic.pop("header", None)
        return lic
