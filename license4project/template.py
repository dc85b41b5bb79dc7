# Copyright (C) 2023 Anthony Harrison
# SPDX-License-Identifier: Apache-2.0

import re


class HeaderNotFoundError(ValueError):
    pass


class LicenseTemplate:
    """
    Substitute project and author details into license boilerplate.
    """

    PLACEHOLDER = re.compile(r"\$(years|author|email|url|project)")

    def __init__(self, defaults):
        self.defaults = defaults

    def get_values(self):
        author = self.defaults.author
        project = self.defaults.project
        return {
            "years": str(project.years),
            "author": author.name,
            "email": author.email,
            "url": project.url,
            "project": f"{project.name} - {project.description}",
        }

    def render(self, replacer):
        # Single pass so substituted values are never substituted again
        values = self.get_values()
        return self.PLACEHOLDER.sub(lambda m: values[m.group(1)], replacer)

    def apply_placeholders(self, lic, text):
        matcher = lic.get("match")
        if not matcher:
            return text
        replacement = self.render(lic.get("replace") or "")
        return re.sub(matcher, lambda m: replacement, text)

    def extract_header(self, lic, text):
        header = re.search(lic["header"], text)
        if header is None:
            raise HeaderNotFoundError(f"Header not found in {lic.get('key')} text")
        header = header.group(0)
        if lic.get("headerClean"):
            header = re.sub(lic["headerClean"], "", header, flags=re.MULTILINE)
        return self.apply_placeholders(lic, header)
