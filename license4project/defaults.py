# Copyright (C) 2023 Anthony Harrison
# SPDX-License-Identifier: Apache-2.0

from datetime import datetime


class AuthorFacts:
    def __init__(self, name="", email=""):
        self.name = name or ""
        self.email = email or ""

    def __repr__(self):
        return f"AuthorFacts(name={self.name!r}, email={self.email!r})"


class ProjectFacts:
    def __init__(self, name="", description="", years=None, url=""):
        self.name = name or ""
        self.description = description or ""
        self.years = years if years is not None else datetime.now().year
        self.url = url or ""

    def __repr__(self):
        return (
            f"ProjectFacts(name={self.name!r}, description={self.description!r}, "
            f"years={self.years!r}, url={self.url!r})"
        )


class Defaults:
    """
    Values substituted into license text.

    Built once at startup and passed to whichever component needs it.
    update() applies user supplied overrides, ignoring options which are
    not set.
    """

    def __init__(self, license="", author=None, project=None):
        self.license = license or ""
        self.author = author if author is not None else AuthorFacts()
        self.project = project if project is not None else ProjectFacts()

    def update(self, options):
        if options.get("license"):
            self.license = options["license"]
        if options.get("author"):
            self.author.name = options["author"]
        if options.get("email"):
            self.author.email = options["email"]
        if options.get("year"):
            self.project.years = options["year"]
        if options.get("project"):
            self.project.name = options["project"]
        if options.get("description"):
            self.project.description = options["description"]
        if options.get("url"):
            self.project.url = options["url"]
