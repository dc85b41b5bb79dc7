# Copyright (C) 2023 Anthony Harrison
# SPDX-License-Identifier: Apache-2.0

import configparser
import json
import os
import pathlib
import re

import toml

from license4project.defaults import AuthorFacts, Defaults, ProjectFacts


class ProjectScanner:
    """
    Gather the author, project and license details of the current project.

    Sources in priority order are the global configuration, the project
    manifest (pyproject.toml or package.json) and the user's git
    configuration.
    """

    MANIFESTS = ["pyproject.toml", "package.json"]
    AUTHOR_PATTERN = re.compile(r"^([^<(]*)(?:<([^>]*)>)?\s*(?:\(([^)]*)\))?")

    def __init__(self, config=None, project_dir=None, home_dir=None, debug=False):
        self.config = config if config is not None else {}
        self.project_dir = pathlib.Path(project_dir or os.getcwd())
        self.home_dir = home_dir
        self.debug = debug
        self.manifest = self.process_manifest()

    def get_home_dir(self):
        if self.home_dir is not None:
            return pathlib.Path(self.home_dir)
        for variable in ["HOME", "HOMEPATH", "USERPROFILE"]:
            if os.environ.get(variable):
                return pathlib.Path(os.environ[variable])
        return pathlib.Path.home()

    def _has_project_table(self, filePath):
        # Tool-only pyproject.toml files do not describe the project
        try:
            with open(filePath, encoding="utf-8") as file:
                return "project" in toml.load(file)
        except (OSError, ValueError):
            # Reported when the manifest is processed
            return True

    def get_manifest_file(self):
        for name in self.MANIFESTS:
            filePath = self.project_dir / name
            # Check path exists and is a valid file
            if filePath.exists() and filePath.is_file():
                if filePath.suffix == ".toml" and not self._has_project_table(filePath):
                    if self.debug:
                        print(f"No [project] table in {filePath}")
                    continue
                return filePath
        return None

    def process_manifest(self):
        filePath = self.get_manifest_file()
        if filePath is None:
            return None
        if self.debug:
            print(f"Process manifest {filePath}")
        try:
            if filePath.suffix == ".toml":
                return self.process_pyproject(filePath)
            return self.process_package_json(filePath)
        except (OSError, ValueError) as ex:
            # toml and json decode errors are both ValueErrors
            print(f"[ERROR] Unable to process {filePath.name} - {ex}")
        return None

    def _parse_author(self, author):
        # npm style "Name <email> (url)" or {"name": ..., "email": ...}
        if isinstance(author, dict):
            return AuthorFacts(author.get("name"), author.get("email"))
        if isinstance(author, str) and len(author.strip()) > 0:
            match = self.AUTHOR_PATTERN.match(author.strip())
            return AuthorFacts(match.group(1).strip(), (match.group(2) or "").strip())
        return None

    def _parse_license(self, license):
        # Legacy npm {"type": ...} and pyproject {text = ...} forms
        if isinstance(license, dict):
            license = license.get("type") or license.get("text")
        return license if isinstance(license, str) else ""

    def process_pyproject(self, filePath):
        with open(filePath, encoding="utf-8") as file:
            pyproject_data = toml.load(file)
        project = pyproject_data.get("project", {})
        if not isinstance(project, dict):
            raise ValueError("[project] is not a table")
        author = None
        authors = project.get("authors") or []
        if isinstance(authors, list) and len(authors) > 0:
            author = self._parse_author(authors[0])
        license = self._parse_license(project.get("license", ""))
        url = ""
        urls = project.get("urls") or {}
        if not isinstance(urls, dict):
            urls = {}
        for label, link in urls.items():
            if label.lower() == "homepage":
                url = link
                break
        else:
            if len(urls) > 0:
                url = list(urls.values())[0]
        return {
            "path": filePath,
            "name": project.get("name", ""),
            "description": project.get("description", ""),
            "author": author,
            "license": license,
            "url": url,
        }

    def process_package_json(self, filePath):
        with open(filePath, encoding="utf-8") as file:
            package_data = json.load(file)
        if not isinstance(package_data, dict):
            raise ValueError("package.json is not an object")
        return {
            "path": filePath,
            "name": package_data.get("name", ""),
            "description": package_data.get("description", ""),
            "author": self._parse_author(package_data.get("author")),
            "license": self._parse_license(package_data.get("license", "")),
            "url": package_data.get("homepage", ""),
        }

    def process_gitconfig(self):
        gitPath = self.get_home_dir() / ".gitconfig"
        if not (gitPath.exists() and gitPath.is_file()):
            return None
        config = configparser.ConfigParser(
            strict=False, allow_no_value=True, interpolation=None
        )
        try:
            config.read(gitPath, encoding="utf-8")
        except configparser.Error as ex:
            print(f"[ERROR] Unable to process {gitPath} - {ex}")
            return None
        if "user" in config.sections():
            # Values may be quoted
            name = (config["user"].get("name") or "").strip('"')
            email = (config["user"].get("email") or "").strip('"')
            return AuthorFacts(name, email)
        return None

    def has_manifest(self):
        return self.manifest is not None

    def get_author(self):
        if self.config.get("author"):
            return AuthorFacts(self.config["author"], self.config.get("email"))
        if self.manifest is not None and self.manifest["author"] is not None:
            return self.manifest["author"]
        author = self.process_gitconfig()
        if author is not None:
            return author
        return AuthorFacts()

    def get_project(self):
        if self.manifest is not None:
            return ProjectFacts(
                self.manifest["name"],
                self.manifest["description"],
                url=self.manifest["url"],
            )
        # Fall back to the name of the directory the tool is installed in
        name = pathlib.Path(__file__).resolve().parents[0].name
        return ProjectFacts(name, "")

    def get_license(self):
        if self.config.get("license"):
            return self.config["license"]
        if self.manifest is not None:
            return self.manifest["license"]
        return ""

    def get_defaults(self):
        defaults = Defaults(self.get_license(), self.get_author(), self.get_project())
        if self.debug:
            print(f"License: {defaults.license}")
            print(f"Author: {defaults.author}")
            print(f"Project: {defaults.project}")
        return defaults
