# Copyright (C) 2023 Anthony Harrison
# SPDX-License-Identifier: Apache-2.0

""" Set up Output of license text """

import json
import os
import pathlib
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor

import tomlkit


class OutputManager:
    """Helper class for managing output to file and console."""

    def __init__(self, out_type="file", filename=None):
        self.out_type = out_type
        self.filename = filename

    def file_out(self, message):
        with open(self.filename, "w", encoding="utf-8") as file_handle:
            file_handle.write(message)

    def console_out(self, message):
        print(message)

    def show(self, message):
        if self.out_type == "file":
            self.file_out(message)
        else:
            self.console_out(message)


class LicenseOutput:
    """Output manager for the license file and project manifest."""

    LICENSE_NAMES = ["LICENSE", "COPYING"]
    LICENSE_EXTENSIONS = ["", ".md", ".txt"]
    DEFAULT_FILE_NAME = "LICENSE"

    def __init__(self, config=None, project_dir=None, filename="", debug=False):
        self.config = config if config is not None else {}
        self.project_dir = pathlib.Path(project_dir or os.getcwd())
        self.debug = debug
        if filename != "":
            self.filename = pathlib.Path(filename)
        else:
            self.filename = self.get_license_file()
        self.executor = None

    def get_license_file(self):
        existing = None
        for name in self.LICENSE_NAMES:
            for ext in self.LICENSE_EXTENSIONS:
                filePath = self.project_dir / f"{name}{ext}"
                if filePath.exists():
                    existing = filePath
        if existing is not None:
            return existing
        default_name = self.config.get("default_file_name") or self.DEFAULT_FILE_NAME
        return self.project_dir / default_name

    def file_exists(self):
        return self.filename.exists()

    def write(self, text, out_type="file"):
        try:
            OutputManager(out_type, self.filename).show(text)
        except OSError as ex:
            print(f"[ERROR] Unable to write license file {self.filename} - {ex}")
            return False
        if out_type == "file":
            print(f"{self.filename.name} created")
        return True

    def _patch_manifest(self, filePath, license_id):
        try:
            if filePath.suffix == ".toml":
                with open(filePath, encoding="utf-8") as file:
                    manifest = tomlkit.parse(file.read())
                if not isinstance(manifest.get("project"), Mapping):
                    print(f"[ERROR] No [project] table in {filePath.name} to update")
                    return False
                manifest["project"]["license"] = license_id
                with open(filePath, "w", encoding="utf-8") as file:
                    file.write(tomlkit.dumps(manifest))
            else:
                with open(filePath, encoding="utf-8") as file:
                    manifest = json.load(file)
                if not isinstance(manifest, dict):
                    print(f"[ERROR] {filePath.name} is not a JSON object")
                    return False
                manifest["license"] = license_id
                with open(filePath, "w", encoding="utf-8") as file:
                    file.write(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n")
        except (OSError, ValueError) as ex:
            print(f"[ERROR] Unable to update {filePath.name} - {ex}")
            return False
        print(f"{filePath.name} updated!")
        return True

    def update_manifest_license(self, manifest_file, license_id):
        """
        Set the license field of the manifest in the background.

        Returns a Future which the caller may wait on; the result is True
        if the manifest was saved.
        """
        if self.executor is None:
            self.executor = ThreadPoolExecutor(max_workers=1)
        if self.debug:
            print(f"Update {manifest_file} license to {license_id}")
        return self.executor.submit(
            self._patch_manifest, pathlib.Path(manifest_file), license_id
        )

    def close(self):
        if self.executor is not None:
            self.executor.shutdown(wait=True)
            self.executor = None
