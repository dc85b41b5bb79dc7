# Copyright (C) 2023 Anthony Harrison
# SPDX-License-Identifier: Apache-2.0

import argparse
import sys
import textwrap
from collections import ChainMap

from license4project.config import load_config
from license4project.license import LicenseScanner
from license4project.output import LicenseOutput
from license4project.scanner import ProjectScanner
from license4project.template import LicenseTemplate
from license4project.version import VERSION

# CLI processing


def list_licenses(license_scanner, **kwargs):
    for key, name in license_scanner.get_license_list():
        print(f"{key}: {name}")
    return 0


def show_status(license_scanner, defaults, license_output, **kwargs):
    license_id = defaults.license
    if len(license_id) == 0:
        print("No license defined")
        return 0
    print(f"Current license: {license_id}")
    valid = license_scanner.valid(license_id)
    print(f"Valid SPDX: {valid}")
    if valid:
        print(f"OSI approved: {license_scanner.osi_approved(license_id)}")
    if license_output.file_exists():
        print(f"License file exists: {license_output.filename}")
    else:
        print("[WARNING] License file does not exist!")
    return 0


COMMANDS = {"list": list_licenses, "status": show_status}


def main(argv=None):

    argv = argv or sys.argv
    app_name = "license4project"
    parser = argparse.ArgumentParser(
        prog=app_name,
        description=textwrap.dedent(
            """
            License4Project selects an open source license by SPDX identifier,
            name or alias and writes the license file for the project,
            completing the copyright details from the project manifest or
            git configuration.
            """
        ),
    )
    parser.add_argument(
        "query",
        nargs="?",
        default="",
        help="license identifier, name or alias; or one of the commands "
        + ", ".join(COMMANDS),
    )
    input_group = parser.add_argument_group("Input")
    input_group.add_argument(
        "--all",
        action="store_true",
        help="show all licenses matching the query",
    )
    input_group.add_argument(
        "-a",
        "--author",
        action="store",
        default="",
        help="name of copyright holder",
    )
    input_group.add_argument(
        "-e",
        "--email",
        action="store",
        default="",
        help="email of copyright holder",
    )
    input_group.add_argument(
        "-p",
        "--project",
        action="store",
        default="",
        help="name of project",
    )
    input_group.add_argument(
        "--description",
        action="store",
        default="",
        help="description of project",
    )
    input_group.add_argument(
        "-y",
        "--year",
        action="store",
        type=int,
        default=0,
        help="copyright year(s) (default: current year)",
    )
    input_group.add_argument(
        "--url",
        action="store",
        default="",
        help="project url",
    )

    output_group = parser.add_argument_group("Output")
    output_group.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=False,
        help="add debug information",
    )
    output_group.add_argument(
        "-o",
        "--output-file",
        action="store",
        default="",
        help="license filename (default: existing LICENSE or COPYING file)",
    )
    output_group.add_argument(
        "--stdout",
        action="store_true",
        default=False,
        help="output license text to console instead of file",
    )
    output_group.add_argument(
        "--header",
        action="store_true",
        default=False,
        help="output license header notice for source files",
    )
    output_group.add_argument(
        "-f",
        "--force",
        action="store_true",
        default=False,
        help="overwrite existing license file",
    )
    output_group.add_argument(
        "--update-manifest",
        action="store_true",
        default=False,
        help="set license in pyproject.toml or package.json",
    )

    parser.add_argument("-V", "--version", action="version", version=VERSION)

    defaults = {
        "query": "",
        "all": False,
        "author": "",
        "email": "",
        "project": "",
        "description": "",
        "year": 0,
        "url": "",
        "debug": False,
        "output_file": "",
        "stdout": False,
        "header": False,
        "force": False,
        "update_manifest": False,
    }

    raw_args = parser.parse_args(argv[1:])
    args = {key: value for key, value in vars(raw_args).items() if value}
    args = ChainMap(args, defaults)

    config = load_config()
    project_scanner = ProjectScanner(config, debug=args["debug"])
    project_defaults = project_scanner.get_defaults()
    project_defaults.update(args)
    license_scanner = LicenseScanner(debug=args["debug"])
    license_output = LicenseOutput(
        config, filename=args["output_file"], debug=args["debug"]
    )

    if args["debug"]:
        print("Query:", args["query"])
        print("Show all:", args["all"])
        print("Output file:", license_output.filename)
        print("Console:", args["stdout"])
        print("Header:", args["header"])
        print("Force:", args["force"])
        print("Update manifest:", args["update_manifest"])

    command = COMMANDS.get(args["query"].lower())
    if command is not None:
        return command(
            license_scanner=license_scanner,
            defaults=project_defaults,
            license_output=license_output,
        )

    query = args["query"] or project_defaults.license
    if len(query) == 0:
        print("[ERROR] No license specified")
        return -1

    matches = license_scanner.get_matches(query, args["all"])
    if args["all"]:
        for key in matches:
            print(f"{key}: {license_scanner.licenses[key]['name']}")
        return 0
    if len(matches) == 0:
        print(f"[ERROR] No license found for {query}")
        return -1
    if len(matches) > 1:
        print(f"[ERROR] {query} matches {len(matches)} licenses:")
        for key in matches:
            print(f"  {key}: {license_scanner.licenses[key]['name']}")
        return -1

    license_id = matches[0]
    lic = license_scanner.get_details(
        license_id, full_text=True, template=LicenseTemplate(project_defaults)
    )
    if args["debug"]:
        print(f"Selected {license_id}: {lic['name']}")

    if args["header"]:
        if lic.get("header") is None:
            print(f"[ERROR] No header notice available for {license_id}")
            return -1
        print(lic["header"])
        return 0

    if lic.get("full") is None:
        # Reason already reported
        return -1

    if args["stdout"]:
        license_output.write(lic["full"], out_type="console")
    elif license_output.file_exists() and not args["force"]:
        print(
            f"[ERROR] {license_output.filename.name} already exists. Use --force to overwrite"
        )
        return -1
    else:
        license_output.write(lic["full"])

    if args["update_manifest"]:
        manifest_file = project_scanner.get_manifest_file()
        if manifest_file is None:
            print("[WARNING] No manifest found to update")
        else:
            license_output.update_manifest_license(manifest_file, license_id).result()
    license_output.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
