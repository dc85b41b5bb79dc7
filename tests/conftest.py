# Copyright (C) 2023 Anthony Harrison
# SPDX-License-Identifier: Apache-2.0

import pytest

from license4project.defaults import AuthorFacts, Defaults, ProjectFacts
from license4project.license import LicenseScanner, build_catalog

REFERENCE = {
    "MIT": {"name": "MIT License", "osiApproved": True},
    "BSD-2-Clause": {"name": 'BSD 2-Clause "Simplified" License', "osiApproved": True},
    "BSD-3-Clause": {"name": 'BSD 3-Clause "New" or "Revised" License', "osiApproved": True},
    "0BSD": {"name": "BSD Zero Clause License", "osiApproved": True},
    "ISC": {"name": "ISC License (BSD style)", "osiApproved": True},
    "Unlicense": {"name": "The Unlicense public domain dedication", "osiApproved": True},
    "MIT-0": {"name": "MIT No Attribution", "osiApproved": True},
    "Apache-2.0": {"name": "Apache License 2.0", "osiApproved": True},
    "Beerware": {"name": "Beerware License", "osiApproved": False},
}

OVERRIDE = {
    "MIT": {
        "alias": "expat",
        "match": "Copyright \\(c\\) <year> <copyright holders>",
        "replace": "Copyright (c) $years $author",
    },
    "BSD-3-Clause": {"alias": "new bsd"},
    "Apache-2.0": {
        "alias": "^apache$",
        "header": "Copyright \\[yyyy\\][\\s\\S]*under the License\\.",
        "headerClean": "^ {3}",
        "match": "Copyright \\[yyyy\\] \\[name of copyright owner\\]",
        "replace": "Copyright $years $author",
    },
}


@pytest.fixture
def catalog():
    return build_catalog(REFERENCE, OVERRIDE)


@pytest.fixture
def text_dir(tmp_path):
    directory = tmp_path / "text"
    directory.mkdir()
    (directory / "MIT.txt").write_text(
        "MIT License\n\nCopyright (c) <year> <copyright holders>\n\nPermission is hereby granted.\n"
    )
    (directory / "Apache-2.0.txt").write_text(
        "Apache License\n\nTerms.\n\n"
        "   APPENDIX\n\n"
        "   Copyright [yyyy] [name of copyright owner]\n\n"
        "   Licensed under the Apache License.\n"
        "   See the License for the specific language governing permissions and\n"
        "   limitations under the License.\n"
    )
    (directory / "Unlicense.txt").write_text(
        "This is free and unencumbered software released into the public domain.\n"
    )
    return directory


@pytest.fixture
def license_scanner(catalog, text_dir):
    return LicenseScanner(catalog=catalog, text_dir=str(text_dir))


@pytest.fixture
def defaults():
    return Defaults(
        "MIT",
        AuthorFacts("Jane Doe", "jane@example.com"),
        ProjectFacts("demo", "A demo project", 2021, "https://example.com/demo"),
    )
