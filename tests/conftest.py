"""Pytest configuration and shared fixtures for the adoctree test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import os
from pathlib import Path
from typing import Callable

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def write_adoc(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes an AsciiDoc file under ``tmp_path``.

    The helper takes a relative file name and the file content, creates any
    parent directories, and returns the written path.
    """

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_document() -> str:
    """A document exercising most block and inline constructs."""
    return """= User Guide
:product: adoctree
:version: 1.2

{product} version {version} parses *AsciiDoc* into a _typed_ tree.

== Installation [#install]

NOTE: Requires Python 3.10.

[source,bash]
----
pip install adoctree <1>
----
<1> Installs the latest release

== Features

* Blocks
** Lists
** Tables
* Inline `markup`

. First
. Second

CPU:: Central processing unit

[cols="<,^,>"]
|===
|Left |Center |Right
|2+|Wide |Edge
|===

[quote, Ada Lovelace]
____
The engine weaves algebraic patterns.
____

'''

See <<install,the installation section>> or https://example.com.
"""
