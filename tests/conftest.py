from __future__ import annotations

import pytest

from spdx_expressions.registry import LicenseRegistry, default_registry


def pytest_report_header() -> str:
    registry = default_registry()
    return f"SPDX license list: {registry.version} ({len(registry)} licenses)"


@pytest.fixture
def registry() -> LicenseRegistry:
    """A small registry, independent of the bundled license list."""
    return LicenseRegistry(
        [
            {"id": "MIT", "name": "MIT License"},
            {"id": "Apache-2.0", "name": "Apache License 2.0", "or_later": True},
            {"id": "GPL-2.0", "deprecated": True, "or_later": True},
            {"id": "GPL-2.0-only"},
            {"id": "GPL-2.0-or-later"},
        ],
        [
            {"id": "Classpath-exception-2.0"},
            {"id": "Nokia-Qt-exception-1.1", "deprecated": True},
        ],
        {
            "apache2": ["Apache-2.0"],
            "dual": ["MIT", "GPL-2.0-only"],
        },
        version="test",
    )
