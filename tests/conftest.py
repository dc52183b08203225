"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local annoscope package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of annoscope modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("annoscope"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def _restore_default_version() -> Iterator[None]:
    """Undo process-wide default version changes made by a test."""
    yield
    from annoscope.config.constants import DEFAULT_VERSION
    from annoscope.context.facts import set_default_version

    set_default_version(DEFAULT_VERSION)
