"""Pytest configuration and fixtures."""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from sinkchain.config import Settings


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def sink_path(temp_dir: Path) -> Path:
    """Path for a leaf sink file that does not exist yet."""
    return temp_dir / "t.txt"


@pytest.fixture
def override_settings(temp_dir: Path) -> Generator[Settings, None, None]:
    """Provide isolated SinkChain settings scoped to tests."""

    import sinkchain.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    config_dir = temp_dir / "appconfig"
    config_dir.mkdir(parents=True, exist_ok=True)

    settings = config_module.Settings(
        config_dir=config_dir,
        transform_mode="reversible",
    )

    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings


@pytest.fixture
def label_settings(override_settings: Settings) -> Generator[Settings, None, None]:
    """Settings selecting the cosmetic marker transforms."""

    import sinkchain.config as config_module

    settings = override_settings.model_copy(update={"transform_mode": "label"})
    config_module._settings = settings
    yield settings
