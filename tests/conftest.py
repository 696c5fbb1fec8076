from pathlib import Path

import pytest
from click.testing import CliRunner

from rds_ui.core.config import RdsConfig
from tests.test_utils.registry_helpers import init_project, write_package_json


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A consumer project root with package.json but no rds-ui.json."""
    write_package_json(tmp_path)
    return tmp_path


@pytest.fixture
def initialized_config(tmp_path: Path) -> RdsConfig:
    """Default rds-ui.json written to tmp_path."""
    return init_project(tmp_path)
