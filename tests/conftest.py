"""Shared test fixtures for env-printer tests."""

import logging
from types import MappingProxyType

import pytest

from envprinter.core.scan.resources import MemoryResourceWalker
from envprinter.utils.config import EnvPrinterSettings


APPLICATION_PROPERTIES = """
# Datasource
spring.datasource.url=jdbc:postgresql://${DB_HOST}:${DB_PORT:5432}/app
spring.datasource.username=${env.DB_USER}
spring.datasource.password=${DB_PASSWORD:}
server.port=${server.port:8080}
app.temp-dir=${TEMP}
"""

APPLICATION_YAML = """
app:
  region: ${AWS_REGION:us-east-1}
  api-key: ${sys.PAYMENT_API_KEY}
  name: ${app.name}
"""


class CountingWalker(MemoryResourceWalker):
    """Memory walker that counts how often it is walked."""

    def __init__(self, files: dict[str, str]):
        super().__init__(files)
        self.walk_calls = 0

    def walk(self, globs):
        self.walk_calls += 1
        return super().walk(globs)


@pytest.fixture
def sample_files() -> dict[str, str]:
    """Application config files keyed by name."""
    return {
        "application.properties": APPLICATION_PROPERTIES,
        "application-prod.yml": APPLICATION_YAML,
    }


@pytest.fixture
def memory_walker(sample_files: dict[str, str]) -> MemoryResourceWalker:
    """In-memory walker over the sample files."""
    return MemoryResourceWalker(sample_files)


@pytest.fixture
def counting_walker(sample_files: dict[str, str]) -> CountingWalker:
    """In-memory walker that records walk calls."""
    return CountingWalker(sample_files)


@pytest.fixture
def sample_environ() -> MappingProxyType:
    """A process environment with project, OS and shell variables."""
    return MappingProxyType(
        {
            "DB_HOST": "db.internal",
            "DB_USER": "app",
            "AWS_REGION": "eu-west-1",
            "JAVA_HOME": "/usr/lib/jvm/java-17",
            "PATH": "/usr/bin:/bin",
            "HOME": "/home/app",
            "TEMP": "/tmp",
            "LC_ALL": "C.UTF-8",
            "PROCESSOR_ARCHITECTURE": "AMD64",
        }
    )


@pytest.fixture
def project_settings() -> EnvPrinterSettings:
    """Settings for project-only reporting with values shown."""
    return EnvPrinterSettings(project_only=True, show_values=True)


@pytest.fixture
def app_config_dir(tmp_path):
    """A directory holding application config files on disk."""
    (tmp_path / "application.properties").write_text(APPLICATION_PROPERTIES)
    (tmp_path / "application-prod.yml").write_text(APPLICATION_YAML)
    (tmp_path / "bootstrap.properties").write_text("x=${NOT_SCANNED}\n")
    return tmp_path


@pytest.fixture(autouse=True)
def reset_envprinter_logger():
    """Undo configure_logging() calls made by CLI tests so caplog sees records."""
    yield
    logger = logging.getLogger("envprinter")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
