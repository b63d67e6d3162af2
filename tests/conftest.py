"""Pytest fixtures for fzgrep tests."""

import logging
import tempfile
from collections.abc import Callable, Generator, Iterator
from pathlib import Path

import pytest

from fzgrep.config.schema import FzgrepConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_files(temp_dir: Path) -> Path:
    """Create a small source tree for traversal tests."""
    (temp_dir / "README.md").write_text("# Test Project\n\nThis is a test.\n")
    (temp_dir / "main.py").write_text("def main():\n    print('Hello')\n")
    (temp_dir / "config.toml").write_text("[settings]\nname = 'test'\n")
    (temp_dir / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (temp_dir / ".hidden").write_text("def hidden_main(): pass\n")

    subdir = temp_dir / "src"
    subdir.mkdir()
    (subdir / "app.py").write_text("# Application code\ndef run_main():\n    pass\n")
    (subdir / "notes.txt").write_text("main notes\n")

    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    (git_dir / "HEAD").write_text("ref: refs/heads/main\n")

    return temp_dir


@pytest.fixture
def deny_listing(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Make directories with a given name fail to list, like chmod 000."""
    denied: set[str] = set()
    real_iterdir = Path.iterdir

    def iterdir(self: Path) -> Iterator[Path]:
        if self.name in denied:
            raise PermissionError(13, "Permission denied", str(self))
        return real_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)
    return denied.add


@pytest.fixture
def default_config() -> FzgrepConfig:
    """Get default configuration."""
    return FzgrepConfig()


@pytest.fixture(autouse=True)
def isolated_environment(
    temp_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Keep tests away from the user's config and environment."""
    monkeypatch.setenv("FZGREP_CONFIG", str(temp_dir / "no-such-config.toml"))
    for name in ("FZGREP_LOG_LEVEL", "FZGREP_FORMAT", "FZGREP_NO_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    yield
    fzgrep_logger = logging.getLogger("fzgrep")
    fzgrep_logger.handlers.clear()
    fzgrep_logger.setLevel(logging.NOTSET)
    fzgrep_logger.propagate = True


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Create a test config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""
[context]
before = 1
after = 2

[match]
line_numbers = true
source_names = "never"
top = 5

[output]
default_format = "json"
color = false
""")
    return config_path
