import os
import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def in_workspace(temp_workspace):
    """Run the test with the temporary directory as working directory."""
    previous = os.getcwd()
    os.chdir(temp_workspace)
    yield temp_workspace
    os.chdir(previous)


@pytest.fixture
def sample_tree(temp_workspace):
    """Create a small directory structure for testing."""
    root = temp_workspace / "runs"
    (root / "air04" / "logs").mkdir(parents=True)
    (root / "air04" / "solution.sol").write_text("obj 56137\n")
    return root
