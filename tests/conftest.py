import pytest
import tempfile
from pathlib import Path
import sys

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def abc_block():
    """The single padded block for the message "abc"."""
    return b"abc" + b"\x80" + b"\x00" * 52 + (24).to_bytes(8, "big")
