"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def default_config():
    """Provide a default configuration for testing."""
    from evonet.config import Config
    return Config()


@pytest.fixture
def sample_network(default_config):
    """Create a sample 2-[3, 2]-1 network for testing."""
    from evonet.network import Network
    return Network(2, 1, [3, 2], default_config)
