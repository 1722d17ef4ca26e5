#!/usr/bin/env python3
"""
Simple test runner for gesture-config tests.

Runs the suite without requiring package installation, which is useful in
read-only environments.
"""

import sys
from pathlib import Path

# Add the project directory to Python path
project_dir = Path(__file__).parent
sys.path.insert(0, str(project_dir))

# Now run pytest
if __name__ == "__main__":
    import pytest

    # Pass through command line arguments
    args = sys.argv[1:] if len(sys.argv) > 1 else ["tests/", "-v"]

    sys.exit(pytest.main(args))
