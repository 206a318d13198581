"""
Test suite for odt_composer project.

This module contains all unit tests for the odt_composer package.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
