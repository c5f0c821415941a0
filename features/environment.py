"""
Behave environment configuration

This file is run before and after test scenarios to set up and tear down
the test environment.
"""

import os
import shutil
import sys
import tempfile
from pathlib import Path

# Add project root to Python path so we can import the sbom package
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


def before_scenario(context, scenario):
    """Give each scenario its own package directory"""
    context.package_dir = Path(tempfile.mkdtemp(prefix="sbom-"))
    context.generator = None
    context.result = None


def after_scenario(context, scenario):
    """Remove the scenario's package directory"""
    shutil.rmtree(context.package_dir, ignore_errors=True)
