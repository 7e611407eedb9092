# tests/conftest.py
# This file is part of Deducer - A Propositional Deduction Checker
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the deduction checker tests.

The configuration handles:
- Python path setup for module imports
- Common fixtures for premise sets and problem files
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages are importable before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import formula
        import solver
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def reference_premises():
    """Premises of the five-step reference chain, deciding ``j`` as valid.

    Returns:
        List[str]: Premise strings in input order
    """
    return ["(m ∧ ¬b) → j", "(f ∨ s) → m", "b → t", "f → ¬t", "f"]


@pytest.fixture
def premise_file(tmp_path, reference_premises):
    """Write the reference chain to a premise file with a deduction line.

    Returns:
        Path: Location of the written file
    """
    path = tmp_path / "premises.txt"
    path.write_text("\n".join(reference_premises + ["∴ j"]) + "\n", encoding="utf-8")
    return path
