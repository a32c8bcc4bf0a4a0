"""Unit test configuration.

Unit tests should be fast and isolated - no database, network or Redis.
"""

import pytest


# Mark all tests in this directory as unit tests
pytestmark = pytest.mark.unit
