"""
Shared test fixtures and sample lines for usage-parser tests.

Sample lines are defined here as module-level constants so unit and
integration tests use the same inputs. If the wire layouts change,
update this file.
"""

import pytest

from usage_parser.config import ParserConfig

# ---------------------------------------------------------------------------
# Sample lines -- one per format, plus structurally invalid ones
# ---------------------------------------------------------------------------
DEFAULT_LINE = "123,500"
EXTENDED_LINE = "7734,DMCC01,310,2048,99001"
HEX_LINE = "45546,deadbeef00000000cafe0102"
HEX_PAYLOAD = "deadbeef00000000cafe0102"

NO_SEPARATOR_LINE = "12345"
BAD_HEX_LINE = "16,DEADBEEF00000000CAFE0102"  # uppercase nibbles
SHORT_EXTENDED_LINE = "14,DMCC,310,2048"
MULTI_TOKEN_DEFAULT_LINE = "77,1,2,3,4"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def threaded_config() -> ParserConfig:
    """Config that always routes batches through the thread pool."""
    return ParserConfig(max_workers=4, parallel_threshold=1)


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs full batches through parse())",
    )
