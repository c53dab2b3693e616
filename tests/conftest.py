"""
Test configuration for the travel document codec test suite.
"""

import pytest

from icao_mrtd.documents import TD1Document, TD3Document
from tests.fixtures.specimens import SPECIMEN_HOLDER, TD1_SPECIMEN, TD3_SPECIMEN


# Test markers
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "mrz: mark test as MRZ related")
    config.addinivalue_line("markers", "seal: mark test as visible digital seal related")


# Collection settings
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "mrz" in item.name.lower():
            item.add_marker(pytest.mark.mrz)
        if "seal" in item.name.lower() or "vds" in str(item.fspath):
            item.add_marker(pytest.mark.seal)


@pytest.fixture
def td1_specimen():
    """TD1 document loaded from the ICAO specimen MRZ."""
    document = TD1Document()
    document.machine_readable_zone = TD1_SPECIMEN
    return document


@pytest.fixture
def td3_specimen():
    """TD3 document built field by field from the ICAO specimen holder."""
    return TD3Document(
        type_code="P",
        number="L898902C3",
        optional_data="ZE184226B",
        **SPECIMEN_HOLDER,
    )


@pytest.fixture
def td3_specimen_mrz():
    return TD3_SPECIMEN
