import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection even
# when pytest is invoked without the pyproject configuration.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from infrastructure.inflection import InflectionRegistry, MethodRegistry
from tests.factories.inflection import make_inflection_data


@pytest.fixture
def inflection_data():
    """Gender and person kinds as stored under i18n.inflections."""
    return make_inflection_data()


@pytest.fixture
def inflection_registry(inflection_data):
    """InflectionRegistry built from the sample gender/person kinds."""
    return InflectionRegistry.from_data(inflection_data, locale="xx")


@pytest.fixture
def method_declarations():
    """Fresh MethodRegistry isolated from the module-level one."""
    return MethodRegistry()
