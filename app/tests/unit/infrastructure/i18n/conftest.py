"""Feature-level fixtures for i18n system tests.

Provides translation directories and loaders for translation scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import YAMLTranslationLoader
from tests.factories.inflection import make_inflection_data


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - incident.en-US.yml
    - incident.fr-FR.yml
    - inflections.en-US.yml
    - role.en-US.yml
    - role.fr-FR.yml
    """
    en_us_incident = {
        "incident": {
            "created": "Incident {{incident_id}} created",
            "resolved": "Incident {{incident_id}} resolved",
            "assigned": "@{f:She|m:He|They} took {{incident_id}}",
            "invalid_status": "Invalid status: {{status}}",
        }
    }
    with open(tmp_path / "incident.en-US.yml", "w") as f:
        yaml.dump(en_us_incident, f)

    with open(tmp_path / "inflections.en-US.yml", "w") as f:
        yaml.dump({"i18n": {"inflections": make_inflection_data()}}, f)

    en_us_role = {
        "role": {
            "created": "Role {{role_name}} created",
            "deleted": "Role {{role_name}} deleted",
            "invalid_name": "Role names must start with 'role_'",
        }
    }
    with open(tmp_path / "role.en-US.yml", "w") as f:
        yaml.dump(en_us_role, f)

    fr_fr_incident = {
        "incident": {
            "created": "Incident {{incident_id}} créé",
            "resolved": "Incident {{incident_id}} résolu",
            "assigned": "@{f:Elle|m:Il|Iel} a pris {{incident_id}}",
            "invalid_status": "Statut invalide: {{status}}",
        }
    }
    with open(tmp_path / "incident.fr-FR.yml", "w") as f:
        yaml.dump(fr_fr_incident, f, allow_unicode=True)

    fr_fr_role = {
        "role": {
            "created": "Rôle {{role_name}} créé",
            "deleted": "Rôle {{role_name}} supprimé",
            "invalid_name": "Les noms de rôle doivent commencer par 'role_'",
        }
    }
    with open(tmp_path / "role.fr-FR.yml", "w") as f:
        yaml.dump(fr_fr_role, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)
