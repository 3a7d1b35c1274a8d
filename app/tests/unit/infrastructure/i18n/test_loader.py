"""Tests for infrastructure.i18n.loader module."""

import pytest
import yaml

from infrastructure.i18n import YAMLTranslationLoader
from infrastructure.i18n.models import TranslationKey


class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    def test_loader_initialization(self, temp_translations_dir):
        """YAMLTranslationLoader initializes with valid directory."""
        loader = YAMLTranslationLoader(temp_translations_dir)
        assert loader.translations_dir == temp_translations_dir
        assert loader.use_cache is True
        assert loader.cache == {}

    def test_loader_initialization_nonexistent_directory(self, tmp_path):
        """YAMLTranslationLoader raises ValueError for missing directory."""
        with pytest.raises(ValueError):
            YAMLTranslationLoader(tmp_path / "nonexistent")

    def test_load_single_locale(self, temp_translations_dir):
        """load() reads translations for a single locale."""
        loader = YAMLTranslationLoader(temp_translations_dir)
        catalog = loader.load("en-US")

        assert catalog.locale == "en-US"
        assert catalog.loaded_at is not None
        assert "incident" in catalog.messages
        assert "role" in catalog.messages

    def test_load_all_namespaces(self, temp_translations_dir):
        """load() loads all namespaces from YAML files."""
        loader = YAMLTranslationLoader(temp_translations_dir)
        catalog = loader.load("en-US")

        assert (
            catalog.get_message(TranslationKey.from_string("incident.created"))
            == "Incident {{incident_id}} created"
        )
        assert (
            catalog.get_message(TranslationKey.from_string("role.created"))
            == "Role {{role_name}} created"
        )

    def test_load_inflection_data(self, temp_translations_dir):
        """Inflection kinds are loaded like any nested message tree."""
        loader = YAMLTranslationLoader(temp_translations_dir)
        catalog = loader.load("en-US")
        gender = catalog.lookup(TranslationKey.from_string("i18n.inflections.gender"))
        assert gender["masculine"] == "@m"

    def test_load_french_locale(self, temp_translations_dir):
        """load() loads French translations correctly."""
        loader = YAMLTranslationLoader(temp_translations_dir)
        catalog = loader.load("fr-FR")

        assert catalog.locale == "fr-FR"
        message = catalog.get_message(TranslationKey.from_string("incident.created"))
        assert "créé" in message

    def test_load_locale_file_without_domain(self, tmp_path):
        """<locale>.yml files are picked up too."""
        with open(tmp_path / "xx.yml", "w") as f:
            yaml.dump({"welcome": "Dear @{m:Sir|All}!"}, f)

        loader = YAMLTranslationLoader(tmp_path)
        assert "xx" in loader.load_all()
        catalog = loader.load("xx")
        assert catalog.get_message(TranslationKey.from_string("welcome")) == (
            "Dear @{m:Sir|All}!"
        )

    def test_load_missing_locale_raises_error(self, tmp_path):
        """load() raises FileNotFoundError for a locale without files."""
        with open(tmp_path / "test.en-US.yml", "w") as f:
            yaml.dump({"test": {"msg": "test"}}, f)

        loader = YAMLTranslationLoader(tmp_path)
        with pytest.raises(FileNotFoundError):
            loader.load("fr-FR")

    def test_load_does_not_match_locale_prefixes(self, tmp_path):
        """A file for en-US does not count as a file for US."""
        with open(tmp_path / "test.en-US.yml", "w") as f:
            yaml.dump({"test": {"msg": "test"}}, f)

        loader = YAMLTranslationLoader(tmp_path)
        with pytest.raises(FileNotFoundError):
            loader.load("US")

    def test_load_caches_results(self, temp_translations_dir):
        """load() caches catalog when use_cache=True."""
        loader = YAMLTranslationLoader(temp_translations_dir, use_cache=True)
        assert loader.load("en-US") is loader.load("en-US")

    def test_load_no_cache_separate_instances(self, temp_translations_dir):
        """load() returns separate instances when use_cache=False."""
        loader = YAMLTranslationLoader(temp_translations_dir, use_cache=False)
        catalog1 = loader.load("en-US")
        catalog2 = loader.load("en-US")

        assert catalog1 is not catalog2
        assert catalog1.messages == catalog2.messages

    def test_load_all_locales(self, temp_translations_dir):
        """load_all() loads catalogs for all detected locales."""
        loader = YAMLTranslationLoader(temp_translations_dir)
        catalogs = loader.load_all()

        assert set(catalogs) == {"en-US", "fr-FR"}

    def test_load_all_skips_unrecognized_names(self, temp_translations_dir):
        with open(temp_translations_dir / "notes.draft_v2.yml", "w") as f:
            yaml.dump({"draft": {"msg": "x"}}, f)

        loader = YAMLTranslationLoader(temp_translations_dir)
        assert set(loader.load_all()) == {"en-US", "fr-FR"}

    def test_load_all_empty_directory(self, tmp_path):
        """load_all() raises ValueError for directory with no YAML files."""
        loader = YAMLTranslationLoader(tmp_path, use_cache=False)
        with pytest.raises(ValueError):
            loader.load_all()

    def test_load_all_populates_cache(self, temp_translations_dir):
        """load_all() populates cache when enabled."""
        loader = YAMLTranslationLoader(temp_translations_dir, use_cache=True)
        loader.load_all()

        assert set(loader.cache) == {"en-US", "fr-FR"}

    def test_files_of_a_locale_are_deep_merged(self, tmp_path):
        """Two files contributing to the same namespace are merged."""
        with open(tmp_path / "a.xx.yml", "w") as f:
            yaml.dump({"i18n": {"inflections": {"gender": {"m": "male"}}}}, f)
        with open(tmp_path / "b.xx.yml", "w") as f:
            yaml.dump({"i18n": {"inflections": {"person": {"i": "I"}}}}, f)

        catalog = YAMLTranslationLoader(tmp_path).load("xx")
        assert set(catalog.messages["i18n"]["inflections"]) == {"gender", "person"}

    def test_clear_cache(self, temp_translations_dir):
        """clear_cache() removes cached catalogs."""
        loader = YAMLTranslationLoader(temp_translations_dir, use_cache=True)
        loader.load("en-US")
        assert len(loader.cache) > 0

        loader.clear_cache()
        assert len(loader.cache) == 0

    def test_load_invalid_yaml_raises_error(self, tmp_path):
        """load() raises ValueError for invalid YAML."""
        with open(tmp_path / "invalid.en-US.yml", "w") as f:
            f.write("invalid: yaml: content: [")

        loader = YAMLTranslationLoader(tmp_path)
        with pytest.raises(ValueError):
            loader.load("en-US")

    def test_load_non_dict_yaml_skipped(self, tmp_path):
        """load() skips YAML content that isn't a dict."""
        with open(tmp_path / "invalid.en-US.yml", "w") as f:
            yaml.dump(["item1", "item2"], f)

        catalog = YAMLTranslationLoader(tmp_path).load("en-US")
        assert catalog.messages == {}
