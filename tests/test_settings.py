from src.config.settings import DEFAULT_SETTINGS, ClassifierSettings


class TestClassifierSettings:
    def test_defaults(self):
        assert DEFAULT_SETTINGS.reference_year_latest == 2030
        assert DEFAULT_SETTINGS.reference_year_floor == 2020
        assert DEFAULT_SETTINGS.recency_cutoff_epoch == 1609462800
        assert DEFAULT_SETTINGS.min_world_scans == 10

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MAIN_COUNTRIES_FLOOR_YEAR", "2022")
        monkeypatch.setenv("MAIN_COUNTRIES_TAG_PREFIX", "en:")
        monkeypatch.delenv("MAIN_COUNTRIES_LATEST_YEAR", raising=False)
        settings = ClassifierSettings.from_env()
        assert settings.reference_year_floor == 2022
        assert settings.reference_year_latest == 2030
        assert settings.tag_prefix == "en:"
