from shared.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        """Should provide working defaults without any environment."""
        for name in ("PIZZA_PORT", "PIZZA_DATABASE_URL", "PIZZA_LIST_PER_PAGE"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.port == 3000
        assert settings.database_url.startswith("sqlite+aiosqlite://")
        assert settings.list_per_page == 10
        assert settings.factory_timeout == 30.0

    def test_env_prefix(self, monkeypatch):
        """Should read PIZZA_-prefixed variables."""
        monkeypatch.setenv("PIZZA_JWT_SECRET", "from-env")
        monkeypatch.setenv("PIZZA_FACTORY_URL", "http://factory.example")
        monkeypatch.setenv("PIZZA_BCRYPT_ROUNDS", "5")
        settings = Settings(_env_file=None)
        assert settings.jwt_secret == "from-env"
        assert settings.factory_url == "http://factory.example"
        assert settings.bcrypt_rounds == 5

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
