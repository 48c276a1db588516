"""Settings tests: defaults, env/TOML loading, validation of templates and aliases."""

import pytest
from pydantic import ValidationError

from linkhop.config import Settings
from linkhop.core.domain_types import SearchEngine


def _settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


def test_defaults():
    settings = _settings()
    assert settings.default_search is SearchEngine.GOOGLE
    assert settings.search_url_template is None
    assert settings.aliases == {}
    assert settings.server.port == 8000
    assert settings.search_url("a b") == "https://www.google.com/search?q=a+b"
    assert settings.search_label == "google"


def test_engine_selection():
    settings = _settings(default_search="bing")
    assert settings.search_url("x") == "https://www.bing.com/search?q=x"


def test_template_overrides_engine():
    settings = _settings(
        default_search="ddg", search_url_template="https://kagi.com/search?q={query}",
    )
    assert settings.search_url("x y") == "https://kagi.com/search?q=x+y"
    assert settings.search_label == "https://kagi.com/search?q={query}"


def test_blank_template_means_none():
    assert _settings(search_url_template="  ").search_url_template is None


@pytest.mark.parametrize("template", [
    "https://kagi.com/search",
    "ftp://example.com/?q={query}",
])
def test_invalid_template_rejected(template):
    with pytest.raises(ValidationError):
        _settings(search_url_template=template)


def test_unknown_engine_rejected():
    with pytest.raises(ValidationError):
        _settings(default_search="altavista")


def test_cyclic_aliases_rejected():
    with pytest.raises(ValidationError, match="cyclic alias"):
        _settings(aliases={"a": "b", "b": "a"})


def test_empty_alias_expansion_rejected():
    with pytest.raises(ValidationError):
        _settings(aliases={"work": "  "})


def test_alias_names_are_stripped():
    assert _settings(aliases={" work ": "gh mbinns"}).aliases == {"work": "gh mbinns"}


def test_postgres_url_converted():
    settings = _settings(history={"database_url": "postgresql://u:p@db/linkhop"})
    assert settings.history.database_url == "postgresql+asyncpg://u:p@db/linkhop"


def test_nested_env_vars(monkeypatch):
    monkeypatch.setenv("LINKHOP_HISTORY__ENABLED", "true")
    monkeypatch.setenv("LINKHOP_SERVER__PORT", "9001")
    monkeypatch.setenv("LINKHOP_ALIASES", '{"work": "gh mbinns"}')
    settings = _settings()
    assert settings.history.enabled is True
    assert settings.server.port == 9001
    assert settings.aliases == {"work": "gh mbinns"}


def test_toml_file_loaded(tmp_path, monkeypatch):
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        'default_search = "ddg"\n'
        "\n"
        "[aliases]\n"
        'work = "gh mbinns"\n'
        "\n"
        "[server]\n"
        "port = 8123\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("LINKHOP_CONFIG_FILE", str(config_file))
    settings = _settings()
    assert settings.default_search is SearchEngine.DDG
    assert settings.aliases == {"work": "gh mbinns"}
    assert settings.server.port == 8123


def test_env_beats_toml(tmp_path, monkeypatch):
    config_file = tmp_path / "config.toml"
    config_file.write_text('default_search = "ddg"\n', encoding="utf-8")
    monkeypatch.setenv("LINKHOP_CONFIG_FILE", str(config_file))
    monkeypatch.setenv("LINKHOP_DEFAULT_SEARCH", "bing")
    assert _settings().default_search is SearchEngine.BING
