import copy
import json

from webdigest.config.loader import (
    _migrate_config,
    convert_keys,
    convert_to_camel,
    load_config,
    save_config,
)
from webdigest.config.schema import Config


def test_config_defaults() -> None:
    web = Config().tools.web

    assert web.search.base_url == "https://html.duckduckgo.com/html/"
    assert web.search.max_results == 5
    assert web.search.allowed_domains == []
    assert web.news.base_url == "https://news.google.com/rss/search"
    assert web.fetch.max_chars == 8000
    assert web.fetch.allow_private_network is False
    assert web.http.timeout == 10.0


def test_migrate_legacy_allowed_domains_section() -> None:
    raw = {"WebSearch": {"AllowedDomains": ["example.com", "docs.python.org"]}}

    migrated = _migrate_config(copy.deepcopy(raw))

    assert "WebSearch" not in migrated
    search = migrated["tools"]["web"]["search"]
    assert search["allowedDomains"] == ["example.com", "docs.python.org"]


def test_migrate_flat_allowed_domains() -> None:
    raw = {"tools": {"web": {"allowedDomains": ["example.com"]}}}

    migrated = _migrate_config(copy.deepcopy(raw))

    assert "allowedDomains" not in migrated["tools"]["web"]
    assert migrated["tools"]["web"]["search"]["allowedDomains"] == ["example.com"]


def test_migrate_does_not_override_new_allowed_domains() -> None:
    raw = {
        "WebSearch": {"AllowedDomains": ["legacy.example"]},
        "tools": {"web": {"search": {"allowedDomains": ["new.example"]}}},
    }

    migrated = _migrate_config(copy.deepcopy(raw))
    assert migrated["tools"]["web"]["search"]["allowedDomains"] == ["new.example"]


def test_migrate_fills_default_base_urls() -> None:
    raw = {"tools": {"web": {"search": {"baseUrl": ""}}}}

    migrated = _migrate_config(copy.deepcopy(raw))

    assert migrated["tools"]["web"]["search"]["baseUrl"] == "https://html.duckduckgo.com/html/"
    assert migrated["tools"]["web"]["news"]["baseUrl"] == "https://news.google.com/rss/search"


def test_config_roundtrip_with_camel_case() -> None:
    config = Config()
    config.tools.web.fetch.allow_private_network = True
    data = convert_to_camel(config.model_dump())

    assert data["tools"]["web"]["fetch"]["allowPrivateNetwork"] is True

    reloaded = Config.model_validate(convert_keys(data))
    assert reloaded.tools.web.fetch.allow_private_network is True
    assert reloaded.tools.web.http.user_agent == config.tools.web.http.user_agent


def test_load_config_from_file(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "tools": {
                    "web": {
                        "search": {"allowedDomains": ["example.com"], "maxResults": 3},
                        "fetch": {"maxChars": 2000},
                    }
                }
            }
        ),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.tools.web.search.allowed_domains == ["example.com"]
    assert config.tools.web.search.max_results == 3
    assert config.tools.web.fetch.max_chars == 2000


def test_load_config_invalid_file_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_config(path) == Config()


def test_load_config_missing_file(tmp_path) -> None:
    assert load_config(tmp_path / "absent.json") == Config()


def test_save_and_load_config(tmp_path) -> None:
    path = tmp_path / "nested" / "config.json"
    config = Config()
    config.tools.web.search.allowed_domains = ["example.com"]

    save_config(config, path)

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["tools"]["web"]["search"]["allowedDomains"] == ["example.com"]
    assert load_config(path) == config


def test_migrate_tolerates_malformed_sections() -> None:
    for data in (
        {"WebSearch": ["a.com"]},
        {"WebSearch": "x"},
        {"WebSearch": {"AllowedDomains": "a.com"}},
        {"tools": {"web": "nope"}},
        {"tools": {"web": {"search": [], "allowedDomains": ["a.com"]}}},
        ["not", "a", "mapping"],
    ):
        _migrate_config(copy.deepcopy(data))


def test_load_config_malformed_sections_fall_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"

    path.write_text(json.dumps({"WebSearch": ["a.com"]}), encoding="utf-8")
    assert load_config(path) == Config()

    path.write_text(json.dumps({"tools": {"web": "nope"}}), encoding="utf-8")
    assert load_config(path) == Config()

    path.write_text(json.dumps(["a.com"]), encoding="utf-8")
    assert load_config(path) == Config()
