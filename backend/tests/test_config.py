"""
Note Store: Settings Tests
==========================

What:  Required settings, value validation and environment fallback.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from notestore.config import DEFAULT_UPLOAD_FORM, Settings


class TestRequiredSettings:

    def test_all_three_required(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings()
        missing = {error["loc"][0] for error in exc_info.value.errors()}
        assert missing == {"host", "port", "cache_dir"}

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"port": 8008, "cache_dir": "notes"},
            {"host": "127.0.0.1", "cache_dir": "notes"},
            {"host": "127.0.0.1", "port": 8008},
        ],
    )
    def test_any_one_missing_fails(self, kwargs):
        with pytest.raises(ValidationError):
            Settings(**kwargs)

    def test_values_coerced(self):
        settings = Settings(host="0.0.0.0", port="8008", cache_dir="notes")
        assert settings.port == 8008
        assert settings.cache_dir == Path("notes")
        assert settings.base_url == "http://0.0.0.0:8008"

    @pytest.mark.parametrize("port", [0, 70000, "eighty"])
    def test_invalid_port_rejected(self, port):
        with pytest.raises(ValidationError):
            Settings(host="127.0.0.1", port=port, cache_dir="notes")

    def test_blank_host_rejected(self):
        with pytest.raises(ValidationError):
            Settings(host="  ", port=8008, cache_dir="notes")


class TestOptionalSettings:

    def test_defaults(self):
        settings = Settings(host="127.0.0.1", port=8008, cache_dir="notes")
        assert settings.log_level == "INFO"
        assert settings.cors_origins_list == ["*"]
        assert settings.upload_form_path == DEFAULT_UPLOAD_FORM
        assert DEFAULT_UPLOAD_FORM.is_file()

    def test_log_level_normalized(self):
        settings = Settings(host="h", port=1, cache_dir="c", log_level="debug")
        assert settings.log_level == "DEBUG"

    def test_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(host="h", port=1, cache_dir="c", log_level="chatty")

    def test_cors_origins_split(self):
        settings = Settings(
            host="h", port=1, cache_dir="c",
            cors_origins="http://a.example, http://b.example,",
        )
        assert settings.cors_origins_list == ["http://a.example", "http://b.example"]


class TestEnvironment:

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("NOTESTORE_HOST", "10.0.0.1")
        monkeypatch.setenv("NOTESTORE_PORT", "9000")
        monkeypatch.setenv("NOTESTORE_CACHE_DIR", "/srv/notes")

        settings = Settings()

        assert (settings.host, settings.port, settings.cache_dir) == ("10.0.0.1", 9000, Path("/srv/notes"))

    def test_keyword_arguments_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("NOTESTORE_PORT", "9000")
        settings = Settings(host="h", port=1234, cache_dir="c")
        assert settings.port == 1234

    def test_reads_dotenv_file(self, tmp_path):
        # conftest has already chdir'ed into tmp_path
        (tmp_path / ".env").write_text(
            "NOTESTORE_HOST=127.0.0.1\nNOTESTORE_PORT=8123\nNOTESTORE_CACHE_DIR=cache\n",
            encoding="utf-8",
        )
        settings = Settings()
        assert settings.port == 8123
