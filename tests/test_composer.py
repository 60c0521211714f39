"""Tests for reading the Laravel version from composer.lock."""

import pytest

from laravel_eol.composer import (
    extract_major_version,
    load_installed_version,
    parse_installed_version,
    read_laravel_version,
)
from laravel_eol.exceptions import FileProcessingError, SetupError, VersionParseError
from laravel_eol.models import InstalledVersion


class TestReadLaravelVersion:
    """Test extraction of the laravel/framework version."""

    def test_reads_version(self, write_composer_lock):
        lock = write_composer_lock("v11.9.2")
        assert read_laravel_version(lock) == "v11.9.2"

    def test_ignores_other_packages(self, write_composer_lock):
        lock = write_composer_lock(
            "10.48.4",
            extra_packages=[
                {"name": "laravel/prompts", "version": "v0.1.25"},
                {"name": "guzzlehttp/guzzle", "version": "7.8.1"},
            ],
        )
        assert read_laravel_version(lock) == "10.48.4"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileProcessingError, match="composer.lock not found in current directory"):
            read_laravel_version(tmp_path / "composer.lock")

    def test_invalid_json(self, tmp_path):
        lock = tmp_path / "composer.lock"
        lock.write_text("{not json")
        with pytest.raises(FileProcessingError, match="not valid JSON"):
            read_laravel_version(lock)

    def test_not_utf8(self, tmp_path):
        lock = tmp_path / "composer.lock"
        lock.write_bytes(b'{"packages":[{"name":"laravel/framework","version":"v11.0.0\xff"}]}')
        with pytest.raises(FileProcessingError, match="not valid JSON"):
            read_laravel_version(lock)

    def test_missing_packages_list(self, tmp_path):
        lock = tmp_path / "composer.lock"
        lock.write_text('{"packages-dev": []}')
        with pytest.raises(FileProcessingError, match="no packages list"):
            read_laravel_version(lock)

    def test_top_level_array(self, tmp_path):
        lock = tmp_path / "composer.lock"
        lock.write_text("[]")
        with pytest.raises(FileProcessingError, match="no packages list"):
            read_laravel_version(lock)

    def test_framework_not_installed(self, write_composer_lock):
        lock = write_composer_lock(None, extra_packages=[{"name": "symfony/console", "version": "v7.0.0"}])
        with pytest.raises(FileProcessingError, match="Laravel framework not found"):
            read_laravel_version(lock)

    def test_dev_packages_are_not_searched(self, tmp_path):
        lock = tmp_path / "composer.lock"
        lock.write_text('{"packages": [], "packages-dev": [{"name": "laravel/framework", "version": "v11.0.0"}]}')
        with pytest.raises(FileProcessingError, match="Laravel framework not found"):
            read_laravel_version(lock)

    @pytest.mark.parametrize("version", ["", "null"])
    def test_empty_or_null_version(self, write_composer_lock, version):
        lock = write_composer_lock(version)
        with pytest.raises(FileProcessingError, match="Laravel framework not found"):
            read_laravel_version(lock)

    def test_errors_are_setup_errors(self, tmp_path):
        with pytest.raises(SetupError):
            read_laravel_version(tmp_path / "composer.lock")


class TestExtractMajorVersion:
    """Test major version normalization."""

    @pytest.mark.parametrize(
        "version, expected",
        [
            ("v11.9.2", 11),
            ("11.9.2", 11),
            ("v10.48.4", 10),
            ("10.48.4", 10),
            ("v9.0.0-beta.1", 9),
            ("12", 12),
            ("10.x-dev", 10),
        ],
    )
    def test_major_version(self, version, expected):
        assert extract_major_version(version) == expected

    def test_only_one_leading_v_is_removed(self):
        with pytest.raises(VersionParseError):
            extract_major_version("vv11.0.0")

    @pytest.mark.parametrize("version", ["dev-master", "", "x.1.0", " 11.0.0"])
    def test_non_numeric_major(self, version):
        with pytest.raises(VersionParseError, match="Could not determine major version"):
            extract_major_version(version)

    def test_parse_installed_version(self):
        assert parse_installed_version("v11.9.2") == InstalledVersion(full="v11.9.2", major=11)

    def test_load_installed_version(self, write_composer_lock):
        lock = write_composer_lock("v12.1.0")
        assert load_installed_version(lock) == InstalledVersion(full="v12.1.0", major=12)

    def test_load_installed_version_bad_version(self, write_composer_lock):
        lock = write_composer_lock("dev-main")
        with pytest.raises(SetupError):
            load_installed_version(lock)
