"""Tests for the configuration management module."""

import json
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from train_routes.config.defaults import DEFAULT_CONFIG, DEFAULT_INI_TEMPLATE, SEED_ROUTES
from train_routes.config.settings import SettingsManager


class TestDefaults:
    """Tests for default configuration values."""
    
    def test_default_config_has_routes_file(self):
        """Default config should name the routes file."""
        assert DEFAULT_CONFIG["routesFile"] == "train_routes.txt"
    
    def test_default_undo_capacity(self):
        """Default undo capacity should be 10."""
        assert DEFAULT_CONFIG["undoCapacity"] == 10
    
    def test_default_ini_template_has_sections(self):
        """Default INI template should have expected sections."""
        for section in ("[Storage]", "[Undo]", "[Access]", "[Logging]"):
            assert section in DEFAULT_INI_TEMPLATE
    
    def test_seed_dataset(self):
        """Seed should hold twelve routes starting at Sealdah."""
        assert len(SEED_ROUTES) == 12
        assert all(row[0] == "Sealdah" for row in SEED_ROUTES)
        assert SEED_ROUTES[0] == ("Sealdah", "Bongaon", 13, 1.75)
        assert SEED_ROUTES[-1] == ("Sealdah", "Sodepur", 12, 1.65)


class TestSettingsManager:
    """Tests for the SettingsManager class."""
    
    @pytest.fixture
    def settings_dir(self, tmp_path):
        """Create a temporary settings directory."""
        return tmp_path
    
    @pytest.fixture
    def settings(self, settings_dir):
        """Create a SettingsManager instance."""
        return SettingsManager(settings_dir)
    
    def test_creates_default_ini_if_missing(self, settings_dir, settings):
        """Should create default INI file if missing."""
        assert (settings_dir / "train-routes.ini").exists()
    
    def test_get_all_returns_defaults(self, settings):
        """get_all should return default values."""
        config = settings.get_all()
        assert config["undoCapacity"] == DEFAULT_CONFIG["undoCapacity"]
        assert config["routesFile"] == "train_routes.txt"
    
    def test_ini_keys_keep_case(self, settings):
        """camelCase keys from the INI should not be lowercased."""
        assert "undocapacity" not in settings.get_all()
    
    def test_admin_pin_stays_string(self, settings):
        """adminPin should not be coerced to int."""
        assert settings.get("adminPin") == "123"
    
    def test_get_missing_with_default(self, settings):
        """get with missing key should return default."""
        assert settings.get("nonexistent", "default") == "default"
    
    def test_update_saves_to_json(self, settings_dir, settings):
        """update should save changes to JSON file."""
        settings.update({"undoCapacity": 3})
        
        json_file = settings_dir / "user-settings.json"
        assert json_file.exists()
        
        with open(json_file) as f:
            saved = json.load(f)
        assert saved["undoCapacity"] == 3
    
    def test_ini_overrides_defaults(self, settings_dir):
        """INI values should override hardcoded defaults."""
        (settings_dir / "train-routes.ini").write_text("[Undo]\nundoCapacity = 4\n")
        settings = SettingsManager(settings_dir)
        assert settings.get("undoCapacity") == 4
    
    def test_json_overrides_ini(self, settings_dir):
        """JSON settings should override INI settings."""
        (settings_dir / "train-routes.ini").write_text("[Undo]\nundoCapacity = 4\n")
        (settings_dir / "user-settings.json").write_text(json.dumps({"undoCapacity": 7}))
        
        settings = SettingsManager(settings_dir)
        assert settings.get("undoCapacity") == 7
    
    def test_broken_json_is_ignored(self, settings_dir):
        """Unparseable JSON should fall back to INI values."""
        (settings_dir / "user-settings.json").write_text("{not json")
        settings = SettingsManager(settings_dir)
        assert settings.get("undoCapacity") == 10
    
    def test_reload_updates_cache(self, settings_dir, settings):
        """reload should update cache from files."""
        assert settings.get("undoCapacity") == 10
        
        (settings_dir / "user-settings.json").write_text(json.dumps({"undoCapacity": 2}))
        
        settings.reload()
        assert settings.get("undoCapacity") == 2
    
    def test_routes_path_relative_to_config_dir(self, settings_dir, settings):
        """Relative routesFile should resolve against the config directory."""
        assert settings.routes_path() == settings_dir / "train_routes.txt"
    
    def test_routes_path_absolute(self, tmp_path, settings):
        """Absolute routesFile should be used as is."""
        target = tmp_path / "elsewhere" / "routes.txt"
        settings.update({"routesFile": str(target)})
        assert settings.routes_path() == target
