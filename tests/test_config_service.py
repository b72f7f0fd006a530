"""
Test ConfigService functionality.
"""

import sys
from pathlib import Path
import tempfile
import shutil

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from src.archiver.errors import InvalidDateConfig, MissingConfig
from src.archiver.models.options import DateAttribute, Disposition, ErrorPolicy
from src.services.config_service import ConfigService


@pytest.fixture
def temp_dir():
    """Create a temporary directory for config files."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


def write_config(directory: Path, text: str) -> Path:
    path = directory / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestConfigService:
    """Tests for ConfigService."""
    
    def test_nested_section(self, temp_dir):
        path = write_config(temp_dir, (
            "semd:\n"
            "  month: 5\n"
            "  year: 2023\n"
            "  with-structure: [CategoryA, CategoryB]\n"
            "  without-structure: Flat\n"
            "  disposition: delete\n"
            "  on-archive-error: skip\n"
            "  date-attribute: modified\n"
        ))
        
        settings = ConfigService(config_path=path, environ={}).get_settings()
        
        assert settings.month == 5
        assert settings.year == 2023
        assert settings.structured_folders == ["CategoryA", "CategoryB"]
        assert settings.without_structure == ["Flat"]
        assert settings.disposition == Disposition.DELETE
        assert settings.on_archive_error == ErrorPolicy.SKIP
        assert settings.date_attribute == DateAttribute.MODIFIED
    
    def test_dotted_keys_and_comma_lists(self, temp_dir):
        """Properties-style flat keys are folded into the section."""
        path = write_config(temp_dir, (
            "semd.month: 7\n"
            "semd.with-structure: CategoryA, CategoryB\n"
            "semd.without-structure: Flat1,Flat2\n"
        ))
        
        settings = ConfigService(config_path=path, environ={}).get_settings()
        
        assert settings.month == 7
        assert settings.with_structure == ["CategoryA", "CategoryB"]
        assert settings.without_structure == ["Flat1", "Flat2"]
    
    def test_defaults(self, temp_dir):
        path = write_config(temp_dir, "semd:\n  month: 1\n")
        
        settings = ConfigService(config_path=path, environ={}).get_settings()
        
        assert settings.year is None
        assert settings.structured_folders is None
        assert settings.without_structure == []
        assert settings.cutoff_inclusive is True
        assert settings.disposition == Disposition.MOVE
        assert settings.holding_dir == "deleted"
        assert settings.skip_archives is True
        assert settings.on_archive_error == ErrorPolicy.ABORT
        assert settings.date_attribute == DateAttribute.CREATED
    
    def test_single_folders_key(self, temp_dir):
        path = write_config(temp_dir, "semd:\n  month: 1\n  folders: A, B\n")
        settings = ConfigService(config_path=path, environ={}).get_settings()
        assert settings.structured_folders == ["A", "B"]
    
    def test_missing_file(self, temp_dir):
        with pytest.raises(MissingConfig):
            ConfigService(config_path=temp_dir / "absent.yaml", environ={})
    
    def test_missing_month(self, temp_dir):
        path = write_config(temp_dir, "semd:\n  year: 2023\n")
        with pytest.raises(MissingConfig):
            ConfigService(config_path=path, environ={}).get_settings()
    
    def test_malformed_yaml(self, temp_dir):
        path = write_config(temp_dir, "semd: [unclosed\n")
        with pytest.raises(MissingConfig):
            ConfigService(config_path=path, environ={})
    
    @pytest.mark.parametrize("section", ["5", "[CategoryA, CategoryB]", "month 5"])
    def test_section_must_be_a_mapping(self, temp_dir, section):
        path = write_config(temp_dir, f"semd: {section}\n")
        with pytest.raises(MissingConfig, match="not a mapping"):
            ConfigService(config_path=path, environ={})

    def test_non_numeric_month(self, temp_dir):
        path = write_config(temp_dir, "semd:\n  month: may\n")
        with pytest.raises(InvalidDateConfig):
            ConfigService(config_path=path, environ={})
    
    def test_invalid_policy_value(self, temp_dir):
        path = write_config(temp_dir, "semd:\n  month: 5\n  disposition: shred\n")
        with pytest.raises(MissingConfig):
            ConfigService(config_path=path, environ={})
    
    def test_environment_overrides(self, temp_dir):
        path = write_config(temp_dir, "semd:\n  month: 5\n  year: 2020\n")
        
        settings = ConfigService(
            config_path=path,
            environ={"SEMD_MONTH": "8", "SEMD_YEAR": "2024"}
        ).get_settings()
        
        assert settings.month == 8
        assert settings.year == 2024
    
    def test_update_settings_ignores_none(self, temp_dir):
        path = write_config(temp_dir, "semd:\n  month: 5\n  year: 2020\n")
        service = ConfigService(config_path=path, environ={})
        
        service.update_settings({"month": 11, "year": None})
        
        settings = service.get_settings()
        assert settings.month == 11
        assert settings.year == 2020
