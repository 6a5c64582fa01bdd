from spellscope import config as config_module
from spellscope import platform_utils
from spellscope.config import config


def test_paths_follow_config_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(type(config), "CONFIG_DIR", tmp_path / "cfg")
    assert config.global_config_path == tmp_path / "cfg" / config.GLOBAL_FILE
    assert config.legacy_config_path == tmp_path / "cfg" / config.LEGACY_FILE

    config.create_dirs()
    assert (tmp_path / "cfg").is_dir()


def test_flag_parsing(monkeypatch):
    monkeypatch.setenv("SPELLSCOPE_TEST_FLAG", "True")
    assert config_module._flag("SPELLSCOPE_TEST_FLAG") is True
    monkeypatch.setenv("SPELLSCOPE_TEST_FLAG", "off")
    assert config_module._flag("SPELLSCOPE_TEST_FLAG") is False
    monkeypatch.delenv("SPELLSCOPE_TEST_FLAG")
    assert config_module._flag("SPELLSCOPE_TEST_FLAG") is False


def test_default_config_dir_on_linux(monkeypatch, tmp_path):
    monkeypatch.setattr(platform_utils, "IS_WINDOWS", False)
    monkeypatch.setattr(platform_utils, "IS_MACOS", False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert platform_utils.default_config_dir() == tmp_path / "spellscope"


def test_default_config_dir_on_windows(monkeypatch, tmp_path):
    monkeypatch.setattr(platform_utils, "IS_WINDOWS", True)
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
    assert platform_utils.default_config_dir() == (
        tmp_path / "EWSoftware" / "Visual Studio Spell Checker"
    )
