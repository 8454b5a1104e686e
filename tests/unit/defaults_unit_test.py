from datetime import timedelta

from air.config.defaults import DEFAULT_CONFIG, default_config_dict
from air.config.settings import Configuration, default_config

def test_default_config_is_configuration_instance():
    assert isinstance(default_config(), Configuration)

def test_default_values():
    cfg = default_config()
    assert cfg.root == "."
    assert cfg.tmp_dir == "tmp"
    assert cfg.watch_dir == ""
    assert cfg.build.bin == "tmp/main"
    assert cfg.build.cmd == "go build -o ./tmp/main main.go"
    assert cfg.build.log == "build-errors.log"
    assert set(cfg.build.include_ext) == {"go", "tpl", "tmpl", "html"}
    assert set(cfg.build.exclude_dir) == {"assets", "tmp", "vendor"}
    assert cfg.build.delay == 1000
    assert cfg.build_delay() == timedelta(seconds=1)

def test_default_colors():
    assert default_config().color_info() == {
        "main": "magenta",
        "watcher": "cyan",
        "build": "yellow",
        "runner": "green",
        "app": "white",
    }

def test_default_config_is_fresh_each_call():
    assert default_config() == default_config()
    assert default_config() is not default_config()

def test_default_dict_copy_does_not_leak():
    copied = default_config_dict()
    copied["build"]["exclude_dir"].append("node_modules")
    assert "node_modules" not in DEFAULT_CONFIG["build"]["exclude_dir"]
