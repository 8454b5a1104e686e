import os
from datetime import timedelta

import pytest
from pydantic import ValidationError

from air.config.settings import BuildConfig, ColorConfig, Configuration, COLOR_ROLES, MAX_DELAY_MS

ROOT = os.path.abspath(os.sep + "proj")

def _config(**kwargs) -> Configuration:
    data = {"root": ROOT, "tmp_dir": "tmp"}
    data.update(kwargs)
    return Configuration.model_validate(data)

def test_watch_root_defaults_to_root():
    assert _config().watch_root() == ROOT

def test_watch_root_with_watch_dir():
    cfg = _config(watch_dir="src")
    assert cfg.watch_root() == os.path.join(ROOT, "src")

def test_tmp_and_bin_paths_use_full_path():
    cfg = _config(build={"bin": "tmp/main", "log": "errors.log"})
    assert cfg.tmp_path() == cfg.full_path(cfg.tmp_dir)
    assert cfg.bin_path() == cfg.full_path(cfg.build.bin)
    assert cfg.bin_path() == os.path.join(ROOT, "tmp", "main")

def test_build_log_path_is_under_tmp():
    cfg = _config(build={"log": "errors.log"})
    assert cfg.build_log_path() == os.path.join(ROOT, "tmp", "errors.log")

def test_full_path_cleans_result():
    cfg = _config()
    assert cfg.full_path("a/./b/../c") == os.path.join(ROOT, "a", "c")

def test_build_delay_is_milliseconds():
    assert _config(build={"delay": 1000}).build_delay() == timedelta(seconds=1)
    assert _config(build={"delay": 250}).build_delay() == timedelta(milliseconds=250)
    assert _config().build_delay() == timedelta(0)

def test_negative_delay_rejected():
    with pytest.raises(ValidationError):
        BuildConfig(delay=-1)

def test_relative_path():
    cfg = _config()
    assert cfg.relative_path(os.path.join(ROOT, "pkg", "main.go")) == os.path.join("pkg", "main.go")
    assert cfg.relative_path(ROOT) == "."

def test_relative_path_outside_root():
    cfg = _config()
    other = os.path.abspath(os.sep + "other")
    assert cfg.relative_path(other) == os.path.join("..", "other")

def test_relative_path_without_relation_is_empty():
    # a relative path has no relation to an absolute root
    assert _config().relative_path("pkg/main.go") == ""

def test_color_info_has_fixed_roles():
    cfg = _config(color={"main": "purple", "app": "not-a-real-color"})
    info = cfg.color_info()
    assert set(info) == set(COLOR_ROLES)
    assert info["main"] == "purple"
    assert info["app"] == "not-a-real-color"
    assert info["watcher"] == ""

def test_membership_helpers():
    build = BuildConfig(include_ext=["go", "html"], exclude_dir=["vendor", "a/b"])
    assert build.watches_ext("go")
    assert build.watches_ext(".html")
    assert not build.watches_ext("py")
    assert build.excludes_dir("vendor")
    assert build.excludes_dir("a/./b")
    assert not build.excludes_dir("assets")

def test_lists_keep_order_and_duplicates():
    build = BuildConfig(include_ext=["html", "go", "go"])
    assert build.include_ext == ("html", "go", "go")

def test_configuration_is_frozen():
    cfg = _config()
    with pytest.raises(ValidationError):
        cfg.root = "/elsewhere"
    with pytest.raises(ValidationError):
        cfg.build.delay = 5

def test_unknown_keys_ignored():
    cfg = Configuration.model_validate({"root": ROOT, "unknown": 1, "color": {"extra": "red"}})
    assert not hasattr(cfg, "unknown")
    assert cfg.color == ColorConfig()

def test_largest_delay_fits_timedelta():
    assert _config(build={"delay": MAX_DELAY_MS}).build_delay() <= timedelta.max
    with pytest.raises(ValidationError):
        BuildConfig(delay=MAX_DELAY_MS + 1)

def test_delay_rejects_bool_and_str():
    with pytest.raises(ValidationError):
        BuildConfig(delay=True)
    with pytest.raises(ValidationError):
        BuildConfig(delay="1000")

def test_absolute_paths_stay_under_root():
    cfg = _config(watch_dir=os.sep + "src", build={"bin": os.sep + os.path.join("usr", "bin", "app")})
    assert cfg.bin_path() == os.path.join(ROOT, "usr", "bin", "app")
    assert cfg.watch_root() == os.path.join(ROOT, "src")
    assert cfg.full_path(os.sep + os.sep + "x") == os.path.join(ROOT, "x")
    assert cfg.bin_path() == cfg.full_path(cfg.build.bin)
