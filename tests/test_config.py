import json

import config


def test_missing_file_gives_defaults(tmp_path):
    cfg = config.load_config(tmp_path / "nope.json")
    assert cfg == config._default_config()
    assert cfg["world"] == {"width": 10, "height": 10}
    assert cfg["diffusion_rate"] == 15.0
    assert cfg["init_mode"] == "spike"


def test_partial_file_merges_over_defaults(tmp_path):
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"world": {"width": 32}, "init_mode": "random", "seed": 9, "junk": 1}))
    cfg = config.load_config(p)
    assert cfg["world"] == {"width": 32, "height": 10}
    assert cfg["init_mode"] == "random"
    assert cfg["seed"] == 9
    assert cfg["diffusion_sweeps"] == 5
    assert "junk" not in cfg


def test_broken_file_falls_back(tmp_path, caplog):
    p = tmp_path / "settings.json"
    p.write_text("{not json")
    with caplog.at_level("WARNING", logger="config"):
        cfg = config.load_config(p)
    assert cfg == config._default_config()
    assert "using defaults" in caplog.text


def test_non_object_file_falls_back(tmp_path):
    p = tmp_path / "settings.json"
    p.write_text("[1, 2, 3]")
    assert config.load_config(p) == config._default_config()


def test_save_then_load(tmp_path):
    params = config._default_config()
    params["drag_gain"] = 2.0
    params["world"]["height"] = 12
    path = config.save_config(params, tmp_path / "sub" / "settings.json")
    assert path.exists()
    cfg = config.load_config(path)
    assert cfg["drag_gain"] == 2.0
    assert cfg["world"]["height"] == 12
