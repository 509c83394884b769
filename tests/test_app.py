from toonview.app import ViewerConfig, parse_arguments, parse_textured_arguments


def test_plain_defaults_print_usage(capsys):
    config = parse_arguments([])
    out = capsys.readouterr().out
    assert config.obj_path == "tralalero-tralala.obj"
    assert "No OBJ path provided, using default: tralalero-tralala.obj" in out
    assert "Usage:" in out


def test_plain_with_path_is_silent(capsys):
    config = parse_arguments(["model.obj", "ignored"])
    assert config.obj_path == "model.obj"
    assert capsys.readouterr().out == ""


def test_plain_config_has_no_texture():
    config = parse_arguments(["model.obj"])
    assert config.texture_path is None
    assert config.textured is False
    assert config.vertex_shader == "shaders/toon.vert"
    assert config.fragment_shader == "shaders/toon.frag"
    assert config.scale_factor == 50.5


def test_textured_defaults(capsys):
    config = parse_textured_arguments([])
    out = capsys.readouterr().out
    assert config.obj_path == "teapot.obj"
    assert config.texture_path == "default_texture.png"
    assert "No paths provided, using defaults: teapot.obj and default_texture.png" in out


def test_textured_only_model(capsys):
    config = parse_textured_arguments(["cube.obj"])
    out = capsys.readouterr().out
    assert config.obj_path == "cube.obj"
    assert config.texture_path == "default_texture.png"
    assert "No texture path provided, using default: default_texture.png" in out


def test_textured_model_and_texture(capsys):
    config = parse_textured_arguments(["cube.obj", "wood.png", "extra"])
    assert (config.obj_path, config.texture_path) == ("cube.obj", "wood.png")
    assert capsys.readouterr().out == ""


def test_textured_config_shaders_and_scale():
    config = parse_textured_arguments(["cube.obj", "wood.png"])
    assert config.textured is True
    assert config.vertex_shader == "../shaders/crosshatch.vert"
    assert config.fragment_shader == "../shaders/crosshatch.frag"
    assert config.scale_factor == 8.0


def test_viewer_config_window_defaults():
    config = ViewerConfig()
    assert (config.width, config.height) == (800, 600)
    assert config.title == "Toon Shading OBJ Example"
    assert config.textured is False