import pytest

from minengine.log import log


def test_positional_placeholders(capsys):
    log("Creating window {0} ({1}, {2})", "Min Engine", 1280, 720)
    assert capsys.readouterr().out == "Creating window Min Engine (1280, 720)\n"


def test_plain_message(capsys):
    log("Could not initialize GLFW!")
    assert capsys.readouterr().out == "Could not initialize GLFW!\n"


def test_auto_numbered_placeholders(capsys):
    log("pointLights[{}].", 3)
    assert capsys.readouterr().out == "pointLights[3].\n"


def test_missing_argument_raises():
    with pytest.raises(IndexError):
        log("GLFW Error ({0}): {1}", 1)