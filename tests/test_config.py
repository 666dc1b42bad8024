import pytest

from config import Settings, load_settings


def test_defaults():
    s = load_settings({})

    assert s.host == "127.0.0.1"
    assert s.port == 5000
    assert s.debug is False
    assert s.step_delay_ms == 800
    assert s.step_delay == 0.8
    assert s.log_level == "INFO"
    assert len(s.secret_key) == 64


def test_overrides():
    s = load_settings({
        "VISUALIZER_SECRET_KEY": "k",
        "VISUALIZER_HOST": "0.0.0.0",
        "VISUALIZER_PORT": "8080",
        "VISUALIZER_DEBUG": "yes",
        "VISUALIZER_STEP_DELAY_MS": "250",
        "VISUALIZER_LOG_LEVEL": "debug",
    })

    assert s == Settings(
        secret_key="k", host="0.0.0.0", port=8080, debug=True,
        step_delay_ms=250, log_level="DEBUG",
    )


@pytest.mark.parametrize("name,value", [
    ("VISUALIZER_PORT", "abc"),
    ("VISUALIZER_STEP_DELAY_MS", "-5"),
])
def test_bad_integers(name, value):
    with pytest.raises(ValueError, match=name):
        load_settings({name: value})
