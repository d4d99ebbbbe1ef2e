"""Tests for the bar render model."""

from tick_progress.config import ProgressConfig
from tick_progress.view import BarView, display_width, render_bar, transition


def test_display_width_clamps_to_end():
    assert display_width(42.5, 100) == 42.5
    assert display_width(100, 100) == 100
    assert display_width(120, 100) == 100


def test_transition_string():
    assert transition(ProgressConfig()) == "width 0.3s ease-out"
    cfg = ProgressConfig(transition_speed=1, transition_effect="linear")
    assert transition(cfg) == "width 1s linear"


def test_render_defaults():
    view = render_bar(42.5, ProgressConfig())
    assert isinstance(view, BarView)
    assert view.role == "progressbar"
    assert view.value_now == 42.5
    assert view.value_min == 0
    assert view.value_max == 100
    assert view.width == 42.5
    assert view.class_name is None
    assert view.style == {
        "width": "42.5%",
        "height": "25px",
        "transition": "width 0.3s ease-out",
        "background": "blue",
    }


def test_render_clamps_width_but_not_value():
    view = render_bar(110, ProgressConfig(stop_threshold=110))
    assert view.width == 100
    assert view.style["width"] == "100%"
    assert view.value_now == 110


def test_user_style_overrides():
    view = render_bar(
        10,
        ProgressConfig(),
        height=8,
        background="red",
        class_name="bar",
        style={"background": "green", "borderRadius": "4px"},
    )
    assert view.style["height"] == "8px"
    assert view.style["background"] == "green"
    assert view.style["borderRadius"] == "4px"
    assert view.class_name == "bar"


def test_attributes():
    view = render_bar(30, ProgressConfig(start_progress_value=10, end_progress_value=50))
    attrs = view.attributes()
    assert attrs["role"] == "progressbar"
    assert attrs["aria-valuenow"] == 30
    assert attrs["aria-valuemin"] == 10
    assert attrs["aria-valuemax"] == 50
    assert attrs["style"]["width"] == "30%"
    assert "class" not in attrs


def test_attributes_include_class():
    view = render_bar(0, ProgressConfig(), class_name="loading")
    assert view.attributes()["class"] == "loading"
