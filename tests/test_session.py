import numpy as np
import pytest

from wordsphere.config import InteractionMode
from wordsphere.model.layout import compute_positions
from wordsphere.controller.session import WordCloudSession


def position_of(session, text):
    return session.store.get(text).position.to_array()


def test_new_words_redistribute_every_word(session):
    session.add_word("a")
    session.add_word("b")
    a_after_two = position_of(session, "a")
    b_after_two = position_of(session, "b")

    session.add_word("c")

    assert session.layout_count == 3
    assert session.distinct_word_count() == 3
    assert not np.allclose(position_of(session, "a"), a_after_two)
    assert not np.allclose(position_of(session, "b"), b_after_two)

    expected = compute_positions(3)
    for i, text in enumerate(["a", "b", "c"]):
        assert np.allclose(position_of(session, text), expected[i])


def test_repeated_word_does_not_relayout(session):
    session.add_word("a")
    result = session.add_word("a")
    assert result.is_new is False
    assert result.frequency == 2
    assert session.layout_count == 1


def test_stats_signal_reports_distinct_count(session):
    counts = []
    session.stats_changed.connect(counts.append)

    session.add_word("a")
    session.add_word("a")
    session.add_word("  ")
    session.add_word("b")

    assert counts == [1, 1, 2]


def test_blank_word_changes_nothing(session):
    assert session.add_word("   ") is None
    assert session.distinct_word_count() == 0
    assert session.layout_count == 0


def test_bulk_insert_lays_out_once(session):
    counts = []
    session.stats_changed.connect(counts.append)

    session.add_words([("x", 3), ("y", 1), ("", 2)])

    assert session.layout_count == 1
    assert session.store.frequency_of("x") == 3
    assert session.store.frequency_of("y") == 1
    assert counts == [2]


def test_font_size_lookup(session):
    for _ in range(5):
        session.add_word("sun")
    assert session.font_size_for("sun") == 24
    assert session.font_size_for("moon") is None


def test_hover_mode_pointer(session):
    assert session.viewport.center == (400.0, 300.0)

    session.set_pointer_position(400.0, 300.0)
    assert session.rotation.state.hover_active is True

    session.set_pointer_position(0.0, 0.0)
    assert session.rotation.state.hover_active is False

    session.set_pointer_position(410.0, 290.0)
    session.clear_pointer()
    assert session.rotation.state.hover_active is False


def test_rotate_mode_pointer_sets_clamped_target(qapp, rotation):
    session = WordCloudSession(rotation=rotation, mode=InteractionMode.POINTER_ROTATE)
    session.set_viewport_size(800, 600)
    target = session.rotation.state.manual_target

    session.set_pointer_position(800.0, 0.0)
    assert (target.x, target.y) == pytest.approx((-0.3, 0.3))

    session.set_pointer_position(600.0, 450.0)
    assert (target.x, target.y) == pytest.approx((0.15, 0.15))

    session.set_pointer_position(5000.0, 300.0)
    assert (target.x, target.y) == pytest.approx((0.0, 0.3))
    assert session.rotation.state.hover_active is False

    session.clear_pointer()
    assert (target.x, target.y) == (0.0, 0.0)


def test_frame_projects_all_words_around_viewport_center(session):
    for text in ["a", "b", "c", "d"]:
        session.add_word(text)

    commands = session.frame(now=0.0)

    assert len(commands) == 4
    for cmd in commands:
        assert abs(cmd.screen_x - 400.0) <= 300.0 * 1.6
        assert abs(cmd.screen_y - 300.0) <= 300.0 * 1.6
        assert 0.35 <= cmd.opacity <= 1.0


def test_frame_with_no_words(session):
    assert session.frame(now=0.0) == []


def test_negative_viewport_is_clamped(session):
    session.set_viewport_size(-10, -10)
    assert session.viewport.center == (0.0, 0.0)
