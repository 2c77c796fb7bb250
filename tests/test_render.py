# tests/test_render.py

from __future__ import annotations

from tuido.core import dispatch
from tuido.models import INPUT_PLACEHOLDER, Session, Task
from tuido.render import HEADER, HELP_EDIT, HELP_VIEW, plain, render


def test_viewing_layout(make_session) -> None:
    session = make_session(("Buy milk", False), ("Walk dog", True), cursor=1)

    assert plain(render(session)) == [
        HEADER,
        "",
        "  [ ] Buy milk",
        "> [x] Walk dog",
        "",
        HELP_VIEW,
    ]


def test_styles_mark_selection_and_done(make_session) -> None:
    lines = render(make_session(("A", False), ("B", True), ("C", False), cursor=2))

    assert lines[0] == [(HEADER, "title")]
    assert lines[2][1] == ("A", "")
    assert lines[3][1] == ("B", "done")
    assert lines[4][1] == ("C", "selected")
    assert lines[-1] == [(HELP_VIEW, "help")]


def test_empty_list_layout() -> None:
    assert plain(render(Session.start([]))) == [HEADER, "", "", HELP_VIEW]


def test_editing_row_shows_live_buffer(make_session) -> None:
    session = make_session(("A", False), ("B", True), cursor=1)
    session, _ = dispatch(session, "e")
    session, _ = dispatch(session, "!")

    text = plain(render(session))
    assert text[3] == "> [x] > B! "
    assert text[2] == "  [ ] A"
    assert text[-1] == HELP_EDIT


def test_caret_segment_follows_blink(make_session) -> None:
    session, _ = dispatch(make_session(("AB", False)), "e")
    session, _ = dispatch(session, "left")

    row = render(session, cursor_visible=True)[2]
    assert ("B", "caret") in row
    row = render(session, cursor_visible=False)[2]
    assert ("B", "caret") not in row
    assert "".join(t for t, _ in row) == "> [ ] > AB"


def test_empty_buffer_shows_placeholder() -> None:
    session, _ = dispatch(Session.start([]), "n")
    assert plain(render(session))[2] == "> [ ] > " + INPUT_PLACEHOLDER


def test_status_banner_is_rendered_last(make_session) -> None:
    session = make_session(("A", False))
    session.status = "Save failed: disk full"

    lines = render(session)
    assert lines[-1] == [("Save failed: disk full", "error")]


def test_render_does_not_mutate(make_session) -> None:
    session = make_session(("A", False))
    before = Session(
        tasks=[Task(1, "A", False)], cursor=0, next_id=session.next_id
    )
    render(session)
    assert session == before
