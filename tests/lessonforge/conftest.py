# conftest.py - shared fixtures for lessonforge tests
import textwrap

import pytest


@pytest.fixture
def lesson_tree(tmp_path):
    """A small source tree shaped like the lessons repo: src/ in, markdown/ out."""
    src = tmp_path / "src"
    (src / "language").mkdir(parents=True)
    (src / "topics").mkdir()
    (src / "language" / "classes.ts").write_text(
        textwrap.dedent(
            """\
            /**
             * # Class definitions
             */
            class Logger {}
            """
        )
    )
    (src / "topics" / "errors.ts").write_text(
        textwrap.dedent(
            """\
            // Errors
            // @playground-link
            throw new Error("boom");
            """
        )
    )
    (src / "topics" / "notes.txt").write_text("not a lesson")
    return tmp_path
