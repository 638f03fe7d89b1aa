import textwrap

from lessonforge.classify import ClassifierState, Mode, PendingKind, classify, finish, split_lines, step
from lessonforge.models.blocks import Block, BlockKind


def _kinds(blocks):
    return [b.kind for b in blocks]


def test_line_comment_then_code():
    blocks = classify("// hello\nconst x = 1;\n")
    assert blocks == [
        Block(BlockKind.COMMENT, ("// hello",)),
        Block(BlockKind.CODE, ("const x = 1;",)),
    ]


def test_doc_comment_lines_are_trimmed():
    blocks = classify("/**\n * doc\n */\nconst y = 2;\n")
    assert blocks == [
        Block(BlockKind.COMMENT, ("/**", "* doc", "*/")),
        Block(BlockKind.CODE, ("const y = 2;",)),
    ]


def test_whitespace_only_source_has_no_blocks():
    assert classify("   \n\n") == []
    assert classify("") == []


def test_playground_marker_links_next_code_block():
    blocks = classify("// @playground-link\nconst z = 3;\n// after\n")
    assert blocks == [
        Block(BlockKind.LINKED_CODE, ("const z = 3;",)),
        Block(BlockKind.COMMENT, ("// after",)),
    ]


def test_playground_marker_is_single_use():
    src = textwrap.dedent(
        """\
        // @playground-link
        const a = 1;
        // split
        const b = 2;
        """
    )
    assert _kinds(classify(src)) == [BlockKind.LINKED_CODE, BlockKind.COMMENT, BlockKind.CODE]


def test_playground_marker_spent_on_blank_code():
    # The marker is reset by the flush even though nothing was emitted.
    src = "// @playground-link\n\n// comment\nconst a = 1;\n"
    assert _kinds(classify(src)) == [BlockKind.COMMENT, BlockKind.CODE]


def test_code_keeps_original_indentation_and_inner_blank_lines():
    src = "function f() {\n  return 1;\n\n}\n"
    (block,) = classify(src)
    assert block.lines == ("function f() {", "  return 1;", "", "}")


def test_indented_line_comment_stays_in_code():
    src = "if (x) {\n  // inner\n  y();\n}\n"
    (block,) = classify(src)
    assert block.kind is BlockKind.CODE
    assert "  // inner" in block.lines


def test_single_line_block_comment_keeps_raw_line():
    blocks = classify("  /* note */\nlet a;\n")
    assert blocks[0] == Block(BlockKind.COMMENT, ("  /* note */",))
    assert blocks[1].lines == ("let a;",)


def test_blank_lines_between_comments_are_dropped():
    blocks = classify("// one\n\n   \n// two\n")
    assert _kinds(blocks) == [BlockKind.COMMENT, BlockKind.COMMENT]


def test_unterminated_block_comment_is_kept():
    blocks = classify("let a;\n/**\n * dangling")
    assert blocks == [
        Block(BlockKind.CODE, ("let a;",)),
        Block(BlockKind.COMMENT, ("/**", "* dangling")),
    ]


def test_comment_markers_inside_literals_are_not_lexed():
    # A regex literal ending in '*/' stays code in code mode, but a template
    # string line starting with '/*' opens a comment that never closes.
    src = "const re = /a*/\nconst glob = `\n/*.ts\n`;\n"
    blocks = classify(src)
    assert blocks == [
        Block(BlockKind.CODE, ("const re = /a*/", "const glob = `")),
        Block(BlockKind.COMMENT, ("/*.ts", "`;")),
    ]


def test_crlf_line_endings():
    blocks = classify("// hi\r\nconst x = 1;\r\n")
    assert blocks == [
        Block(BlockKind.COMMENT, ("// hi",)),
        Block(BlockKind.CODE, ("const x = 1;",)),
    ]


def test_step_marker_sets_linked_kind_without_output():
    state, emitted = step(ClassifierState(), "// @playground-link")
    assert emitted == []
    assert state.code_kind is PendingKind.LINKED
    assert state.code_lines == ()


def test_step_opening_block_comment_flushes_code():
    state = ClassifierState(code_lines=("let a;",))
    state, emitted = step(state, "  /** open")
    assert emitted == [Block(BlockKind.CODE, ("let a;",))]
    assert state.mode is Mode.IN_BLOCK_COMMENT
    assert state.comment_lines == ("/** open",)


def test_step_continuation_and_close():
    state = ClassifierState(mode=Mode.IN_BLOCK_COMMENT, comment_lines=("/**",))
    state, emitted = step(state, "   * body")
    assert emitted == []
    assert state.comment_lines == ("/**", "* body")

    state, emitted = step(state, "   */")
    assert emitted == [Block(BlockKind.COMMENT, ("/**", "* body", "*/"))]
    assert state == ClassifierState()


def test_step_code_line_in_code_mode():
    state, emitted = step(ClassifierState(), "  const x = 1;")
    assert emitted == []
    assert state.code_lines == ("  const x = 1;",)


def test_finish_flushes_linked_code():
    state = ClassifierState(code_lines=("x();",), code_kind=PendingKind.LINKED)
    assert finish(state) == [Block(BlockKind.LINKED_CODE, ("x();",))]


def test_step_does_not_mutate_previous_state():
    before = ClassifierState()
    step(before, "const x = 1;")
    assert before.code_lines == ()


def test_only_newline_breaks_lines():
    src = 'const s = "a\u2028b";\nconst f = "x\x0cy";\n'
    (block,) = classify(src)
    assert block.lines == ('const s = "a\u2028b";', 'const f = "x\x0cy";')


def test_split_lines_handles_crlf_and_final_newline():
    assert split_lines("a\r\nb\r\n") == ["a", "b"]
    assert split_lines("a\n\nb") == ["a", "", "b"]
    assert split_lines("") == []


def test_step_line_comment_inside_block_comment():
    # '//' lines are recognised before the block-comment continuation rule.
    state = ClassifierState(mode=Mode.IN_BLOCK_COMMENT, comment_lines=("/**",))
    state, emitted = step(state, "// aside")
    assert emitted == [Block(BlockKind.COMMENT, ("// aside",))]
    assert state.mode is Mode.IN_BLOCK_COMMENT
    assert state.comment_lines == ("/**",)


def test_step_playground_marker_inside_block_comment():
    state = ClassifierState(mode=Mode.IN_BLOCK_COMMENT, comment_lines=("/**",))
    state, emitted = step(state, "// @playground-link")
    assert emitted == []
    assert state.code_kind is PendingKind.LINKED
    assert state.comment_lines == ("/**",)
