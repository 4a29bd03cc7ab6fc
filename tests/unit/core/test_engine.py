# tests/unit/core/test_engine.py
# Unit tests for TransformationEngine: validation, algorithms, preview & batches

import pytest

from sedmcp.core.constants import OperationKind
from sedmcp.core.engine import TransformationEngine, default_engine
from sedmcp.core.exceptions import OperationValidationError
from sedmcp.core.operations import (
    Append,
    Change,
    Delete,
    Insert,
    Print,
    Substitute,
)


# * Test the reference scenarios end to end
class TestScenarios:
    # * Verify non-global substitute replaces only the first match
    def test_substitute_first_match(self, engine):
        report = engine.execute("hello world hello", Substitute(pattern="hello", replacement="hi"))
        assert report.success
        assert report.modified_content == "hi world hello"
        assert report.lines_modified == 1
        assert report.modified is True
        assert report.changes_applied == ("Replaced 'hello' with 'hi'",)

    # * Verify global substitute replaces every match
    def test_substitute_global(self, engine):
        op = Substitute(pattern="hello", replacement="hi", flags="g")
        report = engine.execute("hello world hello universe hello", op)
        assert report.modified_content == "hi world hi universe hi"
        assert report.lines_modified == 3
        assert len(report.changes_applied) == 3

    # * Verify delete drops matching lines & logs line numbers
    def test_delete_matching_lines(self, engine):
        content = "keep this line\ndelete this line\nkeep this too\ndelete this also"
        report = engine.execute(content, Delete(pattern="delete"))
        assert report.modified_content == "keep this line\nkeep this too"
        assert report.lines_modified == 2
        assert report.changes_applied == (
            "Deleted line 2: 'delete this line'",
            "Deleted line 4: 'delete this also'",
        )

    # * Verify print keeps only matching lines
    def test_print_filters_lines(self, engine):
        report = engine.execute("apple\nbanana\napricot", Print(pattern="ap.*"))
        assert report.modified_content == "apple\napricot"
        assert report.lines_modified == 2
        assert report.modified is True
        assert report.changes_applied == (
            "Matched line 1: 'apple'",
            "Matched line 3: 'apricot'",
        )

    # * Verify invalid regex yields a failed report w/ untouched content
    def test_invalid_pattern(self, engine):
        report = engine.execute("test content", Substitute(pattern="[invalid", replacement="valid"))
        assert report.success is False
        assert report.modified_content == "test content"
        assert report.modified is False
        assert report.error.startswith("Invalid regex pattern")

    # * Verify batch feeds each step's output into the next
    def test_batch_accumulates(self, engine):
        ops = [
            Substitute(pattern="hello", replacement="hi", flags="g"),
            Substitute(pattern="world", replacement="earth"),
        ]
        report = engine.execute_batch("hello hello world", ops)
        assert report.success
        assert report.modified_content == "hi hi earth"
        assert report.original_content == "hello hello world"
        assert len(report.changes_applied) == 3
        assert report.lines_modified == 3
        assert report.modified is True


# * Test validate() rules
class TestValidate:
    # * Verify missing operation is rejected
    def test_none_operation(self, engine):
        with pytest.raises(OperationValidationError, match="Operation cannot be null"):
            engine.validate(None)

    # * Verify text-based kinds are unsupported
    @pytest.mark.parametrize(
        "op",
        [Insert(text="x"), Append(text="x"), Change(text="x")],
    )
    def test_unsupported_kinds(self, engine, op):
        with pytest.raises(OperationValidationError, match="Unsupported operation type"):
            engine.validate(op)

    # * Verify blank patterns are rejected for every executable kind
    @pytest.mark.parametrize(
        "op, label",
        [
            (Substitute(pattern="   ", replacement="x"), "Substitute"),
            (Delete(pattern=""), "Delete"),
            (Print(pattern="\t"), "Print"),
        ],
    )
    def test_blank_pattern(self, engine, op, label):
        with pytest.raises(OperationValidationError) as exc:
            engine.validate(op)
        assert str(exc.value) == f"{label} operation requires a pattern"
        assert exc.value.kind is op.kind

    # * Verify address-only delete/print are built but never validated
    def test_address_only_rejected(self, engine):
        with pytest.raises(OperationValidationError, match="Delete operation requires a pattern"):
            engine.validate(Delete(address="1"))

    # * Verify regex syntax errors carry the pattern
    def test_invalid_regex(self, engine):
        with pytest.raises(OperationValidationError) as exc:
            engine.validate(Delete(pattern="(unclosed"))
        assert "Invalid regex pattern" in str(exc.value)
        assert exc.value.pattern == "(unclosed"

    # * Verify a valid operation passes silently
    def test_valid(self, engine):
        assert engine.validate(Substitute(pattern="a+", replacement="", flags="gi")) is None


# * Test check() error-as-value wrapper
class TestCheck:
    def test_valid_operation(self, engine):
        result = engine.check(Print(pattern="x"))
        assert result.is_valid
        assert result.error is None
        assert result.warnings == []

    def test_invalid_operation(self, engine):
        result = engine.check(Print(pattern="[x"))
        assert not result.is_valid
        assert result.error.startswith("Invalid regex pattern")

    # * Verify unknown flag letters produce a warning, not an error
    def test_unknown_flags_warn(self, engine):
        result = engine.check(Substitute(pattern="a", replacement="b", flags="gxz"))
        assert result.is_valid
        assert result.warnings == ["Ignoring unrecognized flags: xz"]


# * Test capability queries
class TestSupports:
    @pytest.mark.parametrize("kind", [OperationKind.SUBSTITUTE, OperationKind.DELETE, OperationKind.PRINT])
    def test_executable(self, engine, kind):
        assert engine.supports(kind)

    @pytest.mark.parametrize("kind", [OperationKind.INSERT, OperationKind.APPEND, OperationKind.CHANGE, None])
    def test_not_executable(self, engine, kind):
        assert not engine.supports(kind)

    def test_capabilities_lists_every_kind(self, engine):
        caps = engine.capabilities()
        assert set(caps) == set(OperationKind)
        assert [k for k, ok in caps.items() if ok] == [
            OperationKind.SUBSTITUTE,
            OperationKind.DELETE,
            OperationKind.PRINT,
        ]


# * Test substitute algorithm details
class TestSubstitute:
    # * Verify no-match leaves everything untouched
    def test_no_match(self, engine):
        report = engine.execute("abc", Substitute(pattern="zzz", replacement="y", flags="g"))
        assert report.success
        assert report.modified is False
        assert report.lines_modified == 0
        assert report.modified_content == "abc"
        assert report.changes_applied == ()

    # * Verify an identical replacement counts the match but is not a modification
    def test_identity_replacement(self, engine):
        report = engine.execute("aaa", Substitute(pattern="a", replacement="a"))
        assert report.lines_modified == 1
        assert report.modified is False

    def test_empty_replacement(self, engine):
        report = engine.execute("a-b-c", Substitute(pattern="-", replacement="", flags="g"))
        assert report.modified_content == "abc"
        assert report.changes_applied == ("Replaced '-' with ''", "Replaced '-' with ''")

    # * Verify group references expand in the replacement & in the change log
    def test_group_references(self, engine):
        op = Substitute(pattern=r"(\w+)@(\w+)", replacement=r"\2 at \1")
        report = engine.execute("me@host", op)
        assert report.modified_content == "host at me"
        assert report.changes_applied == ("Replaced 'me@host' with 'host at me'",)

    def test_named_group(self, engine):
        op = Substitute(pattern=r"(?P<word>cat)", replacement=r"<\g<word>>", flags="g")
        assert engine.execute("cat cat", op).modified_content == "<cat> <cat>"

    # * Verify a broken template fails the report instead of raising
    def test_invalid_group_reference(self, engine):
        report = engine.execute("abc", Substitute(pattern="(a)", replacement=r"\3"))
        assert report.success is False
        assert report.error.startswith("Invalid replacement")
        assert report.modified_content == "abc"

    def test_ignore_case(self, engine):
        report = engine.execute("Hello HELLO", Substitute(pattern="hello", replacement="hi", flags="gi"))
        assert report.modified_content == "hi hi"

    # * Verify substitution spans lines unless anchors are multiline
    def test_multiline_anchor(self, engine):
        op = Substitute(pattern="^b", replacement="X")
        assert engine.execute("a\nb", op).modified_content == "a\nb"
        op_m = Substitute(pattern="^b", replacement="X", flags="m")
        assert engine.execute("a\nb", op_m).modified_content == "a\nX"

    def test_dotall(self, engine):
        op = Substitute(pattern="a.b", replacement="-", flags="s")
        assert engine.execute("a\nb", op).modified_content == "-"

    # * Verify global count equals the number of non-overlapping matches
    def test_global_count_non_overlapping(self, engine):
        report = engine.execute("aaaa", Substitute(pattern="aa", replacement="b", flags="g"))
        assert report.modified_content == "bb"
        assert report.lines_modified == 2


# * Test delete & print line handling
class TestLineOperations:
    def test_delete_everything(self, engine):
        report = engine.execute("x1\nx2", Delete(pattern="x"))
        assert report.modified_content == ""
        assert report.lines_modified == 2

    def test_delete_no_match(self, engine, sample_log):
        report = engine.execute(sample_log, Delete(pattern="WARN"))
        assert report.modified is False
        assert report.modified_content == sample_log

    def test_delete_ignore_case(self, engine, sample_log):
        report = engine.execute(sample_log, Delete(pattern="error", flags="i"))
        assert report.lines_modified == 2
        assert "error" not in report.modified_content.lower()

    # * Verify trailing newlines are not counted as lines
    def test_delete_drops_trailing_newline(self, engine):
        report = engine.execute("a\nb\n", Delete(pattern="b"))
        assert report.modified_content == "a"
        assert report.lines_modified == 1

    def test_print_ignores_trailing_empty_lines(self, engine):
        report = engine.execute("a\n\n", Print(pattern="^$"))
        assert report.lines_modified == 0
        assert report.changes_applied == ()
        assert report.modified_content == ""

    def test_print_keeps_interior_empty_line(self, engine):
        report = engine.execute("a\n\nb\n", Print(pattern="^$"))
        assert report.lines_modified == 1
        assert report.changes_applied == ("Matched line 2: ''",)

    def test_delete_never_grows(self, engine, sample_log):
        report = engine.execute(sample_log, Delete(pattern="INFO"))
        before = sample_log.split("\n")
        after = report.modified_content.split("\n")
        assert len(after) == len(before) - report.lines_modified

    # * Verify print reports modified even when nothing matched
    def test_print_no_match_still_modified(self, engine):
        report = engine.execute("abc", Print(pattern="zzz"))
        assert report.success
        assert report.modified is True
        assert report.modified_content == ""
        assert report.lines_modified == 0

    def test_print_identical_output_still_modified(self, engine):
        report = engine.execute("only line", Print(pattern="line"))
        assert report.modified_content == "only line"
        assert report.modified is True


# * Test execute/preview failure handling & timing
class TestExecuteAndPreview:
    def test_unsupported_kind_fails(self, engine):
        report = engine.execute("text", Insert(text="new"))
        assert report.success is False
        assert report.error == "Unsupported operation type: Insert"
        assert report.modified_content == "text"

    def test_none_operation_fails(self, engine):
        report = engine.execute("text", None)
        assert report.success is False
        assert report.error == "Operation cannot be null"

    def test_non_string_content_fails(self, engine):
        report = engine.execute(None, Delete(pattern="x"))
        assert report.success is False
        assert report.error == "Content must be a string"

    # * Verify preview agrees w/ execute apart from timing
    def test_preview_matches_execute(self, engine, sample_log):
        op = Substitute(pattern="INFO", replacement="info", flags="g")
        executed = engine.execute(sample_log, op)
        previewed = engine.preview(sample_log, op)
        assert previewed.modified_content == executed.modified_content
        assert previewed.modified == executed.modified
        assert previewed.lines_modified == executed.lines_modified
        assert previewed.changes_applied == executed.changes_applied
        assert previewed.execution_time_ms == 0

    def test_preview_failure_timing_zero(self, engine):
        report = engine.preview("x", Delete(pattern="("))
        assert report.success is False
        assert report.execution_time_ms == 0

    def test_execution_time_non_negative(self, engine):
        report = engine.execute("x", Delete(pattern="x"))
        assert report.execution_time_ms >= 0

    def test_default_engine_is_engine(self):
        assert isinstance(default_engine, TransformationEngine)


# * Test batch execution
class TestExecuteBatch:
    # * Verify batch equals folding execute over the list
    def test_batch_equals_fold(self, engine, sample_log):
        ops = [
            Delete(pattern="^INFO"),
            Substitute(pattern="disk", replacement="volume"),
            Print(pattern="full"),
        ]
        current = sample_log
        for op in ops:
            current = engine.execute(current, op).modified_content
        assert engine.execute_batch(sample_log, ops).modified_content == current

    # * Verify a failing step returns the original content & prior changes
    def test_failure_reports_step(self, engine):
        ops = [
            Substitute(pattern="hello", replacement="hi", flags="g"),
            Substitute(pattern="[bad", replacement="x"),
            Delete(pattern="hi"),
        ]
        report = engine.execute_batch("hello hello world", ops)
        assert report.success is False
        assert report.error.startswith("Batch operation failed at step 2: Invalid regex pattern")
        assert report.modified_content == "hello hello world"
        assert report.modified is False
        assert len(report.changes_applied) == 2

    def test_failure_at_first_step(self, engine):
        report = engine.execute_batch("abc", [Insert(text="x")])
        assert report.error == "Batch operation failed at step 1: Unsupported operation type: Insert"
        assert report.changes_applied == ()

    # * Verify a raw dict in the list fails the step instead of raising
    def test_non_operation_element(self, engine):
        report = engine.execute_batch("x", [{"operation": "d", "pattern": "x"}])
        assert report.success is False
        assert report.error.startswith("Batch operation failed at step 1")
        assert report.modified_content == "x"

    def test_none_element(self, engine):
        report = engine.execute_batch("x", [Delete(pattern="y"), None])
        assert report.error == "Batch operation failed at step 2: Operation cannot be null"

    def test_none_ops(self, engine):
        report = engine.execute_batch("abc", None)
        assert report.success is False
        assert report.error == "Operations list is required"
        assert report.modified_content == "abc"

    def test_empty_ops(self, engine):
        report = engine.execute_batch("abc", [])
        assert report.success
        assert report.modified is False
        assert report.modified_content == "abc"
        assert report.lines_modified == 0

    # * Verify the modified flag is sticky across steps
    def test_modified_if_any_step_modified(self, engine):
        ops = [
            Substitute(pattern="a", replacement="b"),
            Substitute(pattern="zzz", replacement="y"),
        ]
        report = engine.execute_batch("a", ops)
        assert report.modified is True
        assert report.lines_modified == 1

    def test_accepts_generator(self, engine):
        ops = (Substitute(pattern=c, replacement=c.upper()) for c in "ab")
        assert engine.execute_batch("ab", ops).modified_content == "AB"
