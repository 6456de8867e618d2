"""Tests for heuristic strength and improvement notes."""

from codecoach.analyzers import negative_signals, positive_signals


class TestPositiveSignals:
    """Test strength detection."""

    def test_empty(self):
        assert positive_signals("") == ()

    def test_async_requires_await(self):
        """async alone is not enough."""
        assert "Proper async/await usage" not in positive_signals("async function f() {}")
        assert "Proper async/await usage" in positive_signals(
            "async function f() { await g(); }"
        )

    def test_python_try_except(self):
        """try/except counts as error handling."""
        code = "try:\n    run()\nexcept ValueError:\n    pass\n"
        assert "Good error handling with try-catch blocks" in positive_signals(code)

    def test_line_comment(self):
        assert "Good use of comments for documentation" in positive_signals("x(); // why")

    def test_each_signal_reported_once(self):
        """Repeated constructs produce one note."""
        code = "const a = 1;\nconst b = 2;\nlet c = 3;\n"
        strengths = positive_signals(code)

        assert strengths.count("Good use of modern variable declarations") == 1


class TestNegativeSignals:
    """Test improvement detection."""

    def test_empty(self):
        assert negative_signals("") == ()

    def test_loose_equality_ignored_when_strict_present(self):
        """Mixed equality styles do not trigger the note."""
        improvements = negative_signals("if (a == b) {}\nif (c === d) {}")
        assert "Use strict equality (===) for better type safety" not in improvements

    def test_short_text_not_asked_for_comments(self):
        assert "Add comments to explain complex logic" not in negative_signals("x = 1;")

    def test_long_text_without_functions(self):
        """Long scripts without functions are asked to split."""
        code = "total = total + value;\n" * 6
        improvements = negative_signals(code)

        assert "Consider breaking code into smaller functions" in improvements
        assert "Add comments to explain complex logic" in improvements

    def test_arrow_functions_count_as_functions(self):
        code = "const double = (value) => value * 2;\n" * 4
        assert "Consider breaking code into smaller functions" not in negative_signals(code)

    def test_console_log(self):
        improvements = negative_signals("console.log('debug');")
        assert "Remove or replace console.log statements for production" in improvements
