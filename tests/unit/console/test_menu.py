"""Unit tests for the interactive console menu."""

import io

import pytest

from src.console import InteractiveMenu


class ScriptedInput:
    """Feeds prepared answers to the menu, then signals end of input."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def output():
    return io.StringIO()


def make_menu(dispatcher, output, *answers):
    scripted = ScriptedInput(*answers)
    return InteractiveMenu(dispatcher, input_func=scripted, output=output), scripted


class TestRender:
    """Tests for the menu text."""

    def test_numbers_follow_registration_order(self, dispatcher, output):
        """Test menu keys 1..15 map to registration order."""
        menu, _ = make_menu(dispatcher, output)
        choices = menu.choices
        assert list(choices) == [str(n) for n in range(1, 16)]
        assert choices["1"].id == "singleton"
        assert choices["3"].id == "strategy"
        assert choices["15"].id == "visitor"

    def test_grouped_by_category(self, dispatcher, output):
        """Test patterns are listed under their category headings."""
        menu, _ = make_menu(dispatcher, output)
        text = menu.render()
        assert "DESIGN PATTERNS INTERACTIVE DEMO" in text
        creational = text.index("Creational Patterns:")
        behavioral = text.index("Behavioral Patterns:")
        structural = text.index("Structural Patterns:")
        assert creational < text.index("11. Builder") < behavioral
        assert behavioral < text.index("14. Chain of Responsibility") < structural
        assert structural < text.index("12. Facade")
        assert "A. Run ALL patterns" in text
        assert "Q. Quit" in text


class TestHandleChoice:
    """Tests for single menu choices."""

    def test_pattern_choice(self, dispatcher, output):
        """Test choosing a number prints the pattern's before and after."""
        menu, scripted = make_menu(dispatcher, output, "")
        assert menu.handle_choice(" 3 ") is True

        text = output.getvalue()
        assert "═══ Strategy Pattern ═══" in text
        before = text.index("BEFORE (Problem):")
        after = text.index("AFTER (Solution):")
        assert before < text.index("StrategyBefore A: HELLO") < after
        assert after < text.index("StrategyAfter A: HELLO")
        assert scripted.prompts == ["Press Enter to return to menu..."]

    def test_run_all_lowercase(self, dispatcher, output):
        """Test 'a' runs every pattern."""
        menu, _ = make_menu(dispatcher, output, "")
        assert menu.handle_choice("a") is True

        text = output.getvalue()
        assert "Running all patterns..." in text
        assert "--- Design Patterns Demo ---" in text
        assert "VisitorAfter:" in text

    def test_quit(self, dispatcher, output):
        """Test 'q' ends the loop."""
        menu, _ = make_menu(dispatcher, output)
        assert menu.handle_choice("q") is False

    @pytest.mark.parametrize("choice", ["0", "16", "x", ""])
    def test_invalid_choice(self, dispatcher, output, choice):
        """Test unknown keys print an error and keep the loop going."""
        menu, _ = make_menu(dispatcher, output, "")
        assert menu.handle_choice(choice) is True
        assert "Invalid choice." in output.getvalue()

    def test_end_of_input_while_paused(self, dispatcher, output):
        """Test end of input at the pause prompt ends the loop."""
        menu, _ = make_menu(dispatcher, output)
        assert menu.handle_choice("1") is False


class TestRun:
    """Tests for the menu loop."""

    def test_run_until_quit(self, dispatcher, output):
        """Test a full session: one pattern, then quit."""
        menu, _ = make_menu(dispatcher, output, "1", "", "Q")
        menu.run()

        text = output.getvalue()
        assert "SingletonAfter: Instance.Mode=X" in text
        assert text.rstrip().endswith("Thank you for exploring design patterns!")

    def test_run_ends_on_eof(self, dispatcher, output):
        """Test end of input quits with the farewell message."""
        menu, _ = make_menu(dispatcher, output)
        menu.run()
        assert "Thank you for exploring design patterns!" in output.getvalue()

    def test_failing_demo_shows_error(self, broken_registry, output):
        """Test a failing demo prints its partial output and the error."""
        from src.core.dispatcher import PatternDispatcher

        menu, _ = make_menu(PatternDispatcher(broken_registry), output, "", "Q")
        assert menu.handle_choice("2") is True

        text = output.getvalue()
        assert "partial line" in text
        assert "Error: boom" in text
