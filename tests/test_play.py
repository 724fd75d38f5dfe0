from typer.testing import CliRunner

from flipbot.commands.play import app

runner = CliRunner()


def test_quit() -> None:
    result = runner.invoke(app, [], input="q\n")
    assert result.exit_code == 0
    assert "Your turn (Black)" in result.output
    assert "  a b c d e f g h" in result.output


def test_invalid_field() -> None:
    result = runner.invoke(app, [], input="z9\nq\n")
    assert result.exit_code == 0
    assert 'Error: Invalid field "z9"' in result.output


def test_illegal_move() -> None:
    result = runner.invoke(app, [], input="a1\nq\n")
    assert result.exit_code == 0
    assert "You can't place a disc there." in result.output


def test_computer_replies() -> None:
    result = runner.invoke(app, [], input="d3\nq\n")
    assert result.exit_code == 0
    assert "Computer plays" in result.output


def test_verbose_shows_candidates() -> None:
    result = runner.invoke(app, ["-v"], input="d3\nq\n")
    assert result.exit_code == 0

    # White's replies to d3 are c3, e3 and c5.
    assert "  c3: " in result.output
    assert "  e3: " in result.output
    assert "  c5: " in result.output
