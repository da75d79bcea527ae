"""Tests for gitpick.ui.output."""

from gitpick.ui.output import GREEN, RED, error, log, success, warn


class TestLogFunctions:
    def test_log(self, capsys):
        log("hello")
        assert "hello" in capsys.readouterr().err

    def test_success(self, capsys):
        success("done")
        err = capsys.readouterr().err
        assert "done" in err
        assert GREEN in err

    def test_warn(self, capsys):
        warn("careful")
        assert "careful" in capsys.readouterr().err

    def test_error(self, capsys):
        error("broke")
        err = capsys.readouterr().err
        assert "broke" in err
        assert RED in err

    def test_stdout_stays_clean(self, capsys):
        log("a")
        warn("b")
        error("c")
        assert capsys.readouterr().out == ""

    def test_prefixed(self, capsys):
        log("hello")
        assert "[gitpick]" in capsys.readouterr().err
