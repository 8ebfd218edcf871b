import regression_checks


def test_run_regressions_passes(capsys):
    regression_checks.run_regressions()
    out = capsys.readouterr().out
    assert "All regression checks passed." in out
    assert "FAIL" not in out


def test_inspect_sequence_prints_each_press(capsys):
    regression_checks.inspect_sequence("2 + 3 = =")
    out = capsys.readouterr().out
    assert "presses:        5" in out
    assert "-> 8" in out
    assert "prev_operator:  +" in out
