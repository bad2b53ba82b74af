import pytest

from fugegga.cli import ArgumentError, CommandOptions, help_text, main, parse_arguments
from fugegga.parameters import SystemParameters


@pytest.fixture
def files(tmp_path):
    dataset = tmp_path / "data.csv"
    script = tmp_path / "run.js"
    fuzzy = tmp_path / "system.ffs"
    for path in (dataset, script, fuzzy):
        path.write_text("x")
    return str(dataset), str(script), str(fuzzy)


def test_no_arguments_does_not_run_from_command_line():
    options = parse_arguments([], SystemParameters())
    assert options == CommandOptions()
    assert options.run_from_cmd is False


def test_help_flag():
    options = parse_arguments(["--help"], SystemParameters())
    assert options.show_help is True
    assert options.run_from_cmd is False


def test_dataset_and_script_run_from_command_line(files):
    dataset, script, _ = files
    params = SystemParameters()
    options = parse_arguments(["-d", dataset, "-s", script, "-g", "no"], params)
    assert options.run_from_cmd is True
    assert options.dataset_file == dataset
    assert options.script_file == script
    assert options.use_gui is False
    assert params.dataset_name == dataset


def test_long_flags_take_no_value(files):
    dataset, _, fuzzy = files
    options = parse_arguments(
        ["--verbose", "-d", dataset, "--evaluate", "-f", fuzzy], SystemParameters()
    )
    assert options.verbose is True
    assert options.evaluate is True
    assert options.fuzzy_file == fuzzy
    assert options.run_from_cmd is True


def test_missing_file_is_reported(tmp_path, files):
    _, script, _ = files
    missing = str(tmp_path / "absent.csv")
    with pytest.raises(ArgumentError, match="not found"):
        parse_arguments(["-d", missing, "-s", script], SystemParameters())


def test_bad_gui_value(files):
    dataset, script, _ = files
    with pytest.raises(ArgumentError, match="incorrect value"):
        parse_arguments(["-d", dataset, "-s", script, "-g", "maybe"], SystemParameters())


def test_argument_without_dash_is_a_usage_error():
    with pytest.raises(ArgumentError) as info:
        parse_arguments(["dataset"], SystemParameters())
    assert info.value.show_usage is True


def test_unknown_options_ask_for_help():
    for bad in (["--nope"], ["-x", "value"]):
        with pytest.raises(ArgumentError) as info:
            parse_arguments(bad, SystemParameters())
        assert info.value.show_help is True


def test_evaluate_and_predict_together(files):
    dataset, _, fuzzy = files
    with pytest.raises(ArgumentError, match="both"):
        parse_arguments(
            ["--evaluate", "--predict", "-d", dataset, "-f", fuzzy], SystemParameters()
        )


def test_prediction_needs_fuzzy_system_and_dataset(files):
    dataset, _, fuzzy = files
    with pytest.raises(ArgumentError, match="fuzzy system"):
        parse_arguments(["--predict", "-d", dataset], SystemParameters())
    with pytest.raises(ArgumentError, match="dataset"):
        parse_arguments(["--predict", "-f", fuzzy], SystemParameters())


def test_dataset_alone_is_not_enough(files):
    dataset, _, _ = files
    with pytest.raises(ArgumentError, match="AND a script"):
        parse_arguments(["-d", dataset], SystemParameters())


def test_help_text_lists_options():
    text = help_text()
    for option in ("--verbose", "--evaluate", "--predict", " -d ", " -s ", " -f ", " -g ", "--help"):
        assert option in text


def test_main_reports_errors(capsys):
    assert main(["--bogus"]) == 1
    out = capsys.readouterr().out
    assert "ERROR : Invalid parameter !" in out
    assert "Valid parameters are" in out


def test_main_help_succeeds(capsys):
    assert main(["--help"]) == 0
    assert "Valid parameters are" in capsys.readouterr().out