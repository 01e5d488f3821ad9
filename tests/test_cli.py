import pytest

from muzz import cli, report
from muzz.options import Units, Target, Constant, Verbosity, Precision, Formula


def run(capsys, *argv):
    code = cli.main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


def test_default_energy_imperial(capsys):
    code, out, err = run(capsys, "230", "900")
    assert code == 0
    assert out == "230 gr @ 900 ft/s = 414 lbf\n"
    assert err == ""


def test_terse_rounded(capsys):
    assert run(capsys, "-q", "230", "900")[:2] == (0, "414\n")
    assert run(capsys, "-S", "230", "900")[:2] == (0, "414\n")


def test_terse_exact(capsys):
    assert run(capsys, "-qp", "230", "900")[1] == "413.78\n"


def test_metric_verbose(capsys):
    assert run(capsys, "-s", "15", "270")[1] == "15.00 g @ 270.00 m/s = 547 J\n"


def test_solve_for_mass(capsys):
    assert run(capsys, "-mq", "900", "414")[1] == "230\n"


def test_solve_for_velocity(capsys):
    assert run(capsys, "-v", "230", "414")[1] == "230 gr @ 900 ft/s = 414 lbf\n"


def test_constant_flags(capsys):
    assert run(capsys, "-qc", "230", "900")[1] == "414\n"
    assert run(capsys, "-q", "-k", "1000", "230", "900")[1] == "186300\n"
    # a custom constant is kept w/ Si units, the others become 1000
    assert run(capsys, "-sq", "-k", "2000", "15", "270")[1] == "273\n"
    assert run(capsys, "-sqC", "15", "270")[1] == "547\n"


def test_knockout(capsys):
    assert run(capsys, "-t", "230", "860", ".45")[1] == '230 gr @ 860 ft/s (0.450" diameter) = 12.72 TKOF\n'
    assert run(capsys, "-ts", "15", "255", "11.6")[1] == "15.00 g @ 255.00 m/s (11.60 mm diameter) = 12.68 TKOF\n"
    assert run(capsys, "-tq", "230", "860", ".45")[1] == "12.72\n"


def test_flags_after_values(capsys):
    assert run(capsys, "230", "900", "-q")[1] == "414\n"


def test_extra_values_are_ignored(capsys):
    assert run(capsys, "-q", "230", "900", "17")[1] == "414\n"


def test_bad_number_becomes_sentinel(capsys):
    # mass is read as -1: -1 * 900^2 / 450240
    code, out, _ = run(capsys, "-qp", "abc", "900")
    assert code == 0
    assert out == "-1.80\n"


def test_degenerate_values_are_printed(capsys):
    assert run(capsys, "-mq", "0", "414")[1] == "inf\n"
    assert run(capsys, "-vq", "230", "-414")[1] == "nan\n"


def test_no_arguments(capsys):
    code, out, err = run(capsys)
    assert code == 1
    assert out == ""
    assert "Too few arguments" in err
    assert report.USAGE in err


def test_parameters_required(capsys):
    code, out, err = run(capsys, "-q")
    assert code == 1
    assert "Parameters required" in err
    assert cli.HELP_HINT in err


def test_one_value(capsys):
    code, out, err = run(capsys, "230")
    assert code == 1
    assert out == ""
    assert "more than one parameter" in err
    assert report.USAGE in err


def test_knockout_needs_three_values(capsys):
    code, out, err = run(capsys, "-t", "230", "860")
    assert code == 1
    assert out == ""
    assert "Mass, Velocity and Diameter" in err


@pytest.mark.parametrize(
    "flag,text",
    [("-h", report.HELP), ("-V", report.VERSION), ("-H", report.UNITS), ("-E", report.EXAMPLES)],
)
@pytest.mark.parametrize("rest", [[], ["230"], ["-s", "-t", "1", "2"], ["-q", "x", "y", "z"]])
def test_informational_flags_exit_zero(capsys, flag, text, rest):
    code, out, err = run(capsys, flag, *rest)
    assert code == 0
    assert out == text + "\n"
    assert err == ""


def test_first_informational_flag_wins(capsys):
    assert run(capsys, "-qVh")[:2] == (0, report.VERSION + "\n")


def test_unknown_flag_is_usage_error(capsys):
    code, out, err = run(capsys, "-x", "230", "900")
    assert code == 1
    assert out == ""
    assert "ERROR:  unrecognized arguments: -x" in err
    assert report.USAGE in err
    assert cli.HELP_HINT in err


def test_missing_custom_constant_is_usage_error(capsys):
    code, out, err = run(capsys, "230", "900", "-k")
    assert code == 1
    assert out == ""
    assert "-k" in err
    assert report.USAGE in err


def test_negative_scientific_notation_is_a_value(capsys):
    # -1e3 lbf: -1000 / 900^2 * 450240
    assert run(capsys, "-mqp", "900", "-1e3")[:2] == (0, "-555.85\n")
    opts, vals = cli.parse_args(["-k", "-2.5e1", "-.5", "1"])
    assert opts.custom_k == -25.0
    assert vals == ["-.5", "1"]


def test_parse_args_defaults():
    opts, vals = cli.parse_args(["1", "2"])
    assert vals == ["1", "2"]
    assert opts.units == Units.IMPERIAL
    assert opts.target == Target.ENERGY
    assert opts.constant == Constant.DEFAULT
    assert opts.custom_k is None
    assert opts.verbosity == Verbosity.VERBOSE
    assert opts.precision == Precision.ROUNDED
    assert opts.formula == Formula.STANDARD


def test_parse_args_last_flag_wins():
    opts, _ = cli.parse_args(["-s", "-i", "-m", "-v", "-k", "5", "-c", "1", "2"])
    assert opts.units == Units.IMPERIAL
    assert opts.target == Target.VELOCITY
    assert opts.constant == Constant.APPROX

    opts, _ = cli.parse_args(["-C", "-k", "5", "1", "2"])
    assert opts.constant == Constant.CUSTOM
    assert opts.custom_k == 5.0


def test_read_values_mapping():
    opts, _ = cli.parse_args(["-m", "1", "2"])
    assert cli.read_values(opts, ["900", "414"]) == (-1.0, 900.0, 414.0, -1.0)
    opts, _ = cli.parse_args(["-v", "1", "2"])
    assert cli.read_values(opts, ["230", "414"]) == (230.0, -1.0, 414.0, -1.0)
    opts, _ = cli.parse_args(["-t", "1", "2", "3"])
    assert cli.read_values(opts, ["230", "860", ".45"]) == (230.0, 860.0, -1.0, 0.45)
