import io
import re

from pyft.cli import main, run_adv, run_basic, run_ga, run_tha


def test_basic_lines():
    buffer = io.StringIO()
    run_basic(buffer)
    out = buffer.getvalue()
    assert "signed i  : -42\n" in out
    assert "unsigned  : 4294967295\n" in out
    assert "NULL str  : (null)\n" in out
    assert "NULL ptr  : (nil)\n" in out
    assert "upper hex : FF\n" in out
    assert "big hex   : 7fffffff\n" in out


def test_basic_pointer_is_hex():
    buffer = io.StringIO()
    run_basic(buffer)
    out = buffer.getvalue()
    matches = re.findall(r"pointer   : 0x([0-9a-f]+)\n", out)
    assert len(matches) == 1
    assert int(matches[0], 16) > 0


def test_basic_reports_errors():
    buffer = io.StringIO()
    run_basic(buffer)
    out = buffer.getvalue()
    assert out.startswith("\033[1;31merror: \033[0mnull string is not accepted!\n")
    assert "invalid argument type: '%g'" in out
    assert "right before line feed" in out
    assert "right before a null terminator" in out
    assert "---- BASIC TESTS ----" in out


def test_tha_return_values_agree():
    buffer = io.StringIO()
    run_tha(buffer)
    out = buffer.getvalue()
    pairs = re.findall(r"Retorno O: (-?\d+), Retorno M: (-?\d+)", out)
    assert len(pairs) == 9
    assert all(o == m for o, m in pairs)
    original = re.search(r"Retorno printf: (-?\d+)", out).group(1)
    mine = re.search(r"Retorno ft_printf: (-?\d+)", out).group(1)
    assert original == mine


def test_tha_bodies_agree():
    buffer = io.StringIO()
    run_tha(buffer)
    out = buffer.getvalue()
    lines = out.split("\n")
    originals = [line[3:] for line in lines if line.startswith("O: |")]
    mine = [line[3:] for line in lines if line.startswith("M: |")]
    assert originals == mine
    assert "|-2147483648| |2147483647|" in originals


def test_ga_counts_agree():
    buffer = io.StringIO()
    run_ga(buffer)
    out = buffer.getvalue()
    my_counts = re.findall(r"my: (-?\d+)\n", out)
    or_counts = re.findall(r"or: (-?\d+)\n", out)
    assert len(my_counts) == 9
    assert my_counts == or_counts


def test_ga_null_pointer():
    buffer = io.StringIO()
    run_ga(buffer)
    out = buffer.getvalue()
    assert out.count("[(nil)]\t") == 2


def test_adv_return_values_agree():
    buffer = io.StringIO()
    run_adv(buffer)
    out = buffer.getvalue()
    pairs = re.findall(r"printf returned: (-?\d+), ft_printf returned: (-?\d+)", out)
    assert len(pairs) == 24
    assert all(o == m for o, m in pairs)


def test_adv_bodies_agree():
    buffer = io.StringIO()
    run_adv(buffer)
    out = buffer.getvalue()
    lines = out.split("\n")
    originals = [line[len("printf: "):] for line in lines if line.startswith("printf: |")]
    mine = [line[len("ft_printf: "):] for line in lines if line.startswith("ft_printf: |")]
    assert originals == mine
    assert "|4294967295|" in originals
    assert "|(null)| |(nil)|" in originals


def test_adv_error_section():
    buffer = io.StringIO()
    run_adv(buffer)
    out = buffer.getvalue()
    assert "ft_printf(NULL): \033[1;31merror: " in out
    assert "invalid specifier (%g): " in out
    assert "'%g' is not a valid argument type!" in out
    assert out.endswith("\ndone\n\n" + out.split("\ndone\n\n")[-1])
    assert "EDGES\n" in out


def test_main_unknown_flag(capsys):
    assert main(["--x"]) == 0
    assert capsys.readouterr().out == "flag not found, valids flags are --b, --t, --g, --a\n"


def test_main_default_runs_basic(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "---- BASIC TESTS ----" in out
    assert "NULL ptr  : (nil)\n" in out


def test_main_flag_runs_chosen_suite(capsys):
    assert main(["--g"]) == 0
    out = capsys.readouterr().out
    assert "\n---percent---\n" in out
    assert "---- BASIC TESTS ----" not in out


def test_main_basic_flag_matches_runner(capsys):
    assert main(["--b"]) == 0
    out = capsys.readouterr().out
    buffer = io.StringIO()
    run_basic(buffer)
    direct = buffer.getvalue()
    strip = re.compile(r"0x[0-9a-f]+")
    assert strip.sub("PTR", out) == strip.sub("PTR", direct)