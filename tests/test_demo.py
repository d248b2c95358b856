import io

from rationax import demo


def test_demo_default_operands():
    out = io.StringIO()
    assert demo.main(["--delay", "0"], out=out) == 0
    text = out.getvalue()
    assert "Fraction: 1/2" in text
    assert "Fraction: 3/4" in text
    assert "Sum: 5/4" in text
    assert "Difference: -1/4" in text
    assert "Product: 3/8" in text
    assert "Quotient: 2/3" in text
    assert "Magic Happens!" in text


def test_demo_custom_operands():
    out = io.StringIO()
    assert demo.main(["2/4", "1 3", "--delay", "0"], out=out) == 0
    assert "Sum: 5/6" in out.getvalue()


def test_demo_division_by_zero(capsys):
    out = io.StringIO()
    assert demo.main(["1/2", "0/1", "--delay", "0"], out=out) == 2
    assert "Can't divide by zero" in capsys.readouterr().err
    assert out.getvalue() == ""


def test_demo_invalid_operand(capsys):
    assert demo.main(["1/0", "--delay", "0"], out=io.StringIO()) == 2
    assert "Invalid input" in capsys.readouterr().err


def test_compute_results_order():
    names = [name for name, _ in demo.compute_results(demo.Rational(1), demo.Rational(2))]
    assert names == ["Sum", "Difference", "Product", "Quotient"]
