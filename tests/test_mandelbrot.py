import pytest

from labkit.mandelbrot import DEFAULT_ITERATIONS, Orbit, describe, is_in_mandelbrot, main


def test_origin_is_inside():
    assert is_in_mandelbrot(0j) is True


def test_minus_one_is_inside():
    assert is_in_mandelbrot(complex(-1, 0)) is True


def test_one_escapes():
    assert is_in_mandelbrot(complex(1, 0)) is False


def test_boundary_point_two_depends_on_iterations():
    # z1 = 2 is not strictly greater than the radius; z2 = 6 is.
    assert is_in_mandelbrot(complex(2, 0), 1) is True
    assert is_in_mandelbrot(complex(2, 0), 2) is False


def test_zero_iterations_accepts_everything():
    assert is_in_mandelbrot(complex(100, 100), 0) is True


def test_huge_point_escapes_without_overflow_error():
    assert is_in_mandelbrot(complex(1e308, 1e308)) is False


def test_orbit_keeps_state_between_calls():
    orbit = Orbit()
    assert orbit.is_in_mandelbrot(complex(1, 0), DEFAULT_ITERATIONS) is False
    # The orbit carried on from the escaped value, so 0 now escapes too.
    assert orbit.is_in_mandelbrot(0j, DEFAULT_ITERATIONS) is False
    assert is_in_mandelbrot(0j) is True


def test_fresh_orbit_matches_function():
    for c in (0j, complex(-1, 0), complex(1, 0), complex(0.1, 0.1)):
        assert Orbit().is_in_mandelbrot(c, 50) == is_in_mandelbrot(c, 50)


def test_describe_inside():
    assert describe(0.25, 0.0, True) == "0.250000 + 0.000000i is in the Mandelbrot set"


def test_describe_outside():
    assert describe(1.0, -2.5, False) == "1.000000 + -2.500000i is not in the Mandelbrot set"


def test_main_reports_inside(capsys):
    assert main(["-1", "0"]) == 0
    assert capsys.readouterr().out == describe(-1.0, 0.0, True) + "\n"


def test_main_respects_iteration_count(capsys):
    assert main(["2", "0", "2"]) == 0
    assert capsys.readouterr().out == describe(2.0, 0.0, False) + "\n"


@pytest.mark.parametrize("argv", [[], ["1"], ["1", "2", "3", "4"]])
def test_main_usage(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err.startswith("Usage:")


def test_main_rejects_bad_real(capsys):
    assert main(["abc", "0"]) == 1
    assert capsys.readouterr().err == "Error: 'abc' is not a valid number.\n"


def test_main_rejects_bad_imaginary(capsys):
    assert main(["0", "1.5x"]) == 1
    assert capsys.readouterr().err == "Error: '1.5x' is not a valid number.\n"


def test_main_rejects_bad_iteration_count(capsys):
    assert main(["0", "0", "1.5"]) == 1
    assert capsys.readouterr().err == "Error: '1.5' is not a valid integer.\n"