import io

import pytest

from chunkwork.primes import count_primes, count_primes_in_range, is_prime, main


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 25 + 4, 97])
def test_is_prime_true(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 25, 35, 49, 91, 121])
def test_is_prime_false(n):
    assert is_prime(n) is False


def test_is_prime_matches_divisor_definition():
    for n in range(-5, 400):
        has_divisor = any(n % d == 0 for d in range(2, n))
        assert is_prime(n) == (n >= 2 and not has_divisor)


def test_count_primes_small_range():
    assert count_primes(1, 10, 3) == 4


@pytest.mark.parametrize("workers", [1, 2, 3, 5, 8, 50])
def test_count_primes_independent_of_workers(workers):
    assert count_primes(-20, 500, workers) == count_primes_in_range(-20, 500)


def test_count_primes_additive_over_ranges():
    whole = count_primes_in_range(0, 1000)
    assert whole == count_primes_in_range(0, 499) + count_primes_in_range(500, 1000)


def test_count_primes_empty_range():
    assert count_primes(10, 5, 4) == count_primes_in_range(10, 5) == 0


def test_count_primes_rejects_zero_workers():
    with pytest.raises(ValueError):
        count_primes(1, 10, 0)


def test_main_with_arguments(capsys):
    assert main(["1", "10", "--workers", "2"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "The range [1, 10] has 4 prime numbers."


def test_main_prompts_for_range(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n100\n"))
    assert main(["--workers", "3"]) == 0
    out = capsys.readouterr().out
    assert "Enter the starting point:" in out
    assert "Enter the end point:" in out
    expected = count_primes_in_range(1, 100)
    assert f"The range [1, 100] has {expected} prime numbers." in out


def test_main_rejects_non_integer_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main(["--workers", "2"]) == 1