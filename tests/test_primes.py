import pytest

from codedrills.euler import sieve_of_eratosthenes
from codedrills.primes import count_circular_primes, is_circular, main


@pytest.fixture(scope="module")
def primes_below_thousand():
    return set(sieve_of_eratosthenes(1000))


def test_is_circular_true(primes_below_thousand):
    assert is_circular(197, primes_below_thousand) is True
    assert is_circular(2, primes_below_thousand) is True


def test_is_circular_false(primes_below_thousand):
    assert is_circular(23, primes_below_thousand) is False


def test_is_circular_accepts_list():
    primes = sieve_of_eratosthenes(1000)
    assert is_circular(197, primes) == is_circular(197, set(primes))


def test_count_circular_below_hundred():
    assert count_circular_primes(sieve_of_eratosthenes(100)) == 13


def test_count_circular_bounds():
    primes = sieve_of_eratosthenes(1000)
    count = count_circular_primes(primes)
    assert count <= len(primes)
    assert count == sum(1 for p in primes if is_circular(p, set(primes)))


def test_count_circular_empty():
    assert count_circular_primes([]) == 0


def test_main_output(capsys):
    assert main(["--limit", "200000"]) == 0
    lines = capsys.readouterr().out.splitlines()
    primes = sieve_of_eratosthenes(200000)
    assert lines[0] == f"Sum of primes below 200000: {sum(primes)}"
    assert lines[1] == (
        f"Number of circular primes below 200000: {count_circular_primes(primes)}"
    )
    assert lines[2].startswith("Time taken: ")
    assert lines[3] == f"The 10,001st prime number is {primes[10000]}"


def test_main_small_limit_fails():
    with pytest.raises(SystemExit):
        main(["--limit", "100"])