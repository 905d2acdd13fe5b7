def is_prime(n: int) -> bool:
    if n <= 1:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True

def is_prime_square(n: int) -> bool:
    """True iff n == p*p for some prime p."""
    p = 2
    while p * p <= n:
        if p * p == n and is_prime(p):
            return True
        p += 1
    return False

def must_be_abelian(n: int) -> bool:
    """
    Every group of prime or prime-squared order is abelian, so the search
    may restrict itself to symmetric tables for these orders.
    """
    return is_prime(n) or is_prime_square(n)
