from numba import njit


@njit(cache=True)
def euclid_pair(a: int, b: int) -> int:
    """
    Computes GCD of a and b by repeated remainders
    """
    while b:
        a, b = b, a % b
    return abs(a)


@njit(cache=True)
def stein_pair(a: int, b: int) -> int:
    """
    Computes GCD of a and b by the binary algorithm (shifts and subtractions only)
    """
    a = abs(a)
    b = abs(b)
    if a == 0:
        return b
    if b == 0:
        return a

    # common power of two
    shift = 0
    while ((a | b) & 1) == 0:
        a >>= 1
        b >>= 1
        shift += 1

    while (a & 1) == 0:
        a >>= 1

    # a stays odd from here on
    while b != 0:
        while (b & 1) == 0:
            b >>= 1
        if a > b:
            a, b = b, a
        b -= a
    return a << shift


@njit(cache=True)
def euclid_fold(first: int, arr) -> int:
    """
    Folds the running GCD `first` over a vector with the remainder step.
    Returns 1 immediately if any pair gives 1.
    """
    result = first
    for i in range(len(arr)):
        result = euclid_pair(result, arr[i])
        if result == 1:
            return 1
    return result


@njit(cache=True)
def stein_fold(first: int, arr) -> int:
    """
    Folds the running GCD `first` over a vector with the binary step.
    Returns 1 immediately if any pair gives 1.
    """
    result = first
    for i in range(len(arr)):
        result = stein_pair(result, arr[i])
        if result == 1:
            return 1
    return result
