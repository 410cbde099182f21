"""1 + 2 + ... + n 的三种实现，结果完全一致，只是资源消耗不同"""


def _check(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def sum_to_n_a(n: int) -> int:
    """高斯公式：O(1) 时间，O(1) 空间"""
    _check(n)
    return n * (n + 1) // 2


def sum_to_n_b(n: int) -> int:
    """循环累加：O(n) 时间，O(1) 空间"""
    _check(n)
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_to_n_c(n: int) -> int:
    """
    递归：O(n) 时间

    每次把区间一分为二，递归深度为 O(log n)，不会耗尽调用栈。
    """
    _check(n)
    return _range_sum(1, n)


def _range_sum(lo: int, hi: int) -> int:
    if lo > hi:
        return 0
    if lo == hi:
        return lo
    mid = (lo + hi) // 2
    return _range_sum(lo, mid) + _range_sum(mid + 1, hi)
