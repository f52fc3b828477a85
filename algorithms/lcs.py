from typing import Sequence


def lcs_length(a: Sequence, b: Sequence) -> int:
    # rolling row over the shorter side; only dp[m][n] is returned
    if len(b) > len(a):
        a, b = b, a
    n, m = len(a), len(b)
    if n == 0 or m == 0:
        return 0
    dp = [0] * (m + 1)
    for i in range(1, n + 1):
        prev = 0
        for j in range(1, m + 1):
            cur = dp[j]
            if a[i - 1] == b[j - 1]:
                dp[j] = prev + 1
            else:
                dp[j] = max(dp[j], dp[j - 1])
            prev = cur
    return dp[m]


def lcs_table_cells(m: int, n: int) -> int:
    """Cells in the full (m+1) x (n+1) DP table; time grows with this figure."""
    return (m + 1) * (n + 1)
