"""Longest common subsequence of two strings."""


def lcs(a: str, b: str) -> str:
    """Return the longest common subsequence of ``a`` and ``b``."""
    # table[i][j] is the LCS length of a[:i] and b[:j].
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, ca in enumerate(a):
        row, next_row = table[i], table[i + 1]
        for j, cb in enumerate(b):
            next_row[j + 1] = row[j] + 1 if ca == cb else max(row[j + 1], next_row[j])

    result = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(result))