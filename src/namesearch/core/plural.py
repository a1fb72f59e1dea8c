"""Plural form selection for counted nouns."""


def plural_form(count: int, one: str, few: str, many: str) -> str:
    """
    Pick the noun form that agrees with ``count`` under East Slavic counting rules.

    ``one`` is used for 1, 21, 31, ..., ``few`` for 2-4, 22-24, ..., and
    ``many`` for everything else, including 0, 5-20 and 111-114. Negative
    counts use their absolute value.

    Example:
        >>> plural_form(21, "совпадение", "совпадения", "совпадений")
        'совпадение'
        >>> plural_form(12, "совпадение", "совпадения", "совпадений")
        'совпадений'
    """
    n = abs(count) % 100
    if 5 <= n <= 20:
        return many
    n %= 10
    if n == 1:
        return one
    if 2 <= n <= 4:
        return few
    return many
