"""Formatter — вставка разделителя групп разрядов.

Группы отсчитываются от младшего разряда: [1, 0, 0, 0] -> "1,000".
Ведущие нули, если они не были удалены, участвуют в группировке ("0,100").
"""

from typing import Sequence, TypeVar

T = TypeVar("T")


def group(digits: Sequence[T], separator: str, group_size: int) -> list[T | str]:
    """
    Разделитель между группами по group_size цифр, считая справа.

    Args:
        digits: символы или индексы цифр, старший разряд первым
        separator: разделитель групп
        group_size: цифр в группе (>= 1)

    Returns:
        Новый список без ведущего и хвостового разделителя

    Examples:
        >>> "".join(group(list("1000"), ",", 3))
        '1,000'
        >>> "".join(group(list("1234567"), " ", 3))
        '1 234 567'
    """
    if group_size < 1:
        raise ValueError(f"group_size must be >= 1, got {group_size}")

    reversed_digits = list(reversed(digits))
    result: list[T | str] = []

    for start in range(0, len(reversed_digits), group_size):
        if result:
            result.append(separator)
        result.extend(reversed_digits[start:start + group_size])

    result.reverse()
    return result
