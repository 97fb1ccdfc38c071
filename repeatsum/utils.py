# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Iterator

def check_pos(msg: str, value: int | float):
    if value <= 0:
        raise ValueError(f"{msg} must be above zero, got {value}")

def check_non_neg(msg: str, value: int | float):
    if value < 0:
        raise ValueError(f"{msg} must be non-negative, got {value}")

def check_power_of_ten(msg: str, value: int):
    check_pos(msg, value)
    tmp = value
    while tmp % 10 == 0:
        tmp //= 10
    if tmp != 1 or value < 10:
        raise ValueError(f"{msg} must be a power of ten of at least 10, got {value}")

def digit_count(num: int) -> int:
    """Smallest d with 10**d > num, i.e. the number of decimal digits of num (0 for 0)."""
    check_non_neg("Number", num)
    count = 0
    bound = 1
    while bound <= num:
        bound *= 10
        count += 1
    return count

def strict_divisors(num: int) -> Iterator[int]:
    """Divisors of num which are smaller than num, in increasing order."""
    check_pos("Number", num)
    for div in range(1, num // 2 + 1):
        if num % div == 0:
            yield div
