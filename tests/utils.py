import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#backends.append(api.array_namespace(tr.zeros(1)))

def is_repeated_block(num: int, max_count: int | None = None) -> bool:
    text = str(num)
    for width in range(1, len(text) // 2 + 1):
        count = len(text) // width
        if len(text) % width != 0:
            continue
        if max_count is not None and count > max_count:
            continue
        if text[:width] * count == text:
            return True
    return False

def brute_force_sum(start: int, end: int, max_count: int | None = None) -> int:
    return sum(num for num in range(start, end + 1) if is_repeated_block(num, max_count))
