from typing import Sequence, Tuple, List, TypeVar

T = TypeVar("T")


def partition(workers: Sequence[T]) -> Tuple[List[T], List[T]]:
    """
    Разбить состав на две группы по порядку следования

    Первые ceil(n/2) работников получают двойную смену (утро + вечер),
    остальные одинарную (день). Разбиение детерминировано.
    """
    split_at = (len(workers) + 1) // 2
    return list(workers[:split_at]), list(workers[split_at:])
