from typing import List, Optional, Sequence

from .errors import SaltError


def consistent_shuffle(
    collection_to_shuffle: List[int],
    salt_part_1: Sequence[int],
    salt_part_2: Optional[Sequence[int]],
    max_salt_length: int,
) -> List[int]:
    """
    Deterministically permute ``collection_to_shuffle`` in place and return it.

    The salt is read as one cycle of ``max_salt_length`` values: ``salt_part_1``
    first, then ``salt_part_2`` once the cycle index passes the end of part 1.
    Identical arguments always produce the identical permutation.
    """
    salt_part_1_length = len(salt_part_1)
    if salt_part_1_length < max_salt_length and salt_part_2 is None:
        raise SaltError("Salt is too short in shuffle")

    if not collection_to_shuffle or max_salt_length == 0 or not salt_part_1:
        return collection_to_shuffle

    idx = 0
    running_total = 0
    for i in range(len(collection_to_shuffle) - 1, 0, -1):
        if idx >= salt_part_1_length:
            salt_value = salt_part_2[idx - salt_part_1_length]
        else:
            salt_value = salt_part_1[idx]
        running_total += salt_value
        j = (salt_value + idx + running_total) % i

        collection_to_shuffle[i], collection_to_shuffle[j] = collection_to_shuffle[j], collection_to_shuffle[i]

        idx = (idx + 1) % max_salt_length

    return collection_to_shuffle
