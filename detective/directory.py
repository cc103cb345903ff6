from dataclasses import dataclass
from typing import Optional

from detective.errors import allocate

BUCKET_COUNT = 101  # prime, spreads djb2 values
DJB2_SEED = 5381
_WORD_MASK = (1 << 64) - 1


def djb2(key):
    """Classic djb2 over the UTF-8 bytes of key, wrapped to an unsigned 64-bit word."""
    h = DJB2_SEED
    for byte in key.encode("utf-8"):
        h = (h * 33 + byte) & _WORD_MASK
    return h


@dataclass
class DirectoryEntry:
    clue_key: str
    suspect_name: str
    next: Optional["DirectoryEntry"] = None


class SuspectDirectory:
    def __init__(self, bucket_count=BUCKET_COUNT):
        """
        The SUSPECT DIRECTORY. Maps clue text to the suspect it implicates.
        Separate chaining over a fixed number of buckets; built once, never resized.
        """
        self.bucket_count = bucket_count
        self.buckets = [None] * bucket_count
        self._size = 0

    @classmethod
    def from_pairs(cls, pairs, bucket_count=BUCKET_COUNT):
        directory = cls(bucket_count)
        for clue_key, suspect_name in pairs:
            directory.insert(clue_key, suspect_name)
        return directory

    def bucket_index(self, clue_key):
        return djb2(clue_key) % self.bucket_count

    def insert(self, clue_key, suspect_name):
        """Prepends to the bucket chain. No duplicate check: a re-inserted key shadows the old one."""
        index = self.bucket_index(clue_key)
        self.buckets[index] = allocate(
            DirectoryEntry, "suspect directory entry",
            clue_key, suspect_name, self.buckets[index],
        )
        self._size += 1

    def lookup(self, clue_key):
        """Returns the suspect for clue_key, or None when no entry matches."""
        entry = self.buckets[self.bucket_index(clue_key)]
        while entry is not None:
            if entry.clue_key == clue_key:
                return entry.suspect_name
            entry = entry.next
        return None

    def chain(self, index):
        """(key, suspect) pairs stored in one bucket, head first."""
        pairs = []
        entry = self.buckets[index]
        while entry is not None:
            pairs.append((entry.clue_key, entry.suspect_name))
            entry = entry.next
        return pairs

    def __len__(self):
        return self._size
