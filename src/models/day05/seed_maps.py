# -*- coding: utf-8 -*-
"""
Day 05: If you give a seed a fertilizer
=======================================

An almanac chains remapping tables (seed -> soil -> fertilizer -> ... ->
location). Each table entry "dest src length" translates the inclusive
interval [src, src + length - 1] by the offset dest - src; values covered by
no entry map to themselves. Tables are applied in file order.

1. Lowest location of any listed seed;
2. The seed line now lists (start, length) ranges. Lowest location of any
   seed in any range.

Part 2 is solved by brute force: the ranges are cut into disjoint chunks, a
fixed-size process pool pushes each chunk through the tables (vectorised
binary search with np.searchsorted) and returns its minimum, and the chunk
minima are reduced with min.

lowest_location_by_ranges gives the same answer by pushing whole intervals
through the tables, splitting them at entry boundaries.
"""

import bisect
import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from configs.config import seed_search
from src.data.loaders import load_text, split_blocks
from src.utils.preprocessing import parse_ints, strip_label

logger = logging.getLogger(__name__)

DAY = 5

Interval = Tuple[int, int]  # inclusive bounds


# =============================================================================
# Remapping tables
# =============================================================================

@dataclass(frozen=True, order=True)
class MapEntry:
    """Inclusive source interval [start, end] translated to destination_start"""
    start: int
    end: int
    destination_start: int

    @property
    def offset(self) -> int:
        return self.destination_start - self.start

    @classmethod
    def from_line(cls, line: str) -> 'MapEntry':
        """Parse "dest_start src_start length" """
        parts = line.split()
        if len(parts) != 3:
            raise ValueError(f"Map entry needs 3 numbers: {line!r}")
        destination_start, start, length = (int(p) for p in parts)
        if length <= 0:
            raise ValueError(f"Map entry with non-positive length: {line!r}")
        return cls(start=start, end=start + length - 1, destination_start=destination_start)


class AlmanacMap:
    """
    One remapping table, entries sorted by source start

    Lookups binary search the sorted starts: bisect for a single value,
    np.searchsorted for an array of values.
    """

    def __init__(self, name: str, entries: Sequence[MapEntry]):
        self.name = name
        self.entries: List[MapEntry] = sorted(entries)
        self._start_list = [e.start for e in self.entries]
        self._starts = np.array(self._start_list, dtype=np.int64)
        self._ends = np.array([e.end for e in self.entries], dtype=np.int64)
        self._offsets = np.array([e.offset for e in self.entries], dtype=np.int64)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"AlmanacMap({self.name!r}, {len(self.entries)} entries)"

    def lookup(self, value: int) -> int:
        """Translate a single value"""
        idx = bisect.bisect_right(self._start_list, value) - 1
        if idx >= 0 and value <= self.entries[idx].end:
            return value + self.entries[idx].offset
        return value

    def remap(self, values: np.ndarray) -> np.ndarray:
        """
        Translate an array of values

        Args:
            values: int64 array

        Returns:
            New int64 array of translated values
        """
        result = np.array(values, dtype=np.int64, copy=True)
        if not self.entries:
            return result

        idx = np.searchsorted(self._starts, result, side='right') - 1
        safe_idx = np.clip(idx, 0, None)
        hit = (idx >= 0) & (result <= self._ends[safe_idx])
        result[hit] += self._offsets[safe_idx[hit]]
        return result

    def remap_intervals(self, intervals: Sequence[Interval]) -> List[Interval]:
        """
        Translate inclusive intervals, splitting them at entry boundaries

        Args:
            intervals: (low, high) pairs

        Returns:
            Translated intervals, unordered
        """
        result: List[Interval] = []
        for low, high in intervals:
            current = low
            for entry in self.entries:
                if entry.end < current:
                    continue
                if entry.start > high:
                    break
                if entry.start > current:
                    # gap before the entry maps to itself
                    result.append((current, entry.start - 1))
                    current = entry.start
                segment_end = min(high, entry.end)
                result.append((current + entry.offset, segment_end + entry.offset))
                current = segment_end + 1
                if current > high:
                    break
            if current <= high:
                result.append((current, high))
        return result


# =============================================================================
# Parsing
# =============================================================================

def parse_almanac(text: str) -> Tuple[List[int], List[AlmanacMap]]:
    """
    Parse the seed line and the remapping tables

    Args:
        text: puzzle input, blocks separated by blank lines

    Returns:
        (seeds, maps) with maps in order of appearance

    Raises:
        ValueError: on a missing seed line or malformed table
    """
    blocks = split_blocks(text)
    if not blocks:
        raise ValueError("Empty almanac")

    seeds = parse_ints(strip_label(blocks[0], 'seeds:'))

    maps = []
    for block in blocks[1:]:
        header, *lines = block.splitlines()
        if not header.endswith('map:'):
            raise ValueError(f"Expected a map header, got: {header!r}")
        name = header[:-len('map:')].strip()
        maps.append(AlmanacMap(name, [MapEntry.from_line(line) for line in lines if line.strip()]))

    logger.debug(f"Almanac: {len(seeds)} seeds, maps {[m.name for m in maps]}")
    return seeds, maps


# =============================================================================
# Part 1
# =============================================================================

def location_of(seed: int, maps: Sequence[AlmanacMap]) -> int:
    value = seed
    for almanac_map in maps:
        value = almanac_map.lookup(value)
    return value


def locations(values: np.ndarray, maps: Sequence[AlmanacMap]) -> np.ndarray:
    """Vectorised location of every value"""
    for almanac_map in maps:
        values = almanac_map.remap(values)
    return values


def lowest_location(seeds: Sequence[int], maps: Sequence[AlmanacMap]) -> int:
    """Lowest location among individual seeds"""
    if not seeds:
        raise ValueError("No seeds listed")
    return min(location_of(seed, maps) for seed in seeds)


# =============================================================================
# Part 2: brute-force map-reduce over seed ranges
# =============================================================================

def seed_ranges(seeds: Sequence[int]) -> List[Interval]:
    """
    Reinterpret the seed line as (start, length) pairs

    Returns:
        Inclusive intervals; zero-length ranges are dropped

    Raises:
        ValueError: if the seed line has an odd count of numbers
    """
    if len(seeds) % 2 != 0:
        raise ValueError(f"Seed ranges need pairs of numbers, got {len(seeds)} values")
    return [(start, start + length - 1)
            for start, length in zip(seeds[0::2], seeds[1::2]) if length > 0]


def iter_chunks(intervals: Sequence[Interval], chunk_size: int) -> Iterator[Interval]:
    """Cut inclusive intervals into disjoint chunks of at most chunk_size values"""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive: {chunk_size}")
    for low, high in intervals:
        for chunk_low in range(low, high + 1, chunk_size):
            yield chunk_low, min(chunk_low + chunk_size - 1, high)


# tables shared by the calls in one worker process
_worker_maps: List[AlmanacMap] = []


def _init_worker(maps: List[AlmanacMap]) -> None:
    global _worker_maps
    _worker_maps = maps


def chunk_minimum(chunk: Interval, maps: Optional[Sequence[AlmanacMap]] = None) -> int:
    """Lowest location of the seeds in one inclusive chunk"""
    low, high = chunk
    tables = _worker_maps if maps is None else maps
    values = np.arange(low, high + 1, dtype=np.int64)
    return int(locations(values, tables).min())


def lowest_location_parallel(seeds: Sequence[int], maps: Sequence[AlmanacMap],
                             workers: Optional[int] = None,
                             chunk_size: Optional[int] = None) -> int:
    """
    Lowest location over all seed ranges, brute force on a process pool

    Args:
        seeds: raw seed line values, read as (start, length) pairs
        maps: remapping tables
        workers: pool size (default SeedSearchConfig.WORKERS); 1 runs inline
        chunk_size: seeds per task (default SeedSearchConfig.CHUNK_SIZE)

    Returns:
        Minimum location
    """
    workers = workers or seed_search.WORKERS
    chunk_size = chunk_size or seed_search.CHUNK_SIZE

    intervals = seed_ranges(seeds)
    if not intervals:
        raise ValueError("No seed ranges listed")
    total = sum(high - low + 1 for low, high in intervals)
    logger.info(f"Seed search: {total:,} seeds in {len(intervals)} ranges, "
                f"{workers} workers, chunk size {chunk_size:,}")

    start_time = datetime.now()
    chunks = iter_chunks(intervals, chunk_size)
    if workers == 1:
        result = min(chunk_minimum(chunk, maps) for chunk in chunks)
    else:
        with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                 initargs=(list(maps),)) as executor:
            result = min(executor.map(chunk_minimum, chunks))
    duration = (datetime.now() - start_time).total_seconds()

    logger.info(f"Seed search finished in {duration:.2f}s")
    return result


def lowest_location_by_ranges(seeds: Sequence[int], maps: Sequence[AlmanacMap]) -> int:
    """Lowest location over all seed ranges, by interval splitting"""
    intervals = seed_ranges(seeds)
    if not intervals:
        raise ValueError("No seed ranges listed")
    for almanac_map in maps:
        intervals = almanac_map.remap_intervals(intervals)
    return min(low for low, _ in intervals)


def main(input_path: Optional[str] = None) -> Dict[str, int]:
    """Solve both parts of day 05"""
    seeds, maps = parse_almanac(load_text(DAY, input_path))

    part1 = lowest_location(seeds, maps)
    print(f"Part 1: Lowest location number: {part1}")

    part2 = lowest_location_parallel(seeds, maps)
    print(f"Part 2: Lowest location number: {part2}")

    return {'part1': part1, 'part2': part2}


if __name__ == '__main__':
    main()
