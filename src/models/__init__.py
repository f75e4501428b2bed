# -*- coding: utf-8 -*-
"""
Puzzle solutions
================
One package per puzzle day, each exposing main(input_path=None)

- day01: trebuchet calibration (first/last digit, spelled digits)
- day02: cube conundrum (per-game colour maxima)
- day03: gear ratios (symbol adjacency on a padded grid)
- day04: scratchcards (set intersection, card pile)
- day05: seed almanac (interval remapping, parallel brute force)
- day06: boat races (closed-form quadratic root count)
- day07: camel cards (hand ranking with jokers)
- day08: haunted wasteland (cycle lengths and LCM)
- day09: mirage maintenance (finite-difference extrapolation)
- day10: pipe maze (loop walk, enclosed area)
"""
