# -*- coding: utf-8 -*-
"""
Day 10: Pipe maze
=================
Loop walk, farthest distance and enclosed area
"""

from .pipe_maze import main, PipeMaze, farthest_distance, enclosed_tiles
