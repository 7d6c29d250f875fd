"""Quadimg -- quadtree encoder/decoder for binary raster images.

Builds compressed quadtrees from black/white pixel grids, transforms them
structurally (quarter-turn rotations, colour inversion), measures them
(leaf count, internal node count, shortest and longest branch) and paints
them back into pixel grids. Images travel in the plain ASCII ``P1``
bitmap format.
"""
