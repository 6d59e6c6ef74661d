"""Broad phase collision detection: brute force and sweep and prune."""