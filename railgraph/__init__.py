"""Top-level package for the rail graph query tool.

This package builds a directed, weighted graph of stations from a
textual edge list and answers route queries over it: fixed-route
distances, circular and exact-stop route counts, shortest routes and
distance-bounded route counts.
"""
