"""Greedy graph colouring, maximum flow (greedy, Ford-Fulkerson, Edmonds-Karp, Dinic) and the Hungarian method, with step-by-step reports."""

__version__ = "0.1.0"