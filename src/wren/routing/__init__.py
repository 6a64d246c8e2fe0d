"""Routing — per-level route tables and the routers that resolve against them.

Route tables are compiled once per route tuple; a router is created per
nesting level on every navigation and builds that level's context.
"""
