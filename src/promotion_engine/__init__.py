"""Pluggable promotion rules that price a shopping cart."""
