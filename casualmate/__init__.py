"""Casual-play chess opponent: static evaluation plus fixed-depth alpha-beta search."""
