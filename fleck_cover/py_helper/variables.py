"""Shared path names, relative to the fleck_cover package directory."""

CONFIG = "config.toml"
OUTPUT = "output"
