"""judging-canvas -- turn a directory of Sherlock judging issues into an Obsidian canvas."""

__version__ = "0.1.0"
