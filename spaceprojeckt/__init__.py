"""A small arcade space shooter and the actor/world engine it runs on."""

__version__ = "1.0.0"