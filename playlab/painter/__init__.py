"""Turtle-style painter drawing onto an image, with a set of built-in figures."""