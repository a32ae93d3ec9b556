"""Colour conversion, word splitting and off-screen 32-bit images."""