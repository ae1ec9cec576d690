"""
Core Package

Immutable models (Photo, Slide, Slideshow), tag set utilities and the
interest scorer shared by the builder, loader and writer.
"""
