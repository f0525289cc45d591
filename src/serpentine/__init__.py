"""Serpentine - Tangent-hull path geometry for circle-threaded outlines.

Serpentine computes the smooth outline ("stadium" or racetrack path) that
threads an ordered sequence of circles using outer tangent lines and
connecting arcs, optionally duplicating circles under an N-fold radial
mirror symmetry. It also provides the symmetry-axis solver used to snap
drag vectors to the mirror's natural axes.

Example:
    $ serpentine hull scene.json --closed

This prints every segment of the closed hull with its length.
"""

__version__ = "0.1.0"
__author__ = "Serpentine Contributors"

__all__ = ["__author__", "__version__"]
