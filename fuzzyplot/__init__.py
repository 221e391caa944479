"""fuzzyplot — Render "fuzzy" graphs of equations as raster images.

Every pixel is coloured by how close the two sides of an equation are at
that point, rather than by an exact in/out test. Up to three equations can
be drawn at once, each darkening its own pair of colour channels.

Usage:
    python -m fuzzyplot "y=x^2"                     # red parabola in graph.png
    python -m fuzzyplot "r=t" -t 0 3 -o spiral.png  # polar, four turns
    python -m fuzzyplot "y=x" "y=-x" -z 1           # two equations, zoomed in

Requires: pip install numpy Pillow sympy tqdm
"""

__version__ = "0.3.0"
