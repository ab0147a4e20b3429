"""Small command-line exercises: Mandelbrot membership, shortest paths, maximum subarrays, signal messaging and a text phonebook."""

__version__ = "0.1.0"