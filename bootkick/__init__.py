"""Game model for a conveyor-belt logic puzzle: pins, an SR flip-flop, products, sensors, Sparty, score and timer."""

__version__ = "0.1.0"