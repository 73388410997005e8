"""A terminal tile-laying board game engine: tile model, tile bag, layout tree and text renderer."""

__version__ = "0.1.0"