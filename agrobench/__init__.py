"""Agricultural sample records in several data structures, with a modelled memory benchmark."""

__version__ = "0.1.0"