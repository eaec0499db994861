"""PDF Toolbox: page-range extraction, merging and previews of PDF documents."""

__version__ = "0.1.0"
