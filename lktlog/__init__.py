"""LKT logbook crawler: laboratory logbook spreadsheets to RDF."""

__version__ = "0.1.0"
