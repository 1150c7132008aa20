"""ESG term crawler — seed-site link discovery and term-incidence counting."""

__version__ = "0.1.0"
