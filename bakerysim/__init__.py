"""Threaded bakery simulation: supply chain, chefs, bakers, sellers, customers, a manager and a text dashboard."""

__version__ = "0.1.0"