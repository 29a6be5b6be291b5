"""
Pipeline stages for the FriendlyEats populator.

- Fabricator: builds the in-memory sample dataset
- Loader: writes the dataset in a single atomic batch
"""
