"""
Descriptor generators: declaration ingestion, property and relation
compilation, and the aggregate root.
"""
