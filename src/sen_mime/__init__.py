"""MIME Import Manipulation & Export."""
